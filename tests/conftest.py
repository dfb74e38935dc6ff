"""Shared fixtures: a seeded catalog database per test and an API client."""

import sqlite3

import pytest
from fastapi.testclient import TestClient

from music_catalog_api.app.core.config import settings
from music_catalog_api.app.core.db import CatalogStore, get_connection, get_store, init_db
from music_catalog_api.app.main import app

ARTISTS = [
    (1, "AC/DC"),
    (2, "Accept"),
    (3, "Aerosmith"),
]

ALBUMS = [
    (1, "For Those About To Rock We Salute You", 1),
    (2, "Balls to the Wall", 2),
    (3, "Restless and Wild", 2),
]

# Track 3 is deliberately absent.
TRACKS = [
    (1, "For Those About To Rock (We Salute You)", 1),
    (2, "Balls to the Wall", 2),
    (4, "Restless and Wild", 3),
    (5, "Princess of the Dawn", 3),
    (6, "Put The Finger On You", 1),
]

PLAYLISTS = [
    (1, "Music"),
    (5, "90's Music"),
]

PLAYLIST_TRACKS = [
    (1, 1),
    (1, 2),
    (5, 4),
    (5, 5),
]

EMPLOYEES = [
    (1, "Adams", "Andrew", "General Manager", None, "2002-08-14 00:00:00"),
    (2, "Edwards", "Nancy", "Sales Manager", 1, "2002-05-01 00:00:00"),
    (3, "Peacock", "Jane", "Sales Support Agent", 2, "2002-04-01 00:00:00"),
    (4, "Park", "Margaret", "Sales Support Agent", 2, "2003-05-03 00:00:00"),
    (5, "Johnson", "Steve", "Sales Support Agent", 2, "2003-10-17 00:00:00"),
    (6, "Mitchell", "Michael", "IT Manager", 1, "2003-10-17 00:00:00"),
    (7, "King", "Robert", "IT Staff", 6, "2004-01-02 00:00:00"),
    (8, "Callahan", "Laura", "IT Staff", 6, "2004-03-04 00:00:00"),
]


def seed_catalog(path: str) -> None:
    conn = sqlite3.connect(path)
    try:
        conn.executemany("INSERT INTO Artist (ArtistId, Name) VALUES (?, ?)", ARTISTS)
        conn.executemany("INSERT INTO Album (AlbumId, Title, ArtistId) VALUES (?, ?, ?)", ALBUMS)
        conn.executemany("INSERT INTO Track (TrackId, Name, AlbumId) VALUES (?, ?, ?)", TRACKS)
        conn.executemany("INSERT INTO Playlist (PlaylistId, Name) VALUES (?, ?)", PLAYLISTS)
        conn.executemany("INSERT INTO PlaylistTrack (PlaylistId, TrackId) VALUES (?, ?)", PLAYLIST_TRACKS)
        conn.executemany(
            """
            INSERT INTO Employee (EmployeeId, LastName, FirstName, Title, ReportsTo, HireDate)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            EMPLOYEES,
        )
        conn.commit()
    finally:
        conn.close()


@pytest.fixture
def db_path(tmp_path, monkeypatch) -> str:
    path = str(tmp_path / "catalog.db")
    monkeypatch.setattr(settings, "database_url", path)
    init_db(path)
    seed_catalog(path)
    return path


@pytest.fixture
def store(db_path):
    store = CatalogStore(get_connection(db_path))
    yield store
    store.close()


@pytest.fixture
def client(db_path):
    def override_store():
        store = CatalogStore(get_connection(db_path))
        try:
            yield store
        finally:
            store.close()

    app.dependency_overrides[get_store] = override_store
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def fail_on_track(db_path):
    """Install a trigger making any membership insert for the given track fail."""

    def install(track_id: int) -> None:
        conn = sqlite3.connect(db_path)
        try:
            conn.execute(
                f"""
                CREATE TRIGGER reject_track_{track_id}
                BEFORE INSERT ON PlaylistTrack
                WHEN NEW.TrackId = {int(track_id)}
                BEGIN
                    SELECT RAISE(ABORT, 'membership rejected');
                END
                """
            )
            conn.commit()
        finally:
            conn.close()

    return install
