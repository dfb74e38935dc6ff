"""
SQLite catalog store and schema bootstrap.

This module provides the data access layer used by every service:

* ``CatalogStore`` wraps a single connection and executes
  parameterized statements.  Every value that originates from a
  request is passed as a bound parameter; statement text is never
  assembled from request data.
* ``get_store`` is a FastAPI dependency that opens one store per
  request and closes it when the response has been produced, so no
  cursor or transaction state is shared between requests.
* ``init_db`` creates the catalog tables if they do not exist yet.

To switch to another DBMS you would replace the connection logic and
adapt the placeholder style accordingly.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Optional, Sequence

from .config import settings
from .errors import StoreFault

logger = logging.getLogger(__name__)


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    ``:memory:`` and absolute paths are used as is; anything else is
    resolved relative to the project root.
    """
    db_url = settings.database_url
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection(path: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` objects keyed by column name.
    The connection runs in autocommit mode (``isolation_level=None``);
    multi-statement writes open their own transaction through
    ``CatalogStore.transaction``.  ``check_same_thread`` is disabled
    because FastAPI may resolve a dependency and run the endpoint on
    different threads; a connection is still only used by one request.
    """
    conn = sqlite3.connect(
        path or get_database_path(),
        isolation_level=None,
        check_same_thread=False,
    )
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def placeholders(count: int) -> str:
    """Return ``count`` comma separated ``?`` markers for an ``IN`` list."""
    return ", ".join("?" for _ in range(count))


class CatalogStore:
    """Statement executor over one catalog connection."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn
        self._in_transaction = False

    def _run(self, statement: str, params: Sequence[Any]) -> sqlite3.Cursor:
        try:
            return self.conn.execute(statement, tuple(params))
        except sqlite3.Error as exc:
            logger.error("Statement failed: %s", exc)
            raise StoreFault(str(exc)) from exc

    def fetch_all(self, statement: str, params: Sequence[Any] = ()) -> list[dict]:
        """Execute a read and return every row as a plain dict."""
        return [dict(row) for row in self._run(statement, params).fetchall()]

    def fetch_one(self, statement: str, params: Sequence[Any] = ()) -> Optional[dict]:
        row = self._run(statement, params).fetchone()
        return dict(row) if row is not None else None

    def execute(self, statement: str, params: Sequence[Any] = ()) -> int:
        """Execute a write and return the number of affected rows."""
        return self._run(statement, params).rowcount

    def insert(self, statement: str, params: Sequence[Any] = ()) -> int:
        """Execute an ``INSERT`` and return the store-assigned identifier."""
        return self._run(statement, params).lastrowid

    @contextmanager
    def transaction(self) -> Iterator["CatalogStore"]:
        """Run the enclosed statements atomically.

        The transaction is committed when the block exits normally and
        rolled back when it raises, whatever the exception type.  The
        exception is re-raised after the rollback.  Nested use joins the
        outer transaction.
        """
        if self._in_transaction:
            yield self
            return
        self._run("BEGIN IMMEDIATE", ())
        self._in_transaction = True
        try:
            yield self
        except BaseException:
            self.conn.rollback()
            logger.debug("Transaction rolled back")
            raise
        else:
            try:
                self.conn.commit()
            except sqlite3.Error as exc:
                raise StoreFault(str(exc)) from exc
        finally:
            self._in_transaction = False

    def close(self) -> None:
        self.conn.close()


def get_store() -> Iterator[CatalogStore]:
    """FastAPI dependency yielding a per-request ``CatalogStore``."""
    store = CatalogStore(get_connection())
    try:
        yield store
    finally:
        store.close()


SCHEMA = """
CREATE TABLE IF NOT EXISTS Artist (
    ArtistId INTEGER PRIMARY KEY AUTOINCREMENT,
    Name NVARCHAR(120)
);

CREATE TABLE IF NOT EXISTS Album (
    AlbumId INTEGER PRIMARY KEY AUTOINCREMENT,
    Title NVARCHAR(160) NOT NULL,
    ArtistId INTEGER NOT NULL,
    FOREIGN KEY(ArtistId) REFERENCES Artist(ArtistId)
);

CREATE TABLE IF NOT EXISTS Genre (
    GenreId INTEGER PRIMARY KEY AUTOINCREMENT,
    Name NVARCHAR(120)
);

CREATE TABLE IF NOT EXISTS MediaType (
    MediaTypeId INTEGER PRIMARY KEY AUTOINCREMENT,
    Name NVARCHAR(120)
);

CREATE TABLE IF NOT EXISTS Track (
    TrackId INTEGER PRIMARY KEY AUTOINCREMENT,
    Name NVARCHAR(200) NOT NULL,
    AlbumId INTEGER,
    MediaTypeId INTEGER,
    GenreId INTEGER,
    Composer NVARCHAR(220),
    Milliseconds INTEGER,
    Bytes INTEGER,
    UnitPrice NUMERIC(10, 2),
    FOREIGN KEY(AlbumId) REFERENCES Album(AlbumId),
    FOREIGN KEY(MediaTypeId) REFERENCES MediaType(MediaTypeId),
    FOREIGN KEY(GenreId) REFERENCES Genre(GenreId)
);

CREATE TABLE IF NOT EXISTS Playlist (
    PlaylistId INTEGER PRIMARY KEY AUTOINCREMENT,
    Name NVARCHAR(120)
);

CREATE TABLE IF NOT EXISTS PlaylistTrack (
    PlaylistId INTEGER NOT NULL,
    TrackId INTEGER NOT NULL,
    PRIMARY KEY (PlaylistId, TrackId),
    FOREIGN KEY(PlaylistId) REFERENCES Playlist(PlaylistId),
    FOREIGN KEY(TrackId) REFERENCES Track(TrackId)
);

CREATE TABLE IF NOT EXISTS Employee (
    EmployeeId INTEGER PRIMARY KEY AUTOINCREMENT,
    LastName NVARCHAR(20) NOT NULL,
    FirstName NVARCHAR(20) NOT NULL,
    Title NVARCHAR(30),
    ReportsTo INTEGER,
    BirthDate DATETIME,
    HireDate DATETIME,
    Address NVARCHAR(70),
    City NVARCHAR(40),
    State NVARCHAR(40),
    Country NVARCHAR(40),
    PostalCode NVARCHAR(10),
    Phone NVARCHAR(24),
    Fax NVARCHAR(24),
    Email NVARCHAR(60),
    FOREIGN KEY(ReportsTo) REFERENCES Employee(EmployeeId)
);

CREATE INDEX IF NOT EXISTS idx_album_artist_id ON Album(ArtistId);
CREATE INDEX IF NOT EXISTS idx_track_album_id ON Track(AlbumId);
CREATE INDEX IF NOT EXISTS idx_playlist_track_track_id ON PlaylistTrack(TrackId);
"""


def init_db(path: Optional[str] = None) -> None:
    """Create the catalog tables if they do not exist.

    Existing tables and data are left untouched; this only bootstraps
    an empty database file so the service can start against it.
    """
    conn = get_connection(path)
    try:
        conn.executescript(SCHEMA)
        logger.info("Catalog schema ready at %s", path or get_database_path())
    finally:
        conn.close()
