"""Tests for the album endpoints."""


def _album_count(db_path):
    import sqlite3

    conn = sqlite3.connect(db_path)
    try:
        return conn.execute("SELECT COUNT(*) FROM Album").fetchone()[0]
    finally:
        conn.close()


def test_list_albums_joins_artist_name(client):
    response = client.get("/albums")
    assert response.status_code == 200
    assert response.json() == [
        {"Name": "AC/DC", "AlbumId": 1, "Title": "For Those About To Rock We Salute You"},
        {"Name": "Accept", "AlbumId": 2, "Title": "Balls to the Wall"},
        {"Name": "Accept", "AlbumId": 3, "Title": "Restless and Wild"},
    ]


def test_list_albums_is_repeatable(client):
    assert client.get("/albums").json() == client.get("/albums").json()


def test_create_album(client):
    response = client.post("/albums", json={"title": "Permanent Vacation", "artist_id": 3})
    assert response.status_code == 200
    album_id = response.json()["insertId"]
    assert {"Name": "Aerosmith", "AlbumId": album_id, "Title": "Permanent Vacation"} in client.get("/albums").json()


def test_create_album_for_missing_artist_is_rejected(client, db_path):
    response = client.post("/albums", json={"title": "X", "artist_id": 999999})
    assert response.status_code == 400
    assert response.json() == {"error": "The artist with the given artist_id is not found"}
    assert _album_count(db_path) == 3


def test_update_album(client):
    response = client.put("/albums/3", json={"title": "Restless & Wild", "artist_id": 3})
    assert response.status_code == 200
    assert response.json() == {"affectedRows": 1, "changedRows": 1}
    assert {"Name": "Aerosmith", "AlbumId": 3, "Title": "Restless & Wild"} in client.get("/albums").json()


def test_update_missing_album_is_rejected(client):
    response = client.put("/albums/999", json={"title": "X", "artist_id": 1})
    assert response.status_code == 400
    assert response.json() == {"error": "Unable to find album with the provided album id"}


def test_update_album_with_missing_artist_is_rejected(client):
    before = client.get("/albums").json()
    response = client.put("/albums/2", json={"title": "X", "artist_id": 999999})
    assert response.status_code == 400
    assert response.json() == {"error": "The artist with the given artist_id is not found"}
    assert client.get("/albums").json() == before


def test_missing_album_is_reported_before_missing_artist(client):
    response = client.put("/albums/999", json={"title": "X", "artist_id": 999999})
    assert response.json() == {"error": "Unable to find album with the provided album id"}
