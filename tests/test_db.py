"""Tests for the catalog store: binding, inserts and transactions."""

import pytest

from music_catalog_api.app.core.db import get_connection, placeholders
from music_catalog_api.app.core.errors import StoreFault


def test_placeholders():
    assert placeholders(0) == ""
    assert placeholders(3) == "?, ?, ?"


def test_insert_returns_store_assigned_id(store):
    new_id = store.insert("INSERT INTO Artist (Name) VALUES (?)", ("Taylor Swift",))
    assert new_id == 4
    assert store.fetch_one("SELECT Name FROM Artist WHERE ArtistId = ?", (new_id,)) == {"Name": "Taylor Swift"}


def test_bound_values_are_not_interpreted_as_sql(store):
    name = 'x"); DROP TABLE Artist; --'
    new_id = store.insert("INSERT INTO Artist (Name) VALUES (?)", (name,))
    assert store.fetch_one("SELECT Name FROM Artist WHERE ArtistId = ?", (new_id,))["Name"] == name
    assert len(store.fetch_all("SELECT * FROM Artist")) == 4


def test_statement_error_becomes_store_fault(store):
    with pytest.raises(StoreFault):
        store.fetch_all("SELECT * FROM NoSuchTable")


def test_transaction_commits(store, db_path):
    with store.transaction():
        store.insert("INSERT INTO Playlist (Name) VALUES (?)", ("Road Trip",))

    other = get_connection(db_path)
    try:
        assert other.execute("SELECT COUNT(*) FROM Playlist").fetchone()[0] == 3
    finally:
        other.close()


def test_transaction_rolls_back_on_error(store):
    with pytest.raises(RuntimeError):
        with store.transaction():
            store.insert("INSERT INTO Playlist (Name) VALUES (?)", ("Road Trip",))
            raise RuntimeError("boom")
    assert len(store.fetch_all("SELECT * FROM Playlist")) == 2


def test_nested_transaction_joins_outer(store):
    with pytest.raises(RuntimeError):
        with store.transaction():
            with store.transaction():
                store.insert("INSERT INTO Playlist (Name) VALUES (?)", ("Inner",))
            raise RuntimeError("boom")
    assert store.fetch_one("SELECT * FROM Playlist WHERE Name = ?", ("Inner",)) is None
