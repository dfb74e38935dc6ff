"""Tests for the OpenAPI examples carried by request schemas."""

from music_catalog_api.app.schemas.album import AlbumCreate
from music_catalog_api.app.schemas.artist import ArtistCreate
from music_catalog_api.app.schemas.playlist import PlaylistCreate


def test_examples_appear_in_json_schema():
    artist = ArtistCreate.model_json_schema()
    album = AlbumCreate.model_json_schema()
    playlist = PlaylistCreate.model_json_schema()

    assert artist["properties"]["name"]["examples"] == ["Taylor Swift"]
    assert album["properties"]["artist_id"]["examples"] == [277]
    assert playlist["properties"]["tracks"]["examples"] == [[1, 2, 3]]
