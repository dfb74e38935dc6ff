"""
Business logic for albums.

Every album write first checks that the referenced artist exists.
The check and the write share one transaction, so an artist cannot
disappear between them and nothing is written when a check fails.
"""

import logging
from typing import List

from music_catalog_api.app.core.db import CatalogStore
from music_catalog_api.app.schemas.album import AlbumCreate, AlbumRead, AlbumUpdate
from music_catalog_api.app.schemas.common import InsertResult, UpdateResult
from music_catalog_api.app.services.reference_validator import ReferenceValidator

ARTIST_NOT_FOUND = "The artist with the given artist_id is not found"
ALBUM_NOT_FOUND = "Unable to find album with the provided album id"


class AlbumService:
    """Сервис для управления альбомами."""

    @classmethod
    async def list_albums(cls, store: CatalogStore) -> List[AlbumRead]:
        """Return every album together with its artist's name."""
        rows = store.fetch_all(
            """
            SELECT Artist.Name, Album.AlbumId, Album.Title
            FROM Album JOIN Artist ON Album.ArtistId = Artist.ArtistId
            ORDER BY Album.AlbumId
            """
        )
        return [AlbumRead(**row) for row in rows]

    @classmethod
    async def create_album(cls, store: CatalogStore, data: AlbumCreate) -> InsertResult:
        """Insert an album for an existing artist.

        Raises ``ReferenceNotFound`` if ``data.artist_id`` does not
        resolve; no album row is created in that case.
        """
        logger = logging.getLogger(__name__)
        with store.transaction():
            ReferenceValidator(store).require("artist", data.artist_id, ARTIST_NOT_FOUND)
            album_id = store.insert(
                "INSERT INTO Album (Title, ArtistId) VALUES (?, ?)",
                (data.title, data.artist_id),
            )
        logger.info("Created album %s for artist %s", album_id, data.artist_id)
        return InsertResult(insert_id=album_id)

    @classmethod
    async def update_album(cls, store: CatalogStore, album_id: int, data: AlbumUpdate) -> UpdateResult:
        """Replace an album's title and artist.

        The album is checked first, then the new artist.  Either
        missing reference raises ``ReferenceNotFound`` with its own
        message and leaves the album unchanged.
        """
        logger = logging.getLogger(__name__)
        validator = ReferenceValidator(store)
        with store.transaction():
            current = validator.require("album", album_id, ALBUM_NOT_FOUND)
            validator.require("artist", data.artist_id, ARTIST_NOT_FOUND)
            affected = store.execute(
                "UPDATE Album SET Title = ?, ArtistId = ? WHERE AlbumId = ?",
                (data.title, data.artist_id, album_id),
            )
        changed = int(
            affected > 0
            and (current["Title"], current["ArtistId"]) != (data.title, data.artist_id)
        )
        logger.info("Updated album %s", album_id)
        return UpdateResult(affected_rows=affected, changed_rows=changed)
