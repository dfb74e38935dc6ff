"""
Business logic for artists.

Artists have no references of their own; the only rule is that an
update must address an existing artist.
"""

import logging
from typing import List

from music_catalog_api.app.core.db import CatalogStore
from music_catalog_api.app.schemas.artist import ArtistCreate, ArtistRead, ArtistUpdate
from music_catalog_api.app.schemas.common import InsertResult, UpdateResult
from music_catalog_api.app.services.reference_validator import ReferenceValidator

ARTIST_NOT_FOUND = "No artist exists with that artist id"


class ArtistService:
    """Сервис для управления исполнителями."""

    @classmethod
    async def list_artists(cls, store: CatalogStore) -> List[ArtistRead]:
        rows = store.fetch_all("SELECT ArtistId, Name FROM Artist ORDER BY ArtistId")
        return [ArtistRead(**row) for row in rows]

    @classmethod
    async def create_artist(cls, store: CatalogStore, data: ArtistCreate) -> InsertResult:
        """Insert a new artist and return its store-assigned identifier."""
        logger = logging.getLogger(__name__)
        with store.transaction():
            artist_id = store.insert("INSERT INTO Artist (Name) VALUES (?)", (data.name,))
        logger.info("Created artist %s", artist_id)
        return InsertResult(insert_id=artist_id)

    @classmethod
    async def update_artist(cls, store: CatalogStore, artist_id: int, data: ArtistUpdate) -> UpdateResult:
        """Rename an existing artist.

        Raises ``ReferenceNotFound`` if ``artist_id`` does not exist.
        """
        logger = logging.getLogger(__name__)
        with store.transaction():
            current = ReferenceValidator(store).require("artist", artist_id, ARTIST_NOT_FOUND)
            affected = store.execute(
                "UPDATE Artist SET Name = ? WHERE ArtistId = ?",
                (data.name, artist_id),
            )
        changed = int(affected > 0 and current["Name"] != data.name)
        logger.info("Updated artist %s", artist_id)
        return UpdateResult(affected_rows=affected, changed_rows=changed)
