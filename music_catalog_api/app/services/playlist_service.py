"""
Business logic for playlists.

A playlist owns its ``PlaylistTrack`` memberships.  Creating a
playlist inserts the playlist row and then one membership per
requested track; replacing a playlist renames it, deletes every
membership and inserts the new set.  There is no diffing.

Each of these sequences runs in a single transaction, after all
references have been checked inside that same transaction.  If any
statement fails the whole sequence is rolled back, so a playlist is
never left half created or half replaced.
"""

import logging
from typing import Sequence

from music_catalog_api.app.core.db import CatalogStore
from music_catalog_api.app.core.errors import EntityNotFound
from music_catalog_api.app.schemas.playlist import (
    PlaylistCreate,
    PlaylistCreated,
    PlaylistRead,
    PlaylistUpdate,
)
from music_catalog_api.app.schemas.common import MessageResult
from music_catalog_api.app.services.reference_validator import ReferenceValidator

TRACKS_NOT_FOUND_ON_CREATE = "One or more of the given Track ID does not exist"
TRACKS_NOT_FOUND_ON_UPDATE = "Not all tracks can be found"
PLAYLIST_NOT_FOUND = "Unable to find playlist"


class PlaylistService:
    """Service class for playlists and their track memberships."""

    @staticmethod
    def _insert_memberships(store: CatalogStore, playlist_id: int, tracks: Sequence[int]) -> None:
        for track_id in tracks:
            store.execute(
                "INSERT INTO PlaylistTrack (PlaylistId, TrackId) VALUES (?, ?)",
                (playlist_id, track_id),
            )

    @classmethod
    async def get_playlist(cls, store: CatalogStore, playlist_id: int) -> PlaylistRead:
        """Return a playlist with its member track ids in ascending order."""
        playlist = store.fetch_one(
            "SELECT PlaylistId, Name FROM Playlist WHERE PlaylistId = ?",
            (playlist_id,),
        )
        if playlist is None:
            raise EntityNotFound(PLAYLIST_NOT_FOUND)
        rows = store.fetch_all(
            "SELECT TrackId FROM PlaylistTrack WHERE PlaylistId = ? ORDER BY TrackId",
            (playlist_id,),
        )
        return PlaylistRead(**playlist, tracks=[row["TrackId"] for row in rows])

    @classmethod
    async def create_playlist(cls, store: CatalogStore, data: PlaylistCreate) -> PlaylistCreated:
        """Create a playlist containing ``data.tracks``.

        Raises ``IncompleteReferenceSet`` if any requested track is
        missing (or repeated); no playlist row is created in that case.
        """
        logger = logging.getLogger(__name__)
        with store.transaction():
            ReferenceValidator(store).require_all("track", data.tracks, TRACKS_NOT_FOUND_ON_CREATE)
            playlist_id = store.insert("INSERT INTO Playlist (Name) VALUES (?)", (data.name,))
            cls._insert_memberships(store, playlist_id, data.tracks)
        logger.info("Created playlist %s with %d tracks", playlist_id, len(data.tracks))
        return PlaylistCreated(playlist_id=playlist_id)

    @classmethod
    async def replace_playlist(cls, store: CatalogStore, playlist_id: int, data: PlaylistUpdate) -> MessageResult:
        """Rename a playlist and replace its whole track set.

        The playlist is checked before the tracks.  On either failure
        the playlist keeps its name and memberships.
        """
        logger = logging.getLogger(__name__)
        validator = ReferenceValidator(store)
        with store.transaction():
            validator.require("playlist", playlist_id, PLAYLIST_NOT_FOUND)
            validator.require_all("track", data.tracks, TRACKS_NOT_FOUND_ON_UPDATE)
            store.execute(
                "UPDATE Playlist SET Name = ? WHERE PlaylistId = ?",
                (data.name, playlist_id),
            )
            removed = store.execute("DELETE FROM PlaylistTrack WHERE PlaylistId = ?", (playlist_id,))
            cls._insert_memberships(store, playlist_id, data.tracks)
        logger.info(
            "Replaced playlist %s memberships (%d removed, %d added)",
            playlist_id,
            removed,
            len(data.tracks),
        )
        return MessageResult(message="Success")
