"""
Playlist endpoints for API v1.

A playlist is created or replaced together with its complete list of
track ids.  Every id must exist (and appear once) or the request is
rejected with status 400 and nothing is written.
"""

from fastapi import APIRouter, Depends

from music_catalog_api.app.core.db import CatalogStore, get_store
from music_catalog_api.app.schemas.common import ErrorResponse, MessageResult
from music_catalog_api.app.schemas.playlist import (
    PlaylistCreate,
    PlaylistCreated,
    PlaylistRead,
    PlaylistUpdate,
)
from music_catalog_api.app.services.playlist_service import PlaylistService

router = APIRouter()


@router.post("", response_model=PlaylistCreated, responses={400: {"model": ErrorResponse}})
async def create_playlist(
    playlist: PlaylistCreate,
    store: CatalogStore = Depends(get_store),
) -> PlaylistCreated:
    """Create a playlist and attach the given tracks."""
    return await PlaylistService.create_playlist(store, playlist)


@router.get("/{playlist_id}", response_model=PlaylistRead, responses={404: {"model": ErrorResponse}})
async def get_playlist(playlist_id: int, store: CatalogStore = Depends(get_store)) -> PlaylistRead:
    """Return a playlist and the ids of its tracks."""
    return await PlaylistService.get_playlist(store, playlist_id)


@router.put("/{playlist_id}", response_model=MessageResult, responses={400: {"model": ErrorResponse}})
async def replace_playlist(
    playlist_id: int,
    playlist: PlaylistUpdate,
    store: CatalogStore = Depends(get_store),
) -> MessageResult:
    """Rename a playlist and replace all of its tracks.

    Returns 400 when the playlist or any of the tracks does not exist;
    the existing memberships are kept in that case.
    """
    return await PlaylistService.replace_playlist(store, playlist_id, playlist)
