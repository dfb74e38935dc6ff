"""
Album endpoints for API v1.

Writes are only carried out when the referenced artist (and, for
updates, the album itself) exists; otherwise the request is rejected
with status 400 and an ``error`` message.
"""

from typing import List

from fastapi import APIRouter, Depends

from music_catalog_api.app.core.db import CatalogStore, get_store
from music_catalog_api.app.schemas.album import AlbumCreate, AlbumRead, AlbumUpdate
from music_catalog_api.app.schemas.common import ErrorResponse, InsertResult, UpdateResult
from music_catalog_api.app.services.album_service import AlbumService

router = APIRouter()


@router.get("", response_model=List[AlbumRead])
async def list_albums(store: CatalogStore = Depends(get_store)) -> List[AlbumRead]:
    """Return all albums joined with their artist's name."""
    return await AlbumService.list_albums(store)


@router.post("", response_model=InsertResult, responses={400: {"model": ErrorResponse}})
async def create_album(album: AlbumCreate, store: CatalogStore = Depends(get_store)) -> InsertResult:
    return await AlbumService.create_album(store, album)


@router.put("/{album_id}", response_model=UpdateResult, responses={400: {"model": ErrorResponse}})
async def update_album(
    album_id: int,
    album: AlbumUpdate,
    store: CatalogStore = Depends(get_store),
) -> UpdateResult:
    """Replace an album's title and artist.

    Returns 400 when the album or the new artist does not exist.
    """
    return await AlbumService.update_album(store, album_id, album)
