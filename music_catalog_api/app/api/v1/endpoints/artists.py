"""
Artist endpoints for API v1.

Artists can be listed, created and renamed.  There is no delete
endpoint.
"""

from typing import List

from fastapi import APIRouter, Depends

from music_catalog_api.app.core.db import CatalogStore, get_store
from music_catalog_api.app.schemas.artist import ArtistCreate, ArtistRead, ArtistUpdate
from music_catalog_api.app.schemas.common import ErrorResponse, InsertResult, UpdateResult
from music_catalog_api.app.services.artist_service import ArtistService

router = APIRouter()


@router.get("", response_model=List[ArtistRead])
async def list_artists(store: CatalogStore = Depends(get_store)) -> List[ArtistRead]:
    """Return all artists."""
    return await ArtistService.list_artists(store)


@router.post("", response_model=InsertResult)
async def create_artist(artist: ArtistCreate, store: CatalogStore = Depends(get_store)) -> InsertResult:
    """Create an artist and return ``{"insertId": ...}``."""
    return await ArtistService.create_artist(store, artist)


@router.put(
    "/{artist_id}",
    response_model=UpdateResult,
    responses={400: {"model": ErrorResponse}},
)
async def update_artist(
    artist_id: int,
    artist: ArtistUpdate,
    store: CatalogStore = Depends(get_store),
) -> UpdateResult:
    """Replace the name of an existing artist.

    Returns 400 if no artist has ``artist_id``.
    """
    return await ArtistService.update_artist(store, artist_id, artist)
