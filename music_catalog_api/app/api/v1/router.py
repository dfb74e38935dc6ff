"""
Top-level router for version 1 of the API.

This router aggregates the per-entity routers.  When a new entity is
exposed, include its router here.
"""

from fastapi import APIRouter

from .endpoints import albums, artists, employees, info, playlists

router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(artists.router, prefix="/artists", tags=["artists"])
router.include_router(albums.router, prefix="/albums", tags=["albums"])
router.include_router(employees.router, prefix="/employees", tags=["employees"])
# Playlists are served under the plural ``/playlists`` and, for
# existing clients, the singular ``/playlist``.  Both prefixes expose
# identical endpoints (e.g. ``PUT /playlist/5`` and ``PUT /playlists/5``).
router.include_router(playlists.router, prefix="/playlists", tags=["playlists"])
router.include_router(playlists.router, prefix="/playlist", tags=["playlists"])
