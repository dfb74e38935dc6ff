"""
Top-level package for the Music Catalog API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``music_catalog_api.app.main:app``.
"""

__all__ = []
