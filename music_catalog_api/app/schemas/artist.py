"""
Pydantic models for artists.

``ArtistCreate`` and ``ArtistUpdate`` describe request bodies;
``ArtistRead`` mirrors a row of the ``Artist`` table.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ArtistCreate(BaseModel):
    name: str = Field(..., examples=["Taylor Swift"])


class ArtistUpdate(BaseModel):
    """Replacement copy of an artist (``PUT`` semantics)."""

    name: str = Field(..., examples=["JJ Lin"])


class ArtistRead(BaseModel):
    artist_id: int = Field(..., alias="ArtistId")
    name: Optional[str] = Field(None, alias="Name")

    model_config = {"populate_by_name": True}
