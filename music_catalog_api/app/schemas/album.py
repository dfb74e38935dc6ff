"""
Pydantic models for albums.

An album always references an artist; the reference is checked by the
service layer before any write.  ``AlbumRead`` is the joined listing
row and carries the artist's name rather than its identifier.
"""

from typing import Optional

from pydantic import BaseModel, Field


class AlbumBase(BaseModel):
    title: str = Field(..., examples=["Jiangnan"])
    artist_id: int = Field(..., examples=[277])


class AlbumCreate(AlbumBase):
    """Schema for creating an album."""
    pass


class AlbumUpdate(AlbumBase):
    """Replacement copy of an album (``PUT`` semantics)."""
    pass


class AlbumRead(BaseModel):
    name: Optional[str] = Field(None, alias="Name")
    album_id: int = Field(..., alias="AlbumId")
    title: str = Field(..., alias="Title")

    model_config = {"populate_by_name": True}
