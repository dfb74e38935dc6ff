"""
Pydantic models for playlists.

A playlist owns its set of track memberships.  Both creating and
replacing a playlist take the complete list of track identifiers; the
list is checked against the ``Track`` table as given, so duplicates
count twice.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class PlaylistBase(BaseModel):
    name: str = Field(..., examples=["Test Playlist"])
    tracks: List[int] = Field(default_factory=list, examples=[[1, 2, 3]])


class PlaylistCreate(PlaylistBase):
    """Schema for creating a playlist with its tracks."""
    pass


class PlaylistUpdate(PlaylistBase):
    """Replacement name and track set for an existing playlist."""
    pass


class PlaylistCreated(BaseModel):
    playlist_id: int


class PlaylistRead(BaseModel):
    """A playlist with the identifiers of its member tracks."""

    playlist_id: int = Field(..., alias="PlaylistId")
    name: Optional[str] = Field(None, alias="Name")
    tracks: List[int] = Field(default_factory=list)

    model_config = {"populate_by_name": True}
