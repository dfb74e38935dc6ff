"""
Pydantic schema definitions for API payloads.

Each catalog entity defines its own request and response models.
Response models use the stored column names (``ArtistId``, ``Name``
...) as their aliases so that rows are returned exactly as the
catalog stores them.
"""
