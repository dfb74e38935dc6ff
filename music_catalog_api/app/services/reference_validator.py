"""
Existence checks for rows referenced by a write.

``ReferenceValidator`` answers whether a reference resolves to an
existing row.  The ``exists``/``all_exist`` predicates return a
boolean; the ``require_*`` variants raise ``ReferenceNotFound`` or
``IncompleteReferenceSet`` carrying the message the client should
see.  Each check issues exactly one read.

Table and column names come from the fixed ``ENTITIES`` map below;
only identifier values are bound from the request.
"""

from __future__ import annotations

import logging
from typing import Sequence

from music_catalog_api.app.core.db import CatalogStore, placeholders
from music_catalog_api.app.core.errors import IncompleteReferenceSet, ReferenceNotFound

logger = logging.getLogger(__name__)

# entity name -> (table, primary key column)
ENTITIES: dict[str, tuple[str, str]] = {
    "artist": ("Artist", "ArtistId"),
    "album": ("Album", "AlbumId"),
    "track": ("Track", "TrackId"),
    "playlist": ("Playlist", "PlaylistId"),
}


class ReferenceValidator:
    """Checks references against a single store."""

    def __init__(self, store: CatalogStore) -> None:
        self.store = store

    @staticmethod
    def _target(entity: str) -> tuple[str, str]:
        try:
            return ENTITIES[entity]
        except KeyError:
            raise ValueError(f"Unknown entity kind: {entity}") from None

    def find(self, entity: str, reference: int) -> dict | None:
        """Return the referenced row, or ``None`` if it does not exist."""
        table, column = self._target(entity)
        return self.store.fetch_one(
            f"SELECT * FROM {table} WHERE {column} = ?",
            (reference,),
        )

    def exists(self, entity: str, reference: int) -> bool:
        return self.find(entity, reference) is not None

    def count_found(self, entity: str, references: Sequence[int]) -> int:
        """Count rows matching ``references``.

        Every identifier is bound as its own parameter.  A duplicated
        identifier matches a single row, so it is only counted once.
        """
        if not references:
            return 0
        table, column = self._target(entity)
        rows = self.store.fetch_all(
            f"SELECT {column} FROM {table} WHERE {column} IN ({placeholders(len(references))})",
            list(references),
        )
        return len(rows)

    def all_exist(self, entity: str, references: Sequence[int]) -> bool:
        """True only when the number of found rows equals ``len(references)``.

        The request is not deduplicated, so ``[1, 1]`` never passes.
        """
        return self.count_found(entity, references) == len(references)

    def require(self, entity: str, reference: int, message: str) -> dict:
        """Return the referenced row or raise ``ReferenceNotFound``."""
        row = self.find(entity, reference)
        if row is None:
            logger.info("%s %s not found", entity, reference)
            raise ReferenceNotFound(message, entity=entity, reference=reference)
        return row

    def require_all(self, entity: str, references: Sequence[int], message: str) -> None:
        """Raise ``IncompleteReferenceSet`` unless every reference resolves."""
        found = self.count_found(entity, references)
        if found != len(references):
            logger.info(
                "Only %d of %d requested %s references found",
                found,
                len(references),
                entity,
            )
            raise IncompleteReferenceSet(
                message,
                entity=entity,
                requested=len(references),
                found=found,
            )
