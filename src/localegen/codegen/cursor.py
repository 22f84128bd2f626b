"""Immutable cursor over a sorted catalog.

Implements the immutable cursor pattern used by the fallback merge:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns a NEW cursor
    - ``current`` raises at EOF instead of returning None

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from localegen.catalog.types import CatalogEntry

__all__ = ["CatalogCursor"]


@dataclass(frozen=True, slots=True)
class CatalogCursor:
    """Immutable position within a sequence of catalog entries.

    Example:
        >>> entries = (CatalogEntry(("a",), "A"), CatalogEntry(("b",), "B"))
        >>> cursor = CatalogCursor(entries, 0)
        >>> cursor.current.path
        ('a',)
        >>> cursor.advance().current.path
        ('b',)
        >>> cursor.advance(2).is_eof
        True
    """

    entries: Sequence[CatalogEntry]
    pos: int = 0

    @property
    def is_eof(self) -> bool:
        """Check if every entry has been consumed."""
        return self.pos >= len(self.entries)

    @property
    def current(self) -> CatalogEntry:
        """Entry under the cursor.

        Raises:
            EOFError: If the cursor is exhausted
        """
        if self.is_eof:
            msg = f"Catalog cursor exhausted at position {self.pos}"
            raise EOFError(msg)
        return self.entries[self.pos]

    def advance(self, count: int = 1) -> CatalogCursor:
        """Return a new cursor moved forward by ``count`` entries (clamped at EOF)."""
        return CatalogCursor(self.entries, min(self.pos + count, len(self.entries)))
