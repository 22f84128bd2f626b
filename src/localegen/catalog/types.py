"""Catalog data model: key paths, entries and per-locale catalogs.

A catalog is a sorted, duplicate-free sequence of (key path, value) entries
for one locale. Every component orders key paths the same way: Python tuple
ordering on the raw segment strings, which is segment-wise lexicographic
ordering with a shorter prefix sorting first on ties. ``compare_paths`` and
``entry_sort_key`` are the only places that ordering is spelled out.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import TypeAlias, overload

from localegen.diagnostics import (
    CatalogFormatError,
    DuplicateKeyPathError,
    ErrorTemplate,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "KeyPath",
    "LocaleCode",
    # Ordering
    "compare_paths",
    "entry_sort_key",
    "common_prefix_length",
    # Validation
    "validate_key_path",
    # Data structures
    "CatalogEntry",
    "LocaleCatalog",
    "flatten_mapping",
]

KeyPath: TypeAlias = tuple[str, ...]
"""Non-empty sequence of segments identifying one localized string (e.g., ('home', 'title'))."""

LocaleCode: TypeAlias = str
"""Locale identifier as it appears in storage (e.g., 'en', 'pt-BR')."""


# ============================================================================
# ORDERING
# ============================================================================


def compare_paths(a: KeyPath, b: KeyPath) -> int:
    """Three-way comparison of two key paths.

    Returns:
        Negative if ``a`` sorts first, zero if equal, positive otherwise
    """
    return (a > b) - (a < b)


def entry_sort_key(entry: CatalogEntry) -> KeyPath:
    """Sort key for catalog entries."""
    return entry.path


def common_prefix_length(a: KeyPath, b: KeyPath) -> int:
    """Number of leading segments ``a`` and ``b`` share."""
    length = 0
    for left, right in zip(a, b, strict=False):
        if left != right:
            break
        length += 1
    return length


# ============================================================================
# VALIDATION
# ============================================================================


def validate_key_path(path: Iterable[object]) -> KeyPath:
    """Validate and normalize a key path to a tuple of segments.

    Args:
        path: Sequence of segments

    Returns:
        The path as a tuple

    Raises:
        CatalogFormatError: If the path is empty or any segment is not a
            non-empty string
    """
    segments = tuple(path)
    if not segments or not all(isinstance(s, str) and s for s in segments):
        raise CatalogFormatError(ErrorTemplate.catalog_key_invalid(segments))
    return segments  # type: ignore[return-value]


# ============================================================================
# DATA STRUCTURES
# ============================================================================


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """One localized string.

    Attributes:
        path: Key path identifying the string
        value: Raw string value, exactly as found in the catalog
    """

    path: KeyPath
    value: str


@dataclass(frozen=True, slots=True)
class LocaleCatalog:
    """Sorted, duplicate-free sequence of entries for one locale.

    The plain constructor trusts its input: sortedness and uniqueness are
    assumed and never re-checked. Use ``from_pairs`` or ``from_mapping`` to
    build a catalog from unsorted data.

    Example:
        >>> catalog = LocaleCatalog.from_mapping({"home": {"title": "Welcome", "body": "Hello"}})
        >>> catalog.paths()
        (('home', 'body'), ('home', 'title'))
    """

    entries: tuple[CatalogEntry, ...] = ()

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[Iterable[str], str]]) -> LocaleCatalog:
        """Build a catalog from (path, value) pairs in any order.

        Raises:
            CatalogFormatError: If a path is invalid
            DuplicateKeyPathError: If a path appears more than once
        """
        entries = sorted(
            (CatalogEntry(validate_key_path(path), value) for path, value in pairs),
            key=entry_sort_key,
        )
        for previous, current in zip(entries, entries[1:], strict=False):
            if previous.path == current.path:
                raise DuplicateKeyPathError(ErrorTemplate.catalog_duplicate_path(current.path))
        return cls(tuple(entries))

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> LocaleCatalog:
        """Build a catalog from a nested mapping of strings.

        Raises:
            CatalogFormatError: If a key is not a string or a leaf is not a string
        """
        return cls.from_pairs(flatten_mapping(data))

    def paths(self) -> tuple[KeyPath, ...]:
        """Key paths in catalog order."""
        return tuple(entry.path for entry in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    @overload
    def __getitem__(self, index: int) -> CatalogEntry: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[CatalogEntry, ...]: ...
    def __getitem__(self, index: int | slice) -> CatalogEntry | tuple[CatalogEntry, ...]:
        return self.entries[index]


def flatten_mapping(data: Mapping[str, object]) -> list[tuple[KeyPath, str]]:
    """Flatten a nested mapping into (key path, value) pairs.

    Iterative depth-first walk; output order follows the mapping's own
    iteration order, so callers sort afterwards.

    Args:
        data: Mapping whose values are strings or further mappings

    Returns:
        List of (path, value) pairs

    Raises:
        CatalogFormatError: If a key is not a non-empty string, a leaf value
            is not a string, or a nested mapping is empty

    Example:
        >>> flatten_mapping({"nav": {"home": "Home"}, "title": "News"})
        [(('title',), 'News'), (('nav', 'home'), 'Home')]
    """
    pairs: list[tuple[KeyPath, str]] = []
    stack: list[tuple[KeyPath, Mapping[object, object]]] = [((), data)]  # type: ignore[list-item]
    while stack:
        prefix, mapping = stack.pop()
        children: list[tuple[KeyPath, Mapping[object, object]]] = []
        for key, value in mapping.items():
            path = validate_key_path((*prefix, key))
            if isinstance(value, Mapping):
                if not value:
                    raise CatalogFormatError(ErrorTemplate.catalog_key_invalid(path))
                children.append((path, value))
            elif isinstance(value, str):
                pairs.append((path, value))
            else:
                raise CatalogFormatError(
                    ErrorTemplate.catalog_value_invalid(path, type(value).__name__)
                )
        # Reversed so the first child is walked first
        stack.extend(reversed(children))
    return pairs
