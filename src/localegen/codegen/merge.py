"""Fallback merge: reconcile one locale's catalog with the default catalog.

A sorted merge-join in a single forward sweep over both catalogs. For every
default entry, in default order, the output holds either the locale's own
value or a symbolic reference to the default's value:

    default: home.body, home.title
    locale:  home.title
    merged:  home.body -> FallbackRef(home.body)
             home.title -> LiteralValue("Bienvenue")

Locale entries with no default counterpart are skipped. They are collected
in ``MergeResult.dropped`` for reporting but never raise.

Complexity:
    Time: O(|default| + |locale|), no backtracking
    Space: O(|default|) for the output

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TypeAlias

from localegen.catalog.types import CatalogEntry, KeyPath, compare_paths
from localegen.codegen.cursor import CatalogCursor
from localegen.diagnostics import ErrorTemplate, MissingDefaultLocaleError

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Emit values
    "LiteralValue",
    "FallbackRef",
    "EmitValue",
    "EmitEntry",
    # Merge
    "MergeResult",
    "iter_merged",
    "merge_with_default",
    "literal_entries",
]


@dataclass(frozen=True, slots=True)
class LiteralValue:
    """Value owned by the locale being emitted."""

    value: str


@dataclass(frozen=True, slots=True)
class FallbackRef:
    """Reference to the default instance's value at ``path``.

    Never resolved to a copy: the generated source refers to the default
    instance's field, so editing the default catalog alone updates every
    locale that falls back to it.
    """

    path: KeyPath


EmitValue: TypeAlias = LiteralValue | FallbackRef
"""Value attached to one path during instance emission."""


@dataclass(frozen=True, slots=True)
class EmitEntry:
    """Key path paired with the value to emit for it."""

    path: KeyPath
    value: EmitValue

    @property
    def is_fallback(self) -> bool:
        return isinstance(self.value, FallbackRef)


@dataclass(frozen=True, slots=True)
class MergeResult:
    """Outcome of merging one locale catalog with the default catalog.

    Attributes:
        entries: One entry per default path, in default order
        dropped: Locale paths absent from the default catalog, in
            encounter order
    """

    entries: tuple[EmitEntry, ...]
    dropped: tuple[KeyPath, ...] = ()

    @property
    def fallback_count(self) -> int:
        """Number of default paths the locale does not translate."""
        return sum(1 for entry in self.entries if entry.is_fallback)

    @property
    def literal_count(self) -> int:
        """Number of default paths the locale translates."""
        return len(self.entries) - self.fallback_count


def literal_entries(catalog: Iterable[CatalogEntry]) -> tuple[EmitEntry, ...]:
    """Wrap every catalog value as a literal. Used for the default locale."""
    return tuple(EmitEntry(entry.path, LiteralValue(entry.value)) for entry in catalog)


def iter_merged(
    default: Sequence[CatalogEntry],
    catalog: Sequence[CatalogEntry],
    dropped: list[KeyPath] | None = None,
) -> Iterator[EmitEntry]:
    """Lazily merge ``catalog`` with ``default``.

    Both inputs must be sorted by the shared key path ordering; this is
    assumed, not checked.

    Args:
        default: Complete default catalog
        catalog: Locale catalog, ideally a subset of ``default``'s paths
        dropped: When given, receives each skipped locale path

    Yields:
        One EmitEntry per default entry, in default order
    """
    cursor = CatalogCursor(catalog)
    for default_entry in default:
        target = default_entry.path

        # Skip locale paths the default does not have
        while not cursor.is_eof and compare_paths(cursor.current.path, target) < 0:
            if dropped is not None:
                dropped.append(cursor.current.path)
            cursor = cursor.advance()

        if cursor.is_eof or compare_paths(cursor.current.path, target) > 0:
            yield EmitEntry(target, FallbackRef(target))
        else:
            yield EmitEntry(target, LiteralValue(cursor.current.value))
            cursor = cursor.advance()

    # Anything left sorts after the last default path
    if dropped is not None:
        while not cursor.is_eof:
            dropped.append(cursor.current.path)
            cursor = cursor.advance()


def merge_with_default(
    default: Sequence[CatalogEntry],
    catalog: Sequence[CatalogEntry],
) -> MergeResult:
    """Merge a locale catalog with the default catalog.

    Args:
        default: Complete, sorted, non-empty default catalog
        catalog: Sorted locale catalog

    Returns:
        MergeResult with exactly ``len(default)`` entries

    Raises:
        MissingDefaultLocaleError: If ``default`` is empty

    Example:
        >>> en = LocaleCatalog.from_mapping({"home": {"title": "Welcome", "body": "Hello"}})
        >>> fr = LocaleCatalog.from_mapping({"home": {"title": "Bienvenue"}})
        >>> [e.value for e in merge_with_default(en, fr).entries]
        [FallbackRef(path=('home', 'body')), LiteralValue(value='Bienvenue')]
    """
    if not default:
        raise MissingDefaultLocaleError(ErrorTemplate.default_catalog_empty())
    dropped: list[KeyPath] = []
    entries = tuple(iter_merged(default, catalog, dropped))
    return MergeResult(entries, tuple(dropped))
