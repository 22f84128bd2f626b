"""Schema compiler: derive nested record types from sorted key paths.

The default locale's key paths describe a tree; this module turns them into
one record type per inner node without building the tree. Sorted paths put
every subtree's entries next to each other, so a single sweep per layer
suffices:

    layer 0:  root record gets one field per distinct first segment
    layer L:  paths of length <= L are gone (consumed as leaves earlier);
              the rest group by their first L segments, each group becomes
              one record, each distinct next segment one field
    repeat until no paths remain

Example:
    >>> schema = compile_schema([("a", "x"), ("a", "y"), ("b",)])
    >>> [record.name for record in schema.records]
    ['Strings', 'StringsA']
    >>> [(f.name, f.kind.value) for f in schema.root.fields]
    [('a', 'record'), ('b', 'leaf')]

Field order equals the order in which segments first appear in the sorted
input, so identical input always yields an identical schema.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from localegen.catalog.types import KeyPath
from localegen.constants import MAX_DEPTH
from localegen.diagnostics import (
    ErrorTemplate,
    IdentifierCollisionError,
    MissingDefaultLocaleError,
    SchemaConflictError,
)
from localegen.enums import FieldKind
from localegen.naming import CaseNaming, IdentifierNaming

__all__ = [
    "RecordType",
    "Schema",
    "SchemaField",
    "compile_schema",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SchemaField:
    """One field of a record type.

    Attributes:
        segment: Raw key path segment the field stands for
        name: Field identifier in generated source
        kind: LEAF for a string field, RECORD for a nested record
        type_name: Name of the nested record type (RECORD fields only)
    """

    segment: str
    name: str
    kind: FieldKind
    type_name: str | None = None


@dataclass(frozen=True, slots=True)
class RecordType:
    """One record type, standing for every key path sharing ``prefix``.

    Attributes:
        prefix: Key path prefix (``()`` for the root)
        name: Type identifier in generated source
        fields: Fields in first-appearance order
    """

    prefix: KeyPath
    name: str
    fields: tuple[SchemaField, ...]

    def field(self, segment: str) -> SchemaField | None:
        """Return the field for a raw segment, or None."""
        for candidate in self.fields:
            if candidate.segment == segment:
                return candidate
        return None


@dataclass(frozen=True, slots=True)
class Schema:
    """Set of record types rooted at one top-level type.

    Records are stored in compilation order: the root first, then layer by
    layer, each layer in key path order.
    """

    records: tuple[RecordType, ...]
    _by_prefix: dict[KeyPath, RecordType] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "_by_prefix", {r.prefix: r for r in self.records})

    @property
    def root(self) -> RecordType:
        """The top-level record type."""
        return self.records[0]

    def record(self, prefix: KeyPath) -> RecordType | None:
        """Return the record type for a prefix, or None."""
        return self._by_prefix.get(prefix)

    def is_leaf(self, path: KeyPath) -> bool:
        """Check whether ``path`` is a string field of the schema."""
        if not path:
            return False
        record = self._by_prefix.get(path[:-1])
        if record is None:
            return False
        found = record.field(path[-1])
        return found is not None and found.kind is FieldKind.LEAF

    def leaf_paths(self) -> Iterator[KeyPath]:
        """Yield every leaf path in field order (which is key path order).

        Iterative depth-first walk with an explicit stack.
        """
        stack: list[tuple[RecordType, int]] = [(self.root, 0)]
        while stack:
            record, index = stack.pop()
            if index >= len(record.fields):
                continue
            stack.append((record, index + 1))
            current = record.fields[index]
            path = (*record.prefix, current.segment)
            if current.kind is FieldKind.LEAF:
                yield path
            else:
                stack.append((self._by_prefix[path], 0))

    def leaf_count(self) -> int:
        """Number of string fields across all records."""
        return sum(
            1 for record in self.records for f in record.fields if f.kind is FieldKind.LEAF
        )


@dataclass(slots=True)
class _RecordBuilder:
    """Mutable record under construction within one layer sweep."""

    prefix: KeyPath
    name: str
    fields: dict[str, SchemaField] = field(default_factory=dict)
    field_owners: dict[str, str] = field(default_factory=dict)

    def add(self, new: SchemaField) -> None:
        owner = self.field_owners.get(new.name)
        if owner is not None and owner != new.segment:
            raise IdentifierCollisionError(
                ErrorTemplate.identifier_collision(
                    new.name, (*self.prefix, owner), (*self.prefix, new.segment)
                )
            )
        self.field_owners[new.name] = new.segment
        self.fields[new.segment] = new

    def build(self) -> RecordType:
        return RecordType(self.prefix, self.name, tuple(self.fields.values()))


def compile_schema(
    paths: Sequence[KeyPath],
    naming: IdentifierNaming | None = None,
) -> Schema:
    """Compile sorted key paths into a record schema.

    Args:
        paths: Key paths of the default catalog, sorted by the shared
            ordering and free of duplicates. Values play no part.
        naming: Identifier naming (defaults to CaseNaming)

    Returns:
        Schema whose leaf paths are exactly ``paths``, in the same order

    Raises:
        MissingDefaultLocaleError: If ``paths`` is empty
        SchemaConflictError: If a path is both a leaf and a prefix of another
            path, a path repeats, a path is deeper than MAX_DEPTH, or the paths
            of one group are not contiguous
        IdentifierCollisionError: If naming maps two segments of one record,
            or two record prefixes, to the same identifier
    """
    if not paths:
        raise MissingDefaultLocaleError(ErrorTemplate.default_catalog_empty())
    naming = naming if naming is not None else CaseNaming()

    for path in paths:
        if len(path) > MAX_DEPTH:
            raise SchemaConflictError(ErrorTemplate.depth_exceeded(path, MAX_DEPTH))

    records: list[RecordType] = []
    type_owners: dict[str, KeyPath] = {}
    remaining: Sequence[KeyPath] = paths
    layer = 0

    while remaining:
        retained: list[KeyPath] = []
        builder: _RecordBuilder | None = None
        closed: set[KeyPath] = set()
        previous_path: KeyPath | None = None

        for path in remaining:
            prefix = path[:layer]
            if builder is None or builder.prefix != prefix:
                if builder is not None:
                    records.append(builder.build())
                    closed.add(builder.prefix)
                if prefix in closed:
                    raise SchemaConflictError(ErrorTemplate.group_split(prefix, path))
                builder = _RecordBuilder(prefix, _claim_type_name(naming, prefix, type_owners))

            segment = path[layer]
            is_leaf = len(path) == layer + 1
            existing = builder.fields.get(segment)

            if existing is None:
                if is_leaf:
                    builder.add(SchemaField(segment, naming.field_name(segment), FieldKind.LEAF))
                else:
                    child = path[: layer + 1]
                    builder.add(
                        SchemaField(
                            segment,
                            naming.field_name(segment),
                            FieldKind.RECORD,
                            _claim_type_name(naming, child, type_owners),
                        )
                    )
            elif existing.kind is FieldKind.LEAF:
                if is_leaf:
                    raise SchemaConflictError(ErrorTemplate.duplicate_path(path))
                raise SchemaConflictError(
                    ErrorTemplate.leaf_prefix_conflict(path[: layer + 1], path)
                )
            elif is_leaf:
                # Nested field seen first: only possible with unsorted input
                raise SchemaConflictError(
                    ErrorTemplate.leaf_prefix_conflict(path, previous_path or path)
                )

            if not is_leaf:
                retained.append(path)
            previous_path = path

        if builder is not None:
            records.append(builder.build())
        logger.debug("Schema layer %d: %d path(s) continue deeper", layer, len(retained))
        remaining = retained
        layer += 1

    schema = Schema(tuple(records))
    logger.debug("Compiled %d record type(s) from %d key path(s)", len(records), len(paths))
    return schema


def _claim_type_name(
    naming: IdentifierNaming,
    prefix: KeyPath,
    owners: dict[str, KeyPath],
) -> str:
    """Name the record type for ``prefix`` and check it is not taken.

    A prefix is named twice: once as the parent's RECORD field type, and
    again when its own record is built in the next layer.
    """
    name = naming.type_name(prefix)
    owner = owners.setdefault(name, prefix)
    if owner != prefix:
        raise IdentifierCollisionError(ErrorTemplate.identifier_collision(name, owner, prefix))
    return name
