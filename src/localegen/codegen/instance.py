"""Instance emitter: turn sorted (path, value) entries into a nested literal.

The emitter never builds a tree. It walks the sorted entries once, keeping a
stack of currently open groups (key path prefixes). For each entry:

    k = shared prefix length with the previous entry's path
    close every open group deeper than k
    open one group per remaining prefix of the current path
    emit the leaf

and after the last entry closes everything back to the root. The stack depth
is the whole state: OPEN pushes, CLOSE pops, and a valid run ends at depth 0.

Rendered form, for a locale that only translates ``home.title``:

    STRINGS_FR: Final[Strings] = Strings(
        home=StringsHome(
            body=STRINGS_DEFAULT.home.body,
            title='Bienvenue',
        ),
    )

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from localegen.catalog.types import KeyPath, common_prefix_length, compare_paths
from localegen.codegen.merge import EmitEntry, EmitValue, FallbackRef, LiteralValue
from localegen.codegen.schema import Schema
from localegen.constants import DEFAULT_CONSTANT, INDENT
from localegen.diagnostics import ErrorTemplate, InstanceMismatchError
from localegen.enums import FieldKind, MarkerKind

__all__ = [
    "Marker",
    "emit_instance",
    "iter_markers",
    "render_string",
]


@dataclass(frozen=True, slots=True)
class Marker:
    """One instance emitter event.

    Attributes:
        kind: OPEN, LEAF or CLOSE
        path: Group prefix for OPEN/CLOSE, full key path for LEAF
        value: Value to assign (LEAF only)
    """

    kind: MarkerKind
    path: KeyPath
    value: EmitValue | None = None

    @property
    def depth(self) -> int:
        """Nesting level of the line this marker renders on (root body is 1)."""
        return len(self.path)


def iter_markers(entries: Iterable[EmitEntry]) -> Iterator[Marker]:
    """Yield OPEN/LEAF/CLOSE markers for sorted entries.

    Exactly one LEAF per entry; OPEN and CLOSE markers always balance.

    Example:
        >>> entries = literal_entries(LocaleCatalog.from_mapping({"a": {"x": "1"}, "b": "2"}))
        >>> [(m.kind.value, m.path) for m in iter_markers(entries)]
        [('open', ('a',)), ('leaf', ('a', 'x')), ('close', ('a',)), ('leaf', ('b',))]
    """
    stack: list[KeyPath] = []
    previous: KeyPath | None = None

    for entry in entries:
        path = entry.path
        shared = 0 if previous is None else common_prefix_length(path, previous)
        # The leaf's own segment is never a group
        shared = min(shared, len(path) - 1)

        while len(stack) > shared:
            yield Marker(MarkerKind.CLOSE, stack.pop())

        for depth in range(len(stack), len(path) - 1):
            prefix = path[: depth + 1]
            stack.append(prefix)
            yield Marker(MarkerKind.OPEN, prefix)

        yield Marker(MarkerKind.LEAF, path, entry.value)
        previous = path

    while stack:
        yield Marker(MarkerKind.CLOSE, stack.pop())


def render_string(value: str) -> str:
    """Render a string value as a Python string literal."""
    return repr(value)


def _checked(entries: Iterable[EmitEntry], schema: Schema, locale: str | None) -> Iterator[EmitEntry]:
    """Pass entries through, rejecting any that break schema conformance."""
    previous: KeyPath | None = None
    emitted: set[KeyPath] = set()
    for entry in entries:
        if previous is not None and compare_paths(entry.path, previous) <= 0:
            raise InstanceMismatchError(
                ErrorTemplate.instance_out_of_order(entry.path, previous, locale)
            )
        if not schema.is_leaf(entry.path):
            raise InstanceMismatchError(ErrorTemplate.instance_unknown_path(entry.path, locale))
        previous = entry.path
        emitted.add(entry.path)
        yield entry

    expected = schema.leaf_count()
    if len(emitted) != expected:
        first_missing = next(path for path in schema.leaf_paths() if path not in emitted)
        raise InstanceMismatchError(
            ErrorTemplate.instance_missing_paths(expected - len(emitted), first_missing, locale)
        )


def _field_names(schema: Schema, path: KeyPath) -> list[str]:
    names: list[str] = []
    for index, segment in enumerate(path):
        record = schema.record(path[:index])
        found = record.field(segment) if record is not None else None
        if found is None:
            raise InstanceMismatchError(ErrorTemplate.instance_unknown_path(path))
        names.append(found.name)
    return names


def emit_instance(
    entries: Iterable[EmitEntry],
    schema: Schema,
    constant_name: str,
    *,
    default_constant: str = DEFAULT_CONSTANT,
    locale: str | None = None,
) -> str:
    """Emit one locale's instance as a Python assignment statement.

    Identifiers come from the schema, which carries the names produced by
    the naming used to compile it, so instances always agree with the
    record types they construct.

    Args:
        entries: Sorted entries whose paths are exactly the schema's leaf
            paths (default literals, or a merge result)
        schema: Schema the instance must conform to
        constant_name: Name of the module constant to assign
        default_constant: Name of the default instance, target of
            fallback references
        locale: Locale being emitted, for diagnostics

    Returns:
        Source text of the assignment, ending with a newline

    Raises:
        InstanceMismatchError: If entries are out of order, name a path that
            is not a schema leaf, or leave schema leaves without a value
    """
    root = schema.root
    lines = [f"{constant_name}: Final[{root.name}] = {root.name}("]

    for marker in iter_markers(_checked(entries, schema, locale)):
        indent = INDENT * marker.depth
        match marker.kind:
            case MarkerKind.OPEN:
                parent = schema.record(marker.path[:-1])
                group = parent.field(marker.path[-1]) if parent is not None else None
                if group is None or group.kind is not FieldKind.RECORD:
                    raise InstanceMismatchError(
                        ErrorTemplate.instance_unknown_path(marker.path, locale)
                    )
                lines.append(f"{indent}{group.name}={group.type_name}(")
            case MarkerKind.LEAF:
                name = _field_names(schema, marker.path)[-1]
                rendered = _render_value(marker.value, schema, default_constant)
                lines.append(f"{indent}{name}={rendered},")
            case MarkerKind.CLOSE:
                lines.append(f"{indent}),")

    lines.append(")")
    return "\n".join(lines) + "\n"


def _render_value(value: EmitValue | None, schema: Schema, default_constant: str) -> str:
    match value:
        case LiteralValue(value=text):
            return render_string(text)
        case FallbackRef(path=path):
            return ".".join([default_constant, *_field_names(schema, path)])
        case _:
            msg = f"Leaf marker without value: {value!r}"
            raise TypeError(msg)
