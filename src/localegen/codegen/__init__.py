"""Code generation: schema compiler, fallback merge, instance emitter.

Submodules:
    schema    - compile_schema: sorted key paths -> record types
    cursor    - CatalogCursor: immutable cursor over a sorted catalog
    merge     - merge_with_default: locale catalog + default -> literals/fallbacks
    instance  - emit_instance: sorted entries -> nested constructor literal
    render    - render_module: schema + instances -> Python module source
    generator - load_catalogs / generate_locales / write_locales: the whole run

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from localegen.codegen.cursor import CatalogCursor
from localegen.codegen.generator import (
    GeneratedLocales,
    generate_locales,
    load_catalogs,
    write_locales,
)
from localegen.codegen.instance import Marker, emit_instance, iter_markers, render_string
from localegen.codegen.merge import (
    EmitEntry,
    EmitValue,
    FallbackRef,
    LiteralValue,
    MergeResult,
    iter_merged,
    literal_entries,
    merge_with_default,
)
from localegen.codegen.render import (
    LocaleBinding,
    RenderOptions,
    bind_locales,
    render_locales_enum,
    render_module,
    render_record,
    render_schema,
)
from localegen.codegen.schema import RecordType, Schema, SchemaField, compile_schema

__all__ = [
    # Schema compiler
    "RecordType",
    "Schema",
    "SchemaField",
    "compile_schema",
    # Fallback merge
    "CatalogCursor",
    "EmitEntry",
    "EmitValue",
    "FallbackRef",
    "LiteralValue",
    "MergeResult",
    "iter_merged",
    "literal_entries",
    "merge_with_default",
    # Instance emitter
    "Marker",
    "emit_instance",
    "iter_markers",
    "render_string",
    # Rendering
    "LocaleBinding",
    "RenderOptions",
    "bind_locales",
    "render_locales_enum",
    "render_module",
    "render_record",
    "render_schema",
    # Generation run
    "GeneratedLocales",
    "generate_locales",
    "load_catalogs",
    "write_locales",
]
