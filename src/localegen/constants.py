"""Shared constants for localegen.

Centralized configuration constants used across the catalog, codegen and
CLI packages. Placing constants here avoids circular imports and provides
a single source of truth.

Constants are grouped by domain:
- Depth limits: Bound on key path nesting
- Generated names: Defaults for emitted identifiers
- Output layout: Indentation and file naming
- Catalog files: Recognized catalog file suffixes

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Generated names
    "DEFAULT_ROOT_TYPE",
    "DEFAULT_ENUM_NAME",
    "DEFAULT_CONSTANT",
    "DEFAULT_LOCALE_CONSTANT",
    "LOCALE_TABLE_NAME",
    # Output layout
    "INDENT",
    "DEFAULT_OUTPUT_FILE",
    "GENERATED_HEADER",
    # Catalog files
    "CATALOG_SUFFIXES",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum number of segments in one key path.
MAX_DEPTH: int = 100

# ============================================================================
# GENERATED NAMES
# ============================================================================

# Name of the top-level record type. Nested types append PascalCase segments.
DEFAULT_ROOT_TYPE: str = "Strings"

# Name of the generated locale enumeration.
DEFAULT_ENUM_NAME: str = "Locales"

# Name of the default locale's instance; fallback references point into it.
DEFAULT_CONSTANT: str = "STRINGS_DEFAULT"

# Module-level alias for the default enum member.
DEFAULT_LOCALE_CONSTANT: str = "DEFAULT_LOCALE"

# Private mapping from enum member to instance in the generated module.
LOCALE_TABLE_NAME: str = "_STRINGS_BY_LOCALE"

# ============================================================================
# OUTPUT LAYOUT
# ============================================================================

# One indentation level in generated source.
INDENT: str = "    "

# File name of the generated module inside the output directory.
DEFAULT_OUTPUT_FILE: str = "locales.py"

# First line of every generated module.
GENERATED_HEADER: str = "# This file is generated by localegen. Do not edit by hand."

# ============================================================================
# CATALOG FILES
# ============================================================================

# Suffix -> format name. Two files for one locale are rejected.
CATALOG_SUFFIXES: dict[str, str] = {
    ".toml": "toml",
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}
