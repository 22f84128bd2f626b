"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for generation failures.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Storage errors (missing or unresolved catalogs)
        2000-2999: Schema errors (conflicting or unnameable key paths)
        3000-3999: Emission errors (instances not matching the schema)
        4000-4999: Catalog file errors (unreadable or malformed input)
        5000-5999: Configuration and orchestration errors
    """

    # Storage errors (1000-1999)
    DEFAULT_LOCALE_MISSING = 1001
    DEFAULT_CATALOG_EMPTY = 1002
    CATALOG_UNRESOLVED = 1003

    # Schema errors (2000-2999)
    SCHEMA_LEAF_PREFIX_CONFLICT = 2001
    SCHEMA_DUPLICATE_PATH = 2002
    SCHEMA_DEPTH_EXCEEDED = 2003
    IDENTIFIER_COLLISION = 2004
    IDENTIFIER_INVALID = 2005
    SCHEMA_GROUP_SPLIT = 2006

    # Emission errors (3000-3999)
    INSTANCE_UNKNOWN_PATH = 3001
    INSTANCE_MISSING_PATHS = 3002
    INSTANCE_OUT_OF_ORDER = 3003

    # Catalog file errors (4000-4999)
    CATALOG_PARSE_FAILED = 4001
    CATALOG_VALUE_INVALID = 4002
    CATALOG_DUPLICATE_PATH = 4003
    CATALOG_DUPLICATE_LOCALE = 4004
    CATALOG_KEY_INVALID = 4005

    # Configuration and orchestration errors (5000-5999)
    CONFIG_SECTION_MISSING = 5001
    CONFIG_VALUE_INVALID = 5002
    STAGE_FAILED = 5003
    CONFIG_PARSE_FAILED = 5004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (build logs, CI annotations).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        key_path: Key path involved in the error, if any
        locale: Locale code involved in the error, if any
        source_path: Catalog or configuration file involved, if any
        stage: Generation stage in which the error surfaced
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    key_path: tuple[str, ...] | None = None
    locale: str | None = None
    source_path: str | None = None
    stage: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[SCHEMA_LEAF_PREFIX_CONFLICT]: Key 'home' is both a string and a group
              --> key home.title
              = help: Rename the leaf key or move it inside the group

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
