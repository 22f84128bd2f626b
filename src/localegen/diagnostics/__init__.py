"""Diagnostic system for generator errors.

Provides structured error diagnostics with codes, hints, key paths and
stage labels. Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CatalogFormatError,
    ConfigurationError,
    DuplicateKeyPathError,
    GenerationStageError,
    IdentifierCollisionError,
    InstanceMismatchError,
    LocaleGenError,
    MissingDefaultLocaleError,
    SchemaConflictError,
    UnresolvedCatalogError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CatalogFormatError",
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DuplicateKeyPathError",
    "ErrorTemplate",
    "GenerationStageError",
    "IdentifierCollisionError",
    "InstanceMismatchError",
    "LocaleGenError",
    "MissingDefaultLocaleError",
    "OutputFormat",
    "SchemaConflictError",
    "UnresolvedCatalogError",
]
