"""localegen - typed Python modules from per-locale string catalogs.

Compiles the default locale's catalog into a tree of frozen dataclasses,
reconciles every other locale against it (missing keys fall back to the
default locale's value), and renders one importable module holding the
record types, a locale enumeration and one instance per locale.

Public API:
    generate_locales - Generate module source from a catalog storage
    write_locales - Generate and write the module to disk
    PathCatalogLoader - Load TOML/JSON/YAML catalogs from a directory
    MemoryStorage - In-memory catalog storage
    LocaleCatalog - Sorted catalog of one locale
    CaseNaming - Default identifier naming
    load_config - Read [tool.localegen] from pyproject.toml

Exceptions:
    LocaleGenError - Base exception class
    MissingDefaultLocaleError - Default catalog missing or empty
    SchemaConflictError - Key paths cannot form record types
    UnresolvedCatalogError - Locale has no catalog
    InstanceMismatchError - Instance does not match the schema

Submodules:
    localegen.catalog - Catalog model, storage and file loading
    localegen.codegen - Schema compiler, fallback merge, emitters
    localegen.diagnostics - Error types, templates and formatting
    localegen.naming - Identifier naming
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .catalog import LocaleCatalog, MemoryStorage, PathCatalogLoader
from .codegen import GeneratedLocales, RenderOptions, generate_locales, write_locales
from .config import GeneratorConfig, load_config
from .diagnostics import (
    CatalogFormatError,
    ConfigurationError,
    GenerationStageError,
    InstanceMismatchError,
    LocaleGenError,
    MissingDefaultLocaleError,
    SchemaConflictError,
    UnresolvedCatalogError,
)
from .naming import CaseNaming, IdentifierNaming

# Version information - Auto-populated from package metadata
try:
    __version__ = _get_version("localegen")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CaseNaming",
    "CatalogFormatError",
    "ConfigurationError",
    "GeneratedLocales",
    "GenerationStageError",
    "GeneratorConfig",
    "IdentifierNaming",
    "InstanceMismatchError",
    "LocaleCatalog",
    "LocaleGenError",
    "MemoryStorage",
    "MissingDefaultLocaleError",
    "PathCatalogLoader",
    "RenderOptions",
    "SchemaConflictError",
    "UnresolvedCatalogError",
    "__version__",
    "generate_locales",
    "load_config",
    "write_locales",
]
