"""Catalog package: data model, storage and file loading.

Submodules:
    types   - KeyPath, CatalogEntry, LocaleCatalog and the shared path ordering
    storage - CatalogStorage protocol, MemoryStorage, require_catalog
    loading - PathCatalogLoader and parse_catalog_source (TOML, JSON, YAML)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from localegen.catalog.loading import PathCatalogLoader, parse_catalog_source
from localegen.catalog.storage import CatalogStorage, MemoryStorage, require_catalog
from localegen.catalog.types import (
    CatalogEntry,
    KeyPath,
    LocaleCatalog,
    LocaleCode,
    common_prefix_length,
    compare_paths,
    entry_sort_key,
    flatten_mapping,
    validate_key_path,
)

__all__ = [
    # Data model
    "CatalogEntry",
    "KeyPath",
    "LocaleCatalog",
    "LocaleCode",
    # Ordering and validation
    "common_prefix_length",
    "compare_paths",
    "entry_sort_key",
    "flatten_mapping",
    "validate_key_path",
    # Storage
    "CatalogStorage",
    "MemoryStorage",
    "require_catalog",
    # Loading
    "PathCatalogLoader",
    "parse_catalog_source",
]
