"""Catalog loading from a locales directory.

Each catalog file holds one locale's nested key hierarchy; the locale code is
the file stem (``locales/en.toml``, ``locales/pt-BR.yaml``). Supported formats:

- TOML via ``tomllib``
- JSON via ``json``
- YAML via PyYAML (``yaml.safe_load``)

Components:
    parse_catalog_source - Parse catalog text in a given format to a catalog
    PathCatalogLoader - Directory scanner with path-traversal prevention

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from localegen.catalog.storage import MemoryStorage
from localegen.catalog.types import LocaleCatalog, LocaleCode
from localegen.constants import CATALOG_SUFFIXES
from localegen.diagnostics import CatalogFormatError, ErrorTemplate
from localegen.enums import CatalogFormat

__all__ = [
    "PathCatalogLoader",
    "parse_catalog_source",
]

logger = logging.getLogger(__name__)


def _decode(source: str, fmt: CatalogFormat) -> object:
    match fmt:
        case CatalogFormat.TOML:
            return tomllib.loads(source)
        case CatalogFormat.JSON:
            return json.loads(source)
        case CatalogFormat.YAML:
            return yaml.safe_load(source)


def parse_catalog_source(
    source: str,
    fmt: CatalogFormat,
    *,
    source_path: str | None = None,
) -> LocaleCatalog:
    """Parse catalog text into a sorted LocaleCatalog.

    Args:
        source: Catalog file contents
        fmt: Serialization format of ``source``
        source_path: File path for diagnostics (optional)

    Returns:
        Sorted catalog

    Raises:
        CatalogFormatError: If the text cannot be parsed, is not a mapping at
            the top level, or contains non-string keys or values
        DuplicateKeyPathError: If two entries flatten to the same key path

    Example:
        >>> catalog = parse_catalog_source('[home]\\ntitle = "Welcome"\\n', CatalogFormat.TOML)
        >>> catalog.paths()
        (('home', 'title'),)
    """
    described = source_path or f"<{fmt} source>"
    try:
        data = _decode(source, fmt)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise CatalogFormatError(
            ErrorTemplate.catalog_parse_failed(described, str(e)),
            source_path=source_path,
        ) from e

    # An empty YAML document loads as None
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        reason = f"top-level value must be a mapping, got {type(data).__name__}"
        raise CatalogFormatError(
            ErrorTemplate.catalog_parse_failed(described, reason),
            source_path=source_path,
        )

    try:
        return LocaleCatalog.from_mapping(data)
    except CatalogFormatError as e:
        if e.diagnostic is None or source_path is None:
            raise
        diagnostic = dataclasses.replace(e.diagnostic, source_path=source_path)
        raise type(e)(diagnostic, source_path=source_path) from e


@dataclass(frozen=True, slots=True)
class PathCatalogLoader:
    """File system catalog loader for one locales directory.

    Scans ``base_path`` (non-recursively) for files whose suffix is a known
    catalog format. Hidden files and unknown suffixes are ignored.

    Security:
        Locale codes containing path separators or ".." are rejected, and
        every catalog path is validated against the resolved base directory.

    Example:
        >>> loader = PathCatalogLoader("locales")
        >>> storage = loader.load_storage(default_locale="en")
        # Loads locales/en.toml, locales/fr.yaml, ...

    Attributes:
        base_path: Directory containing one catalog file per locale
    """

    base_path: str | Path
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache the resolved base directory."""
        object.__setattr__(self, "_resolved_root", Path(self.base_path).resolve())

    @staticmethod
    def _validate_locale(locale: LocaleCode) -> None:
        """Validate locale code for path traversal attacks.

        Raises:
            ValueError: If locale contains unsafe path components
        """
        if not locale:
            msg = "Locale code cannot be empty"
            raise ValueError(msg)
        if ".." in locale:
            msg = f"Path traversal sequences not allowed in locale: '{locale}'"
            raise ValueError(msg)
        if "/" in locale or "\\" in locale:
            msg = f"Path separators not allowed in locale: '{locale}'"
            raise ValueError(msg)

    def _is_safe_path(self, full_path: Path) -> bool:
        """Check if full_path resolves inside the base directory."""
        try:
            full_path.resolve().relative_to(self._resolved_root)
        except ValueError:
            return False
        return True

    def discover(self) -> dict[LocaleCode, Path]:
        """Map every locale in the directory to its catalog file.

        Returns:
            Locale code -> catalog file path, sorted by locale code

        Raises:
            CatalogFormatError: If two files declare the same locale
            OSError: If the directory cannot be listed
        """
        found: dict[LocaleCode, Path] = {}
        for path in sorted(self._resolved_root.iterdir()):
            if path.name.startswith(".") or path.suffix not in CATALOG_SUFFIXES:
                continue
            if not path.is_file():
                continue
            locale = path.stem
            self._validate_locale(locale)
            if locale in found:
                raise CatalogFormatError(
                    ErrorTemplate.catalog_duplicate_locale(locale, str(found[locale]), str(path)),
                    source_path=str(path),
                )
            found[locale] = path
        return dict(sorted(found.items()))

    def load_file(self, path: Path) -> LocaleCatalog:
        """Read and parse one catalog file.

        Raises:
            ValueError: If the path escapes the base directory
            CatalogFormatError: If the file is malformed
            OSError: If the file cannot be read
        """
        if not self._is_safe_path(path):
            msg = f"Path traversal detected: '{path}' escapes '{self._resolved_root}'"
            raise ValueError(msg)
        fmt = CatalogFormat(CATALOG_SUFFIXES[path.suffix])
        try:
            source = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise CatalogFormatError(
                ErrorTemplate.catalog_parse_failed(str(path), str(e)),
                source_path=str(path),
            ) from e
        catalog = parse_catalog_source(source, fmt, source_path=str(path))
        logger.debug("Loaded %d entries from %s", len(catalog), path)
        return catalog

    def load(self, locale: LocaleCode) -> LocaleCatalog | None:
        """Load one locale's catalog, or None if the directory has none."""
        self._validate_locale(locale)
        path = self.discover().get(locale)
        if path is None:
            return None
        return self.load_file(path)

    def load_storage(self, default_locale: LocaleCode) -> MemoryStorage:
        """Load every catalog in the directory into memory.

        Args:
            default_locale: Locale whose catalog is the canonical key set

        Returns:
            Storage holding all catalogs

        Raises:
            MissingDefaultLocaleError: If no file provides the default locale
            CatalogFormatError: If any catalog file is malformed
            OSError: If the directory or a file cannot be read
        """
        catalogs = {locale: self.load_file(path) for locale, path in self.discover().items()}
        logger.info(
            "Loaded %d catalog(s) from %s (default: %s)",
            len(catalogs),
            self._resolved_root,
            default_locale,
        )
        return MemoryStorage(catalogs, default_locale=default_locale)
