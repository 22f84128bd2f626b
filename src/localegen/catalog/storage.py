"""Catalog storage: the per-locale catalog source for a generation run.

Components:
    CatalogStorage - Protocol for catalog sources (structural typing)
    MemoryStorage - Immutable in-memory implementation
    require_catalog - Lookup that turns a missing catalog into a typed error

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol

from localegen.catalog.types import LocaleCatalog, LocaleCode
from localegen.diagnostics import (
    ErrorTemplate,
    MissingDefaultLocaleError,
    UnresolvedCatalogError,
)

__all__ = [
    "CatalogStorage",
    "MemoryStorage",
    "require_catalog",
]


class CatalogStorage(Protocol):
    """Protocol for catalog sources.

    Implementations expose the default locale, enumerate every locale, and
    return each locale's sorted catalog. Nothing else is required.

    This is a Protocol (structural typing) rather than ABC to allow
    maximum flexibility for users implementing custom storages.

    Example:
        >>> class SingleLocale:
        ...     default_locale = "en"
        ...     def all_locales(self) -> tuple[str, ...]:
        ...         return ("en",)
        ...     def get(self, locale: str) -> LocaleCatalog | None:
        ...         return LocaleCatalog.from_mapping({"hello": "Hello"}) if locale == "en" else None
    """

    @property
    def default_locale(self) -> LocaleCode:
        """Locale whose catalog is the canonical key set."""
        ...

    def all_locales(self) -> tuple[LocaleCode, ...]:
        """Every locale, default first, in a stable order."""
        ...

    def get(self, locale: LocaleCode) -> LocaleCatalog | None:
        """Return the locale's catalog, or None if storage has none."""
        ...


@dataclass(frozen=True, slots=True)
class MemoryStorage:
    """Immutable in-memory catalog storage.

    Locales are ordered default first, then by code.

    Example:
        >>> storage = MemoryStorage(
        ...     {"en": LocaleCatalog.from_mapping({"hi": "Hi"}), "fr": LocaleCatalog()},
        ...     default_locale="en",
        ... )
        >>> storage.all_locales()
        ('en', 'fr')

    Attributes:
        catalogs: Locale code -> catalog
        default_locale: Locale whose catalog is the canonical key set
    """

    catalogs: Mapping[LocaleCode, LocaleCatalog]
    default_locale: LocaleCode
    _locales: tuple[LocaleCode, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Freeze the mapping and validate the default locale.

        Raises:
            MissingDefaultLocaleError: If the default locale has no catalog
        """
        if self.default_locale not in self.catalogs:
            raise MissingDefaultLocaleError(
                ErrorTemplate.default_locale_missing(self.default_locale)
            )
        object.__setattr__(self, "catalogs", MappingProxyType(dict(self.catalogs)))
        others = sorted(locale for locale in self.catalogs if locale != self.default_locale)
        object.__setattr__(self, "_locales", (self.default_locale, *others))

    def all_locales(self) -> tuple[LocaleCode, ...]:
        """Every locale, default first, then sorted by code."""
        return self._locales

    def get(self, locale: LocaleCode) -> LocaleCatalog | None:
        """Return the locale's catalog, or None if storage has none."""
        return self.catalogs.get(locale)


def require_catalog(storage: CatalogStorage, locale: LocaleCode) -> LocaleCatalog:
    """Return a locale's catalog or raise a typed error.

    The default locale is held to a stricter contract: its catalog must
    exist and be non-empty.

    Args:
        storage: Catalog source
        locale: Locale to look up

    Returns:
        The locale's catalog

    Raises:
        MissingDefaultLocaleError: If ``locale`` is the default and its
            catalog is missing or empty
        UnresolvedCatalogError: If a non-default locale has no catalog
    """
    catalog = storage.get(locale)
    if locale == storage.default_locale:
        if catalog is None:
            raise MissingDefaultLocaleError(ErrorTemplate.default_locale_missing(locale))
        if not catalog:
            raise MissingDefaultLocaleError(ErrorTemplate.default_catalog_empty(locale))
    elif catalog is None:
        raise UnresolvedCatalogError(ErrorTemplate.catalog_unresolved(locale))
    return catalog
