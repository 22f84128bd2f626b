"""Tests for catalog/storage.py and catalog/loading.py.

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from localegen.catalog import (
    LocaleCatalog,
    MemoryStorage,
    PathCatalogLoader,
    parse_catalog_source,
    require_catalog,
)
from localegen.diagnostics import (
    CatalogFormatError,
    DiagnosticCode,
    DuplicateKeyPathError,
    MissingDefaultLocaleError,
    UnresolvedCatalogError,
)
from localegen.enums import CatalogFormat


class TestMemoryStorage:
    def test_locales_default_first(self, en_catalog: LocaleCatalog) -> None:
        storage = MemoryStorage(
            {"fr": LocaleCatalog(), "de": LocaleCatalog(), "en": en_catalog},
            default_locale="en",
        )
        assert storage.all_locales() == ("en", "de", "fr")

    def test_missing_default(self) -> None:
        with pytest.raises(MissingDefaultLocaleError) as exc_info:
            MemoryStorage({"fr": LocaleCatalog()}, default_locale="en")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.DEFAULT_LOCALE_MISSING

    def test_catalogs_are_read_only(self, storage: MemoryStorage) -> None:
        with pytest.raises(TypeError):
            storage.catalogs["de"] = LocaleCatalog()  # type: ignore[index]

    def test_get_unknown_locale(self, storage: MemoryStorage) -> None:
        assert storage.get("ja") is None


class TestRequireCatalog:
    def test_returns_catalog(self, storage: MemoryStorage, fr_catalog: LocaleCatalog) -> None:
        assert require_catalog(storage, "fr") == fr_catalog

    def test_unresolved(self, storage: MemoryStorage) -> None:
        with pytest.raises(UnresolvedCatalogError) as exc_info:
            require_catalog(storage, "ja")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.locale == "ja"

    def test_empty_default(self) -> None:
        storage = MemoryStorage({"en": LocaleCatalog()}, default_locale="en")
        with pytest.raises(MissingDefaultLocaleError) as exc_info:
            require_catalog(storage, "en")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.DEFAULT_CATALOG_EMPTY

    def test_empty_non_default_is_allowed(self, en_catalog: LocaleCatalog) -> None:
        storage = MemoryStorage({"en": en_catalog, "fr": LocaleCatalog()}, default_locale="en")
        assert not require_catalog(storage, "fr")


class TestParseCatalogSource:
    @pytest.mark.parametrize(
        ("source", "fmt"),
        [
            ('[home]\ntitle = "Welcome"\n', CatalogFormat.TOML),
            ('{"home": {"title": "Welcome"}}', CatalogFormat.JSON),
            ("home:\n  title: Welcome\n", CatalogFormat.YAML),
        ],
    )
    def test_formats(self, source: str, fmt: CatalogFormat) -> None:
        catalog = parse_catalog_source(source, fmt)
        assert catalog.paths() == (("home", "title"),)
        assert catalog[0].value == "Welcome"

    def test_empty_yaml_document(self) -> None:
        assert not parse_catalog_source("", CatalogFormat.YAML)

    def test_syntax_error(self) -> None:
        with pytest.raises(CatalogFormatError) as exc_info:
            parse_catalog_source("[home", CatalogFormat.TOML, source_path="en.toml")
        error = exc_info.value
        assert error.source_path == "en.toml"
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.CATALOG_PARSE_FAILED
        assert isinstance(error.__cause__, ValueError)

    def test_top_level_must_be_mapping(self) -> None:
        with pytest.raises(CatalogFormatError):
            parse_catalog_source('["a", "b"]', CatalogFormat.JSON)

    def test_yaml_non_string_value(self) -> None:
        with pytest.raises(CatalogFormatError) as exc_info:
            parse_catalog_source("count: 3\n", CatalogFormat.YAML, source_path="fr.yaml")
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.CATALOG_VALUE_INVALID
        assert diagnostic.source_path == "fr.yaml"

    def test_toml_dotted_keys_flatten(self) -> None:
        catalog = parse_catalog_source('home.title = "Welcome"\n', CatalogFormat.TOML)
        assert catalog.paths() == (("home", "title"),)


class TestPathCatalogLoader:
    def test_discover(self, locales_dir: Path) -> None:
        found = PathCatalogLoader(locales_dir).discover()
        assert list(found) == ["de", "en", "fr"]
        assert found["fr"].name == "fr.yaml"

    def test_discover_skips_hidden_and_unknown(self, locales_dir: Path) -> None:
        (locales_dir / ".draft.toml").write_text('x = "y"\n', encoding="utf-8")
        (locales_dir / "notes.txt").write_text("notes", encoding="utf-8")
        (locales_dir / "nested.toml").mkdir()
        assert list(PathCatalogLoader(locales_dir).discover()) == ["de", "en", "fr"]

    def test_duplicate_locale(self, locales_dir: Path) -> None:
        (locales_dir / "fr.json").write_text('{"home": {"title": "x"}}', encoding="utf-8")
        with pytest.raises(CatalogFormatError) as exc_info:
            PathCatalogLoader(locales_dir).discover()
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.CATALOG_DUPLICATE_LOCALE

    def test_load(self, locales_dir: Path) -> None:
        catalog = PathCatalogLoader(locales_dir).load("de")
        assert catalog is not None
        assert catalog.paths() == (("home", "body"),)

    def test_load_invalid_utf8(self, locales_dir: Path) -> None:
        path = locales_dir / "de.json"
        path.write_bytes(b'{"title": "caf\xe9"}')
        with pytest.raises(CatalogFormatError) as exc_info:
            PathCatalogLoader(locales_dir).load("de")
        error = exc_info.value
        assert error.source_path == str(path.resolve())
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.CATALOG_PARSE_FAILED
        assert isinstance(error.__cause__, UnicodeDecodeError)

    def test_load_unknown_locale(self, locales_dir: Path) -> None:
        assert PathCatalogLoader(locales_dir).load("ja") is None

    @pytest.mark.parametrize("locale", ["../en", "en/../../etc", "a\\b", ""])
    def test_load_rejects_traversal(self, locales_dir: Path, locale: str) -> None:
        with pytest.raises(ValueError, match="locale|Locale"):
            PathCatalogLoader(locales_dir).load(locale)

    def test_load_file_outside_root(self, locales_dir: Path, tmp_path: Path) -> None:
        outside = tmp_path / "outside.toml"
        outside.write_text('x = "y"\n', encoding="utf-8")
        with pytest.raises(ValueError, match="traversal"):
            PathCatalogLoader(locales_dir).load_file(outside)

    def test_load_storage(self, locales_dir: Path) -> None:
        storage = PathCatalogLoader(locales_dir).load_storage("en")
        assert storage.all_locales() == ("en", "de", "fr")
        assert storage.get("fr") == LocaleCatalog.from_mapping({"home": {"title": "Bienvenue"}})

    def test_load_storage_missing_default(self, locales_dir: Path) -> None:
        with pytest.raises(MissingDefaultLocaleError):
            PathCatalogLoader(locales_dir).load_storage("ja")

    def test_flattened_duplicate(self) -> None:
        with pytest.raises(DuplicateKeyPathError):
            LocaleCatalog.from_pairs([(("a", "b"), "1"), (["a", "b"], "2")])
