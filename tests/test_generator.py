"""Tests for codegen/generator.py: stage ordering, failures and logging.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pytest

from localegen.catalog import LocaleCatalog, MemoryStorage, PathCatalogLoader
from localegen.codegen import FallbackRef, generate_locales, load_catalogs, write_locales
from localegen.diagnostics import (
    CatalogFormatError,
    GenerationStageError,
    MissingDefaultLocaleError,
    SchemaConflictError,
    UnresolvedCatalogError,
)


@dataclass
class _ListedStorage:
    """Storage that lists locales it cannot provide."""

    catalogs: dict[str, LocaleCatalog]
    default_locale: str
    listed: tuple[str, ...]

    def all_locales(self) -> tuple[str, ...]:
        return self.listed

    def get(self, locale: str) -> LocaleCatalog | None:
        return self.catalogs.get(locale)


@dataclass
class _BrokenStorage:
    default_locale: str = "en"

    def all_locales(self) -> tuple[str, ...]:
        return ("en",)

    def get(self, locale: str) -> LocaleCatalog | None:
        msg = "storage offline"
        raise ConnectionError(msg)


class TestGenerateLocales:
    def test_result_contents(self, storage: MemoryStorage) -> None:
        generated = generate_locales(storage)

        assert generated.default_locale == "en"
        assert [b.locale for b in generated.bindings] == ["en", "fr"]
        assert set(generated.instances) == {"en", "fr"}
        assert set(generated.merges) == {"fr"}
        assert generated.merges["fr"].literal_count == 2
        assert generated.instances["fr"] in generated.source

    def test_default_only(self, en_catalog: LocaleCatalog) -> None:
        generated = generate_locales(MemoryStorage({"en": en_catalog}, default_locale="en"))
        assert generated.merges == {}
        assert "STRINGS_DEFAULT: Final[Strings]" in generated.source

    def test_empty_default(self) -> None:
        storage = MemoryStorage({"en": LocaleCatalog()}, default_locale="en")
        with pytest.raises(MissingDefaultLocaleError) as exc_info:
            generate_locales(storage)
        assert any("load" in note for note in exc_info.value.__notes__)

    def test_missing_default(self, en_catalog: LocaleCatalog) -> None:
        with pytest.raises(MissingDefaultLocaleError):
            MemoryStorage({"fr": en_catalog}, default_locale="en")

    def test_unresolved_locale(self, en_catalog: LocaleCatalog) -> None:
        storage = _ListedStorage({"en": en_catalog}, "en", ("en", "fr"))
        with pytest.raises(UnresolvedCatalogError) as exc_info:
            generate_locales(storage)
        assert exc_info.value.__notes__ == ["during load for locale 'fr'"]
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.stage == "load"
        assert exc_info.value.diagnostic.locale == "fr"

    def test_schema_conflict_names_stage(self) -> None:
        storage = MemoryStorage(
            {"en": LocaleCatalog.from_pairs([(("a",), "A"), (("a", "b"), "B")])},
            default_locale="en",
        )
        with pytest.raises(SchemaConflictError) as exc_info:
            generate_locales(storage)
        assert exc_info.value.__notes__ == ["during schema compilation"]
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.stage == "schema compilation"
        assert "= stage: schema compilation" in exc_info.value.format_error()

    def test_collaborator_failure_is_wrapped(self) -> None:
        with pytest.raises(GenerationStageError) as exc_info:
            generate_locales(_BrokenStorage())
        error = exc_info.value
        assert error.stage == "load"
        assert isinstance(error.__cause__, ConnectionError)
        assert error.diagnostic is not None
        assert "storage offline" in error.diagnostic.message

    def test_extraneous_paths_logged(
        self, en_catalog: LocaleCatalog, caplog: pytest.LogCaptureFixture
    ) -> None:
        fr = LocaleCatalog.from_mapping({"title": "Nouvelles", "obsolete": "x"})
        storage = MemoryStorage({"en": en_catalog, "fr": fr}, default_locale="en")

        with caplog.at_level(logging.WARNING, logger="localegen.codegen.generator"):
            generated = generate_locales(storage)

        assert generated.merges["fr"].dropped == (("obsolete",),)
        assert "obsolete" in caplog.text
        assert "fr" in caplog.text

    def test_extraneous_paths_do_not_change_output(self, en_catalog: LocaleCatalog) -> None:
        fr = LocaleCatalog.from_mapping({"title": "Nouvelles"})
        fr_extra = LocaleCatalog.from_mapping({"title": "Nouvelles", "zzz": "x"})
        plain = generate_locales(MemoryStorage({"en": en_catalog, "fr": fr}, default_locale="en"))
        extra = generate_locales(
            MemoryStorage({"en": en_catalog, "fr": fr_extra}, default_locale="en")
        )
        assert plain.source == extra.source

    def test_untranslated_locale_is_all_fallback(self, en_catalog: LocaleCatalog) -> None:
        storage = MemoryStorage({"en": en_catalog, "de": LocaleCatalog()}, default_locale="en")
        merged = generate_locales(storage).merges["de"]
        assert all(isinstance(entry.value, FallbackRef) for entry in merged.entries)


class TestWriteLocales:
    def test_writes_module(self, tmp_path: Path, storage: MemoryStorage) -> None:
        path = write_locales(tmp_path / "out" / "pkg", storage)
        assert path == tmp_path / "out" / "pkg" / "locales.py"
        assert path.read_text(encoding="utf-8") == generate_locales(storage).source

    def test_custom_file_name(self, tmp_path: Path, storage: MemoryStorage) -> None:
        path = write_locales(tmp_path, storage, file_name="strings.py")
        assert path.name == "strings.py"

    def test_failure_writes_nothing(self, tmp_path: Path) -> None:
        storage = MemoryStorage({"en": LocaleCatalog()}, default_locale="en")
        with pytest.raises(MissingDefaultLocaleError):
            write_locales(tmp_path, storage)
        assert not (tmp_path / "locales.py").exists()

    def test_unwritable_target(self, tmp_path: Path, storage: MemoryStorage) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(GenerationStageError) as exc_info:
            write_locales(blocker / "sub", storage)
        assert exc_info.value.stage == "write"


class TestLoadCatalogs:
    def test_loads_directory(self, locales_dir: Path) -> None:
        storage = load_catalogs(PathCatalogLoader(locales_dir), "en")
        assert storage.all_locales() == ("en", "de", "fr")

    def test_missing_directory_names_stage(self, tmp_path: Path) -> None:
        with pytest.raises(GenerationStageError) as exc_info:
            load_catalogs(PathCatalogLoader(tmp_path / "absent"), "en")
        error = exc_info.value
        assert error.stage == "load"
        assert isinstance(error.__cause__, FileNotFoundError)

    def test_missing_default_names_stage(self, locales_dir: Path) -> None:
        with pytest.raises(MissingDefaultLocaleError) as exc_info:
            load_catalogs(PathCatalogLoader(locales_dir), "ja")
        assert exc_info.value.__notes__ == ["during load"]
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.stage == "load"

    def test_malformed_file_names_stage(self, locales_dir: Path) -> None:
        (locales_dir / "fr.yaml").write_text("home: [\n", encoding="utf-8")
        with pytest.raises(CatalogFormatError) as exc_info:
            load_catalogs(PathCatalogLoader(locales_dir), "en")
        assert "  = stage: load" in exc_info.value.format_error()
