"""Tests for diagnostics: codes, templates, formatter and error hierarchy.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from localegen.diagnostics import (
    CatalogFormatError,
    ConfigurationError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    DuplicateKeyPathError,
    ErrorTemplate,
    GenerationStageError,
    IdentifierCollisionError,
    InstanceMismatchError,
    LocaleGenError,
    MissingDefaultLocaleError,
    OutputFormat,
    SchemaConflictError,
    UnresolvedCatalogError,
)


class TestDiagnosticCode:
    def test_codes_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low"),
        [
            (DiagnosticCode.DEFAULT_LOCALE_MISSING, 1000),
            (DiagnosticCode.SCHEMA_LEAF_PREFIX_CONFLICT, 2000),
            (DiagnosticCode.INSTANCE_MISSING_PATHS, 3000),
            (DiagnosticCode.CATALOG_PARSE_FAILED, 4000),
            (DiagnosticCode.STAGE_FAILED, 5000),
        ],
    )
    def test_code_ranges(self, code: DiagnosticCode, low: int) -> None:
        assert low < code.value < low + 1000


class TestFormatter:
    _DIAGNOSTIC = Diagnostic(
        code=DiagnosticCode.SCHEMA_DUPLICATE_PATH,
        message="Key 'home.title' is defined twice",
        hint="Remove one of the duplicate keys",
        key_path=("home", "title"),
        source_path="locales/en.toml",
        stage="schema compilation",
    )

    def test_rust_style(self) -> None:
        assert DiagnosticFormatter().format(self._DIAGNOSTIC) == (
            "error[SCHEMA_DUPLICATE_PATH]: Key 'home.title' is defined twice\n"
            "  --> locales/en.toml\n"
            "  --> key home.title\n"
            "  = stage: schema compilation\n"
            "  = help: Remove one of the duplicate keys"
        )

    def test_locale_shown_without_key(self) -> None:
        output = DiagnosticFormatter().format(ErrorTemplate.catalog_unresolved("fr"))
        assert "  --> locale fr" in output

    def test_simple_style(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(self._DIAGNOSTIC) == (
            "SCHEMA_DUPLICATE_PATH: Key 'home.title' is defined twice"
        )

    def test_json_style(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(self._DIAGNOSTIC))
        assert data["code"] == "SCHEMA_DUPLICATE_PATH"
        assert data["code_value"] == 2002
        assert data["key_path"] == ["home", "title"]
        assert data["stage"] == "schema compilation"

    def test_color(self) -> None:
        output = DiagnosticFormatter(color=True).format(self._DIAGNOSTIC)
        assert output.startswith("\033[1;31merror\033[0m")

    def test_format_all(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format_all([self._DIAGNOSTIC, ErrorTemplate.catalog_unresolved("fr")])
        assert output.count("\n\n") == 1

    @given(path=st.lists(st.text(min_size=1, max_size=10), min_size=1, max_size=5))
    def test_json_always_parses(self, path: list[str]) -> None:
        """PROPERTY: JSON output is valid JSON for any key path."""
        diagnostic = ErrorTemplate.duplicate_path(path)
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        assert json.loads(formatter.format(diagnostic))["key_path"] == path


class TestErrorHierarchy:
    @pytest.mark.parametrize(
        "error_type",
        [
            MissingDefaultLocaleError,
            UnresolvedCatalogError,
            SchemaConflictError,
            InstanceMismatchError,
            ConfigurationError,
        ],
    )
    def test_all_are_locale_gen_errors(self, error_type: type[LocaleGenError]) -> None:
        assert issubclass(error_type, LocaleGenError)

    def test_subclasses(self) -> None:
        assert issubclass(IdentifierCollisionError, SchemaConflictError)
        assert issubclass(DuplicateKeyPathError, CatalogFormatError)

    def test_plain_message(self) -> None:
        error = ConfigurationError("bad")
        assert error.diagnostic is None
        assert error.format_error() == "bad"

    def test_plain_message_shows_notes(self) -> None:
        error = ConfigurationError("bad")
        error.add_note("during load")
        assert error.format_error() == "bad\n  = note: during load"

    def test_diagnostic_message(self) -> None:
        error = UnresolvedCatalogError(ErrorTemplate.catalog_unresolved("fr"))
        assert str(error) == "No catalog found for locale 'fr'"
        assert error.format_error().startswith("error[CATALOG_UNRESOLVED]")

    def test_stage_error_attributes(self) -> None:
        cause = OSError("disk full")
        error = GenerationStageError(
            ErrorTemplate.stage_failed("write", cause), stage="write", locale=None
        )
        assert error.stage == "write"
        assert error.diagnostic is not None
        assert error.diagnostic.message == "write failed: OSError: disk full"


class TestTemplates:
    def test_leaf_prefix_conflict(self) -> None:
        diagnostic = ErrorTemplate.leaf_prefix_conflict(("a",), ("a", "b"))
        assert diagnostic.message == "Key 'a' is both a string and a group (used by 'a.b')"

    def test_identifier_collision(self) -> None:
        diagnostic = ErrorTemplate.identifier_collision("sign_in", ("sign-in",), ("sign_in",))
        assert "'sign-in' and 'sign_in' both map to identifier 'sign_in'" in diagnostic.message

    def test_depth_exceeded(self) -> None:
        diagnostic = ErrorTemplate.depth_exceeded(("a",) * 3, 2)
        assert diagnostic.message == "Key path has 3 segments, maximum is 2"

    def test_default_catalog_empty_with_locale(self) -> None:
        assert "'en'" in ErrorTemplate.default_catalog_empty("en").message
        assert ErrorTemplate.default_catalog_empty().locale is None
