"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


def _dotted(path: Sequence[str]) -> str:
    return ".".join(path)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and consistent, and documents every error case
    in one place.
    """

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    @staticmethod
    def default_locale_missing(locale: str) -> Diagnostic:
        """Default locale has no catalog in storage.

        Args:
            locale: The configured default locale code

        Returns:
            Diagnostic for DEFAULT_LOCALE_MISSING
        """
        msg = f"Default locale '{locale}' has no catalog"
        return Diagnostic(
            code=DiagnosticCode.DEFAULT_LOCALE_MISSING,
            message=msg,
            hint="Add a catalog file for the default locale or change the default",
            locale=locale,
        )

    @staticmethod
    def default_catalog_empty(locale: str | None = None) -> Diagnostic:
        """Default catalog exists but contains no keys.

        Args:
            locale: The default locale code, when known

        Returns:
            Diagnostic for DEFAULT_CATALOG_EMPTY
        """
        if locale is None:
            msg = "Default catalog is empty"
        else:
            msg = f"Default catalog for locale '{locale}' is empty"
        return Diagnostic(
            code=DiagnosticCode.DEFAULT_CATALOG_EMPTY,
            message=msg,
            hint="The default locale defines the complete key set and needs at least one key",
            locale=locale,
        )

    @staticmethod
    def catalog_unresolved(locale: str) -> Diagnostic:
        """Referenced locale has no catalog in storage.

        Args:
            locale: The locale code that could not be resolved

        Returns:
            Diagnostic for CATALOG_UNRESOLVED
        """
        msg = f"No catalog found for locale '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.CATALOG_UNRESOLVED,
            message=msg,
            hint="Add a catalog file for the locale or remove it from the locale list",
            locale=locale,
        )

    # ------------------------------------------------------------------
    # Schema
    # ------------------------------------------------------------------

    @staticmethod
    def leaf_prefix_conflict(leaf: Sequence[str], nested: Sequence[str]) -> Diagnostic:
        """Key path is both a string and a prefix of a longer key path.

        Args:
            leaf: Path holding a string value
            nested: Longer path that uses the leaf as a prefix

        Returns:
            Diagnostic for SCHEMA_LEAF_PREFIX_CONFLICT
        """
        msg = f"Key '{_dotted(leaf)}' is both a string and a group (used by '{_dotted(nested)}')"
        return Diagnostic(
            code=DiagnosticCode.SCHEMA_LEAF_PREFIX_CONFLICT,
            message=msg,
            hint="Rename the string key or move its value inside the group",
            key_path=tuple(nested),
        )

    @staticmethod
    def duplicate_path(path: Sequence[str]) -> Diagnostic:
        """Same key path appears twice in the schema input.

        Args:
            path: The repeated key path

        Returns:
            Diagnostic for SCHEMA_DUPLICATE_PATH
        """
        msg = f"Key '{_dotted(path)}' is defined twice"
        return Diagnostic(
            code=DiagnosticCode.SCHEMA_DUPLICATE_PATH,
            message=msg,
            hint="Remove one of the duplicate keys",
            key_path=tuple(path),
        )

    @staticmethod
    def group_split(prefix: Sequence[str], path: Sequence[str]) -> Diagnostic:
        """A group's key paths are not contiguous in the schema input.

        Args:
            prefix: Group whose paths were interrupted by another group
            path: Key path that reopened the group

        Returns:
            Diagnostic for SCHEMA_GROUP_SPLIT
        """
        msg = f"Keys of group '{_dotted(prefix)}' are not contiguous (reopened by '{_dotted(path)}')"
        return Diagnostic(
            code=DiagnosticCode.SCHEMA_GROUP_SPLIT,
            message=msg,
            hint="Sort the key paths before compiling the schema",
            key_path=tuple(path),
        )

    @staticmethod
    def depth_exceeded(path: Sequence[str], max_depth: int) -> Diagnostic:
        """Key path nests deeper than the supported limit.

        Args:
            path: The offending key path
            max_depth: Maximum allowed number of segments

        Returns:
            Diagnostic for SCHEMA_DEPTH_EXCEEDED
        """
        msg = f"Key path has {len(path)} segments, maximum is {max_depth}"
        return Diagnostic(
            code=DiagnosticCode.SCHEMA_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten the key hierarchy",
            key_path=tuple(path),
        )

    @staticmethod
    def identifier_collision(identifier: str, first: Sequence[str], second: Sequence[str]) -> Diagnostic:
        """Two distinct names map to the same generated identifier.

        Args:
            identifier: The colliding generated identifier
            first: Name (segments) that produced the identifier first
            second: Name (segments) that produced it again

        Returns:
            Diagnostic for IDENTIFIER_COLLISION
        """
        msg = (
            f"'{_dotted(first)}' and '{_dotted(second)}' both map to "
            f"identifier '{identifier}'"
        )
        return Diagnostic(
            code=DiagnosticCode.IDENTIFIER_COLLISION,
            message=msg,
            hint="Rename one of the keys so their generated names differ",
            key_path=tuple(second),
        )

    @staticmethod
    def identifier_invalid(name: str, identifier: str) -> Diagnostic:
        """Name cannot be converted to a valid Python identifier.

        Args:
            name: The source name (segment or locale code)
            identifier: The identifier the naming produced

        Returns:
            Diagnostic for IDENTIFIER_INVALID
        """
        msg = f"'{name}' produces invalid identifier '{identifier}'"
        return Diagnostic(
            code=DiagnosticCode.IDENTIFIER_INVALID,
            message=msg,
            hint="Use keys containing at least one letter or digit",
        )

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    @staticmethod
    def instance_unknown_path(path: Sequence[str], locale: str | None = None) -> Diagnostic:
        """Instance entry path is not a leaf of the schema.

        Args:
            path: The entry path
            locale: Locale being emitted, when known

        Returns:
            Diagnostic for INSTANCE_UNKNOWN_PATH
        """
        msg = f"Key '{_dotted(path)}' is not a string field of the schema"
        return Diagnostic(
            code=DiagnosticCode.INSTANCE_UNKNOWN_PATH,
            message=msg,
            hint="Instances must be emitted from entries sorted like the default catalog",
            key_path=tuple(path),
            locale=locale,
        )

    @staticmethod
    def instance_missing_paths(missing: int, first: Sequence[str], locale: str | None = None) -> Diagnostic:
        """Instance entries do not cover every schema leaf.

        Args:
            missing: Number of schema leaves without an entry
            first: First uncovered leaf path
            locale: Locale being emitted, when known

        Returns:
            Diagnostic for INSTANCE_MISSING_PATHS
        """
        msg = f"{missing} schema field(s) have no value, first is '{_dotted(first)}'"
        return Diagnostic(
            code=DiagnosticCode.INSTANCE_MISSING_PATHS,
            message=msg,
            hint="Merge non-default catalogs with the default catalog before emitting",
            key_path=tuple(first),
            locale=locale,
        )

    @staticmethod
    def instance_out_of_order(path: Sequence[str], previous: Sequence[str], locale: str | None = None) -> Diagnostic:
        """Instance entries are not strictly increasing in key path order.

        Args:
            path: The entry path
            previous: The entry path emitted just before it
            locale: Locale being emitted, when known

        Returns:
            Diagnostic for INSTANCE_OUT_OF_ORDER
        """
        msg = f"Key '{_dotted(path)}' does not sort after '{_dotted(previous)}'"
        return Diagnostic(
            code=DiagnosticCode.INSTANCE_OUT_OF_ORDER,
            message=msg,
            hint="Sort catalogs with the shared key path ordering and remove duplicates",
            key_path=tuple(path),
            locale=locale,
        )

    # ------------------------------------------------------------------
    # Catalog files
    # ------------------------------------------------------------------

    @staticmethod
    def catalog_parse_failed(source_path: str, reason: str) -> Diagnostic:
        """Catalog file could not be parsed.

        Args:
            source_path: Path of the catalog file
            reason: Parser error message

        Returns:
            Diagnostic for CATALOG_PARSE_FAILED
        """
        msg = f"Failed to parse catalog: {reason}"
        return Diagnostic(
            code=DiagnosticCode.CATALOG_PARSE_FAILED,
            message=msg,
            source_path=source_path,
        )

    @staticmethod
    def catalog_value_invalid(path: Sequence[str], type_name: str) -> Diagnostic:
        """Catalog leaf value is not a string.

        Args:
            path: Key path of the value
            type_name: Python type name of the offending value

        Returns:
            Diagnostic for CATALOG_VALUE_INVALID
        """
        msg = f"Value of '{_dotted(path)}' must be a string, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.CATALOG_VALUE_INVALID,
            message=msg,
            hint="Quote the value so the catalog format reads it as a string",
            key_path=tuple(path),
        )

    @staticmethod
    def catalog_key_invalid(path: Sequence[object]) -> Diagnostic:
        """Catalog key path is empty or has a non-string or empty segment.

        Args:
            path: The offending key path

        Returns:
            Diagnostic for CATALOG_KEY_INVALID
        """
        msg = f"Invalid key path {tuple(path)!r}"
        return Diagnostic(
            code=DiagnosticCode.CATALOG_KEY_INVALID,
            message=msg,
            hint="Key paths need at least one segment and every segment must be a non-empty string",
        )

    @staticmethod
    def catalog_duplicate_path(path: Sequence[str]) -> Diagnostic:
        """Same key path appears twice in one catalog.

        Args:
            path: The repeated key path

        Returns:
            Diagnostic for CATALOG_DUPLICATE_PATH
        """
        msg = f"Key '{_dotted(path)}' appears more than once in the catalog"
        return Diagnostic(
            code=DiagnosticCode.CATALOG_DUPLICATE_PATH,
            message=msg,
            key_path=tuple(path),
        )

    @staticmethod
    def catalog_duplicate_locale(locale: str, first: str, second: str) -> Diagnostic:
        """Two catalog files declare the same locale.

        Args:
            locale: The locale code
            first: First catalog file
            second: Second catalog file

        Returns:
            Diagnostic for CATALOG_DUPLICATE_LOCALE
        """
        msg = f"Locale '{locale}' is defined by both '{first}' and '{second}'"
        return Diagnostic(
            code=DiagnosticCode.CATALOG_DUPLICATE_LOCALE,
            message=msg,
            hint="Keep exactly one catalog file per locale",
            locale=locale,
            source_path=second,
        )

    # ------------------------------------------------------------------
    # Configuration and orchestration
    # ------------------------------------------------------------------

    @staticmethod
    def config_section_missing(source_path: str, section: str) -> Diagnostic:
        """Configuration file has no localegen section.

        Args:
            source_path: Path of the configuration file
            section: Dotted name of the expected table

        Returns:
            Diagnostic for CONFIG_SECTION_MISSING
        """
        msg = f"Missing [{section}] table"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_SECTION_MISSING,
            message=msg,
            hint="Add the table with the 'locales', 'default-locale' and 'output' keys",
            source_path=source_path,
        )

    @staticmethod
    def config_parse_failed(source_path: str, reason: str) -> Diagnostic:
        """Configuration file is not valid TOML.

        Args:
            source_path: Path of the configuration file
            reason: Parser error message

        Returns:
            Diagnostic for CONFIG_PARSE_FAILED
        """
        msg = f"Failed to parse configuration: {reason}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_PARSE_FAILED,
            message=msg,
            source_path=source_path,
        )

    @staticmethod
    def config_value_invalid(key: str, reason: str, source_path: str | None = None) -> Diagnostic:
        """Configuration value is missing or has the wrong type.

        Args:
            key: Configuration key
            reason: What is wrong with it
            source_path: Path of the configuration file, when known

        Returns:
            Diagnostic for CONFIG_VALUE_INVALID
        """
        msg = f"Invalid configuration value '{key}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_VALUE_INVALID,
            message=msg,
            source_path=source_path,
        )

    @staticmethod
    def stage_failed(stage: str, error: BaseException, locale: str | None = None) -> Diagnostic:
        """Collaborator failure surfaced during a generation stage.

        Args:
            stage: Name of the failing stage
            error: The underlying exception
            locale: Locale being processed, when known

        Returns:
            Diagnostic for STAGE_FAILED
        """
        msg = f"{stage} failed: {type(error).__name__}: {error}"
        return Diagnostic(
            code=DiagnosticCode.STAGE_FAILED,
            message=msg,
            locale=locale,
            stage=stage,
        )
