"""Generator configuration from ``pyproject.toml``.

Reads the ``[tool.localegen]`` table:

    [tool.localegen]
    locales = "locales"              # directory with one catalog file per locale
    default-locale = "en"
    output = "src/app/generated"     # directory of the generated module
    output-file = "locales.py"       # optional
    root-type = "Strings"            # optional
    enum-name = "Locales"            # optional
    default-constant = "STRINGS_DEFAULT"  # optional
    describe-locales = true          # optional

Relative paths resolve against the directory containing the file.

Python 3.13+.
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from localegen.catalog.loading import PathCatalogLoader
from localegen.codegen.render import RenderOptions
from localegen.constants import (
    DEFAULT_CONSTANT,
    DEFAULT_ENUM_NAME,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_ROOT_TYPE,
)
from localegen.diagnostics import ConfigurationError, ErrorTemplate
from localegen.naming import CaseNaming, is_valid_identifier

__all__ = [
    "CONFIG_SECTION",
    "GeneratorConfig",
    "config_from_mapping",
    "load_config",
]

CONFIG_SECTION: str = "tool.localegen"

_REQUIRED_KEYS: tuple[str, ...] = ("locales", "default-locale", "output")
_OPTIONAL_KEYS: tuple[str, ...] = (
    "output-file",
    "root-type",
    "enum-name",
    "default-constant",
    "describe-locales",
)


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Settings for one generation run.

    Attributes:
        locales_dir: Directory with one catalog file per locale
        default_locale: Locale whose catalog is the canonical key set
        output_dir: Directory of the generated module
        output_file: File name of the generated module
        root_type: Name of the root record type
        enum_name: Name of the locale enumeration
        default_constant: Name of the default locale's instance
        describe_locales: Annotate enum members with locale display names
    """

    locales_dir: Path
    default_locale: str
    output_dir: Path
    output_file: str = DEFAULT_OUTPUT_FILE
    root_type: str = DEFAULT_ROOT_TYPE
    enum_name: str = DEFAULT_ENUM_NAME
    default_constant: str = DEFAULT_CONSTANT
    describe_locales: bool = True

    def __post_init__(self) -> None:
        """Validate generated names.

        Raises:
            ConfigurationError: If a name is not a valid Python identifier,
                or the output file is not a plain ``.py`` file name
        """
        for key, value in (
            ("root-type", self.root_type),
            ("enum-name", self.enum_name),
            ("default-constant", self.default_constant),
        ):
            if not is_valid_identifier(value):
                raise ConfigurationError(
                    ErrorTemplate.config_value_invalid(key, f"'{value}' is not a Python identifier")
                )
        if Path(self.output_file).name != self.output_file or not self.output_file.endswith(".py"):
            raise ConfigurationError(
                ErrorTemplate.config_value_invalid(
                    "output-file", f"'{self.output_file}' must be a bare .py file name"
                )
            )

    @property
    def output_path(self) -> Path:
        """Full path of the generated module."""
        return self.output_dir / self.output_file

    def naming(self) -> CaseNaming:
        return CaseNaming(root_type=self.root_type)

    def render_options(self) -> RenderOptions:
        return RenderOptions(
            enum_name=self.enum_name,
            default_constant=self.default_constant,
            describe_locales=self.describe_locales,
        )

    def loader(self) -> PathCatalogLoader:
        return PathCatalogLoader(self.locales_dir)


def _string(data: Mapping[str, object], key: str, source: str | None) -> str:
    value = data[key]
    if not isinstance(value, str) or not value:
        raise ConfigurationError(
            ErrorTemplate.config_value_invalid(key, "expected a non-empty string", source)
        )
    return value


def config_from_mapping(
    data: Mapping[str, object],
    *,
    base_dir: Path,
    source_path: str | None = None,
) -> GeneratorConfig:
    """Build a GeneratorConfig from the ``[tool.localegen]`` table contents.

    Raises:
        ConfigurationError: If a required key is missing, a key is unknown,
            or a value has the wrong type
    """
    for key in data:
        if key not in _REQUIRED_KEYS and key not in _OPTIONAL_KEYS:
            raise ConfigurationError(
                ErrorTemplate.config_value_invalid(key, "unknown key", source_path)
            )
    for key in _REQUIRED_KEYS:
        if key not in data:
            raise ConfigurationError(
                ErrorTemplate.config_value_invalid(key, "missing required key", source_path)
            )

    options: dict[str, object] = {}
    for key in ("output-file", "root-type", "enum-name", "default-constant"):
        if key in data:
            options[key.replace("-", "_")] = _string(data, key, source_path)
    if "describe-locales" in data:
        describe = data["describe-locales"]
        if not isinstance(describe, bool):
            raise ConfigurationError(
                ErrorTemplate.config_value_invalid(
                    "describe-locales", "expected true or false", source_path
                )
            )
        options["describe_locales"] = describe

    return GeneratorConfig(
        locales_dir=base_dir / _string(data, "locales", source_path),
        default_locale=_string(data, "default-locale", source_path),
        output_dir=base_dir / _string(data, "output", source_path),
        **options,  # type: ignore[arg-type]
    )


def load_config(path: str | Path) -> GeneratorConfig:
    """Load generator settings from a ``pyproject.toml`` file.

    Args:
        path: Path of the TOML file

    Returns:
        Parsed configuration

    Raises:
        ConfigurationError: If the file is not valid TOML, has no
            ``[tool.localegen]`` table, or the table is invalid
        OSError: If the file cannot be read
    """
    path = Path(path)
    source = str(path)
    try:
        document = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(ErrorTemplate.config_parse_failed(source, str(e))) from e

    section = document.get("tool", {}).get("localegen")
    if not isinstance(section, Mapping):
        raise ConfigurationError(ErrorTemplate.config_section_missing(source, CONFIG_SECTION))
    return config_from_mapping(section, base_dir=path.parent, source_path=source)
