"""Command-line entry point: ``localegen``.

Reads ``[tool.localegen]`` from ``pyproject.toml`` (or the file given with
``--config``), applies command-line overrides, and writes the generated
module. With ``--check`` nothing is written; the run fails if the module on
disk is missing or differs from what would be generated.

Exit codes:
    0: Module written, or up to date (--check)
    1: Generation failed, or module out of date (--check)

Usage:
    localegen [--config PYPROJECT] [--locales DIR] [--default LOCALE]
              [--output DIR] [--output-file NAME] [--check] [-v]

Python 3.13+.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from localegen.codegen.generator import generate_locales, load_catalogs, write_locales
from localegen.config import GeneratorConfig, load_config
from localegen.constants import DEFAULT_OUTPUT_FILE
from localegen.diagnostics import ConfigurationError, ErrorTemplate, LocaleGenError

__all__ = ["main"]

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = "pyproject.toml"


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="localegen",
        description="Generate a typed Python module from per-locale string catalogs.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"TOML file with a [tool.localegen] table (default: {_DEFAULT_CONFIG}).",
    )
    parser.add_argument("--locales", type=Path, help="Directory of catalog files.")
    parser.add_argument("--default", dest="default_locale", help="Default locale code.")
    parser.add_argument("--output", type=Path, help="Directory of the generated module.")
    parser.add_argument(
        "--output-file",
        help=f"File name of the generated module (default: {DEFAULT_OUTPUT_FILE}).",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Do not write; exit 1 if the generated module is out of date.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log per-locale details.",
    )
    return parser.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> GeneratorConfig:
    """Combine the config file (if any) with command-line overrides.

    Without ``--config``, ``pyproject.toml`` in the working directory is
    read when present. When no file is used, ``--locales``, ``--default``
    and ``--output`` are all required.

    Raises:
        ConfigurationError: If the settings are incomplete or invalid
    """
    config_path = args.config
    if config_path is None and Path(_DEFAULT_CONFIG).is_file():
        flags_complete = None not in (args.locales, args.default_locale, args.output)
        if not flags_complete:
            config_path = Path(_DEFAULT_CONFIG)

    overrides: dict[str, object] = {}
    if args.locales is not None:
        overrides["locales_dir"] = args.locales
    if args.default_locale is not None:
        overrides["default_locale"] = args.default_locale
    if args.output is not None:
        overrides["output_dir"] = args.output
    if args.output_file is not None:
        overrides["output_file"] = args.output_file

    if config_path is not None:
        logger.debug("Reading configuration from %s", config_path)
        try:
            config = load_config(config_path)
        except OSError as e:
            raise ConfigurationError(
                ErrorTemplate.config_parse_failed(str(config_path), e.strerror or str(e))
            ) from e
        return dataclasses.replace(config, **overrides)  # type: ignore[arg-type]

    for flag, key in (
        ("--locales", "locales_dir"),
        ("--default", "default_locale"),
        ("--output", "output_dir"),
    ):
        if key not in overrides:
            raise ConfigurationError(
                ErrorTemplate.config_value_invalid(
                    flag, f"required when no {_DEFAULT_CONFIG} is found"
                )
            )
    return GeneratorConfig(**overrides)  # type: ignore[arg-type]


def _run(config: GeneratorConfig, *, check: bool) -> int:
    storage = load_catalogs(config.loader(), config.default_locale)

    if check:
        generated = generate_locales(
            storage,
            naming=config.naming(),
            options=config.render_options(),
        )
        path = config.output_path
        try:
            current = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            print(f"[FAIL] {path} does not exist", file=sys.stderr)
            return 1
        if current != generated.source:
            print(f"[FAIL] {path} is out of date; run localegen to regenerate", file=sys.stderr)
            return 1
        print(f"[OK] {path} is up to date")
        return 0

    path = write_locales(
        config.output_dir,
        storage,
        file_name=config.output_file,
        naming=config.naming(),
        options=config.render_options(),
    )
    print(f"[OK] Wrote {path} ({len(storage.all_locales())} locale(s))")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the generator from the command line."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _resolve_config(args)
        return _run(config, check=args.check)
    except LocaleGenError as e:
        print(e.format_error(), file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
