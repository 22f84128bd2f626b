"""Quickstart example for localegen.

Generates a typed strings module from three catalog files in a temporary
directory, imports it, and shows how untranslated keys fall back to the
default locale.
"""

import importlib.util
import logging
import tempfile
from pathlib import Path

from localegen import LocaleGenError, PathCatalogLoader, write_locales

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

with tempfile.TemporaryDirectory() as tmp:
    root = Path(tmp)
    locales = root / "locales"
    locales.mkdir()

    # Example 1: Catalogs in any supported format
    print("=" * 50)
    print("Example 1: Generate from TOML, YAML and JSON catalogs")
    print("=" * 50)

    (locales / "en.toml").write_text(
        'title = "News"\n[home]\ntitle = "Welcome"\nbody = "Hello"\n',
        encoding="utf-8",
    )
    (locales / "fr.yaml").write_text("home:\n  title: Bienvenue\n", encoding="utf-8")
    (locales / "de.json").write_text('{"home": {"body": "Hallo"}, "old": "x"}', encoding="utf-8")

    storage = PathCatalogLoader(locales).load_storage(default_locale="en")
    path = write_locales(root / "generated", storage)
    print(path.read_text(encoding="utf-8"))

    # Example 2: Use the generated module
    print("=" * 50)
    print("Example 2: Typed access with fallback")
    print("=" * 50)

    spec = importlib.util.spec_from_file_location("locales", path)
    assert spec is not None and spec.loader is not None
    generated = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(generated)

    fr = generated.Locales.from_str("fr-FR").strings()
    print(fr.home.title)
    # Output: Welcome  (fr-FR is not generated, so the default locale is used)

    fr = generated.Locales.FR.strings()
    print(fr.home.title, "/", fr.home.body)
    # Output: Bienvenue / Hello

    print(fr.home.body is generated.STRINGS_DEFAULT.home.body)
    # Output: True

    # Example 3: Errors carry structured diagnostics
    print("\n" + "=" * 50)
    print("Example 3: Diagnostics")
    print("=" * 50)

    (locales / "en.toml").write_text('home = "x"\n[home2]\ntitle = 1\n', encoding="utf-8")
    try:
        PathCatalogLoader(locales).load_storage(default_locale="en")
    except LocaleGenError as e:
        print(e.format_error())
