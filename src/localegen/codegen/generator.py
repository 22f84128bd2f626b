"""Generation run: storage in, one Python module out.

Stages, in order:
    load      read the default catalog (and each locale's, lazily)
    schema    compile record types from the default catalog's key paths
    merge     reconcile each non-default catalog with the default catalog
    emission  emit one instance per locale
    render    assemble the module
    write     (write_locales only) write the module to disk

Every failure aborts the run. Generator errors propagate unchanged with a
note naming the stage; any other exception raised by a collaborator (I/O,
custom storage) is wrapped in GenerationStageError with the original as
``__cause__``. Locales are processed sequentially.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, replace
from pathlib import Path
from types import MappingProxyType

from localegen.catalog.loading import PathCatalogLoader
from localegen.catalog.storage import CatalogStorage, MemoryStorage, require_catalog
from localegen.catalog.types import LocaleCode
from localegen.codegen.instance import emit_instance
from localegen.codegen.merge import MergeResult, literal_entries, merge_with_default
from localegen.codegen.render import LocaleBinding, RenderOptions, bind_locales, render_module
from localegen.codegen.schema import Schema, compile_schema
from localegen.constants import DEFAULT_OUTPUT_FILE
from localegen.diagnostics import ErrorTemplate, GenerationStageError, LocaleGenError
from localegen.enums import GenerationStage
from localegen.naming import CaseNaming, IdentifierNaming

__all__ = [
    "GeneratedLocales",
    "generate_locales",
    "load_catalogs",
    "write_locales",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GeneratedLocales:
    """Result of a generation run.

    Attributes:
        schema: Record types compiled from the default catalog
        bindings: Generated names per locale, default first
        instances: Locale -> instance source
        merges: Non-default locale -> merge result
        source: Complete module source
    """

    schema: Schema
    bindings: tuple[LocaleBinding, ...]
    instances: Mapping[LocaleCode, str]
    merges: Mapping[LocaleCode, MergeResult]
    source: str

    @property
    def default_locale(self) -> LocaleCode:
        return next(binding.locale for binding in self.bindings if binding.is_default)


@contextmanager
def _stage(stage: GenerationStage, locale: LocaleCode | None = None) -> Iterator[None]:
    """Label failures raised inside the block with the stage name."""
    try:
        yield
    except LocaleGenError as e:
        where = f" for locale '{locale}'" if locale is not None else ""
        e.add_note(f"during {stage}{where}")
        if e.diagnostic is not None and e.diagnostic.stage is None:
            e.diagnostic = replace(
                e.diagnostic,
                stage=str(stage),
                locale=e.diagnostic.locale if e.diagnostic.locale is not None else locale,
            )
        raise
    except Exception as e:  # noqa: BLE001 - collaborators may raise anything
        raise GenerationStageError(
            ErrorTemplate.stage_failed(str(stage), e, locale),
            stage=str(stage),
            locale=locale,
        ) from e


def load_catalogs(loader: PathCatalogLoader, default_locale: LocaleCode) -> MemoryStorage:
    """Load every catalog the loader finds, labelled as the load stage.

    Raises:
        MissingDefaultLocaleError: If no file provides the default locale
        CatalogFormatError: If a catalog file is malformed
        GenerationStageError: If the directory or a file cannot be read
    """
    with _stage(GenerationStage.LOAD):
        return loader.load_storage(default_locale)


def generate_locales(
    storage: CatalogStorage,
    *,
    naming: IdentifierNaming | None = None,
    options: RenderOptions | None = None,
) -> GeneratedLocales:
    """Generate the locales module for every catalog in storage.

    Args:
        storage: Catalog source
        naming: Identifier naming (defaults to CaseNaming)
        options: Generated names (defaults to RenderOptions())

    Returns:
        GeneratedLocales with the schema, per-locale instances and module source

    Raises:
        MissingDefaultLocaleError: If the default catalog is missing or empty
        UnresolvedCatalogError: If a listed locale has no catalog
        SchemaConflictError: If the default key paths cannot form a schema
        InstanceMismatchError: If an instance does not match the schema
        GenerationStageError: If a collaborator fails
    """
    naming = naming if naming is not None else CaseNaming()
    options = options if options is not None else RenderOptions()

    with _stage(GenerationStage.LOAD):
        default_locale = storage.default_locale
        default = require_catalog(storage, default_locale)
        locales = (
            default_locale,
            *(locale for locale in storage.all_locales() if locale != default_locale),
        )

    with _stage(GenerationStage.SCHEMA):
        schema = compile_schema(default.paths(), naming)

    with _stage(GenerationStage.RENDER):
        bindings = bind_locales(locales, default_locale, naming, options)

    instances: dict[LocaleCode, str] = {}
    merges: dict[LocaleCode, MergeResult] = {}
    for binding in bindings:
        locale = binding.locale
        if binding.is_default:
            entries = literal_entries(default)
        else:
            with _stage(GenerationStage.LOAD, locale):
                catalog = require_catalog(storage, locale)
            with _stage(GenerationStage.MERGE, locale):
                merged = merge_with_default(default, catalog)
            merges[locale] = merged
            entries = merged.entries
            if merged.dropped:
                logger.warning(
                    "Locale '%s': dropped %d key(s) missing from default locale '%s': %s",
                    locale,
                    len(merged.dropped),
                    default_locale,
                    ", ".join(".".join(path) for path in merged.dropped),
                )
            logger.debug(
                "Locale '%s': %d translated, %d falling back",
                locale,
                merged.literal_count,
                merged.fallback_count,
            )

        with _stage(GenerationStage.EMISSION, locale):
            instances[locale] = emit_instance(
                entries,
                schema,
                binding.constant,
                default_constant=options.default_constant,
                locale=locale,
            )

    with _stage(GenerationStage.RENDER):
        source = render_module(schema, bindings, [instances[b.locale] for b in bindings], options)

    logger.info(
        "Generated %d locale(s), %d record type(s), %d key(s); default locale: %s",
        len(bindings),
        len(schema.records),
        len(default),
        default_locale,
    )
    return GeneratedLocales(
        schema=schema,
        bindings=bindings,
        instances=MappingProxyType(instances),
        merges=MappingProxyType(merges),
        source=source,
    )


def write_locales(
    output_dir: str | Path,
    storage: CatalogStorage,
    *,
    file_name: str = DEFAULT_OUTPUT_FILE,
    naming: IdentifierNaming | None = None,
    options: RenderOptions | None = None,
) -> Path:
    """Generate the locales module and write it into ``output_dir``.

    The module is only written once generation has fully succeeded, so a
    failed run never leaves partial output behind.

    Returns:
        Path of the written file

    Raises:
        Everything generate_locales raises
        GenerationStageError: If the directory or file cannot be written
    """
    generated = generate_locales(storage, naming=naming, options=options)
    with _stage(GenerationStage.WRITE):
        directory = Path(output_dir)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / file_name
        path.write_text(generated.source, encoding="utf-8")
    logger.info("Wrote %s", path)
    return path
