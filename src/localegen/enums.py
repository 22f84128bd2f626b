"""Enumerations for localegen type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class FieldKind(StrEnum):
    """Kind of a record field in the compiled schema.

    StrEnum provides automatic string conversion: str(FieldKind.LEAF) == "leaf"
    """

    LEAF = "leaf"
    """String-typed field holding one localized value"""

    RECORD = "record"
    """Field typed as a nested record type"""


class MarkerKind(StrEnum):
    """Kind of event produced by the instance emitter.

    StrEnum provides automatic string conversion: str(MarkerKind.OPEN) == "open"
    """

    OPEN = "open"
    """Start of a nested record constructor: home=StringsHome("""

    LEAF = "leaf"
    """Leaf field assignment: title="Welcome","""

    CLOSE = "close"
    """End of a nested record constructor: ),"""


class GenerationStage(StrEnum):
    """Stage of a generation run, used to label failures.

    StrEnum provides automatic string conversion: str(GenerationStage.MERGE) == "merge"
    """

    LOAD = "load"
    """Reading catalogs from storage"""

    SCHEMA = "schema compilation"
    """Deriving record types from the default locale's key paths"""

    MERGE = "merge"
    """Reconciling a locale catalog against the default catalog"""

    EMISSION = "emission"
    """Emitting one locale's instance literal"""

    RENDER = "render"
    """Rendering the complete generated module"""

    WRITE = "write"
    """Writing the generated module to disk"""


class CatalogFormat(StrEnum):
    """Serialization format of a catalog file.

    StrEnum provides automatic string conversion: str(CatalogFormat.TOML) == "toml"
    """

    TOML = "toml"
    JSON = "json"
    YAML = "yaml"


__all__ = [
    "CatalogFormat",
    "FieldKind",
    "GenerationStage",
    "MarkerKind",
]
