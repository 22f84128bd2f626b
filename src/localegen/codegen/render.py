"""Render the generated Python module.

Assembles the schema's record types, the locale enumeration, and the
per-locale instances into one importable module:

    class Locales(StrEnum)        one member per locale, value = locale code
    DEFAULT_LOCALE                the default member
    class Strings / StringsHome   frozen, slotted dataclasses, root first
    STRINGS_DEFAULT, STRINGS_FR   instances (fallbacks point into the default)
    _STRINGS_BY_LOCALE            member -> instance, used by Locales.strings()

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from localegen.catalog.types import LocaleCode
from localegen.codegen.schema import RecordType, Schema
from localegen.constants import (
    DEFAULT_CONSTANT,
    DEFAULT_ENUM_NAME,
    DEFAULT_LOCALE_CONSTANT,
    GENERATED_HEADER,
    INDENT,
    LOCALE_TABLE_NAME,
)
from localegen.diagnostics import ErrorTemplate, IdentifierCollisionError
from localegen.enums import FieldKind
from localegen.locale_utils import describe_locale
from localegen.naming import IdentifierNaming

__all__ = [
    "LocaleBinding",
    "RenderOptions",
    "bind_locales",
    "render_locales_enum",
    "render_module",
    "render_record",
    "render_schema",
]


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Names and switches for the generated module.

    Attributes:
        enum_name: Name of the locale enumeration
        default_constant: Name of the default locale's instance
        describe_locales: Annotate enum members with Babel display names
    """

    enum_name: str = DEFAULT_ENUM_NAME
    default_constant: str = DEFAULT_CONSTANT
    describe_locales: bool = True


@dataclass(frozen=True, slots=True)
class LocaleBinding:
    """Generated names for one locale.

    Attributes:
        locale: Locale code as found in storage
        member: Enum member name
        value: Enum member value
        constant: Name of the locale's instance constant
        is_default: Whether this is the default locale
    """

    locale: LocaleCode
    member: str
    value: str
    constant: str
    is_default: bool = False


def bind_locales(
    locales: Sequence[LocaleCode],
    default_locale: LocaleCode,
    naming: IdentifierNaming,
    options: RenderOptions | None = None,
) -> tuple[LocaleBinding, ...]:
    """Assign enum member, value and constant names to every locale.

    Raises:
        IdentifierCollisionError: If two locales map to the same member,
            value or constant name
    """
    options = options or RenderOptions()
    bindings: list[LocaleBinding] = []
    owners: dict[tuple[str, str], LocaleCode] = {}

    for locale in locales:
        is_default = locale == default_locale
        binding = LocaleBinding(
            locale=locale,
            member=naming.member_name(locale),
            value=naming.locale_value(locale),
            constant=options.default_constant if is_default else naming.constant_name(locale),
            is_default=is_default,
        )
        for kind, name in (
            ("member", binding.member),
            ("value", binding.value),
            ("constant", binding.constant),
        ):
            owner = owners.setdefault((kind, name), locale)
            if owner != locale:
                raise IdentifierCollisionError(
                    ErrorTemplate.identifier_collision(name, (owner,), (locale,))
                )
        bindings.append(binding)
    return tuple(bindings)


def render_record(record: RecordType) -> str:
    """Render one record type as a frozen dataclass."""
    if record.prefix:
        doc = f'"""Strings under ``{".".join(record.prefix)}``."""'
    else:
        doc = '"""Localized strings."""'
    lines = [
        "@dataclass(frozen=True, slots=True)",
        f"class {record.name}:",
        f"{INDENT}{doc}",
        "",
    ]
    for field in record.fields:
        annotation = "str" if field.kind is FieldKind.LEAF else field.type_name
        lines.append(f"{INDENT}{field.name}: {annotation}")
    return "\n".join(lines) + "\n"


def render_schema(schema: Schema) -> str:
    """Render every record type, root first, separated by two blank lines."""
    return "\n\n".join(render_record(record) for record in schema.records)


def render_locales_enum(
    bindings: Sequence[LocaleBinding],
    root_type: str,
    options: RenderOptions | None = None,
) -> str:
    """Render the locale enumeration and the DEFAULT_LOCALE alias."""
    options = options or RenderOptions()
    enum = options.enum_name
    default = next(binding for binding in bindings if binding.is_default)

    lines = [
        f"class {enum}(StrEnum):",
        f'{INDENT}"""Locales with generated strings."""',
        "",
    ]
    for binding in bindings:
        line = f"{INDENT}{binding.member} = {binding.value!r}"
        description = describe_locale(binding.locale) if options.describe_locales else None
        if description:
            line += f"  # {description}"
        lines.append(line)

    body = INDENT * 2
    lines += [
        "",
        f"{INDENT}def strings(self) -> {root_type}:",
        f'{body}"""Strings for this locale."""',
        f"{body}return {LOCALE_TABLE_NAME}[self]",
        "",
        f"{INDENT}@classmethod",
        f"{INDENT}def from_str(cls, value: str) -> {enum}:",
        f'{body}"""Parse a locale code, falling back to {DEFAULT_LOCALE_CONSTANT}."""',
        f'{body}normalized = value.strip().lower().replace("_", "-")',
        f"{body}for locale in cls:",
        f"{body}{INDENT}if locale.value == normalized:",
        f"{body}{INDENT * 2}return locale",
        f"{body}return {DEFAULT_LOCALE_CONSTANT}",
        "",
        "",
        f"{DEFAULT_LOCALE_CONSTANT}: Final = {enum}.{default.member}",
    ]
    return "\n".join(lines) + "\n"


def render_module(
    schema: Schema,
    bindings: Sequence[LocaleBinding],
    instances: Sequence[str],
    options: RenderOptions | None = None,
) -> str:
    """Render the complete generated module.

    Args:
        schema: Compiled schema
        bindings: Locale bindings, default first
        instances: Instance sources from emit_instance, aligned with
            ``bindings``
        options: Generated names

    Returns:
        Module source text
    """
    options = options or RenderOptions()
    root = schema.root.name
    default = next(binding for binding in bindings if binding.is_default)

    exported = sorted(
        {
            DEFAULT_LOCALE_CONSTANT,
            options.enum_name,
            *(record.name for record in schema.records),
            *(binding.constant for binding in bindings),
        }
    )
    table = [f"{LOCALE_TABLE_NAME}: Final[dict[{options.enum_name}, {root}]] = {{"]
    table += [
        f"{INDENT}{options.enum_name}.{binding.member}: {binding.constant},"
        for binding in bindings
    ]
    table.append("}")

    sections = [
        "\n".join(
            [
                GENERATED_HEADER,
                f'"""Localized strings for {len(bindings)} locale(s); '
                f'default locale: {default.locale}."""',
                "",
                "from __future__ import annotations",
                "",
                "from dataclasses import dataclass",
                "from enum import StrEnum",
                "from typing import Final",
                "",
                "__all__ = [",
                *(f'{INDENT}"{name}",' for name in exported),
                "]",
            ]
        )
        + "\n",
        render_locales_enum(bindings, root, options),
        render_schema(schema),
        *instances,
        "\n".join(table) + "\n",
    ]
    return "\n\n".join(sections)
