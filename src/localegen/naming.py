"""Identifier naming for generated Python source.

Maps key path segments and locale codes to Python identifiers. The schema
compiler, instance emitter and module renderer receive a naming object as a
parameter, so any implementation of ``IdentifierNaming`` can be swapped in.

Default conventions (``CaseNaming``):
    - Record types: root name + PascalCase segments (``StringsHomeNav``)
    - Fields: snake_case segment (``sign_in``)
    - Instance constants: ``STRINGS_`` + SCREAMING_SNAKE locale (``STRINGS_PT_BR``)
    - Enum members: SCREAMING_SNAKE locale (``PT_BR``)
    - Enum values: kebab-case lowercase locale (``pt-br``)

Word splitting:
    Segments split on every non-alphanumeric character and on case
    boundaries: ``signIn``, ``sign-in``, ``sign_in`` and ``SIGN_IN`` all
    produce the words ``sign``, ``in``. ``HTTPServer`` splits into ``HTTP``,
    ``Server``.

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+.
"""

from __future__ import annotations

import keyword
from dataclasses import dataclass
from typing import Protocol

from localegen.catalog.types import KeyPath, LocaleCode
from localegen.constants import DEFAULT_ROOT_TYPE
from localegen.diagnostics import ErrorTemplate, SchemaConflictError

__all__ = [
    "CaseNaming",
    "IdentifierNaming",
    "is_valid_identifier",
    "split_words",
    "to_kebab",
    "to_pascal",
    "to_screaming_snake",
    "to_snake",
]


# ============================================================================
# CASE CONVERSION
# ============================================================================


def split_words(name: str) -> list[str]:
    """Split a name into words on separators and case boundaries.

    Example:
        >>> split_words("signInButton")
        ['sign', 'In', 'Button']
        >>> split_words("pt-BR")
        ['pt', 'BR']
        >>> split_words("HTTPServer_v2")
        ['HTTP', 'Server', 'v2']
    """
    words: list[str] = []
    current: list[str] = []
    for index, ch in enumerate(name):
        if not ch.isalnum():
            if current:
                words.append("".join(current))
                current = []
            continue
        if current:
            prev = current[-1]
            following = name[index + 1] if index + 1 < len(name) else ""
            lower_to_upper = ch.isupper() and (prev.islower() or prev.isdigit())
            acronym_end = ch.isupper() and prev.isupper() and following.islower()
            if lower_to_upper or acronym_end:
                words.append("".join(current))
                current = []
        current.append(ch)
    if current:
        words.append("".join(current))
    return words


def to_pascal(name: str) -> str:
    """Convert to PascalCase: ``sign-in`` -> ``SignIn``."""
    return "".join(word[:1].upper() + word[1:].lower() for word in split_words(name))


def to_snake(name: str) -> str:
    """Convert to snake_case: ``signIn`` -> ``sign_in``."""
    return "_".join(word.lower() for word in split_words(name))


def to_screaming_snake(name: str) -> str:
    """Convert to SCREAMING_SNAKE_CASE: ``pt-BR`` -> ``PT_BR``."""
    return "_".join(word.upper() for word in split_words(name))


def to_kebab(name: str) -> str:
    """Convert to kebab-case: ``pt_BR`` -> ``pt-br``."""
    return "-".join(word.lower() for word in split_words(name))


def is_valid_identifier(name: str) -> bool:
    """Check that ``name`` can be used as a Python attribute or class name.

    Example:
        >>> is_valid_identifier("title")
        True
        >>> is_valid_identifier("class")
        False
        >>> is_valid_identifier("2fa")
        False
    """
    return name.isidentifier() and not keyword.iskeyword(name)


def _require_identifier(source: str, identifier: str) -> str:
    if not is_valid_identifier(identifier):
        raise SchemaConflictError(ErrorTemplate.identifier_invalid(source, identifier))
    return identifier


# ============================================================================
# NAMING PROTOCOL
# ============================================================================


class IdentifierNaming(Protocol):
    """Protocol for mapping key paths and locales to identifiers.

    Implementations must be pure and deterministic. They need not be
    injective: the schema compiler and renderer detect collisions and report
    them as IdentifierCollisionError.
    """

    def type_name(self, prefix: KeyPath) -> str:
        """Record type name for a key path prefix (``()`` is the root type)."""
        ...

    def field_name(self, segment: str) -> str:
        """Field name for one key path segment."""
        ...

    def constant_name(self, locale: LocaleCode) -> str:
        """Module constant holding a non-default locale's instance."""
        ...

    def member_name(self, locale: LocaleCode) -> str:
        """Enum member name for a locale."""
        ...

    def locale_value(self, locale: LocaleCode) -> str:
        """Enum member value (the locale's string form) for a locale."""
        ...


@dataclass(frozen=True, slots=True)
class CaseNaming:
    """Default naming based on case conversion.

    Attributes:
        root_type: Name of the root record type and prefix of nested types
        constant_prefix: Prefix of per-locale instance constants

    Example:
        >>> naming = CaseNaming()
        >>> naming.type_name(("home", "nav-bar"))
        'StringsHomeNavBar'
        >>> naming.field_name("nav-bar")
        'nav_bar'
        >>> naming.constant_name("pt-BR")
        'STRINGS_PT_BR'
    """

    root_type: str = DEFAULT_ROOT_TYPE
    constant_prefix: str = "STRINGS"

    def type_name(self, prefix: KeyPath) -> str:
        name = self.root_type + "".join(to_pascal(segment) for segment in prefix)
        return _require_identifier(".".join(prefix) or self.root_type, name)

    def field_name(self, segment: str) -> str:
        name = to_snake(segment)
        if name[:1].isdigit():
            name = f"_{name}"
        elif keyword.iskeyword(name):
            # PEP 8 convention for names clashing with keywords
            name = f"{name}_"
        return _require_identifier(segment, name)

    def constant_name(self, locale: LocaleCode) -> str:
        return _require_identifier(locale, f"{self.constant_prefix}_{to_screaming_snake(locale)}")

    def member_name(self, locale: LocaleCode) -> str:
        name = to_screaming_snake(locale)
        if name[:1].isdigit():
            name = f"_{name}"
        return _require_identifier(locale, name)

    def locale_value(self, locale: LocaleCode) -> str:
        return to_kebab(locale)
