"""Locale utilities for BCP-47 / POSIX locale codes.

Centralizes locale code normalization and Babel lookups used when rendering
the generated locale enumeration.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "describe_locale",
    "get_babel_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Surrounding whitespace is stripped.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale(" pt-BR ")
        'pt_BR'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("pt-BR")
        >>> locale.language
        'pt'
        >>> locale.territory
        'BR'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def describe_locale(locale_code: str, display_locale: str = "en") -> str | None:
    """Return a human-readable locale name, or None if Babel does not know it.

    Used for comments in generated source, so an unknown locale is not an
    error: catalogs may use private or project-specific locale codes.

    Args:
        locale_code: Locale to describe
        display_locale: Locale in which to write the name

    Returns:
        Display name (e.g., "Portuguese (Brazil)") or None

    Example:
        >>> describe_locale("pt-BR")
        'Portuguese (Brazil)'
        >>> describe_locale("xx-unknown") is None
        True
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        locale = get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning("Locale '%s' is not a known CLDR locale: %s", locale_code, e)
        return None
    return locale.get_display_name(display_locale)
