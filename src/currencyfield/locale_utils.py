"""Locale utilities for BCP-47 to POSIX conversion.

Fields are configured from platform code that speaks BCP-47 ("de-DE") while
Babel expects POSIX identifiers ("de_DE"). Normalizing once at the boundary
keeps cache keys consistent.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]

_PSEUDO_LOCALES: frozenset[str] = frozenset({"C", "POSIX", ""})


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to POSIX format for Babel.

    Strips surrounding whitespace and any encoding suffix, and converts
    hyphens to underscores.

    Args:
        locale_code: Locale code (e.g., "en-US", "pt_BR", "de_DE.UTF-8")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR", "de_DE")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("de_DE.UTF-8")
        'de_DE'
    """
    return locale_code.strip().split(".", 1)[0].replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect the system locale from the OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL, LC_MONETARY, LC_NUMERIC, LANG environment variables

    LC_MONETARY and LC_NUMERIC are consulted before LANG because they govern
    currency and decimal separators. "C" and "POSIX" pseudo-locales are ignored.

    Args:
        raise_on_failure: If True, raise RuntimeError when the locale cannot be
            determined. If False (default), return "en_US".

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and no locale is set.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in _PSEUDO_LOCALES:
            return normalize_locale(system_locale)
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MONETARY", "LC_NUMERIC", "LANG"):
        value = os.environ.get(var)
        if value and value not in _PSEUDO_LOCALES:
            return normalize_locale(value)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MONETARY, LC_NUMERIC, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return "en_US"
