"""Locale context for thread-safe, field-scoped currency formatting.

This module resolves a locale into the symbols a currency mask needs (decimal
separator and sign symbols) and renders amounts through Babel's CLDR currency
patterns.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Formatters use Babel (thread-safe, CLDR-based)
    - No dependency on Python's locale module (avoids global state)
    - Each MaskEngine owns its LocaleContext (locale isolation)

Fraction digits:
    Babel's format_currency() normally forces the currency's minor-unit
    precision (2 for USD). A mask must instead show exactly what the user has
    typed, so the locale's standard currency pattern is rewritten with the
    requested fraction bounds and applied with currency_digits=False.

Python 3.13+. Uses Babel for i18n.
"""

import logging
import re
from collections import OrderedDict
from dataclasses import dataclass
from decimal import InvalidOperation
from threading import RLock
from typing import ClassVar

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers

from currencyfield.constants import (
    DEFAULT_LOCALE,
    FALLBACK_CURRENCY_PATTERN,
    MAX_LOCALE_CACHE_SIZE,
)
from currencyfield.diagnostics import ErrorTemplate, FormattingError
from currencyfield.locale_utils import get_babel_locale, normalize_locale

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)

# Integer and fraction part of a CLDR number pattern: "#,##0.00", "#,##,##0.00", "0"
_NUMBER_CORE_RE = re.compile(r"[#,]*0[0,]*(?:\.[0#]*)?")


def _fraction_pattern(minimum: int, maximum: int) -> str:
    """Pattern suffix for the given fraction bounds ('.00', '.0#', '' for none)."""
    if maximum <= 0:
        return ""
    return "." + "0" * minimum + "#" * (maximum - minimum)


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for currency masking.

    Use LocaleContext.create() factory to construct instances with proper
    validation. Direct construction via __init__ is not recommended.

    Examples:
        >>> ctx = LocaleContext.create('en-US')
        >>> ctx.decimal_symbol
        '.'
        >>> ctx.format_currency(1234.5, currency='USD',
        ...     minimum_fraction_digits=1, maximum_fraction_digits=1)
        '$1,234.5'

        >>> ctx = LocaleContext.create('de-DE')
        >>> ctx.decimal_symbol
        ','

        >>> ctx = LocaleContext.create('invalid-locale')
        >>> ctx.is_fallback
        True

    Thread Safety:
        LocaleContext is immutable and thread-safe. Cache operations are
        protected by RLock.
    """

    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with size, max_size and locales (LRU order)
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @classmethod
    def create(cls, locale_code: str = DEFAULT_LOCALE) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for invalid locales.

        For unknown or invalid locales, logs a warning and falls back to en_US.
        This method always succeeds - use create_or_raise() for strict validation.

        Args:
            locale_code: BCP 47 or POSIX locale identifier

        Returns:
            LocaleContext instance. For unknown/invalid locales, uses en_US
            while preserving the original locale_code for debugging.
        """
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        used_fallback = False
        try:
            babel_locale = get_babel_locale(cache_key)
        except UnknownLocaleError as e:
            logger.warning("Unknown locale '%s': %s. Falling back to en_US", locale_code, e)
            babel_locale = get_babel_locale("en_US")
            used_fallback = True
        except (ValueError, TypeError) as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to en_US", locale_code, e
            )
            babel_locale = get_babel_locale("en_US")
            used_fallback = True

        ctx = cls(locale_code=locale_code, _babel_locale=babel_locale, is_fallback=used_fallback)

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]
            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create_or_raise(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext or raise on validation failure.

        Args:
            locale_code: BCP 47 or POSIX locale identifier

        Returns:
            LocaleContext instance with valid locale

        Raises:
            ValueError: If locale code is invalid or unknown
        """
        try:
            babel_locale = get_babel_locale(locale_code)
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
        except (ValueError, TypeError) as e:
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise ValueError(msg) from None
        return cls(locale_code=locale_code, _babel_locale=babel_locale)

    @property
    def babel_locale(self) -> Locale:
        """Pre-validated Babel Locale object for this context."""
        return self._babel_locale

    @property
    def decimal_symbol(self) -> str:
        """Decimal separator ('.' for en_US, ',' for de_DE)."""
        return str(babel_numbers.get_decimal_symbol(self._babel_locale))

    @property
    def plus_sign(self) -> str:
        """Locale plus sign, shown when sign display is enabled."""
        return str(babel_numbers.get_plus_sign_symbol(self._babel_locale))

    @property
    def minus_sign(self) -> str:
        """Locale minus sign."""
        return str(babel_numbers.get_minus_sign_symbol(self._babel_locale))

    @staticmethod
    def is_known_currency(currency: str) -> bool:
        """True if CLDR has data for the ISO 4217 code."""
        return bool(babel_numbers.is_currency(currency))

    def currency_pattern(
        self,
        *,
        minimum_fraction_digits: int,
        maximum_fraction_digits: int,
        sign_enabled: bool = False,
    ) -> str:
        """Build the locale's standard currency pattern with fixed fraction bounds.

        Examples:
            >>> ctx = LocaleContext.create('en-US')
            >>> ctx.currency_pattern(minimum_fraction_digits=0, maximum_fraction_digits=2)
            '¤#,##0.##'
            >>> ctx.currency_pattern(
            ...     minimum_fraction_digits=0, maximum_fraction_digits=0, sign_enabled=True)
            "'+'¤#,##0;'-'¤#,##0"
        """
        standard = self._babel_locale.currency_formats.get("standard")
        raw_pattern = getattr(standard, "pattern", None) or FALLBACK_CURRENCY_PATTERN
        fraction = _fraction_pattern(minimum_fraction_digits, maximum_fraction_digits)

        def _rewrite(subpattern: str) -> str:
            return _NUMBER_CORE_RE.sub(
                lambda m: m.group(0).split(".", 1)[0] + fraction, subpattern, count=1
            )

        positive, _, negative = raw_pattern.partition(";")
        positive = _rewrite(positive)
        negative = _rewrite(negative) if negative else ""

        if sign_enabled:
            # Explicit negative subpattern, otherwise Babel derives "-" + positive prefix
            negative = negative or f"'{self.minus_sign}'{positive}"
            positive = f"'{self.plus_sign}'{positive}"

        return f"{positive};{negative}" if negative else positive

    def format_currency(
        self,
        value: int | float,
        *,
        currency: str,
        minimum_fraction_digits: int = 0,
        maximum_fraction_digits: int = 0,
        sign_enabled: bool = False,
    ) -> str:
        """Format an amount with locale-specific symbol, grouping and sign.

        Args:
            value: Amount to format
            currency: ISO 4217 currency code
            minimum_fraction_digits: Fraction digits always shown
            maximum_fraction_digits: Fraction digits shown at most (value is
                rounded half-even beyond this)
            sign_enabled: Prefix positive amounts with the plus sign

        Returns:
            Formatted currency string

        Raises:
            FormattingError: If the currency code is unknown or Babel fails

        Examples:
            >>> ctx = LocaleContext.create('en-US')
            >>> ctx.format_currency(0, currency='USD')
            '$0'
            >>> ctx = LocaleContext.create('de-DE')
            >>> ctx.format_currency(1234.5, currency='EUR',
            ...     minimum_fraction_digits=2, maximum_fraction_digits=2)
            '1.234,50\\xa0€'
        """
        if not self.is_known_currency(currency):
            diagnostic = ErrorTemplate.currency_code_unknown(currency)
            raise FormattingError(diagnostic, fallback_value=f"{currency} {value}")

        try:
            pattern = self.currency_pattern(
                minimum_fraction_digits=minimum_fraction_digits,
                maximum_fraction_digits=maximum_fraction_digits,
                sign_enabled=sign_enabled,
            )
            return str(
                babel_numbers.format_currency(
                    value,
                    currency,
                    format=pattern,
                    locale=self._babel_locale,
                    currency_digits=False,
                )
            )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            diagnostic = ErrorTemplate.formatting_failed(
                value, currency, self.locale_code, str(e)
            )
            raise FormattingError(diagnostic, fallback_value=f"{currency} {value}") from e
