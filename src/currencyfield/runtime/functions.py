"""Functional entry points for platform bindings.

Stateless wrappers over MaskEngine, mirroring the calls a native text-field
binding makes per keystroke. Each call resolves a cached engine for its
options, so repeated calls with equal FormatOptions share locale data.

Example:
    >>> opts = FormatOptions("USD")
    >>> state = unmask("$12.", opts)
    >>> mask(state.value, opts, state.trailing_separator, state.fraction_digits)
    '$12.'
    >>> caret_position("$12.", opts)
    4

Python 3.13+. Uses Babel for i18n.
"""

import logging

from currencyfield.constants import DEFAULT_MAX_VALUE
from currencyfield.types import FormatOptions, UnmaskResult

from .engine import MaskEngine

__all__ = [
    "caret_position",
    "extract_value",
    "format_value",
    "mask",
    "should_allow_change",
    "unmask",
]

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = FormatOptions()


def unmask(text: str, options: FormatOptions) -> UnmaskResult:
    """Recover value, trailing-separator flag and fraction digits from text.

    Examples:
        >>> unmask("$1,234.56", FormatOptions("USD"))
        UnmaskResult(value=1234.56, trailing_separator=False, fraction_digits=2)
    """
    return MaskEngine.create(options).unmask(text)


def mask(
    value: float,
    options: FormatOptions,
    trailing_separator: bool = False,
    fraction_digits: int = 0,
) -> str:
    """Format value as a localized currency string.

    Raises:
        FormattingError: If the currency code is unknown or Babel fails

    Examples:
        >>> mask(1234.5, FormatOptions("USD"), False, 1)
        '$1,234.5'
        >>> mask(0, FormatOptions("USD"), False, 0)
        '$0'
    """
    return MaskEngine.create(options).mask(
        value,
        trailing_separator=trailing_separator,
        fraction_digits=fraction_digits,
    )


def caret_position(text: str, options: FormatOptions) -> int:
    """Caret index after the last digit or decimal separator of text."""
    return MaskEngine.create(options).caret_position(text)


def should_allow_change(
    symbol: str,
    previous_text: str | None,
    new_value: float,
    max_value: float = DEFAULT_MAX_VALUE,
    options: FormatOptions | None = None,
) -> bool:
    """Admission check for one keystroke.

    Only the decimal separator is read from options (USD/en_US by default).

    Examples:
        >>> should_allow_change(".", "12.3", 12.3, 1000)
        False
        >>> should_allow_change("5", "999", 9995, 1000)
        False
        >>> should_allow_change("5", "99", 995, 1000)
        True
    """
    engine = MaskEngine.create(options or _DEFAULT_OPTIONS, max_value=max_value)
    allowed = engine.should_allow_change(symbol, previous_text, new_value)
    if not allowed:
        logger.debug("Change %r after %r refused", symbol, previous_text)
    return allowed


def format_value(value: float, options: FormatOptions) -> str:
    """Format a programmatic amount, showing the digits it actually has.

    Fraction digits come from the value itself with trailing zeros dropped,
    capped at two.

    Examples:
        >>> format_value(12.0, FormatOptions("USD"))
        '$12'
        >>> format_value(12.5, FormatOptions("USD"))
        '$12.5'
    """
    return MaskEngine.create(options).format_value(value).text


def extract_value(text: str, options: FormatOptions) -> float:
    """Numeric value of masked text (0.0 when there is none)."""
    return MaskEngine.create(options).unmask(text).value
