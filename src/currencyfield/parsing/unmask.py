"""Unmasking: recover the numeric value and typing state from masked text.

API: unmask_text() returns an UnmaskResult and NEVER raises. Anything that
cannot be read as a number is treated as 0.0.

The decimal separator is passed in explicitly; locale resolution is the
caller's concern (see MaskEngine.unmask). This keeps the module free of Babel
and safe to call from any thread.

Python 3.13+. Zero external dependencies.
"""

import logging
import math
from decimal import Decimal

from currencyfield.types import UnmaskResult

__all__ = [
    "count_fraction_digits",
    "extract_numbers",
    "fraction_digits_of",
    "unmask_text",
]

logger = logging.getLogger(__name__)

_DIGITS: frozenset[str] = frozenset("0123456789")


def extract_numbers(text: str, decimal_separator: str) -> str:
    """Keep only ASCII digits and the decimal separator, preserving order.

    Examples:
        >>> extract_numbers("$1,234.56", ".")
        '1234.56'
        >>> extract_numbers("1.234,56 €", ",")
        '1234,56'
    """
    return "".join(ch for ch in text if ch in _DIGITS or ch == decimal_separator)


def count_fraction_digits(numbers: str, decimal_separator: str) -> int:
    """Count the digits after the last decimal separator (0 if absent)."""
    _, separator, fraction = numbers.rpartition(decimal_separator)
    if not separator:
        return 0
    return sum(1 for ch in fraction if ch in _DIGITS)


def fraction_digits_of(value: float) -> int:
    """Digits after the point in the shortest plain rendering of value.

    Trailing zeros are dropped, so 12.0 has 0 fraction digits and 12.50 has 1.
    Non-finite values report 0.

    Examples:
        >>> fraction_digits_of(12.345)
        3
        >>> fraction_digits_of(1.5e-07)
        8
    """
    if not math.isfinite(value):
        return 0
    exponent = Decimal(repr(value)).normalize().as_tuple().exponent
    # Finite decimals always carry an int exponent
    return max(0, -int(exponent))


def unmask_text(text: str, decimal_separator: str) -> UnmaskResult:
    """Recover value, trailing-separator flag and fraction digit count.

    Args:
        text: Masked (or partially edited) field content
        decimal_separator: The active locale's decimal separator

    Returns:
        UnmaskResult. Empty input yields UnmaskResult(0.0, False, 0).

    Examples:
        >>> unmask_text("$1,234.56", ".")
        UnmaskResult(value=1234.56, trailing_separator=False, fraction_digits=2)
        >>> unmask_text("$12.", ".")
        UnmaskResult(value=12.0, trailing_separator=True, fraction_digits=0)
    """
    numbers = extract_numbers(text, decimal_separator)
    if not numbers:
        return UnmaskResult()

    fraction_digits = count_fraction_digits(numbers, decimal_separator)
    trailing_separator = numbers.endswith(decimal_separator)

    try:
        value = float(numbers.replace(decimal_separator, "."))
    except ValueError:
        # Lone separator, or several separators from a paste
        logger.debug("Unparsable amount %r in %r, treating as 0.0", numbers, text)
        value = 0.0
    if not math.isfinite(value):
        # Digit runs past the float range parse to inf instead of raising
        logger.debug("Out-of-range amount %r in %r, treating as 0.0", numbers, text)
        value = 0.0

    return UnmaskResult(
        value=value,
        trailing_separator=trailing_separator,
        fraction_digits=fraction_digits,
    )
