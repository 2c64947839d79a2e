"""Enumerations for currencyfield type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class RejectionReason(StrEnum):
    """Why a keystroke edit was refused.

    StrEnum provides automatic string conversion:
    str(RejectionReason.MAX_VALUE_EXCEEDED) == "max_value_exceeded"
    """

    DUPLICATE_DECIMAL_SEPARATOR = "duplicate_decimal_separator"
    """A second decimal separator was typed: 12.3 + '.'"""

    MAX_VALUE_EXCEEDED = "max_value_exceeded"
    """The edited amount is larger than the field's maximum value."""

    FRACTION_DIGITS_EXCEEDED = "fraction_digits_exceeded"
    """More than two digits would follow the decimal separator: 1.23 + '4'"""

    INVALID_STATE = "invalid_state"
    """The edit could not be computed (bad offsets, formatting failure)."""


__all__ = [
    "RejectionReason",
]
