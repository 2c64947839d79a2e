"""Masked display strings back to numbers.

This package provides the inverse of currencyfield.runtime formatting:
- Formatting: float -> locale-aware currency string
- Parsing: currency string (possibly mid-edit) -> float + typing state

Functions never raise; unreadable input is treated as 0.0.

Public API:
    unmask_text - Returns UnmaskResult
    extract_numbers - Digits and decimal separator only
    count_fraction_digits - Digits after the last separator
    fraction_digits_of - Fraction digits of a float's plain rendering

Python 3.13+.
"""

from .unmask import count_fraction_digits, extract_numbers, fraction_digits_of, unmask_text

__all__ = [
    "count_fraction_digits",
    "extract_numbers",
    "fraction_digits_of",
    "unmask_text",
]
