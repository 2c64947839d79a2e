"""Hypothesis strategies for currencyfield property-based testing.

Usage:
    from tests.strategies import currency_amounts, typed_amounts
    from tests.strategies.currency import MASKING_LOCALES

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - currency_amounts, typed_amounts, keystrokes
"""

from .currency import (
    MASKING_CURRENCIES,
    MASKING_LOCALES,
    currency_amounts,
    keystrokes,
    masking_options,
    typed_amounts,
)

__all__ = [
    "MASKING_CURRENCIES",
    "MASKING_LOCALES",
    "currency_amounts",
    "keystrokes",
    "masking_options",
    "typed_amounts",
]
