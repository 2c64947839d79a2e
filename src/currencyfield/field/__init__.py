"""Field layer: adapters platform bindings drive, and their registry.

Python 3.13+.
"""

from .adapter import CurrencyFieldAdapter, CurrencyFieldListener, FieldConfig
from .registry import FieldRegistry

__all__ = [
    "CurrencyFieldAdapter",
    "CurrencyFieldListener",
    "FieldConfig",
    "FieldRegistry",
]
