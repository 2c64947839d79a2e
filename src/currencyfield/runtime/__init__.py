"""Runtime: locale resolution, masking engine and functional entry points.

Python 3.13+. Uses Babel for i18n.
"""

from .engine import MaskEngine
from .functions import (
    caret_position,
    extract_value,
    format_value,
    mask,
    should_allow_change,
    unmask,
)
from .locale_context import LocaleContext

__all__ = [
    "LocaleContext",
    "MaskEngine",
    "caret_position",
    "extract_value",
    "format_value",
    "mask",
    "should_allow_change",
    "unmask",
]
