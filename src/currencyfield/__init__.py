"""currencyfield - Currency input masking for text fields.

Reformats raw keystroke edits as a localized currency string while keeping
the caret inside the numeric content and the numeric value recoverable.
Platform bindings (Android, iOS, React Native) call into this package with
the field's text and receive back masked text, a caret index and a value.

Public API:
    unmask - Masked text -> UnmaskResult(value, trailing_separator, fraction_digits)
    mask - Value -> localized currency string
    caret_position - Caret index that keeps typing inside the digits
    should_allow_change - Keystroke admission check
    format_value / extract_value - Programmatic value <-> display text
    MaskEngine - Cached, configuration-bound engine (apply_edit for full keystrokes)
    FormatOptions - Currency, locale, fraction bounds, sign display

Exceptions:
    CurrencyFieldError - Base exception class
    FormattingError - Currency could not be formatted (unknown code)
    ConfigurationError - Field configured with unusable options

Submodules:
    currencyfield.parsing - Unmasking helpers
    currencyfield.runtime - LocaleContext, MaskEngine, functional API
    currencyfield.field - CurrencyFieldAdapter and FieldRegistry
    currencyfield.diagnostics - Error types and diagnostic codes
"""

from .diagnostics import ConfigurationError, CurrencyFieldError, FormattingError
from .enums import RejectionReason
from .runtime import (
    LocaleContext,
    MaskEngine,
    caret_position,
    extract_value,
    format_value,
    mask,
    should_allow_change,
    unmask,
)
from .types import EditResult, FormatOptions, MaskedText, Selection, UnmaskResult

try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("currencyfield")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "CurrencyFieldError",
    "EditResult",
    "FormatOptions",
    "FormattingError",
    "LocaleContext",
    "MaskEngine",
    "MaskedText",
    "RejectionReason",
    "Selection",
    "UnmaskResult",
    "__version__",
    "caret_position",
    "extract_value",
    "format_value",
    "mask",
    "should_allow_change",
    "unmask",
]
