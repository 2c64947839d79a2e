"""currencyfield exception hierarchy with structured diagnostics.

Steady-state masking never raises: parse anomalies and rejected edits are
reported through return values. Exceptions are reserved for conditions where
no currency string can be produced at all.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "ConfigurationError",
    "CurrencyFieldError",
    "FormattingError",
]


class CurrencyFieldError(Exception):
    """Base exception for all currencyfield errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    category: ErrorCategory | None = None

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CurrencyFieldError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(CurrencyFieldError, ValueError):
    """Field configured with options that can never format.

    Raised at configuration time (MaskEngine.create_or_raise,
    FieldRegistry.install) so that a bad currency code is reported once
    rather than on every keystroke.
    """

    category = ErrorCategory.CONFIGURATION


class FormattingError(CurrencyFieldError):
    """Raised when locale-aware currency formatting fails.

    Unknown currency codes and unavailable locale data surface here; this is
    the one failure mask() cannot recover from.

    Attributes:
        fallback_value: Plain rendering callers may display instead
    """

    category = ErrorCategory.FORMATTING

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Value to display when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value
