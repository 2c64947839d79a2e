"""Diagnostic system for currencyfield errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import ConfigurationError, CurrencyFieldError, FormattingError
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "CurrencyFieldError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "ErrorTemplate",
    "FormattingError",
]
