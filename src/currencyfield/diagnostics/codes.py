"""Diagnostic codes and data structures.

Defines error codes, categories, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for currencyfield errors.

    Categories:
        CONFIGURATION: Field configured with unusable options
        FORMATTING: Locale-aware currency formatting failure
    """

    CONFIGURATION = "configuration"
    FORMATTING = "formatting"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (currency code, locale, bounds)
        2000-2999: Formatting errors (Babel rendering failures)
    """

    # Configuration errors (1000-1999)
    CURRENCY_CODE_UNKNOWN = 1001
    LOCALE_UNKNOWN = 1002
    MAX_VALUE_INVALID = 1003

    # Formatting errors (2000-2999)
    FORMATTING_FAILED = 2001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        currency_code: Currency involved in the failure, if any
        locale_code: Locale involved in the failure, if any
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    currency_code: str | None = None
    locale_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic as a compact multi-line report.

        Example output:
            error[CURRENCY_CODE_UNKNOWN]: Unknown currency code 'XYZ'
              = currency: XYZ
              = help: Use an ISO 4217 code such as USD or EUR

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.currency_code is not None:
            lines.append(f"  = currency: {self.currency_code}")
        if self.locale_code is not None:
            lines.append(f"  = locale: {self.locale_code}")
        if self.hint is not None:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
