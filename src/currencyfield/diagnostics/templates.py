"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def currency_code_unknown(currency_code: str) -> Diagnostic:
        """Currency code not present in CLDR data.

        Args:
            currency_code: The code that failed validation

        Returns:
            Diagnostic for CURRENCY_CODE_UNKNOWN
        """
        msg = f"Unknown currency code '{currency_code}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_CODE_UNKNOWN,
            message=msg,
            hint="Use an ISO 4217 code such as USD or EUR",
            currency_code=currency_code,
        )

    @staticmethod
    def locale_unknown(locale_code: str, reason: str) -> Diagnostic:
        """Locale not recognized by Babel.

        Args:
            locale_code: The locale as given by the caller
            reason: Babel's explanation

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use a BCP-47 or POSIX locale such as en-US or de_DE",
            locale_code=locale_code,
        )

    @staticmethod
    def max_value_invalid(max_value: float) -> Diagnostic:
        """Maximum value is not a positive finite number.

        Args:
            max_value: The rejected maximum

        Returns:
            Diagnostic for MAX_VALUE_INVALID
        """
        msg = f"Maximum value must be a positive finite number, got {max_value!r}"
        return Diagnostic(
            code=DiagnosticCode.MAX_VALUE_INVALID,
            message=msg,
            hint="Omit max_value to use the default of 100,000,000",
        )

    @staticmethod
    def formatting_failed(
        value: float, currency_code: str, locale_code: str, reason: str
    ) -> Diagnostic:
        """Babel failed to render an amount.

        Args:
            value: The amount being formatted
            currency_code: Currency being formatted
            locale_code: Locale being used
            reason: Underlying error text

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        msg = f"Currency formatting failed for '{currency_code} {value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=msg,
            currency_code=currency_code,
            locale_code=locale_code,
        )
