"""Value types exchanged between the mask engine and its callers.

All types are frozen dataclasses: they are created per call, never mutated,
and safe to share between threads.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeAlias

from .constants import DEFAULT_CURRENCY, DEFAULT_LOCALE
from .enums import RejectionReason
from .locale_utils import get_system_locale

__all__ = [
    "EditResult",
    "FormatOptions",
    "LocaleCode",
    "MaskedText",
    "Selection",
    "UnmaskResult",
]

LocaleCode: TypeAlias = str
"""BCP-47 or POSIX locale code (e.g., 'en-US', 'de_DE')."""


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Caller-supplied formatting configuration for one field.

    Resolved through LocaleContext into the locale-specific decimal separator,
    grouping separator, currency symbol and sign symbols.

    Attributes:
        currency_code: ISO 4217 currency code (USD, EUR, JPY, ...)
        minimum_fraction_digits: Fixed lower bound on displayed fraction digits.
            None derives the bound from what the user has typed.
        maximum_fraction_digits: Fixed upper bound on displayed fraction digits.
            None derives the bound from what the user has typed.
        sign_enabled: Always show the sign, prefixing positive amounts with '+'
        locale: Locale whose separators and currency pattern are used
    """

    currency_code: str = DEFAULT_CURRENCY
    minimum_fraction_digits: int | None = None
    maximum_fraction_digits: int | None = None
    sign_enabled: bool = False
    locale: LocaleCode = DEFAULT_LOCALE

    def __post_init__(self) -> None:
        """Validate fraction digit bounds.

        Raises:
            ValueError: If a bound is negative, or minimum exceeds maximum.
        """
        for name in ("minimum_fraction_digits", "maximum_fraction_digits"):
            bound = getattr(self, name)
            if bound is not None and bound < 0:
                msg = f"FormatOptions.{name} must be >= 0, got {bound}"
                raise ValueError(msg)
        if (
            self.minimum_fraction_digits is not None
            and self.maximum_fraction_digits is not None
            and self.minimum_fraction_digits > self.maximum_fraction_digits
        ):
            msg = (
                f"FormatOptions.minimum_fraction_digits ({self.minimum_fraction_digits}) "
                f"must be <= maximum_fraction_digits ({self.maximum_fraction_digits})"
            )
            raise ValueError(msg)

    @classmethod
    def for_system_locale(cls, currency_code: str = DEFAULT_CURRENCY) -> "FormatOptions":
        """Build options bound to the operating system's locale.

        The locale is detected once, here; the returned options do not track
        later changes to the process environment.
        """
        return cls(currency_code=currency_code, locale=get_system_locale())


@dataclass(frozen=True, slots=True)
class UnmaskResult:
    """Numeric value and sub-unit typing state recovered from masked text.

    Attributes:
        value: Amount implied by the digits present
        trailing_separator: The last significant character is the decimal
            separator (user started, but has not finished, a fractional part)
        fraction_digits: Digits currently after the separator (0 if none)
    """

    value: float = 0.0
    trailing_separator: bool = False
    fraction_digits: int = 0


@dataclass(frozen=True, slots=True)
class MaskedText:
    """Formatted field content with the caret position to apply.

    Attributes:
        text: Locale-formatted currency string
        caret_index: Code-unit offset into text, 0 <= caret_index <= len(text)
    """

    text: str
    caret_index: int

    def __post_init__(self) -> None:
        """Validate the caret lies inside the text.

        Raises:
            ValueError: If caret_index is outside [0, len(text)].
        """
        if not 0 <= self.caret_index <= len(self.text):
            msg = (
                f"MaskedText.caret_index must be within [0, {len(self.text)}], "
                f"got {self.caret_index}"
            )
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Selection:
    """Selection range a field should apply (start == end is a bare caret)."""

    start: int
    end: int

    @property
    def is_caret(self) -> bool:
        """True when the selection is collapsed to a single caret position."""
        return self.start == self.end


@dataclass(frozen=True, slots=True)
class EditResult:
    """Outcome of applying one keystroke edit to a field.

    Attributes:
        masked: Text and caret to push back into the field. For rejected
            edits this is the pre-edit text.
        value: Numeric value of masked.text
        rejection: Why the edit was refused, or None when it was applied
    """

    masked: MaskedText
    value: float
    rejection: RejectionReason | None = None

    @property
    def accepted(self) -> bool:
        """True when the edit was applied."""
        return self.rejection is None

    @property
    def text(self) -> str:
        """Shortcut for masked.text."""
        return self.masked.text

    @property
    def caret_index(self) -> int:
        """Shortcut for masked.caret_index."""
        return self.masked.caret_index
