"""MaskEngine: masking, caret placement and keystroke admission for one field.

The engine is pure: every method is a function of its explicit arguments and
the immutable configuration the engine was created with. It never holds a
reference to a UI widget; callers pass text in and apply the returned text and
caret to the live field themselves.

Typical keystroke flow (see apply_edit):

    previous "$12"  + "."  ->  "$12."   caret 4
    previous "$12." + "5"  ->  "$12.5"  caret 5
    previous "$12.5" + "." ->  rejected (one separator only)

Python 3.13+. Uses Babel (via LocaleContext) for i18n.
"""

import logging
import math
from collections import OrderedDict
from threading import RLock
from typing import ClassVar, TypeAlias

from currencyfield.constants import (
    DEFAULT_MAX_VALUE,
    MAX_ENGINE_CACHE_SIZE,
    MAX_FRACTION_DIGITS,
    NORMALIZED_SEPARATOR_GLYPHS,
)
from currencyfield.diagnostics import ConfigurationError, CurrencyFieldError, ErrorTemplate
from currencyfield.enums import RejectionReason
from currencyfield.parsing import extract_numbers, fraction_digits_of, unmask_text
from currencyfield.types import EditResult, FormatOptions, MaskedText, UnmaskResult

from .locale_context import LocaleContext

__all__ = ["MaskEngine"]

logger = logging.getLogger(__name__)

_EngineKey: TypeAlias = tuple[FormatOptions, float]


class MaskEngine:
    """Currency mask bound to one FormatOptions and maximum value.

    Use MaskEngine.create() to share cached instances between fields with the
    same configuration, or MaskEngine.create_or_raise() to validate the
    currency code up front.

    Examples:
        >>> engine = MaskEngine.create(FormatOptions("USD"))
        >>> engine.unmask("$1,234.56")
        UnmaskResult(value=1234.56, trailing_separator=False, fraction_digits=2)
        >>> engine.mask(1234.5, trailing_separator=False, fraction_digits=1)
        '$1,234.5'
        >>> engine.caret_position("$12.")
        4
    """

    _cache: ClassVar[OrderedDict[_EngineKey, "MaskEngine"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    __slots__ = ("_context", "_max_value", "_options")

    def __init__(
        self,
        options: FormatOptions,
        *,
        max_value: float = DEFAULT_MAX_VALUE,
        context: LocaleContext | None = None,
    ) -> None:
        self._options = options
        self._max_value = max_value
        self._context = context if context is not None else LocaleContext.create(options.locale)

    def __repr__(self) -> str:
        return f"MaskEngine(options={self._options!r}, max_value={self._max_value!r})"

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def create(
        cls, options: FormatOptions, *, max_value: float = DEFAULT_MAX_VALUE
    ) -> "MaskEngine":
        """Return a cached engine for the configuration.

        Never validates the currency code; an unknown code surfaces as
        FormattingError from mask().
        """
        key: _EngineKey = (options, float(max_value))
        with cls._cache_lock:
            engine = cls._cache.get(key)
            if engine is not None:
                cls._cache.move_to_end(key)
                return engine

            engine = cls(options, max_value=max_value)
            if len(cls._cache) >= MAX_ENGINE_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[key] = engine
            return engine

    @classmethod
    def create_or_raise(
        cls, options: FormatOptions, *, max_value: float = DEFAULT_MAX_VALUE
    ) -> "MaskEngine":
        """Create an engine, validating currency, locale and maximum value.

        Raises:
            ConfigurationError: If any part of the configuration can never format
        """
        if not LocaleContext.is_known_currency(options.currency_code):
            raise ConfigurationError(ErrorTemplate.currency_code_unknown(options.currency_code))
        if not math.isfinite(max_value) or max_value <= 0:
            raise ConfigurationError(ErrorTemplate.max_value_invalid(max_value))
        try:
            context = LocaleContext.create_or_raise(options.locale)
        except ValueError as e:
            raise ConfigurationError(
                ErrorTemplate.locale_unknown(options.locale, str(e))
            ) from e
        return cls(options, max_value=max_value, context=context)

    @classmethod
    def clear_cache(cls) -> None:
        """Drop all cached engines."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Number of cached engines."""
        with cls._cache_lock:
            return len(cls._cache)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def options(self) -> FormatOptions:
        """Formatting options this engine was created with."""
        return self._options

    @property
    def max_value(self) -> float:
        """Largest amount an edit may produce."""
        return self._max_value

    @property
    def context(self) -> LocaleContext:
        """Resolved locale context."""
        return self._context

    @property
    def decimal_separator(self) -> str:
        """Active locale's decimal separator."""
        return self._context.decimal_symbol

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    def unmask(self, text: str) -> UnmaskResult:
        """Recover value and typing state from (possibly mid-edit) text."""
        return unmask_text(text, self.decimal_separator)

    def fraction_bounds(self, fraction_digits: int) -> tuple[int, int]:
        """Resolve (minimum, maximum) displayed fraction digits.

        Configured bounds win; an omitted bound follows what the user typed,
        capped at two digits, and is clamped so it never crosses the
        configured one.

        Examples:
            >>> engine = MaskEngine(FormatOptions("USD"))
            >>> engine.fraction_bounds(1), engine.fraction_bounds(5)
            ((1, 1), (2, 2))
            >>> MaskEngine(FormatOptions("USD", maximum_fraction_digits=0)).fraction_bounds(2)
            (0, 0)
        """
        observed = min(max(fraction_digits, 0), MAX_FRACTION_DIGITS)
        minimum = self._options.minimum_fraction_digits
        maximum = self._options.maximum_fraction_digits
        if minimum is None and maximum is None:
            return observed, observed
        if maximum is None:
            return minimum, max(minimum, observed)
        if minimum is None:
            return min(observed, maximum), maximum
        return minimum, maximum

    def mask(
        self,
        value: float,
        *,
        trailing_separator: bool = False,
        fraction_digits: int = 0,
    ) -> str:
        """Format an amount for display in the field.

        Args:
            value: Amount to display
            trailing_separator: Re-append the decimal separator the user just
                typed (it carries no numeric information of its own)
            fraction_digits: Fraction digits from the most recent unmask

        Returns:
            Locale-formatted currency string, never empty

        Raises:
            FormattingError: If the currency code is unknown or Babel fails
        """
        minimum, maximum = self.fraction_bounds(fraction_digits)
        formatted = self._context.format_currency(
            value,
            currency=self._options.currency_code,
            minimum_fraction_digits=minimum,
            maximum_fraction_digits=maximum,
            sign_enabled=self._options.sign_enabled,
        )

        if trailing_separator and minimum == 0:
            insert_at = _index_after_last_digit(formatted) or len(formatted)
            formatted = formatted[:insert_at] + self.decimal_separator + formatted[insert_at:]

        return formatted

    def caret_position(self, text: str) -> int:
        """Caret index that keeps typing inside the numeric content.

        The caret goes after the later of the last digit and the last decimal
        separator, in front of any suffix decoration ("12,5 €"). Text with
        neither puts the caret at its end.
        """
        after_digit = _index_after_last_digit(text)
        after_separator = text.rfind(self.decimal_separator) + 1
        caret = max(after_digit, after_separator)
        if caret > 0:
            return caret
        return len(text)

    def check_change(
        self,
        symbol: str,
        previous_text: str | None,
        new_value: float,
        max_value: float | None = None,
    ) -> RejectionReason | None:
        """Return why an edit must be refused, or None to admit it.

        Args:
            symbol: Text the edit inserted (already separator-normalized)
            previous_text: Field content before the edit
            new_value: Value unmasked from the edited content
            max_value: Override of the engine's maximum value
        """
        limit = self._max_value if max_value is None else max_value
        separator = self.decimal_separator

        if previous_text and separator in previous_text and symbol == separator:
            return RejectionReason.DUPLICATE_DECIMAL_SEPARATOR
        if not math.isfinite(new_value) or new_value > limit:
            return RejectionReason.MAX_VALUE_EXCEEDED
        if fraction_digits_of(new_value) > MAX_FRACTION_DIGITS:
            return RejectionReason.FRACTION_DIGITS_EXCEEDED
        return None

    def should_allow_change(
        self,
        symbol: str,
        previous_text: str | None,
        new_value: float,
        max_value: float | None = None,
    ) -> bool:
        """True if the edit may be applied (see check_change)."""
        return self.check_change(symbol, previous_text, new_value, max_value) is None

    # ------------------------------------------------------------------
    # Edit application
    # ------------------------------------------------------------------

    def normalize_symbol(self, symbol: str) -> str:
        """Map a typed '.', ',' or '-' to the locale decimal separator."""
        if symbol in NORMALIZED_SEPARATOR_GLYPHS:
            return self.decimal_separator
        return symbol

    def masked(self, text: str) -> MaskedText:
        """Pair text with its policy caret position."""
        return MaskedText(text=text, caret_index=self.caret_position(text))

    def format_value(self, value: float) -> MaskedText:
        """Mask a programmatic value (not a keystroke) for display."""
        text = self.mask(value, fraction_digits=fraction_digits_of(value))
        return self.masked(text)

    def apply_edit(
        self,
        previous_text: str,
        start: int,
        length: int,
        inserted: str,
        caret: int | None = None,
    ) -> EditResult:
        """Apply one keystroke: replace previous_text[start:start+length] with inserted.

        Args:
            previous_text: Field content before the edit
            start: Offset of the replaced range
            length: Length of the replaced range (0 for a pure insertion)
            inserted: Text typed or pasted (empty for a deletion)
            caret: Caret before the edit, restored if the edit is rejected

        Returns:
            EditResult. Rejected edits carry the untouched previous_text.
        """
        try:
            if start < 0 or length < 0 or start + length > len(previous_text):
                msg = (
                    f"Edit range [{start}, {start + length}) outside text "
                    f"of length {len(previous_text)}"
                )
                raise IndexError(msg)

            symbol = self.normalize_symbol(inserted)
            edited = previous_text[:start] + symbol + previous_text[start + length :]
            result = self.unmask(edited)

            rejection = self.check_change(symbol, previous_text, result.value)
            if rejection is not None:
                logger.debug("Edit %r on %r rejected: %s", inserted, previous_text, rejection)
                if caret is None or not 0 <= caret <= len(previous_text):
                    caret = self.caret_position(previous_text)
                return EditResult(
                    masked=MaskedText(previous_text, caret),
                    value=self.unmask(previous_text).value,
                    rejection=rejection,
                )

            separator = self.decimal_separator
            if extract_numbers(edited, separator).count(separator) > 1:
                # A paste carrying its own separators cannot be read as one amount
                msg = f"Edited text {edited!r} holds more than one decimal separator"
                raise ValueError(msg)

            text = self.mask(
                result.value,
                trailing_separator=result.trailing_separator,
                fraction_digits=result.fraction_digits,
            )
            return EditResult(masked=self.masked(text), value=result.value)
        except (CurrencyFieldError, ValueError, IndexError, ArithmeticError) as e:
            logger.warning("Edit %r on %r failed, reverting: %s", inserted, previous_text, e)
            return EditResult(
                masked=self.masked(previous_text),
                value=self.unmask(previous_text).value,
                rejection=RejectionReason.INVALID_STATE,
            )


def _index_after_last_digit(text: str) -> int:
    """Index just after the last ASCII digit, or 0 when there is none."""
    for index in range(len(text) - 1, -1, -1):
        if text[index] in "0123456789":
            return index + 1
    return 0
