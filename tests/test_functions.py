"""Tests for the functional API in currencyfield.runtime.functions.

These are the calls a platform binding makes per keystroke, so the examples
mirror a user typing into a USD/en_US field.
"""

from __future__ import annotations

import logging

import pytest

from currencyfield import (
    FormatOptions,
    FormattingError,
    MaskEngine,
    UnmaskResult,
    caret_position,
    extract_value,
    format_value,
    mask,
    should_allow_change,
    unmask,
)

USD = FormatOptions("USD")
EUR_DE = FormatOptions("EUR", locale="de_DE")


class TestUnmaskFunction:
    """unmask(text, options)."""

    def test_usd(self) -> None:
        assert unmask("$1,234.56", USD) == UnmaskResult(1234.56, False, 2)

    def test_trailing_separator(self) -> None:
        assert unmask("$12.", USD) == UnmaskResult(12.0, True, 0)

    def test_empty(self) -> None:
        assert unmask("", USD) == UnmaskResult(0.0, False, 0)


class TestMaskFunction:
    """mask(value, options, trailing_separator, fraction_digits)."""

    def test_one_fraction_digit(self) -> None:
        assert mask(1234.5, USD, False, 1) == "$1,234.5"

    def test_zero(self) -> None:
        assert mask(0, USD, False, 0) == "$0"

    def test_trailing_separator(self) -> None:
        assert mask(12, USD, True, 0) == "$12."

    def test_de_de(self) -> None:
        assert mask(1234.56, EUR_DE, False, 2) == "1.234,56\xa0€"

    def test_unknown_currency_raises(self) -> None:
        with pytest.raises(FormattingError):
            mask(1, FormatOptions("QQQ"))

    def test_round_trip_keeps_typing_state(self) -> None:
        state = unmask("$12.", USD)
        assert mask(state.value, USD, state.trailing_separator, state.fraction_digits) == "$12."

    def test_engines_shared_between_calls(self) -> None:
        mask(1, USD)
        mask(2, FormatOptions("USD"))
        assert MaskEngine.cache_size() == 1


class TestCaretPositionFunction:
    """caret_position(text, options)."""

    def test_after_separator(self) -> None:
        assert caret_position("$12.", USD) == 4

    def test_before_suffix(self) -> None:
        assert caret_position("12,5\xa0€", EUR_DE) == 4

    def test_empty(self) -> None:
        assert caret_position("", USD) == 0


class TestShouldAllowChangeFunction:
    """should_allow_change(symbol, previous_text, new_value, max_value)."""

    def test_duplicate_separator(self) -> None:
        assert should_allow_change(".", "12.3", 12.3, 1000) is False

    def test_over_maximum(self) -> None:
        assert should_allow_change("5", "999", 9995, 1000) is False

    def test_allowed(self) -> None:
        assert should_allow_change("5", "99", 995, 1000) is True

    def test_default_maximum(self) -> None:
        assert should_allow_change("0", "$10,000,000", 100_000_000) is True
        assert should_allow_change("1", "$10,000,000", 100_000_001) is False

    def test_options_select_separator(self) -> None:
        assert should_allow_change(",", "12,3", 12.3, 1000, EUR_DE) is False
        assert should_allow_change(",", "12,3", 12.3, 1000) is True

    def test_refusal_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="currencyfield.runtime.functions"):
            should_allow_change(".", "12.3", 12.3, 1000)
        assert "refused" in caplog.text


class TestFormatAndExtractValue:
    """Programmatic value <-> display text."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(12.0, "$12"), (12.5, "$12.5"), (12.34, "$12.34"), (0, "$0"), (1234.567, "$1,234.57")],
    )
    def test_format_value(self, value: float, expected: str) -> None:
        assert format_value(value, USD) == expected

    def test_format_value_de_de(self) -> None:
        assert format_value(1234.5, EUR_DE) == "1.234,5\xa0€"

    def test_extract_value(self) -> None:
        assert extract_value("$1,234.5", USD) == 1234.5
        assert extract_value("1.234,5\xa0€", EUR_DE) == 1234.5

    def test_extract_value_empty(self) -> None:
        assert extract_value("", USD) == 0.0
