"""Tests for CurrencyFieldAdapter - field callbacks, listener forwarding, re-entry."""

from __future__ import annotations

from typing import Any

import pytest

from currencyfield import (
    EditResult,
    FormatOptions,
    MaskedText,
    MaskEngine,
    RejectionReason,
    Selection,
)
from currencyfield.field import CurrencyFieldAdapter, CurrencyFieldListener, FieldConfig


class RecordingListener(CurrencyFieldListener):
    """Listener that records every event it receives."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []

    def on_initialized(self, masked: MaskedText, selection: Selection) -> None:
        self.events.append(("initialized", (masked, selection)))

    def on_begin_editing(self, masked: MaskedText) -> None:
        self.events.append(("begin", masked))

    def on_end_editing(self) -> None:
        self.events.append(("end", None))

    def on_touched(self, caret_index: int) -> None:
        self.events.append(("touched", caret_index))

    def on_value_changed(self, text: str, value: float) -> None:
        self.events.append(("changed", (text, value)))

    def on_change_rejected(self, result: EditResult) -> None:
        self.events.append(("rejected", result.rejection))


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def adapter(listener: RecordingListener) -> CurrencyFieldAdapter:
    return CurrencyFieldAdapter(FieldConfig(FormatOptions("USD"), max_value=1000), listener)


class TestFieldConfig:
    """FieldConfig defaults."""

    def test_defaults(self) -> None:
        config = FieldConfig()
        assert config.options == FormatOptions()
        assert config.max_value == 100_000_000
        assert config.select_text_on_init is False


class TestAdapterConstruction:
    """Engine resolution."""

    def test_uses_cached_engine(self) -> None:
        config = FieldConfig(FormatOptions("EUR", locale="de_DE"))
        first = CurrencyFieldAdapter(config)
        second = CurrencyFieldAdapter(config)
        assert first.engine is second.engine

    def test_explicit_engine(self) -> None:
        engine = MaskEngine(FormatOptions("USD"))
        adapter = CurrencyFieldAdapter(FieldConfig(), engine=engine)
        assert adapter.engine is engine

    def test_listener_settable(self, adapter: CurrencyFieldAdapter) -> None:
        adapter.listener = None
        assert adapter.listener is None


class TestInitialize:
    """initialize() places caret or selects all."""

    def test_caret_at_digits(self, adapter: CurrencyFieldAdapter) -> None:
        masked, selection = adapter.initialize("$12.5")
        assert masked == MaskedText("$12.5", 5)
        assert selection.is_caret
        assert selection.start == 5

    def test_listener_notified(
        self, adapter: CurrencyFieldAdapter, listener: RecordingListener
    ) -> None:
        masked, selection = adapter.initialize("$12")
        assert listener.events == [("initialized", (masked, selection))]
        assert selection == Selection(3, 3)

    def test_select_text_on_init(self) -> None:
        adapter = CurrencyFieldAdapter(FieldConfig(select_text_on_init=True))
        _, selection = adapter.initialize("$12.5")
        assert (selection.start, selection.end) == (0, 5)
        assert not selection.is_caret


class TestFocusAndTouch:
    """begin_editing(), touched(), end_editing()."""

    def test_begin_editing_empty_field(
        self, adapter: CurrencyFieldAdapter, listener: RecordingListener
    ) -> None:
        masked = adapter.begin_editing("")
        assert masked == MaskedText("$0", 2)
        assert listener.events == [("begin", masked)]

    def test_begin_editing_keeps_content(self, adapter: CurrencyFieldAdapter) -> None:
        assert adapter.begin_editing("$1,234") == MaskedText("$1,234", 6)

    def test_begin_editing_de_de(self) -> None:
        adapter = CurrencyFieldAdapter(FieldConfig(FormatOptions("EUR", locale="de_DE")))
        assert adapter.begin_editing("") == MaskedText("0\xa0€", 1)

    def test_touched(
        self, adapter: CurrencyFieldAdapter, listener: RecordingListener
    ) -> None:
        assert adapter.touched("$12.") == 4
        assert listener.events == [("touched", 4)]

    def test_end_editing(
        self, adapter: CurrencyFieldAdapter, listener: RecordingListener
    ) -> None:
        adapter.end_editing()
        assert listener.events == [("end", None)]


class TestTextChanged:
    """text_changed() applies edits and notifies the listener."""

    def test_accepted_edit(
        self, adapter: CurrencyFieldAdapter, listener: RecordingListener
    ) -> None:
        result = adapter.text_changed("$12", 3, 0, ".")
        assert result is not None
        assert (result.text, result.caret_index) == ("$12.", 4)
        assert listener.events == [("changed", ("$12.", 12.0))]

    def test_rejected_edit(
        self, adapter: CurrencyFieldAdapter, listener: RecordingListener
    ) -> None:
        result = adapter.text_changed("$999", 4, 0, "5")
        assert result is not None
        assert result.text == "$999"
        assert listener.events == [("rejected", RejectionReason.MAX_VALUE_EXCEEDED)]

    def test_write_back_is_ignored(
        self, adapter: CurrencyFieldAdapter, listener: RecordingListener
    ) -> None:
        result = adapter.text_changed("$12", 3, 0, "5")
        assert result is not None
        with adapter.writing_back():
            assert adapter.text_changed("$12", 0, 3, result.text) is None
        assert listener.events == [("changed", ("$125", 125.0))]

    def test_writing_back_restores_on_error(self, adapter: CurrencyFieldAdapter) -> None:
        with pytest.raises(RuntimeError), adapter.writing_back():
            raise RuntimeError
        assert adapter.text_changed("$12", 3, 0, "5") is not None

    def test_nested_writing_back(self, adapter: CurrencyFieldAdapter) -> None:
        with adapter.writing_back():
            with adapter.writing_back():
                pass
            assert adapter.text_changed("$12", 3, 0, "5") is None

    def test_without_listener(self) -> None:
        adapter = CurrencyFieldAdapter(FieldConfig())
        result = adapter.text_changed("$0", 2, 0, "7")
        assert result is not None
        assert result.text == "$7"


class TestDetach:
    """A detached adapter stops reacting."""

    def test_detach(self, adapter: CurrencyFieldAdapter, listener: RecordingListener) -> None:
        adapter.detach()
        assert adapter.attached is False
        assert adapter.listener is None
        assert adapter.text_changed("$12", 3, 0, "5") is None
        adapter.end_editing()
        adapter.initialize("$12")
        adapter.touched("$12")
        assert listener.events == []

    def test_detached_still_answers_caret(self, adapter: CurrencyFieldAdapter) -> None:
        adapter.detach()
        assert adapter.touched("$12") == 3
