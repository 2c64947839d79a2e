"""Platform-neutral currency field adapter.

CurrencyFieldAdapter receives the callbacks a native text field produces
(focus, touch, text change), runs them through a MaskEngine, and forwards them
to an optional downstream CurrencyFieldListener. It never holds the widget:
each callback takes the field's current text and returns what the caller
should write back.

Write-back re-entry:
    Writing the masked text into a native field usually fires another change
    notification. Wrap the write in ``with adapter.writing_back():`` and the
    adapter ignores notifications raised from inside it.

Example:
    >>> adapter = CurrencyFieldAdapter(FieldConfig(FormatOptions("USD")))
    >>> adapter.begin_editing("")
    MaskedText(text='$0', caret_index=2)
    >>> result = adapter.text_changed("$0", 2, 0, "5")
    >>> result.text, result.caret_index
    ('$5', 2)

Python 3.13+.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from currencyfield.constants import DEFAULT_MAX_VALUE
from currencyfield.runtime import MaskEngine
from currencyfield.types import EditResult, FormatOptions, MaskedText, Selection

__all__ = [
    "CurrencyFieldAdapter",
    "CurrencyFieldListener",
    "FieldConfig",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FieldConfig:
    """Per-field configuration supplied when a field is initialized.

    Attributes:
        options: Formatting options (currency, locale, fraction bounds, sign)
        max_value: Largest amount the field accepts
        select_text_on_init: Select the whole content when the field is set up
    """

    options: FormatOptions = field(default_factory=FormatOptions)
    max_value: float = DEFAULT_MAX_VALUE
    select_text_on_init: bool = False


class CurrencyFieldListener:
    """Downstream receiver of field events.

    Subclass and override the hooks you need; the defaults do nothing.
    """

    def on_initialized(self, masked: MaskedText, selection: Selection) -> None:
        """Field was set up; selection is what the field should select."""

    def on_begin_editing(self, masked: MaskedText) -> None:
        """Field gained focus; masked is what the field now shows."""

    def on_end_editing(self) -> None:
        """Field lost focus."""

    def on_touched(self, caret_index: int) -> None:
        """Field was tapped; caret_index is where the caret was moved."""

    def on_value_changed(self, text: str, value: float) -> None:
        """An edit was applied; text is the new masked content."""

    def on_change_rejected(self, result: EditResult) -> None:
        """An edit was refused; result.rejection says why."""


class CurrencyFieldAdapter:
    """Event-driven adapter between one text field and a MaskEngine.

    Single-threaded: callbacks for one field must arrive one at a time, each
    applied to the result of the previous one.
    """

    def __init__(
        self,
        config: FieldConfig,
        listener: CurrencyFieldListener | None = None,
        *,
        engine: MaskEngine | None = None,
    ) -> None:
        self._config = config
        if engine is None:
            engine = MaskEngine.create(config.options, max_value=config.max_value)
        self._engine = engine
        self._listener = listener
        self._writing_back = False
        self._attached = True

    @property
    def config(self) -> FieldConfig:
        """Configuration the adapter was installed with."""
        return self._config

    @property
    def engine(self) -> MaskEngine:
        """Engine performing the transformations."""
        return self._engine

    @property
    def listener(self) -> CurrencyFieldListener | None:
        """Downstream listener, if any."""
        return self._listener

    @listener.setter
    def listener(self, listener: CurrencyFieldListener | None) -> None:
        self._listener = listener

    @property
    def attached(self) -> bool:
        """False once detach() has been called."""
        return self._attached

    def detach(self) -> None:
        """Stop processing and forwarding events."""
        self._attached = False
        self._listener = None

    @contextmanager
    def writing_back(self) -> Iterator[None]:
        """Suppress change notifications caused by the adapter's own write."""
        previous = self._writing_back
        self._writing_back = True
        try:
            yield
        finally:
            self._writing_back = previous

    def initialize(self, text: str) -> tuple[MaskedText, Selection]:
        """Tidy the caret of a freshly configured field.

        Returns:
            The field content with its caret, and the selection to apply
            (whole text when select_text_on_init is set).
        """
        masked = self._engine.masked(text)
        if self._config.select_text_on_init:
            selection = Selection(0, len(text))
        else:
            selection = Selection(masked.caret_index, masked.caret_index)
        if self._attached and self._listener is not None:
            self._listener.on_initialized(masked, selection)
        return masked, selection

    def begin_editing(self, text: str) -> MaskedText:
        """Field gained focus.

        An empty field is filled with the zero amount so the user always types
        into a formatted value.
        """
        if not text:
            masked = self._engine.format_value(0.0)
        else:
            masked = self._engine.masked(text)
        if self._attached and self._listener is not None:
            self._listener.on_begin_editing(masked)
        return masked

    def touched(self, text: str) -> int:
        """Field was tapped; return the caret that keeps typing in the digits."""
        caret = self._engine.caret_position(text)
        if self._attached and self._listener is not None:
            self._listener.on_touched(caret)
        return caret

    def end_editing(self) -> None:
        """Field lost focus."""
        if self._attached and self._listener is not None:
            self._listener.on_end_editing()

    def text_changed(
        self,
        previous_text: str,
        start: int,
        length: int,
        inserted: str,
        caret: int | None = None,
    ) -> EditResult | None:
        """Mask one edit and notify the listener.

        Returns:
            EditResult to write back into the field, or None when the
            notification is the adapter's own write-back or the adapter is
            detached (the caller should leave the field alone).
        """
        if self._writing_back or not self._attached:
            return None

        result = self._engine.apply_edit(previous_text, start, length, inserted, caret)

        if self._listener is not None:
            if result.accepted:
                self._listener.on_value_changed(result.text, result.value)
            else:
                self._listener.on_change_rejected(result)
        return result
