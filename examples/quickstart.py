"""Quickstart example for currencyfield.

This example walks through what a platform binding does for one text field:
mask a programmatic value, apply keystrokes, place the caret, and read the
value back.

Note: Examples ignore listener events for brevity. In production, install
adapters through FieldRegistry so configuration errors surface once.
"""

from currencyfield import EditResult, FormatOptions, MaskEngine, caret_position, mask, unmask
from currencyfield.field import CurrencyFieldAdapter, CurrencyFieldListener, FieldConfig

# Example 1: Masking a value
print("=" * 50)
print("Example 1: Masking a Value")
print("=" * 50)

usd = FormatOptions("USD")
print(mask(1234.5, usd, False, 1))
# Output: $1,234.5

eur = FormatOptions("EUR", locale="de_DE")
print(mask(1234.56, eur, False, 2))
# Output: 1.234,56 €

# Example 2: Unmask, re-mask and caret
print("\n" + "=" * 50)
print("Example 2: Trailing Separator and Caret")
print("=" * 50)

state = unmask("$12.", usd)
print(state)
# Output: UnmaskResult(value=12.0, trailing_separator=True, fraction_digits=0)

text = mask(state.value, usd, state.trailing_separator, state.fraction_digits)
print(text, caret_position(text, usd))
# Output: $12. 4

# Example 3: Typing into a field
print("\n" + "=" * 50)
print("Example 3: Keystrokes")
print("=" * 50)

engine = MaskEngine.create(usd, max_value=10_000)
text = engine.format_value(0).text
for symbol in "1234,56":
    result = engine.apply_edit(text, engine.caret_position(text), 0, symbol)
    print(f"{symbol!r:>5} -> {result.text:<12} caret={result.caret_index} {result.rejection or ''}")
    text = result.text
# Output (last line): '6' -> $1,234.56    caret=9


# Example 4: Field adapter with a listener
print("\n" + "=" * 50)
print("Example 4: Field Adapter")
print("=" * 50)


class PrintingListener(CurrencyFieldListener):
    """Print every applied or refused edit."""

    def on_value_changed(self, text: str, value: float) -> None:
        print(f"changed: {text} ({value})")

    def on_change_rejected(self, result: EditResult) -> None:
        print(f"rejected: {result.rejection}")


adapter = CurrencyFieldAdapter(FieldConfig(eur, max_value=1000), PrintingListener())
masked = adapter.begin_editing("")
adapter.text_changed(masked.text, masked.caret_index, 0, "9")
# Output: changed: 9 € (9.0)
adapter.text_changed("999\xa0€", 3, 0, "9")
# Output: rejected: max_value_exceeded
