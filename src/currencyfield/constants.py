"""Shared constants for currencyfield.

Centralized configuration defaults used across the parsing, runtime and
field layers. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Field defaults: Values a field falls back to when the caller omits them
- Precision limits: Sub-unit typing caps
- Cache limits: Memory bounds for caching subsystems

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Field defaults
    "DEFAULT_CURRENCY",
    "DEFAULT_LOCALE",
    "DEFAULT_MAX_VALUE",
    # Precision limits
    "MAX_FRACTION_DIGITS",
    "NORMALIZED_SEPARATOR_GLYPHS",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "MAX_ENGINE_CACHE_SIZE",
    # Fallback patterns
    "FALLBACK_CURRENCY_PATTERN",
]

# ============================================================================
# FIELD DEFAULTS
# ============================================================================

# ISO 4217 code used when a field is configured without a currency.
DEFAULT_CURRENCY: str = "USD"

# Locale used when FormatOptions does not name one.
# Explicit rather than OS-derived so that masking is reproducible across hosts;
# use FormatOptions.for_system_locale() to opt into the OS locale.
DEFAULT_LOCALE: str = "en_US"

# Largest amount a field accepts before edits are rejected.
DEFAULT_MAX_VALUE: float = 100_000_000

# ============================================================================
# PRECISION LIMITS
# ============================================================================

# Hard cap on digits typed after the decimal separator, regardless of the
# currency's own minor-unit precision (JPY: 0, BHD: 3).
MAX_FRACTION_DIGITS: int = 2

# Glyphs a keyboard may produce for "decimal point". A single typed glyph from
# this set is rewritten to the active locale's decimal separator.
NORMALIZED_SEPARATOR_GLYPHS: frozenset[str] = frozenset({".", ",", "-"})

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleContext instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# Maximum cached MaskEngine instances (one per distinct FormatOptions/max value).
MAX_ENGINE_CACHE_SIZE: int = 128

# ============================================================================
# FALLBACK PATTERNS
# ============================================================================

# CLDR root currency pattern, used when a locale ships no standard pattern.
FALLBACK_CURRENCY_PATTERN: str = "\xa4#,##0.00"
