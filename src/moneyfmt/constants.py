"""Shared constants for moneyfmt.

This module provides centralized configuration constants used across
the currency, locale and format packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Currency codes: ISO 4217 shape constraints
- Cache limits: Memory bounds for caching subsystems
- Defaults: Fallback locale and bundled data file

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Currency codes
    "ISO_CURRENCY_CODE_LENGTH",
    "ISO_NUMERIC_CODE_LENGTH",
    "NO_NUMERIC_CODE",
    "NO_DECIMAL_PLACES",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "MAX_SYMBOL_TABLE_CACHE_SIZE",
    # Defaults
    "DEFAULT_LOCALE",
    "FALLBACK_LOCALE",
    "BUNDLED_CURRENCY_DATA",
    "NO_ERROR_INDEX",
]

# ============================================================================
# CURRENCY CODES
# ============================================================================

# ISO 4217 alphabetic codes are exactly 3 uppercase ASCII letters.
ISO_CURRENCY_CODE_LENGTH: int = 3

# ISO 4217 numeric codes are printed zero-padded to 3 digits.
ISO_NUMERIC_CODE_LENGTH: int = 3

# Sentinel for currencies without a numeric code (e.g. XXX test entries, crypto).
NO_NUMERIC_CODE: int = -1

# Sentinel for pseudo-currencies with no meaningful decimal places (XAU, XDR).
NO_DECIMAL_PLACES: int = -1

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleContext instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# Maximum cached (locale, registry) symbol tables used by symbol parsing.
MAX_SYMBOL_TABLE_CACHE_SIZE: int = 64

# ============================================================================
# DEFAULTS
# ============================================================================

# Locale used by MoneyFormatterBuilder.to_formatter() when none is given.
DEFAULT_LOCALE: str = "en"

# Locale substituted by LocaleContext.create() for unknown identifiers.
FALLBACK_LOCALE: str = "en_US"

# Currency data shipped inside the package (moneyfmt/data/).
BUNDLED_CURRENCY_DATA: str = "MoneyData.csv"

# Error index value meaning "no error recorded".
NO_ERROR_INDEX: int = -1
