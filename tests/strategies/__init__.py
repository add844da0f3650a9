"""Hypothesis strategies for moneyfmt property-based testing.

Usage:
    from tests.strategies import money_values, amount_styles
"""

from .money import (
    ASCII_STYLES,
    amount_styles,
    bundled_currencies,
    decimal_amounts,
    money_values,
    parse_texts,
)

__all__ = [
    "ASCII_STYLES",
    "amount_styles",
    "bundled_currencies",
    "decimal_amounts",
    "money_values",
    "parse_texts",
]
