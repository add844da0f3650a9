"""Money format engine: composable printer/parser units and the formatter.

Public API:
    MoneyFormatterBuilder - Assemble a chain of units
    MoneyFormatter - Immutable print/parse entry point
    MoneyAmountStyle, GroupingStyle - Amount rendering rules and presets
    MoneyParseContext - Per-parse state returned by MoneyFormatter.parse

Python 3.13+.
"""

from .amount import AmountPrinterParser
from .base import MoneyParser, MoneyPrinter, TextSink
from .builder import MoneyFormatterBuilder
from .combinators import (
    CompositePrinterParser,
    MultiPrinterParser,
    OptionalPrinterParser,
    PrinterParser,
    SignedPrinterParser,
)
from .context import MoneyParseContext, MoneyPrintContext, ParsePosition
from .formatter import MoneyFormatter
from .style import (
    ASCII_DECIMAL_COMMA_GROUP3_DOT,
    ASCII_DECIMAL_COMMA_GROUP3_SPACE,
    ASCII_DECIMAL_COMMA_NO_GROUPING,
    ASCII_DECIMAL_POINT_GROUP3_COMMA,
    ASCII_DECIMAL_POINT_GROUP3_SPACE,
    ASCII_DECIMAL_POINT_NO_GROUPING,
    LOCALIZED_GROUPING,
    LOCALIZED_NO_GROUPING,
    GroupingStyle,
    MoneyAmountStyle,
)
from .units import (
    CodeFormat,
    CurrencyCodePrinterParser,
    CurrencySymbolPrinterParser,
    LiteralPrinterParser,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Entry points
    "MoneyFormatter",
    "MoneyFormatterBuilder",
    # Contexts
    "MoneyParseContext",
    "MoneyPrintContext",
    "ParsePosition",
    # Amount style
    "GroupingStyle",
    "MoneyAmountStyle",
    "ASCII_DECIMAL_COMMA_GROUP3_DOT",
    "ASCII_DECIMAL_COMMA_GROUP3_SPACE",
    "ASCII_DECIMAL_COMMA_NO_GROUPING",
    "ASCII_DECIMAL_POINT_GROUP3_COMMA",
    "ASCII_DECIMAL_POINT_GROUP3_SPACE",
    "ASCII_DECIMAL_POINT_NO_GROUPING",
    "LOCALIZED_GROUPING",
    "LOCALIZED_NO_GROUPING",
    # Units
    "AmountPrinterParser",
    "CodeFormat",
    "CompositePrinterParser",
    "CurrencyCodePrinterParser",
    "CurrencySymbolPrinterParser",
    "LiteralPrinterParser",
    "MultiPrinterParser",
    "OptionalPrinterParser",
    "PrinterParser",
    "SignedPrinterParser",
    # Interfaces
    "MoneyParser",
    "MoneyPrinter",
    "TextSink",
]
