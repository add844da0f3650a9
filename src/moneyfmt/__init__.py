"""moneyfmt - locale-aware printing and parsing of monetary amounts.

Monetary values (an ISO 4217 currency plus an exact Decimal amount) are
converted to and from text by formatters assembled from composable
printer/parser units. Locale data comes from Unicode CLDR via Babel.

Public API:
    Money - Currency plus exact Decimal amount
    CurrencyUnit, CurrencyRegistry - ISO 4217 currency data
    LocaleContext - CLDR symbols and grouping for one locale
    MoneyFormatterBuilder - Assemble a formatter
    MoneyFormatter - Print and parse monetary values

Exceptions:
    MoneyError - Base exception class
    MoneyFormatError - Printing or parsing failed
    MoneyParseError - Text did not match the formatter
    CurrencyNotFoundError - Unknown currency code

Submodules:
    moneyfmt.format - Units, amount styles and parse contexts
    moneyfmt.diagnostics - Error codes, templates and formatting
"""

from .currency import CurrencyRegistry, CurrencyUnit, default_registry, load_currency_csv
from .diagnostics import (
    CurrencyNotFoundError,
    LocaleDataUnavailableError,
    MissingAmountError,
    MissingCurrencyError,
    MoneyError,
    MoneyFormatError,
    MoneyParseError,
)
from .format import (
    GroupingStyle,
    MoneyAmountStyle,
    MoneyFormatter,
    MoneyFormatterBuilder,
    MoneyParseContext,
)
from .locale_context import LocaleContext
from .money import Money

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("moneyfmt")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CurrencyNotFoundError",
    "CurrencyRegistry",
    "CurrencyUnit",
    "GroupingStyle",
    "LocaleContext",
    "LocaleDataUnavailableError",
    "MissingAmountError",
    "MissingCurrencyError",
    "Money",
    "MoneyAmountStyle",
    "MoneyError",
    "MoneyFormatError",
    "MoneyFormatter",
    "MoneyFormatterBuilder",
    "MoneyParseContext",
    "MoneyParseError",
    "__version__",
    "default_registry",
    "load_currency_csv",
]
