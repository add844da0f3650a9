"""moneyfmt exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error
information. Errors raised by the format engine carry the input text and
locale that were in effect.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "CurrencyNotFoundError",
    "LocaleDataUnavailableError",
    "MissingAmountError",
    "MissingCurrencyError",
    "MoneyError",
    "MoneyFormatError",
    "MoneyParseError",
]


class MoneyError(Exception):
    """Base exception for all moneyfmt errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        category: Broad error category
    """

    category: ErrorCategory = ErrorCategory.PRINT

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MoneyError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class MoneyFormatError(MoneyError):
    """Printing or parsing a monetary value failed.

    Raised at the MoneyFormatter boundary. Units never raise this for input
    mismatches during parsing; they record an error index instead.
    """


class MoneyParseError(MoneyFormatError):
    """Text could not be parsed into a monetary value.

    Attributes:
        input_value: The string that failed to parse
        locale_code: The locale used for parsing
        error_index: 0-based index of the first unrecognized character
        parsed_index: Index reached by the parse when it stopped

    Example:
        >>> try:
        ...     formatter.parse_money("USD abc")
        ... except MoneyParseError as e:
        ...     print(e.error_index)
        4
    """

    category = ErrorCategory.PARSE

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        locale_code: str = "",
        error_index: int = -1,
        parsed_index: int = 0,
    ) -> None:
        """Initialize MoneyParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            locale_code: The locale used for parsing
            error_index: Position of the first failure
            parsed_index: Position the parse reached
        """
        super().__init__(message)
        self.input_value = input_value
        self.locale_code = locale_code
        self.error_index = error_index
        self.parsed_index = parsed_index


class MissingCurrencyError(MoneyFormatError):
    """Parse completed without determining a currency."""

    category = ErrorCategory.INCOMPLETE


class MissingAmountError(MoneyFormatError):
    """Parse completed without determining an amount."""

    category = ErrorCategory.INCOMPLETE


class LocaleDataUnavailableError(MoneyFormatError):
    """CLDR data needed for printing is missing for a locale.

    Attributes:
        locale_code: Locale whose data was requested
    """

    category = ErrorCategory.LOCALE

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        super().__init__(message)
        self.locale_code = locale_code


class CurrencyNotFoundError(MoneyError):
    """A currency code is not present in the registry.

    Attributes:
        currency_code: The code that was looked up
    """

    category = ErrorCategory.REGISTRY

    def __init__(self, message: str | Diagnostic, *, currency_code: str = "") -> None:
        super().__init__(message)
        self.currency_code = currency_code
