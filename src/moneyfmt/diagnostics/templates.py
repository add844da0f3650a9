"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, InputSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @staticmethod
    def parse_mismatch(value: str, error_index: int) -> Diagnostic:
        """Text did not match the formatter at a position.

        Args:
            value: The input string
            error_index: Index of the first unrecognized character

        Returns:
            Diagnostic for PARSE_MISMATCH
        """
        msg = f"Text could not be parsed at index {error_index}: '{value}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_MISMATCH,
            message=msg,
            span=InputSpan(error_index, min(error_index + 1, max(len(value), error_index))),
            hint="Check the text against the formatter pattern",
        )

    @staticmethod
    def parse_trailing_text(value: str, parsed_index: int) -> Diagnostic:
        """Parse stopped before the end of the text.

        Args:
            value: The input string
            parsed_index: Index where parsing stopped

        Returns:
            Diagnostic for PARSE_TRAILING_TEXT
        """
        trailing = value[parsed_index:]
        msg = f"Unparsed text found at index {parsed_index}: '{trailing}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_TRAILING_TEXT,
            message=msg,
            span=InputSpan(parsed_index, len(value)),
            hint="Remove the trailing text or use a non-strict formatter",
        )

    @staticmethod
    def parse_missing_currency() -> Diagnostic:
        """Parse completed without a currency.

        Returns:
            Diagnostic for PARSE_MISSING_CURRENCY
        """
        return Diagnostic(
            code=DiagnosticCode.PARSE_MISSING_CURRENCY,
            message="Cannot convert to Money as no currency found",
            hint="Add a currency code or symbol element to the formatter",
        )

    @staticmethod
    def parse_missing_amount() -> Diagnostic:
        """Parse completed without an amount.

        Returns:
            Diagnostic for PARSE_MISSING_AMOUNT
        """
        return Diagnostic(
            code=DiagnosticCode.PARSE_MISSING_AMOUNT,
            message="Cannot convert to Money as no amount found",
            hint="Add an amount element to the formatter",
        )

    @staticmethod
    def parse_not_supported(formatter: str) -> Diagnostic:
        """Formatter contains print-only elements.

        Args:
            formatter: String representation of the formatter

        Returns:
            Diagnostic for PARSE_NOT_SUPPORTED
        """
        msg = f"MoneyFormatter does not support parsing: {formatter}"
        return Diagnostic(code=DiagnosticCode.PARSE_NOT_SUPPORTED, message=msg)

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    @staticmethod
    def print_not_supported(formatter: str) -> Diagnostic:
        """Formatter contains parse-only elements.

        Args:
            formatter: String representation of the formatter

        Returns:
            Diagnostic for PRINT_NOT_SUPPORTED
        """
        msg = f"MoneyFormatter does not support printing: {formatter}"
        return Diagnostic(code=DiagnosticCode.PRINT_NOT_SUPPORTED, message=msg)

    @staticmethod
    def print_no_numeric_code(currency_code: str) -> Diagnostic:
        """Currency has no ISO 4217 numeric code.

        Args:
            currency_code: Alphabetic code of the currency

        Returns:
            Diagnostic for PRINT_NO_NUMERIC_CODE
        """
        msg = f"Currency '{currency_code}' has no numeric code"
        return Diagnostic(
            code=DiagnosticCode.PRINT_NO_NUMERIC_CODE,
            message=msg,
            hint="Use append_currency_code() for currencies without a numeric code",
            currency_code=currency_code,
        )

    # ------------------------------------------------------------------
    # Registry and locale
    # ------------------------------------------------------------------

    @staticmethod
    def currency_not_found(currency_code: str) -> Diagnostic:
        """Currency code not present in a registry.

        Args:
            currency_code: The code that was looked up

        Returns:
            Diagnostic for CURRENCY_NOT_FOUND
        """
        msg = f"Unknown currency '{currency_code}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_NOT_FOUND,
            message=msg,
            hint="Check the code against ISO 4217 or the registry data file",
            currency_code=currency_code,
        )

    @staticmethod
    def currency_invalid_code(currency_code: str) -> Diagnostic:
        """Currency code is not 3 uppercase ASCII letters.

        Args:
            currency_code: The malformed code

        Returns:
            Diagnostic for CURRENCY_INVALID_CODE
        """
        msg = f"Invalid currency code '{currency_code}': expected 3 letters A-Z"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_INVALID_CODE,
            message=msg,
            currency_code=currency_code,
        )

    @staticmethod
    def currency_duplicate(currency_code: str) -> Diagnostic:
        """Currency registered twice with conflicting data.

        Args:
            currency_code: The duplicated code

        Returns:
            Diagnostic for CURRENCY_DUPLICATE
        """
        msg = f"Currency '{currency_code}' already registered with different data"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_DUPLICATE,
            message=msg,
            currency_code=currency_code,
        )

    @staticmethod
    def locale_unknown(locale_code: str) -> Diagnostic:
        """Locale identifier not recognized by CLDR.

        Args:
            locale_code: The unknown locale

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale identifier '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use a BCP 47 / POSIX locale such as 'en_US' or 'de-DE'",
            locale_code=locale_code,
        )

    @staticmethod
    def locale_data_unavailable(locale_code: str, what: str) -> Diagnostic:
        """CLDR data missing for a locale.

        Args:
            locale_code: The locale queried
            what: Name of the missing item (e.g. "decimal symbol")

        Returns:
            Diagnostic for LOCALE_DATA_UNAVAILABLE
        """
        msg = f"No {what} available for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_DATA_UNAVAILABLE,
            message=msg,
            locale_code=locale_code,
        )
