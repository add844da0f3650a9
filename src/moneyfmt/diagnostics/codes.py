"""Diagnostic codes and data structures.

Defines error codes, input spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "InputSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization for MoneyError.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        PARSE: Text did not match the formatter (structural mismatch)
        INCOMPLETE: Parse succeeded but currency or amount is missing
        PRINT: A value could not be rendered by the formatter
        REGISTRY: Currency lookup failed
        LOCALE: Locale data unavailable
    """

    PARSE = "parse"
    INCOMPLETE = "incomplete"
    PRINT = "print"
    REGISTRY = "registry"
    LOCALE = "locale"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        4000-4099: Parsing errors (text to money)
        4100-4199: Printing errors (money to text)
        4200-4299: Registry and locale data errors
    """

    # Parsing errors (4000-4099)
    PARSE_MISMATCH = 4001
    PARSE_TRAILING_TEXT = 4002
    PARSE_MISSING_CURRENCY = 4003
    PARSE_MISSING_AMOUNT = 4004
    PARSE_NOT_SUPPORTED = 4005

    # Printing errors (4100-4199)
    PRINT_NOT_SUPPORTED = 4101
    PRINT_NO_NUMERIC_CODE = 4102

    # Registry and locale errors (4200-4299)
    CURRENCY_NOT_FOUND = 4201
    CURRENCY_INVALID_CODE = 4202
    CURRENCY_DUPLICATE = 4203
    LOCALE_UNKNOWN = 4210
    LOCALE_DATA_UNAVAILABLE = 4211


@dataclass(frozen=True, slots=True)
class InputSpan:
    """Location inside the text being parsed.

    Python strings measure positions in characters (Unicode code points),
    not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate InputSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"InputSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"InputSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Input location (None for errors not tied to a position)
        hint: Suggestion for fixing the error
        currency_code: Currency involved in the error, if any
        locale_code: Locale involved in the error, if any
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: InputSpan | None = None
    hint: str | None = None
    currency_code: str | None = None
    locale_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[PARSE_MISMATCH]: Unable to parse 'USD abc' at index 4
              --> index 4
              = help: Check the text against the formatter pattern

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
