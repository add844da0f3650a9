"""Diagnostic system for moneyfmt errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, InputSpan
from .errors import (
    CurrencyNotFoundError,
    LocaleDataUnavailableError,
    MissingAmountError,
    MissingCurrencyError,
    MoneyError,
    MoneyFormatError,
    MoneyParseError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CurrencyNotFoundError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "InputSpan",
    "LocaleDataUnavailableError",
    "MissingAmountError",
    "MissingCurrencyError",
    "MoneyError",
    "MoneyFormatError",
    "MoneyParseError",
    "OutputFormat",
]
