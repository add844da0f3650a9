"""MoneyFormatter: immutable, reusable print/parse entry point.

The formatter is the boundary where errors recorded in a parse context
become exceptions (parse_money) or returned error tuples (try_parse).

Python 3.13+.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from moneyfmt.currency import CurrencyRegistry, default_registry
from moneyfmt.diagnostics import (
    ErrorTemplate,
    MoneyError,
    MoneyFormatError,
    MoneyParseError,
)
from moneyfmt.format.combinators import CompositePrinterParser
from moneyfmt.format.context import MoneyParseContext, MoneyPrintContext
from moneyfmt.locale_context import LocaleContext

if TYPE_CHECKING:
    from moneyfmt.format.base import TextSink
    from moneyfmt.money import Money

__all__ = ["MoneyFormatter"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoneyFormatter:
    """Prints and parses monetary values with a fixed chain of units.

    Create instances with MoneyFormatterBuilder.to_formatter().

    Attributes:
        printer_parser: The unit chain
        locale: Default locale, overridable per parse call
        registry: Currency registry used to resolve codes and decimal places
        strict: When True, parse_money() rejects trailing unparsed text

    Thread Safety:
        Immutable. One instance can be shared by any number of threads;
        every call allocates its own contexts.
    """

    printer_parser: CompositePrinterParser
    locale: LocaleContext
    registry: CurrencyRegistry = field(default_factory=default_registry, kw_only=True)
    strict: bool = field(default=True, kw_only=True)

    def is_printer(self) -> bool:
        return self.printer_parser.is_printer()

    def is_parser(self) -> bool:
        return self.printer_parser.is_parser()

    def with_locale(self, locale: str | LocaleContext) -> MoneyFormatter:
        """Copy of this formatter using another default locale."""
        return replace(self, locale=_locale_context(locale))

    def with_registry(self, registry: CurrencyRegistry) -> MoneyFormatter:
        return replace(self, registry=registry)

    def with_strict(self, strict: bool) -> MoneyFormatter:
        return replace(self, strict=strict)

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    def print(self, money: Money) -> str:
        """Render a monetary value to a string.

        Raises:
            MoneyFormatError: If the chain cannot print, or a unit has
                nothing to print for this value (no numeric code)
            LocaleDataUnavailableError: If the locale lacks needed data
        """
        out = io.StringIO()
        self.print_to(out, money)
        return out.getvalue()

    def print_to(self, out: TextSink, money: Money) -> None:
        """Render a monetary value to a text sink (file, StringIO, ...)."""
        if not self.is_printer():
            raise MoneyFormatError(ErrorTemplate.print_not_supported(str(self)))
        context = MoneyPrintContext(self.locale, self.registry)
        self.printer_parser.print(context, out, money)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(
        self,
        text: str,
        start_index: int = 0,
        locale: str | LocaleContext | None = None,
    ) -> MoneyParseContext:
        """Run the chain over text and return the resulting context.

        Input mismatches never raise: inspect error_index, index and
        is_complete() on the returned context.

        Args:
            text: Text to parse
            start_index: Index at which parsing starts
            locale: Locale for this call (default: the formatter's locale)

        Raises:
            MoneyFormatError: If the chain cannot parse
            IndexError: If start_index lies outside the text
        """
        if not self.is_parser():
            raise MoneyFormatError(ErrorTemplate.parse_not_supported(str(self)))
        locale_context = self.locale if locale is None else _locale_context(locale)
        context = MoneyParseContext(locale_context, text, self.registry, index=start_index)
        self.printer_parser.parse(context)
        return context

    def parse_money(self, text: str, locale: str | LocaleContext | None = None) -> Money:
        """Parse text to Money.

        Args:
            text: Text to parse
            locale: Locale for this call (default: the formatter's locale)

        Returns:
            The parsed monetary value

        Raises:
            MoneyParseError: If the text does not match the chain, or
                (strict formatters) text remains after the match
            MissingCurrencyError: If no currency was parsed
            MissingAmountError: If no amount was parsed
        """
        context = self.parse(text, locale=locale)
        locale_code = context.locale.locale_code
        if context.is_error():
            raise MoneyParseError(
                ErrorTemplate.parse_mismatch(text, context.error_index),
                input_value=text,
                locale_code=locale_code,
                error_index=context.error_index,
                parsed_index=context.index,
            )
        if self.strict and not context.is_fully_parsed():
            raise MoneyParseError(
                ErrorTemplate.parse_trailing_text(text, context.index),
                input_value=text,
                locale_code=locale_code,
                error_index=context.index,
                parsed_index=context.index,
            )
        return context.to_money()

    def try_parse(
        self, text: str, locale: str | LocaleContext | None = None
    ) -> tuple[Money | None, tuple[MoneyError, ...]]:
        """Parse text to Money without raising.

        Returns:
            Tuple of (result, errors):
            - result: Parsed Money, or None if parsing failed
            - errors: Tuple of MoneyError (empty tuple on success)

        Examples:
            >>> money, errors = formatter.try_parse("USD 1,234.50")
            >>> money.amount, errors
            (Decimal('1234.50'), ())

            >>> money, errors = formatter.try_parse("USD abc")
            >>> money is None, errors[0].error_index
            (True, 4)
        """
        try:
            return (self.parse_money(text, locale), ())
        except MoneyError as e:
            logger.debug("Parse of '%s' failed: %s", text, e)
            return (None, (e,))

    def __str__(self) -> str:
        return str(self.printer_parser)


def _locale_context(locale: str | LocaleContext) -> LocaleContext:
    if isinstance(locale, LocaleContext):
        return locale
    return LocaleContext.create(locale)
