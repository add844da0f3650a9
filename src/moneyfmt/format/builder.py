"""Mutable assembler for MoneyFormatter chains.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from moneyfmt.constants import DEFAULT_LOCALE
from moneyfmt.currency import default_registry
from moneyfmt.format.amount import AmountPrinterParser
from moneyfmt.format.combinators import (
    CompositePrinterParser,
    MultiPrinterParser,
    OptionalPrinterParser,
    PrinterParser,
    SignedPrinterParser,
)
from moneyfmt.format.formatter import MoneyFormatter
from moneyfmt.format.style import (
    ASCII_DECIMAL_POINT_GROUP3_COMMA,
    LOCALIZED_GROUPING,
    MoneyAmountStyle,
)
from moneyfmt.format.units import (
    CodeFormat,
    CurrencyCodePrinterParser,
    CurrencySymbolPrinterParser,
    LiteralPrinterParser,
)
from moneyfmt.locale_context import LocaleContext

if TYPE_CHECKING:
    from moneyfmt.currency import CurrencyRegistry
    from moneyfmt.format.base import MoneyParser, MoneyPrinter

__all__ = ["MoneyFormatterBuilder"]

_BUILTIN_UNITS = (
    LiteralPrinterParser,
    CurrencyCodePrinterParser,
    CurrencySymbolPrinterParser,
    AmountPrinterParser,
    OptionalPrinterParser,
    CompositePrinterParser,
    MultiPrinterParser,
    SignedPrinterParser,
)


class MoneyFormatterBuilder:
    """Builds a MoneyFormatter from units appended in order.

    Every append method returns the builder, so calls chain. Adjacent
    literals are merged into one unit.

    Example:
        >>> formatter = (
        ...     MoneyFormatterBuilder()
        ...     .append_currency_code()
        ...     .append_literal(" ")
        ...     .append_amount()
        ...     .to_formatter("en")
        ... )
        >>> formatter.print(Money.of("USD", "1234.5"))
        'USD 1,234.50'

    Thread Safety:
        Not thread-safe. Formatters produced by to_formatter() are immutable.
    """

    __slots__ = ("_units",)

    def __init__(self) -> None:
        self._units: list[PrinterParser] = []

    # ------------------------------------------------------------------
    # Units
    # ------------------------------------------------------------------

    def append_literal(self, literal: str) -> MoneyFormatterBuilder:
        """Append fixed text. Empty text is ignored."""
        if not literal:
            return self
        if self._units and isinstance(self._units[-1], LiteralPrinterParser):
            literal = self._units.pop().literal + literal
        self._units.append(LiteralPrinterParser(literal))
        return self

    def append_currency_code(self) -> MoneyFormatterBuilder:
        """Append the 3-letter ISO 4217 code ("USD")."""
        return self._append_unit(CurrencyCodePrinterParser(CodeFormat.ALPHA3))

    def append_currency_numeric3_code(self) -> MoneyFormatterBuilder:
        """Append the zero-padded numeric code ("036")."""
        return self._append_unit(CurrencyCodePrinterParser(CodeFormat.NUMERIC3))

    def append_currency_numeric_code(self) -> MoneyFormatterBuilder:
        """Append the unpadded numeric code ("36")."""
        return self._append_unit(CurrencyCodePrinterParser(CodeFormat.NUMERIC))

    def append_currency_symbol(self) -> MoneyFormatterBuilder:
        """Append the locale's currency symbol ("$", "€")."""
        return self._append_unit(CurrencySymbolPrinterParser())

    def append_amount(
        self, style: MoneyAmountStyle = ASCII_DECIMAL_POINT_GROUP3_COMMA
    ) -> MoneyFormatterBuilder:
        """Append the amount, written with the given style."""
        return self._append_unit(AmountPrinterParser(style))

    def append_amount_localized(self) -> MoneyFormatterBuilder:
        """Append the amount with every symbol taken from the locale."""
        return self.append_amount(LOCALIZED_GROUPING)

    def append_optional(self, builder: MoneyFormatterBuilder) -> MoneyFormatterBuilder:
        """Append the units of another builder as a group that may be absent."""
        return self._append_unit(OptionalPrinterParser(builder._composite()))

    def append_signed(
        self,
        when_positive: MoneyFormatter,
        when_zero: MoneyFormatter,
        when_negative: MoneyFormatter,
    ) -> MoneyFormatterBuilder:
        """Append a choice of formatter by the sign of the amount.

        Args:
            when_positive: Used for amounts greater than zero
            when_zero: Used for zero amounts
            when_negative: Used for amounts below zero; typically prints
                an absolute-value amount inside its own sign markers
        """
        return self._append_unit(
            SignedPrinterParser(
                when_positive.printer_parser,
                when_zero.printer_parser,
                when_negative.printer_parser,
            )
        )

    def append(
        self, printer: MoneyPrinter | None, parser: MoneyParser | None
    ) -> MoneyFormatterBuilder:
        """Append a printer and a parser as one slot.

        Either may be None for a print-only or parse-only slot.

        Raises:
            ValueError: If both are None
        """
        if printer is None and parser is None:
            msg = "At least one of printer and parser must be given"
            raise ValueError(msg)
        if printer is parser and isinstance(printer, _BUILTIN_UNITS):
            if isinstance(printer, LiteralPrinterParser):
                return self.append_literal(printer.literal)
            return self._append_unit(printer)
        return self._append_unit(MultiPrinterParser((printer,), (parser,)))

    def append_formatter(self, formatter: MoneyFormatter) -> MoneyFormatterBuilder:
        """Append every unit of an existing formatter."""
        for unit in formatter.printer_parser.units:
            if isinstance(unit, MultiPrinterParser):
                unit.append_to(self)
            else:
                self.append(unit, unit)
        return self

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def to_formatter(
        self,
        locale: str | LocaleContext = DEFAULT_LOCALE,
        *,
        registry: CurrencyRegistry | None = None,
        strict: bool = True,
    ) -> MoneyFormatter:
        """Build an immutable formatter from the units appended so far.

        The builder stays usable; later appends do not affect the result.

        Args:
            locale: Default locale for printing and parsing
            registry: Currency registry (default: bundled registry)
            strict: Reject trailing unparsed text in parse_money()
        """
        locale_context = locale if isinstance(locale, LocaleContext) else LocaleContext.create(locale)
        return MoneyFormatter(
            self._composite(),
            locale_context,
            registry=registry if registry is not None else default_registry(),
            strict=strict,
        )

    def _composite(self) -> CompositePrinterParser:
        return CompositePrinterParser(tuple(self._units))

    def _append_unit(self, unit: PrinterParser) -> MoneyFormatterBuilder:
        self._units.append(unit)
        return self

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self) -> str:
        return f"MoneyFormatterBuilder({self._composite()})"
