"""Units built from other units: chains, optional groups, fan-out, sign choice.

The unit set is closed. PrinterParser names every kind a formatter can
hold; MultiPrinterParser is the only place foreign MoneyPrinter or
MoneyParser objects (from MoneyFormatterBuilder.append) enter a chain.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from moneyfmt.format.amount import AmountPrinterParser
from moneyfmt.format.units import (
    CurrencyCodePrinterParser,
    CurrencySymbolPrinterParser,
    LiteralPrinterParser,
)

if TYPE_CHECKING:
    from moneyfmt.format.base import MoneyParser, MoneyPrinter, TextSink
    from moneyfmt.format.builder import MoneyFormatterBuilder
    from moneyfmt.format.context import MoneyParseContext, MoneyPrintContext
    from moneyfmt.money import Money

__all__ = [
    "CompositePrinterParser",
    "MultiPrinterParser",
    "OptionalPrinterParser",
    "PrinterParser",
    "SignedPrinterParser",
]

logger = logging.getLogger(__name__)

_ZERO = 1
_NEGATIVE = 2


@dataclass(frozen=True, slots=True)
class CompositePrinterParser:
    """Ordered chain of units.

    Parsing stops at the first unit that records an error; the error index
    that unit set is left as it is.
    """

    units: tuple[PrinterParser, ...] = ()

    def is_printer(self) -> bool:
        return all(unit.is_printer() for unit in self.units)

    def is_parser(self) -> bool:
        return all(unit.is_parser() for unit in self.units)

    def print(self, context: MoneyPrintContext, out: TextSink, money: Money) -> None:
        for unit in self.units:
            unit.print(context, out, money)

    def parse(self, context: MoneyParseContext) -> None:
        for unit in self.units:
            unit.parse(context)
            if context.is_error():
                return

    def __str__(self) -> str:
        return "".join(str(unit) for unit in self.units)


@dataclass(frozen=True, slots=True)
class OptionalPrinterParser:
    """Chain that may be absent from the text.

    The inner chain parses into a child context. The child is merged back
    only when it finishes without error; otherwise the parent keeps its
    index, error index, currency and amount, and the inner error is dropped.
    """

    inner: CompositePrinterParser

    def is_printer(self) -> bool:
        return self.inner.is_printer()

    def is_parser(self) -> bool:
        return self.inner.is_parser()

    def print(self, context: MoneyPrintContext, out: TextSink, money: Money) -> None:
        self.inner.print(context, out, money)

    def parse(self, context: MoneyParseContext) -> None:
        child = context.create_child()
        self.inner.parse(child)
        if child.is_error():
            logger.debug(
                "Optional group %s absent at index %d (inner error at %d)",
                self.inner,
                context.index,
                child.error_index,
            )
            return
        context.merge_child(child)

    def __str__(self) -> str:
        return f"[{self.inner}]"


@dataclass(frozen=True, slots=True)
class MultiPrinterParser:
    """Parallel printer and parser slots.

    Slot i pairs printers[i] with parsers[i]; either may be None, making
    that slot print-only or parse-only.
    """

    printers: tuple[MoneyPrinter | None, ...]
    parsers: tuple[MoneyParser | None, ...]

    def __post_init__(self) -> None:
        if len(self.printers) != len(self.parsers):
            msg = (
                f"printers and parsers must have equal length, "
                f"got {len(self.printers)} and {len(self.parsers)}"
            )
            raise ValueError(msg)

    def is_printer(self) -> bool:
        return None not in self.printers

    def is_parser(self) -> bool:
        return None not in self.parsers

    def print(self, context: MoneyPrintContext, out: TextSink, money: Money) -> None:
        for printer in self.printers:
            if printer is not None:
                printer.print(context, out, money)

    def parse(self, context: MoneyParseContext) -> None:
        for parser in self.parsers:
            if parser is None:
                continue
            parser.parse(context)
            if context.is_error():
                return

    def append_to(self, builder: MoneyFormatterBuilder) -> None:
        """Append every slot pair to a builder, in order."""
        for printer, parser in zip(self.printers, self.parsers, strict=True):
            builder.append(printer, parser)

    def __str__(self) -> str:
        printed = "".join("" if p is None else str(p) for p in self.printers)
        parsed = "".join("" if p is None else str(p) for p in self.parsers)
        if printed == parsed:
            return printed
        return f"{printed}:{parsed}"


@dataclass(frozen=True, slots=True)
class SignedPrinterParser:
    """Choice between chains by the sign of the amount.

    Printing uses the chain for positive, zero or negative amounts. Parsing
    tries all three on child contexts and keeps the one that reached
    furthest (earlier chains win ties). A match by the zero chain forces a
    zero amount; a positive amount matched by the negative chain is negated.
    """

    when_positive: CompositePrinterParser
    when_zero: CompositePrinterParser
    when_negative: CompositePrinterParser

    def is_printer(self) -> bool:
        return all(c.is_printer() for c in (self.when_positive, self.when_zero, self.when_negative))

    def is_parser(self) -> bool:
        return all(c.is_parser() for c in (self.when_positive, self.when_zero, self.when_negative))

    def print(self, context: MoneyPrintContext, out: TextSink, money: Money) -> None:
        if money.is_zero():
            chain = self.when_zero
        elif money.is_positive():
            chain = self.when_positive
        else:
            chain = self.when_negative
        chain.print(context, out, money)

    def parse(self, context: MoneyParseContext) -> None:
        best: MoneyParseContext | None = None
        best_branch = -1
        branches = (self.when_positive, self.when_zero, self.when_negative)
        for branch, chain in enumerate(branches):
            child = context.create_child()
            chain.parse(child)
            if child.is_error():
                continue
            if best is None or child.index > best.index:
                best = child
                best_branch = branch
        if best is None:
            context.set_error()
            return
        context.merge_child(best)
        if best_branch == _ZERO:
            if context.amount is None or not context.amount.is_zero():
                context.amount = Decimal(0)
        elif best_branch == _NEGATIVE and context.amount is not None and context.amount > 0:
            context.amount = -context.amount

    def __str__(self) -> str:
        return f"PositiveZeroNegative({self.when_positive},{self.when_zero},{self.when_negative})"


type PrinterParser = (
    LiteralPrinterParser
    | CurrencyCodePrinterParser
    | CurrencySymbolPrinterParser
    | AmountPrinterParser
    | OptionalPrinterParser
    | CompositePrinterParser
    | MultiPrinterParser
    | SignedPrinterParser
)
"""Every unit kind a formatter chain can hold."""
