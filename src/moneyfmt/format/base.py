"""Interfaces shared by all printer/parser units.

Every unit exposes ``print`` and ``parse`` plus ``is_printer`` /
``is_parser`` capability checks. The set of units is closed: see
moneyfmt.format.combinators.PrinterParser for the full union.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from moneyfmt.format.context import MoneyParseContext, MoneyPrintContext
    from moneyfmt.money import Money

__all__ = ["MoneyParser", "MoneyPrinter", "TextSink"]


class TextSink(Protocol):
    """Output accepted by printers (io.StringIO, text files, ...)."""

    def write(self, s: str, /) -> object: ...


@runtime_checkable
class MoneyPrinter(Protocol):
    """Renders part of a monetary value to a text sink."""

    def print(self, context: MoneyPrintContext, out: TextSink, money: Money) -> None: ...


@runtime_checkable
class MoneyParser(Protocol):
    """Consumes part of the text held by a parse context.

    Mismatches are recorded with context.set_error() (or an explicit error
    index); parsers never raise for bad input.
    """

    def parse(self, context: MoneyParseContext) -> None: ...
