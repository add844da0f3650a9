"""Leaf printer/parser units: literal text, currency code, currency symbol.

Units are immutable and hold no per-call state, so one instance can serve
any number of concurrent print and parse calls.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from moneyfmt.constants import (
    ISO_CURRENCY_CODE_LENGTH,
    ISO_NUMERIC_CODE_LENGTH,
    MAX_SYMBOL_TABLE_CACHE_SIZE,
)
from moneyfmt.currency import CurrencyRegistry
from moneyfmt.diagnostics import ErrorTemplate, LocaleDataUnavailableError, MoneyFormatError
from moneyfmt.locale_context import LocaleContext

if TYPE_CHECKING:
    from moneyfmt.format.base import TextSink
    from moneyfmt.format.context import MoneyParseContext, MoneyPrintContext
    from moneyfmt.money import Money

__all__ = [
    "CodeFormat",
    "CurrencyCodePrinterParser",
    "CurrencySymbolPrinterParser",
    "LiteralPrinterParser",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LiteralPrinterParser:
    """Fixed text, printed verbatim and matched exactly (case-sensitive).

    Attributes:
        literal: The text
    """

    literal: str

    def is_printer(self) -> bool:
        return True

    def is_parser(self) -> bool:
        return True

    def print(self, context: MoneyPrintContext, out: TextSink, money: Money) -> None:
        out.write(self.literal)

    def parse(self, context: MoneyParseContext) -> None:
        if context.text.startswith(self.literal, context.index):
            context.index += len(self.literal)
        else:
            context.set_error()

    def __str__(self) -> str:
        return "'" + self.literal.replace("'", "''") + "'"


class CodeFormat(StrEnum):
    """How a currency is identified in text.

    ALPHA3: ISO 4217 letters ("USD")
    NUMERIC3: ISO 4217 number, zero padded ("036")
    NUMERIC: ISO 4217 number, unpadded ("36")
    """

    ALPHA3 = "code"
    NUMERIC3 = "numeric3Code"
    NUMERIC = "numericCode"


@dataclass(frozen=True, slots=True)
class CurrencyCodePrinterParser:
    """Currency code element.

    Parsing resolves the code against the registry of the parse context.
    A short or unknown code records an error at the start of the token and
    leaves the index where it was.

    Attributes:
        code_format: Which code is printed and parsed
    """

    code_format: CodeFormat = CodeFormat.ALPHA3

    def is_printer(self) -> bool:
        return True

    def is_parser(self) -> bool:
        return True

    def print(self, context: MoneyPrintContext, out: TextSink, money: Money) -> None:
        currency = money.currency
        match self.code_format:
            case CodeFormat.ALPHA3:
                out.write(currency.code)
            case CodeFormat.NUMERIC3 | CodeFormat.NUMERIC:
                if not currency.has_numeric_code:
                    raise MoneyFormatError(ErrorTemplate.print_no_numeric_code(currency.code))
                if self.code_format is CodeFormat.NUMERIC3:
                    out.write(currency.numeric3_code)
                else:
                    out.write(str(currency.numeric_code))

    def parse(self, context: MoneyParseContext) -> None:
        start = context.index
        match self.code_format:
            case CodeFormat.ALPHA3:
                end = start + ISO_CURRENCY_CODE_LENGTH
                if end > context.text_length:
                    context.set_error()
                    return
                currency = context.registry.find(context.get_text_substring(start, end))
            case CodeFormat.NUMERIC3:
                end = start + ISO_NUMERIC_CODE_LENGTH
                if end > context.text_length:
                    context.set_error()
                    return
                token = context.get_text_substring(start, end)
                currency = context.registry.find_numeric(token) if _is_digits(token) else None
            case CodeFormat.NUMERIC:
                end = start
                limit = min(start + ISO_NUMERIC_CODE_LENGTH, context.text_length)
                while end < limit and _is_digits(context.text[end]):
                    end += 1
                token = context.get_text_substring(start, end)
                currency = context.registry.find_numeric(token) if token else None
        if currency is None:
            context.set_error()
            return
        context.currency = currency
        context.index = end

    def __str__(self) -> str:
        return "${" + self.code_format.value + "}"


def _is_digits(token: str) -> bool:
    return token.isascii() and token.isdigit()


@dataclass(frozen=True, slots=True)
class CurrencySymbolPrinterParser:
    """Locale-specific currency symbol element ("$", "€", "US$").

    Printing raises LocaleDataUnavailableError when the locale has no
    symbol. Parsing matches the longest symbol known for the locale; a
    symbol shared by several currencies resolves to the locale's territory
    currency when that is one of them, otherwise it is an error.
    """

    def is_printer(self) -> bool:
        return True

    def is_parser(self) -> bool:
        return True

    def print(self, context: MoneyPrintContext, out: TextSink, money: Money) -> None:
        out.write(context.locale.currency_symbol(money.currency_code))

    def parse(self, context: MoneyParseContext) -> None:
        table = _symbol_table(context.locale.locale_code, context.registry)
        for symbol, codes in table:
            if not context.text.startswith(symbol, context.index):
                continue
            code = _resolve_symbol(codes, context.locale)
            if code is None:
                logger.debug("Ambiguous currency symbol %r: %s", symbol, ", ".join(codes))
                context.set_error()
                return
            context.currency = context.registry.of(code)
            context.index += len(symbol)
            return
        context.set_error()

    def __str__(self) -> str:
        return "${symbolLocalized}"


def _resolve_symbol(codes: tuple[str, ...], locale: LocaleContext) -> str | None:
    if len(codes) == 1:
        return codes[0]
    territory_code = locale.territory_currency()
    if territory_code in codes:
        return territory_code
    return None


@functools.lru_cache(maxsize=MAX_SYMBOL_TABLE_CACHE_SIZE)
def _symbol_table(
    locale_code: str, registry: CurrencyRegistry
) -> tuple[tuple[str, tuple[str, ...]], ...]:
    """Symbols of every registry currency for a locale, longest first.

    Thread-safe via lru_cache internal locking. Keyed by registry identity.

    Returns:
        Tuple of (symbol, currency codes using it) pairs, sorted so that
        longer symbols are tried before their prefixes ("US$" before "$")
    """
    locale = LocaleContext.create(locale_code)
    by_symbol: dict[str, set[str]] = {}
    for unit in registry:
        try:
            symbol = locale.currency_symbol(unit.code)
        except LocaleDataUnavailableError:
            continue
        by_symbol.setdefault(symbol, set()).add(unit.code)
    return tuple(
        (symbol, tuple(sorted(codes)))
        for symbol, codes in sorted(by_symbol.items(), key=lambda item: (-len(item[0]), item[0]))
    )
