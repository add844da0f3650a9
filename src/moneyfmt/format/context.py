"""Print and parse contexts threaded through the printer/parser chain.

MoneyParseContext is the only mutable object in the format engine. One is
created per parse call and is exclusively owned by that call; optional
groups sandbox tentative parsing in a child context and merge it back only
on success.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from moneyfmt.constants import NO_ERROR_INDEX
from moneyfmt.currency import CurrencyRegistry, CurrencyUnit
from moneyfmt.diagnostics import ErrorTemplate, MissingAmountError, MissingCurrencyError
from moneyfmt.locale_context import LocaleContext
from moneyfmt.money import Money

__all__ = ["MoneyParseContext", "MoneyPrintContext", "ParsePosition"]


@dataclass(frozen=True, slots=True)
class MoneyPrintContext:
    """Immutable state shared by the printers of one print call.

    Attributes:
        locale: Locale used for symbols and separators
        registry: Registry used for decimal places of currencies
    """

    locale: LocaleContext
    registry: CurrencyRegistry


@dataclass(frozen=True, slots=True)
class ParsePosition:
    """Snapshot of where a parse stopped.

    Attributes:
        index: Index reached by the parse
        error_index: Index of the first failure, or -1
    """

    index: int
    error_index: int = NO_ERROR_INDEX


class MoneyParseContext:
    """Mutable state of a single parse operation.

    Holds the text being parsed, the current index, the error index (-1 when
    no error occurred) and the currency and amount found so far. Once the
    error index is set the context is failed: a chain stops at the unit that
    recorded the error.

    Example:
        >>> ctx = MoneyParseContext(LocaleContext.create("en"), "USD 10", registry)
        >>> ctx.index, ctx.error_index, ctx.is_complete()
        (0, -1, False)
    """

    __slots__ = ("_index", "amount", "currency", "error_index", "locale", "registry", "text")

    def __init__(
        self,
        locale: LocaleContext,
        text: str,
        registry: CurrencyRegistry,
        index: int = 0,
        error_index: int = NO_ERROR_INDEX,
        currency: CurrencyUnit | None = None,
        amount: Decimal | None = None,
    ) -> None:
        self.locale = locale
        self.text = text
        self.registry = registry
        self._index = 0
        self.index = index
        self.error_index = error_index
        self.currency = currency
        self.amount = amount

    @property
    def index(self) -> int:
        """Current parse position (0 <= index <= text length)."""
        return self._index

    @index.setter
    def index(self, value: int) -> None:
        if not 0 <= value <= len(self.text):
            msg = f"Parse index {value} outside text of length {len(self.text)}"
            raise IndexError(msg)
        self._index = value

    @property
    def text_length(self) -> int:
        return len(self.text)

    def get_text_substring(self, start: int, end: int) -> str:
        """Extract text[start:end] with bounds checking.

        Raises:
            IndexError: If start > end, or either bound lies outside the text
        """
        if not 0 <= start <= end <= len(self.text):
            msg = f"Substring [{start}, {end}) outside text of length {len(self.text)}"
            raise IndexError(msg)
        return self.text[start:end]

    def set_error(self) -> None:
        """Record an error at the current index."""
        self.error_index = self._index

    def is_error(self) -> bool:
        return self.error_index >= 0

    def is_fully_parsed(self) -> bool:
        """Whether all text has been consumed."""
        return self._index == len(self.text)

    def is_complete(self) -> bool:
        """Whether both a currency and an amount have been parsed."""
        return self.currency is not None and self.amount is not None

    def create_child(self) -> MoneyParseContext:
        """Copy this context for a tentative parse.

        Locale, text and registry are shared; the mutable scalar fields are
        copied by value, so changes to the child never reach this context.
        """
        return MoneyParseContext(
            self.locale,
            self.text,
            self.registry,
            self._index,
            self.error_index,
            self.currency,
            self.amount,
        )

    def merge_child(self, child: MoneyParseContext) -> None:
        """Overwrite this context with the state of a child.

        Unconditional: callers merge only after the child succeeded.
        """
        self.locale = child.locale
        self.text = child.text
        self.registry = child.registry
        self._index = child._index
        self.error_index = child.error_index
        self.currency = child.currency
        self.amount = child.amount

    def to_parse_position(self) -> ParsePosition:
        return ParsePosition(self._index, self.error_index)

    def to_money(self) -> Money:
        """Convert the parsed currency and amount to Money.

        Raises:
            MissingCurrencyError: If no currency was parsed
            MissingAmountError: If no amount was parsed
        """
        if self.currency is None:
            raise MissingCurrencyError(ErrorTemplate.parse_missing_currency())
        if self.amount is None:
            raise MissingAmountError(ErrorTemplate.parse_missing_amount())
        return Money(self.currency, self.amount)

    def __repr__(self) -> str:
        return (
            f"MoneyParseContext(index={self._index}, error_index={self.error_index}, "
            f"currency={self.currency}, amount={self.amount!r})"
        )
