"""Amount printer/parser: the numeric part of a monetary value.

Printing renders the exact Decimal amount with the characters of a
MoneyAmountStyle. Parsing scans digits, one decimal point and grouping
characters and builds the Decimal from a string, so no binary floating
point is ever involved.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Context, Decimal, InvalidOperation
from typing import TYPE_CHECKING

from moneyfmt.format.style import ASCII_DECIMAL_POINT_GROUP3_COMMA, GroupingStyle, MoneyAmountStyle

if TYPE_CHECKING:
    from moneyfmt.currency import CurrencyUnit
    from moneyfmt.format.base import TextSink
    from moneyfmt.format.context import MoneyParseContext, MoneyPrintContext
    from moneyfmt.money import Money

__all__ = ["AmountPrinterParser"]


@dataclass(frozen=True, slots=True)
class AmountPrinterParser:
    """Amount element driven by a MoneyAmountStyle.

    Attributes:
        style: Characters, grouping and digit rules. Localized fields are
            resolved against the context locale on every call.

    Example:
        >>> unit = AmountPrinterParser(ASCII_DECIMAL_POINT_GROUP3_COMMA)
        >>> str(unit)
        '${amount}'
    """

    style: MoneyAmountStyle = ASCII_DECIMAL_POINT_GROUP3_COMMA

    def is_printer(self) -> bool:
        return True

    def is_parser(self) -> bool:
        return True

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    def print(self, context: MoneyPrintContext, out: TextSink, money: Money) -> None:
        """Write the amount.

        Decimal places come from the context registry entry for the currency,
        or from the Money's own unit when the registry does not know it.

        Raises:
            LocaleDataUnavailableError: If a localized field has no CLDR value
        """
        style = self.style.localize(context.locale)
        currency = context.registry.find(money.currency_code) or money.currency
        value = _apply_fraction_digits(money.amount, style, currency)
        negative = value < 0
        digits = format(value.copy_abs(), "f")
        zero = style.zero_character or "0"
        if zero != "0":
            offset = ord(zero) - ord("0")
            digits = "".join(chr(ord(ch) + offset) if ch.isdigit() else ch for ch in digits)

        integer, _, fraction = digits.partition(".")
        if negative and not style.absolute_value:
            out.write(style.negative_sign or "-")
        decimal_point = style.decimal_point or "."
        if style.grouping_style is GroupingStyle.NONE:
            out.write(integer)
            if fraction or style.forced_decimal_point:
                out.write(decimal_point)
            out.write(fraction)
            return

        size = style.grouping_size or 3
        extended = style.extended_grouping_size or size
        group = style.grouping_character or ","
        out.write(_group_integer(integer, group, size, extended))
        if fraction or style.forced_decimal_point:
            out.write(decimal_point)
        if style.grouping_style is GroupingStyle.FULL:
            out.write(_group_fraction(fraction, group, size, extended))
        else:
            out.write(fraction)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, context: MoneyParseContext) -> None:
        """Read an amount at the context index.

        Accepts an optional sign, digits, at most one decimal point and
        grouping characters where the style groups. A grouping character
        must follow a digit and is left unconsumed when no digit follows it.
        Without any digit the error is recorded at the starting index.
        """
        style = self.style.localize(context.locale)
        text = context.text
        length = context.text_length
        start = context.index
        zero = ord(style.zero_character or "0")
        group = style.grouping_character
        grouped_integer = style.grouping_style is not GroupingStyle.NONE
        grouped_fraction = style.grouping_style is GroupingStyle.FULL

        buf: list[str] = []
        pos = start
        if pos < length and text[pos] == style.negative_sign:
            buf.append("-")
            pos += 1
        elif pos < length and text[pos] == style.positive_sign:
            pos += 1

        seen_digit = False
        seen_point = False
        last_was_digit = False
        last_group_pos = -1
        while pos < length:
            ch = text[pos]
            value = ord(ch) - zero
            if 0 <= value <= 9:
                buf.append(chr(ord("0") + value))
                seen_digit = True
                last_was_digit = True
            elif ch == style.decimal_point and not seen_point:
                buf.append(".")
                seen_point = True
                last_was_digit = False
            elif (
                ch == group
                and last_was_digit
                and (grouped_fraction if seen_point else grouped_integer)
            ):
                last_group_pos = pos
                last_was_digit = False
            else:
                break
            pos += 1

        if last_group_pos == pos - 1:
            pos -= 1
        if not seen_digit:
            context.set_error()
            return
        try:
            amount = Decimal("".join(buf))
        except InvalidOperation:
            context.set_error()
            return
        context.amount = amount
        context.index = pos

    def __str__(self) -> str:
        return "${amount}"


def _apply_fraction_digits(
    amount: Decimal, style: MoneyAmountStyle, currency: CurrencyUnit
) -> Decimal:
    minimum = style.min_fraction_digits
    maximum = style.max_fraction_digits
    if minimum is None and maximum is None:
        if currency.is_pseudo_currency:
            minimum = 0
        else:
            minimum = maximum = currency.decimal_places
    minimum = minimum or 0
    scale = -int(amount.as_tuple().exponent)
    if maximum is not None and scale > maximum:
        return _quantize(amount, maximum)
    if scale < minimum:
        return _quantize(amount, minimum)
    return amount


def _quantize(amount: Decimal, places: int) -> Decimal:
    # Precision large enough that quantize never signals InvalidOperation.
    precision = max(28, amount.adjusted() + places + 2)
    return amount.quantize(
        Decimal(1).scaleb(-places),
        rounding=ROUND_HALF_EVEN,
        context=Context(prec=precision),
    )


def _group_integer(integer: str, group: str, size: int, extended: int) -> str:
    parts: list[str] = [integer[0]]
    length = len(integer)
    for i in range(1, length):
        remaining = length - i
        if remaining >= size + extended:
            boundary = (remaining - size) % extended == 0
        else:
            boundary = remaining % size == 0
        if boundary:
            parts.append(group)
        parts.append(integer[i])
    return "".join(parts)


def _group_fraction(fraction: str, group: str, size: int, extended: int) -> str:
    parts: list[str] = []
    length = len(fraction)
    for i, ch in enumerate(fraction):
        parts.append(ch)
        if i + 1 >= length:
            break
        if i >= size:
            boundary = (i - size) % extended == extended - 1
        else:
            boundary = i % size == size - 1
        if boundary:
            parts.append(group)
    return "".join(parts)
