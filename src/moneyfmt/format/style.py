"""Amount style: how the numeric part of a monetary value is written.

A MoneyAmountStyle fixes the characters and grouping rules used by the
amount printer/parser. Fields left as None are "localized": they are
resolved from a LocaleContext when the style is used.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum

from moneyfmt.locale_context import LocaleContext

__all__ = [
    "ASCII_DECIMAL_COMMA_GROUP3_DOT",
    "ASCII_DECIMAL_COMMA_GROUP3_SPACE",
    "ASCII_DECIMAL_COMMA_NO_GROUPING",
    "ASCII_DECIMAL_POINT_GROUP3_COMMA",
    "ASCII_DECIMAL_POINT_GROUP3_SPACE",
    "ASCII_DECIMAL_POINT_NO_GROUPING",
    "LOCALIZED_GROUPING",
    "LOCALIZED_NO_GROUPING",
    "GroupingStyle",
    "MoneyAmountStyle",
]


class GroupingStyle(StrEnum):
    """Where grouping characters are written.

    NONE: never
    BEFORE_DECIMAL_POINT: integer part only ("1,234,567.1234")
    FULL: integer and fraction parts ("1,234,567.123,4")
    """

    NONE = "none"
    BEFORE_DECIMAL_POINT = "before_decimal_point"
    FULL = "full"


def _check_char(name: str, value: str | None) -> None:
    if value is not None and len(value) != 1:
        msg = f"{name} must be a single character, got {value!r}"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class MoneyAmountStyle:
    """Characters and rules for printing and parsing amounts.

    Attributes:
        zero_character: Character for digit zero; digits 1-9 follow it
        positive_sign: Sign accepted before positive amounts when parsing
        negative_sign: Sign printed before negative amounts
        decimal_point: Decimal separator
        grouping_character: Grouping separator
        grouping_style: Where grouping characters appear
        grouping_size: Digits in the group nearest the decimal point
        extended_grouping_size: Digits in further groups (0 = grouping_size)
        forced_decimal_point: Print the decimal point even without fraction digits
        absolute_value: Print the absolute value (sign handled elsewhere)
        min_fraction_digits: Minimum fraction digits printed (zero padded)
        max_fraction_digits: Maximum fraction digits printed (rounded half-even)

    Fraction digits: when both are None the currency's decimal places fix
    both. When only one is set the other is unbounded (max) or 0 (min).

    Example:
        >>> style = ASCII_DECIMAL_COMMA_GROUP3_DOT.with_fraction_digits(2, 2)
        >>> style.decimal_point, style.grouping_character
        (',', '.')
    """

    zero_character: str | None = None
    positive_sign: str | None = None
    negative_sign: str | None = None
    decimal_point: str | None = None
    grouping_character: str | None = None
    grouping_style: GroupingStyle = GroupingStyle.BEFORE_DECIMAL_POINT
    grouping_size: int | None = None
    extended_grouping_size: int | None = None
    forced_decimal_point: bool = False
    absolute_value: bool = False
    min_fraction_digits: int | None = None
    max_fraction_digits: int | None = None

    def __post_init__(self) -> None:
        """Validate style invariants.

        Raises:
            ValueError: On multi-character symbols, non-positive grouping
                sizes, or inconsistent fraction digit bounds.
        """
        _check_char("zero_character", self.zero_character)
        _check_char("positive_sign", self.positive_sign)
        _check_char("negative_sign", self.negative_sign)
        _check_char("decimal_point", self.decimal_point)
        _check_char("grouping_character", self.grouping_character)
        if self.grouping_size is not None and self.grouping_size <= 0:
            msg = f"grouping_size must be > 0, got {self.grouping_size}"
            raise ValueError(msg)
        if self.extended_grouping_size is not None and self.extended_grouping_size < 0:
            msg = f"extended_grouping_size must be >= 0, got {self.extended_grouping_size}"
            raise ValueError(msg)
        if self.min_fraction_digits is not None and self.min_fraction_digits < 0:
            msg = f"min_fraction_digits must be >= 0, got {self.min_fraction_digits}"
            raise ValueError(msg)
        if self.max_fraction_digits is not None and self.max_fraction_digits < 0:
            msg = f"max_fraction_digits must be >= 0, got {self.max_fraction_digits}"
            raise ValueError(msg)
        if (
            self.min_fraction_digits is not None
            and self.max_fraction_digits is not None
            and self.min_fraction_digits > self.max_fraction_digits
        ):
            msg = (
                f"min_fraction_digits ({self.min_fraction_digits}) must not exceed "
                f"max_fraction_digits ({self.max_fraction_digits})"
            )
            raise ValueError(msg)
        if (
            self.decimal_point is not None
            and self.decimal_point == self.grouping_character
        ):
            msg = f"decimal_point and grouping_character must differ, both {self.decimal_point!r}"
            raise ValueError(msg)

    @property
    def is_localized(self) -> bool:
        """Whether any symbol or size still has to come from a locale."""
        return None in (
            self.zero_character,
            self.positive_sign,
            self.negative_sign,
            self.decimal_point,
            self.grouping_character,
            self.grouping_size,
            self.extended_grouping_size,
        )

    def localize(self, locale: LocaleContext) -> MoneyAmountStyle:
        """Resolve localized fields against a locale.

        Fields already set are kept. The zero character is always resolved
        to ASCII '0' (CLDR 'latn' numbering system). Grouping sizes are only
        looked up for styles that group.

        Args:
            locale: Locale supplying separators, signs and grouping sizes

        Returns:
            Style with every symbol set, and sizes set when grouping

        Raises:
            LocaleDataUnavailableError: If the locale lacks a needed value
        """
        if not self.is_localized:
            return self
        grouping_size = self.grouping_size
        extended = self.extended_grouping_size
        grouped = self.grouping_style is not GroupingStyle.NONE
        if grouped and (grouping_size is None or extended is None):
            primary, secondary = locale.grouping_sizes()
            if grouping_size is None:
                grouping_size = primary
            if extended is None:
                extended = 0 if secondary == grouping_size else secondary
        return replace(
            self,
            zero_character=self.zero_character or "0",
            positive_sign=self.positive_sign or _single(locale.plus_sign(), "+"),
            negative_sign=self.negative_sign or _single(locale.minus_sign(), "-"),
            decimal_point=self.decimal_point or locale.decimal_symbol(),
            grouping_character=self.grouping_character or locale.group_symbol(),
            grouping_size=grouping_size,
            extended_grouping_size=extended,
        )

    # ------------------------------------------------------------------
    # Copy modifiers
    # ------------------------------------------------------------------

    def with_zero_character(self, zero_character: str | None) -> MoneyAmountStyle:
        return replace(self, zero_character=zero_character)

    def with_positive_sign(self, positive_sign: str | None) -> MoneyAmountStyle:
        return replace(self, positive_sign=positive_sign)

    def with_negative_sign(self, negative_sign: str | None) -> MoneyAmountStyle:
        return replace(self, negative_sign=negative_sign)

    def with_decimal_point(self, decimal_point: str | None) -> MoneyAmountStyle:
        return replace(self, decimal_point=decimal_point)

    def with_grouping_character(self, grouping_character: str | None) -> MoneyAmountStyle:
        return replace(self, grouping_character=grouping_character)

    def with_grouping_style(self, grouping_style: GroupingStyle) -> MoneyAmountStyle:
        return replace(self, grouping_style=grouping_style)

    def with_grouping_size(self, grouping_size: int | None) -> MoneyAmountStyle:
        return replace(self, grouping_size=grouping_size)

    def with_extended_grouping_size(self, extended_grouping_size: int | None) -> MoneyAmountStyle:
        return replace(self, extended_grouping_size=extended_grouping_size)

    def with_forced_decimal_point(self, forced_decimal_point: bool) -> MoneyAmountStyle:
        return replace(self, forced_decimal_point=forced_decimal_point)

    def with_absolute_value(self, absolute_value: bool) -> MoneyAmountStyle:
        return replace(self, absolute_value=absolute_value)

    def with_fraction_digits(
        self, minimum: int | None, maximum: int | None
    ) -> MoneyAmountStyle:
        """Copy with explicit fraction digit bounds (None = currency default)."""
        return replace(self, min_fraction_digits=minimum, max_fraction_digits=maximum)


def _single(symbol: str, default: str) -> str:
    # Some locales use multi-character signs (e.g. bidi marks + '-').
    stripped = "".join(ch for ch in symbol if ch.isprintable() and not ch.isspace())
    return stripped if len(stripped) == 1 else default


# ----------------------------------------------------------------------
# Presets
# ----------------------------------------------------------------------

ASCII_DECIMAL_POINT_GROUP3_COMMA = MoneyAmountStyle(
    zero_character="0",
    positive_sign="+",
    negative_sign="-",
    decimal_point=".",
    grouping_character=",",
    grouping_style=GroupingStyle.BEFORE_DECIMAL_POINT,
    grouping_size=3,
    extended_grouping_size=0,
)
"""'1,234,567.89' style."""

ASCII_DECIMAL_POINT_GROUP3_SPACE = ASCII_DECIMAL_POINT_GROUP3_COMMA.with_grouping_character(" ")
"""'1 234 567.89' style."""

ASCII_DECIMAL_POINT_NO_GROUPING = ASCII_DECIMAL_POINT_GROUP3_COMMA.with_grouping_style(
    GroupingStyle.NONE
)
"""'1234567.89' style."""

ASCII_DECIMAL_COMMA_GROUP3_DOT = MoneyAmountStyle(
    zero_character="0",
    positive_sign="+",
    negative_sign="-",
    decimal_point=",",
    grouping_character=".",
    grouping_style=GroupingStyle.BEFORE_DECIMAL_POINT,
    grouping_size=3,
    extended_grouping_size=0,
)
"""'1.234.567,89' style."""

ASCII_DECIMAL_COMMA_GROUP3_SPACE = ASCII_DECIMAL_COMMA_GROUP3_DOT.with_grouping_character(" ")
"""'1 234 567,89' style."""

ASCII_DECIMAL_COMMA_NO_GROUPING = ASCII_DECIMAL_COMMA_GROUP3_DOT.with_grouping_style(
    GroupingStyle.NONE
)
"""'1234567,89' style."""

LOCALIZED_GROUPING = MoneyAmountStyle(grouping_style=GroupingStyle.BEFORE_DECIMAL_POINT)
"""Every symbol from the locale, integer part grouped."""

LOCALIZED_NO_GROUPING = MoneyAmountStyle(grouping_style=GroupingStyle.NONE)
"""Every symbol from the locale, no grouping."""
