"""Monetary value: a currency plus an exact decimal amount.

Money is deliberately small. It carries what the format engine prints and
what a parse produces; arithmetic and rounding belong to the caller.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from moneyfmt.currency import CurrencyRegistry, CurrencyUnit, default_registry

__all__ = ["Money"]


@dataclass(frozen=True, slots=True)
class Money:
    """Immutable monetary amount.

    The amount keeps its scale: ``Money.of("USD", "1.50")`` and
    ``Money.of("USD", "1.5")`` compare equal (Decimal equality) but print
    with the digits each one carries unless a formatter fixes the digits.

    Attributes:
        currency: The currency unit
        amount: Exact decimal amount (finite)

    Example:
        >>> money = Money.of("USD", "1234.5")
        >>> money.currency_code, money.amount
        ('USD', Decimal('1234.5'))
        >>> str(money)
        'USD 1234.5'
    """

    currency: CurrencyUnit
    amount: Decimal

    def __post_init__(self) -> None:
        """Validate Money invariants.

        Raises:
            TypeError: If amount is not a Decimal
            ValueError: If amount is NaN or infinite
        """
        if not isinstance(self.amount, Decimal):
            msg = f"Money amount must be Decimal, got {type(self.amount).__name__}"
            raise TypeError(msg)
        if not self.amount.is_finite():
            msg = f"Money amount must be finite, got {self.amount}"
            raise ValueError(msg)

    @classmethod
    def of(
        cls,
        currency: CurrencyUnit | str,
        amount: Decimal | int | str,
        *,
        registry: CurrencyRegistry | None = None,
    ) -> Money:
        """Create Money from a currency and an amount.

        Floats are rejected: binary floating point cannot represent most
        decimal amounts exactly.

        Args:
            currency: CurrencyUnit, or alphabetic code looked up in the registry
            amount: Decimal, int, or decimal string
            registry: Registry for code lookup (default: bundled registry)

        Returns:
            New Money instance

        Raises:
            CurrencyNotFoundError: If a code is not in the registry
            TypeError: If amount is a float or other unsupported type
            ValueError: If amount is not a finite decimal number
        """
        if isinstance(currency, str):
            currency = (registry or default_registry()).of(currency)
        if isinstance(amount, bool) or not isinstance(amount, (Decimal, int, str)):
            msg = f"Unsupported amount type {type(amount).__name__}; use Decimal, int or str"
            raise TypeError(msg)
        try:
            value = amount if isinstance(amount, Decimal) else Decimal(amount)
        except InvalidOperation as e:
            msg = f"Invalid amount '{amount}'"
            raise ValueError(msg) from e
        return cls(currency, value)

    @property
    def currency_code(self) -> str:
        """Alphabetic code of the currency."""
        return self.currency.code

    @property
    def scale(self) -> int:
        """Number of digits after the decimal point (may be negative)."""
        return -int(self.amount.as_tuple().exponent)

    @property
    def unscaled_amount(self) -> int:
        """Amount as an integer scaled by 10**scale, keeping its sign."""
        sign, digits, _ = self.amount.as_tuple()
        unscaled = int("".join(map(str, digits)))
        return -unscaled if sign else unscaled

    def is_zero(self) -> bool:
        return self.amount.is_zero()

    def is_negative(self) -> bool:
        return self.amount < 0

    def is_positive(self) -> bool:
        return self.amount > 0

    def __str__(self) -> str:
        return f"{self.currency.code} {self.amount:f}"
