"""ISO 4217 currency units and an immutable currency registry.

A CurrencyRegistry is an explicitly constructed value: it is built once from
a data source and then passed to formatters and parse contexts. There is no
process-wide table mutated at startup.

Data sources:
    - Bundled data file (moneyfmt/data/MoneyData.csv), see default_registry()
    - Any external CSV file in the same line format, see from_csv_file()
    - Unicode CLDR via Babel, see CurrencyRegistry.from_cldr()

CSV line format:
    CODE,NUMERIC,DIGITS,COUNTRIES#optional comment
    e.g. "USD,840,2,USASEC" (countries are concatenated ISO 3166 alpha-2 codes;
    NUMERIC and DIGITS may be -1 when not applicable)

Thread-safe. Registries are never modified after construction.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import TypeIs

from moneyfmt.constants import (
    BUNDLED_CURRENCY_DATA,
    ISO_CURRENCY_CODE_LENGTH,
    ISO_NUMERIC_CODE_LENGTH,
    NO_DECIMAL_PLACES,
    NO_NUMERIC_CODE,
)
from moneyfmt.diagnostics import CurrencyNotFoundError, ErrorTemplate

__all__ = [
    "CurrencyRegistry",
    "CurrencyUnit",
    "default_registry",
    "is_valid_currency_code",
    "load_currency_csv",
]

logger = logging.getLogger(__name__)

_CSV_LINE = re.compile(r"([A-Z]{3}),(-1|[0-9]{1,3}),(-1|[0-9]),([A-Z]*)#?.*")

_CODE_SHAPE = re.compile(r"[A-Z]{3}")

_COUNTRY_CODE_LENGTH = 2

_MAX_NUMERIC_CODE = 999

_MAX_DECIMAL_PLACES = 9


def is_valid_currency_code(value: str) -> TypeIs[str]:
    """Type guard: check that a string has the shape of an ISO 4217 code.

    Only the shape is checked (3 uppercase ASCII letters), not membership
    in any registry.

    Example:
        >>> is_valid_currency_code("USD")
        True
        >>> is_valid_currency_code("usd")
        False
    """
    return len(value) == ISO_CURRENCY_CODE_LENGTH and _CODE_SHAPE.fullmatch(value) is not None


@dataclass(frozen=True, slots=True)
class CurrencyUnit:
    """A single ISO 4217 currency.

    Immutable, thread-safe, hashable.

    Attributes:
        code: Alphabetic code (e.g. 'USD')
        numeric_code: Numeric code (e.g. 840), or -1 if none
        decimal_places: Standard number of fraction digits, or -1 for
            pseudo-currencies such as XAU
        country_codes: ISO 3166 alpha-2 codes of countries using the currency
    """

    code: str
    numeric_code: int = NO_NUMERIC_CODE
    decimal_places: int = 2
    country_codes: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate currency invariants.

        Raises:
            ValueError: If the code, numeric code or decimal places are out of range.
        """
        if not is_valid_currency_code(self.code):
            raise ValueError(str(ErrorTemplate.currency_invalid_code(self.code)))
        if not NO_NUMERIC_CODE <= self.numeric_code <= _MAX_NUMERIC_CODE:
            msg = f"Invalid numeric code {self.numeric_code} for currency '{self.code}'"
            raise ValueError(msg)
        if not NO_DECIMAL_PLACES <= self.decimal_places <= _MAX_DECIMAL_PLACES:
            msg = f"Invalid decimal places {self.decimal_places} for currency '{self.code}'"
            raise ValueError(msg)

    @property
    def has_numeric_code(self) -> bool:
        """Whether the currency has an ISO 4217 numeric code."""
        return self.numeric_code != NO_NUMERIC_CODE

    @property
    def numeric3_code(self) -> str:
        """Numeric code zero-padded to 3 digits, or "" if there is none."""
        if not self.has_numeric_code:
            return ""
        return str(self.numeric_code).zfill(ISO_NUMERIC_CODE_LENGTH)

    @property
    def is_pseudo_currency(self) -> bool:
        """Whether the currency has no meaningful decimal places (XAU, XDR...)."""
        return self.decimal_places == NO_DECIMAL_PLACES

    def __str__(self) -> str:
        return self.code


class CurrencyRegistry:
    """Immutable lookup table of CurrencyUnit values.

    Lookups are by alphabetic code, numeric code or country. The registry is
    hashable by identity, so it can be used as a cache key.

    Example:
        >>> registry = CurrencyRegistry([CurrencyUnit("USD", 840, 2, frozenset({"US"}))])
        >>> registry.of("USD").decimal_places
        2
        >>> "EUR" in registry
        False
    """

    __slots__ = ("_by_code", "_by_country", "_by_numeric")

    def __init__(self, units: Iterable[CurrencyUnit] = ()) -> None:
        """Build a registry from currency units.

        Units sharing a code are combined when their numeric code and decimal
        places agree (country codes are unioned).

        Args:
            units: Currency units to register

        Raises:
            ValueError: If the same code is given with conflicting data
        """
        by_code: dict[str, CurrencyUnit] = {}
        for unit in units:
            existing = by_code.get(unit.code)
            if existing is None:
                by_code[unit.code] = unit
                continue
            if (existing.numeric_code, existing.decimal_places) != (
                unit.numeric_code,
                unit.decimal_places,
            ):
                raise ValueError(str(ErrorTemplate.currency_duplicate(unit.code)))
            by_code[unit.code] = CurrencyUnit(
                unit.code,
                unit.numeric_code,
                unit.decimal_places,
                existing.country_codes | unit.country_codes,
            )

        by_numeric: dict[int, CurrencyUnit] = {}
        by_country: dict[str, CurrencyUnit] = {}
        for unit in sorted(by_code.values(), key=lambda u: u.code):
            if unit.has_numeric_code:
                by_numeric.setdefault(unit.numeric_code, unit)
            for country in unit.country_codes:
                by_country.setdefault(country, unit)

        self._by_code: Mapping[str, CurrencyUnit] = MappingProxyType(by_code)
        self._by_numeric: Mapping[int, CurrencyUnit] = MappingProxyType(by_numeric)
        self._by_country: Mapping[str, CurrencyUnit] = MappingProxyType(by_country)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_csv_file(cls, path: str | Path) -> CurrencyRegistry:
        """Load a registry from a CSV data file.

        Args:
            path: Path to a file in the MoneyData.csv line format

        Returns:
            New registry with every valid line of the file

        Raises:
            OSError: If the file cannot be read
        """
        text = Path(path).read_text(encoding="utf-8")
        units = load_currency_csv(text)
        logger.debug("Loaded %d currencies from %s", len(units), path)
        return cls(units)

    @classmethod
    def from_cldr(cls) -> CurrencyRegistry:
        """Build a registry from Unicode CLDR data via Babel.

        Decimal places come from CLDR currency fractions and country codes
        from CLDR territory data (current tender only). CLDR carries no
        ISO numeric codes, so every unit has numeric_code -1; merge with
        default_registry() to obtain them.

        Returns:
            New registry covering every currency known to CLDR
        """
        from babel import Locale  # noqa: PLC0415
        from babel.numbers import (  # noqa: PLC0415
            get_currency_precision,
            get_territory_currencies,
            list_currencies,
        )

        countries: dict[str, set[str]] = {}
        for territory in Locale.parse("en").territories:
            if len(territory) != _COUNTRY_CODE_LENGTH or not territory.isalpha():
                continue
            for code in get_territory_currencies(territory):
                countries.setdefault(code, set()).add(territory)

        units = [
            CurrencyUnit(
                code,
                NO_NUMERIC_CODE,
                get_currency_precision(code),
                frozenset(countries.get(code, ())),
            )
            for code in sorted(list_currencies())
            if is_valid_currency_code(code)
        ]
        logger.debug("Built %d currencies from CLDR", len(units))
        return cls(units)

    def merged_with(self, other: CurrencyRegistry) -> CurrencyRegistry:
        """Combine two registries into a new one.

        Entries of ``other`` take precedence for decimal places. A numeric code
        missing in ``other`` is taken from this registry. Country codes are
        unioned.

        Args:
            other: Registry whose entries are layered on top of this one

        Returns:
            New registry
        """
        combined: dict[str, CurrencyUnit] = dict(self._by_code)
        for unit in other:
            existing = combined.get(unit.code)
            if existing is None:
                combined[unit.code] = unit
                continue
            numeric = unit.numeric_code if unit.has_numeric_code else existing.numeric_code
            combined[unit.code] = CurrencyUnit(
                unit.code,
                numeric,
                unit.decimal_places,
                existing.country_codes | unit.country_codes,
            )
        return CurrencyRegistry(combined.values())

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find(self, code: str) -> CurrencyUnit | None:
        """Look up a currency by alphabetic code, returning None if absent."""
        return self._by_code.get(code)

    def of(self, code: str) -> CurrencyUnit:
        """Look up a currency by alphabetic code.

        Raises:
            CurrencyNotFoundError: If the code is not registered
        """
        unit = self._by_code.get(code)
        if unit is None:
            raise CurrencyNotFoundError(
                ErrorTemplate.currency_not_found(code), currency_code=code
            )
        return unit

    def find_numeric(self, numeric_code: int | str) -> CurrencyUnit | None:
        """Look up a currency by numeric code ("840", "036" or 36)."""
        if isinstance(numeric_code, str):
            if not numeric_code.isascii() or not numeric_code.isdigit():
                return None
            numeric_code = int(numeric_code)
        return self._by_numeric.get(numeric_code)

    def of_numeric_code(self, numeric_code: int | str) -> CurrencyUnit:
        """Look up a currency by numeric code.

        Raises:
            CurrencyNotFoundError: If no currency has the numeric code
        """
        unit = self.find_numeric(numeric_code)
        if unit is None:
            raise CurrencyNotFoundError(
                ErrorTemplate.currency_not_found(str(numeric_code)),
                currency_code=str(numeric_code),
            )
        return unit

    def for_country(self, country_code: str) -> CurrencyUnit | None:
        """Currency used by an ISO 3166 alpha-2 country, if known."""
        return self._by_country.get(country_code.upper())

    def decimal_places(self, code: str) -> int:
        """Decimal places of a registered currency.

        Raises:
            CurrencyNotFoundError: If the code is not registered
        """
        return self.of(code).decimal_places

    def codes(self) -> tuple[str, ...]:
        """All registered alphabetic codes, sorted."""
        return tuple(sorted(self._by_code))

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __iter__(self) -> Iterator[CurrencyUnit]:
        return iter(self._by_code.values())

    def __len__(self) -> int:
        return len(self._by_code)

    def __repr__(self) -> str:
        return f"CurrencyRegistry({len(self)} currencies)"


def load_currency_csv(text: str) -> list[CurrencyUnit]:
    """Parse currency data in the MoneyData.csv line format.

    Lines that do not match the format, and lines with an odd-length country
    list, are skipped.

    Args:
        text: File contents

    Returns:
        Currency units in file order (duplicates are preserved)
    """
    units: list[CurrencyUnit] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        match = _CSV_LINE.fullmatch(line.strip())
        if match is None:
            if line.strip() and not line.lstrip().startswith("#"):
                logger.debug("Skipping malformed currency data line %d: %r", line_no, line)
            continue
        code, numeric, digits, countries = match.groups()
        if len(countries) % _COUNTRY_CODE_LENGTH:
            logger.debug("Skipping line %d: odd-length country list %r", line_no, countries)
            continue
        country_codes = frozenset(
            countries[i : i + _COUNTRY_CODE_LENGTH]
            for i in range(0, len(countries), _COUNTRY_CODE_LENGTH)
        )
        units.append(CurrencyUnit(code, int(numeric), int(digits), country_codes))
    return units


@functools.cache
def default_registry() -> CurrencyRegistry:
    """Registry loaded from the data file bundled with the package.

    Loaded once per process; the returned registry is immutable.

    Returns:
        Registry of the bundled ISO 4217 currencies
    """
    data = resources.files("moneyfmt.data").joinpath(BUNDLED_CURRENCY_DATA)
    units = load_currency_csv(data.read_text(encoding="utf-8"))
    logger.debug("Loaded %d bundled currencies", len(units))
    return CurrencyRegistry(units)
