"""Tests for CurrencyUnit, CurrencyRegistry and the CSV/CLDR loaders."""

from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from moneyfmt import CurrencyNotFoundError, CurrencyRegistry, CurrencyUnit
from moneyfmt.currency import default_registry, is_valid_currency_code, load_currency_csv


class TestCurrencyUnit:
    """CurrencyUnit validation and properties."""

    def test_defaults(self) -> None:
        unit = CurrencyUnit("ABC")
        assert unit.numeric_code == -1
        assert unit.decimal_places == 2
        assert unit.country_codes == frozenset()
        assert not unit.has_numeric_code
        assert unit.numeric3_code == ""

    def test_numeric3_code_pads(self) -> None:
        assert CurrencyUnit("AUD", 36).numeric3_code == "036"

    def test_pseudo_currency(self) -> None:
        assert CurrencyUnit("XAU", 959, -1).is_pseudo_currency

    def test_str_is_code(self) -> None:
        assert str(CurrencyUnit("EUR", 978)) == "EUR"

    @pytest.mark.parametrize("code", ["usd", "US", "USDX", "U$D", ""])
    def test_invalid_code(self, code: str) -> None:
        with pytest.raises(ValueError, match="Invalid currency code"):
            CurrencyUnit(code)

    @pytest.mark.parametrize("numeric", [-2, 1000])
    def test_invalid_numeric_code(self, numeric: int) -> None:
        with pytest.raises(ValueError, match="numeric code"):
            CurrencyUnit("ABC", numeric)

    @pytest.mark.parametrize("places", [-2, 10])
    def test_invalid_decimal_places(self, places: int) -> None:
        with pytest.raises(ValueError, match="decimal places"):
            CurrencyUnit("ABC", 1, places)

    @given(st.text(max_size=4))
    def test_code_shape_guard(self, value: str) -> None:
        expected = len(value) == 3 and all("A" <= ch <= "Z" for ch in value)
        assert is_valid_currency_code(value) == expected


class TestLoadCurrencyCsv:
    """CSV line parsing."""

    def test_valid_lines(self) -> None:
        units = load_currency_csv("USD,840,2,USEC\nXAU,959,-1,\n")
        assert units == [
            CurrencyUnit("USD", 840, 2, frozenset({"US", "EC"})),
            CurrencyUnit("XAU", 959, -1),
        ]

    def test_comment_suffix_allowed(self) -> None:
        units = load_currency_csv("EUR,978,2,DE#euro\n")
        assert units[0].country_codes == frozenset({"DE"})

    @pytest.mark.parametrize(
        "line",
        [
            "usd,840,2,US",
            "USD,8400,2,US",
            "USD,840,22,US",
            "USD,840,2,USA",
            "USD;840;2;US",
            "# comment",
            "",
        ],
    )
    def test_skipped_lines(self, line: str) -> None:
        assert load_currency_csv(line) == []

    def test_no_numeric_code(self) -> None:
        assert load_currency_csv("XBT,-1,8,\n")[0].numeric_code == -1

    def test_odd_country_list_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("DEBUG", logger="moneyfmt.currency"):
            load_currency_csv("USD,840,2,USA\n")
        assert "odd-length" in caplog.text


class TestRegistryConstruction:
    """Building and combining registries."""

    def test_duplicates_with_same_data_merge_countries(self) -> None:
        registry = CurrencyRegistry(
            [
                CurrencyUnit("EUR", 978, 2, frozenset({"DE"})),
                CurrencyUnit("EUR", 978, 2, frozenset({"FR"})),
            ]
        )
        assert registry.of("EUR").country_codes == frozenset({"DE", "FR"})
        assert len(registry) == 1

    def test_conflicting_duplicates_rejected(self) -> None:
        with pytest.raises(ValueError, match="already registered"):
            CurrencyRegistry([CurrencyUnit("EUR", 978, 2), CurrencyUnit("EUR", 978, 3)])

    def test_from_csv_file(self, tmp_path: Path) -> None:
        path = tmp_path / "money.csv"
        path.write_text("ABC,123,1,AB\nbad line\n", encoding="utf-8")
        registry = CurrencyRegistry.from_csv_file(path)
        assert registry.codes() == ("ABC",)
        assert registry.of("ABC").decimal_places == 1

    def test_from_csv_file_missing(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            CurrencyRegistry.from_csv_file(tmp_path / "missing.csv")

    def test_from_cldr(self) -> None:
        registry = CurrencyRegistry.from_cldr()
        assert registry.of("JPY").decimal_places == 0
        assert registry.of("USD").numeric_code == -1
        assert registry.for_country("JP") == registry.of("JPY")

    def test_merged_with(self) -> None:
        base = CurrencyRegistry([CurrencyUnit("USD", 840, 2, frozenset({"US"}))])
        top = CurrencyRegistry(
            [CurrencyUnit("USD", -1, 3, frozenset({"EC"})), CurrencyUnit("ABC", 1, 0)]
        )
        merged = base.merged_with(top)
        usd = merged.of("USD")
        assert usd.numeric_code == 840
        assert usd.decimal_places == 3
        assert usd.country_codes == frozenset({"US", "EC"})
        assert "ABC" in merged
        assert len(base) == 1

    def test_cldr_merged_with_bundled_keeps_numeric_codes(self) -> None:
        merged = CurrencyRegistry.from_cldr().merged_with(default_registry())
        assert merged.of("USD").numeric_code == 840


class TestRegistryLookup:
    """Lookups on the bundled registry."""

    def test_of(self, registry: CurrencyRegistry) -> None:
        usd = registry.of("USD")
        assert (usd.code, usd.numeric_code, usd.decimal_places) == ("USD", 840, 2)
        assert "US" in usd.country_codes

    def test_of_unknown(self, registry: CurrencyRegistry) -> None:
        with pytest.raises(CurrencyNotFoundError) as exc_info:
            registry.of("ABC")
        assert exc_info.value.currency_code == "ABC"

    def test_find_unknown_is_none(self, registry: CurrencyRegistry) -> None:
        assert registry.find("ABC") is None

    @pytest.mark.parametrize("numeric", [840, "840", "036", 36])
    def test_numeric_lookup(self, registry: CurrencyRegistry, numeric: int | str) -> None:
        assert registry.of_numeric_code(numeric).code in {"USD", "AUD"}

    def test_numeric_lookup_unknown(self, registry: CurrencyRegistry) -> None:
        assert registry.find_numeric("x1") is None
        with pytest.raises(CurrencyNotFoundError):
            registry.of_numeric_code(1)

    def test_for_country(self, registry: CurrencyRegistry) -> None:
        assert registry.for_country("jp") == registry.of("JPY")
        assert registry.for_country("ZZ") is None

    @pytest.mark.parametrize(("code", "places"), [("USD", 2), ("JPY", 0), ("KWD", 3), ("XAU", -1)])
    def test_decimal_places(self, registry: CurrencyRegistry, code: str, places: int) -> None:
        assert registry.decimal_places(code) == places

    def test_container_protocol(self, registry: CurrencyRegistry) -> None:
        assert "EUR" in registry
        assert 840 not in registry
        assert len(registry) == len(registry.codes())
        assert {unit.code for unit in registry} == set(registry.codes())
        assert list(registry.codes()) == sorted(registry.codes())

    def test_repr(self, registry: CurrencyRegistry) -> None:
        assert repr(registry) == f"CurrencyRegistry({len(registry)} currencies)"

    def test_default_registry_cached(self) -> None:
        assert default_registry() is default_registry()
