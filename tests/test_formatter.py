"""End-to-end tests for MoneyFormatter print and parse."""

import io
from decimal import Decimal

import pytest
from hypothesis import given

from moneyfmt import (
    CurrencyRegistry,
    CurrencyUnit,
    LocaleContext,
    MissingAmountError,
    MissingCurrencyError,
    Money,
    MoneyFormatError,
    MoneyFormatter,
    MoneyFormatterBuilder,
    MoneyParseError,
)
from moneyfmt.diagnostics import DiagnosticCode
from moneyfmt.format import ASCII_DECIMAL_COMMA_GROUP3_DOT, CurrencyCodePrinterParser
from tests.strategies import money_values


class TestPrint:
    """MoneyFormatter.print and print_to."""

    def test_code_space_amount(self, code_amount_formatter: MoneyFormatter) -> None:
        assert code_amount_formatter.print(Money.of("USD", "1234.5")) == "USD 1,234.50"

    def test_jpy_has_no_fraction(self, code_amount_formatter: MoneyFormatter) -> None:
        assert code_amount_formatter.print(Money.of("JPY", 100)) == "JPY 100"

    def test_print_to_sink(self, code_amount_formatter: MoneyFormatter) -> None:
        out = io.StringIO()
        out.write("> ")
        code_amount_formatter.print_to(out, Money.of("EUR", "2"))
        assert out.getvalue() == "> EUR 2.00"

    def test_symbol_formatter(self) -> None:
        formatter = (
            MoneyFormatterBuilder().append_currency_symbol().append_amount().to_formatter("en")
        )
        assert formatter.print(Money.of("USD", "9.99")) == "$9.99"

    def test_registry_decimal_places(self, code_amount_formatter: MoneyFormatter) -> None:
        three_places = CurrencyRegistry([CurrencyUnit("USD", 840, 3, frozenset({"US"}))])
        money = Money.of("USD", "1.5")
        custom = (
            MoneyFormatterBuilder()
            .append_currency_code()
            .append_literal(" ")
            .append_amount()
            .to_formatter("en", registry=three_places)
        )
        assert custom.print(money) == "USD 1.500"
        assert code_amount_formatter.with_registry(three_places).print(money) == "USD 1.500"
        assert code_amount_formatter.print(money) == "USD 1.50"
        parsed = custom.parse_money(custom.print(money))
        assert parsed.amount == Decimal("1.500")
        assert parsed.currency == three_places.of("USD")

    def test_not_a_printer(self) -> None:
        formatter = MoneyFormatterBuilder().append(None, CurrencyCodePrinterParser()).to_formatter()
        with pytest.raises(MoneyFormatError) as exc_info:
            formatter.print(Money.of("USD", 1))
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.PRINT_NOT_SUPPORTED


class TestParse:
    """MoneyFormatter.parse returns the context without raising."""

    def test_success(self, code_amount_formatter: MoneyFormatter) -> None:
        ctx = code_amount_formatter.parse("USD 1,234.50")
        assert not ctx.is_error()
        assert ctx.is_complete()
        assert ctx.is_fully_parsed()

    def test_mismatch_reports_index(self, code_amount_formatter: MoneyFormatter) -> None:
        ctx = code_amount_formatter.parse("USD abc")
        assert ctx.error_index == 4

    def test_start_index(self, code_amount_formatter: MoneyFormatter) -> None:
        ctx = code_amount_formatter.parse("total: GBP 5.00", start_index=7)
        assert ctx.to_money() == Money.of("GBP", "5.00")

    def test_start_index_out_of_range(self, code_amount_formatter: MoneyFormatter) -> None:
        with pytest.raises(IndexError):
            code_amount_formatter.parse("USD", start_index=4)

    def test_locale_override(self) -> None:
        formatter = (
            MoneyFormatterBuilder()
            .append_currency_code()
            .append_literal(" ")
            .append_amount_localized()
            .to_formatter("en")
        )
        ctx = formatter.parse("EUR 1.234,50", locale="de_DE")
        assert ctx.amount == Decimal("1234.50")
        assert ctx.locale.locale_code == "de_DE"

    def test_not_a_parser(self) -> None:
        class _Star:
            def print(self, context: object, out: io.StringIO, money: Money) -> None:
                out.write("*")

        formatter = MoneyFormatterBuilder().append(_Star(), None).to_formatter()
        with pytest.raises(MoneyFormatError) as exc_info:
            formatter.parse("*")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.PARSE_NOT_SUPPORTED


class TestParseMoney:
    """MoneyFormatter.parse_money at the error boundary."""

    def test_success(self, code_amount_formatter: MoneyFormatter) -> None:
        money = code_amount_formatter.parse_money("USD 1,234.50")
        assert money.currency_code == "USD"
        assert money.amount == Decimal("1234.50")

    def test_jpy_exact(self, code_amount_formatter: MoneyFormatter) -> None:
        money = code_amount_formatter.parse_money("JPY 100")
        assert money.amount == Decimal("100")
        assert money.amount.as_tuple().exponent == 0
        assert money.scale == 0

    def test_mismatch(self, code_amount_formatter: MoneyFormatter) -> None:
        with pytest.raises(MoneyParseError) as exc_info:
            code_amount_formatter.parse_money("USD abc")
        error = exc_info.value
        assert error.error_index == 4
        assert error.input_value == "USD abc"
        assert error.locale_code == "en"
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.PARSE_MISMATCH

    def test_unknown_code(self, code_amount_formatter: MoneyFormatter) -> None:
        with pytest.raises(MoneyParseError) as exc_info:
            code_amount_formatter.parse_money("US")
        assert exc_info.value.error_index == 0

    def test_trailing_text_strict(self, code_amount_formatter: MoneyFormatter) -> None:
        with pytest.raises(MoneyParseError) as exc_info:
            code_amount_formatter.parse_money("USD 1.00 extra")
        assert exc_info.value.parsed_index == 8
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.PARSE_TRAILING_TEXT

    def test_trailing_text_lenient(self, code_amount_formatter: MoneyFormatter) -> None:
        lenient = code_amount_formatter.with_strict(False)
        assert lenient.parse_money("USD 1.00 extra") == Money.of("USD", "1.00")

    def test_missing_amount(self) -> None:
        formatter = (
            MoneyFormatterBuilder()
            .append_currency_code()
            .append_literal("(")
            .append_optional(MoneyFormatterBuilder().append_amount())
            .append_literal(")")
            .to_formatter()
        )
        with pytest.raises(MissingAmountError):
            formatter.parse_money("USD()")
        assert formatter.parse_money("USD(3.00)") == Money.of("USD", "3.00")

    def test_missing_currency(self) -> None:
        formatter = MoneyFormatterBuilder().append_amount().to_formatter()
        with pytest.raises(MissingCurrencyError):
            formatter.parse_money("12")

    def test_registry_override(self, code_amount_formatter: MoneyFormatter) -> None:
        empty = code_amount_formatter.with_registry(CurrencyRegistry())
        with pytest.raises(MoneyParseError):
            empty.parse_money("USD 1.00")


class TestTryParse:
    """MoneyFormatter.try_parse never raises for bad input."""

    def test_success(self, code_amount_formatter: MoneyFormatter) -> None:
        money, errors = code_amount_formatter.try_parse("USD 1,234.50")
        assert errors == ()
        assert money == Money.of("USD", "1234.50")

    def test_mismatch(self, code_amount_formatter: MoneyFormatter) -> None:
        money, errors = code_amount_formatter.try_parse("USD abc")
        assert money is None
        assert len(errors) == 1
        assert isinstance(errors[0], MoneyParseError)
        assert errors[0].error_index == 4

    def test_incomplete(self) -> None:
        formatter = MoneyFormatterBuilder().append_amount().to_formatter()
        money, errors = formatter.try_parse("5")
        assert money is None
        assert isinstance(errors[0], MissingCurrencyError)


class TestCopies:
    """with_* return new formatters."""

    def test_with_locale(self, code_amount_formatter: MoneyFormatter) -> None:
        de = code_amount_formatter.with_locale("de")
        assert de is not code_amount_formatter
        assert de.locale.locale_code == "de"
        assert code_amount_formatter.locale.locale_code == "en"

    def test_with_locale_context(self, code_amount_formatter: MoneyFormatter) -> None:
        ctx = LocaleContext.create("fr")
        assert code_amount_formatter.with_locale(ctx).locale is ctx

    def test_formatter_is_frozen(self, code_amount_formatter: MoneyFormatter) -> None:
        with pytest.raises(AttributeError):
            code_amount_formatter.strict = False  # type: ignore[misc]


class TestEndToEndRoundTrip:
    """Property: parse(print(value)) == value."""

    @given(money=money_values())
    def test_code_amount(self, money: Money) -> None:
        formatter = (
            MoneyFormatterBuilder()
            .append_currency_code()
            .append_literal(" ")
            .append_amount()
            .to_formatter("en")
        )
        assert formatter.parse_money(formatter.print(money)) == money

    @given(money=money_values())
    def test_decimal_comma_amount_first(self, money: Money) -> None:
        formatter = (
            MoneyFormatterBuilder()
            .append_amount(ASCII_DECIMAL_COMMA_GROUP3_DOT)
            .append_literal(" ")
            .append_currency_code()
            .to_formatter("de")
        )
        assert formatter.parse_money(formatter.print(money)) == money

    @given(money=money_values())
    def test_numeric_code(self, money: Money) -> None:
        formatter = (
            MoneyFormatterBuilder()
            .append_currency_numeric3_code()
            .append_literal(":")
            .append_amount()
            .to_formatter()
        )
        if not money.currency.has_numeric_code:
            return
        assert formatter.parse_money(formatter.print(money)) == money
