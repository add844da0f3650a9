"""Tests for MoneyParseContext, the mutable state of one parse."""

from decimal import Decimal

import pytest

from moneyfmt import CurrencyRegistry, LocaleContext, Money
from moneyfmt.diagnostics import MissingAmountError, MissingCurrencyError, MoneyFormatError
from moneyfmt.format import MoneyParseContext, ParsePosition


def _context(registry: CurrencyRegistry, text: str = "USD 10") -> MoneyParseContext:
    return MoneyParseContext(LocaleContext.create("en"), text, registry)


class TestIndexAndError:
    """Index bounds and error bookkeeping."""

    def test_initial_state(self, registry: CurrencyRegistry) -> None:
        ctx = _context(registry)
        assert ctx.index == 0
        assert ctx.error_index == -1
        assert not ctx.is_error()
        assert ctx.currency is None
        assert ctx.amount is None
        assert ctx.text_length == 6

    def test_index_may_equal_length(self, registry: CurrencyRegistry) -> None:
        ctx = _context(registry)
        ctx.index = 6
        assert ctx.is_fully_parsed()

    @pytest.mark.parametrize("index", [-1, 7])
    def test_index_out_of_range(self, registry: CurrencyRegistry, index: int) -> None:
        ctx = _context(registry)
        with pytest.raises(IndexError):
            ctx.index = index

    def test_constructor_rejects_bad_start(self, registry: CurrencyRegistry) -> None:
        with pytest.raises(IndexError):
            MoneyParseContext(LocaleContext.create("en"), "abc", registry, index=4)

    def test_set_error_records_current_index(self, registry: CurrencyRegistry) -> None:
        ctx = _context(registry)
        ctx.index = 4
        ctx.set_error()
        assert ctx.error_index == 4
        assert ctx.is_error()

    def test_set_error_is_idempotent(self, registry: CurrencyRegistry) -> None:
        ctx = _context(registry)
        ctx.index = 2
        ctx.set_error()
        ctx.set_error()
        assert ctx.error_index == 2

    def test_error_index_can_be_overridden(self, registry: CurrencyRegistry) -> None:
        ctx = _context(registry)
        ctx.error_index = 5
        assert ctx.error_index == 5
        assert ctx.index == 0


class TestSubstring:
    """get_text_substring bounds checking."""

    def test_valid_range(self, registry: CurrencyRegistry) -> None:
        assert _context(registry).get_text_substring(0, 3) == "USD"

    def test_empty_range(self, registry: CurrencyRegistry) -> None:
        assert _context(registry).get_text_substring(6, 6) == ""

    @pytest.mark.parametrize(("start", "end"), [(3, 2), (-1, 2), (0, 7), (7, 7)])
    def test_invalid_range(self, registry: CurrencyRegistry, start: int, end: int) -> None:
        with pytest.raises(IndexError):
            _context(registry).get_text_substring(start, end)


class TestCompleteness:
    """is_complete, is_fully_parsed and to_money."""

    def test_complete_requires_both(self, registry: CurrencyRegistry) -> None:
        ctx = _context(registry)
        ctx.currency = registry.of("USD")
        assert not ctx.is_complete()
        ctx.amount = Decimal("10")
        assert ctx.is_complete()

    def test_to_money(self, registry: CurrencyRegistry) -> None:
        ctx = _context(registry)
        ctx.currency = registry.of("USD")
        ctx.amount = Decimal("10.50")
        assert ctx.to_money() == Money.of("USD", "10.50")

    def test_to_money_missing_currency(self, registry: CurrencyRegistry) -> None:
        ctx = _context(registry)
        ctx.amount = Decimal("1")
        with pytest.raises(MissingCurrencyError) as exc_info:
            ctx.to_money()
        assert isinstance(exc_info.value, MoneyFormatError)

    def test_to_money_missing_amount(self, registry: CurrencyRegistry) -> None:
        ctx = _context(registry)
        ctx.currency = registry.of("USD")
        with pytest.raises(MissingAmountError):
            ctx.to_money()

    def test_to_parse_position(self, registry: CurrencyRegistry) -> None:
        ctx = _context(registry)
        ctx.index = 3
        ctx.set_error()
        assert ctx.to_parse_position() == ParsePosition(3, 3)


class TestChildContexts:
    """create_child / merge_child sandboxing."""

    def test_child_starts_equal(self, registry: CurrencyRegistry) -> None:
        ctx = _context(registry)
        ctx.index = 2
        ctx.currency = registry.of("USD")
        child = ctx.create_child()
        assert child.index == 2
        assert child.currency is ctx.currency
        assert child.text is ctx.text
        assert child.locale is ctx.locale

    def test_child_changes_do_not_reach_parent(self, registry: CurrencyRegistry) -> None:
        ctx = _context(registry)
        child = ctx.create_child()
        child.index = 5
        child.amount = Decimal("3")
        child.currency = registry.of("EUR")
        child.set_error()
        assert ctx.index == 0
        assert ctx.amount is None
        assert ctx.currency is None
        assert not ctx.is_error()

    def test_merge_overwrites_all_fields(self, registry: CurrencyRegistry) -> None:
        ctx = _context(registry)
        ctx.amount = Decimal("1")
        child = ctx.create_child()
        child.index = 6
        child.amount = None
        child.currency = registry.of("USD")
        ctx.merge_child(child)
        assert ctx.index == 6
        assert ctx.amount is None
        assert ctx.currency == registry.of("USD")
        assert ctx.error_index == -1

    def test_repr_mentions_state(self, registry: CurrencyRegistry) -> None:
        assert "index=0" in repr(_context(registry))
