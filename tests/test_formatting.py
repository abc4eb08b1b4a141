"""Unit tests for rupee display helpers and manual income parsing."""

import pytest

from formatting import (
    INVALID_INCOME_MESSAGE,
    InvalidIncomeError,
    breakdown_rows,
    format_inr,
    group_indian,
    parse_income,
    round_currency,
)
from income_tax import compute_tax


class TestRoundCurrency:

    @pytest.mark.parametrize("amount, expected", [
        (0, 0),
        (0.4, 0),
        (2.5, 3),
        (3.5, 4),
        (-2.5, -2),
        (0.49999999999999994, 0),
        (-0.5, 0),
        (-0.6, -1),
        (10_399.999999, 10_400),
    ])
    def test_half_up(self, amount, expected):
        assert round_currency(amount) == expected


class TestGroupIndian:

    @pytest.mark.parametrize("n, expected", [
        (0, "0"),
        (999, "999"),
        (1_000, "1,000"),
        (10_400, "10,400"),
        (300_000, "3,00,000"),
        (1_500_000, "15,00,000"),
        (12_345_678, "1,23,45,678"),
        (-62_400, "-62,400"),
    ])
    def test_grouping(self, n, expected):
        assert group_indian(n) == expected

    def test_format_inr(self):
        assert format_inr(312_000.0000001) == "₹3,12,000"
        assert format_inr(0) == "₹0"


class TestParseIncome:

    @pytest.mark.parametrize("raw, expected", [
        ("500000", 500_000),
        ("  600000.50 ", 600_000.5),
        ("₹12,50,000", 1_250_000),
        ("₹ 1,000", 1_000),
        ("-5000", -5_000),
        ("1,000", 1_000),
        ("1,250,000", 1_250_000),
        ("1,00,000.75", 100_000.75),
    ])
    def test_valid(self, raw, expected):
        assert parse_income(raw) == expected

    @pytest.mark.parametrize("raw", [
        "", "   ", "₹", "abc", "12a", "nan", "inf", None,
        "1_000", "1,2,3", "1e5", "12,5000", "1,00", ",100", "100,", "5.", "0x10",
    ])
    def test_invalid(self, raw):
        with pytest.raises(InvalidIncomeError) as exc_info:
            parse_income(raw)
        assert str(exc_info.value) == INVALID_INCOME_MESSAGE
        assert isinstance(exc_info.value, ValueError)


def test_breakdown_rows():
    rows = breakdown_rows(compute_tax(1_000_000))
    assert rows[0] == ("Up to ₹3,00,000", "₹0")
    assert rows[1] == ("₹3,00,001 to ₹6,00,000 (5%)", "₹15,000")
    assert rows[-1] == ("Health and Education Cess (4%)", "₹2,400")
    assert len(rows) == 5
