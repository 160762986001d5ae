"""Tests for currency formatting and parsing."""

from __future__ import annotations

import math

import pytest

from budgetkeeper.services.money import (
    DEFAULT_FORMAT,
    MoneyFormat,
    format_currency,
    has_at_most_cents,
    parse_currency,
    read_currency,
    round_money,
)

NNBSP = "\u202f"  # grouping separator in fr-FR
NBSP = "\u00a0"  # space before the currency symbol


class TestFormatCurrency:
    def test_positive_amounts(self):
        assert format_currency(1234.56) == f"1{NNBSP}234,56{NBSP}€"
        assert format_currency(100) == f"100,00{NBSP}€"
        assert format_currency(0.99) == f"0,99{NBSP}€"

    def test_negative_amounts_put_sign_before_digits(self):
        assert format_currency(-1234.56) == f"-1{NNBSP}234,56{NBSP}€"
        assert format_currency(-100) == f"-100,00{NBSP}€"
        assert format_currency(-0.99) == f"-0,99{NBSP}€"

    def test_negative_zero_renders_like_zero(self):
        assert format_currency(0) == f"0,00{NBSP}€"
        assert format_currency(-0.0) == format_currency(0)

    def test_tiny_negative_rounding_to_zero_has_no_sign(self):
        assert format_currency(-0.001) == f"0,00{NBSP}€"

    def test_large_numbers_are_grouped(self):
        assert format_currency(1_000_000) == f"1{NNBSP}000{NNBSP}000,00{NBSP}€"
        assert format_currency(999_999.99) == f"999{NNBSP}999,99{NBSP}€"

    def test_always_two_decimals(self):
        assert format_currency(10) == f"10,00{NBSP}€"
        assert format_currency(10.1) == f"10,10{NBSP}€"

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [(10.999, "11,00"), (10.995, "11,00"), (10.994, "10,99"), (-10.995, "-11,00")],
    )
    def test_rounds_half_up_at_second_decimal(self, amount, expected):
        assert format_currency(amount) == f"{expected}{NBSP}€"

    def test_prefix_locale(self):
        us = MoneyFormat.for_locale("en-US", "USD")
        assert format_currency(1234.56, us) == "$1,234.56"
        assert format_currency(-1234.56, us) == "-$1,234.56"

    def test_non_finite_input_does_not_raise(self):
        assert format_currency(math.inf).startswith("∞")
        assert format_currency(math.nan).startswith("NaN")

    def test_huge_amounts_are_grouped_in_full(self):
        expected = NNBSP.join(["1"] + ["000"] * 10)
        assert format_currency(1e30) == f"{expected},00{NBSP}€"
        assert format_currency(-1e30) == f"-{expected},00{NBSP}€"

    def test_largest_float_does_not_raise(self):
        assert format_currency(1.7976931348623157e308).endswith(f",00{NBSP}€")


class TestParseCurrency:
    def test_strips_symbols_and_separators(self):
        assert parse_currency("$1,234.56") == 1234.56
        assert parse_currency("$100.00") == 100
        assert parse_currency("1234.56") == 1234.56

    def test_strips_whitespace(self):
        assert parse_currency(" $ 1,234.56 ") == 1234.56
        assert parse_currency("  100  ") == 100

    def test_negative_amounts(self):
        assert parse_currency("-$1,234.56") == -1234.56
        assert parse_currency("-100") == -100

    def test_zero(self):
        assert parse_currency("$0.00") == 0
        assert parse_currency("0") == 0

    @pytest.mark.parametrize("text", ["", "abc", "$$$", "€", "-", "   "])
    def test_returns_none_without_a_number(self, text):
        assert parse_currency(text) is None

    def test_rounds_to_cents(self):
        assert parse_currency("10.999") == 11.00
        assert parse_currency("10.994") == 10.99

    def test_reads_french_display_format(self):
        assert parse_currency(f"1{NNBSP}234,56{NBSP}€") == 1234.56
        assert parse_currency("0,99") == 0.99
        assert parse_currency("1.234,56") == 1234.56

    def test_single_comma_followed_by_three_digits_is_grouping(self):
        assert parse_currency("1,234") == 1234

    def test_reads_leading_number_only(self):
        assert parse_currency("12abc") == 12

    def test_rejects_overflowing_values(self):
        assert parse_currency("1e999") is None

    def test_huge_values_are_read(self):
        assert parse_currency("1e30") == 1e30
        assert parse_currency("-1e300") == -1e300


@pytest.mark.parametrize("amount", [0, -0.0, 0.01, -0.01, 100, -1234.56, 999_999.99])
def test_parse_inverts_format(amount):
    assert parse_currency(format_currency(amount)) == amount


def test_parse_inverts_format_for_prefix_locale():
    us = MoneyFormat.for_locale("en-US", "USD")
    assert parse_currency(format_currency(-1234.56, us), us) == -1234.56


class TestRoundMoney:
    def test_huge_values_pass_through(self):
        assert round_money(1e27) == 1e27
        assert round_money(1e308) == 1e308

    def test_removes_float_residue(self):
        assert round_money(100.1 - 33.33 - 33.33 - 33.33) == 0.11

    def test_never_returns_negative_zero(self):
        assert math.copysign(1.0, round_money(-0.0)) == 1.0
        assert math.copysign(1.0, round_money(-0.004)) == 1.0


def test_has_at_most_cents():
    assert has_at_most_cents(10.5)
    assert has_at_most_cents(100)
    assert has_at_most_cents(-0.01)
    assert not has_at_most_cents(10.555)
    assert not has_at_most_cents(0.1 + 0.2)
    assert not has_at_most_cents(math.nan)


class TestMoneyFormat:
    def test_default_is_french_euro(self):
        assert DEFAULT_FORMAT.locale == "fr-FR"
        assert DEFAULT_FORMAT.currency_code == "EUR"
        assert DEFAULT_FORMAT.as_dict() == {
            "locale": "fr-FR",
            "currencyCode": "EUR",
            "minFractionDigits": 2,
            "maxFractionDigits": 2,
        }

    def test_accepts_underscore_locale(self):
        assert MoneyFormat.for_locale("fr_FR", "eur") == DEFAULT_FORMAT

    def test_unknown_locale_is_rejected(self):
        with pytest.raises(ValueError, match="Unsupported locale"):
            MoneyFormat.for_locale("xx-XX", "EUR")


def test_read_currency_keeps_every_digit():
    assert read_currency("10.999") == 10.999
    assert read_currency("-0.125 €") == -0.125
    assert read_currency("abc") is None
    assert read_currency("1e999") is None
