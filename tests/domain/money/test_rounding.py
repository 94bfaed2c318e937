"""
🧪 test_rounding.py: unit-тести для утиліт округлення

Перевіряє:
- ROUND_HALF_UP з симетрією для від'ємних чисел
- NaN та від'ємну кількість знаків
- amount_from_percentage і його монотонність
"""

from decimal import Decimal

import pytest

from price_calculator.domain.money import amount_from_percentage, percent, q2, q4, round_to


@pytest.mark.parametrize("value,places,expected", [
    ("2.345", 2, Decimal("2.35")),
    ("2.344", 2, Decimal("2.34")),
    ("-2.345", 2, Decimal("-2.35")),
    ("22.2475", 2, Decimal("22.25")),
    ("1.219757", 4, Decimal("1.2198")),
    (1.005, 2, Decimal("1.01")),                 # float іде через str
    ("2.5", 0, Decimal("3")),
])
def test_round_to_half_up(value, places, expected):
    assert round_to(value, places) == expected


def test_round_to_negative_places_treated_as_zero():
    assert round_to("2.5", -3) == Decimal("3")


def test_round_to_nan_returns_nan():
    assert round_to(Decimal("NaN"), 2).is_nan()


@pytest.mark.parametrize("value", ["4.2525", "19.7654321", "3.03750", "0.005"])
def test_report_rounding_after_internal_rounding(value):
    assert q2(q4(value)) == q2(value)


@pytest.mark.parametrize("rate,base,expected", [
    (20, "20.25", Decimal("4.05")),
    (15, "20.25", Decimal("3.0375")),
    (7, "20.25", Decimal("1.4175")),
    (7, "17.2125", Decimal("1.2049")),
    (0, "20.25", Decimal("0")),
    (100, "20.25", Decimal("20.25")),
])
def test_amount_from_percentage(rate, base, expected):
    assert amount_from_percentage(rate, base) == expected
    assert amount_from_percentage(rate, base) == q4(percent(rate, base))


def test_amount_from_percentage_is_monotonic():
    by_rate = [amount_from_percentage(r, "20.25") for r in range(101)]
    assert by_rate == sorted(by_rate)

    by_price = [amount_from_percentage(15, Decimal(p) / 4) for p in range(200)]
    assert by_price == sorted(by_price)
