"""
🧪 test_rates.py: unit-тести для Tax та знижок

Перевіряє:
- Обрізання ставок до [0, 100]
- Від'ємний UPC спеціальної знижки → 0
- Декодування прапорця пріоритету
"""

import pytest

from price_calculator.domain.pricing import (
    Discount,
    Precedence,
    SpecialDiscount,
    Tax,
    UniversalDiscount,
    clamp_rate,
)


@pytest.mark.parametrize("rate,expected", [(-3, 0), (0, 0), (20, 20), (100, 100), (150, 100), (15.9, 15)])
def test_clamp_rate(rate, expected):
    assert clamp_rate(rate) == expected
    assert Tax(rate).rate == expected
    assert UniversalDiscount(rate).rate == expected


def test_special_discount_negative_upc_clamped():
    special = SpecialDiscount(upc=-1, rate=7)
    assert special.upc == 0
    assert special.rate == 7


def test_special_discount_matches_only_its_upc():
    special = SpecialDiscount(upc=123456, rate=7)
    assert special.applies_to(123456)
    assert not special.applies_to(654321)


@pytest.mark.parametrize("selector,expected", [
    (0, Precedence.NONE),
    (1, Precedence.UNIVERSAL_FIRST),
    (2, Precedence.SPECIAL_FIRST),
    (3, Precedence.NONE),
    ("x", Precedence.NONE),
    (None, Precedence.NONE),
])
def test_precedence_from_config(selector, expected):
    assert Precedence.from_config(selector) is expected
    assert Discount(precedence=selector).precedence is expected


def test_discount_defaults():
    discount = Discount()
    assert discount.universal.rate == 0
    assert discount.special.rate == 0
    assert discount.precedence is Precedence.NONE
