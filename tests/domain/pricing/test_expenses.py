"""
🧪 test_expenses.py: unit-тести для витрат і CostSet

Перевіряє:
- Фіксовану та відсоткову витрату від початкової ціни
- Обрізання від'ємних значень
- Суму набору, вкладені набори та порядок рядків
"""

from decimal import Decimal

from price_calculator.domain.money import CurrencyCode, Money
from price_calculator.domain.pricing import CostSet, FixedExpense, PercentageExpense, build_costs

START = Money.of("20.25")


def test_fixed_expense_takes_price_currency():
    expense = FixedExpense("Transport", "2.2")
    assert expense.calculate_expense(Money.of("20.25", CurrencyCode.GBP)) == Money(Decimal("2.2"), CurrencyCode.GBP)


def test_percentage_expense_uses_starting_price():
    assert PercentageExpense("Packaging", 1).calculate_expense(START).amount == Decimal("0.2025")


def test_negative_expense_values_clamp_to_zero():
    assert FixedExpense("Transport", "-2").amount == 0
    assert PercentageExpense("Packaging", -1).calculate_expense(START).is_zero()


def test_cost_set_total(book_costs):
    assert book_costs.calculate_expense(START).amount == Decimal("2.4025")


def test_cost_set_order_does_not_change_total():
    forward = build_costs([FixedExpense("Transport", "2.2"), PercentageExpense("Packaging", 1)])
    backward = build_costs([PercentageExpense("Packaging", 1), FixedExpense("Transport", "2.2")])
    assert forward.calculate_expense(START) == backward.calculate_expense(START)


def test_empty_cost_set():
    costs = CostSet()
    assert len(costs) == 0
    assert not costs
    assert costs.calculate_expense(START).is_zero()


def test_cost_set_skips_none_members():
    costs = CostSet.of(None, FixedExpense("Transport", "1"))
    assert len(costs) == 1


def test_nested_cost_sets_flatten():
    inner = CostSet((PercentageExpense("Packaging", 1), FixedExpense("Insurance", "1")), "Handling")
    costs = CostSet.of(FixedExpense("Transport", "2.2"), inner)

    assert costs.calculate_expense(START).amount == Decimal("3.4025")
    assert [e.description for e in costs.iter_leaves()] == ["Transport", "Packaging", "Insurance"]
    assert list(costs) == [costs.expenses[0], inner]
