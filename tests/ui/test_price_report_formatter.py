"""
🧪 test_price_report_formatter.py: unit-тести для текстового звіту

Перевіряє:
- Cost і TOTAL завжди, Tax і Discounts лише ненульові
- Рядки витрат лише у sink, без них у поверненому тексті
- Пропуск нульових витрат і розгортання вкладених наборів
- Друк у stdout за замовчуванням
"""

from decimal import Decimal

import pytest

from price_calculator.domain.money import CurrencyCode, Money
from price_calculator.domain.pricing import (
    CombineType,
    CostSet,
    Discount,
    FixedExpense,
    PercentageExpense,
    PriceCalculator,
    PriceResult,
    SpecialDiscount,
    Tax,
    UniversalDiscount,
)
from price_calculator.domain.products import Product
from price_calculator.ui.formatters import PriceReportFormatter


def _calculate(costs, tax=21, currency=CurrencyCode.USD):
    discount = Discount(UniversalDiscount(15), SpecialDiscount(123456, 7))
    calculator = PriceCalculator(Tax(tax), discount, CombineType.ADDITIVE)
    return calculator.calculate(Product("The Little Prince", 123456, Money.of("20.25", currency), costs))


@pytest.fixture
def lines():
    return []


def test_zero_tax_and_discount_lines_are_omitted(lines):
    result = PriceResult(
        starting_price=Money.of("20.25"),
        tax_amount=Money.zero(),
        total_discount=Money.zero(),
        total_expenses=Money.zero(),
        total_price=Money.of("20.25"),
    )

    text = result.report(lines.append)

    assert text == "Cost = 20.25 USD\nTOTAL = 20.25 USD\n"
    assert lines == ["Cost = 20.25 USD\n", "TOTAL = 20.25 USD\n"]
    assert "Tax" not in text
    assert "Discounts" not in text


def test_expense_lines_go_only_to_sink(lines, book_costs):
    result = _calculate(book_costs)

    text = result.report(lines.append)

    assert lines == [
        "Cost = 20.25 USD\n",
        "Tax = 4.25 USD\n",
        "Discounts = 4.46 USD\n",
        "Transport = 2.20 USD\n",
        "Packaging = 0.20 USD\n",
        "TOTAL = 22.45 USD\n",
    ]
    assert text == "Cost = 20.25 USD\nTax = 4.25 USD\nDiscounts = 4.46 USD\nTOTAL = 22.45 USD\n"


def test_zero_expense_member_is_skipped(lines):
    costs = CostSet.of(FixedExpense("Transport", 0), PercentageExpense("Packaging", 1))
    _calculate(costs).report(lines.append)

    assert "Packaging = 0.20 USD\n" in lines
    assert not any(line.startswith("Transport") for line in lines)


def test_no_expense_lines_when_total_expenses_zero(lines):
    costs = CostSet.of(FixedExpense("Transport", 0), PercentageExpense("Packaging", 0))
    _calculate(costs).report(lines.append)

    assert [line.split(" = ")[0] for line in lines] == ["Cost", "Tax", "Discounts", "TOTAL"]


def test_nested_cost_set_lines_in_order(lines):
    costs = CostSet.of(
        FixedExpense("Transport", "2.2"),
        CostSet((PercentageExpense("Packaging", 1), FixedExpense("Insurance", "0.5")), "Handling"),
    )
    result = _calculate(costs)
    result.report(lines.append)

    assert [line.split(" = ")[0] for line in lines] == [
        "Cost", "Tax", "Discounts", "Transport", "Packaging", "Insurance", "TOTAL",
    ]
    assert result.total_expenses.amount == Decimal("2.90")


def test_currency_label(lines):
    _calculate(CostSet(), currency=CurrencyCode.GBP).report(lines.append)

    assert lines[0] == "Cost = 20.25 GBP\n"
    assert all(line.endswith(" GBP\n") for line in lines)


def test_default_sink_is_stdout(capsys):
    result = _calculate(CostSet(), tax=0)
    text = PriceReportFormatter().write_report(result)

    assert capsys.readouterr().out == text
    assert "Tax" not in text


def test_format_line_uses_two_places():
    line = PriceReportFormatter().format_line("TOTAL", Money.of("7"))
    assert line == "TOTAL = 7.00 USD\n"
