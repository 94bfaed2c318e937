# 🧾 price_calculator/domain/pricing/result.py
"""
🧾 DTO результату розрахунку ціни.

🔹 `PriceBreakdown`: робочі суми з 4 знаками (податок, обидві знижки, ліміт, витрати).
🔹 `PriceResult`: знімок для звіту: п'ять сум `Money` з 2 знаками + набір витрат.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable, Optional

# 🧩 Внутрішні модулі проєкту
from price_calculator.domain.money import Money
from .expenses import CostSet

ReportSink = Callable[[str], None]


@dataclass(frozen=True, slots=True)
class PriceBreakdown:
    """Проміжні суми одного розрахунку (внутрішня точність)."""

    tax: Decimal = Decimal("0")
    universal_discount: Decimal = Decimal("0")
    special_discount: Decimal = Decimal("0")
    raw_discount: Decimal = Decimal("0")                        # ➕ Сума знижок до ліміту
    total_discount: Decimal = Decimal("0")                      # 🧢 Після ліміту
    expenses: Decimal = Decimal("0")
    total: Decimal = Decimal("0")


@dataclass(frozen=True, slots=True)
class PriceResult:
    """
    Іммʼютабельний результат розрахунку для одного товару.

    Усі грошові поля округлені до 2 знаків; `costs` передається без змін,
    щоб звіт міг перерахувати кожен рядок витрат окремо.
    """

    starting_price: Money
    tax_amount: Money
    total_discount: Money
    total_expenses: Money
    total_price: Money
    costs: CostSet = field(default_factory=CostSet)
    breakdown: PriceBreakdown = field(default_factory=PriceBreakdown)

    @property
    def currency(self):
        return self.starting_price.currency

    def report(self, sink: Optional[ReportSink] = None) -> str:
        """
        Друкує звіт у `sink` (за замовчуванням stdout) і повертає його текст.

        Рядки витрат пишуться лише в `sink`, у повернений текст вони не входять.
        """
        from price_calculator.ui.formatters.price_report_formatter import PriceReportFormatter

        return PriceReportFormatter().write_report(self, sink)


__all__ = ["PriceBreakdown", "PriceResult", "ReportSink"]
