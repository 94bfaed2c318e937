# 🧾 price_calculator/ui/formatters/price_report_formatter.py
"""
🧾 Форматує результат розрахунку ціни у текстовий звіт.

🔹 Порядок рядків фіксований: Cost, Tax, Discounts, витрати, TOTAL.
🔹 Cost і TOTAL друкуються завжди; Tax, Discounts і витрати лише ненульові.
🔹 Кожен рядок витрати рахується заново від початкової ціни результату.
🔹 Рядки витрат ідуть лише у sink, повернений текст їх не містить.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import sys                                                      # 🖥️ Sink за замовчуванням
from decimal import Decimal                                     # 🔢 Операції з сумами
from typing import TYPE_CHECKING, Final, List, Optional, Protocol, Union, runtime_checkable

# 🧩 Внутрішні модулі проєкту
from price_calculator.domain.money import CurrencyCode, q2

if TYPE_CHECKING:
    from price_calculator.domain.pricing.result import PriceResult, ReportSink


# ================================
# 🧾 ПРОТОКОЛ ГРОШОВОГО DTO
# ================================
@runtime_checkable
class MoneyLike(Protocol):
    """📐 Мінімальний контракт для об'єктів, що поводяться як Money (amount + currency)."""

    @property
    def amount(self) -> Decimal:
        ...

    @property
    def currency(self) -> Union[str, CurrencyCode]:
        ...


def _stdout_sink(line: str) -> None:
    sys.stdout.write(line)


# ================================
# 💬 КЛАС ФОРМАТЕРА ЗВІТУ
# ================================
class PriceReportFormatter:
    """💬 Формує рядки звіту з `PriceResult`."""

    COST_LABEL: Final[str] = "Cost"
    TAX_LABEL: Final[str] = "Tax"
    DISCOUNT_LABEL: Final[str] = "Discounts"
    TOTAL_LABEL: Final[str] = "TOTAL"

    @staticmethod
    def _fmt_money(money: MoneyLike) -> str:
        """Форматує суму у вигляді `123.45 USD`."""
        return f"{q2(money.amount):.2f} {money.currency}"

    def format_line(self, label: str, money: MoneyLike) -> str:
        return f"{label} = {self._fmt_money(money)}\n"

    def expense_lines(self, result: "PriceResult") -> List[str]:
        """Рядки ненульових витрат; порожньо, якщо сумарні витрати нульові."""
        if result.total_expenses.is_zero():
            return []
        lines: List[str] = []
        for expense in result.costs.iter_leaves():
            amount = expense.calculate_expense(result.starting_price)
            if amount.amount != 0:
                lines.append(self.format_line(expense.description, amount))
        return lines

    def write_report(self, result: "PriceResult", sink: Optional["ReportSink"] = None) -> str:
        """
        Пише звіт у `sink` рядок за рядком і повертає текст без рядків витрат.

        Args:
            result: Результат розрахунку.
            sink: Приймач рядків (кожен закінчується `\\n`); за замовчуванням stdout.

        Returns:
            str: Конкатенація рядків Cost, Tax, Discounts, TOTAL.
        """
        emit = sink or _stdout_sink

        starting = self.format_line(self.COST_LABEL, result.starting_price)
        emit(starting)

        tax = ""
        if not result.tax_amount.is_zero():
            tax = self.format_line(self.TAX_LABEL, result.tax_amount)
            emit(tax)

        discount = ""
        if not result.total_discount.is_zero():
            discount = self.format_line(self.DISCOUNT_LABEL, result.total_discount)
            emit(discount)

        for line in self.expense_lines(result):
            emit(line)

        total = self.format_line(self.TOTAL_LABEL, result.total_price)
        emit(total)

        return starting + tax + discount + total
