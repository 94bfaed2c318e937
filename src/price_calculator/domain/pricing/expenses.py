# 🧾 price_calculator/domain/pricing/expenses.py
"""
🧾 Модель додаткових витрат товару.

🔹 `FixedExpense`: абсолютна сума, перемаркована у валюту початкової ціни.
🔹 `PercentageExpense`: відсоток від початкової ціни.
🔹 `CostSet`: впорядкований набір витрат; сам є витратою, тож набори можуть вкладатися.
🔹 Від'ємні значення обрізаються до нуля при створенні.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Iterator, Tuple, Union

# 🧩 Внутрішні модулі проєкту
from price_calculator.domain.money import Money, percent, q4, to_decimal
from price_calculator.shared.utils.logger import LOG_NAME
from .interfaces import IExpense

logger = logging.getLogger(f"{LOG_NAME}.domain.pricing")

Number = Union[Decimal, int, float, str]


def _non_negative(value: Number, what: str) -> Decimal:
    """Обрізає від'ємне значення до нуля."""
    number = to_decimal(value)
    if number.is_nan() or number < 0:
        logger.debug("🧾 %s clamp | %s → 0", what, number)
        return Decimal("0")
    return number


# ================================
# 💵 ФІКСОВАНА ВИТРАТА
# ================================
@dataclass(frozen=True, slots=True)
class FixedExpense(IExpense):
    """Абсолютна витрата (наприклад, транспорт)."""

    description: str
    amount: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", q4(_non_negative(self.amount, "FixedExpense")))

    def calculate_expense(self, starting_price: Money) -> Money:
        return Money(self.amount, starting_price.currency)


# ================================
# 📊 ВІДСОТКОВА ВИТРАТА
# ================================
@dataclass(frozen=True, slots=True)
class PercentageExpense(IExpense):
    """Витрата як відсоток від початкової ціни (наприклад, пакування)."""

    description: str
    rate: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "rate", _non_negative(self.rate, "PercentageExpense"))

    def calculate_expense(self, starting_price: Money) -> Money:
        return Money(percent(self.rate, starting_price.amount), starting_price.currency)


# ================================
# 🗂️ НАБІР ВИТРАТ
# ================================
@dataclass(frozen=True, slots=True)
class CostSet(IExpense):
    """
    Впорядкований набір витрат товару.

    Сума рахується завжди від початкової ціни; порядок впливає лише на порядок рядків звіту.
    """

    expenses: Tuple[IExpense, ...] = field(default_factory=tuple)
    description: str = "Costs"

    def __post_init__(self) -> None:
        object.__setattr__(self, "expenses", tuple(e for e in self.expenses if e is not None))

    @classmethod
    def of(cls, *expenses: IExpense) -> "CostSet":
        return cls(tuple(expenses))

    def __iter__(self) -> Iterator[IExpense]:
        return iter(self.expenses)

    def __len__(self) -> int:
        return len(self.expenses)

    def iter_leaves(self) -> Iterator[IExpense]:
        """Обходить витрати в порядку додавання, розгортаючи вкладені набори."""
        for expense in self.expenses:
            if isinstance(expense, CostSet):
                yield from expense.iter_leaves()
            else:
                yield expense

    def calculate_expense(self, starting_price: Money) -> Money:
        total = sum(
            (expense.calculate_expense(starting_price).amount for expense in self.expenses),
            Decimal("0"),
        )
        return Money(total, starting_price.currency)


def build_costs(expenses: Iterable[IExpense]) -> CostSet:
    """Збирає `CostSet` з довільної послідовності витрат."""
    return CostSet(tuple(expenses))


__all__ = ["FixedExpense", "PercentageExpense", "CostSet", "build_costs"]
