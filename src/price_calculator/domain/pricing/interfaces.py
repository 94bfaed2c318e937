"""
🧩 interfaces.py: Контракти для доменних сервісів ціноутворення.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from price_calculator.domain.money import Money
    from price_calculator.domain.products import Product
    from .result import PriceResult


# ================================
# 🧾 ІНТЕРФЕЙС ВИТРАТИ
# ================================
class IExpense(ABC):
    """🧾 Додаткова витрата товару (фіксована або відсоткова)."""

    description: str

    @abstractmethod
    def calculate_expense(self, starting_price: "Money") -> "Money":
        """Сума витрати для заданої початкової ціни (у валюті цієї ціни)."""


# ================================
# 🧢 ІНТЕРФЕЙС ЛІМІТУ ЗНИЖКИ
# ================================
class IDiscountCap(ABC):
    """🧢 Обмеження сукупної знижки."""

    @abstractmethod
    def calculate_cap(self, starting_price: "Money", proposed_discount: Decimal) -> Decimal:
        """Повертає знижку, не більшу за ліміт."""


# ================================
# 💰 ІНТЕРФЕЙС КАЛЬКУЛЯТОРА
# ================================
class IPriceCalculator(ABC):
    """
    💰 Контракт для сервісу розрахунку цін.
    Дозволяє іншим частинам програми працювати з калькулятором, не знаючи його реалізації.
    """

    @abstractmethod
    def calculate(self, product: "Product") -> "PriceResult":
        """Розраховує фінальну ціну товару."""
