# 💸 price_calculator/domain/pricing/__init__.py
"""
💸 Пакет `domain.pricing` публікує контракти, value-objects та сервіс ціноутворення.

🔹 `interfaces.py`: IExpense, IDiscountCap, IPriceCalculator.
🔹 `rates.py`: Tax, UniversalDiscount, SpecialDiscount, Discount, Precedence.
🔹 `caps.py`: AbsoluteCap, PercentageCap, build_discount_cap, CombineType.
🔹 `expenses.py`: FixedExpense, PercentageExpense, CostSet.
🔹 `result.py`: PriceBreakdown, PriceResult.
🔹 `services.py`: `PriceCalculator` та функція `calculate`.
"""

# 🧩 Внутрішні модулі проєкту
from .interfaces import IDiscountCap, IExpense, IPriceCalculator
from .rates import Discount, Precedence, SpecialDiscount, Tax, UniversalDiscount, clamp_rate
from .caps import (
    ABSOLUTE_CAP_SENTINEL,
    PERCENTAGE_CAP_SENTINEL,
    AbsoluteCap,
    CapType,
    CombineType,
    PercentageCap,
    build_discount_cap,
)
from .expenses import CostSet, FixedExpense, PercentageExpense, build_costs
from .result import PriceBreakdown, PriceResult, ReportSink
from .services import PriceCalculator, calculate


# ================================
# 📤 ПУБЛІЧНИЙ API ПАКЕТА
# ================================
__all__ = [
    # Контракти
    "IDiscountCap",
    "IExpense",
    "IPriceCalculator",
    # Ставки та знижки
    "Tax",
    "UniversalDiscount",
    "SpecialDiscount",
    "Discount",
    "Precedence",
    "clamp_rate",
    # Ліміти та комбінування
    "ABSOLUTE_CAP_SENTINEL",
    "PERCENTAGE_CAP_SENTINEL",
    "AbsoluteCap",
    "PercentageCap",
    "CapType",
    "build_discount_cap",
    "CombineType",
    # Витрати
    "FixedExpense",
    "PercentageExpense",
    "CostSet",
    "build_costs",
    # Результат
    "PriceBreakdown",
    "PriceResult",
    "ReportSink",
    # Сервіс
    "PriceCalculator",
    "calculate",
]
