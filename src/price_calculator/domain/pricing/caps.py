# 🧢 price_calculator/domain/pricing/caps.py
"""
🧢 Ліміти сукупної знижки та стратегії комбінування знижок.

🔹 `AbsoluteCap`: знижка не більша за фіксовану суму.
🔹 `PercentageCap`: знижка не більша за відсоток від початкової ціни.
🔹 Значення ліміту ≤ 0 замінюється на «безлімітне»: 1 000 000 для абсолютного, 100% для відсоткового.
🔹 `CombineType`: адитивне чи мультиплікативне поєднання двох знижок.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import IntEnum
from typing import Any, Union

# 🧩 Внутрішні модулі проєкту
from price_calculator.domain.money import Money, percent as percent_of, to_decimal
from price_calculator.shared.utils.logger import LOG_NAME
from .interfaces import IDiscountCap

logger = logging.getLogger(f"{LOG_NAME}.domain.pricing")

Number = Union[Decimal, int, float, str]

ABSOLUTE_CAP_SENTINEL = Decimal("1000000")                      # ♾️ Фактично без ліміту
PERCENTAGE_CAP_SENTINEL = Decimal("100")                        # ♾️ 100% ціни


def _positive_or(value: Number, sentinel: Decimal, what: str) -> Decimal:
    number = to_decimal(value)
    if number.is_nan() or number <= 0:
        logger.debug("🧢 %s value %s is not positive → %s", what, number, sentinel)
        return sentinel
    return number


# ================================
# 💵 АБСОЛЮТНИЙ ЛІМІТ
# ================================
@dataclass(frozen=True, slots=True)
class AbsoluteCap(IDiscountCap):
    value: Decimal = ABSOLUTE_CAP_SENTINEL

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _positive_or(self.value, ABSOLUTE_CAP_SENTINEL, "AbsoluteCap"))

    def calculate_cap(self, starting_price: Money, proposed_discount: Decimal) -> Decimal:
        return min(to_decimal(proposed_discount), self.value)


# ================================
# 📊 ВІДСОТКОВИЙ ЛІМІТ
# ================================
@dataclass(frozen=True, slots=True)
class PercentageCap(IDiscountCap):
    percent: Decimal = PERCENTAGE_CAP_SENTINEL

    def __post_init__(self) -> None:
        object.__setattr__(self, "percent", _positive_or(self.percent, PERCENTAGE_CAP_SENTINEL, "PercentageCap"))

    def calculate_cap(self, starting_price: Money, proposed_discount: Decimal) -> Decimal:
        ceiling = percent_of(self.percent, starting_price.amount)
        return min(to_decimal(proposed_discount), ceiling)


# ================================
# 🏭 ФАБРИКА ЛІМІТІВ
# ================================
class CapType(IntEnum):
    """Селектор `DISCOUNT_CAP_TYPE` з конфігурації."""

    NONE = 0
    PERCENTAGE = 1
    ABSOLUTE = 2

    @classmethod
    def from_config(cls, value: Any) -> "CapType":
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            logger.debug("🧢 Unknown cap type selector %r → NONE", value)
            return cls.NONE


def build_discount_cap(cap_type: Any, value: Number = 0) -> IDiscountCap:
    """
    Створює ліміт за селектором конфігурації.

    0 або невідомий тип → `PercentageCap(100)`, 1 → відсотковий, 2 → абсолютний.
    """
    kind = CapType.from_config(cap_type)
    if kind is CapType.PERCENTAGE:
        return PercentageCap(to_decimal(value))
    if kind is CapType.ABSOLUTE:
        return AbsoluteCap(to_decimal(value))
    return PercentageCap(PERCENTAGE_CAP_SENTINEL)


# ================================
# ➕ СТРАТЕГІЯ КОМБІНУВАННЯ
# ================================
class CombineType(IntEnum):
    """Як поєднуються універсальна та спеціальна знижки перед лімітом."""

    ADDITIVE = 0                                                # ➕ Сума знижок від бази пріоритету
    MULTIPLICATIVE = 1                                          # ✖️ Спеціальна від ціни після універсальної

    @classmethod
    def from_config(cls, value: Any) -> "CombineType":
        """Невідомий селектор → ADDITIVE."""
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            logger.debug("➕ Unknown combine type selector %r → ADDITIVE", value)
            return cls.ADDITIVE


__all__ = [
    "ABSOLUTE_CAP_SENTINEL",
    "PERCENTAGE_CAP_SENTINEL",
    "AbsoluteCap",
    "PercentageCap",
    "CapType",
    "build_discount_cap",
    "CombineType",
]
