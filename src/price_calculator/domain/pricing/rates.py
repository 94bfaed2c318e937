# 📐 price_calculator/domain/pricing/rates.py
"""
📐 Ставки податку та знижок.

🔹 `Tax`: ставка податку 0..100.
🔹 `UniversalDiscount` / `SpecialDiscount`: знижка на все та знижка для конкретного UPC.
🔹 `Precedence`: яка знижка (якщо є) застосовується до бази податку.
🔹 Ставки поза межами обрізаються, від'ємний UPC стає нулем. Винятків немає.

Обчислені суми сюди не записуються: їх повертає `PriceBreakdown` з кожного розрахунку.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

# 🧩 Внутрішні модулі проєкту
from price_calculator.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.pricing")

RATE_MIN = 0
RATE_MAX = 100


def clamp_rate(rate: Any) -> int:
    """Обрізає ставку до [0, 100]."""
    value = int(rate)
    clamped = min(max(value, RATE_MIN), RATE_MAX)
    if clamped != value:
        logger.debug("📐 Rate clamp | %s → %s", value, clamped)
    return clamped


# ================================
# 🧾 ПОДАТОК
# ================================
@dataclass(frozen=True, slots=True)
class Tax:
    rate: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "rate", clamp_rate(self.rate))


# ================================
# 🎯 ЗНИЖКИ
# ================================
class Precedence(IntEnum):
    """Порядок застосування знижок відносно податку."""

    NONE = 0                                                    # 🧾 Податок від повної ціни
    UNIVERSAL_FIRST = 1                                         # 🌍 Податок після універсальної знижки
    SPECIAL_FIRST = 2                                           # 🏷️ Податок після спеціальної знижки

    @classmethod
    def from_config(cls, value: Any) -> "Precedence":
        """Декодує селектор 0/1/2; невідоме значення → NONE."""
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            logger.debug("📐 Unknown precedence selector %r → NONE", value)
            return cls.NONE


@dataclass(frozen=True, slots=True)
class UniversalDiscount:
    """Знижка, що діє на всі товари."""

    rate: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "rate", clamp_rate(self.rate))


@dataclass(frozen=True, slots=True)
class SpecialDiscount:
    """Знижка лише для товару з указаним UPC."""

    upc: int = 0
    rate: int = 0

    def __post_init__(self) -> None:
        upc = int(self.upc)
        if upc < 0:
            logger.debug("🏷️ Negative special-discount UPC %s → 0", upc)
            upc = 0
        object.__setattr__(self, "upc", upc)
        object.__setattr__(self, "rate", clamp_rate(self.rate))

    def applies_to(self, upc: int) -> bool:
        return self.upc == upc


@dataclass(frozen=True, slots=True)
class Discount:
    """Пара знижок та прапорець їхнього пріоритету над податком."""

    universal: UniversalDiscount = field(default_factory=UniversalDiscount)
    special: SpecialDiscount = field(default_factory=SpecialDiscount)
    precedence: Precedence = Precedence.NONE

    def __post_init__(self) -> None:
        object.__setattr__(self, "precedence", Precedence.from_config(self.precedence))


__all__ = [
    "RATE_MIN",
    "RATE_MAX",
    "clamp_rate",
    "Tax",
    "Precedence",
    "UniversalDiscount",
    "SpecialDiscount",
    "Discount",
]
