# 💵 price_calculator/domain/money/money.py
"""
💵 Value-object грошей та перелік валют.

🔹 `CurrencyCode`: мітка валюти (USD, GBP, JPY, EUR); суми ніколи не конвертуються.
🔹 `Money`: іммʼютабельна пара (сума, валюта): сума ≥ 0 і завжди нормалізована до 4 знаків.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                  # 🧾 Логування нормалізації
from dataclasses import dataclass                               # 🧱 Immutable value-object
from decimal import Decimal                                     # 💰 Точні суми
from enum import IntEnum                                        # 🔖 Числові селектори з конфігу
from typing import Any, Union

# 🧩 Внутрішні модулі проєкту
from price_calculator.shared.utils.logger import LOG_NAME       # 🏷️ Базове імʼя логера
from .rounding import q4, to_decimal

logger = logging.getLogger(f"{LOG_NAME}.domain.money")


# ================================
# 💱 ВАЛЮТИ
# ================================
class CurrencyCode(IntEnum):
    """Підтримувані валюти; числове значення збігається з селектором `CURRENCY`."""

    USD = 0
    GBP = 1
    JPY = 2
    EUR = 3

    def __str__(self) -> str:
        return self.name                                        # 🏷️ "USD", "GBP" ...

    def __format__(self, format_spec: str) -> str:
        return format(self.name, format_spec)                   # 🧾 f-рядки друкують код, а не число

    @classmethod
    def from_config(cls, value: Any) -> "CurrencyCode":
        """Декодує селектор з конфігурації; невідоме значення → USD."""
        if isinstance(value, CurrencyCode):
            return value
        if isinstance(value, str) and value.strip().upper() in cls.__members__:
            return cls[value.strip().upper()]
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            logger.debug("💱 Unknown currency selector %r → USD", value)
            return cls.USD


DEFAULT_CURRENCY = CurrencyCode.USD


# ================================
# 💵 VALUE OBJECT: MONEY
# ================================
@dataclass(frozen=True, slots=True)
class Money:
    """
    Грошова сума з прив'язаною валютою.

    Від'ємні (та NaN) суми обрізаються до нуля, решта округлюється до 4 знаків.
    """

    amount: Decimal
    currency: CurrencyCode = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        raw = to_decimal(self.amount)
        if raw.is_nan() or raw < 0:
            logger.debug("💵 Money clamp | %s → 0", raw)
            raw = Decimal("0")
        object.__setattr__(self, "amount", q4(raw))             # 🔐 Фіксуємо нормалізовану суму
        object.__setattr__(self, "currency", CurrencyCode.from_config(self.currency))

    @classmethod
    def of(cls, amount: Union[Decimal, int, float, str], currency: Any = DEFAULT_CURRENCY) -> "Money":
        """Зручний конструктор із довільного числового входу."""
        return cls(to_decimal(amount), CurrencyCode.from_config(currency))

    @classmethod
    def zero(cls, currency: Any = DEFAULT_CURRENCY) -> "Money":
        return cls(Decimal("0"), CurrencyCode.from_config(currency))

    def with_currency(self, currency: CurrencyCode) -> "Money":
        """Перемарковує суму іншою валютою без конвертації."""
        return Money(self.amount, currency)

    def is_zero(self) -> bool:
        return self.amount == 0

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"


__all__ = ["CurrencyCode", "DEFAULT_CURRENCY", "Money"]
