# 💱 price_calculator/domain/money/__init__.py
"""
💱 Пакет `domain.money` публікує value-object грошей та утиліти округлення.

🔹 `money.py`: `CurrencyCode`, `Money`.
🔹 `rounding.py`: `round_to`, `q4`, `q2`, `percent`, `amount_from_percentage`.
"""

from .money import DEFAULT_CURRENCY, CurrencyCode, Money
from .rounding import (
    INTERNAL_PLACES,
    REPORT_PLACES,
    amount_from_percentage,
    percent,
    q2,
    q4,
    round_to,
    to_decimal,
)

__all__ = [
    "CurrencyCode",
    "DEFAULT_CURRENCY",
    "Money",
    "INTERNAL_PLACES",
    "REPORT_PLACES",
    "amount_from_percentage",
    "percent",
    "q2",
    "q4",
    "round_to",
    "to_decimal",
]
