# 🎲 price_calculator/domain/products/upc.py
"""
🎲 Генерація та перевірка 6-значних UPC.

🔹 Валідний UPC має щонайменше 6 цифр (≥ 100000).
🔹 Замість закороткого UPC видається випадковий з діапазону [100000, 999999].
🔹 Збій джерела ентропії перетворюється на `UpcGenerationError`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                  # 🧾 Логування генерації
import secrets                                                  # 🎲 Криптографічне джерело ентропії
from typing import Any

# 🧩 Внутрішні модулі проєкту
from price_calculator.errors import UpcGenerationError
from price_calculator.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.products")

UPC_DIGITS = 6
UPC_MIN = 10 ** (UPC_DIGITS - 1)                                # 100000
UPC_MAX = 10 ** UPC_DIGITS - 1                                  # 999999


def is_valid_upc(upc: Any) -> bool:
    """UPC валідний, якщо це ціле число з принаймні шістьма цифрами."""
    return isinstance(upc, int) and not isinstance(upc, bool) and upc >= UPC_MIN


def generate_upc() -> int:
    """Повертає випадковий UPC у межах [100000, 999999]."""
    try:
        value = UPC_MIN + secrets.randbelow(UPC_MAX - UPC_MIN + 1)
    except OSError as exc:
        raise UpcGenerationError("Entropy source failed while generating UPC", details=str(exc)) from exc
    logger.debug("🎲 Generated UPC %s", value)
    return value


def normalize_upc(upc: Any) -> int:
    """Залишає валідний UPC як є, інакше генерує новий."""
    if is_valid_upc(upc):
        return upc
    logger.debug("🎲 UPC %r is shorter than %s digits → regenerating", upc, UPC_DIGITS)
    return generate_upc()


__all__ = ["UPC_DIGITS", "UPC_MIN", "UPC_MAX", "is_valid_upc", "generate_upc", "normalize_upc"]
