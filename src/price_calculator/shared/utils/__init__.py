# 🧰 price_calculator/shared/utils/__init__.py
"""
🧰 Пакет узгоджених утиліт: логування застосунку.

🔹 Експортує готові обгортки для конфігурації логів та отримання дочірніх логерів.
"""

from __future__ import annotations

# 🔠 Логування
from .logger import (
    LOG_NAME,
    get_logger,
    init_logging,
    init_logging_from_config,
)

# ================================
# 📦 ЕКСПОРТ ПАКЕТУ
# ================================
__all__ = [
    "LOG_NAME",
    "get_logger",
    "init_logging",
    "init_logging_from_config",
]
