# 🚨 price_calculator/errors.py
"""
🚨 Ієрархія винятків калькулятора цін.

🔹 Доменне ядро не кидає винятків для числових входів: значення обрізаються до меж.
🔹 Винятки потрібні лише зовнішнім колабораторам: конфігурації та генератору UPC.
🔹 `to_log_extra()` повертає словник для `logger.extra`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Dict, Optional                               # 📐 Типізація


# ================================
# 🧠 БАЗОВИЙ ВИНЯТОК
# ================================
class PriceCalculatorError(Exception):
    """🧠 Базовий виняток застосунку."""

    error_code = "price_calculator_error"

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_log_extra(self) -> Dict[str, object]:
        """📦 Формує словник для логів."""
        extra: Dict[str, object] = {"error_code": self.error_code}
        if self.details:
            extra["details"] = self.details
        return extra


# ================================
# ⚙️ КОНФІГУРАЦІЯ
# ================================
class ConfigurationError(PriceCalculatorError):
    """⚙️ Значення конфігурації не вдалося прочитати або розібрати."""

    error_code = "configuration_error"

    def __init__(self, message: str, *, key: Optional[str] = None, details: Optional[str] = None) -> None:
        super().__init__(message, details=details)
        self.key = key                                          # 🔑 Ключ, що спричинив помилку

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.key:
            extra["config_key"] = self.key
        return extra


# ================================
# 🎲 ГЕНЕРАЦІЯ UPC
# ================================
class UpcGenerationError(PriceCalculatorError):
    """🎲 Джерело ентропії не змогло видати випадковий UPC."""

    error_code = "upc_generation_error"


# ================================
# 📤 ПУБЛІЧНИЙ API
# ================================
__all__ = [
    "PriceCalculatorError",
    "ConfigurationError",
    "UpcGenerationError",
]
