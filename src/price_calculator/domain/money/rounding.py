# ➗ price_calculator/domain/money/rounding.py
"""
➗ Утиліти округлення для Decimal-арифметики прайсингу.

🔹 `round_to` округлює ROUND_HALF_UP до заданої кількості знаків (від'ємні числа симетрично).
🔹 `q4` / `q2` фіксують дворівневу точність: 4 знаки для проміжних сум, 2 для звіту.
🔹 `amount_from_percentage` рахує `rate% * base` і одразу нормалізує до 4 знаків.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from decimal import ROUND_HALF_UP, Decimal                      # 💵 Точні гроші (без float)
from typing import Union                                        # 🧰 Допустимі числові входи

# ================================
# 🧾 КОНСТАНТИ
# ================================
INTERNAL_PLACES = 4                                             # 🔬 Точність проміжних розрахунків
REPORT_PLACES = 2                                               # 🧾 Точність звіту
HUNDRED = Decimal("100")

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """Перетворює число на Decimal; float йде через `str`, щоб не тягнути двійковий шум."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_to(value: Number, places: int) -> Decimal:
    """
    Округлює значення ROUND_HALF_UP до `places` знаків після коми.

    Від'ємні числа округлюються за модулем зі збереженням знака.
    `places < 0` трактується як 0, NaN повертається як NaN.
    """
    number = to_decimal(value)
    if number.is_nan():
        return Decimal("NaN")
    places = max(int(places), 0)
    quantum = Decimal(1).scaleb(-places)                        # 📏 0.0001, 0.01, 1 ...
    return number.quantize(quantum, rounding=ROUND_HALF_UP)


def q4(value: Number) -> Decimal:
    """Нормалізує значення до внутрішньої точності (4 знаки)."""
    return round_to(value, INTERNAL_PLACES)


def q2(value: Number) -> Decimal:
    """Нормалізує значення до точності звіту (2 знаки)."""
    return round_to(value, REPORT_PLACES)


def percent(rate: Number, base: Number) -> Decimal:
    """Сирий відсоток `rate% * base` без округлення."""
    return to_decimal(rate) / HUNDRED * to_decimal(base)


def amount_from_percentage(rate: Number, base: Number) -> Decimal:
    """Сума, що відповідає `rate%` від `base`, округлена до 4 знаків."""
    return q4(percent(rate, base))


__all__ = [
    "INTERNAL_PLACES",
    "REPORT_PLACES",
    "to_decimal",
    "round_to",
    "q4",
    "q2",
    "percent",
    "amount_from_percentage",
]
