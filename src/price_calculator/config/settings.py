# 🧾 price_calculator/config/settings.py
"""
🧾 Знімок конфігурації калькулятора.

🔹 `CalculatorSettings` читається з `ConfigService` один раз у точці входу.
🔹 Числові значення розбираються тут; нерозбірне значення → `ConfigurationError`.
🔹 Селектори декодуються в enum-и з безпечними значеннями за замовчуванням.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import List

# 🧩 Внутрішні модулі проєкту
from price_calculator.domain.money import CurrencyCode
from price_calculator.domain.pricing import (
    CapType,
    CombineType,
    CostSet,
    FixedExpense,
    PercentageExpense,
    Precedence,
)
from price_calculator.errors import ConfigurationError
from .config_service import ConfigService

TRANSPORT_EXPENSE = "Transport"
PACKAGING_EXPENSE = "Packaging"


def _as_decimal(service: ConfigService, key: str) -> Decimal:
    raw = service.get(key, 0)
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return Decimal("0")
    try:
        value = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ConfigurationError(f"Config value {key!r} is not a number: {raw!r}", key=key) from exc
    if not value.is_finite():
        raise ConfigurationError(f"Config value {key!r} is not a finite number: {raw!r}", key=key)
    return value


def _as_int(service: ConfigService, key: str) -> int:
    return int(_as_decimal(service, key))


# ================================
# ⚙️ ЗНІМОК НАЛАШТУВАНЬ
# ================================
@dataclass(frozen=True, slots=True)
class CalculatorSettings:
    """Усі параметри формули ціни, розібрані та декодовані."""

    tax_rate: int = 20
    universal_discount_rate: int = 0
    special_discount_rate: int = 0
    special_discount_upc: int = 0
    precedence: Precedence = Precedence.NONE
    cap_type: CapType = CapType.NONE
    cap_value: Decimal = Decimal("0")
    currency: CurrencyCode = CurrencyCode.USD
    combine_type: CombineType = CombineType.ADDITIVE
    cost_percentage: Decimal = Decimal("0")
    cost_absolute: Decimal = Decimal("0")

    @classmethod
    def from_config(cls, service: ConfigService) -> "CalculatorSettings":
        """Розбирає розділ `pricing` конфігурації."""
        return cls(
            tax_rate=_as_int(service, "pricing.tax_rate"),
            universal_discount_rate=_as_int(service, "pricing.universal_discount_rate"),
            special_discount_rate=_as_int(service, "pricing.special_discount_rate"),
            special_discount_upc=_as_int(service, "pricing.special_discount_upc"),
            precedence=Precedence.from_config(_as_int(service, "pricing.discount_takes_precedence")),
            cap_type=CapType.from_config(_as_int(service, "pricing.discount_cap_type")),
            cap_value=_as_decimal(service, "pricing.cap_value"),
            currency=CurrencyCode.from_config(_as_int(service, "pricing.currency")),
            combine_type=CombineType.from_config(_as_int(service, "pricing.combine_type")),
            cost_percentage=_as_decimal(service, "pricing.cost_percentage"),
            cost_absolute=_as_decimal(service, "pricing.cost_absolute"),
        )

    def build_costs(self) -> CostSet:
        """Дві витрати з конфігурації: фіксований транспорт і відсоткове пакування."""
        return CostSet.of(
            FixedExpense(TRANSPORT_EXPENSE, self.cost_absolute),
            PercentageExpense(PACKAGING_EXPENSE, self.cost_percentage),
        )


def describe_settings(settings: CalculatorSettings) -> List[str]:
    """Людськочитний опис конфігурації для логу перед розрахунком."""
    lines = [
        f"Tax Rate: {settings.tax_rate}%",
        f"Universal Discount Rate: {settings.universal_discount_rate}%",
        f"Special Discount: Rate - {settings.special_discount_rate}%; UPC - {settings.special_discount_upc}",
    ]

    if settings.precedence is Precedence.UNIVERSAL_FIRST:
        lines.append("Universal discount takes precedence over tax")
    elif settings.precedence is Precedence.SPECIAL_FIRST:
        lines.append("Special discount takes precedence over tax")
    else:
        lines.append("Discount does not take precedence over tax")

    if settings.cap_type is CapType.PERCENTAGE:
        lines.append(f"Discount cap: Percentage-based, Value: {settings.cap_value}%")
    elif settings.cap_type is CapType.ABSOLUTE:
        lines.append(f"Discount cap: Absolute, Value: {settings.cap_value}")
    else:
        lines.append("No discount cap has been set")

    lines.append(f"Currency: {settings.currency.name}")
    lines.append(f"Discount combination type: {settings.combine_type.name.capitalize()}")
    return lines
