# 📦 price_calculator/domain/products/entities.py
"""
📦 Доменна сутність товару.

🔹 Назва за замовчуванням, якщо порожня.
🔹 Закороткий UPC замінюється на згенерований.
🔹 Ціна завжди `Money` (невід'ємна, 4 знаки), витрати завжди `CostSet`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

# 🧩 Внутрішні модулі проєкту
from price_calculator.domain.money import Money
from price_calculator.domain.pricing.expenses import CostSet
from price_calculator.shared.utils.logger import LOG_NAME
from .upc import normalize_upc

logger = logging.getLogger(f"{LOG_NAME}.domain.products")

DEFAULT_PRODUCT_NAME = "Unnamed Product"


# ================================
# 📦 СУТНІСТЬ: PRODUCT
# ================================
@dataclass(frozen=True, slots=True)
class Product:
    """Іммʼютабельний товар, для якого рахується ціна."""

    name: str
    upc: int
    price: Money
    costs: CostSet = field(default_factory=CostSet)

    def __post_init__(self) -> None:
        name = (self.name or "").strip()
        if not name:
            logger.debug("📦 Empty product name → %r", DEFAULT_PRODUCT_NAME)
            name = DEFAULT_PRODUCT_NAME
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "upc", normalize_upc(self.upc))
        if not isinstance(self.price, Money):
            object.__setattr__(self, "price", Money.of(self.price))
        if self.costs is None:
            object.__setattr__(self, "costs", CostSet())

    @classmethod
    def create(
        cls,
        name: str,
        upc: Any,
        price: Money,
        costs: Optional[CostSet] = None,
    ) -> "Product":
        return cls(name=name, upc=upc, price=price, costs=costs if costs is not None else CostSet())


__all__ = ["DEFAULT_PRODUCT_NAME", "Product"]
