# 📦 price_calculator/domain/pricing/services.py
"""
📦 Чистий сервіс розрахунку фінальної ціни товару.

🔹 Фаза пріоритету: податок і знижки рахуються від повної ціни або від ціни після однієї зі знижок.
🔹 Фаза комбінування: адитивно або мультиплікативно, потім ліміт знижки.
🔹 Фаза витрат: усі витрати від початкової ціни.
🔹 Проміжні суми мають 4 знаки, результат для звіту 2 знаки.

Калькулятор тримає лише конфігурацію: обчислені суми повертаються у `PriceBreakdown`,
тож один екземпляр можна безпечно використовувати для будь-якої кількості товарів.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                  # 🪵 Логування кроків розрахунку
from decimal import Decimal                                     # 💵 Точні гроші
from typing import TYPE_CHECKING, Optional, Tuple

# 🧩 Внутрішні модулі проєкту
from price_calculator.domain.money import Money, amount_from_percentage, q2, q4
from price_calculator.shared.utils.logger import LOG_NAME
from .caps import CombineType, PercentageCap, build_discount_cap
from .interfaces import IDiscountCap, IPriceCalculator
from .rates import Discount, Precedence, SpecialDiscount, Tax, UniversalDiscount
from .result import PriceBreakdown, PriceResult

if TYPE_CHECKING:
    from price_calculator.config.settings import CalculatorSettings
    from price_calculator.domain.products import Product

logger = logging.getLogger(f"{LOG_NAME}.domain.pricing")

ZERO = Decimal("0")


# ================================
# 🏛️ ГОЛОВНИЙ ДОМЕННИЙ СЕРВІС
# ================================
class PriceCalculator(IPriceCalculator):
    """💸 Доменний сервіс, що виконує **чистий** конвеєр розрахунку ціни."""

    def __init__(
        self,
        tax: Tax,
        discount: Discount,
        combine_type: CombineType = CombineType.ADDITIVE,
        cap: Optional[IDiscountCap] = None,
    ) -> None:
        """
        ⚙️ Фіксує конфігурацію розрахунку.

        Args:
            tax: Ставка податку.
            discount: Універсальна та спеціальна знижки з прапорцем пріоритету.
            combine_type: Стратегія поєднання знижок.
            cap: Ліміт сукупної знижки; без нього діє `PercentageCap(100)`.
        """
        self._tax = tax
        self._discount = discount
        self._combine_type = CombineType.from_config(combine_type)
        self._cap: IDiscountCap = cap if cap is not None else PercentageCap()

    @classmethod
    def from_settings(cls, settings: "CalculatorSettings") -> "PriceCalculator":
        """Будує калькулятор з одного знімка конфігурації."""
        discount = Discount(
            universal=UniversalDiscount(settings.universal_discount_rate),
            special=SpecialDiscount(settings.special_discount_upc, settings.special_discount_rate),
            precedence=settings.precedence,
        )
        return cls(
            tax=Tax(settings.tax_rate),
            discount=discount,
            combine_type=settings.combine_type,
            cap=build_discount_cap(settings.cap_type, settings.cap_value),
        )

    @property
    def tax(self) -> Tax:
        return self._tax

    @property
    def discount(self) -> Discount:
        return self._discount

    @property
    def combine_type(self) -> CombineType:
        return self._combine_type

    @property
    def cap(self) -> IDiscountCap:
        return self._cap

    # ================================
    # 🔢 ПУБЛІЧНИЙ API РОЗРАХУНКУ
    # ================================
    def calculate(self, product: "Product") -> PriceResult:
        """
        🚀 Запускає покроковий розрахунок фінальної ціни товару.

        Args:
            product: Товар з початковою ціною, UPC та набором витрат.

        Returns:
            PriceResult: Суми для звіту (2 знаки) та робочий `PriceBreakdown` (4 знаки).
        """
        starting_price: Money = product.price
        start = starting_price.amount
        currency = starting_price.currency
        logger.debug(
            "💸 Pricing started | product=%r upc=%s price=%s precedence=%s combine=%s",
            product.name,
            product.upc,
            starting_price,
            self._discount.precedence.name,
            self._combine_type.name,
        )

        # --- 🧾 Крок 1: Пріоритет податку та знижок ---
        tax_amount, universal, special = self._precedence_phase(start, product.upc)
        logger.debug(
            "🧾 Precedence phase | tax=%s universal=%s special=%s",
            tax_amount,
            universal,
            special,
        )

        # --- ➕ Крок 2: Комбінування та ліміт ---
        if self._combine_type is CombineType.MULTIPLICATIVE:
            # спеціальна знижка завжди від ціни після універсальної, навіть при SPECIAL_FIRST
            special = self._special_amount(start - universal, product.upc)
        raw_discount = universal + special
        total_discount = self._cap.calculate_cap(starting_price, raw_discount)
        price = (start + tax_amount) - total_discount
        logger.debug(
            "➕ Combination phase | mode=%s special=%s raw=%s capped=%s price=%s",
            self._combine_type.name,
            special,
            raw_discount,
            total_discount,
            price,
        )

        # --- 📦 Крок 3: Витрати від початкової ціни ---
        expenses = q4(product.costs.calculate_expense(starting_price).amount)
        price += expenses
        logger.debug("📦 Expense phase | expenses=%s price=%s", expenses, price)

        # --- 📬 Крок 4: Пакуємо результат ---
        breakdown = PriceBreakdown(
            tax=tax_amount,
            universal_discount=universal,
            special_discount=special,
            raw_discount=raw_discount,
            total_discount=total_discount,
            expenses=expenses,
            total=price,
        )
        result = PriceResult(
            starting_price=Money(q2(start), currency),
            tax_amount=Money(q2(tax_amount), currency),
            total_discount=Money(q2(total_discount), currency),
            total_expenses=Money(q2(expenses), currency),
            total_price=Money(q2(price), currency),
            costs=product.costs,
            breakdown=breakdown,
        )
        logger.info(
            "✅ Pricing completed | product=%r tax=%s discount=%s expenses=%s total=%s",
            product.name,
            result.tax_amount,
            result.total_discount,
            result.total_expenses,
            result.total_price,
        )
        return result

    # ==================================
    # 🧰 ПРИВАТНІ ЧИСТІ ДОПОМІЖНІ ФУНКЦІЇ
    # ==================================
    def _precedence_phase(self, start: Decimal, upc: int) -> Tuple[Decimal, Decimal, Decimal]:
        """Повертає (податок, універсальна знижка, спеціальна знижка) згідно з пріоритетом."""
        precedence = self._discount.precedence
        tax_rate = self._tax.rate
        universal_rate = self._discount.universal.rate

        if precedence is Precedence.UNIVERSAL_FIRST:
            universal = amount_from_percentage(universal_rate, start)
            tax_amount = amount_from_percentage(tax_rate, start - universal)
            special = self._special_amount(start - universal, upc)
        elif precedence is Precedence.SPECIAL_FIRST:
            special = self._special_amount(start, upc)
            tax_amount = amount_from_percentage(tax_rate, start - special)
            universal = amount_from_percentage(universal_rate, start - special)
        else:
            tax_amount = amount_from_percentage(tax_rate, start)
            universal = amount_from_percentage(universal_rate, start)
            special = self._special_amount(start, upc)
        return tax_amount, universal, special

    def _special_amount(self, base: Decimal, upc: int) -> Decimal:
        """Спеціальна знижка від `base`, якщо UPC товару збігається, інакше нуль."""
        special: SpecialDiscount = self._discount.special
        if not special.applies_to(upc):
            return ZERO
        return amount_from_percentage(special.rate, base)


def calculate(
    tax: Tax,
    discount: Discount,
    combine_type: CombineType,
    cap: Optional[IDiscountCap],
    product: "Product",
) -> PriceResult:
    """Одноразова форма контракту: налаштувати калькулятор і порахувати один товар."""
    return PriceCalculator(tax, discount, combine_type, cap).calculate(product)


__all__ = ["PriceCalculator", "calculate"]
