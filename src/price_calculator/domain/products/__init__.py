# 📦 price_calculator/domain/products/__init__.py
"""
📦 Пакет `domain.products`: сутність товару та робота з UPC.
"""

from .entities import DEFAULT_PRODUCT_NAME, Product
from .upc import UPC_MAX, UPC_MIN, generate_upc, is_valid_upc, normalize_upc

__all__ = [
    "DEFAULT_PRODUCT_NAME",
    "Product",
    "UPC_MAX",
    "UPC_MIN",
    "generate_upc",
    "is_valid_upc",
    "normalize_upc",
]
