# 🧾 price_calculator/ui/formatters/__init__.py
"""🧾 Форматери звітів."""

from .price_report_formatter import MoneyLike, PriceReportFormatter

__all__ = ["MoneyLike", "PriceReportFormatter"]
