# 🧰 price_calculator/shared/__init__.py
"""🧰 Спільні утиліти застосунку (логування)."""
