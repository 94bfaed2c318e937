# 🖥️ price_calculator/ui/__init__.py
"""🖥️ Представлення результатів розрахунку (текстові звіти)."""
