# 🧮 price_calculator/__init__.py
"""
🧮 Калькулятор фінальної ціни товару.

🔹 Податок, універсальна та спеціальна (за UPC) знижки, пріоритет знижок над податком.
🔹 Адитивне чи мультиплікативне поєднання знижок, ліміт знижки, фіксовані та відсоткові витрати.
🔹 Точність: 4 знаки для проміжних сум, 2 знаки у звіті.
"""

__version__ = "1.0.0"
