# 🏛️ price_calculator/domain/__init__.py
"""
🏛️ Доменний шар калькулятора цін.

🔹 `money`: гроші, валюти, округлення.
🔹 `products`: товар і UPC.
🔹 `pricing`: податок, знижки, ліміти, витрати та сервіс розрахунку.
"""
