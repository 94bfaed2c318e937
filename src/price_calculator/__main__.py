# ▶️ price_calculator/__main__.py
"""▶️ Дозволяє запуск як `python -m price_calculator`."""

from price_calculator.main import run

if __name__ == "__main__":
    run()
