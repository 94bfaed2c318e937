# 🧮 price_calculator/main.py
"""
🧮 Entry-point калькулятора цін.

🔹 Один раз читає конфігурацію (config.yaml → .env → ENV) і піднімає логування.
🔹 Логує опис конфігурації, будує калькулятор і товар, друкує звіт у консоль.
🔹 Помилки конфігурації та генерації UPC завершують процес з ненульовим кодом.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from rich.console import Console                                # 🖥️ Вивід звіту в термінал

# 🔠 Системні імпорти
import argparse                                                 # 🧾 CLI-аргументи
import logging                                                  # 🧾 Логування подій запуску
import sys
from decimal import Decimal, InvalidOperation
from typing import Optional, Sequence

# 🧩 Внутрішні модулі проєкту
from price_calculator.config import CalculatorSettings, ConfigService, describe_settings
from price_calculator.domain.money import Money
from price_calculator.domain.pricing import PriceCalculator, PriceResult
from price_calculator.domain.products import Product
from price_calculator.errors import PriceCalculatorError
from price_calculator.shared.utils.logger import LOG_NAME, init_logging_from_config

logger = logging.getLogger(LOG_NAME)

DEFAULT_PRODUCT_NAME = "The Little Prince"
DEFAULT_PRODUCT_UPC = 123456
DEFAULT_PRODUCT_PRICE = "20.25"


# ================================
# ⚙️ CLI
# ================================
def _decimal_arg(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="price-calculator",
        description="Calculate the final price of a product from tax, discounts, cap and expenses.",
    )
    parser.add_argument("--config", help="Path to a YAML configuration file")
    parser.add_argument("--env-file", help="Path to a .env file with overrides")
    parser.add_argument("--name", default=DEFAULT_PRODUCT_NAME, help="Product name")
    parser.add_argument("--upc", type=int, default=DEFAULT_PRODUCT_UPC, help="6-digit product UPC")
    parser.add_argument("--price", type=_decimal_arg, default=Decimal(DEFAULT_PRODUCT_PRICE), help="Product price")
    parser.add_argument("--log-level", help="Override the logging level (DEBUG, INFO, ...)")
    return parser


def _console_sink(console: Console):
    def emit(line: str) -> None:
        console.print(line.rstrip("\n"), markup=False, emoji=False, highlight=False)
    return emit


# ================================
# 🚀 ENTRYPOINT
# ================================
def run_calculation(settings: CalculatorSettings, name: str, upc: int, price: Decimal) -> PriceResult:
    """Будує калькулятор і товар з налаштувань та повертає результат."""
    calculator = PriceCalculator.from_settings(settings)
    product = Product(
        name=name,
        upc=upc,
        price=Money(price, settings.currency),
        costs=settings.build_costs(),
    )
    logger.debug("📦 Product ready | name=%r upc=%s price=%s", product.name, product.upc, product.price)
    return calculator.calculate(product)


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    """
    Основна точка входу: читає конфіг, рахує ціну товару і друкує звіт.

    Returns:
        int: Код завершення процесу.
    """
    args = build_parser().parse_args(argv)
    console = console or Console()

    try:
        config = ConfigService(yaml_path=args.config, env_file=args.env_file)
        logging_node = dict(config.get("logging", {}) or {})
        if args.log_level:
            logging_node["level"] = args.log_level
        init_logging_from_config(logging_node)

        settings = CalculatorSettings.from_config(config)
        logger.info("CONFIGURATION")
        for line in describe_settings(settings):
            logger.info("⚙️ %s", line)

        result = run_calculation(settings, args.name, args.upc, args.price)
    except PriceCalculatorError as exc:
        logger.error("🚨 %s", exc.message, extra=exc.to_log_extra())
        return 1

    result.report(_console_sink(console))
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
