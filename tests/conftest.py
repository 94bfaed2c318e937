# tests/conftest.py
import logging
import sys
from pathlib import Path

import pytest

# Додаємо src в sys.path, щоб працював імпорт "price_calculator.…"
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from price_calculator.config import ENV_KEYS  # noqa: E402
from price_calculator.domain.money import Money  # noqa: E402
from price_calculator.domain.pricing import CostSet, FixedExpense, PercentageExpense  # noqa: E402
from price_calculator.domain.products import Product  # noqa: E402
from price_calculator.shared.utils.logger import LOG_NAME  # noqa: E402

BOOK_NAME = "The Little Prince"
BOOK_UPC = 123456
BOOK_PRICE = "20.25"


@pytest.fixture(autouse=True)
def _reset_app_logger():
    """Знімає хендлери, які init_logging міг повісити під час тесту."""
    yield
    app_logger = logging.getLogger(LOG_NAME)
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()
    app_logger.setLevel(logging.NOTSET)


@pytest.fixture
def clean_env(monkeypatch):
    """Прибирає змінні середовища калькулятора, щоб тест бачив лише свої джерела."""
    for name in ENV_KEYS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def book_costs():
    return CostSet.of(
        FixedExpense("Transport", "2.2"),
        PercentageExpense("Packaging", 1),
    )


@pytest.fixture
def book():
    return Product(BOOK_NAME, BOOK_UPC, Money.of(BOOK_PRICE))


@pytest.fixture
def book_with_costs(book_costs):
    return Product(BOOK_NAME, BOOK_UPC, Money.of(BOOK_PRICE), book_costs)
