"""
🧪 test_main.py: тести для CLI entry-point

Перевіряє:
- Повний запуск: конфіг → логування → розрахунок → звіт
- Параметри товару з командного рядка
- Ненульовий код завершення при помилці конфігурації
"""

import io
import logging

import pytest
import yaml
from rich.console import Console

from price_calculator.main import build_parser, main

PRICING = {
    "tax_rate": 21,
    "universal_discount_rate": 15,
    "special_discount_rate": 7,
    "special_discount_upc": 123456,
    "cost_percentage": 1,
    "cost_absolute": 2.2,
}


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"pricing": PRICING, "logging": {"console": False}}), encoding="utf-8")
    return path


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120)


def test_main_prints_report(clean_env, config_file, console):
    code = main(["--config", str(config_file)], console=console)

    assert code == 0
    assert console.file.getvalue() == (
        "Cost = 20.25 USD\n"
        "Tax = 4.25 USD\n"
        "Discounts = 4.46 USD\n"
        "Transport = 2.20 USD\n"
        "Packaging = 0.20 USD\n"
        "TOTAL = 22.45 USD\n"
    )


def test_main_logs_configuration(clean_env, config_file, console, caplog):
    with caplog.at_level(logging.INFO):
        main(["--config", str(config_file)], console=console)

    assert "Tax Rate: 21%" in caplog.text
    assert "Discount combination type: Additive" in caplog.text


def test_main_product_options(clean_env, config_file, console):
    clean_env.setenv("CURRENCY", "1")
    code = main(["--config", str(config_file), "--upc", "654321", "--price", "10", "--name", "Other"], console=console)

    output = console.file.getvalue()
    assert code == 0
    assert output.startswith("Cost = 10.00 GBP\n")
    assert "Discounts = 1.50 GBP\n" in output


def test_main_env_file_overrides(clean_env, config_file, tmp_path, console):
    env_file = tmp_path / ".env"
    env_file.write_text("TAX_RATE=0\nUNIVERSAL_DISCOUNT_RATE=0\nSPECIAL_DISCOUNT_RATE=0\nCOST_ABSOLUTE=0\nCOST_PERCENTAGE=0\n")

    code = main(["--config", str(config_file), "--env-file", str(env_file)], console=console)

    assert code == 0
    assert console.file.getvalue() == "Cost = 20.25 USD\nTOTAL = 20.25 USD\n"


def test_main_bad_config_value_exits_non_zero(clean_env, tmp_path, console, caplog):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"pricing": {"tax_rate": "twenty"}, "logging": {"console": False}}))

    code = main(["--config", str(path)], console=console)

    assert code == 1
    assert console.file.getvalue() == ""
    assert "not a number" in caplog.text


def test_main_missing_env_file_exits_non_zero(clean_env, config_file, tmp_path, console):
    assert main(["--config", str(config_file), "--env-file", str(tmp_path / "missing.env")], console=console) == 1


def test_parser_rejects_bad_price():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--price", "cheap"])


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.name == "The Little Prince"
    assert args.upc == 123456
    assert str(args.price) == "20.25"
