"""
🧪 test_config_service.py: unit-тести для ConfigService

Перевіряє:
- Дефолти, YAML, .env та змінні середовища у правильному пріоритеті
- Помилки конфігурації (битий YAML, відсутній .env)
- Вбудований config.yaml пакета
"""

import pytest
import yaml

from price_calculator.config import DEFAULT_YAML_PATH, ConfigService
from price_calculator.errors import ConfigurationError


@pytest.fixture
def yaml_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.safe_dump({"pricing": {"tax_rate": 10, "universal_discount_rate": 5}, "logging": {"level": "DEBUG"}}),
        encoding="utf-8",
    )
    return path


def test_missing_yaml_falls_back_to_defaults(tmp_path):
    service = ConfigService(yaml_path=tmp_path / "missing.yaml", environ={})

    assert service.get("pricing.tax_rate") == 20
    assert service.get("pricing.cap_value") == 0
    assert service.get("logging.level") == "INFO"


def test_yaml_overrides_defaults(yaml_file):
    service = ConfigService(yaml_path=yaml_file, environ={})

    assert service.get("pricing.tax_rate") == 10
    assert service.get("pricing.universal_discount_rate") == 5
    assert service.get("pricing.special_discount_rate") == 0
    assert service.get("logging.level") == "DEBUG"


def test_environment_overrides_yaml(yaml_file):
    service = ConfigService(yaml_path=yaml_file, environ={"TAX_RATE": "25", "UNRELATED": "1"})

    assert service.get("pricing.tax_rate") == "25"
    assert service.get("UNRELATED") is None


def test_env_file_is_loaded_and_environment_wins(yaml_file, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("UNIVERSAL_DISCOUNT_RATE=15\nTAX_RATE=30\nCURRENCY=1\n", encoding="utf-8")

    service = ConfigService(yaml_path=yaml_file, env_file=env_file, environ={"TAX_RATE": "21"})

    assert service.get("pricing.universal_discount_rate") == "15"
    assert service.get("pricing.currency") == "1"
    assert service.get("pricing.tax_rate") == "21"


def test_missing_env_file_raises(yaml_file, tmp_path):
    with pytest.raises(ConfigurationError) as exc_info:
        ConfigService(yaml_path=yaml_file, env_file=tmp_path / "nope.env", environ={})
    assert exc_info.value.key.endswith("nope.env")


@pytest.mark.parametrize("content", ["pricing: [unclosed", "- just\n- a list\n"])
def test_bad_yaml_raises(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError):
        ConfigService(yaml_path=path, environ={})


def test_get_default_and_as_dict_copy(yaml_file):
    service = ConfigService(yaml_path=yaml_file, environ={})

    assert service.get("pricing.missing", "fallback") == "fallback"
    assert service.get("pricing.tax_rate.deeper", 7) == 7

    snapshot = service.as_dict()
    snapshot["pricing"]["tax_rate"] = 99
    assert service.get("pricing.tax_rate") == 10


def test_packaged_yaml_is_used_by_default():
    assert DEFAULT_YAML_PATH.exists()

    service = ConfigService(environ={})
    assert service.get("pricing.special_discount_upc") == 123456
    assert service.get("pricing.cost_absolute") == 2.2
