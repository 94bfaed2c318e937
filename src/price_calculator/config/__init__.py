# ⚙️ price_calculator/config/__init__.py
"""
⚙️ Пакет Config: централізована конфігурація калькулятора.

Цей пакет відповідає за:
- Завантаження налаштувань (config.yaml, .env, змінні середовища).
- Розбір їх у єдиний знімок `CalculatorSettings`, що передається в калькулятор.
"""

from .config_service import DEFAULT_YAML_PATH, ENV_KEYS, ConfigService
from .settings import CalculatorSettings, describe_settings

__all__ = [
    "CalculatorSettings",
    "ConfigService",
    "DEFAULT_YAML_PATH",
    "ENV_KEYS",
    "describe_settings",
]
