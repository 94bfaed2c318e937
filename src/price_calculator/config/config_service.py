# ⚙️ config_service.py
"""
⚙️ config_service.py: Сервіс для доступу до статичної конфігурації калькулятора.

🔹 Клас `ConfigService`:
- Об'єднує вбудовані значення за замовчуванням, config.yaml та змінні середовища (.env).
- Надає єдиний метод .get() для доступу до будь-якого параметра за ключем з крапками.
- Це звичайний об'єкт: конфігурація читається один раз у точці входу й передається далі.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import yaml                                  # 📦 YAML-парсинг
from dotenv import dotenv_values             # 🔐 Читання змінних із .env

# 🔠 Системні імпорти
import copy                                  # 🧬 Глибока копія дефолтів
import logging                               # 🧾 Логування
import os                                    # 📁 Доступ до змінних середовища
from pathlib import Path                     # 📁 Побудова шляху до файлів
from typing import Any, Dict, Mapping, Optional, Union

# 🧩 Внутрішні модулі проєкту
from price_calculator.errors import ConfigurationError
from price_calculator.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.config")

PathLike = Union[str, Path]

DEFAULT_YAML_PATH = Path(__file__).parent / "config.yaml"

# 🔑 Змінні середовища → ключі конфігурації
ENV_KEYS: Dict[str, str] = {
    "TAX_RATE": "pricing.tax_rate",
    "UNIVERSAL_DISCOUNT_RATE": "pricing.universal_discount_rate",
    "SPECIAL_DISCOUNT_RATE": "pricing.special_discount_rate",
    "SPECIAL_DISCOUNT_UPC": "pricing.special_discount_upc",
    "DISCOUNT_TAKES_PRECEDENCE": "pricing.discount_takes_precedence",
    "DISCOUNT_CAP_TYPE": "pricing.discount_cap_type",
    "CAP_VALUE": "pricing.cap_value",
    "CURRENCY": "pricing.currency",
    "COMBINE_TYPE": "pricing.combine_type",
    "COST_PERCENTAGE": "pricing.cost_percentage",
    "COST_ABSOLUTE": "pricing.cost_absolute",
    "LOG_LEVEL": "logging.level",
}

DEFAULTS: Dict[str, Any] = {
    "pricing": {
        "tax_rate": 20,
        "universal_discount_rate": 0,
        "special_discount_rate": 0,
        "special_discount_upc": 0,
        "discount_takes_precedence": 0,
        "discount_cap_type": 0,
        "cap_value": 0,
        "currency": 0,
        "combine_type": 0,
        "cost_percentage": 0,
        "cost_absolute": 0,
    },
    "logging": {
        "level": "INFO",
        "console": True,
    },
}


# ============================
# ⚙️ СЕРВІС ДОСТУПУ ДО КОНФІГІВ
# ============================
class ConfigService:
    """
    ⚙️ Надає доступ до всіх конфігураційних параметрів калькулятора.
    Пріоритет (від нижчого до вищого): DEFAULTS → config.yaml → .env → os.environ.
    """

    def __init__(
        self,
        yaml_path: Optional[PathLike] = None,
        env_file: Optional[PathLike] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._yaml_path = Path(yaml_path) if yaml_path else DEFAULT_YAML_PATH
        self._env_file = Path(env_file) if env_file else None
        self._environ = os.environ if environ is None else environ
        self._config: Dict[str, Any] = copy.deepcopy(DEFAULTS)
        self._load_all_configs()

    def _load_all_configs(self) -> None:
        """📥 Завантажує всі джерела конфігурації в один словник."""

        # --- 1. YAML-файл ---
        if self._yaml_path.exists():
            logger.debug("📘 Завантаження %s", self._yaml_path)
            try:
                with open(self._yaml_path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    "Cannot parse YAML configuration", key=str(self._yaml_path), details=str(e)
                ) from e
            if not isinstance(data, dict):
                raise ConfigurationError("YAML configuration must be a mapping", key=str(self._yaml_path))
            self._deep_update(self._config, data)
        else:
            logger.warning("⚠️ Файл конфігурації %s не знайдено, використовуються значення за замовчуванням", self._yaml_path)

        # --- 2. .env файл та змінні середовища ---
        env_vars: Dict[str, Any] = {}
        if self._env_file is not None:
            if not self._env_file.exists():
                raise ConfigurationError("Env file not found", key=str(self._env_file))
            logger.debug("🔐 Завантаження змінних з %s", self._env_file)
            env_vars.update({k: v for k, v in dotenv_values(self._env_file).items() if v is not None})
        env_vars.update({k: v for k, v in self._environ.items() if k in ENV_KEYS})

        dotted = {ENV_KEYS[name]: value for name, value in env_vars.items() if name in ENV_KEYS}
        self._deep_update(self._config, self._unflatten_dict(dotted))

        logger.debug("🔍 Обʼєднаний словник конфігурації: %s", self._config)

    def get(self, key: str, default: Any = None) -> Any:
        """
        🔑 Отримує значення конфігурації за ключем (наприклад: 'pricing.tax_rate').

        Args:
            key (str): Ключ у форматі з крапкою.
            default (Any): Значення за замовчуванням, якщо ключ не знайдено.

        Returns:
            Any: Значення параметра або default.
        """
        value: Any = self._config
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def as_dict(self) -> Dict[str, Any]:
        """Глибока копія об'єднаної конфігурації."""
        return copy.deepcopy(self._config)

    # ===============================
    # 🔧 ДОПОМІЖНІ МЕТОДИ ЗЛИТТЯ КОНФІГІВ
    # ===============================
    @staticmethod
    def _unflatten_dict(d: Mapping[str, Any]) -> Dict[str, Any]:
        """
        🔁 Перетворює ключі з крапками в ієрархічний словник.
        'pricing.tax_rate' → {'pricing': {'tax_rate': ...}}
        """
        result: Dict[str, Any] = {}
        for key, value in d.items():
            parts = key.split(".")
            d_ref = result
            for part in parts[:-1]:
                d_ref = d_ref.setdefault(part, {})
            d_ref[parts[-1]] = value
        return result

    @classmethod
    def _deep_update(cls, source: Dict[str, Any], overrides: Mapping[str, Any]) -> None:
        """🔁 Рекурсивно обʼєднує два словники."""
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(source.get(key), dict):
                cls._deep_update(source[key], value)
            else:
                source[key] = value
