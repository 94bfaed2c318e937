# 📜 price_calculator/shared/utils/logger.py
"""
📜 Єдина схема логування для калькулятора цін.

🔹 Ініціалізує кореневий логер застосунку з консольним та (опційно) файловим виводом.
🔹 Підтримує JSON-формат файлу, окремі рівні для консолі та файлу, suppress сторонніх логерів.
🔹 Надає хелпер для отримання дочірніх логерів через загальний префікс.
"""
from __future__ import annotations

# 🔠 Системні імпорти
import json                                                     # 📦 Серіалізація payload логів
import logging                                                  # 🪵 Робота з логерами Python
import sys                                                      # 🧵 Потік stdout
import threading                                                # 🧵 Захист ініціалізації
from dataclasses import dataclass, field                        # 🧱 DTO-конфіг логування
from logging.handlers import TimedRotatingFileHandler           # 📁 Хендлер з ротацією файлів
from pathlib import Path                                        # 📂 Операції з файловими шляхами
from typing import Any, Dict, Mapping, Optional, Union          # 🧰 Типи для конфігів

# ================================
# 🧾 КОНСТАНТИ МОДУЛЯ
# ================================
LOG_NAME: str = "price_calculator"                              # 🏷️ Базовий префікс логерів
PLAIN_FORMAT: str = "%(asctime)s [%(levelname)s] - (%(name)s).%(funcName)s(%(lineno)d) - %(message)s"
CONSOLE_FORMAT: str = "[%(levelname).1s] %(message)s"           # 🖥️ Мінімалістичний консольний формат

_RESERVED_ATTRS = frozenset(
    (
        "args", "asctime", "created", "exc_info", "exc_text", "filename",
        "levelno", "lineno", "module", "msecs", "message", "msg", "name",
        "pathname", "process", "processName", "relativeCreated", "stack_info",
        "thread", "threadName", "levelname", "funcName", "taskName",
    )
)

_lock = threading.Lock()                                        # 🔒 Блокуємо одночасну ініціалізацію


# ================================
# 🧾 DTO КОНФІГУРАЦІЇ
# ================================
@dataclass
class LoggingConfig:
    """Контейнер налаштувань логування з дефолтними значеннями."""
    level: str = "INFO"                                         # 🎚️ Глобальний рівень логів
    console: bool = True                                        # 🖥️ Чи вмикати консольний вивід
    json: bool = False                                          # 📦 JSON-формат для файлу
    file: Optional[str] = None                                  # 📁 Шлях до лог-файлу (None → без файлу)
    when: str = "midnight"                                      # ⏰ Періодичність ротації
    interval: int = 1
    backup_count: int = 7
    encoding: str = "utf-8"
    suppress: Dict[str, str] = field(default_factory=dict)      # 🙊 Треті сторони та їх рівні
    console_level: str = "INFO"
    file_level: str = "DEBUG"
    console_format: str = CONSOLE_FORMAT
    file_format: str = PLAIN_FORMAT


# ================================
# 🧰 ФОРМАТТЕРИ
# ================================
class JsonFormatter(logging.Formatter):
    """Форматує записи логів у плоский JSON."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, datefmt="%Y-%m-%d %H:%M:%S"),
            "level": record.levelname,
            "name": record.name,
            "module": record.module,
            "func": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():              # 🔎 Додаємо custom extra-поля
            if key.startswith("_") or key in _RESERVED_ATTRS or key in payload:
                continue
            try:
                json.dumps(value)                               # ✅ Перевіряємо серіалізованість
                payload[key] = value
            except (TypeError, ValueError):
                payload[key] = str(value)                       # 🔄 Decimal, Enum тощо → рядок
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


# ================================
# 🛠️ ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _make_console_handler(fmt: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(fmt)
    return handler


def _make_file_handler(cfg: LoggingConfig, fmt: logging.Formatter) -> logging.Handler:
    """Готує файловий хендлер із ротацією за часом."""
    log_path = Path(str(cfg.file))                              # 📂 Конвертуємо шлях
    log_path.parent.mkdir(parents=True, exist_ok=True)          # 🧱 Гарантуємо існування директорії
    handler = TimedRotatingFileHandler(
        filename=str(log_path),
        when=cfg.when,
        interval=cfg.interval,
        backupCount=cfg.backup_count,
        encoding=cfg.encoding,
    )
    handler.setFormatter(fmt)
    return handler


def _suppress_third_party(suppress: Mapping[str, str]) -> None:
    """Знижує рівні логування для сторонніх бібліотек."""
    for name, level in (suppress or {}).items():
        target_level = getattr(logging, str(level).upper(), logging.WARNING)
        logging.getLogger(name).setLevel(target_level)


def _to_level(value: Union[str, int], default: int) -> int:
    """Перетворює рядок/інт у числовий рівень логування."""
    if isinstance(value, int):
        return value
    resolved = getattr(logging, str(value).upper(), default)
    return resolved if isinstance(resolved, int) else default


# ================================
# 🚀 ПУБЛІЧНИЙ API
# ================================
def init_logging(
    *,
    level: Optional[str] = None,
    console: Optional[bool] = None,
    json_mode: Optional[bool] = None,
    file: Optional[str] = None,
    suppress: Optional[Dict[str, str]] = None,
    console_level: Optional[Union[str, int]] = None,
    file_level: Optional[Union[str, int]] = None,
    console_format: Optional[str] = None,
    file_format: Optional[str] = None,
) -> logging.Logger:
    """Ініціалізує кореневий логер застосунку за єдиною схемою."""
    with _lock:
        cfg = LoggingConfig(
            level=level or "INFO",
            console=True if console is None else bool(console),
            json=False if json_mode is None else bool(json_mode),
            file=file or None,
            suppress=suppress or {},
            console_level=str(console_level or level or "INFO"),
            file_level=str(file_level or level or "INFO"),
            console_format=console_format or CONSOLE_FORMAT,
            file_format=file_format or PLAIN_FORMAT,
        )

        root_logger = logging.getLogger(LOG_NAME)               # 🏷️ Кореневий логер застосунку
        root_level = min(
            _to_level(cfg.level, logging.INFO),
            _to_level(cfg.console_level, logging.INFO),
            _to_level(cfg.file_level, logging.INFO),
        )
        root_logger.setLevel(root_level)

        for handler in list(root_logger.handlers):              # 🧹 Прибираємо попередні хендлери
            if isinstance(handler, (logging.StreamHandler, TimedRotatingFileHandler)):
                root_logger.removeHandler(handler)
                handler.close()

        fmt_console = logging.Formatter(cfg.console_format)
        fmt_file = JsonFormatter() if cfg.json else logging.Formatter(cfg.file_format)

        if cfg.console:
            console_handler = _make_console_handler(fmt_console)
            console_handler.setLevel(_to_level(cfg.console_level, logging.INFO))
            root_logger.addHandler(console_handler)

        if cfg.file:
            file_handler = _make_file_handler(cfg, fmt_file)
            file_handler.setLevel(_to_level(cfg.file_level, logging.DEBUG))
            root_logger.addHandler(file_handler)

        _suppress_third_party(cfg.suppress)

        root_logger.debug(
            "✅ Logging initialized | level=%s console=%s/%s json=%s file=%s/%s",
            cfg.level.upper(),
            "ON" if cfg.console else "OFF",
            cfg.console_level.upper(),
            "ON" if cfg.json else "OFF",
            cfg.file or "-",
            cfg.file_level.upper(),
        )
        return root_logger


def init_logging_from_config(config: Optional[Mapping[str, Any]]) -> logging.Logger:
    """
    Ініціалізує логування на базі розділу `logging` із ConfigService.

    Args:
        config: Словник налаштувань (може бути порожнім або None).

    Returns:
        logging.Logger: Кореневий логер застосунку.
    """
    node = config or {}
    return init_logging(
        level=node.get("level"),
        console=node.get("console"),
        json_mode=node.get("json"),
        file=node.get("file"),
        suppress=node.get("suppress"),
        console_level=node.get("console_level"),
        file_level=node.get("file_level"),
        console_format=node.get("console_format"),
        file_format=node.get("file_format"),
    )


def get_logger(suffix: Optional[str] = None) -> logging.Logger:
    """Повертає дочірній логер із префіксом `LOG_NAME`."""
    logger_name = LOG_NAME if not suffix else f"{LOG_NAME}.{suffix}"
    return logging.getLogger(logger_name)
