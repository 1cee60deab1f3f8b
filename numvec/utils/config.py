"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Единственная настройка – уровень логирования. Файл читается только
при явном вызове Config() (не при импорте пакета). Путь берётся из
переменной окружения NUMVEC_CONFIG, иначе numvec.json в текущем каталоге.
Если файла нет – работаем с настройками по‑умолчанию, файл при этом
не создаётся (только явным save()).
"""

import json
import os
from pathlib import Path

from numvec.utils.logger import logger

CONFIG_ENV = "NUMVEC_CONFIG"
DEFAULT_PATH = "numvec.json"

DEFAULT_CONFIG = {
    "log_level": "WARNING",
}


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path or os.environ.get(CONFIG_ENV, DEFAULT_PATH))
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Забыть текущий экземпляр (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self):
        self.data = DEFAULT_CONFIG.copy()
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data.update(json.load(f))
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = DEFAULT_CONFIG.copy()
        self._apply()

    def _apply(self):
        level = str(self.data.get("log_level", DEFAULT_CONFIG["log_level"])).upper()
        try:
            logger.setLevel(level)
        except ValueError:
            logger.error(f"[Config] Unknown log level {level!r}, keeping {DEFAULT_CONFIG['log_level']}.")
            logger.setLevel(DEFAULT_CONFIG["log_level"])

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        self._apply()

    def get(self, key, default=None):
        return self.data.get(key, default)
