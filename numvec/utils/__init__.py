# numvec/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger – объект logging.Logger пакета ("numvec")
    * Config – JSON‑конфигурация (уровень логирования)
"""

from .logger import logger
from .config import Config

__all__ = ["logger", "Config"]
