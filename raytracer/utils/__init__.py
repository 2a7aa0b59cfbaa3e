# raytracer/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger      – объект logging.Logger пакета
    * init_logger – однократная настройка логирования (для хоста)
    * Config, Profiler, save_image
"""

from .logger import logger, init_logger
from .config import Config
from .profiler import Profiler
from .image import save_image

__all__ = ["logger", "init_logger", "Config", "Profiler", "save_image"]
