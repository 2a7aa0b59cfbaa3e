# raytracer/utils/logger.py
# ---------------------------------------------------------------
# Логгер пакета. Ядро трассировщика только пишет в него;
# настройку (basicConfig) один раз делает хост‑приложение.
# ---------------------------------------------------------------

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("raytracer")


def init_logger(level=logging.INFO):
    """Глобальная настройка логирования процесса (вызывать из хоста)."""
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)
    logger.info("[Logger] Logger initialized")
    return logger
