# numvec/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер библиотеки.
# ---------------------------------------------------------------

import logging

LOGGER_NAME = "numvec"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def init_logger(level=logging.WARNING):
    """Вернуть логгер пакета с собственным обработчиком в stderr."""
    log = logging.getLogger(LOGGER_NAME)
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
    log.setLevel(level)
    return log


logger = init_logger()
