from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path

from restful_it.shared.config import LOG_DIRECTORY_PATH, LOG_FILE_PATH, LOG_LEVEL

SUITE_LOGGER = "restful_it"

# bibliotecas de transporte só sobem para o nível da suíte em DEBUG
_TRANSPORT_LOGGERS = ("httpx", "httpcore")
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _file_handler(path: Path, level: str) -> logging.Handler:
    fh = logging.handlers.RotatingFileHandler(
        str(path), maxBytes=5_000_000, backupCount=3, encoding="utf-8"
    )
    fh.setLevel(level)
    fh.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s [%(filename)s:%(lineno)d]: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    return fh


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure console + rotating file output and return the suite logger."""

    resolved_level = (level or LOG_LEVEL).upper()
    LOG_DIRECTORY_PATH.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(resolved_level)

    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(resolved_level)
    ch.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname).1s [restful-it] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    ))

    root.handlers.clear()
    root.addHandler(ch)
    root.addHandler(_file_handler(LOG_FILE_PATH, resolved_level))

    # avisos como "coroutine ... was never awaited" vão para o mesmo destino
    logging.captureWarnings(True)

    transport_level = resolved_level if resolved_level == "DEBUG" else "WARNING"
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
    for name in _SERVER_LOGGERS:
        logging.getLogger(name).setLevel(resolved_level)

    suite = logging.getLogger(SUITE_LOGGER)
    suite.setLevel(resolved_level)
    suite.debug("Logging configurado em %s (arquivo %s)", resolved_level, LOG_FILE_PATH)
    return suite
