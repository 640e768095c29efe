"""
Logging setup shared by every familytree module.

* ``get_logger`` is the only way modules obtain a logger.
* The ``familytree`` base logger owns a console handler and, unless
  ``logging.to_file`` is false, the master log file ``logs/familytree.log``.
* Module loggers add their own ``logs/<module>.log`` and propagate to the base.
* ``debug: true`` in ``config/familytree.yml`` (or ``set_debug``) means DEBUG.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List

from familytree.config import get_config

PROJECT_ROOT = Path(__file__).resolve().parents[3]
BASE_LOGGER_NAME = "familytree"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_loggers: Dict[str, Logger] = {}
_settings: Dict[str, object] = {}


def _configured_level(debug: bool) -> int:
    if debug:
        return logging.DEBUG
    level_name = str(get_config().logging.get("level", "INFO")).upper()
    return getattr(logging, level_name, logging.INFO)


def _log_dir() -> Path:
    cfg = get_config()
    log_dir = Path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _file_handler(filename: str) -> logging.Handler:
    path = _log_dir() / filename
    if _settings["rotate"]:
        handler: logging.Handler = RotatingFileHandler(
            path, maxBytes=5 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(_settings["level"])
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _base_logger() -> Logger:
    base = logging.getLogger(BASE_LOGGER_NAME)
    if _settings:
        return base

    cfg = get_config()
    _settings["level"] = _configured_level(bool(cfg.debug))
    _settings["rotate"] = bool(cfg.logging.get("rotate", False))
    _settings["to_file"] = bool(cfg.logging.get("to_file", True))

    base.setLevel(_settings["level"])
    base.propagate = False

    if _settings["to_file"]:
        base.addHandler(_file_handler(cfg.logging.get("file", "familytree.log")))

    console = StreamHandler()
    console.setLevel(_settings["level"])
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base.addHandler(console)

    _loggers[BASE_LOGGER_NAME] = base
    return base


def get_logger(name: str | None = None) -> Logger:
    """Return the named logger wired to the shared handlers."""
    base = _base_logger()
    name = name or BASE_LOGGER_NAME
    if name == base.name:
        return base

    logger = logging.getLogger(name)
    logger.setLevel(_settings["level"])
    logger.propagate = True

    has_own_file = any(getattr(h, "is_module_handler", False) for h in logger.handlers)
    if _settings["to_file"] and not has_own_file:
        handler = _file_handler(f"{name.replace('.', '_')}.log")
        handler.is_module_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    _loggers[name] = logger
    return logger


def set_debug(enabled: bool) -> None:
    """Move every logger handed out so far to DEBUG, or back to the configured level."""
    _base_logger()
    _settings["level"] = _configured_level(enabled)
    for logger in _loggers.values():
        logger.setLevel(_settings["level"])
        for handler in logger.handlers:
            handler.setLevel(_settings["level"])


def list_active_loggers() -> List[str]:
    """Names handed out by get_logger, for checking configuration in tests."""
    return list(_loggers)
