"""
Centralized logging configuration for gedcom2dot.

Key behaviors
-------------
* Single entry point via ``get_logger`` to keep handlers/formatters consistent.
* Console handler on stderr, so stdout stays reserved for the DOT graph.
* Master log file (default: ``logs/gedcom2dot.log``) plus optional per-module logs;
  no log files are written when no config file is found.
* Optional log rotation controlled by ``config/gedcom2dot.yml``.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from gedcom2dot import config as config_module
from gedcom2dot.config import get_config

# -----------------------------------------------------------------------------
# Paths and configuration
# -----------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[3]
BASE_LOGGER_NAME = "gedcom2dot"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO
_rotate_logs: bool = False
_per_module: bool = False


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _ensure_log_dir() -> Optional[Path]:
    """
    Resolve and create the log directory from configuration.

    Relative directories sit under the project root for the shipped config and
    next to the config file otherwise. Without any config file there is no
    anchor for a relative directory, so file logging is off (None).
    """
    cfg = get_config()

    log_dir = Path(cfg.logging.get("dir") or "logs")
    if not log_dir.is_absolute():
        if cfg.source is None:
            return None
        source = Path(cfg.source).resolve()
        if source == Path(config_module.CONFIG_PATH).resolve():
            log_dir = PROJECT_ROOT / log_dir
        else:
            log_dir = source.parent / log_dir

    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _build_file_handler(path: Path, level: int) -> logging.Handler:
    """Create a file handler with optional rotation."""
    if _rotate_logs:
        handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_base_logger() -> Logger:
    """Configure the shared base logger once."""
    global _base_configured, _effective_level, _rotate_logs, _per_module

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base_logger

    cfg = get_config()
    _rotate_logs = bool(cfg.logging.get("rotate", False))
    _per_module = bool(cfg.logging.get("per_module", False))

    level_name = str(cfg.logging.get("level", "INFO")).upper()
    base_level = getattr(logging, level_name, logging.INFO)
    _effective_level = logging.DEBUG if cfg.debug else base_level

    base_logger.setLevel(_effective_level)
    base_logger.propagate = False

    log_dir = _ensure_log_dir() if cfg.logging.get("to_file", True) else None
    if log_dir is not None:
        master_path = log_dir / cfg.logging.get("file", "gedcom2dot.log")
        base_logger.addHandler(_build_file_handler(master_path, _effective_level))

    # Console handler
    console = StreamHandler()
    console.setLevel(_effective_level)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


def _module_handler_exists(logger: Logger) -> bool:
    return any(getattr(h, "is_module_handler", False) for h in logger.handlers)


def _attach_module_handler(logger: Logger, module_name: str) -> None:
    log_dir = _ensure_log_dir()
    if log_dir is None:
        return
    filename = f"{module_name.replace('.', '_')}.log"
    handler = _build_file_handler(log_dir / filename, _effective_level)
    handler.is_module_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def configure_logging(verbose: bool = False) -> None:
    """
    (Re)build the shared handlers from the current config.

    Called by the CLI after ``--config`` has been applied. ``verbose`` forces
    DEBUG output regardless of the configured level.
    """
    global _base_configured

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    for handler in list(base_logger.handlers):
        base_logger.removeHandler(handler)
        handler.close()
    _base_configured = False

    _configure_base_logger()
    if verbose:
        base_logger.setLevel(logging.DEBUG)
        for handler in base_logger.handlers:
            handler.setLevel(logging.DEBUG)

    for name, logger in _logger_cache.items():
        if name != BASE_LOGGER_NAME:
            logger.setLevel(base_logger.level)


def get_logger(name: str | None = None) -> Logger:
    """Return a logger configured with project-wide handlers.

    * Module loggers propagate to the base console + master log handlers.
    * With ``logging.per_module`` each module also gains ``logs/<module>.log``.
    * The ``debug`` flag in ``config/gedcom2dot.yml`` forces DEBUG level output.
    """

    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME
    if not logger_name.startswith(BASE_LOGGER_NAME):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"
    logger = logging.getLogger(logger_name)
    logger.setLevel(base_logger.level)

    if logger_name != base_logger.name:
        if _per_module and not _module_handler_exists(logger):
            _attach_module_handler(logger, logger_name)
        logger.propagate = True

    _logger_cache[logger_name] = logger
    return logger


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())
