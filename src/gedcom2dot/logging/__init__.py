"""
Logging package for ``gedcom2dot``.

Use ``get_logger(__name__)`` in modules to share the console (stderr) and
master log file handlers. DOT output never goes through logging.
"""

from .logger import (
    configure_logging,
    get_logger,
    list_active_loggers,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "list_active_loggers",
]
