# flowinject/config/logger.py

import os
from typing import Optional

from flowinject.config.settings import Settings
from flowinject.shared.logger import JohnWickLogger, create_logger

settings = Settings()

# Ensure the log directory exists
log_dir = os.path.dirname(settings.app.log_file)
if log_dir and not os.path.exists(log_dir):
    os.makedirs(log_dir, exist_ok=True)

# Private singleton instance
_logger: Optional[JohnWickLogger] = None


def get_logger(name: Optional[str] = None) -> JohnWickLogger:
    """
    Return a JohnWickLogger configured from settings.

    Without a name, returns the package-wide logger (created on first call).
    With a name, returns a child logger ``<app_name>.<name>`` sharing the
    same level and log file.
    """
    global _logger
    if name is not None:
        return create_logger(
            f"{settings.app.app_name}.{name}",
            log_file=settings.app.log_file or None,
            level=settings.app.log_level,
        )
    if _logger is None:
        _logger = create_logger(
            settings.app.app_name,
            log_file=settings.app.log_file or None,
            level=settings.app.log_level,
        )
    return _logger


__all__ = ["JohnWickLogger", "get_logger", "settings"]
