# flowinject/shared/logger/john_wick_logger.py
import logging
import structlog
import inspect
from typing import Optional, Dict
from datetime import datetime, timezone


class JohnWickLogger:
    _logger_cache: Dict[str, "JohnWickLogger"] = {}

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",     # cyan
        "INFO": "\033[32m",      # green
        "WARNING": "\033[33m",   # yellow
        "ERROR": "\033[31m",     # red
        "CRITICAL": "\033[1;31m" # bold red
    }
    RESET_COLOR = "\033[0m"

    def __init__(self, name: str = "flowinject", log_file: Optional[str] = None, level: str = "INFO", context: Optional[dict] = None):
        self.name = name
        self.context = context or {}

        if name in self._logger_cache:
            cached = self._logger_cache[name]
            self.console_logger = cached.console_logger
            self.file_logger = cached.file_logger
            return

        # ----------------------------
        # Caller lookup, skipping structlog and this module
        # ----------------------------
        def add_caller_stack(logger, method_name, event_dict):
            frame = inspect.currentframe()
            while frame:
                module_name = frame.f_globals.get("__name__")
                if module_name and not module_name.startswith("structlog") and not module_name.endswith("john_wick_logger"):
                    event_dict["module"] = module_name
                    event_dict["function"] = frame.f_code.co_name
                    event_dict["lineno"] = frame.f_lineno
                    owner = frame.f_locals.get("self")
                    if owner is not None:
                        event_dict["class"] = owner.__class__.__name__
                    break
                frame = frame.f_back
            return event_dict

        def console_processor(logger, method_name, event_dict):
            ts = event_dict.get("timestamp") or datetime.now(timezone.utc).isoformat()
            level = event_dict.get("level", method_name).upper()
            logger_name = event_dict.get("logger", self.name).replace("_console", "")
            msg = event_dict.get("event", "")

            # Only show caller info for WARNING and above
            if level in ("WARNING", "ERROR", "CRITICAL"):
                module = event_dict.get("module", "")
                func = event_dict.get("function", "")
                lineno = event_dict.get("lineno", "")
                caller = f"{module}.{func}:{lineno}" if module and func else ""
            else:
                caller = ""

            color = self.LEVEL_COLORS.get(level, "")
            return f"{color}{ts} [{logger_name}] {level}: {msg} {caller}{self.RESET_COLOR}"

        log_level = getattr(logging, level.upper(), logging.INFO)

        # ----------------------------
        # Console logger
        # ----------------------------
        console_logger = logging.getLogger(f"{name}_console")
        console_logger.setLevel(log_level)
        if not console_logger.hasHandlers():
            ch = logging.StreamHandler()
            ch.setFormatter(logging.Formatter("%(message)s"))
            console_logger.addHandler(ch)

        self.console_logger = structlog.wrap_logger(
            console_logger,
            processors=[
                structlog.processors.TimeStamper(fmt="ISO"),
                structlog.stdlib.add_log_level,
                add_caller_stack,
                console_processor
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True
        ).bind(logger=name, **self.context)

        # ----------------------------
        # File logger (JSON), only when a log file is configured
        # ----------------------------
        self.file_logger = None
        if log_file:
            file_logger = logging.getLogger(f"{name}_file")
            file_logger.setLevel(log_level)
            if not any(isinstance(h, logging.FileHandler) for h in file_logger.handlers):
                fh = logging.FileHandler(log_file, encoding="utf-8")
                fh.setFormatter(logging.Formatter("%(message)s"))
                file_logger.addHandler(fh)

            self.file_logger = structlog.wrap_logger(
                file_logger,
                processors=[
                    structlog.processors.TimeStamper(fmt="ISO"),
                    structlog.stdlib.add_log_level,
                    structlog.processors.StackInfoRenderer(),
                    structlog.processors.format_exc_info,
                    add_caller_stack,
                    structlog.processors.UnicodeDecoder(),
                    structlog.processors.JSONRenderer()
                ],
                wrapper_class=structlog.stdlib.BoundLogger,
                cache_logger_on_first_use=True
            ).bind(logger=name, **self.context)

        self._logger_cache[name] = self

    def _emit(self, level: str, msg: str, **extra):
        getattr(self.console_logger, level)(msg, **extra)
        if self.file_logger is not None:
            getattr(self.file_logger, level)(msg, **extra)

    # ----------------------------
    # Logging methods
    # ----------------------------
    def debug(self, msg: str, **extra):
        self._emit("debug", msg, **extra)

    def info(self, msg: str, **extra):
        self._emit("info", msg, **extra)

    def warning(self, msg: str, **extra):
        self._emit("warning", msg, **extra)

    def error(self, msg: str, **extra):
        self._emit("error", msg, **extra)

    def exception(self, msg: str, **extra):
        self._emit("exception", msg, **extra)


def create_logger(name: str, log_file: Optional[str] = None, level: str = "INFO") -> JohnWickLogger:
    """
    Return the cached logger for ``name``, creating it on first use.

    Loggers are cached by name: ``log_file`` and ``level`` only take effect
    the first time a name is created. Later calls with the same name reuse
    the existing handlers and ignore both arguments.
    """
    return JohnWickLogger(name=name, log_file=log_file, level=level)
