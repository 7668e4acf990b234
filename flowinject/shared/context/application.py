import threading
from typing import Optional

from flowinject.shared.context.base import AbstractContext


class ApplicationContext(AbstractContext):
    """Process-wide context for objects shared by the whole application."""

    _instance: Optional["ApplicationContext"] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "ApplicationContext":
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared instance; the next get_instance() starts empty."""
        with cls._lock:
            cls._instance = None
