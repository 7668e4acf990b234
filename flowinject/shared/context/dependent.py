import threading
from typing import Optional

from flowinject.shared.context.base import AbstractContext


class DependentContext(AbstractContext):
    """Fallback context for classes no provider claims."""

    _instance: Optional["DependentContext"] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "DependentContext":
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        with cls._lock:
            cls._instance = None
