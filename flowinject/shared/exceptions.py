from typing import Any, Optional


class InjectionError(Exception):
    """Base class for errors raised by flowinject itself."""


class UnresolvableDependencyError(InjectionError, TypeError):
    """A constructor parameter or field has no type that can be resolved."""

    def __init__(self, owner: Any, name: str, reason: Optional[str] = None):
        self.owner = owner
        self.name = name
        owner_name = getattr(owner, "__qualname__", repr(owner))
        message = f"Cannot resolve dependency '{name}' of {owner_name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ContextUnavailableError(InjectionError):
    """A provider was asked for a registry its view context does not have."""
