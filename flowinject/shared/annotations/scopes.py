from typing import Callable, FrozenSet, Type

from flowinject.shared.annotations.core import SCOPES_ATTR


def _mark_scope(cls: Type, marker: Callable) -> Type:
    # getattr picks up markers inherited from base classes
    inherited: FrozenSet[Callable] = getattr(cls, SCOPES_ATTR, frozenset())
    setattr(cls, SCOPES_ATTR, inherited | {marker})
    return cls


def ApplicationScoped(cls):
    """Mark class as living in the application context."""
    return _mark_scope(cls, ApplicationScoped)


def FlowScoped(cls):
    """Mark class as shared by all views of one flow."""
    return _mark_scope(cls, FlowScoped)


def ViewScoped(cls):
    """Mark class as owned by a single view."""
    return _mark_scope(cls, ViewScoped)


def has_scope(cls: Type, marker: Callable) -> bool:
    return marker in getattr(cls, SCOPES_ATTR, frozenset())
