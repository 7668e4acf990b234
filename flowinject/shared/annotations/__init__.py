from flowinject.shared.annotations.core import (
    Inject,
    InjectionPoint,
    PostConstruct,
    is_injectable,
    is_post_construct,
)
from flowinject.shared.annotations.scopes import (
    ApplicationScoped,
    FlowScoped,
    ViewScoped,
    has_scope,
)

__all__ = [
    "Inject",
    "InjectionPoint",
    "PostConstruct",
    "is_injectable",
    "is_post_construct",
    "ApplicationScoped",
    "FlowScoped",
    "ViewScoped",
    "has_scope",
]
