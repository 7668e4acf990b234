"""
flowinject: view-scoped dependency injection.

Resolves annotated classes into per-view, per-flow or application-wide
contexts, injecting constructor parameters and fields and calling
post-construction hooks.
"""

from flowinject.shared.annotations import (
    ApplicationScoped,
    FlowScoped,
    Inject,
    PostConstruct,
    ViewScoped,
)
from flowinject.shared.context import (
    AbstractContext,
    ApplicationContext,
    DependentContext,
    ViewContext,
    ViewFlowContext,
)
from flowinject.shared.exceptions import (
    ContextUnavailableError,
    InjectionError,
    UnresolvableDependencyError,
)
from flowinject.shared.injection_handler import InjectionHandler
from flowinject.shared.providers import (
    ApplicationContextProvider,
    ContextProvider,
    FlowContextProvider,
    ProviderRegistry,
    ViewContextProvider,
    default_providers,
)

__all__ = [
    "ApplicationScoped",
    "FlowScoped",
    "Inject",
    "PostConstruct",
    "ViewScoped",
    "AbstractContext",
    "ApplicationContext",
    "DependentContext",
    "ViewContext",
    "ViewFlowContext",
    "ContextUnavailableError",
    "InjectionError",
    "UnresolvableDependencyError",
    "InjectionHandler",
    "ApplicationContextProvider",
    "ContextProvider",
    "FlowContextProvider",
    "ProviderRegistry",
    "ViewContextProvider",
    "default_providers",
]
