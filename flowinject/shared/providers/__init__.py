from flowinject.shared.providers.base import ContextProvider, ProviderRegistry
from flowinject.shared.providers.builtin import (
    ApplicationContextProvider,
    FlowContextProvider,
    ViewContextProvider,
    default_providers,
)

__all__ = [
    "ContextProvider",
    "ProviderRegistry",
    "ApplicationContextProvider",
    "FlowContextProvider",
    "ViewContextProvider",
    "default_providers",
]
