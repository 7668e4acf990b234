from typing import Optional

from flowinject.shared.annotations.scopes import ApplicationScoped, FlowScoped, ViewScoped
from flowinject.shared.context.application import ApplicationContext
from flowinject.shared.context.base import AbstractContext
from flowinject.shared.context.view import ViewContext
from flowinject.shared.exceptions import ContextUnavailableError
from flowinject.shared.providers.base import ContextProvider, ProviderRegistry


class ApplicationContextProvider(ContextProvider):
    def supported_annotation(self):
        return ApplicationScoped

    def get_context(self, view_context: Optional[ViewContext]) -> AbstractContext:
        if view_context is None:
            return ApplicationContext.get_instance()
        return view_context.application_context


class FlowContextProvider(ContextProvider):
    def supported_annotation(self):
        return FlowScoped

    def get_context(self, view_context: Optional[ViewContext]) -> AbstractContext:
        if view_context is None:
            raise ContextUnavailableError("FlowScoped classes need a view context")
        return view_context.flow_context


class ViewContextProvider(ContextProvider):
    def supported_annotation(self):
        return ViewScoped

    def get_context(self, view_context: Optional[ViewContext]) -> AbstractContext:
        if view_context is None:
            raise ContextUnavailableError("ViewScoped classes need a view context")
        return view_context


def default_providers() -> ProviderRegistry:
    """A registry with the application, flow and view providers, in that order."""
    return ProviderRegistry(
        [ApplicationContextProvider(), FlowContextProvider(), ViewContextProvider()]
    )
