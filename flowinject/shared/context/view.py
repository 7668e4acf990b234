from typing import TYPE_CHECKING, Any, Generic, Optional, Type, TypeVar

from flowinject.shared.context.application import ApplicationContext
from flowinject.shared.context.base import AbstractContext

if TYPE_CHECKING:
    from flowinject.shared.injection_handler import InjectionHandler
    from flowinject.shared.providers import ProviderRegistry

T = TypeVar("T")
U = TypeVar("U")


class ViewFlowContext(AbstractContext):
    """Context shared by all views of one flow."""


class ViewContext(AbstractContext, Generic[U]):
    """
    Context owned by a single view.

    Holds the view's controller and links to the flow and application
    contexts, so providers can find the registry a class belongs to.
    """

    def __init__(
        self,
        controller: Optional[U] = None,
        flow_context: Optional[ViewFlowContext] = None,
        application_context: Optional[ApplicationContext] = None,
        providers: Optional["ProviderRegistry"] = None,
    ):
        super().__init__()
        self.controller = controller
        self.flow_context = flow_context if flow_context is not None else ViewFlowContext()
        self.application_context = (
            application_context
            if application_context is not None
            else ApplicationContext.get_instance()
        )
        self._providers = providers
        self._injection_handler: Optional["InjectionHandler[U]"] = None
        if controller is not None:
            self.register(controller)

    @property
    def injection_handler(self) -> "InjectionHandler[U]":
        if self._injection_handler is None:
            from flowinject.shared.injection_handler import InjectionHandler

            self._injection_handler = InjectionHandler(self, providers=self._providers)
        return self._injection_handler

    def resolve(self, cls: Type[T]) -> T:
        """Shortcut for ``self.injection_handler.get_instance(cls)``."""
        return self.injection_handler.get_instance(cls)

    def set_controller(self, controller: U) -> None:
        self.controller = controller
        self.register(controller)
