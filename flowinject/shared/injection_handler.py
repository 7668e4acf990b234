# flowinject/shared/injection_handler.py
import inspect
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union, get_args, get_origin

from flowinject.config.logger import get_logger
from flowinject.shared.annotations.scopes import has_scope
from flowinject.shared.context.application import ApplicationContext
from flowinject.shared.context.base import AbstractContext
from flowinject.shared.context.dependent import DependentContext
from flowinject.shared.context.view import ViewContext
from flowinject.shared.exceptions import UnresolvableDependencyError
from flowinject.shared.providers import ProviderRegistry, default_providers
from flowinject.shared.reflection import (
    ConstructorCandidate,
    get_inherited_injection_points,
    get_post_construct_method_names,
    select_injectable_constructor,
)

T = TypeVar("T")
U = TypeVar("U")


def _unwrap_optional(hint: Any) -> Any:
    """``Optional[X]`` -> ``X``; other hints are returned unchanged."""
    if get_origin(hint) is Union:
        args = [arg for arg in get_args(hint) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint


class InjectionHandler(Generic[U]):
    """
    Creates objects for a view, one per class per owning context.

    The owning context of a class is picked by the first provider whose
    scope marker is on the class, else the dependent context. Constructor
    parameters and injectable fields are looked up in the application
    context first and otherwise resolved through get_instance().
    """

    def __init__(
        self,
        view_context: Optional[ViewContext[U]] = None,
        application_context: Optional[ApplicationContext] = None,
        providers: Optional[ProviderRegistry] = None,
        dependent_context: Optional[AbstractContext] = None,
    ):
        self.view_context = view_context
        if application_context is None:
            application_context = (
                view_context.application_context
                if view_context is not None
                else ApplicationContext.get_instance()
            )
        self.application_context = application_context
        self.providers = providers if providers is not None else default_providers()
        self.dependent_context = (
            dependent_context if dependent_context is not None else DependentContext.get_instance()
        )
        self.logger = get_logger("injection")

    def get_instance(self, cls: Type[T]) -> T:
        """Return the instance of ``cls`` owned by its context, creating it on first use."""
        context = self.get_context_for_class(cls)
        instance = context.get_registered_object(cls)
        if instance is None:
            instance = self._create_new_instance(cls)
            # registered before injection so cycles get this instance back
            context.register(cls, instance)
            self.logger.debug(
                "Registered instance", cls=cls.__qualname__, context=type(context).__name__
            )
            self._inject_all_supported_fields(instance)
            self._call_post_construct_methods(instance)
        return instance

    def get_context_for_class(self, cls: Type) -> AbstractContext:
        for provider in self.providers:
            if has_scope(cls, provider.supported_annotation()):
                return provider.get_context(self.view_context)
        return self.dependent_context

    # ----------------------------
    # Construction
    # ----------------------------
    def _create_new_instance(self, cls: Type[T]) -> T:
        constructor = select_injectable_constructor(cls)
        if constructor is None:
            self.logger.debug("Creating instance", cls=cls.__qualname__)
            return cls()

        args, kwargs = self._resolve_arguments(cls, constructor)
        self.logger.debug(
            "Creating instance",
            cls=cls.__qualname__,
            constructor=constructor.name,
            parameters=constructor.parameter_count,
        )
        return constructor.factory(*args, **kwargs)

    def _resolve_arguments(self, cls: Type, constructor: ConstructorCandidate):
        hints = constructor.type_hints()
        args: List[Any] = []
        kwargs: Dict[str, Any] = {}
        for param in constructor.parameters:
            dependency = hints.get(param.name)
            if dependency is None:
                if param.default is inspect.Parameter.empty:
                    raise UnresolvableDependencyError(
                        cls, param.name, "parameter has no type hint"
                    )
                value = param.default
            else:
                if param.default is None:
                    dependency = _unwrap_optional(dependency)
                value = self._resolve_dependency(dependency, cls, param.name)

            if param.kind is inspect.Parameter.POSITIONAL_ONLY:
                args.append(value)
            else:
                kwargs[param.name] = value
        return args, kwargs

    def _resolve_dependency(self, dependency: Any, owner: Type, name: str) -> Any:
        if not inspect.isclass(dependency):
            raise UnresolvableDependencyError(
                owner, name, f"{dependency!r} is not a class"
            )
        value = self.application_context.get_registered_object(dependency)
        if value is None:
            value = self.get_instance(dependency)
        return value

    # ----------------------------
    # Fields and hooks
    # ----------------------------
    def _inject_all_supported_fields(self, bean: Any) -> None:
        for name, point in get_inherited_injection_points(type(bean)):
            value = self._resolve_dependency(point.resolve_type(), type(bean), name)
            # bypasses __setattr__ overrides and shadows the InjectionPoint
            object.__setattr__(bean, name, value)
            self.logger.debug(
                "Injected field", cls=type(bean).__qualname__, field=name
            )

    def _call_post_construct_methods(self, bean: Any) -> None:
        for name in get_post_construct_method_names(type(bean)):
            self.logger.debug(
                "Calling post construct", cls=type(bean).__qualname__, method=name
            )
            getattr(bean, name)()
