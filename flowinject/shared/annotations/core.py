import inspect
from typing import Any, Optional, Type, get_type_hints

from flowinject.shared.exceptions import UnresolvableDependencyError

# Attribute names used to mark classes and functions
INJECT_MARKER = "_flowinject_inject"
POST_CONSTRUCT_MARKER = "_flowinject_post_construct"
SCOPES_ATTR = "_flowinject_scopes"


class InjectionPoint:
    """
    Class-body marker for a field that the InjectionHandler fills in.

    The dependency type is either given explicitly or read from the owner's
    annotation for the attribute. Until injection happens, reading the
    attribute on an instance raises AttributeError; the injected value is
    stored in the instance ``__dict__`` and shadows this descriptor.
    """

    def __init__(self, dependency: Optional[Type] = None):
        self.dependency = dependency
        self.owner: Optional[Type] = None
        self.name: Optional[str] = None

    def __set_name__(self, owner: Type, name: str) -> None:
        self.owner = owner
        self.name = name

    def __get__(self, instance: Any, owner: Optional[Type] = None):
        if instance is None:
            return self
        raise AttributeError(
            f"'{type(instance).__name__}.{self.name}' has not been injected"
        )

    def resolve_type(self) -> Type:
        if self.dependency is not None:
            return self.dependency
        try:
            hints = get_type_hints(self.owner)
        except NameError as exc:
            raise UnresolvableDependencyError(self.owner, self.name, str(exc)) from exc
        if self.name not in hints:
            raise UnresolvableDependencyError(
                self.owner, self.name, "field has no type annotation"
            )
        return hints[self.name]

    def __repr__(self) -> str:
        dependency = getattr(self.dependency, "__name__", None)
        return f"InjectionPoint(name={self.name!r}, dependency={dependency})"


def Inject(target: Any = None):
    """
    Mark a constructor or declare an injectable field.

    ``@Inject`` on ``__init__`` or on a classmethod marks it as an injectable
    constructor. ``Inject()`` or ``Inject(SomeType)`` in a class body
    declares an injectable field.
    """
    if target is None:
        return InjectionPoint()
    if inspect.isclass(target):
        return InjectionPoint(target)
    if isinstance(target, classmethod):
        setattr(target.__func__, INJECT_MARKER, True)
        return target
    if callable(target):
        setattr(target, INJECT_MARKER, True)
        return target
    raise ValueError("Inject expects a constructor, a type or nothing")


def is_injectable(func: Any) -> bool:
    if isinstance(func, classmethod):
        func = func.__func__
    return getattr(func, INJECT_MARKER, False) is True


def PostConstruct(func):
    """Mark a method to be called once the instance is fully injected."""
    setattr(func, POST_CONSTRUCT_MARKER, True)
    return func


def is_post_construct(func: Any) -> bool:
    return getattr(func, POST_CONSTRUCT_MARKER, False) is True
