"""
Member lookups used by the InjectionHandler.

Everything here walks the MRO from ``object`` down to the class itself, so
members declared on base classes come first and a redefinition in a subclass
replaces the base entry in place.
"""

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, get_type_hints

from flowinject.shared.annotations.core import (
    InjectionPoint,
    is_injectable,
    is_post_construct,
)
from flowinject.shared.exceptions import UnresolvableDependencyError

_PARAMETER_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


def _class_hierarchy(cls: Type) -> List[Type]:
    return [klass for klass in reversed(cls.__mro__) if klass is not object]


def get_inherited_injection_points(cls: Type) -> List[Tuple[str, InjectionPoint]]:
    """Return ``(attribute name, InjectionPoint)`` pairs, base classes first."""
    points: Dict[str, Optional[InjectionPoint]] = {}
    for klass in _class_hierarchy(cls):
        for name, value in vars(klass).items():
            if isinstance(value, InjectionPoint):
                points[name] = value
            elif name in points:
                # plain attribute in a subclass hides the injectable field
                points[name] = None
    return [(name, point) for name, point in points.items() if point is not None]


def get_post_construct_method_names(cls: Type) -> List[str]:
    """Names of methods marked PostConstruct anywhere in the hierarchy, base classes first."""
    names: List[str] = []
    for klass in _class_hierarchy(cls):
        for name, value in vars(klass).items():
            if isinstance(value, (staticmethod, classmethod)):
                value = value.__func__
            if is_post_construct(value) and name not in names:
                names.append(name)
    return names


def visibility_rank(name: str, owner: Optional[Type] = None) -> int:
    """0 for public and dunder names, 1 for ``__private``, 2 for ``_protected``."""
    if name.endswith("__") and name.startswith("__"):
        return 0
    if name.startswith("__"):
        return 1
    # private names declared in a class body are stored as _Owner__name
    if owner is not None and name.startswith(f"_{owner.__name__.lstrip('_')}__"):
        return 1
    if name.startswith("_"):
        return 2
    return 0


@dataclass
class ConstructorCandidate:
    name: str
    owner: Type
    function: Callable
    factory: Callable[..., Any]
    parameters: List[inspect.Parameter]

    @property
    def parameter_count(self) -> int:
        return len(self.parameters)

    @property
    def visibility(self) -> int:
        return visibility_rank(self.name, self.owner)

    def type_hints(self) -> Dict[str, Any]:
        try:
            return get_type_hints(self.function)
        except NameError as exc:
            raise UnresolvableDependencyError(self.function, self.name, str(exc)) from exc


def _parameters(function: Callable, skip_first: bool) -> List[inspect.Parameter]:
    params = list(inspect.signature(function).parameters.values())
    if skip_first and params:
        params = params[1:]
    return [p for p in params if p.kind in _PARAMETER_KINDS]


def get_constructor_candidates(cls: Type) -> List[ConstructorCandidate]:
    """
    Constructors of ``cls``: its ``__init__`` and every classmethod in the
    hierarchy, in declaration order.
    """
    candidates: List[ConstructorCandidate] = []

    init = cls.__init__
    if inspect.isfunction(init):
        candidates.append(
            ConstructorCandidate("__init__", cls, init, cls, _parameters(init, skip_first=True))
        )

    seen: Dict[str, ConstructorCandidate] = {}
    for klass in _class_hierarchy(cls):
        for name, value in vars(klass).items():
            if isinstance(value, classmethod) and inspect.isfunction(value.__func__):
                seen[name] = ConstructorCandidate(
                    name,
                    klass,
                    value.__func__,
                    getattr(cls, name),
                    _parameters(value.__func__, skip_first=True),
                )
    candidates.extend(seen.values())
    return candidates


def select_injectable_constructor(cls: Type) -> Optional[ConstructorCandidate]:
    """
    Pick the injectable constructor with at least one parameter.

    Ties go to the lower visibility rank, then to the one with more
    parameters. Returns None when no constructor qualifies.
    """
    qualified = [
        candidate
        for candidate in get_constructor_candidates(cls)
        if is_injectable(candidate.function) and candidate.parameter_count > 0
    ]
    if not qualified:
        return None
    return sorted(qualified, key=lambda c: (c.visibility, -c.parameter_count))[0]
