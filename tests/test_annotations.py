"""
Tests for the injection markers and the member lookups built on them.
"""

import pytest

from flowinject.shared.annotations import (
    ApplicationScoped,
    FlowScoped,
    Inject,
    InjectionPoint,
    PostConstruct,
    ViewScoped,
    has_scope,
    is_injectable,
    is_post_construct,
)
from flowinject.shared.exceptions import UnresolvableDependencyError
from flowinject.shared.reflection import (
    get_constructor_candidates,
    get_inherited_injection_points,
    get_post_construct_method_names,
    select_injectable_constructor,
    visibility_rank,
)


class Service:
    pass


class Base:
    service: Service = Inject()
    untyped = Inject()


class Derived(Base):
    other = Inject(Service)


class Hiding(Base):
    service = None


class Hooks:
    @PostConstruct
    def first(self):
        pass

    def plain(self):
        pass

    @PostConstruct
    def __private_hook(self):
        pass


class Factories:
    @Inject
    def __init__(self, service: Service):
        self.service = service

    @Inject
    @classmethod
    def __secret(cls, service: Service, other: Service, third: Service):
        return cls(service)

    @classmethod
    @Inject
    def _internal(cls, service: Service, other: Service):
        return cls(service)


# -----------------------------
# Inject
# -----------------------------
def test_inject_without_argument_declares_field():
    assert isinstance(Base.__dict__["service"], InjectionPoint)
    assert Base.__dict__["service"].resolve_type() is Service


def test_inject_with_type_declares_field_of_that_type():
    point = Derived.__dict__["other"]
    assert point.dependency is Service
    assert point.resolve_type() is Service


def test_field_without_type_is_unresolvable():
    with pytest.raises(UnresolvableDependencyError, match="untyped"):
        Base.__dict__["untyped"].resolve_type()


def test_reading_field_before_injection_raises_attribute_error():
    instance = Base()
    with pytest.raises(AttributeError, match="has not been injected"):
        instance.service
    assert not hasattr(instance, "service")


def test_inject_marks_constructors():
    assert is_injectable(Factories.__init__)
    assert is_injectable(Factories.__dict__["_internal"])
    assert is_injectable(Factories.__dict__["_Factories__secret"])


def test_inject_rejects_values():
    with pytest.raises(ValueError):
        Inject(42)


# -----------------------------
# PostConstruct and scopes
# -----------------------------
def test_post_construct_marks_method():
    assert is_post_construct(Hooks.first)
    assert not is_post_construct(Hooks.plain)


def test_scope_markers_are_inherited():
    @ApplicationScoped
    class Parent:
        pass

    @ViewScoped
    class Child(Parent):
        pass

    assert has_scope(Child, ApplicationScoped)
    assert has_scope(Child, ViewScoped)
    assert not has_scope(Parent, ViewScoped)
    assert not has_scope(Child, FlowScoped)


def test_scope_marker_returns_the_class():
    class Plain:
        pass

    assert FlowScoped(Plain) is Plain


# -----------------------------
# Member lookups
# -----------------------------
def test_injection_points_include_inherited_fields():
    names = [name for name, _ in get_inherited_injection_points(Derived)]
    assert names == ["service", "untyped", "other"]


def test_plain_attribute_hides_inherited_injection_point():
    names = [name for name, _ in get_inherited_injection_points(Hiding)]
    assert names == ["untyped"]


def test_post_construct_names_include_private_hooks():
    assert get_post_construct_method_names(Hooks) == ["first", "_Hooks__private_hook"]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("__init__", 0),
        ("create", 0),
        ("_internal", 2),
        ("__secret", 1),
        ("_Factories__secret", 1),
    ],
)
def test_visibility_rank(name, expected):
    assert visibility_rank(name, Factories) == expected


def test_constructor_candidates_cover_init_and_classmethods():
    names = [c.name for c in get_constructor_candidates(Factories)]
    assert names == ["__init__", "_Factories__secret", "_internal"]


def test_public_constructor_beats_more_parameters():
    chosen = select_injectable_constructor(Factories)
    assert chosen.name == "__init__"
    assert chosen.parameter_count == 1


def test_no_injectable_constructor_selects_nothing():
    assert select_injectable_constructor(Service) is None
