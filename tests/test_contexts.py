from concurrent.futures import ThreadPoolExecutor

import pytest

from flowinject.shared.context import (
    AbstractContext,
    ApplicationContext,
    DependentContext,
    ViewContext,
    ViewFlowContext,
)
from flowinject.shared.injection_handler import InjectionHandler
from flowinject.shared.providers import (
    ApplicationContextProvider,
    FlowContextProvider,
    ViewContextProvider,
    default_providers,
)
from flowinject.shared.annotations import ApplicationScoped, FlowScoped, ViewScoped


class Widget:
    pass


class FancyWidget(Widget):
    pass


def test_register_by_value_uses_its_type():
    context = AbstractContext()
    widget = Widget()
    context.register(widget)
    assert context.get_registered_object(Widget) is widget
    assert context.get_registered_object(FancyWidget) is None


def test_register_under_class():
    context = AbstractContext()
    fancy = FancyWidget()
    context.register(Widget, fancy)
    assert context.get_registered_object(Widget) is fancy
    assert Widget in context


def test_register_under_string_key():
    context = AbstractContext()
    context.register("title", "Orders")
    assert context.get_registered_object("title") == "Orders"
    assert context.get_registered_object("missing") is None
    assert len(context) == 1


def test_register_rejects_other_keys():
    with pytest.raises(TypeError):
        AbstractContext().register(3, "value")


def test_registering_again_replaces():
    context = AbstractContext()
    first, second = Widget(), Widget()
    context.register(first)
    context.register(second)
    assert context.get_registered_object(Widget) is second
    assert len(context) == 1


def test_application_context_is_a_process_singleton():
    assert ApplicationContext.get_instance() is ApplicationContext.get_instance()

    before = ApplicationContext.get_instance()
    ApplicationContext.reset_instance()
    assert ApplicationContext.get_instance() is not before


def test_dependent_context_is_a_process_singleton():
    assert DependentContext.get_instance() is DependentContext.get_instance()

    before = DependentContext.get_instance()
    DependentContext.reset_instance()
    assert DependentContext.get_instance() is not before


@pytest.mark.parametrize("context_class", [ApplicationContext, DependentContext])
def test_singleton_contexts_agree_across_threads(context_class):
    context_class.reset_instance()
    with ThreadPoolExecutor(max_workers=8) as pool:
        instances = list(pool.map(lambda _: context_class.get_instance(), range(32)))
    assert all(instance is instances[0] for instance in instances)


def test_view_context_defaults(application_context):
    controller = Widget()
    view = ViewContext(controller=controller)

    assert view.application_context is application_context
    assert isinstance(view.flow_context, ViewFlowContext)
    assert view.get_registered_object(Widget) is controller


def test_set_controller_registers_it():
    view = ViewContext()
    controller = FancyWidget()
    view.set_controller(controller)
    assert view.controller is controller
    assert view.get_registered_object(FancyWidget) is controller


def test_view_context_owns_one_injection_handler():
    view = ViewContext()
    handler = view.injection_handler
    assert isinstance(handler, InjectionHandler)
    assert view.injection_handler is handler
    assert handler.view_context is view
    assert handler.application_context is view.application_context


def test_builtin_providers():
    flow = ViewFlowContext()
    view = ViewContext(flow_context=flow)

    assert ApplicationContextProvider().supported_annotation() is ApplicationScoped
    assert ApplicationContextProvider().get_context(view) is view.application_context
    assert ApplicationContextProvider().get_context(None) is ApplicationContext.get_instance()
    assert FlowContextProvider().supported_annotation() is FlowScoped
    assert FlowContextProvider().get_context(view) is flow
    assert ViewContextProvider().supported_annotation() is ViewScoped
    assert ViewContextProvider().get_context(view) is view


def test_default_providers_order():
    providers = default_providers()
    assert [type(p) for p in providers] == [
        ApplicationContextProvider,
        FlowContextProvider,
        ViewContextProvider,
    ]
    assert len(providers) == 3
