from flowinject.shared.context.base import AbstractContext
from flowinject.shared.context.application import ApplicationContext
from flowinject.shared.context.dependent import DependentContext
from flowinject.shared.context.view import ViewContext, ViewFlowContext

__all__ = [
    "AbstractContext",
    "ApplicationContext",
    "DependentContext",
    "ViewContext",
    "ViewFlowContext",
]
