import pytest

from flowinject.shared.context import ApplicationContext, DependentContext


@pytest.fixture(autouse=True)
def reset_contexts():
    """Start every test with empty application and dependent contexts."""
    ApplicationContext.reset_instance()
    DependentContext.reset_instance()
    yield
    ApplicationContext.reset_instance()
    DependentContext.reset_instance()


@pytest.fixture
def application_context():
    return ApplicationContext.get_instance()
