import pytest

from keyed_di.config import Settings
from keyed_di.di import ServiceRegistry
from keyed_di.logging import configure_logging


@pytest.fixture(scope="session", autouse=True)
def _logging():
    configure_logging(Settings())


@pytest.fixture
def registry():
    return ServiceRegistry()


@pytest.fixture
def strict_settings():
    return Settings(on_duplicate="error")
