"""Mock providers for testing."""

from .mail import MockMailProvider
from .persistence import MockPersistenceProvider
from .spam import MockSpamProvider
from .container import build_test_container

__all__ = [
    "MockMailProvider",
    "MockPersistenceProvider",
    "MockSpamProvider",
    "build_test_container",
]
