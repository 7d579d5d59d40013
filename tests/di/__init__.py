"""Mock providers for testing."""

# Mock providers must be imported before the container is built so that
# get_provider() finds them through __subclasses__()
from .mewe import MockMeWeProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockMeWeProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
