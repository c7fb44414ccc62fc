"""Mock providers for testing."""

from .password import MockPasswordProvider, PlainTextPasswordHasher
from .persistence import MockPersistenceProvider
from .container import build_test_container
