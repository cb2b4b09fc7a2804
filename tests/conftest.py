"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest

# Register pytest-asyncio plugin explicitly
pytest_plugins = ["pytest_asyncio"]

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.config import Settings  # noqa: E402
from src.todos import TodoResolvers, TodoStore  # noqa: E402


@pytest.fixture
def store():
    return TodoStore()


@pytest.fixture
def resolvers(store):
    return TodoResolvers(store)


@pytest.fixture
def unseeded_settings():
    return Settings(seed_sample_todos=False)
