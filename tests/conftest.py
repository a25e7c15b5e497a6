"""Common test fixtures for toolfinder tests."""

import pytest

from toolfinder.catalog import Catalog, ToolRecord, default_catalog
from toolfinder.config.env_vars import EnvVar
from toolfinder.preferences import InMemoryStorage, PreferenceStore
from toolfinder.search import ToolSearchEngine


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Make sure no TOOLFINDER_* overrides leak in from the environment."""
    for var in EnvVar:
        monkeypatch.delenv(var.value, raising=False)


def _make_tool(tool_id: str, name: str, **kwargs) -> ToolRecord:
    kwargs.setdefault("category", "developer")
    return ToolRecord(id=tool_id, name=name, **kwargs)


@pytest.fixture
def make_tool():
    """Factory for tool records with sensible defaults."""
    return _make_tool


@pytest.fixture
def json_tool() -> ToolRecord:
    return _make_tool(
        "json-formatter",
        "JSON Formatter",
        description="Format, validate, and minify JSON",
        keywords=["json", "format", "validate"],
    )


@pytest.fixture
def catalog() -> Catalog:
    return default_catalog()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def preferences(storage) -> PreferenceStore:
    return PreferenceStore(storage)


@pytest.fixture
def engine(catalog, preferences) -> ToolSearchEngine:
    """Engine over the built-in catalog with in-memory preferences."""
    return ToolSearchEngine(catalog, preferences=preferences)
