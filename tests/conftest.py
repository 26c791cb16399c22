"""Shared fixtures for the todo API tests."""

import sys
from dataclasses import replace
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from todo_api.main import create_app  # noqa: E402
from todo_api.repositories.todo_repository import IdStrategy, TodoRepository  # noqa: E402
from todo_api.settings import Settings, get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; drop them around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        host="127.0.0.1",
        port=8080,
        log_level="INFO",
        id_strategy=IdStrategy.COUNTER,
        docs_enabled=True,
        docs_url="/swagger/index.html",
        openapi_url="/swagger/doc.json",
    )


@pytest.fixture
def repository(settings: Settings) -> TodoRepository:
    return TodoRepository(settings.id_strategy)


@pytest.fixture
def client(settings: Settings, repository: TodoRepository) -> TestClient:
    """Provide a TestClient bound to a fresh app and store."""
    return TestClient(create_app(settings=settings, repository=repository))


@pytest.fixture
def length_client(settings: Settings) -> TestClient:
    """Client whose store assigns ids from the current collection length."""
    length_settings = replace(settings, id_strategy=IdStrategy.LENGTH)
    return TestClient(create_app(settings=length_settings))
