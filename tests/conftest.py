import pytest
from fastapi.testclient import TestClient

from string_analyzer.database import StringStore
from string_analyzer.main import app
from string_analyzer.services.analyzer import analyze


@pytest.fixture
def store():
    return StringStore()


@pytest.fixture
def seeded_store(store):
    for value in ("racecar", "hello world", "noon", "A man a plan a canal Panama"):
        store.create(analyze(value))
    return store


@pytest.fixture
def client():
    # entering the context runs the startup hook, which installs a fresh store
    with TestClient(app) as test_client:
        yield test_client
