"""
Pytest configuration and fixtures for the Paged Resources Service tests.
"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient

from app.main import app
from app.api.v1.deps import get_app_settings
from app.core.config import Settings, PaginationSettings
from app.models.dto import Person
from app.models.page import Page
from app.repositories.person import PersonRepository
from app.services.person import get_person_repository


# Test settings
@pytest.fixture
def test_settings() -> Settings:
    """Provide test settings."""
    return Settings(
        app_name="Paged Resources Service Test",
        app_version="0.1.0",
        environment="test",
        log_level="DEBUG",
        log_format="console",
        pagination=PaginationSettings(default_page_size=20, max_page_size=50),
    )


# Override settings dependency
@pytest.fixture
def override_settings(test_settings: Settings):
    """Override the settings dependency."""
    app.dependency_overrides[get_app_settings] = lambda: test_settings
    yield test_settings
    app.dependency_overrides.clear()


@pytest.fixture
def sample_people():
    """Provide a small list of people."""
    return [
        Person(id="p-1", name="Dave"),
        Person(id="p-2", name="Carter"),
        Person(id="p-3", name="Oliver"),
    ]


@pytest.fixture
def override_repository(sample_people):
    """Serve the sample people instead of the bundled data set."""
    repository = PersonRepository(sample_people)
    app.dependency_overrides[get_person_repository] = lambda: repository
    yield repository
    app.dependency_overrides.clear()


# Synchronous test client
@pytest.fixture
def client(override_settings, override_repository) -> Generator[TestClient, None, None]:
    """Provide a synchronous test client."""
    with TestClient(app) as test_client:
        yield test_client


# Page fixtures
@pytest.fixture
def dave():
    """Provide a single person."""
    return Person(id="p-1", name="Dave")


@pytest.fixture
def create_page(dave):
    """Provide a factory for one-element pages out of three total elements."""
    def _create(index: int) -> Page:
        return Page.of([dave], page_index=index, page_size=1, total_elements=3)
    return _create


@pytest.fixture
def empty_page() -> Page:
    """Provide an empty first page of the default size."""
    return Page.empty(page_index=0, page_size=20)
