"""Fixtures backed by a throwaway in-memory SQLite database."""

import pytest

from backoffice.infrastructure.bootstrap import build_container
from backoffice.infrastructure.config import Settings


@pytest.fixture
def container():
    built = build_container(Settings(database_url="sqlite://"))
    yield built
    built.close()


@pytest.fixture
def db(container):
    return container.database
