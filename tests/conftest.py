from __future__ import annotations

import pytest

from colstore.database.base import dispose_db, init_db
from colstore.repository import project as project_repo
from colstore.service import project as project_service


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'taskcols.db'}"


@pytest.fixture(autouse=True)
def db(database_url):
    init_db(database_url)
    yield
    dispose_db()


@pytest.fixture
def project():
    """A project provisioned with the default columns."""
    return project_service.create_project("Website relaunch")


@pytest.fixture
def bare_project():
    """A project row with no columns at all, as legacy projects have."""
    return project_repo.create_project("Legacy import")
