from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from ideawall.data.idea_repo import IdeaRepo
from ideawall.db.database import init_db
from ideawall.main import app
from ideawall.service.idea_service import IdeaService
from ideawall.web.dependencies import get_idea_service


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "ideas.db"
    init_db(path)
    return path


@pytest.fixture
def repo(db_path):
    return IdeaRepo(db_path)


@pytest.fixture
def service(repo):
    return IdeaService(repo)


@pytest.fixture
def client(service):
    app.dependency_overrides[get_idea_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
