"""
Pytest fixtures shared by the memo test suite.

Every test gets its own sqlite file under pytest's tmp_path, so tests
never touch the database configured in settings.
"""

import pytest
from fastapi.testclient import TestClient

from app.db.comment_repo import CommentRepo
from app.db.database import Database
from app.db.memo_repo import MemoRepo
from app.services.memo_service import MemoService
from main import create_app


@pytest.fixture
def database(tmp_path):
    db = Database(str(tmp_path / "memos.db"))
    db.setup()
    return db


@pytest.fixture
def memo_repo(database):
    return MemoRepo(database)


@pytest.fixture
def comment_repo(database):
    return CommentRepo(database)


@pytest.fixture
def memo_service(memo_repo, comment_repo):
    return MemoService(memo_repo, comment_repo)


@pytest.fixture
def client(database):
    with TestClient(create_app(database)) as test_client:
        yield test_client
