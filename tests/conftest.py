import os

os.environ["RATE_LIMIT"] = "1000/minute"
os.environ["JOIN_REQUEST_RATE_LIMIT"] = "1000/minute"
os.environ["SUPABASE_URL"] = ""
os.environ["SUPABASE_KEY"] = ""

import pytest
from fastapi.testclient import TestClient

from hackteams.core.dependencies import get_optional_store, get_session
from hackteams.database.document_store import DocumentStore
from hackteams.main import app
from hackteams.modules.auth.schemas import Session, SessionUser
from tests.fakes import FakeSupabase


@pytest.fixture
def fake_db():
    return FakeSupabase()


@pytest.fixture
def store(fake_db):
    return DocumentStore(fake_db)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_optional_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def login():
    """Make subsequent requests run as the given user"""
    def _login(user_id):
        app.dependency_overrides[get_session] = lambda: Session(user=SessionUser(id=user_id))
    return _login
