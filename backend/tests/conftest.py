import pytest
from fastapi.testclient import TestClient

from fakes import sample_store
from study_dashboard.api.deps import get_status_store
from study_dashboard.main import app


@pytest.fixture
def store():
    return sample_store()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_status_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
