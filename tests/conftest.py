"""
Pytest configuration and fixtures.
"""
import os
import tempfile

import pytest

# Settings are read at import time, so the environment has to be ready first
_db_fd, _db_path = tempfile.mkstemp(suffix=".db")
os.environ["DATABASE_URL"] = f"sqlite:///{_db_path}"
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-enough-length-for-hs256")
os.environ["LOCAL_TIMEZONE"] = "UTC"
os.environ["ENVIRONMENT"] = "local"

OPERATOR_EMAIL = "admin@reachouttoall.org"
OPERATOR_PASSWORD = "correct horse battery staple"


@pytest.fixture(scope="session")
def database():
    from reachout.core.database import db

    db.init_db()
    yield db
    db.dispose()
    os.close(_db_fd)
    try:
        os.remove(_db_path)
    except OSError:
        pass


@pytest.fixture(scope="function", autouse=True)
def clean_db(database):
    """Drop and recreate every table so each test starts from an empty store."""
    database.drop_db()
    database.init_db()
    yield


@pytest.fixture(scope="function")
def client(database):
    from fastapi.testclient import TestClient
    from reachout.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def operator(database):
    from reachout.scripts.create_superuser import create_superuser

    assert create_superuser(OPERATOR_EMAIL, OPERATOR_PASSWORD, full_name="Test Operator")
    return {"email": OPERATOR_EMAIL, "password": OPERATOR_PASSWORD}


@pytest.fixture(scope="function")
def auth_headers(client, operator):
    response = client.post(
        "/api/v1/auth/login",
        data={"username": operator["email"], "password": operator["password"]},
    )
    assert response.status_code == 200, response.text
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(scope="function")
def sql_client(database):
    from reachout.services.data_client import SqlDataClient

    return SqlDataClient(database)


@pytest.fixture(scope="function")
def store():
    from tests.fakes import InMemoryDataClient

    return InMemoryDataClient()
