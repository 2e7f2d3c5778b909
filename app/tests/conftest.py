import os

os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ["DATABASE"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"

from fastapi.testclient import TestClient
import pytest

from main import app


@pytest.fixture
def storage_dir(tmp_path, monkeypatch):
    directory = tmp_path / "uploads"
    monkeypatch.setenv("STORAGE_DIR", str(directory))
    return directory


@pytest.fixture
def client(storage_dir):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def registered_user(client):
    response = client.post("/signup", json={"fullName": "Ann", "email": "a@x.com", "password": "secret1"})
    assert response.status_code == 201, response.text
    return response.json()["user"]
