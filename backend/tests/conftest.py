import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.config import settings
from app.database import Base, get_db
from app.main import app
from app.utils.helpers import blob_path_from_url

TEST_DB_URL = "sqlite:///./test_qwer_fansite.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def upload_dir(tmp_path, monkeypatch):
    target = tmp_path / "uploads"
    target.mkdir()
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(target))
    return target


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def admin_client(client):
    resp = client.post(
        "/api/login",
        json={"email": settings.ADMIN_EMAIL, "password": settings.ADMIN_PASSWORD},
    )
    assert resp.status_code == 200, resp.text
    return client


def png_file(name: str = "cover.png", size: int | None = None):
    content = PNG_BYTES if size is None else PNG_BYTES + b"\x00" * max(size - len(PNG_BYTES), 0)
    return (name, content, "image/png")


def blob_exists(url: str) -> bool:
    rel_path = blob_path_from_url(url)
    if rel_path is None:
        return False
    return os.path.exists(os.path.join(settings.UPLOAD_DIR, *rel_path.split("/")))
