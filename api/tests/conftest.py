import os

# Settings are read at import time, so configure the environment first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CACHE_URL"] = "disk://"
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session

from app.core.cache import DiskCache, get_cache
from app.core.database import engine
from app.core.security import create_access_token
from app.main import app
from app.schemas.translation import TranslationGroupRequest
from app.services.export_service import TranslationExportService
from app.services.seed_service import create_user, seed_languages
from app.services.translation_service import TranslationService

TEST_LANGUAGES = [("en", "English"), ("fr", "French"), ("es", "Spanish")]


@pytest.fixture(autouse=True)
def setup_database():
    """Create the tables in the in-memory database for every test."""
    SQLModel.metadata.create_all(engine)
    yield
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session() -> Session:
    with Session(engine) as session:
        yield session


@pytest.fixture
def languages(session: Session):
    seed_languages(session, TEST_LANGUAGES)
    return [code for code, _ in TEST_LANGUAGES]


@pytest.fixture
def cache(tmp_path) -> DiskCache:
    cache = DiskCache(str(tmp_path / "cache"))
    yield cache
    cache.close()


@pytest.fixture
def export_service(session: Session, cache: DiskCache) -> TranslationExportService:
    return TranslationExportService(session, cache)


@pytest.fixture
def translation_service(session: Session, export_service: TranslationExportService) -> TranslationService:
    return TranslationService(session, export_service)


@pytest.fixture
def test_user(session: Session):
    return create_user(session, name="Test User", email="test@example.com", password="password")


@pytest.fixture
def auth_headers(test_user) -> dict:
    return {"Authorization": f"Bearer {create_access_token(test_user.id)}"}


@pytest.fixture
def client(cache: DiskCache) -> TestClient:
    """Test client sharing the test cache with the app."""
    app.dependency_overrides[get_cache] = lambda: cache
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_request(key, values, tags=None, description=None) -> TranslationGroupRequest:
    """Build a create/update payload from a {language_code: value} dict."""
    return TranslationGroupRequest(
        key=key,
        description=description,
        translations=[{"language_code": code, "value": value} for code, value in values.items()],
        tags=tags,
    )
