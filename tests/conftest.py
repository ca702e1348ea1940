import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path so tests can import 'stoneworks' package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from stoneworks.config.settings import Settings
from stoneworks.core.drafts import InMemoryDraftRepository
from stoneworks.db import Base, build_engine, build_session_factory
from stoneworks.main import create_app
from stoneworks import models  # noqa: F401

engine = build_engine("sqlite:///:memory:")
SessionLocal = build_session_factory(engine)


@pytest.fixture(autouse=True)
def reset_db():
    # Drop all and re-create so every test starts from an empty schema
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def drafts():
    return InMemoryDraftRepository()


@pytest.fixture
def client(drafts):
    settings = Settings(DATABASE_URL="sqlite:///:memory:", LOG_API_CALLS=False)
    app = create_app(settings, session_factory=SessionLocal, drafts=drafts)
    return TestClient(app)
