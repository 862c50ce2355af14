import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Ensure tests use an in-memory SQLite DB
os.environ.setdefault("DATABASE_URL", "sqlite://")

# Ensure the project root is on sys.path so `import ranttrack` works when running
# pytest from the repository root.
ROOT_DIR = Path(__file__).resolve().parents[2]  # repository root
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from ranttrack.app import app  # noqa: E402
from ranttrack.db.session import Base, get_db  # noqa: E402
from ranttrack.models import CustomLemma  # noqa: E402


# In-memory SQLite shared across connections
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def create_schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def _override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = _override_get_db

import ranttrack.db.session as session_mod  # noqa: E402
session_mod.engine = engine
session_mod.SessionLocal = TestingSessionLocal
import ranttrack.models as models_mod  # noqa: E402
models_mod.engine = engine


@pytest.fixture(autouse=True)
def clear_custom_lemmas():
    yield
    with TestingSessionLocal() as db:
        db.query(CustomLemma).delete()
        db.commit()


@pytest.fixture
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)
