"""
Pytest configuration and shared fixtures.

Points the application at a throwaway SQLite database before anything imports
it, and ensures the project root is in sys.path for imports.
"""

import os
import sys
import tempfile
from pathlib import Path
from typing import Callable, Generator

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

_scratch_dir = tempfile.mkdtemp(prefix="feedtracker-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_scratch_dir) / 'app.db'}"
os.environ["ENVIRONMENT"] = "testing"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from domain.models import Base, build_engine
from api.dependencies import get_db, get_session_factory
from main import app


@pytest.fixture(scope="function")
def session_factory(tmp_path) -> Generator[Callable[[], Session], None, None]:
    """
    Session factory bound to a fresh SQLite file with the schema created.

    Each test gets its own database file, so nothing leaks between tests.
    """
    engine = build_engine(f"sqlite:///{tmp_path / 'feedtracker.db'}")
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(bind=engine, future=True)
    try:
        yield factory
    finally:
        engine.dispose()


@pytest.fixture(scope="function")
def db_session(session_factory) -> Generator[Session, None, None]:
    """
    Create a database session for integration tests.

    Yields:
        Session: SQLAlchemy database session
    """
    session = session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def api(session_factory) -> Generator[TestClient, None, None]:
    """TestClient whose routes use the per-test database"""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
