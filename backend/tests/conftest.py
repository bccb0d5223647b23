"""
Configuration partagée pour tous les tests.

- client : la dépendance get_db est remplacée par un MagicMock, aucune
  connexion réelle ; les tests de routers patchent la couche service.
- api : même application branchée sur une base SQLite en mémoire, pour les
  scénarios de bout en bout.
Le scheduler de connexion n'est jamais démarré.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import topic_registration.models  # noqa: F401
from topic_registration.config import settings
from topic_registration.database import Base, get_db
from topic_registration.main import app
from topic_registration.security import create_access_token


def make_token(student_number="012345678", username="jdoe", admin=False) -> str:
    user = SimpleNamespace(student_number=student_number, username=username, admin=admin)
    return create_access_token(user)


@pytest.fixture
def user_headers():
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {make_token('000000001', 'boss', admin=True)}"}


@pytest.fixture
def login_headers(monkeypatch):
    """En-tête posé par le proxy d'authentification devant /api/login."""
    monkeypatch.setattr(settings, "LOGIN_SECRET", "proxy-secret")
    return {"X-Login-Secret": "proxy-secret"}


@pytest.fixture
def no_scheduler():
    with patch("topic_registration.main.start_scheduler"), \
            patch("topic_registration.main.stop_scheduler"):
        yield


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def client(mock_db, no_scheduler):
    """Client HTTP de test avec la BDD mockée."""
    app.dependency_overrides[get_db] = lambda: mock_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def _sqlite_session(foreign_keys=False):
    """Session sur une base SQLite en mémoire, schéma créé depuis les modèles."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    if foreign_keys:
        # SQLite n'applique les clés étrangères (et leurs CASCADE) que sur demande
        event.listen(engine, "connect", lambda conn, _record: conn.execute("PRAGMA foreign_keys=ON"))
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine, autoflush=False)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def db_session():
    yield from _sqlite_session()


@pytest.fixture
def fk_db_session():
    yield from _sqlite_session(foreign_keys=True)


@pytest.fixture
def api(db_session, no_scheduler):
    """Client HTTP de test branché sur la base SQLite."""
    app.dependency_overrides[get_db] = lambda: db_session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def fk_api(fk_db_session, no_scheduler):
    """Client HTTP de test sur une base SQLite qui applique les clés étrangères."""
    app.dependency_overrides[get_db] = lambda: fk_db_session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
