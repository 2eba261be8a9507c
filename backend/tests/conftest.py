"""
Configuration partagée pour tous les tests.
Chaque test dispose d'une base SQLite en mémoire ; aucune connexion réelle n'est ouverte.
"""

import os

# Avant tout import de app.* : le moteur applicatif ne doit pas créer de fichier .db
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from unittest.mock import MagicMock

from app.database import Base, get_db
from app.main import app
from app.repositories.etudiant_repository import EtudiantRepository, get_etudiant_repository


@pytest.fixture
def db_session():
    """Session SQLAlchemy sur une base SQLite en mémoire, tables créées."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    """Client HTTP de test branché sur la base en mémoire."""
    app.dependency_overrides[get_db] = lambda: db_session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def mock_repo():
    """Dépôt simulé, pour les cas difficiles à provoquer avec une vraie base."""
    return MagicMock(spec=EtudiantRepository)


@pytest.fixture
def mock_client(mock_repo):
    """Client HTTP dont le dépôt est remplacé par mock_repo ; les erreurs 500 sont renvoyées, pas levées."""
    app.dependency_overrides[get_etudiant_repository] = lambda: mock_repo
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()
