"""
Configuration de la connexion à la base de données relationnelle.
Utilise SQLAlchemy avec un moteur synchrone ; une session par requête.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker

from app.config import settings

# SQLite refuse par défaut le partage d'une connexion entre threads (threadpool FastAPI)
_connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=_connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """
    Dépendance FastAPI — fournit une session BDD pour la durée d'une requête.
    Annule la transaction en cours si le handler lève une exception, puis ferme la session.
    """
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def create_tables() -> None:
    """Crée les tables manquantes (utilisé au démarrage si AUTO_CREATE_TABLES)."""
    import app.models  # noqa: F401 — enregistre les modèles dans Base.metadata

    Base.metadata.create_all(bind=engine)
