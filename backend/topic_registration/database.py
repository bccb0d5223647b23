"""
Configuration de la connexion à la base de données PostgreSQL.

Le moteur n'est pas créé à l'import : init_db() le construit et vérifie la
connexion. Tant que init_db() n'a pas réussi, get_db() répond 503 au lieu de
bloquer la requête.
"""

import logging
import threading
from typing import Optional

from sqlalchemy import JSON, create_engine, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from topic_registration.config import settings
from topic_registration.errors import ServiceUnavailableError

logger = logging.getLogger(__name__)

Base = declarative_base()

# Documents structurés : JSONB en production, JSON générique ailleurs (SQLite des tests)
JSONDocument = JSON().with_variant(JSONB(), "postgresql")

SessionLocal = sessionmaker(autocommit=False, autoflush=False)

engine: Optional[Engine] = None
_ready = threading.Event()
_lock = threading.Lock()


def is_ready() -> bool:
    return _ready.is_set()


def init_db(url: str = None) -> bool:
    """
    Crée le moteur (si besoin) et ouvre une connexion de contrôle.
    Retourne True si la base répond ; en cas d'échec l'erreur est journalisée
    et False est retourné, sans lever d'exception.
    """
    global engine

    with _lock:
        if _ready.is_set():
            return True

        if engine is None:
            engine = create_engine(
                url or settings.database_url,
                pool_size=settings.DB_POOL_SIZE,
                max_overflow=0,
                pool_timeout=settings.DB_POOL_TIMEOUT,
                pool_recycle=settings.DB_POOL_RECYCLE,
                pool_pre_ping=True,
            )
            SessionLocal.configure(bind=engine)

        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.error("Unable to connect to the database: %s", exc)
            return False

        _ready.set()
        logger.info("Connection has been established successfully.")
        return True


def dispose_db() -> None:
    """Ferme le pool de connexions (arrêt de l'API)."""
    global engine

    with _lock:
        _ready.clear()
        if engine is not None:
            engine.dispose()
            engine = None
            logger.info("client has disconnected")


def get_db():
    """Dépendance FastAPI : fournit une session BDD et la ferme après usage."""
    if not _ready.is_set():
        raise ServiceUnavailableError()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
