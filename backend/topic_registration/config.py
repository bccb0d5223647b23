"""
Configuration centrale de l'application via variables d'environnement.
Charger depuis un fichier .env en développement.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    # Serveur
    PORT: int = 3001

    # Base de données (hôte "db" dans le docker-compose de production)
    DATABASE_URL: Optional[str] = None
    DB_DRIVER: str = "postgresql+psycopg2"
    DB_HOST: str = "db"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    DB_NAME: str = "postgres"

    # Pool : 5 connexions max, délai d'inactivité très long conservé volontairement
    DB_POOL_SIZE: int = 5
    DB_POOL_TIMEOUT: int = 10
    DB_POOL_RECYCLE: int = 300000

    # Délai entre deux tentatives de connexion au démarrage
    DB_CONNECT_RETRY_SECONDS: int = 9

    # JWT
    SECRET_KEY: str = "change-me-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 12

    # Secret partagé avec le proxy d'authentification (en-tête X-Login-Secret).
    # Vide : /api/login refuse toute connexion.
    LOGIN_SECRET: str = ""

    # Environnement
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def database_url(self) -> str:
        """URL SQLAlchemy : DATABASE_URL si fourni, sinon assemblée depuis les DB_*."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return URL.create(
            drivername=self.DB_DRIVER,
            username=self.DB_USER,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        ).render_as_string(hide_password=False)


settings = Settings()
