"""
Configuration centrale de l'application via variables d'environnement.
Charger depuis un fichier .env en développement.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Base de données
    DATABASE_URL: str = "sqlite:///./etudiants.db"
    AUTO_CREATE_TABLES: bool = True

    # En-têtes d'alerte (X-<APP_NAME>-alert / -params / -error)
    APP_NAME: str = "ms3App"
    ENABLE_TRANSLATION: bool = True

    # Journalisation
    LOG_LEVEL: str = "INFO"

    # Environnement
    ENV: str = "development"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
