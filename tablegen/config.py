"""Application settings loaded from .env file."""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database (any SQLAlchemy URL; SQL Server is the primary target)
    DB_CONNECTION_STRING: str = (
        "mssql+pyodbc://@localhost/master"
        "?driver=ODBC+Driver+18+for+SQL+Server&trusted_connection=yes&TrustServerCertificate=yes"
    )
    # Blank means "use the connection's default schema"
    DEFAULT_SCHEMA: Optional[str] = None

    # Output
    OUTPUT_DIR: str = "generated"

    # Logging
    LOG_LEVEL: str = "INFO"


settings = Settings()
