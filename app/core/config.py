# app/core/config.py

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

# Get the project root directory (where .env should be located)
BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra="ignore"
    )

    # App Configuration
    APP_NAME: str = "Savings Goals API"
    VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # Database Configuration
    DATABASE_URL: str
    AUTO_CREATE_TABLES: bool = True

    # JWT / Security Configuration
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 720  # 12 hours
    BCRYPT_ROUNDS: int = 12

    # CORS Configuration
    FRONTEND_URL: str = "http://localhost:3000"

    # Optional: Environment
    ENVIRONMENT: str = "development"

    @property
    def is_sqlite(self) -> bool:
        """SQLite has no server-side pool to size"""
        return self.DATABASE_URL.startswith("sqlite")

# Create a global settings instance
settings = Settings()
