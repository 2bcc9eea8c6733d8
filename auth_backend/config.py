"""
Configuration management for the auth backend
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL
from typing import List, Optional


class Settings(BaseSettings):
    """Auth backend configuration loaded from environment variables"""

    # Server Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "production"

    # Database Configuration
    DATABASE_URL: Optional[str] = None
    DB_HOST: Optional[str] = None
    DB_PORT: Optional[int] = None
    DB_USER: Optional[str] = None
    DB_PASS: Optional[str] = None
    DB_NAME: Optional[str] = None
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 0
    # None waits for a free connection indefinitely
    DB_POOL_TIMEOUT: Optional[float] = None

    # Token Signing
    JWT_SECRET: str = "change-this-secret-before-deploying-to-production"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: Optional[int] = None

    # Password Hashing
    BCRYPT_ROUNDS: int = 10

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    @property
    def database_url(self) -> str:
        """
        Resolve the SQLAlchemy URL.

        DATABASE_URL wins when set. Otherwise a MySQL URL is assembled from
        the DB_* variables, falling back to a local SQLite file.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.DB_HOST and self.DB_NAME:
            url = URL.create(
                "mysql+pymysql",
                username=self.DB_USER,
                password=self.DB_PASS,
                host=self.DB_HOST,
                port=self.DB_PORT,
                database=self.DB_NAME,
            )
            return url.render_as_string(hide_password=False)
        return "sqlite:///./app.db"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() in ("local", "development", "dev")


# Global settings instance
settings = Settings()
