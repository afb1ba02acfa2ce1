"""
Pydantic Settings — centralized configuration loaded from environment variables.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Database ──────────────────────────────
    POSTGRES_USER: str = "tripflow_user"
    POSTGRES_PASSWORD: str = "tripflow_pass"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "tripflow_db"
    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 10

    @property
    def DATABASE_URL(self) -> str:
        """Async URL for app runtime (asyncpg)."""
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # ── Redis / Celery ────────────────────────
    CELERY_BROKER_URL: str = "redis://localhost:6379/0"
    CELERY_RESULT_BACKEND: str = "redis://localhost:6379/1"

    # ── Application ───────────────────────────
    APP_ENV: str = "development"
    LOG_LEVEL: str = ""

    # ── Bulk Import ───────────────────────────
    IMPORT_TIMEZONE: str = "UTC"
    IMPORT_DEFAULT_TRIP_TYPE: str = "one_way"
    IMPORT_DEFAULT_TRIP_STATUS: str = "pending"
    IMPORT_MAX_FILE_BYTES: int = 10 * 1024 * 1024
    IMPORT_SESSION_TTL_SEC: int = 3600
    IMPORT_SESSION_MAX_ITEMS: int = 200

    model_config = {"env_file": ["../.env", ".env"], "extra": "ignore"}

    @property
    def effective_log_level(self) -> str:
        """LOG_LEVEL when set, otherwise DEBUG in development and INFO elsewhere."""
        if self.LOG_LEVEL:
            return self.LOG_LEVEL.upper()
        return "DEBUG" if self.APP_ENV == "development" else "INFO"


settings = Settings()
