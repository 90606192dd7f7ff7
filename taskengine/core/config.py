from typing import Literal

from pydantic import computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Self


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )
    PROJECT_NAME: str = "Plant Room Task Engine"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"

    # Supabase Configuration (service role is required for unattended runs)
    SUPABASE_URL: str | None = None
    SUPABASE_SERVICE_KEY: str | None = None
    # Newer dashboard naming for the service key
    SUPABASE_SECRET: str | None = None

    @model_validator(mode="after")
    def _map_supabase_secret(self) -> Self:
        if self.SUPABASE_SECRET and not self.SUPABASE_SERVICE_KEY:
            self.SUPABASE_SERVICE_KEY = self.SUPABASE_SECRET
        return self

    # Notification delivery (send-notifications edge function)
    NOTIFICATIONS_ENDPOINT: str | None = None
    NOTIFICATION_TIMEOUT_SECONDS: float = 10.0
    NOTIFICATION_MAX_ATTEMPTS: int = 3

    @computed_field  # type: ignore[prop-decorator]
    @property
    def NOTIFICATIONS_URL(self) -> str | None:
        if self.NOTIFICATIONS_ENDPOINT:
            return self.NOTIFICATIONS_ENDPOINT
        if self.SUPABASE_URL:
            return f"{self.SUPABASE_URL.rstrip('/')}/functions/v1/send-notifications"
        return None

    # Daily assignment optimizer
    ASSIGNMENT_CAPACITY_CEILING: int = 8
    ASSIGNMENT_MIN_SCORE: float = 0.4
    ASSIGNMENT_LOOKBACK_DAYS: int = 30
    ASSIGNMENT_LOOKAHEAD_DAYS: int = 7
    ASSIGNMENT_RUN_TIME_LIMIT_SECONDS: float = 600.0
    ASSIGNMENT_RUN_HOUR_UTC: int = 5

    # Redis / Celery Configuration
    REDIS_URL: str = "redis://localhost:6379/0"
    CELERY_BROKER_URL: str | None = None
    CELERY_RESULT_BACKEND: str | None = None
    CELERY_TASK_TIME_LIMIT: int = 1800  # 30 minutes
    CELERY_TASK_SOFT_TIME_LIMIT: int = 1500  # 25 minutes

    @computed_field  # type: ignore[prop-decorator]
    @property
    def celery_broker_url(self) -> str:
        """Get Celery broker URL (defaults to Redis)."""
        return self.CELERY_BROKER_URL or self.REDIS_URL

    @computed_field  # type: ignore[prop-decorator]
    @property
    def celery_result_backend(self) -> str:
        """Get Celery result backend URL (defaults to Redis)."""
        return self.CELERY_RESULT_BACKEND or self.REDIS_URL

    # Observability Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # "json" or "console"
    ENABLE_METRICS: bool = False
    METRICS_PORT: int = 8001


settings = Settings()  # type: ignore
