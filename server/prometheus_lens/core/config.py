from __future__ import annotations
"""server/prometheus_lens/core/config.py
~~~~~~~~~~~~~~~~~~~~~~~~
Paramètres (pydantic-settings).
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str = "postgresql+psycopg://postgres:postgres@db:5432/prometheus_lens"
    DB_CONNECT_TIMEOUT: int = 5

    # Prometheus piloté par /prometheus/reload
    PROMETHEUS_URL: str = "http://prometheus:9090"
    PROMETHEUS_CONFIG_PATH: str = "/app/prometheus.yml"
    PROMETHEUS_RELOAD_TIMEOUT_SECONDS: float = Field(10, gt=0)
    ALERTMANAGER_TARGET: str = "alertmanager:9093"
    SCRAPE_INTERVAL: str = "15s"
    EVALUATION_INTERVAL: str = "15s"

    # Plafond du health check d'un asset (course requête vs minuterie)
    HEALTH_CHECK_TIMEOUT_SECONDS: float = Field(5, gt=0)

    CORS_ALLOW_ORIGINS: Optional[str] = None
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @property
    def prometheus_reload_url(self) -> str:
        return f"{self.PROMETHEUS_URL.rstrip('/')}/-/reload"


settings = Settings()
