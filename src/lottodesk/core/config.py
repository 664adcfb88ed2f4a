"""Application configuration loaded from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings

from lottodesk.core.constants import DEFAULT_DRAW_TIME


class Settings(BaseSettings):
    """LottoDesk application settings."""

    # App
    app_env: str = "development"
    app_host: str = "0.0.0.0"
    app_port: int = 3000
    app_debug: bool = True
    log_level: str = "INFO"
    log_format: str = "text"  # "text" or "json"

    # Oracle Database (empty DSN means "not configured")
    oracle_dsn: str = ""
    oracle_user: str = "lottery"
    oracle_password: str = ""
    oracle_pool_min: int = 1
    oracle_pool_max: int = 5
    oracle_pool_increment: int = 1
    auto_migrate: bool = True

    # CORS
    cors_origins: str = "*"  # Comma-separated origins; "*" for dev only

    # Files
    static_dir: str = "public"
    admin_page: str = "ad123.html"  # file under static_dir served at /admin
    upload_dir: str = "public/uploads"

    # Draws
    default_draw_time: str = DEFAULT_DRAW_TIME

    # Reject tickets whose picks are not 4 integers in [1, 50]
    strict_ticket_numbers: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_testing(self) -> bool:
        return self.app_env == "testing"

    @property
    def database_configured(self) -> bool:
        return bool(self.oracle_dsn.strip())

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        if self.cors_origins == "*":
            return ["*"]
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def upload_path(self) -> Path:
        return Path(self.upload_dir)

    @property
    def static_path(self) -> Path:
        return Path(self.static_dir)

    @property
    def admin_page_path(self) -> Path:
        return self.static_path / self.admin_page


def get_settings() -> Settings:
    """Return a fresh settings instance."""
    return Settings()
