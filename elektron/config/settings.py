from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    app_name: str = "elektron"
    app_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    zone: str = "NO2"
    upstream_base_url: str = "https://www.hvakosterstrommen.no/api/v1/prices"
    request_timeout_seconds: float = 10.0

    font_dir: Path = PACKAGE_DIR / "static" / "font"

    model_config = SettingsConfigDict(env_prefix="ELEKTRON_", env_file=".env", case_sensitive=False, extra="ignore")


settings = Settings()
