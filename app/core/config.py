from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_PATH = Path(__file__).resolve().parents[2] / ".env"

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_PATH, env_file_encoding="utf-8", extra="ignore")

    # App
    env: str = "dev"
    service_name: str = "vetnest-api"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./vetnest.db"

    # migrate + seed sample data from the lifespan hook
    bootstrap_on_startup: bool = True

    # CORS: the one front-end allowed to call us
    frontend_origin: str = "http://localhost:8080"

    # Telemetry
    telemetry_enabled: bool = True
    otlp_endpoint: str = "http://localhost:4318"  # Jaeger OTLP HTTP


settings = Settings()
