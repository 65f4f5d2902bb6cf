# app/core/config.py
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    """Application settings, read from the environment and .env."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "front"
    database_url: str = Field(
        default="sqlite:///./front_store.sqlite",
        description="SQLAlchemy database URL",
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API port")
    sql_echo: bool = Field(default=False, description="Echo SQL statements")
    allowed_origins: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated)",
    )

    def get_allowed_origins(self) -> List[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
