# config.py
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = Field(default="Tableros Eléctricos")
    api_base_url: str = Field(default="https://remsprueback.onrender.com")
    request_timeout: Optional[float] = Field(default=None)
    query_retries: int = Field(default=2)
    stale_seconds: float = Field(default=5 * 60)
    page_size: int = Field(default=10)
    splash_ms: int = Field(default=2500)
    database_uri: str = Field(default="sqlite:///tableros_app.db")
    log_file: str = Field(default="tableros_app.log")
    log_level: str = Field(default="INFO")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

DATABASE_URI = settings.database_uri
