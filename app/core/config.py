from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Game Catalog API"
    app_env: str = "dev"
    app_version: str = "0.1.0"
    api_v1_prefix: str = ""
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    jwt_secret: str = "change_me"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 30 * 24 * 60

    database_url: str = "sqlite+pysqlite:///./catalog.db"

    # code -> admin display name, e.g. ADMIN_CODES='{"s3cret": "Alice"}'
    admin_codes: dict[str, str] = Field(default_factory=dict)

    auto_create_schema: bool = False
    seed_tags_author: str = "system"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def clear_settings_cache() -> None:
    get_settings.cache_clear()
