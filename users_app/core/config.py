from functools import lru_cache
import os

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")  # default

    database_url: str = "sqlite+aiosqlite:///./users.db"
    environment: str = "development"
    log_level: str = "INFO"
    log_json: bool = False
    db_echo: bool = False
    create_tables: bool = True


ENV_FILE_MAP = {
    "test": ".env.test",
    "staging": ".env.staging",
    "production": ".env.production",
    "development": ".env",
}


@lru_cache()
def get_settings() -> Settings:
    app_env = os.getenv("APP_ENV", "development").lower()
    env_file = ENV_FILE_MAP.get(app_env, ".env")
    return Settings(_env_file=env_file)


# Use across the application as:
settings = get_settings()
