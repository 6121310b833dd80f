from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent.parent
ENV_PATH = BASE_DIR / ".env"


class Settings(BaseSettings):

    APP_NAME: str = "Recipes Finder API"
    API_PREFIX: str = "/api/v1"

    # sqlite+aiosqlite (default) or postgresql+asyncpg
    DATABASE_URL: str = f"sqlite+aiosqlite:///{BASE_DIR / 'recipes_finder.db'}"
    DB_ECHO: bool = False
    AUTO_CREATE_TABLES: bool = True

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )


settings = Settings()
