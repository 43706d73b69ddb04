# app/core/config.py

from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    # App
    ENV: str = "development"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    CORS_ORIGINS: list[str] = ["*"]

    # Database
    DB_HOST: str = Field(
        "localhost",
        validation_alias=AliasChoices("DB_HOST", "DB_IP"),
    )
    DB_PORT: int = 5432
    DB_NAME: str = "retail"
    DB_USER: str = "postgres"
    DB_PASS: str = ""

    # Full URL override, e.g. for a managed database
    DATABASE_URL: str | None = None

    # Connection pool
    DB_POOL_SIZE: int = Field(5, ge=1)
    DB_POOL_TIMEOUT: int = Field(30, ge=1)
    DB_POOL_RECYCLE: int = 300

    AUTO_CREATE_TABLES: bool = False

    # Stock handling for sales
    STOCK_DECREMENT_MODE: Literal["read_modify_write", "atomic"] = "read_modify_write"
    ALLOW_NEGATIVE_STOCK: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="forbid",
    )

    @property
    def database_url(self) -> str | URL:
        if self.DATABASE_URL:
            return self.DATABASE_URL

        return URL.create(
            "postgresql+psycopg2",
            username=self.DB_USER,
            password=self.DB_PASS or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )


settings = Settings()


def get_settings() -> Settings:
    return settings
