
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Buildings Directory API"
    app_env: str = "development"
    app_port: int = 8000
    frontend_url: str = "http://localhost:3000"

    # Directory mirror (Azure SQL via ODBC or SQLite for local dev)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./directory_dev.db",
        alias="DATABASE_URL",
    )
    auto_create_schema: bool = Field(default=False, alias="AUTO_CREATE_SCHEMA")
    directory_seed_file: str | None = Field(default=None, alias="DIRECTORY_SEED_FILE")

    # Page size for room / workspace listings when the caller sends no topCount
    default_place_top_count: int = Field(default=100, alias="DEFAULT_PLACE_TOP_COUNT")

    # Bearer-token validation
    auth_jwt_secret: str = Field(default="change-me", alias="AUTH_JWT_SECRET")
    auth_jwt_algorithm: str = Field(default="HS256", alias="AUTH_JWT_ALGORITHM")
    auth_jwt_audience: str | None = Field(default=None, alias="AUTH_JWT_AUDIENCE")
    auth_jwt_issuer: str | None = Field(default=None, alias="AUTH_JWT_ISSUER")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

settings = Settings()
