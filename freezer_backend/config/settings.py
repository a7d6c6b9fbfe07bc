"""Environment variables and application settings."""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings (loaded from env)."""

    # App
    app_name: str = "Freezer Inventory API"
    app_version: str = "0.1.0-alpha"
    app_authors: str = "mocrsteel <https://github.com/mocrsteel>"
    debug: bool = False
    port: int = 8000
    log_level: str = "INFO"

    # MySQL
    mysql_host: str = "localhost"
    mysql_port: int = 3306
    mysql_user: str = "root"
    mysql_password: str = ""
    mysql_database: str = "freezer"

    # Full SQLAlchemy URL, takes precedence over the MySQL parts when set
    database_uri: str = ""

    # CORS (frontend)
    cors_origins: str = "http://localhost:3000"

    # IANA zone used for "today"; empty uses the host's local zone
    timezone: str = ""

    # Products
    default_expiration_months: int = 6

    @property
    def database_url(self) -> str:
        if self.database_uri:
            return self.database_uri
        return (
            f"mysql+aiomysql://{self.mysql_user}:{self.mysql_password}"
            f"@{self.mysql_host}:{self.mysql_port}/{self.mysql_database}"
        )

    @property
    def cors_origin_list(self) -> list[str]:
        return [x.strip() for x in self.cors_origins.split(",") if x.strip()]

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
