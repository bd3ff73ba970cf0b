from typing import Union
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Define the root directory of the hn_graphql package
SERVICE_ROOT_DIR = Path(__file__).parent.parent.resolve()
# Path to the repository root (one level up from the package)
PROJECT_ROOT_DIR = SERVICE_ROOT_DIR.parent


class Settings(BaseSettings):
    # Application settings
    APP_NAME: str = "HackerNewsGraphQL"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8080

    # Security settings
    CORS_ORIGINS: Union[str, list[str]] = "*"

    # GraphQL endpoint
    GRAPHQL_PATH: str = "/graphql"
    GRAPHIQL_ENABLED: bool = True

    # Hacker News API settings
    HN_API_BASE_URL: str = "https://hacker-news.firebaseio.com/v0/"
    HN_API_TIMEOUT_SECONDS: float = 10.0
    HN_API_MAX_RETRIES: int = 3
    HN_API_BACKOFF_SECONDS: float = 0.5
    HN_API_MAX_CONNECTIONS: int = 100
    HN_API_USER_AGENT: str = "hn-graphql/0.1"

    # Logging configuration path (can be overridden by env var)
    LOGGING_CONFIG_PATH: str = str(SERVICE_ROOT_DIR / "config" / "logging_config.yaml")

    model_config = SettingsConfigDict(
        env_prefix="HN_GRAPHQL_",
        env_file=str(PROJECT_ROOT_DIR / ".env"),  # Load variables from project root .env
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def model_post_init(self, __context) -> None:
        """Parse comma-separated strings into lists after model initialization."""
        if isinstance(self.CORS_ORIGINS, str):
            self.CORS_ORIGINS = [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

        # Relative paths are joined onto the base URL
        if not self.HN_API_BASE_URL.endswith("/"):
            self.HN_API_BASE_URL += "/"


# Instantiate settings
settings = Settings()
