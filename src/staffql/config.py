"""
Configuration management for the staffql service
"""

from urllib.parse import quote_plus

from pydantic_settings import BaseSettings


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""

    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_backend: str = "mongo"  # 'mongo', 'memory'
    mongo_url: str | None = None
    mongo_scheme: str = "mongodb"  # 'mongodb', 'mongodb+srv'
    mongo_user: str | None = None
    mongo_password: str | None = None
    mongo_host: str = "localhost:27017"
    mongo_db: str = "staffql"

    # Auth
    jwt_secret: str | None = None
    jwt_algorithm: str = "HS256"
    jwt_issuer: str = "staffql"
    jwt_audience: str = "staffql-api"
    token_expiry_seconds: int = 3600  # 1 hour
    bcrypt_rounds: int = 12

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    graphiql: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Environment
    debug: bool = False
    log_level: str = "INFO"

    def mongo_uri(self) -> str:
        """Build the MongoDB connection URI from the configured parts."""
        if self.mongo_url:
            return self.mongo_url

        credentials = ""
        if self.mongo_user:
            credentials = quote_plus(self.mongo_user)
            if self.mongo_password:
                credentials += ":" + quote_plus(self.mongo_password)
            credentials += "@"

        return f"{self.mongo_scheme}://{credentials}{self.mongo_host}/{self.mongo_db}"

    def validate_startup(self) -> None:
        """Fail fast on settings the server cannot run without.

        Raises:
            ConfigurationError: If a required setting is missing or invalid
        """
        if not self.jwt_secret:
            raise ConfigurationError(
                "Token signing secret is required. Set STAFFQL_JWT_SECRET."
            )
        if self.database_backend not in ("mongo", "memory"):
            raise ConfigurationError(f"Unsupported database backend: {self.database_backend}")
        if self.token_expiry_seconds <= 0:
            raise ConfigurationError("STAFFQL_TOKEN_EXPIRY_SECONDS must be positive")
        if not 4 <= self.bcrypt_rounds <= 31:
            raise ConfigurationError("STAFFQL_BCRYPT_ROUNDS must be between 4 and 31")

    class Config:
        env_file = ".env"
        env_prefix = "STAFFQL_"
        case_sensitive = False
        extra = "ignore"


def get_settings() -> Settings:
    """Load settings from the current environment."""
    return Settings()
