"""Application configuration and environment variables."""
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Books API"
    debug: bool = False
    log_level: str = "INFO"

    # Server (loopback only)
    host: str = "127.0.0.1"
    port: int = 8000

    # Seed data, read once at startup
    books_data_path: str = "data/books.json"

    # CORS headers set on every response
    cors_allow_origin: str = "*"
    cors_allow_methods: str = "GET, POST, PUT, DELETE, OPTIONS"
    cors_allow_headers: str = "Content-Type, Authorization"

    model_config = {
        "env_prefix": "BOOKS_API_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
