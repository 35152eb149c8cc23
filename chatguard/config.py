from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Sanitizer settings loaded from environment."""

    # Service
    service_name: str = "chatguard"

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # "json" or "console"

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
