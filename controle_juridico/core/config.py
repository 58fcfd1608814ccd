"""
Configuration module for Controle Jurídico
Centralized settings management
"""

from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Application Configuration
    APP_NAME: str = "Controle Jurídico"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    PORT: int = 8000
    HOST: str = "0.0.0.0"

    # MongoDB Configuration
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DATABASE: str = "controle_juridico"
    MONGODB_COLLECTION_TAREFAS: str = "tarefas"
    MONGODB_COLLECTION_PROCESSOS: str = "processos"

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # CORS (frontend)
    CORS_ORIGINS: List[str] = ["*"]

    # Environment Configuration
    ENVIRONMENT: str = "local"

    def is_production(self) -> bool:
        """Check if running in production"""
        return self.ENVIRONMENT.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development"""
        return self.ENVIRONMENT.lower() in ["local", "development", "dev"]

    def get_mongodb_connection_options(self) -> dict:
        """Get MongoDB connection options"""
        options = {
            "maxPoolSize": 50,
            "minPoolSize": 5,
            "maxIdleTimeMS": 30000,
            "serverSelectionTimeoutMS": 5000,
            "socketTimeoutMS": 20000,
        }

        if self.is_production():
            options.update(
                {
                    "retryWrites": True,
                    "w": "majority",
                }
            )

        return options


def get_settings(**overrides) -> Settings:
    """
    Build a settings instance from the environment

    Args:
        overrides: Explicit values that take precedence over env vars

    Returns:
        Settings: New settings object, to be passed to the services at startup
    """
    return Settings(**overrides)


def validate_settings(settings: Optional[Settings]) -> bool:
    """Validate required settings"""
    if settings is None:
        raise ValueError("Settings not provided")

    required_vars = []

    if not settings.MONGODB_URI or settings.MONGODB_URI == "mongodb://localhost:27017":
        if settings.is_production():
            required_vars.append("MONGODB_URI")

    if required_vars:
        raise ValueError(
            f"Missing required production configuration: {', '.join(required_vars)}"
        )

    return True
