# Standard library imports
import os
from typing import Final, List, Optional
from dotenv import load_dotenv


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()
        
        # Application metadata
        self.title: Final[str] = os.getenv("USER_API_TITLE", "User API")
        self.version: Final[str] = os.getenv("USER_API_VERSION", "1.0.0")
        
        # Logging Configuration
        self.log_level: Final[str] = os.getenv("USER_API_LOG_LEVEL", "INFO")
        
        # Server Configuration (used by `python -m user_api`)
        self.host: Final[str] = os.getenv("USER_API_HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("USER_API_PORT", "8000"))
        
        # CORS Configuration
        # Comma-separated list, e.g. "http://localhost:3000,https://example.com"
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("USER_API_CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        
        # Update validation
        # Off by default: updates store name/email as given, without the
        # checks applied on create.
        self.validate_on_update: Final[bool] = _env_flag(
            "USER_API_VALIDATE_ON_UPDATE", "false"
        )


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
