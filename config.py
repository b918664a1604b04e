"""
Configuration module for the Text Intelligence backend.
Handles environment variables and application settings.
"""
import os
import secrets
from datetime import timedelta
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Load environment variables
env_path = Path(__file__).parent / '.env'
load_dotenv(dotenv_path=env_path)


def _env_flag(name: str, default: str = 'False') -> bool:
    return os.getenv(name, default).lower() == 'true'


class Config:
    """Base configuration class."""

    # Flask
    DEBUG: bool = _env_flag('DEBUG')
    TESTING: bool = False
    JSON_SORT_KEYS: bool = False

    # Server
    HOST: str = os.getenv('HOST', '0.0.0.0')
    PORT: int = int(os.getenv('PORT', '8081'))

    # CORS
    CORS_ORIGINS: str = os.getenv('CORS_ORIGINS', '*')

    # Session tokens (JWT). A random secret invalidates tokens across restarts.
    SESSION_SECRET: str = os.getenv('SESSION_SECRET') or secrets.token_hex(32)
    SESSION_AUTH_ENABLED: bool = _env_flag('SESSION_AUTH_ENABLED', 'True')
    JWT_SECRET_KEY: str = SESSION_SECRET
    JWT_ALGORITHM: str = 'HS256'
    JWT_TOKEN_LOCATION: list = ['headers']
    JWT_ACCESS_TOKEN_EXPIRES: timedelta = timedelta(hours=1)

    # Deepgram Text Intelligence
    DEEPGRAM_API_KEY: Optional[str] = os.getenv('DEEPGRAM_API_KEY')
    DEEPGRAM_API_URL: str = os.getenv('DEEPGRAM_API_URL', 'https://api.deepgram.com/v1/read')
    DEEPGRAM_TIMEOUT: float = float(os.getenv('DEEPGRAM_TIMEOUT', '30'))

    # Metadata
    METADATA_FILE: str = os.getenv('METADATA_FILE', 'deepgram.toml')

    # Frontend
    DEV_MODE: bool = _env_flag('DEV_MODE')
    FRONTEND_DIST_DIR: str = os.getenv(
        'FRONTEND_DIST_DIR',
        str(Path(__file__).parent / 'frontend' / 'dist')
    )
    FRONTEND_PORT: int = int(os.getenv('VITE_PORT') or os.getenv('FRONTEND_PORT') or '8080')

    # Logging
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FILE: Optional[str] = os.getenv('LOG_FILE')

    @classmethod
    def validate(cls) -> bool:
        """Validate that all required configuration is present."""
        required_vars = [
            'DEEPGRAM_API_KEY',
        ]

        missing = [var for var in required_vars if not getattr(cls, var, None)]

        if missing:
            raise ValueError(f"Missing required environment variables: {', '.join(missing)}")

        return True


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    TESTING = False
    DEV_MODE = _env_flag('DEV_MODE', 'True')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    DEV_MODE = False
    DEEPGRAM_API_KEY = 'test-key'
    SESSION_SECRET = 'test-session-secret'
    JWT_SECRET_KEY = SESSION_SECRET
    SESSION_AUTH_ENABLED = True
    LOG_FILE = None


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}
