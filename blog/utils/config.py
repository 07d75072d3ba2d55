"""
Configuration management for the blog backend.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class ConfigurationError(Exception):
    """Raised when a configuration value is invalid."""
    pass


def _int_or_raw(value: str):
    """Parse an integer setting, keeping the raw string if it is not one."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return value


class Config:
    """Configuration class for application settings."""

    # MongoDB Configuration
    MONGODB_URI = os.getenv('MONGODB_URI', 'mongodb://localhost:27017')
    MONGODB_DB = os.getenv('MONGODB_DB', 'my-blog')
    MONGODB_COLLECTION = os.getenv('MONGODB_COLLECTION', 'articles')
    MONGODB_TIMEOUT_MS = _int_or_raw(os.getenv('MONGODB_TIMEOUT_MS', '5000'))

    # Server Configuration
    HOST = os.getenv('BLOG_HOST', '0.0.0.0')
    PORT = _int_or_raw(os.getenv('BLOG_PORT', '8000'))
    DEBUG = os.getenv('BLOG_DEBUG', 'false').lower() == 'true'

    # Pre-built front end served for every non-API route
    BUILD_DIR = os.getenv('BLOG_BUILD_DIR', os.path.join(PROJECT_ROOT, 'build'))

    @classmethod
    def validate(cls):
        """
        Validate that numeric configuration values parsed correctly.

        Raises:
            ConfigurationError: If a value is not usable
        """
        numeric_vars = {
            'MONGODB_TIMEOUT_MS': cls.MONGODB_TIMEOUT_MS,
            'BLOG_PORT': cls.PORT,
        }

        invalid = [var for var, value in numeric_vars.items() if not isinstance(value, int)]

        if invalid:
            raise ConfigurationError(
                f"Invalid integer environment variables: {', '.join(invalid)}. "
                f"Please check your .env file."
            )

    @classmethod
    def as_flask_config(cls) -> dict:
        """Settings the Flask app factory copies into app.config."""
        return {
            'MONGODB_URI': cls.MONGODB_URI,
            'MONGODB_DB': cls.MONGODB_DB,
            'MONGODB_COLLECTION': cls.MONGODB_COLLECTION,
            'MONGODB_TIMEOUT_MS': cls.MONGODB_TIMEOUT_MS,
            'BUILD_DIR': cls.BUILD_DIR,
        }
