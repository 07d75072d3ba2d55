"""
Utility modules for configuration.
"""
from .config import Config, ConfigurationError

__all__ = ['Config', 'ConfigurationError']
