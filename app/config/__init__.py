"""
Configuration package for the hotel room service.

Contains environment settings and logging configuration.
"""

from app.config.settings import settings, get_settings
from app.config.logging import setup_logging, get_logger

__all__ = ['settings', 'get_settings', 'setup_logging', 'get_logger']
