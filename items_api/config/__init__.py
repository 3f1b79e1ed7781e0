"""
Configuration Module

Application configuration loaded from environment variables and config files.

Usage:
======
    from items_api.config.settings import settings

    api_key = settings.API_KEY
    is_prod = settings.is_production
"""

from items_api.config.settings import Environment, Settings, get_settings, settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "Environment",
]
