"""
Configuration package.

Exports the singleton settings instance for easy importing.

Usage:
    from userstore.config import settings

    print(settings.database_path)
"""

from userstore.config.settings import Settings, settings, get_settings

__all__ = [
    "Settings",
    "settings",
    "get_settings",
]
