"""
API configuration package.
Contains settings and configuration management.
"""

from txfeed_api.config.settings import settings

__all__ = [
    "settings",
]
