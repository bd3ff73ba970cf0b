"""
Configuration package for the Hacker News GraphQL service.
"""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
