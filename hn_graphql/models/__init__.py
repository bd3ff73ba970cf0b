"""
Models package for the Hacker News GraphQL service.

This package contains the Pydantic DTOs for raw Hacker News records.
"""

from .dtos import HNItem, HNUser, ItemKind

__all__ = [
    "HNItem",
    "HNUser",
    "ItemKind",
]
