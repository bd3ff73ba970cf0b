"""
Read-only GraphQL interface over the Hacker News API.
"""

__version__ = "0.1.0"
