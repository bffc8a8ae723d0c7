"""
Platform client implementations.
"""

from .twitter import TwitterClient, build_client

__all__ = [
    'TwitterClient',
    'build_client',
]
