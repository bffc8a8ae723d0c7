"""
Core publishing functionality.
"""

from .errors import TweetServiceError, ClientInputError, ExternalAuthorizationError, ExternalGenericError
from .publisher import publish_tweet

__all__ = [
    'TweetServiceError',
    'ClientInputError',
    'ExternalAuthorizationError',
    'ExternalGenericError',
    'publish_tweet',
]
