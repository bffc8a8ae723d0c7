"""
Exception classes for the tweet service.

Client input problems are resolved locally and never reach the platform.
Platform failures are split into authorization errors (HTTP 403) and
everything else (HTTP 500); both relay the platform's message verbatim.
"""
from typing import Optional, Dict, Any
import tweepy

TWEET_FAILED = "Failed to tweet"

class TweetServiceError(Exception):
    """Base exception class for tweet service errors"""
    status_code = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to the JSON error body"""
        body: Dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body

class ClientInputError(TweetServiceError):
    """Raised when the request is rejected before any platform call"""
    status_code = 400

class ExternalAuthorizationError(TweetServiceError):
    """Raised when the platform refuses the call for a permissions reason"""
    status_code = 403

    def __init__(self, details: str):
        super().__init__(TWEET_FAILED, details=details)

class ExternalGenericError(TweetServiceError):
    """Raised for any other upload or publish failure"""
    status_code = 500

    def __init__(self, details: str):
        super().__init__(TWEET_FAILED, details=details)

def _status_of(exc: Exception) -> Optional[int]:
    response = getattr(exc, "response", None)
    status = getattr(response, "status_code", None)
    if status is None:
        status = getattr(response, "status", None)
    if status is None:
        status = getattr(exc, "code", None)
    return status if isinstance(status, int) else None

def classify_platform_error(exc: Exception) -> TweetServiceError:
    """Map an exception raised by the platform client to a service error."""
    if isinstance(exc, tweepy.errors.Forbidden) or _status_of(exc) == 403:
        return ExternalAuthorizationError(str(exc))
    return ExternalGenericError(str(exc))
