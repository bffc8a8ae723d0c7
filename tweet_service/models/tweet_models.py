from pydantic import BaseModel, Field
from typing import Optional, List

ALLOWED_MEDIA_TYPES = {"image/jpeg", "image/png", "video/mp4"}

TWEET_POSTED = "Tweet posted!"

class TwitterCredentials(BaseModel):
    """OAuth 1.0a user-context credentials supplied by the caller."""
    app_key: Optional[str] = Field(default=None, alias="appKey")
    app_secret: Optional[str] = Field(default=None, alias="appSecret")
    access_token: Optional[str] = Field(default=None, alias="accessToken")
    access_secret: Optional[str] = Field(default=None, alias="accessSecret")

    model_config = {"populate_by_name": True}

    def missing_fields(self) -> List[str]:
        """Wire names of the credentials that are absent or empty."""
        return [
            field.alias
            for name, field in type(self).model_fields.items()
            if not getattr(self, name)
        ]

class UploadedMedia(BaseModel):
    """A multipart upload written to temporary storage for one request."""
    temporary_path: str
    mime_type: str
    size_bytes: int = 0
    filename: Optional[str] = None

class PublishRequest(BaseModel):
    """Request model for publishing a tweet."""
    text: Optional[str] = None
    credentials: TwitterCredentials
    media: Optional[UploadedMedia] = None

class TweetResponse(BaseModel):
    """Response model for a published tweet."""
    success: bool = True
    message: str = TWEET_POSTED
    tweetId: Optional[str] = None

class ErrorResponse(BaseModel):
    """Response model for rejected or failed requests."""
    error: str
    details: Optional[str] = None
