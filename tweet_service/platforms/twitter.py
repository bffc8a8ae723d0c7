from typing import Dict, Optional, List, Any
from io import BytesIO
import tweepy
from ..models.tweet_models import TwitterCredentials
from ..utils.logger import get_logger

logger = get_logger(__name__)

# tweepy infers the media type from the filename extension
MEDIA_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "video/mp4": "mp4",
}

VIDEO_MEDIA_CATEGORY = "tweet_video"

def build_tweet_payload(text: Optional[str], media_id: Optional[str]) -> Dict[str, Any]:
    """
    Build the publish payload for the v2 create tweet call.

    Args:
        text: Tweet text, omitted when empty
        media_id: Identifier returned by the media upload, if any

    Returns:
        Keyword arguments for ``tweepy.Client.create_tweet``
    """
    payload: Dict[str, Any] = {}
    if text:
        payload["text"] = text
    if media_id:
        payload["media_ids"] = [media_id]
    return payload

class TwitterClient:
    """Short-lived Twitter client scoped to a single request's credentials.

    Media goes through the v1.1 upload endpoint and tweets through v2, both
    signed with the same OAuth 1.0a user context.
    """

    def __init__(self, app_key: str, app_secret: str, access_token: str, access_secret: str):
        self.auth = tweepy.OAuth1UserHandler(
            consumer_key=app_key,
            consumer_secret=app_secret,
            access_token=access_token,
            access_token_secret=access_secret,
        )
        self.api = tweepy.API(self.auth)
        self.client = tweepy.Client(
            consumer_key=app_key,
            consumer_secret=app_secret,
            access_token=access_token,
            access_token_secret=access_secret,
        )

    def upload_media(self, data: bytes, mime_type: str) -> str:
        """
        Upload media bytes using the v1.1 API.

        Videos are sent through the chunked upload with the tweet_video
        category so the platform processes them for use in a tweet.

        Args:
            data: Full media content
            mime_type: Declared MIME type of the content

        Returns:
            Media ID string
        """
        extension = MEDIA_EXTENSIONS.get(mime_type, mime_type.split("/")[-1])
        options: Dict[str, Any] = {}
        if mime_type.startswith("video/"):
            options["media_category"] = VIDEO_MEDIA_CATEGORY
            options["chunked"] = True

        logger.debug(f"Uploading {len(data)} bytes of {mime_type} media (options: {options})")
        media = self.api.media_upload(filename=f"media.{extension}", file=BytesIO(data), **options)
        media_id = str(media.media_id_string)
        logger.debug(f"Media uploaded with ID: {media_id}")
        return media_id

    def create_tweet(self, text: Optional[str] = None, media_ids: Optional[List[str]] = None) -> Optional[str]:
        """Publish a tweet using the v2 API and return its ID."""
        logger.debug(f"Creating tweet (text: {bool(text)}, media_ids: {media_ids})")
        response = self.client.create_tweet(text=text, media_ids=media_ids)
        data = getattr(response, "data", None) or {}
        tweet_id = data.get("id")
        logger.info(f"Tweet created with ID: {tweet_id}")
        return str(tweet_id) if tweet_id is not None else None

def build_client(credentials: TwitterCredentials) -> TwitterClient:
    """Create a client for one request from the caller's credentials."""
    return TwitterClient(
        app_key=credentials.app_key,
        app_secret=credentials.app_secret,
        access_token=credentials.access_token,
        access_secret=credentials.access_secret,
    )
