from typing import Callable, Optional
from ..models.tweet_models import PublishRequest, TweetResponse, TwitterCredentials, ALLOWED_MEDIA_TYPES
from ..platforms.twitter import TwitterClient, build_client, build_tweet_payload
from .errors import ClientInputError, classify_platform_error
from .uploads import owned_upload, read_upload, remove_upload
from ..utils.logger import get_logger

logger = get_logger(__name__)

MISSING_CREDENTIALS = "Missing required Twitter credentials"
UNSUPPORTED_MEDIA_TYPE = "Unsupported media type"

ClientFactory = Callable[[TwitterCredentials], TwitterClient]

def publish_tweet(request: PublishRequest, client_factory: ClientFactory = build_client) -> TweetResponse:
    """
    Validate a publish request, upload its media and post the tweet.

    The temporary upload, if any, no longer exists when this returns or raises.

    Args:
        request: Text, credentials and optional uploaded media
        client_factory: Builds a platform client from the credentials

    Returns:
        TweetResponse carrying the new tweet's ID

    Raises:
        ClientInputError: Missing credentials or unsupported media type
        ExternalAuthorizationError: The platform refused the call (403)
        ExternalGenericError: Any other upload or publish failure
    """
    with owned_upload(request.media) as media:
        missing = request.credentials.missing_fields()
        if missing:
            logger.warning(f"Rejecting tweet request, missing credentials: {', '.join(missing)}")
            raise ClientInputError(MISSING_CREDENTIALS)

        if media is not None and media.mime_type not in ALLOWED_MEDIA_TYPES:
            logger.warning(f"Rejecting tweet request, unsupported media type: {media.mime_type}")
            raise ClientInputError(UNSUPPORTED_MEDIA_TYPE)

        try:
            client = client_factory(request.credentials)

            media_id: Optional[str] = None
            if media is not None:
                data = read_upload(media)
                try:
                    media_id = client.upload_media(data, media.mime_type)
                finally:
                    remove_upload(media)

            payload = build_tweet_payload(request.text, media_id)
            tweet_id = client.create_tweet(**payload)

        except Exception as e:
            logger.error(f"Error posting tweet: {str(e)}", exc_info=True)
            raise classify_platform_error(e) from e

    return TweetResponse(tweetId=tweet_id)
