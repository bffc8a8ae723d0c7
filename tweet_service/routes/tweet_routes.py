from fastapi import APIRouter, Depends, File, Form, UploadFile
from starlette.concurrency import run_in_threadpool
from typing import Optional
from ..config import get_settings
from ..core.publisher import ClientFactory, publish_tweet
from ..core.uploads import save_upload
from ..models.tweet_models import ErrorResponse, PublishRequest, TweetResponse, TwitterCredentials
from ..platforms.twitter import build_client
from ..utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter()

def get_client_factory() -> ClientFactory:
    """Dependency returning the per-request Twitter client builder."""
    return build_client

@router.post(
    "/api/tweet",
    response_model=TweetResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def post_tweet(
    text: Optional[str] = Form(None),
    app_key: Optional[str] = Form(None, alias="appKey"),
    app_secret: Optional[str] = Form(None, alias="appSecret"),
    access_token: Optional[str] = Form(None, alias="accessToken"),
    access_secret: Optional[str] = Form(None, alias="accessSecret"),
    media: Optional[UploadFile] = File(None),
    client_factory: ClientFactory = Depends(get_client_factory),
) -> TweetResponse:
    """
    Publish a tweet with optional media on behalf of the caller.

    Credentials are taken from the form on every request and never stored.
    Validation and platform errors propagate as TweetServiceError and are
    rendered by the application's exception handler.
    """
    settings = get_settings()
    uploaded = await run_in_threadpool(save_upload, media, settings.UPLOAD_DIR)

    request = PublishRequest(
        text=text,
        credentials=TwitterCredentials(
            app_key=app_key,
            app_secret=app_secret,
            access_token=access_token,
            access_secret=access_secret,
        ),
        media=uploaded,
    )
    logger.info(f"Received tweet request (text: {bool(text)}, media: {uploaded.mime_type if uploaded else None})")

    return await run_in_threadpool(publish_tweet, request, client_factory)
