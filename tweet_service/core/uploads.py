"""
Temporary storage for multipart uploads.

Each request owns at most one file under the upload directory. The publisher
acquires it through ``owned_upload`` so the file is removed on every exit path.
"""
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional
import os
import shutil
import uuid
from fastapi import UploadFile
from ..models.tweet_models import UploadedMedia
from ..utils.logger import get_logger

logger = get_logger(__name__)

def save_upload(upload: Optional[UploadFile], upload_dir: str) -> Optional[UploadedMedia]:
    """
    Write a multipart file field to a uniquely named temporary file.

    Args:
        upload: File field from the request, if any
        upload_dir: Directory that receives the temporary file

    Returns:
        UploadedMedia describing the stored file, or None when nothing was sent
    """
    if upload is None or not upload.filename:
        return None

    directory = Path(upload_dir)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / uuid.uuid4().hex

    try:
        with open(path, "wb") as buffer:
            shutil.copyfileobj(upload.file, buffer)
    except OSError as e:
        logger.error(f"Error storing upload {upload.filename}: {str(e)}")
        if path.exists():
            path.unlink()
        raise

    media = UploadedMedia(
        temporary_path=str(path),
        mime_type=upload.content_type or "application/octet-stream",
        size_bytes=path.stat().st_size,
        filename=upload.filename,
    )
    logger.debug(f"Stored upload {upload.filename} ({media.mime_type}, {media.size_bytes} bytes) at {path}")
    return media

def read_upload(media: UploadedMedia) -> bytes:
    with open(media.temporary_path, "rb") as f:
        return f.read()

def remove_upload(media: Optional[UploadedMedia]) -> bool:
    """Delete the temporary file if it still exists. Returns True if removed."""
    if media is None or not os.path.exists(media.temporary_path):
        return False
    os.remove(media.temporary_path)
    logger.debug(f"Removed temporary upload {media.temporary_path}")
    return True

@contextmanager
def owned_upload(media: Optional[UploadedMedia]) -> Iterator[Optional[UploadedMedia]]:
    """Hold the temporary file for the duration of the block, then delete it."""
    try:
        yield media
    finally:
        remove_upload(media)
