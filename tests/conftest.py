import os
import uuid

os.environ.setdefault('ENVIRONMENT', 'testing')
os.environ.setdefault('LOG_FILE', '')
os.environ.setdefault('LOG_LEVEL', 'DEBUG')

import pytest
from fastapi.testclient import TestClient
from tweet_service.config import get_settings
from tweet_service.main import app
from tweet_service.models.tweet_models import PublishRequest, TwitterCredentials, UploadedMedia
from tweet_service.routes.tweet_routes import get_client_factory

class FakeTwitterClient:
    """Records platform calls instead of talking to Twitter."""

    def __init__(self, media_id="1880000000000000001", tweet_id="1880000000000000002",
                 upload_error=None, tweet_error=None):
        self.media_id = media_id
        self.tweet_id = tweet_id
        self.upload_error = upload_error
        self.tweet_error = tweet_error
        self.calls = []

    def upload_media(self, data, mime_type):
        self.calls.append(('upload_media', {'data': data, 'mime_type': mime_type}))
        if self.upload_error:
            raise self.upload_error
        return self.media_id

    def create_tweet(self, **payload):
        self.calls.append(('create_tweet', payload))
        if self.tweet_error:
            raise self.tweet_error
        return self.tweet_id

    @property
    def call_names(self):
        return [name for name, _ in self.calls]

class FakeClientFactory:
    """Stands in for build_client and remembers every client it hands out."""

    def __init__(self, client=None):
        self.client = client or FakeTwitterClient()
        self.credentials = []

    def __call__(self, credentials):
        self.credentials.append(credentials)
        return self.client

@pytest.fixture
def credentials():
    return TwitterCredentials(
        app_key='test_app_key',
        app_secret='test_app_secret',
        access_token='test_access_token',
        access_secret='test_access_secret',
    )

@pytest.fixture
def form_credentials():
    return {
        'appKey': 'test_app_key',
        'appSecret': 'test_app_secret',
        'accessToken': 'test_access_token',
        'accessSecret': 'test_access_secret',
    }

@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    """Point the service's upload directory at a per-test location."""
    directory = tmp_path / 'uploads'
    monkeypatch.setattr(get_settings(), 'UPLOAD_DIR', str(directory))
    return directory

@pytest.fixture
def make_media(tmp_path):
    """Create a temporary upload on disk as the multipart parser would."""
    def _make(mime_type='image/png', content=b'\x89PNG\r\n\x1a\nfake-image'):
        path = tmp_path / uuid.uuid4().hex
        path.write_bytes(content)
        return UploadedMedia(
            temporary_path=str(path),
            mime_type=mime_type,
            size_bytes=len(content),
            filename='picture',
        )
    return _make

@pytest.fixture
def make_request(credentials):
    def _make(text=None, media=None, **overrides):
        creds = credentials.model_copy(update=overrides)
        return PublishRequest(text=text, credentials=creds, media=media)
    return _make

@pytest.fixture
def fake_factory():
    return FakeClientFactory()

@pytest.fixture
def client(fake_factory, upload_dir):
    """Test client with the Twitter client replaced by a fake."""
    app.dependency_overrides[get_client_factory] = lambda: fake_factory
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
