import pytest

from ..config import FacebookConfig, OAuth2Config
from ..client import FacebookGraphClient
from ..testing import MockGraphClient

VERSION = "v21.0"


@pytest.fixture
def config():
    return FacebookConfig(
        version=VERSION,
        oauth2=OAuth2Config(
            client_id="1234567890",
            client_secret="app-secret",
            scopes=["ads_management", "email"],
            redirect_url="https://example.com/callback",
        ),
    )


@pytest.fixture
def client(config):
    """Unauthorized client."""
    return FacebookGraphClient(config)


@pytest.fixture
def authed_client(client):
    return client.auth("user-token")


@pytest.fixture
def mock_client():
    """Create a mock Graph client for testing."""
    return MockGraphClient()
