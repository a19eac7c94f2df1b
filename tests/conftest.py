"""
Pytest configuration and fixtures for the 42 provider tests.
"""
import pytest
from allauth.socialaccount.models import SocialApp

from apps.users.providers.fortytwo.user import FortyTwoAccessToken
from apps.users.providers.fortytwo.views import FortyTwoOAuth2Adapter


@pytest.fixture
def app():
    """An unsaved SocialApp carrying the test client credentials."""
    return SocialApp(
        provider="fortytwo",
        name="42",
        client_id="test-client-id",
        secret="test-client-secret",
    )


@pytest.fixture
def adapter(rf):
    return FortyTwoOAuth2Adapter(rf.get("/accounts/fortytwo/login/callback/"))


@pytest.fixture
def token_response():
    """Body returned by the 42 token endpoint."""
    return {
        "access_token": "exchanged-token",
        "token_type": "bearer",
        "expires_in": 7200,
        "refresh_token": "refresh-token",
        "scope": "public",
        "created_at": 1700000000,
    }


@pytest.fixture
def access_token(token_response):
    return FortyTwoAccessToken.from_response(token_response)


@pytest.fixture
def profile():
    """A trimmed-down /v2/me payload."""
    return {
        "id": 1,
        "login": "jdoe",
        "displayname": "John Doe",
        "first_name": "John",
        "last_name": "Doe",
        "email": "j@d.co",
        "image": {"link": "http://x/y.png", "versions": {}},
        "campus": [{"id": 1, "name": "Paris"}],
    }
