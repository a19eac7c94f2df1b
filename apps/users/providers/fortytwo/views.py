"""42 intranet OAuth2 adapter and views for django-allauth."""

from __future__ import annotations

import logging
from collections.abc import Callable

import requests
from allauth.socialaccount import app_settings
from allauth.socialaccount.providers.oauth2.views import (
    OAuth2Adapter,
    OAuth2CallbackView,
    OAuth2LoginView,
)
from requests.utils import get_encoding_from_headers

from .user import FortyTwoAccessToken, FortyTwoUser, decode_profile, normalize_user

logger = logging.getLogger(__name__)

AUTHORIZE_URL = "https://api.intra.42.fr/oauth/authorize"
ACCESS_TOKEN_URL = "https://api.intra.42.fr/oauth/token"
USER_INFO_URL = "https://api.intra.42.fr/v2/me"

# Seconds to wait for the profile endpoint
DEFAULT_TIMEOUT = 30

RequestCallback = Callable[[requests.Request], None]


class FortyTwoOAuth2Adapter(OAuth2Adapter):
    """OAuth2 adapter for the 42 intranet (api.intra.42.fr).

    Endpoint URLs default to the public 42 API and can be overridden per
    deployment:

        SOCIALACCOUNT_PROVIDERS = {
            "fortytwo": {
                "AUTHORIZE_URL": ...,
                "ACCESS_TOKEN_URL": ...,
                "USER_INFO_URL": ...,
                "CALLBACK_URL": ...,
                "TIMEOUT": 30,
            },
        }
    """

    provider_id = "fortytwo"

    code_param_name = "code"
    error_param_name = "error"
    state_param_name = "state"
    scope_param_name = "scope"
    scope_delimiter = " "
    login_cancelled_error = "access_denied"

    @property
    def settings(self) -> dict:
        return app_settings.PROVIDERS.get(self.provider_id, {})

    @property
    def authorize_url(self) -> str:
        return self.settings.get("AUTHORIZE_URL") or AUTHORIZE_URL

    @property
    def access_token_url(self) -> str:
        return self.settings.get("ACCESS_TOKEN_URL") or ACCESS_TOKEN_URL

    @property
    def profile_url(self) -> str:
        return self.settings.get("USER_INFO_URL") or USER_INFO_URL

    @property
    def timeout(self) -> float:
        return self.settings.get("TIMEOUT", DEFAULT_TIMEOUT)

    def get_callback_url(self, request, app):
        return self.settings.get("CALLBACK_URL") or super().get_callback_url(request, app)

    def access_denied(self) -> bool:
        """Return True when the provider reported that the user refused consent."""
        return self.request.GET.get(self.error_param_name) == self.login_cancelled_error

    def user(
        self,
        token: FortyTwoAccessToken,
        callback: RequestCallback | None = None,
    ) -> FortyTwoUser:
        """Fetch the profile of the user owning a token from the code exchange."""
        data = self._read_profile(token.token, callback)
        return normalize_user(data, token)

    def user_from_token(
        self,
        access_token: str,
        callback: RequestCallback | None = None,
    ) -> FortyTwoUser:
        """Fetch the profile of the user owning an externally obtained token."""
        data = self._read_profile(access_token, callback)
        return normalize_user(data, FortyTwoAccessToken(token=access_token))

    def complete_login(self, request, app, token, **kwargs):
        response = kwargs.get("response") or {"access_token": token.token}
        fortytwo_user = self.user(FortyTwoAccessToken.from_response(response))
        logger.info("42 login completed for %s", fortytwo_user.nick_name)
        return self.get_provider().sociallogin_from_response(request, fortytwo_user.original)

    def _read_profile(self, access_token: str, callback: RequestCallback | None) -> dict | list:
        request = requests.Request(
            "GET",
            self.profile_url,
            headers={"Authorization": f"Bearer {access_token}"},
        )
        if callable(callback):
            callback(request)

        with requests.Session() as session:
            response = session.send(request.prepare(), timeout=self.timeout)

        logger.debug("42 profile request returned status %s", response.status_code)
        # Only an explicitly declared charset overrides JSON encoding detection
        content_type = response.headers.get("Content-Type", "")
        encoding = None
        if "charset" in content_type.lower():
            encoding = get_encoding_from_headers(response.headers)
        return decode_profile(response.content, response.status_code, encoding)


oauth2_login = OAuth2LoginView.adapter_view(FortyTwoOAuth2Adapter)
oauth2_callback = OAuth2CallbackView.adapter_view(FortyTwoOAuth2Adapter)
