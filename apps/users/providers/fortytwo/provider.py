"""42 intranet OAuth2 provider for django-allauth."""

from allauth.socialaccount.providers.base import ProviderAccount
from allauth.socialaccount.providers.oauth2.provider import OAuth2Provider

from .views import FortyTwoOAuth2Adapter


class FortyTwoAccount(ProviderAccount):
    def get_avatar_url(self) -> str | None:
        image = self.account.extra_data.get("image")
        if isinstance(image, dict):
            return image.get("link") or None
        return None

    def to_str(self) -> str:
        return self.account.extra_data.get("login") or super().to_str()


class FortyTwoProvider(OAuth2Provider):
    """
    OAuth2 provider for the 42 intranet.

    To add this provider:
    1. Add 'apps.users.providers.fortytwo' to INSTALLED_APPS
    2. Register an application on https://profile.intra.42.fr/oauth/applications
       with the redirect URI /accounts/fortytwo/login/callback/
    3. Create a SocialApp via Django admin (or set FORTYTWO_CLIENT_ID and
       FORTYTWO_CLIENT_SECRET) with:
       - Provider: fortytwo
       - Client ID: Your 42 application UID
       - Secret Key: Your 42 application secret
    """

    id = "fortytwo"
    name = "42"
    account_class = FortyTwoAccount
    oauth2_adapter_class = FortyTwoOAuth2Adapter

    def get_default_scope(self) -> list[str]:
        return ["public"]

    def get_auth_params(self) -> dict:
        params = super().get_auth_params()
        params["response_type"] = "code"
        return params

    def extract_uid(self, data: dict) -> str:
        return str(data["id"])

    def extract_common_fields(self, data: dict) -> dict:
        return {
            "username": data.get("login"),
            "email": data.get("email"),
            "first_name": data.get("first_name"),
            "last_name": data.get("last_name"),
            "name": data.get("displayname"),
        }


provider_classes = [FortyTwoProvider]
