"""
URL configuration for the 42 OAuth provider.

These URLs are automatically included by django-allauth when the
provider is added to INSTALLED_APPS.

Standard allauth URL pattern:
- /accounts/fortytwo/login/ - Initiates OAuth flow
- /accounts/fortytwo/login/callback/ - OAuth callback endpoint
"""

from allauth.socialaccount.providers.oauth2.urls import default_urlpatterns

from .provider import FortyTwoProvider

urlpatterns = default_urlpatterns(FortyTwoProvider)
