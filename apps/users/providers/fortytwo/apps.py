"""
Django app configuration for the 42 OAuth provider.
"""

from django.apps import AppConfig


class FortyTwoProviderConfig(AppConfig):
    """App configuration for 42 OAuth provider."""

    name = "apps.users.providers.fortytwo"
    verbose_name = "42 OAuth Provider"
