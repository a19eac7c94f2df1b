"""
Django test settings for the 42 sign-in platform.
"""

from .base import *  # noqa: F401, F403

DEBUG = False

# Use faster password hasher in tests
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

# No models of our own, an in-memory SQLite database covers allauth's tables.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Disable email sending in tests
EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"

# Fixed OAuth app so provider lookups never depend on the environment
SOCIALACCOUNT_PROVIDERS = {
    "fortytwo": {
        "APP": {
            "client_id": "test-client-id",
            "secret": "test-client-secret",
        },
        "SCOPE": ["public"],
    },
}
