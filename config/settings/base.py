"""
Django base settings for the 42 sign-in platform.

Values that differ between deployments are read from the environment
(or a .env file at the project root) with django-environ.
"""

from pathlib import Path

import environ

BASE_DIR = Path(__file__).resolve().parent.parent.parent

env = environ.Env()
env_file = BASE_DIR / ".env"
if env_file.exists():
    environ.Env.read_env(str(env_file))

SECRET_KEY = env("DJANGO_SECRET_KEY", default="insecure-dev-key-change-me")
DEBUG = env.bool("DJANGO_DEBUG", default=False)
ALLOWED_HOSTS = env.list("DJANGO_ALLOWED_HOSTS", default=[])

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.sites",
    "django.contrib.staticfiles",
    "allauth",
    "allauth.account",
    "allauth.socialaccount",
    "apps.users.providers.fortytwo",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "allauth.account.middleware.AccountMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

DATABASES = {
    "default": env.db("DATABASE_URL", default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

AUTHENTICATION_BACKENDS = [
    "django.contrib.auth.backends.ModelBackend",
    "allauth.account.auth_backends.AuthenticationBackend",
]

SITE_ID = 1

STATIC_URL = "static/"

LOGIN_REDIRECT_URL = "/"

# django-allauth
SOCIALACCOUNT_LOGIN_ON_GET = env.bool("SOCIALACCOUNT_LOGIN_ON_GET", default=False)

_fortytwo_app = {}
if env("FORTYTWO_CLIENT_ID", default=""):
    _fortytwo_app = {
        "client_id": env("FORTYTWO_CLIENT_ID"),
        "secret": env("FORTYTWO_CLIENT_SECRET", default=""),
    }

SOCIALACCOUNT_PROVIDERS = {
    "fortytwo": {
        "SCOPE": ["public"],
        "CALLBACK_URL": env("FORTYTWO_CALLBACK_URL", default=None),
        "AUTHORIZE_URL": env("FORTYTWO_AUTHORIZE_URL", default=None),
        "ACCESS_TOKEN_URL": env("FORTYTWO_ACCESS_TOKEN_URL", default=None),
        "USER_INFO_URL": env("FORTYTWO_USER_INFO_URL", default=None),
        "TIMEOUT": env.int("FORTYTWO_TIMEOUT", default=30),
    },
}
if _fortytwo_app:
    SOCIALACCOUNT_PROVIDERS["fortytwo"]["APP"] = _fortytwo_app
