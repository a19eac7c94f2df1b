"""
42 intranet OAuth2 provider for django-allauth.

42 (https://42.fr/) is a network of coding schools; students and staff sign
in through the 42 intranet at https://intra.42.fr/.

Usage:
    1. Add 'apps.users.providers.fortytwo' to INSTALLED_APPS
    2. Configure OAuth app credentials via Django admin (SocialApp model)
       or the FORTYTWO_* environment variables
    3. The provider will be available at /accounts/fortytwo/login/

For the 42 API documentation, see:
https://api.intra.42.fr/apidoc
"""
