"""
User profile handling for the 42 intranet API.

Decodes the body returned by ``/v2/me`` and maps it onto the generic user
shape consumed by the rest of the login flow.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from typing import Any

from allauth.socialaccount.providers.oauth2.client import OAuth2Error

logger = logging.getLogger(__name__)

EMAIL_VERIFICATION_UNSUPPORTED = "unsupported"


class FortyTwoAPIError(OAuth2Error):
    """Raised when the 42 API returns an unusable user profile."""


@dataclass
class FortyTwoAccessToken:
    """Bearer token issued by the 42 token endpoint."""

    token: str
    type: str = "bearer"
    expires_in: int | None = None
    scope: str | None = None
    created_at: int | None = None

    @classmethod
    def from_response(cls, data: dict) -> FortyTwoAccessToken:
        """Build a token from the JSON returned by ``/oauth/token``."""
        return cls(
            token=data["access_token"],
            expires_in=data.get("expires_in"),
            scope=data.get("scope"),
            created_at=data.get("created_at"),
        )

    def as_dict(self) -> dict:
        # Optional fields are left out when the provider didn't send them
        return {key: value for key, value in asdict(self).items() if value is not None}


@dataclass
class FortyTwoUser:
    """A 42 user profile in normalized form."""

    id: Any
    nick_name: str | None
    name: str
    email: str | None
    avatar_url: str | None
    original: dict
    token: FortyTwoAccessToken
    email_verification_state: str = field(default=EMAIL_VERIFICATION_UNSUPPORTED)

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "nickName": self.nick_name,
            "name": self.name,
            "email": self.email,
            "emailVerificationState": self.email_verification_state,
            "avatarUrl": self.avatar_url,
            "original": self.original,
            "token": self.token.as_dict(),
        }


def decode_profile(
    body: str | bytes | None,
    status_code: int | None,
    encoding: str | None = None,
) -> dict | list:
    """Decode a profile response body into a JSON object or array.

    Bytes are decoded strictly with ``encoding`` when the response declared
    one, otherwise ``json`` detects UTF-8, UTF-16 or UTF-32 on its own.
    Arrays are passed through and rejected later by the id check.

    Raises:
        FortyTwoAPIError: If the body is empty, is not valid JSON, or holds
            neither a JSON object nor an array.
    """
    if not body:
        logger.error("42 API returned an empty profile body (status %s)", status_code)
        raise FortyTwoAPIError(f"42 API returned no user data. Response status: {status_code}")

    try:
        if isinstance(body, bytes) and encoding:
            body = body.decode(encoding)
        data = json.loads(body)
    except (LookupError, ValueError) as e:
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="backslashreplace")
        logger.error("42 API returned a non-JSON profile body (status %s)", status_code)
        raise FortyTwoAPIError(f"Failed to parse 42 API response as JSON: {body}") from e

    if not isinstance(data, (dict, list)):
        logger.error("42 API returned no profile object (status %s)", status_code)
        raise FortyTwoAPIError(f"42 API returned no user data. Response status: {status_code}")

    return data


def normalize_user(data: dict | list, token: FortyTwoAccessToken) -> FortyTwoUser:
    """Map a raw ``/v2/me`` payload onto a :class:`FortyTwoUser`.

    The display name falls back to ``"<first_name> <last_name>"``; absent
    parts are not filtered out.
    """
    if not (isinstance(data, dict) and data.get("id")):
        logger.error("42 API profile has no id")
        raise FortyTwoAPIError(
            f"42 API returned invalid user data structure. User data: {json.dumps(data)}"
        )

    image = data.get("image")
    avatar_url = image.get("link") if isinstance(image, dict) else None

    return FortyTwoUser(
        id=data["id"],
        nick_name=data.get("login"),
        name=data.get("displayname") or f"{data.get('first_name')} {data.get('last_name')}",
        email=data.get("email"),
        avatar_url=avatar_url or None,
        original=data,
        token=token,
    )
