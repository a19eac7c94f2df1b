import json

import pytest

from apps.users.providers.fortytwo.user import (
    FortyTwoAccessToken,
    FortyTwoAPIError,
    decode_profile,
    normalize_user,
)


class TestFortyTwoAccessToken:
    def test_from_token_response(self, token_response):
        token = FortyTwoAccessToken.from_response(token_response)
        assert token.token == "exchanged-token"
        assert token.type == "bearer"
        assert token.expires_in == 7200
        assert token.scope == "public"
        assert token.created_at == 1700000000

    def test_bare_token_as_dict(self):
        assert FortyTwoAccessToken(token="tok123").as_dict() == {
            "token": "tok123",
            "type": "bearer",
        }


class TestNormalizeUser:
    def test_maps_profile(self, profile, access_token):
        user = normalize_user(profile, access_token)

        assert user.id == 1
        assert user.nick_name == "jdoe"
        assert user.name == "John Doe"
        assert user.email == "j@d.co"
        assert user.email_verification_state == "unsupported"
        assert user.avatar_url == "http://x/y.png"
        assert user.original is profile
        assert user.token is access_token

    def test_as_dict_uses_public_field_names(self, profile, access_token):
        data = normalize_user(profile, access_token).as_dict()
        assert data == {
            "id": 1,
            "nickName": "jdoe",
            "name": "John Doe",
            "email": "j@d.co",
            "emailVerificationState": "unsupported",
            "avatarUrl": "http://x/y.png",
            "original": profile,
            "token": {
                "token": "exchanged-token",
                "type": "bearer",
                "expires_in": 7200,
                "scope": "public",
                "created_at": 1700000000,
            },
        }

    def test_name_falls_back_to_first_and_last_name(self, profile, access_token):
        del profile["displayname"]
        assert normalize_user(profile, access_token).name == "John Doe"

    def test_name_fallback_keeps_missing_parts(self, access_token):
        user = normalize_user({"id": 7}, access_token)
        assert user.name == "None None"

    def test_missing_image_gives_no_avatar(self, profile, access_token):
        del profile["image"]
        assert normalize_user(profile, access_token).avatar_url is None

    def test_image_without_link_gives_no_avatar(self, profile, access_token):
        profile["image"] = {"link": None, "versions": {}}
        assert normalize_user(profile, access_token).avatar_url is None

    def test_missing_id_raises(self, profile, access_token):
        del profile["id"]
        with pytest.raises(FortyTwoAPIError, match="invalid user data structure") as exc:
            normalize_user(profile, access_token)
        assert json.dumps(profile) in str(exc.value)

    def test_null_id_raises(self, profile, access_token):
        profile["id"] = None
        with pytest.raises(FortyTwoAPIError, match="invalid user data structure"):
            normalize_user(profile, access_token)


class TestDecodeProfile:
    def test_decodes_json_object(self, profile):
        assert decode_profile(json.dumps(profile).encode(), 200) == profile

    def test_invalid_json_reports_body(self):
        with pytest.raises(
            FortyTwoAPIError, match="Failed to parse 42 API response as JSON: not json"
        ):
            decode_profile("not json", 200)

    def test_empty_body_reports_status(self):
        with pytest.raises(FortyTwoAPIError, match="Response status: 204"):
            decode_profile(b"", 204)

    def test_json_null_reports_status(self):
        with pytest.raises(FortyTwoAPIError, match="Response status: 200"):
            decode_profile("null", 200)

    def test_empty_object_is_left_to_id_check(self, access_token):
        data = decode_profile("{}", 200)
        assert data == {}
        with pytest.raises(FortyTwoAPIError, match="invalid user data structure"):
            normalize_user(data, access_token)

    def test_json_array_is_left_to_id_check(self, access_token):
        data = decode_profile("[1, 2]", 200)
        assert data == [1, 2]
        with pytest.raises(
            FortyTwoAPIError, match=r"invalid user data structure\. User data: \[1, 2\]"
        ):
            normalize_user(data, access_token)

    def test_array_of_profiles_is_rejected(self, access_token):
        data = decode_profile('[{"id": 1}]', 200)
        with pytest.raises(FortyTwoAPIError, match="invalid user data structure"):
            normalize_user(data, access_token)

    def test_bytes_detect_utf16_without_declared_encoding(self, profile):
        assert decode_profile(json.dumps(profile).encode("utf-16"), 200) == profile

    def test_bytes_use_declared_encoding(self):
        body = '{"id": 1, "login": "jérôme"}'.encode("iso-8859-1")
        assert decode_profile(body, 200, "iso-8859-1")["login"] == "jérôme"

    def test_invalid_utf8_bytes_raise_instead_of_replacing(self):
        with pytest.raises(FortyTwoAPIError, match="Failed to parse 42 API response as JSON"):
            decode_profile(b'{"id": 1, "login": "j\xffd"}', 200)

    def test_undecodable_bytes_for_declared_encoding_raise(self):
        with pytest.raises(FortyTwoAPIError, match="Failed to parse 42 API response as JSON"):
            decode_profile(b'{"id": 1, "login": "j\xffd"}', 200, "utf-8")

    def test_unknown_declared_encoding_raises(self):
        with pytest.raises(FortyTwoAPIError, match="Failed to parse 42 API response as JSON"):
            decode_profile(b'{"id": 1}', 200, "no-such-codec")
