"""Tests for access token issuance and validation."""

import time

import jwt
import pytest

from chirpy.features.auth.jwt_utils import (
    TOKEN_ISSUER,
    issue_access_token,
    make_refresh_token,
    validate_access_token,
)

SECRET = "test-secret-key"
USER_ID = "4d257297-5aad-47b5-b8a5-a4afe5c1905c"


class TestIssueAndValidate:
    def test_valid_token_round_trips_claims(self):
        token = issue_access_token(USER_ID, 3600, SECRET)
        payload = validate_access_token(token, SECRET)

        assert payload is not None
        assert payload["sub"] == USER_ID
        assert payload["iss"] == TOKEN_ISSUER
        assert isinstance(payload["iat"], int)
        assert isinstance(payload["exp"], int)

    @pytest.mark.parametrize("lifetime", [1, 60, 3600, 86400])
    def test_expiry_is_issued_at_plus_lifetime(self, lifetime):
        payload = validate_access_token(issue_access_token(USER_ID, lifetime, SECRET), SECRET)
        assert payload is not None
        assert payload["exp"] == payload["iat"] + lifetime

    def test_issued_at_is_now(self):
        payload = validate_access_token(issue_access_token(USER_ID, 60, SECRET), SECRET)
        assert abs(payload["iat"] - time.time()) < 5

    def test_negative_lifetime_is_already_expired(self):
        token = issue_access_token(USER_ID, -1, SECRET)
        assert validate_access_token(token, SECRET) is None

    def test_wrong_secret_rejected(self):
        token = issue_access_token(USER_ID, 3600, SECRET)
        assert validate_access_token(token, "wrong-secret-key") is None

    @pytest.mark.parametrize("token", ["", "not.a.valid.token", "abc", "a.b.c"])
    def test_malformed_token_rejected(self, token):
        assert validate_access_token(token, SECRET) is None

    def test_tampered_payload_rejected(self):
        header, _, signature = issue_access_token(USER_ID, 3600, SECRET).split(".")
        forged_payload = jwt.encode({"sub": "someone-else"}, "other", algorithm="HS256").split(".")[1]
        assert validate_access_token(f"{header}.{forged_payload}.{signature}", SECRET) is None

    def test_foreign_issuer_rejected(self):
        now = int(time.time())
        token = jwt.encode(
            {"iss": "not-chirpy", "sub": USER_ID, "iat": now, "exp": now + 60}, SECRET, algorithm="HS256"
        )
        assert validate_access_token(token, SECRET) is None

    def test_missing_expiry_rejected(self):
        token = jwt.encode({"iss": TOKEN_ISSUER, "sub": USER_ID, "iat": int(time.time())}, SECRET, algorithm="HS256")
        assert validate_access_token(token, SECRET) is None

    def test_unsigned_token_rejected(self):
        now = int(time.time())
        token = jwt.encode({"iss": TOKEN_ISSUER, "sub": USER_ID, "iat": now, "exp": now + 60}, None, algorithm="none")
        assert validate_access_token(token, SECRET) is None


class TestMakeRefreshToken:
    def test_is_64_hex_characters(self):
        token = make_refresh_token()
        assert len(token) == 64
        int(token, 16)

    def test_tokens_are_unique(self):
        assert len({make_refresh_token() for _ in range(50)}) == 50
