"""Tests for Authorization header parsing."""

import pytest

from chirpy.features.auth.bearer import extract_api_key, extract_bearer_token


class TestExtractBearerToken:
    def test_extracts_token(self):
        assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    def test_absent_header(self):
        assert extract_bearer_token(None) == ""

    @pytest.mark.parametrize(
        "header",
        [
            "",
            "Basic xyz",
            "Bearer",
            "Bearer  abc",  # two spaces
            "bearer abc",  # scheme is case-sensitive
            "BEARER abc",
            "Bearer abc extra",
            " Bearer abc",
            "ApiKey abc",
        ],
    )
    def test_rejected_headers_yield_empty(self, header):
        assert extract_bearer_token(header) == ""


class TestExtractApiKey:
    def test_extracts_key(self):
        assert extract_api_key("ApiKey f271c81ff7084ee5b99a5091b42d486e") == "f271c81ff7084ee5b99a5091b42d486e"

    @pytest.mark.parametrize("header", [None, "", "Bearer abc", "apikey abc", "ApiKey  abc", "ApiKey"])
    def test_rejected_headers_yield_empty(self, header):
        assert extract_api_key(header) == ""
