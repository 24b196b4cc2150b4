"""Authorization header parsing."""

BEARER_SCHEME = "Bearer"
API_KEY_SCHEME = "ApiKey"


def _extract_credentials(header: str | None, scheme: str) -> str:
    # Strict parsing: exactly "<Scheme> <value>" separated by a single space,
    # scheme compared case-sensitively.
    if not header:
        return ""
    parts = header.split(" ")
    if len(parts) != 2 or parts[0] != scheme:
        return ""
    return parts[1]


def extract_bearer_token(header: str | None) -> str:
    """Return the token from an ``Authorization: Bearer <token>`` header.

    An empty string means no usable token was found.
    """
    return _extract_credentials(header, BEARER_SCHEME)


def extract_api_key(header: str | None) -> str:
    """Return the key from an ``Authorization: ApiKey <key>`` header, or ""."""
    return _extract_credentials(header, API_KEY_SCHEME)
