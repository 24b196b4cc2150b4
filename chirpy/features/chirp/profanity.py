"""Profanity filter for chirp bodies."""

PROFANE_WORDS = frozenset({"kerfuffle", "sharbert", "fornax"})
REPLACEMENT = "****"


def clean_body(body: str) -> str:
    """Replace profane words and normalise whitespace to single spaces.

    Matching is case-insensitive on whole whitespace-separated words, so
    "Sharbert!" is kept as is.
    """
    return " ".join(REPLACEMENT if word.lower() in PROFANE_WORDS else word for word in body.split())
