"""Password hashing with Argon2 via pwdlib."""

from argon2.exceptions import InvalidHashError, VerificationError
from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError

pwd_hasher = PasswordHash.recommended()


def hash_password(password: str) -> str:
    """Hash a password using Argon2.

    Salt is generated per call and embedded in the returned hash together with
    the Argon2 parameters, so hashing the same password twice yields different
    strings that both verify.
    """
    return pwd_hasher.hash(password)


def check_password_hash(password: str, hashed_password: str) -> bool:
    """Verify a password against an Argon2 hash.

    Returns False for a mismatch and for hashes that cannot be identified or parsed.
    """
    try:
        return pwd_hasher.verify(password, hashed_password)
    except (UnknownHashError, InvalidHashError, VerificationError):
        return False
