"""Chirp-related exceptions."""

from fastapi import HTTPException, status

from .models import MAX_CHIRP_LENGTH


class ChirpException(HTTPException):
    """Base chirp exception."""

    def __init__(self, detail: str = "Chirp operation failed", status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=detail)


class ChirpNotFound(ChirpException):
    """Raised when chirp is not found."""

    def __init__(self):
        super().__init__(detail="Chirp not found", status_code=status.HTTP_404_NOT_FOUND)


class ChirpTooLong(ChirpException):
    """Raised when a chirp body exceeds the maximum length."""

    def __init__(self):
        super().__init__(detail=f"Chirp is too long. Max length is {MAX_CHIRP_LENGTH}")


class NotChirpAuthor(ChirpException):
    """Raised when a user tries to delete someone else's chirp."""

    def __init__(self):
        super().__init__(detail="You can only delete your own chirps", status_code=status.HTTP_403_FORBIDDEN)


class ChirpBodyMissing(ChirpException):
    """Raised when a chirp body is empty or only whitespace."""

    def __init__(self):
        super().__init__(detail="Missing data field")
