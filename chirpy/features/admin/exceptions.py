"""Admin-related exceptions."""

from fastapi import HTTPException, status


class ResetForbidden(HTTPException):
    """Raised when a reset is attempted outside the development environment."""

    def __init__(self):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail="Reset is only allowed in development")
