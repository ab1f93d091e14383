from typing import Any, Dict, List

from fastapi import status


class BaseAPIException(Exception):
    """
    Parent class for every error the API raises on purpose.

    The exception handlers turn it into the `{"status": "Error", "error": ...}`
    envelope using `status_code`.
    """
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


# =========================================================
# 1. CLIENT INPUT ERRORS
# =========================================================

class BadRequestException(BaseAPIException):
    """400: empty or malformed body, bad path parameter."""
    def __init__(self, message: str = "Bad Request"):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
        )


class StudentValidationException(BadRequestException):
    """400: one or more Student fields failed validation."""
    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = errors
        super().__init__(message="validation failed")


# =========================================================
# 2. STORAGE ERRORS
# =========================================================

class StorageError(Exception):
    """
    Create/fetch/list failure from the persistence engine.

    Not-found is reported through this class too, so callers see a 500.
    """


# =========================================================
# 3. STARTUP ERRORS
# =========================================================

class StartupError(Exception):
    """Missing/invalid configuration or unreachable storage at boot."""
