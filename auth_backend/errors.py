"""
Error taxonomy for the authentication flow.

Each error carries the HTTP status and the client-facing message it is
reported with. Internal details never go into ``message``.
"""
from typing import Any, Dict, List, Optional


class AuthError(Exception):
    """Base class for failures reported back to the caller."""

    status_code = 500
    message = "Something went wrong!"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(AuthError):
    """Request body is missing required fields or has empty values."""

    status_code = 400
    message = "Missing or invalid fields!"

    def __init__(self, fields: Optional[List[str]] = None, message: Optional[str] = None):
        self.fields = fields or []
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        body = super().to_dict()
        if self.fields:
            body["fields"] = self.fields
        return body


class DuplicateUser(AuthError):
    status_code = 400
    message = "User already exists!"


class UserNotFound(AuthError):
    status_code = 404
    message = "User not found!"


class InvalidCredentials(AuthError):
    status_code = 401
    message = "Invalid password!"


class InvalidToken(AuthError):
    status_code = 401
    message = "Invalid token!"


class StoreError(AuthError):
    """Any persistence failure other than a duplicate email."""

    status_code = 500
    message = "Database error!"
