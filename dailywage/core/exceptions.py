"""
Application error taxonomy.

Repositories and dependencies raise these; the handlers registered in
main.py turn them into JSON responses of the form {"detail": message}.
"""

from typing import Any, Dict, Sequence


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Missing or invalid input. The caller can retry with corrected data."""
    status_code = 400


class AuthError(AppError):
    """Missing, invalid or expired token, or bad login credentials."""
    status_code = 401


class NotFoundError(AppError):
    """The requested profile does not exist."""
    status_code = 404


class PersistenceError(AppError):
    """The relational store failed. Any open transaction has been rolled back."""
    status_code = 500


def describe_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """
    Build a one-line message naming the first offending field.

    Accepts the error list produced by pydantic (or FastAPI's
    RequestValidationError). Location segments such as "body" and
    "query" are dropped so the message uses the wire field name.
    """
    if not errors:
        return "Invalid request"

    error = errors[0]
    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query")]
    field = ".".join(loc)
    message = error.get("msg", "Invalid value")

    error_type = error.get("type")
    if error_type == "missing":
        return f"{field} is required" if field else "Request body is required"
    if error_type in ("string_too_short", "too_short") and (error.get("ctx") or {}).get("min_length") == 1:
        # blank string or empty list for a required field
        return f"{field} is required"
    if not field:
        # model-level validators report without a location
        return message.removeprefix("Value error, ")
    return f"{field}: {message.removeprefix('Value error, ')}"
