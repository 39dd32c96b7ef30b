"""Custom exceptions"""

from typing import Any, Dict, List


class TileJSONError(Exception):
    """Base exception"""


class DecodeError(TileJSONError):
    """TileJSON text is not valid JSON or does not match the document schema."""

    def __init__(self, message: str, errors: List[Dict[str, Any]] = None):
        """Keep the individual field errors."""
        super().__init__(message)
        self.errors = errors or []


class TileJSONAuthError(TileJSONError):
    """Authentication error"""


class TileJSONNotFoundError(TileJSONError):
    """TileJSON not found error"""


class TileJSONExistsError(TileJSONError):
    """TileJSON already exists."""


_HTTP_EXCEPTIONS = {
    401: TileJSONAuthError,
    403: TileJSONAuthError,
    404: TileJSONNotFoundError,
}

_FILE_EXCEPTIONS = {FileNotFoundError: TileJSONNotFoundError}
