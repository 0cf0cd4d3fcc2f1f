"""Custom exceptions for Arctic Spa integration."""

from __future__ import annotations


class ArcticSpaError(Exception):
    """Base exception for Arctic Spa."""


class ArcticSpaConnectionError(ArcticSpaError):
    """Raised when the connection to the Arctic Spas API fails."""


class ArcticSpaTimeoutError(ArcticSpaError):
    """Raised when a request does not complete within the configured timeout."""


class ArcticSpaAPIError(ArcticSpaError):
    """Raised when the API responds with a non-success status.

    Attributes:
        status: HTTP status code.
        reason: HTTP status text.
        body: Response body text, if it could be read.
    """

    def __init__(self, status: int, reason: str | None = None, body: str | None = None):
        self.status = status
        self.reason = reason
        self.body = body
        message = f"HTTP {status}"
        if reason:
            message += f" {reason}"
        if body:
            message += f": {body}"
        super().__init__(message)


class ArcticSpaMalformedResponseError(ArcticSpaError):
    """Raised when a success response cannot be interpreted as expected."""


class ArcticSpaValidationError(ArcticSpaError):
    """Raised when input validation fails."""
