"""Infrastructure layer for Arctic Spa integration.

This package contains core infrastructure components:
- API utilities (decorators, status caching)
- Error definitions
"""

from .api import (
    DEFAULT_MIN_STATUS_INTERVAL,
    DEFAULT_REQUEST_TIMEOUT,
    StatusCache,
    api_get,
    api_put,
)
from .errors import (
    ArcticSpaAPIError,
    ArcticSpaConnectionError,
    ArcticSpaError,
    ArcticSpaMalformedResponseError,
    ArcticSpaTimeoutError,
    ArcticSpaValidationError,
)

__all__ = [
    # API decorators and utilities
    "api_get",
    "api_put",
    "StatusCache",
    # API constants
    "DEFAULT_MIN_STATUS_INTERVAL",
    "DEFAULT_REQUEST_TIMEOUT",
    # Errors
    "ArcticSpaError",
    "ArcticSpaConnectionError",
    "ArcticSpaAPIError",
    "ArcticSpaTimeoutError",
    "ArcticSpaMalformedResponseError",
    "ArcticSpaValidationError",
]
