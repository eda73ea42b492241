"""
Error taxonomy for meal data fetching.

The connector raises these; MealDataService catches them at the operation
boundary, logs them and hands them back inside a FetchResult. Each class carries
a short `kind` string so callers can branch without isinstance checks.
"""

from typing import Optional


class MealServiceError(Exception):
    """Base class for all meal data errors."""
    kind = "error"


class TransportError(MealServiceError):
    """
    Exception raised when the request does not produce a usable response.

    This covers:
    - Connection failures and timeouts
    - Non-2xx HTTP status codes (status_code is set)
    """
    kind = "transport"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(MealServiceError):
    """Exception raised when the response body is not the expected JSON shape."""
    kind = "decode"


class NotFoundError(MealServiceError):
    """Exception raised when a lookup returns no meal."""
    kind = "not_found"


class InvalidRequestError(MealServiceError):
    """Exception raised when a request URL cannot be built (e.g. blank meal id)."""
    kind = "invalid_request"
