"""Error taxonomy for semantic_pen.

Every failure raised by SemanticPenClient is a SemanticPenError subclass.
Callers discriminate by class to decide between fixing input, refreshing the
API key, backing off, or reporting the failure.
"""

from typing import Optional


class SemanticPenError(Exception):
    """Base class for all SDK errors."""

    error_code = "SDK_ERROR"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        if error_code is not None:
            self.error_code = error_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message


class ValidationError(SemanticPenError):
    """Caller-supplied input was rejected, locally or by the API (4xx)."""

    error_code = "VALIDATION_ERROR"


class AuthenticationError(SemanticPenError):
    """The API key was rejected (HTTP 401)."""

    error_code = "AUTHENTICATION_ERROR"

    def __init__(self, message: str = "Invalid API key", status_code: Optional[int] = 401):
        super().__init__(message, status_code)


class RateLimitError(SemanticPenError):
    """The request was throttled (HTTP 429).

    retry_after holds the server's Retry-After hint in seconds, when given.
    """

    error_code = "RATE_LIMIT_ERROR"

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        status_code: Optional[int] = 429,
        retry_after: Optional[float] = None,
    ):
        super().__init__(message, status_code)
        self.retry_after = retry_after


class APIError(SemanticPenError):
    """Server-side failure (5xx) or a success response that could not be decoded."""

    error_code = "API_ERROR"


class NetworkError(SemanticPenError):
    """Transport failure, unusable URL, or an unexpected status code."""

    error_code = "NETWORK_ERROR"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, status_code)
        self.cause = cause
