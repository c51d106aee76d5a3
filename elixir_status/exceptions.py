"""
Domain specific exception hierarchy for the elixir_status package.
"""

class ElixirStatusError(Exception):
    """Base exception for all publisher errors."""


class ConfigurationError(ElixirStatusError):
    """Raised when required configuration or credentials are missing."""


class ApiResponseError(ElixirStatusError):
    """Raised when the Twitter API returns an error payload."""

    def __init__(self, message: str, *, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


class RateLimitExceeded(ApiResponseError):
    """Raised when the Twitter API enforces a rate limit."""

    def __init__(self, message: str, *, reset_at: int | None = None) -> None:
        super().__init__(message)
        self.reset_at = reset_at
