"""
Search provider errors.

The ranking core never raises; these are for the provider layer, where a
failed request has to reach the caller.
"""


class LegalSearchError(Exception):
    """Base class for search provider failures."""


class AustLiiError(LegalSearchError):
    """AustLII search request failed (after retries)."""

    def __init__(self, message: str, status_code: int | None = None, cause: BaseException | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.cause = cause
