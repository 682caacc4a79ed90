"""Exceptions for the FakturoidPy library."""

from typing import Any

import httpx


class FakturoidAPIError(httpx.HTTPStatusError):
    """Base exception for all Fakturoid API errors.

    Extends httpx.HTTPStatusError so users can catch both FakturoidAPIError
    and httpx.HTTPStatusError to handle API errors.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_data: dict[str, Any] | None = None,
        request: httpx.Request | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        """Initialize FakturoidAPIError.

        Args:
            message: Error message
            status_code: HTTP status code from the API response
            response_data: Decoded JSON body of the response, if any
            request: The request that caused the error
            response: The response from the API
        """
        if request is not None and response is not None:
            super().__init__(message, request=request, response=response)
        else:
            Exception.__init__(self, message)

        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}

    @property
    def errors(self) -> dict[str, list[str]]:
        """Field errors reported by the API, keyed by attribute name."""
        errors = self.response_data.get("errors")
        if isinstance(errors, dict):
            return errors
        return {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class FakturoidBadRequestError(FakturoidAPIError):
    """Raised when the request is malformed (400)."""

    pass


class FakturoidAuthError(FakturoidAPIError):
    """Raised when authentication fails (401/403)."""

    pass


class FakturoidNotFoundError(FakturoidAPIError):
    """Raised when a resource is not found (404)."""

    pass


class FakturoidValidationError(FakturoidAPIError):
    """Raised when the entity sent to the API is invalid (422).

    The offending attributes are available in :attr:`errors`.
    """

    pass


class FakturoidRateLimitError(FakturoidAPIError):
    """Raised when rate limit is exceeded (429)."""

    pass


class FakturoidServerError(FakturoidAPIError):
    """Raised when server encounters an error (5xx)."""

    pass


class FakturoidFormatError(ValueError):
    """Raised when a response does not have the shape the client expects.

    Typically the ``Location`` header of a creation response which does not
    end with a numeric entity id.
    """

    pass
