"""Base client functionality for Fakturoid API."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from fakturoidpy._version import __version__
from fakturoidpy.exceptions import (
    FakturoidAPIError,
    FakturoidAuthError,
    FakturoidBadRequestError,
    FakturoidFormatError,
    FakturoidNotFoundError,
    FakturoidRateLimitError,
    FakturoidServerError,
    FakturoidValidationError,
)

T = TypeVar("T")

QueryParams = Mapping[str, Any] | BaseModel

ENTITY_URI_FORMAT = "scheme://anystring/123456.json"


class ClientConfig:
    """Configuration for Fakturoid API client."""

    BASE_URL = "https://app.fakturoid.cz/api/v1/{account}/"
    DEFAULT_TIMEOUT = 30.0
    DEFAULT_USER_AGENT = f"FakturoidPy/{__version__}"


def _error_message(error_data: dict[str, Any]) -> str | None:
    errors = error_data.get("errors")
    if isinstance(errors, dict) and errors:
        parts = []
        for field, messages in errors.items():
            if isinstance(messages, list):
                messages = ", ".join(str(m) for m in messages)
            parts.append(f"{field}: {messages}")
        return "; ".join(parts)
    for key in ("error", "message"):
        if error_data.get(key):
            return str(error_data[key])
    return None


def parse_error_response(response: httpx.Response) -> FakturoidAPIError:
    """Parse error response and return appropriate exception.

    Args:
        response: HTTP response from the API

    Returns:
        Appropriate FakturoidAPIError subclass
    """
    status_code = response.status_code
    try:
        body: Any = response.json()
    except ValueError:
        body = None
    error_data: dict[str, Any] = body if isinstance(body, dict) else {}
    message = (
        _error_message(error_data) or response.text or f"HTTP {status_code} error"
    )

    # Pass request and response to maintain httpx.HTTPStatusError compatibility
    request = response.request

    if status_code == 400:
        return FakturoidBadRequestError(
            message, status_code, error_data, request, response
        )
    elif status_code in (401, 403):
        return FakturoidAuthError(message, status_code, error_data, request, response)
    elif status_code == 404:
        return FakturoidNotFoundError(
            message, status_code, error_data, request, response
        )
    elif status_code == 422:
        return FakturoidValidationError(
            message, status_code, error_data, request, response
        )
    elif status_code == 429:
        return FakturoidRateLimitError(
            message, status_code, error_data, request, response
        )
    elif status_code >= 500:
        return FakturoidServerError(message, status_code, error_data, request, response)
    else:
        return FakturoidAPIError(message, status_code, error_data, request, response)


def ensure_success(response: httpx.Response) -> None:
    """Raise the matching FakturoidAPIError unless the response is 2xx."""
    if not response.is_success:
        raise parse_error_response(response)


def format_query_value(value: Any) -> str | None:
    """Convert a single query parameter value to its wire representation.

    Formatting never depends on the host locale. Dates and times use the
    ISO 8601 round-trip form: naive values carry no offset, UTC values end
    with ``Z`` and other aware values keep their ``+HH:MM`` offset.

    Returns:
        The formatted value, or None if the value should not be sent
    """
    if value is None:
        return None
    if isinstance(value, Enum):
        return format_query_value(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        offset = value.utcoffset()
        if offset == timedelta(0):
            return value.replace(tzinfo=None).isoformat() + "Z"
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def _iter_query_params(params: QueryParams) -> Iterator[tuple[str, Any]]:
    if isinstance(params, BaseModel):
        for name, field in type(params).model_fields.items():
            yield field.alias or name, getattr(params, name)
    else:
        yield from params.items()


def build_query_string(params: QueryParams | None, prefix: str) -> str:
    """Build a URL-encoded query string from a parameter bag.

    Parameters whose value is None or formats to a blank string are left
    out. The prefix is prepended only when at least one pair is emitted.

    Args:
        params: Mapping or pydantic model of parameters, in output order
        prefix: ``?`` to start a query string, ``&`` to extend one

    Returns:
        Query string, or an empty string if there is nothing to send
    """
    if prefix is None:
        raise ValueError("prefix must not be None")
    if params is None:
        return ""

    pairs = []
    for name, raw_value in _iter_query_params(params):
        value = format_query_value(raw_value)
        if value is None or not value.strip():
            continue
        pairs.append(f"{name}={quote(value, safe='')}")

    if not pairs:
        return ""
    return prefix + "&".join(pairs)


def parse_entity_id(location: str | None) -> int:
    """Extract the id of a newly created entity from its URI.

    Args:
        location: Value of the ``Location`` header, e.g.
            ``https://app.fakturoid.cz/api/v1/acme/subjects/42.json``

    Returns:
        Numeric entity id

    Raises:
        FakturoidFormatError: If the last path segment is not a positive integer
    """
    id_string = (location or "").strip()
    if id_string.lower().endswith(".json"):
        id_string = id_string[: -len(".json")]
    id_string = id_string.rsplit("/", 1)[-1]

    if id_string.isascii() and id_string.isdigit() and int(id_string) > 0:
        return int(id_string)

    raise FakturoidFormatError(
        "Unexpected format of new entity URI. "
        f"Expected format '{ENTITY_URI_FORMAT}', got '{location or ''}' instead."
    )


class PaginatedIterator(Iterator[T]):
    """Iterator over all pages of a paginated listing.

    Pages are requested one at a time, starting at page 1, until the API
    returns an empty page. The page size is fixed by the API.

    Entities created or deleted by someone else while the listing is being
    walked can shift page boundaries, so the result may contain duplicates
    or miss entities. The API offers no way to prevent this.
    """

    def __init__(
        self,
        proxy: Any,  # FakturoidEntityProxy
        base_uri: str,
        model_class: type[T],
        params: QueryParams | None = None,
    ) -> None:
        """Initialize paginated iterator.

        Args:
            proxy: Entity proxy used to fetch single pages
            base_uri: Listing endpoint without query string
            model_class: Type of the listed entities
            params: Additional query parameters
        """
        self.proxy = proxy
        self.base_uri = base_uri
        self.model_class = model_class
        self.params = params
        self.current_page = 0
        self.items: list[T] = []
        self.index = 0
        self._exhausted = False

    def __iter__(self) -> Iterator[T]:
        """Return iterator."""
        return self

    def __next__(self) -> T:
        """Get next item, fetching new page if needed."""
        if self.index < len(self.items):
            item = self.items[self.index]
            self.index += 1
            return item

        if self._exhausted:
            raise StopIteration

        self._fetch_page(self.current_page + 1)

        if not self.items:
            self._exhausted = True
            raise StopIteration

        item = self.items[self.index]
        self.index += 1
        return item

    def _fetch_page(self, page: int) -> None:
        """Fetch a specific page of results.

        Args:
            page: Page number to fetch
        """
        self.items = self.proxy.get_paged_entities(
            self.base_uri, self.model_class, page, self.params
        )
        self.current_page = page
        self.index = 0
