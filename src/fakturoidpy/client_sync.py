"""Synchronous Fakturoid API client."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from fakturoidpy.auth import BasicTokenAuth
from fakturoidpy.client_base import ClientConfig
from fakturoidpy.proxies import InvoicesProxy, SubjectsProxy

logger = logging.getLogger(__name__)


class FakturoidClient:
    """Synchronous client for the Fakturoid API.

    Owns the HTTP connection shared by all resource proxies. Requests are
    made relative to the account address, e.g. ``client.subjects.select()``
    requests ``https://app.fakturoid.cz/api/v1/{account}/subjects.json``.
    """

    def __init__(
        self,
        account: str,
        email: str,
        api_token: str,
        *,
        base_url: str | None = None,
        user_agent: str = ClientConfig.DEFAULT_USER_AGENT,
        timeout: float = ClientConfig.DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize Fakturoid client.

        Args:
            account: Account slug, as seen in the Fakturoid web address
            email: E-mail of the user the API token belongs to
            api_token: API token of the user
            base_url: Account API address (default: derived from account)
            user_agent: User-Agent header; the API asks for the application
                name and a contact e-mail
            timeout: Request timeout in seconds
            transport: Custom httpx transport

        Raises:
            ValueError: If account, email or api_token is missing
        """
        if not account or not account.strip():
            raise ValueError("account must be provided")
        if not email or not api_token:
            raise ValueError("Both email and api_token must be provided")

        self.account = account
        self.base_url = base_url or ClientConfig.BASE_URL.format(account=account)
        self.timeout = timeout
        self.auth = BasicTokenAuth(email, api_token)

        self.http_client = httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=transport,
            headers={
                "User-Agent": user_agent,
                "Accept": "application/json",
                **self.auth.get_headers(),
            },
        )

        self.subjects = SubjectsProxy(self)
        self.invoices = InvoicesProxy(self)

    def __enter__(self) -> FakturoidClient:
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self.http_client.close()

    def request(
        self,
        method: str,
        uri: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Make an HTTP request against the account address.

        The response is returned whatever its status; checking it is up to
        the caller.

        Args:
            method: HTTP method
            uri: Path relative to the account address, may include a query
            **kwargs: Additional arguments for httpx request, e.g. ``json``

        Returns:
            HTTP response
        """
        response = self.http_client.request(method=method, url=uri, **kwargs)
        logger.debug(
            "%s %s -> %s", method, response.request.url, response.status_code
        )
        return response
