"""Authentication for Fakturoid API."""

import base64
from abc import ABC, abstractmethod


class BaseAuth(ABC):
    """Base authentication class."""

    @abstractmethod
    def get_headers(self) -> dict[str, str]:
        """Get authentication headers for requests."""
        pass


class BasicTokenAuth(BaseAuth):
    """HTTP Basic authentication using account e-mail and API token."""

    def __init__(self, email: str, api_token: str) -> None:
        """Initialize token authentication.

        Args:
            email: E-mail of the Fakturoid user
            api_token: API token from the user's settings page
        """
        self.email = email
        self.api_token = api_token

    def get_headers(self) -> dict[str, str]:
        """Get authentication headers."""
        credentials = f"{self.email}:{self.api_token}".encode()
        return {
            "Authorization": f"Basic {base64.b64encode(credentials).decode('ascii')}",
        }
