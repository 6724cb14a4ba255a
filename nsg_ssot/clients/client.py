"""NetBox and NAM API client module."""

from typing import Optional

import httpx

from nsg_ssot.constants import DEFAULT_TIMEOUT

from .custom_fields import CustomFieldsAPI
from .nsx_security_groups import NsxSecurityGroupsAPI
from .prefixes import PrefixesAPI


class APIClient:
    """Shared HTTP plumbing of the NetBox and NAM clients."""

    auth_scheme = "Token"

    def __init__(
        self,
        base_url: str,
        token: str,
        verify_ssl: bool = True,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):  # pylint: disable=too-many-arguments
        """Initialize the API client.

        Args:
            base_url: The base URL of the API, including the scheme.
            token: API token sent in the Authorization header.
            verify_ssl: Whether to verify SSL certificates.
            timeout: Timeout in seconds applied to every request.
            transport: Optional httpx transport, used to mock the API in tests.
        """
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            verify=verify_ssl,
            timeout=timeout,
            transport=transport,
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
                "Authorization": f"{self.auth_scheme} {token}",
            },
        )

    def get_hostname(self) -> str:
        """Return the hostname of the API endpoint."""
        return httpx.URL(self.base_url).host

    def close(self):
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def __str__(self):
        """Name the client after the host it talks to."""
        return self.get_hostname()


class NetboxClient(APIClient):
    """Client for interacting with the NetBox IPAM API."""

    auth_scheme = "Token"

    def __init__(self, base_url: str, token: str, **kwargs):
        """Initialize the NetBox client and its resources."""
        super().__init__(base_url, token, **kwargs)
        self.custom_fields = CustomFieldsAPI(self._client)
        self.prefixes = PrefixesAPI(self._client)


class NAMClient(APIClient):
    """Client for interacting with the Network Access Manager (NAM) API."""

    auth_scheme = "Bearer"

    def __init__(self, base_url: str, token: str, **kwargs):
        """Initialize the NAM client and its resources."""
        super().__init__(base_url, token, **kwargs)
        self.nsx_security_groups = NsxSecurityGroupsAPI(self._client)
