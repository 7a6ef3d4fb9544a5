"""
HTTPX Login Adapter - Login exchange over HTTP.
"""

import logging

import httpx

from itero_session.domain.errors import LoginError
from itero_session.domain.login import LoginInfo
from itero_session.ports.login_port import LoginExchangePort

logger = logging.getLogger(__name__)


class HttpxLoginAdapter(LoginExchangePort):
    """
    POST the login payload and read the credential from the response body.

    The server answers a successful login with the bare session token
    (a JSON string or plain text). Any non-2xx status is a rejection.
    """

    def __init__(self, client: httpx.AsyncClient, path: str = "/login"):
        """
        Initialize login adapter.

        Args:
            client: HTTP client, usually configured with the server base URL
            path: Login endpoint, relative to the client base URL
        """
        self._client = client
        self._path = path

    async def exchange(self, info: LoginInfo) -> str:
        """
        Send the login request.

        Args:
            info: Identity and proof

        Returns:
            Session credential

        Raises:
            LoginError: On transport failure, rejection or empty answer
        """
        try:
            response = await self._client.post(self._path, json=info.to_dict())
        except httpx.HTTPError as e:
            raise LoginError(f"Login request failed: {e}") from e

        if not response.is_success:
            logger.info("Login rejected for %s (HTTP %d)", info.user, response.status_code)
            raise LoginError(
                f"Login rejected: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        credential = _parse_credential(response)
        if not credential:
            raise LoginError("Login answer carries no credential", status_code=response.status_code)

        return credential


def _parse_credential(response: httpx.Response) -> str:
    """Extract the token from a JSON string body or a plain text one."""
    if response.headers.get("content-type", "").startswith("application/json"):
        try:
            data = response.json()
        except ValueError:
            return ""
        return data if isinstance(data, str) else ""
    return response.text.strip()
