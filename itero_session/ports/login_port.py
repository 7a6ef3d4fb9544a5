"""
Login Port - Interface for the server login exchange.

Implementations:
- HttpxLoginAdapter: POST to the login endpoint over httpx
"""

from abc import ABC, abstractmethod
from itero_session.domain.login import LoginInfo


class LoginExchangePort(ABC):
    """Port: Trade a login request for a session credential."""

    @abstractmethod
    async def exchange(self, info: LoginInfo) -> str:
        """
        Perform the login exchange.

        Args:
            info: Identity and proof

        Returns:
            Session credential issued by the server

        Raises:
            LoginError: If the exchange fails or is rejected
        """
        pass
