"""
Credential Store Port - Interface for persisting the session credential.

Implementations:
- CookieCredentialStore: durable storage + httpx cookie jar mirror
"""

from abc import ABC, abstractmethod
from typing import Optional
from itero_session.domain.session_info import StoredSession


class CredentialStorePort(ABC):
    """Port: Persist and mirror the session credential. No policy."""

    @abstractmethod
    def save(self, credential: str, user: str) -> None:
        """
        Persist a credential and its identity, and mirror it to the transport.

        Args:
            credential: Session token issued by the server
            user: Identity the token belongs to
        """
        pass

    @abstractmethod
    def load(self) -> Optional[StoredSession]:
        """
        Read the persisted session.

        Returns:
            StoredSession if a complete entry exists, None otherwise
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """
        Remove the persisted entry and the transport mirror.

        Must be idempotent: clearing an empty store is a no-op.
        """
        pass
