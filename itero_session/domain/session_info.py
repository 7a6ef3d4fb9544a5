"""
Session Domain Model - Observable facts about the current session.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SessionState(Enum):
    """Session lifecycle states."""
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True)
class SessionInfo:
    """
    SessionInfo value - what observers are told on every transition.

    Domain rules:
    - registered is True iff a credential is held
    - user is empty when not registered
    - Instances are never mutated; each transition emits a new one
    """
    registered: bool
    user: str = ""

    @classmethod
    def anonymous(cls) -> "SessionInfo":
        """Info for a session without credential."""
        return cls(registered=False, user="")

    @classmethod
    def authenticated(cls, user: str) -> "SessionInfo":
        """Info for a session held by user."""
        return cls(registered=True, user=user)

    @property
    def state(self) -> SessionState:
        if self.registered:
            return SessionState.AUTHENTICATED
        return SessionState.ANONYMOUS

    def to_dict(self):
        """Serialize to dict."""
        return {"registered": self.registered, "user": self.user}


@dataclass(frozen=True)
class StoredSession:
    """
    A persisted session, as read back from durable storage.

    Both fields are non-empty; partial entries are never represented.
    """
    credential: str
    user: str

    @classmethod
    def from_values(cls, credential: Optional[str], user: Optional[str]) -> Optional["StoredSession"]:
        """
        Build from raw storage values.

        Returns:
            StoredSession if both values are present, None otherwise
        """
        if not credential or not user:
            return None
        return cls(credential=credential, user=user)
