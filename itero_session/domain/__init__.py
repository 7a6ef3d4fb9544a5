"""
Domain Models - Pure session entities.

No infrastructure dependencies. Domain logic only.
"""

from itero_session.domain.session_info import SessionInfo, SessionState, StoredSession
from itero_session.domain.login import LoginInfo
from itero_session.domain.errors import (
    SessionError,
    LoginError,
    SupersededLoginError,
    SubscriberError,
    StorageError,
)

__all__ = [
    "SessionInfo",
    "SessionState",
    "StoredSession",
    "LoginInfo",
    "SessionError",
    "LoginError",
    "SupersededLoginError",
    "SubscriberError",
    "StorageError",
]
