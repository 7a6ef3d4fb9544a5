"""
Itero Session - Client session management for the Itero voting server.

Hexagonal architecture: ports describe storage and the login exchange,
adapters implement them, and the SDK holds the canonical session state.

Usage:
    from itero_session import SessionClient, SessionConfig

    client = SessionClient(SessionConfig.from_env())

    # Restore the session of a previous run
    client.check_session()

    # Log in
    await client.login("alice", "secret")

    # Every request now carries X-CSRF
    await client.get("/list")
"""

__version__ = "0.1.0"

from itero_session.config import SessionConfig
from itero_session.domain.session_info import SessionInfo, SessionState
from itero_session.domain.login import LoginInfo
from itero_session.domain.errors import SessionError, LoginError
from itero_session.sdk.session_manager import SessionManager
from itero_session.sdk.augmentor import RequestAugmentor, SessionAuth
from itero_session.sdk.client import SessionClient

__all__ = [
    "SessionClient",
    "SessionConfig",
    "SessionManager",
    "RequestAugmentor",
    "SessionAuth",
    "SessionInfo",
    "SessionState",
    "LoginInfo",
    "SessionError",
    "LoginError",
]
