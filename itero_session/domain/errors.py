"""
Session errors.
"""

from typing import Optional


class SessionError(Exception):
    """Base exception for session errors."""


class LoginError(SessionError):
    """
    The login exchange failed.

    Raised for network failures and for credentials rejected by the server.
    Session state is left untouched when this is raised.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SupersededLoginError(LoginError):
    """A login resolved after a newer login or logoff started; its result was discarded."""

    def __init__(self, user: str):
        super().__init__(f"Login for {user!r} was superseded")
        self.user = user


class SubscriberError(SessionError):
    """One or more subscribers raised while a session change was delivered."""

    def __init__(self, failures):
        super().__init__(f"{len(failures)} subscriber(s) failed")
        self.failures = list(failures)


class StorageError(SessionError):
    """Durable storage could not be read or written."""
