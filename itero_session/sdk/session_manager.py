"""
Session Manager - Canonical client session state.

Holds the current credential and identity, persists them through a
CredentialStorePort and tells subscribers about every transition.

Usage:
    manager = SessionManager(store)
    manager.subscribe(lambda info: print(info.registered, info.user))
    manager.check_session()

    await manager.login(LoginInfo("alice", "secret"), exchange)
    link = manager.build_authenticated_url("/r/list")
    manager.logoff()
"""

import logging
from urllib.parse import quote

from itero_session.domain.errors import LoginError, SupersededLoginError
from itero_session.domain.login import LoginInfo
from itero_session.domain.session_info import SessionInfo, SessionState
from itero_session.ports.credential_store_port import CredentialStorePort
from itero_session.ports.login_port import LoginExchangePort
from itero_session.sdk.events import SessionChannel, Subscriber, Subscription

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Single source of truth for "who is logged in".

    Create one per process and inject it into every consumer. All methods
    are meant to be called from one event loop thread; the only suspension
    point is the login exchange, and every state change after it runs
    without yielding.
    """

    def __init__(self, store: CredentialStorePort, query_param: str = "s"):
        """
        Initialize session manager.

        Args:
            store: Persistence for the credential
            query_param: Query parameter used by build_authenticated_url()
        """
        self._store = store
        self._query_param = query_param
        self._channel = SessionChannel()

        self._credential = ""
        self._user = ""

        # Bumped by every login and logoff; a login whose generation is
        # no longer current when its exchange resolves is discarded.
        self._generation = 0

    @property
    def info(self) -> SessionInfo:
        """Current session facts, for consumers subscribing late."""
        if self._credential:
            return SessionInfo.authenticated(self._user)
        return SessionInfo.anonymous()

    @property
    def registered(self) -> bool:
        return self._credential != ""

    @property
    def user(self) -> str:
        return self._user

    @property
    def state(self) -> SessionState:
        return self.info.state

    def current_credential(self) -> str:
        """Canonical credential, or "" when anonymous. No I/O."""
        return self._credential

    def subscribe(self, callback: Subscriber) -> Subscription:
        """Register callback for every future transition."""
        return self._channel.subscribe(callback)

    def unsubscribe(self, callback: Subscriber) -> bool:
        return self._channel.unsubscribe(callback)

    async def login(self, info: LoginInfo, exchange: LoginExchangePort) -> str:
        """
        Log in through the server exchange.

        Nothing changes while the exchange is pending. On success the
        credential is set, persisted and announced in one step.

        Args:
            info: Identity and proof
            exchange: Server login exchange

        Returns:
            The logged in identity

        Raises:
            LoginError: If the exchange fails (state is left untouched)
            SupersededLoginError: If a newer login or a logoff started meanwhile
            SubscriberError: If a subscriber failed (the login is applied)
        """
        if not info.user:
            raise LoginError("Login requires a user name")

        self._generation += 1
        generation = self._generation

        credential = await exchange.exchange(info)

        if not credential:
            raise LoginError("Login exchange returned no credential")
        if generation != self._generation:
            logger.info("Discarding superseded login for %s", info.user)
            raise SupersededLoginError(info.user)

        self._credential = credential
        self._user = info.user
        self._store.save(credential, info.user)
        logger.info("Logged in as %s", info.user)
        self._channel.emit(SessionInfo.authenticated(info.user))

        return info.user

    def logoff(self) -> None:
        """
        End the session.

        Always announces the anonymous state, even when already logged off.

        Raises:
            SubscriberError: If a subscriber failed (the logoff is applied)
        """
        self._generation += 1
        previous = self._user

        self._credential = ""
        self._user = ""
        self._store.clear()
        if previous:
            logger.info("Logged off %s", previous)
        self._channel.emit(SessionInfo.anonymous())

    def check_session(self) -> bool:
        """
        Restore a persisted session if none is active.

        An active in-memory session always wins over persisted data.
        Nothing is emitted when there is nothing to restore.

        Returns:
            True if a session was restored
        """
        if self._credential:
            return False

        stored = self._store.load()
        if stored is None:
            return False

        self._credential = stored.credential
        self._user = stored.user
        logger.info("Restored session of %s", stored.user)
        self._channel.emit(SessionInfo.authenticated(stored.user))
        return True

    def build_authenticated_url(self, base: str) -> str:
        """
        Append the credential to a URL as a query parameter.

        For links the HTTP client does not send itself (downloads, direct
        navigation), where request augmentation cannot apply.

        Args:
            base: URL, with or without a query component

        Returns:
            URL with credential appended, or base unchanged when anonymous
        """
        if not self._credential:
            return base

        sep = "&" if "?" in base else "?"
        return f"{base}{sep}{self._query_param}={quote(self._credential, safe='')}"
