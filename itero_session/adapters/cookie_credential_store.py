"""
Cookie Credential Store - Durable storage plus an httpx cookie jar mirror.
"""

import logging
import time
from http.cookiejar import Cookie
from typing import Optional

import httpx

from itero_session.domain.errors import StorageError
from itero_session.domain.session_info import StoredSession
from itero_session.ports.credential_store_port import CredentialStorePort
from itero_session.ports.storage_port import StoragePort

logger = logging.getLogger(__name__)

SESSION_ID_KEY = "SessionId"
USER_KEY = "User"


class CookieCredentialStore(CredentialStorePort):
    """
    Persist the credential in durable storage and mirror it in a cookie jar.

    The cookie jar is the transport channel: hand the same httpx.Cookies
    to the HTTP client and the credential travels with every request
    without application code touching it. When the server sets its own
    cookie under the same name, that one is kept and no mirror is written.

    Storage failures are logged, never raised: persistence is best effort
    and must not block a login or a logoff.
    """

    def __init__(
        self,
        storage: StoragePort,
        cookies: Optional[httpx.Cookies] = None,
        cookie_name: str = "s",
        cookie_path: str = "/",
        cookie_domain: str = "",
        cookie_max_age: int = 30 * 60,
    ):
        """
        Initialize credential store.

        Args:
            storage: Durable key/value storage
            cookies: Cookie jar shared with the HTTP client (new one if omitted)
            cookie_name: Name of the transport cookie
            cookie_path: Path the cookie is scoped to
            cookie_domain: Domain the cookie is scoped to ("" for any host)
            cookie_max_age: Cookie lifetime in seconds
        """
        self._storage = storage
        self._cookies = cookies if cookies is not None else httpx.Cookies()
        self._cookie_name = cookie_name
        self._cookie_path = cookie_path
        self._cookie_domain = cookie_domain
        self._cookie_max_age = cookie_max_age

    @property
    def cookies(self) -> httpx.Cookies:
        return self._cookies

    def save(self, credential: str, user: str) -> None:
        self._set_cookie(credential)
        try:
            self._storage.set(SESSION_ID_KEY, credential)
            self._storage.set(USER_KEY, user)
        except StorageError as e:
            # A half-written pair would restore the wrong identity
            logger.warning("Session for %s not persisted: %s", user, e)
            self._remove_persisted()

    def load(self) -> Optional[StoredSession]:
        try:
            credential = self._storage.get(SESSION_ID_KEY)
            user = self._storage.get(USER_KEY)
        except StorageError as e:
            logger.warning("Persisted session unreadable: %s", e)
            return None

        stored = StoredSession.from_values(credential, user)
        if stored is None and (credential or user):
            logger.warning("Ignoring incomplete persisted session")
        return stored

    def clear(self) -> None:
        # Removes the mirror and any server-issued cookie of the same name
        self._cookies.delete(self._cookie_name, path=self._cookie_path)
        self._remove_persisted()

    def _remove_persisted(self) -> None:
        """Remove both durable keys; one failing must not prevent the other."""
        for key in (SESSION_ID_KEY, USER_KEY):
            try:
                self._storage.remove(key)
            except StorageError as e:
                logger.warning("Persisted %s not removed: %s", key, e)

    def _is_mirror(self, cookie: Cookie) -> bool:
        return (
            cookie.name == self._cookie_name
            and cookie.domain == self._cookie_domain
            and cookie.path == self._cookie_path
        )

    def _set_cookie(self, credential: str) -> None:
        """
        Put the credential in the jar with its expiry.

        A cookie of the same name set by the server is authoritative: the
        mirror is then dropped instead, so only one such cookie is sent.
        """
        jar = self._cookies.jar
        issued = [c for c in jar if c.name == self._cookie_name and not self._is_mirror(c)]
        if issued:
            for cookie in [c for c in jar if self._is_mirror(c)]:
                jar.clear(cookie.domain, cookie.path, cookie.name)
            return

        cookie = Cookie(
            version=0,
            name=self._cookie_name,
            value=credential,
            port=None,
            port_specified=False,
            domain=self._cookie_domain,
            domain_specified=bool(self._cookie_domain),
            domain_initial_dot=self._cookie_domain.startswith("."),
            path=self._cookie_path,
            path_specified=bool(self._cookie_path),
            secure=False,
            expires=int(time.time()) + self._cookie_max_age,
            discard=False,
            comment=None,
            comment_url=None,
            rest={"HttpOnly": None},
            rfc2109=False,
        )
        self._cookies.jar.set_cookie(cookie)
