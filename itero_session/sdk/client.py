"""
Session Client - High-level SDK for talking to an Itero server.

Wires storage, credential store, session manager, login exchange and
request augmentation into one httpx.AsyncClient.
"""

from typing import Any, Optional

import httpx

from itero_session.adapters.cookie_credential_store import CookieCredentialStore
from itero_session.adapters.httpx_login import HttpxLoginAdapter
from itero_session.config import SessionConfig, build_storage
from itero_session.domain.login import LoginInfo
from itero_session.domain.session_info import SessionInfo
from itero_session.ports.storage_port import StoragePort
from itero_session.sdk.augmentor import RequestAugmentor, SessionAuth
from itero_session.sdk.events import Subscriber, Subscription
from itero_session.sdk.session_manager import SessionManager


class SessionClient:
    """
    HTTP client that keeps track of the user session.

    Example:
        from itero_session import SessionClient, SessionConfig

        async with SessionClient(SessionConfig(base_url="https://itero.example/a")) as client:
            client.subscribe(lambda info: print(info))
            client.check_session()

            # Login
            await client.login("alice", "secret")
            response = await client.get("/list")

            # Logout
            client.logoff()
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        storage: Optional[StoragePort] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize session client.

        Args:
            config: Settings (defaults if omitted)
            storage: Durable storage (picked from config if omitted)
            transport: httpx transport override (e.g. httpx.MockTransport)
        """
        self._config = config or SessionConfig()
        storage = storage if storage is not None else build_storage(self._config)

        self._http = httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=self._config.timeout,
            transport=transport,
        )

        # The store writes into the client's own jar, so the cookie
        # mirror travels with every request.
        self._store = CookieCredentialStore(
            storage,
            cookies=self._http.cookies,
            cookie_name=self._config.cookie_name,
            cookie_path=self._config.cookie_path,
            cookie_domain=self._config.cookie_domain,
            cookie_max_age=self._config.cookie_max_age,
        )
        self._session = SessionManager(self._store, query_param=self._config.query_param)
        self._augmentor = RequestAugmentor(self._session, header_name=self._config.header_name)
        self._http.auth = SessionAuth(self._augmentor)
        self._login = HttpxLoginAdapter(self._http, path=self._config.login_path)

    @property
    def session(self) -> SessionManager:
        return self._session

    @property
    def http(self) -> httpx.AsyncClient:
        return self._http

    @property
    def info(self) -> SessionInfo:
        return self._session.info

    async def login(self, user: str, password: str) -> str:
        """
        Log in.

        Args:
            user: User name
            password: Password

        Returns:
            The logged in user name

        Raises:
            LoginError: If the server rejects the login or cannot be reached
        """
        return await self._session.login(LoginInfo(user=user, password=password), self._login)

    def logoff(self) -> None:
        self._session.logoff()

    def check_session(self) -> bool:
        """Restore the persisted session, if any. Call once at startup."""
        return self._session.check_session()

    def make_url(self, path: str) -> str:
        """Absolute URL for path, carrying the credential as query parameter."""
        if path.startswith(("http://", "https://")):
            url = path
        else:
            # Same merge rule as the client: path is relative to base_url
            url = str(self._http.base_url).rstrip("/") + "/" + path.lstrip("/")
        return self._session.build_authenticated_url(url)

    def subscribe(self, callback: Subscriber) -> Subscription:
        return self._session.subscribe(callback)

    def unsubscribe(self, callback: Subscriber) -> bool:
        return self._session.unsubscribe(callback)

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        return await self._http.request(method, url, **kwargs)

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._http.get(url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._http.post(url, **kwargs)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "SessionClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()
