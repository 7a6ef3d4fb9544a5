"""
Request Augmentor - Add the session credential to outgoing requests.
"""

import logging
from typing import Awaitable, Callable, Generator, TypeVar

import httpx

from itero_session.sdk.session_manager import SessionManager

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RequestAugmentor:
    """
    Decide, per request, whether to attach the credential.

    The credential is read from the manager at the moment the request
    goes out, so a login or logoff is seen by the very next request.
    Requests are never modified in place: retry logic upstream may send
    the same object again.
    """

    def __init__(self, session: SessionManager, header_name: str = "X-CSRF"):
        """
        Initialize augmentor.

        Args:
            session: Canonical session state
            header_name: Header carrying the credential
        """
        self._session = session
        self._header_name = header_name

    @property
    def header_name(self) -> str:
        return self._header_name

    def augment(self, request: httpx.Request) -> httpx.Request:
        """
        Return the request to send.

        Args:
            request: Outgoing request

        Returns:
            request itself when anonymous, else a copy with one extra header
        """
        credential = self._session.current_credential()
        if not credential:
            return request

        headers = request.headers.copy()
        headers[self._header_name] = credential
        logger.debug("Adding %s to %s %s", self._header_name, request.method, request.url)

        return httpx.Request(
            request.method,
            request.url,
            headers=headers,
            stream=request.stream,
            extensions=dict(request.extensions),
        )

    def intercept(self, request: httpx.Request, send: Callable[[httpx.Request], T]) -> T:
        """Forward the (possibly augmented) request to send and return its result."""
        return send(self.augment(request))

    async def aintercept(
        self,
        request: httpx.Request,
        send: Callable[[httpx.Request], Awaitable[T]],
    ) -> T:
        """Async counterpart of intercept()."""
        return await send(self.augment(request))


class SessionAuth(httpx.Auth):
    """
    httpx authentication hook backed by a RequestAugmentor.

    Example:
        client = httpx.AsyncClient(auth=SessionAuth(RequestAugmentor(manager)))
    """

    def __init__(self, augmentor: RequestAugmentor):
        self._augmentor = augmentor

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        yield self._augmentor.augment(request)
