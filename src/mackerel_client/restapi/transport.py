"""HTTP transport for the Mackerel API client.

The client only needs something that executes a :class:`RequestEnvelope`
and returns a :class:`ResponseEnvelope`. :class:`HttpxTransport` does so
with httpx, keeping one ``httpx.Client`` per thread.
"""

import threading
from dataclasses import dataclass
from typing import Protocol

import httpx
import structlog

from .errors import TransportError
from .request import RequestEnvelope

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class ResponseEnvelope:
    """Status code and raw body of an HTTP response."""

    status_code: int
    body: bytes = b""

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class Transport(Protocol):
    """Executes requests; any HTTP client can satisfy this."""

    def execute(self, request: RequestEnvelope) -> ResponseEnvelope:
        """Send the request and return the response.

        Raises:
            TransportError: If no response could be obtained.
        """
        ...

    def close(self) -> None: ...


class HttpxTransport:
    """Transport backed by httpx.

    Thread-safe through thread-local storage of httpx.Client instances.
    Every client created is also tracked so that :meth:`close` can release
    the connections of all threads.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the transport.

        Args:
            timeout: Request timeout in seconds (default: 30.0).
            transport: Optional lower-level httpx transport, e.g.
                ``httpx.MockTransport`` in tests.

        Raises:
            ValueError: If timeout is not positive.
        """
        if timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
        self._timeout = timeout
        self._transport = transport
        self._local = threading.local()
        self._clients_lock = threading.Lock()
        self._clients: list[httpx.Client] = []

    @property
    def client(self) -> httpx.Client:
        """Get or create the thread-local httpx client.

        Returns:
            Thread-local httpx.Client instance.
        """
        if not hasattr(self._local, "client") or self._local.client.is_closed:
            client = httpx.Client(timeout=self._timeout, transport=self._transport)
            with self._clients_lock:
                self._clients.append(client)
            self._local.client = client
        return self._local.client

    def close(self) -> None:
        """Close the HTTP clients of all threads.

        Threads that send requests afterwards get a new client.
        """
        with self._clients_lock:
            clients, self._clients = self._clients, []
        for client in clients:
            if not client.is_closed:
                client.close()

    def execute(self, request: RequestEnvelope) -> ResponseEnvelope:
        try:
            response = self.client.request(
                request.method,
                request.url,
                params=list(request.query),
                headers=dict(request.headers),
                content=request.body,
            )
        except httpx.HTTPError as exc:
            logger.debug(
                "HTTP request failed",
                method=request.method,
                url=request.url,
                error=type(exc).__name__,
            )
            msg = f"failed to send request: {exc}"
            raise TransportError(msg) from exc
        return ResponseEnvelope(status_code=response.status_code, body=response.content)
