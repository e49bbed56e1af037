"""
urllib3 implementation of the HTTP client gateway.

Maps the client / connection / request handles onto a PoolManager, the
connection pool it hands out for a host, and a single urlopen() call.
"""

import logging

import urllib3
from urllib3.exceptions import HTTPError

from crash_uploader.exceptions import HttpClientError


logger = logging.getLogger(__name__)

MAX_PORT = 65535


class Urllib3ClientHandle:
    """Client session: a PoolManager plus the User-Agent of its requests."""

    def __init__(self, pool_manager: urllib3.PoolManager, user_agent: str):
        self.pool_manager = pool_manager
        self.user_agent = user_agent
        self.closed = False

    def close(self) -> None:
        if self.closed:
            return
        self.pool_manager.clear()
        self.closed = True


class Urllib3ConnectionHandle:
    """
    Connection to one host and port.

    The scheme is only known once a request is opened, so the underlying
    connection pool is created lazily and owned by this handle.
    """

    def __init__(self, client: Urllib3ClientHandle, host: str, port: int):
        self.client = client
        self.host = host
        self.port = port
        self.pool = None
        self.closed = False

    def get_pool(self, scheme: str):
        if self.pool is None:
            self.pool = self.client.pool_manager.connection_from_host(
                self.host, port=self.port, scheme=scheme
            )
        return self.pool

    def close(self) -> None:
        if self.closed:
            return
        if self.pool is not None:
            self.pool.close()
        self.closed = True


class Urllib3RequestHandle:
    """Pending request, and after sending, its response."""

    def __init__(self, pool, method: str, path: str, headers: dict[str, str]):
        self.pool = pool
        self.method = method
        self.path = path
        self.headers = headers
        self.response = None
        self.closed = False

    def close(self) -> None:
        if self.closed:
            return
        if self.response is not None:
            self.response.release_conn()
        self.closed = True


class Urllib3HttpClient:
    """
    urllib3 implementation of the HTTP client gateway.

    Retries and redirects are disabled: a failed attempt is reported once
    and a redirect is reported as a non-200 status. Timeouts are urllib3
    defaults.
    """

    def __init__(self, pool_manager_factory=None):
        """
        Initialize the urllib3 HTTP client.

        Args:
            pool_manager_factory: Optional callable returning a PoolManager (for testing).
                If None, urllib3.PoolManager is used.
        """
        self._pool_manager_factory = pool_manager_factory or urllib3.PoolManager

    def open_client(self, user_agent: str) -> Urllib3ClientHandle:
        try:
            pool_manager = self._pool_manager_factory(num_pools=1, retries=False)
        except (HTTPError, ValueError) as e:
            raise HttpClientError(f"Failed to initialize HTTP client: {e}") from e

        logger.debug(f"Opened HTTP client session with user agent: {user_agent}")
        return Urllib3ClientHandle(pool_manager, user_agent)

    def open_connection(
        self, client: Urllib3ClientHandle, host: str, port: int
    ) -> Urllib3ConnectionHandle:
        if client.closed:
            raise HttpClientError("HTTP client session is closed")
        if not host:
            raise HttpClientError("No host specified")
        if not 0 < port <= MAX_PORT:
            raise HttpClientError(f"Invalid port: {port}")

        return Urllib3ConnectionHandle(client, host, port)

    def open_request(
        self, connection: Urllib3ConnectionHandle, method: str, path: str, secure: bool
    ) -> Urllib3RequestHandle:
        if connection.closed:
            raise HttpClientError("Connection is closed")

        scheme = "https" if secure else "http"
        try:
            pool = connection.get_pool(scheme)
        except (HTTPError, ValueError) as e:
            raise HttpClientError(
                f"Failed to open {scheme} connection to {connection.host}:{connection.port}: {e}"
            ) from e

        headers = {"User-Agent": connection.client.user_agent}
        return Urllib3RequestHandle(pool, method, path, headers)

    def add_header(self, request: Urllib3RequestHandle, header_line: str) -> bool:
        if "\r" in header_line or "\n" in header_line:
            return False

        name, separator, value = header_line.partition(":")
        name = name.strip()
        if not separator or not name:
            return False

        request.headers[name] = value.strip()
        return True

    def send_request(self, request: Urllib3RequestHandle, body: bytes) -> None:
        if request.closed:
            raise HttpClientError("Request is closed")

        try:
            request.response = request.pool.urlopen(
                request.method,
                request.path,
                body=body,
                headers=request.headers,
                retries=False,
                redirect=False,
                preload_content=True,
            )
        # ValueError covers header values http.client refuses to write:
        # non Latin-1 text (UnicodeEncodeError) and embedded control characters.
        except (HTTPError, OSError, ValueError) as e:
            raise HttpClientError(f"Failed to send request: {e}") from e

    def query_status_code(self, request: Urllib3RequestHandle) -> int:
        if request.response is None:
            raise HttpClientError("Request has no response")
        return request.response.status
