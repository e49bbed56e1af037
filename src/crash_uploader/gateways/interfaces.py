"""
Gateway interface protocols.

Defines the HTTP client capability the upload use case drives. Connection,
request and header management, TCP and TLS are all the client's business;
the uploader only sequences the calls and releases what it acquired.
"""

from typing import Protocol


class IHttpHandle(Protocol):
    """
    A resource acquired from an HTTP client: a client session, a connection,
    or a request.
    """

    def close(self) -> None:
        """
        Release the resource.

        Must be idempotent: calling close() on an already released handle
        is a no-op.
        """
        ...


class IHttpClient(Protocol):
    """
    Protocol for HTTP client gateways.

    Handles nest: a connection is opened on a client session, a request is
    opened on a connection. Each handle is released independently by the
    caller. Open, send and query operations raise HttpClientError on failure.
    """

    def open_client(self, user_agent: str) -> IHttpHandle:
        """
        Create a client session.

        Args:
            user_agent: User-Agent sent with every request of the session

        Returns:
            Client handle

        Raises:
            HttpClientError: If the networking stack cannot be initialized
        """
        ...

    def open_connection(self, client: IHttpHandle, host: str, port: int) -> IHttpHandle:
        """
        Open a connection handle to host:port on a client session.

        Raises:
            HttpClientError: If the connection cannot be opened
        """
        ...

    def open_request(
        self, connection: IHttpHandle, method: str, path: str, secure: bool
    ) -> IHttpHandle:
        """
        Open a request on a connection.

        Args:
            connection: Connection handle
            method: HTTP method, e.g. "POST"
            path: Request path including any query string
            secure: True to send the request over TLS

        Raises:
            HttpClientError: If the request cannot be opened
        """
        ...

    def add_header(self, request: IHttpHandle, header_line: str) -> bool:
        """
        Add a "Name: value" header line to a pending request.

        Best effort: returns False instead of raising when the header
        cannot be added.
        """
        ...

    def send_request(self, request: IHttpHandle, body: bytes) -> None:
        """
        Send the request with the given body and wait for the response.

        Raises:
            HttpClientError: If the exchange does not complete
        """
        ...

    def query_status_code(self, request: IHttpHandle) -> int:
        """
        Get the response status code of a sent request.

        Raises:
            HttpClientError: If no status is available
        """
        ...
