"""
Domain exceptions for the crash report uploader.

Every failure of an upload is terminal for that call. Each step of the
upload sequence raises its own subclass of UploadError so callers and tests
can tell the failure points apart, while callers that only need a yes/no
answer can catch the base class.
"""


class UploadError(Exception):
    """
    Base exception for upload operations.

    All upload-related exceptions inherit from this base class,
    allowing callers to catch all upload errors with a single except clause.
    """

    pass


class InvalidParametersError(UploadError):
    """
    Raised when a form field name is not acceptable.

    Examples:
    - Empty field name
    - Field name containing a control character or a non-ASCII character
    - Field name containing a double quote
    """

    pass


class InvalidUrlError(UploadError):
    """
    Raised when the target URL cannot be used.

    Examples:
    - URL cannot be parsed or has no host
    - Port is not a valid number
    - Scheme is neither http nor https
    """

    pass


class ClientInitError(UploadError):
    """HTTP client session could not be created."""

    pass


class ConnectionOpenError(UploadError):
    """Connection to the upload host could not be opened."""

    pass


class RequestOpenError(UploadError):
    """POST request could not be opened on the connection."""

    pass


class BodyConstructionError(UploadError):
    """
    Raised when the multipart request body cannot be built.

    Examples:
    - Upload file is missing, unreadable or empty
    - Boundary, filename or file part name encodes to nothing
    """

    pass


class TransportError(UploadError):
    """The request could not be sent to the server."""

    pass


class UnexpectedStatusError(UploadError):
    """
    Raised when the exchange did not end with HTTP status 200.

    Attributes:
        status_code: Status returned by the server, or None if it could not be read
    """

    def __init__(self, message: str, status_code: int | None = None):
        """
        Initialize status error.

        Args:
            message: Error description
            status_code: Status reported by the HTTP client, None if the query failed
        """
        super().__init__(message)
        self.status_code = status_code


class HttpClientError(Exception):
    """Raised by HTTP client gateways when an operation on a handle fails."""

    pass
