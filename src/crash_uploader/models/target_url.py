"""
TargetUrl value object.
Breaks an upload URL into the pieces the HTTP client needs.
"""

from dataclasses import dataclass
from urllib.parse import urlsplit, urlunsplit

from crash_uploader.exceptions import InvalidUrlError


SUPPORTED_SCHEMES = ("http", "https")
DEFAULT_PORTS = {"http": 80, "https": 443}


def sanitize_url(url: str) -> str:
    """
    Get the URL without user credentials, query string or fragment.

    Crash servers commonly carry API keys in the query string or in the
    userinfo part, so only this form of a URL is suitable for log output
    and error messages.
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return "(unparseable URL)"

    host = parts.netloc.rpartition("@")[2]
    return urlunsplit((parts.scheme, host, parts.path, "", ""))


@dataclass(frozen=True, slots=True)
class TargetUrl:
    """
    Scheme, host, port and request path of an upload endpoint.

    The path keeps the query string because it is sent verbatim on the
    request line. Fragments are dropped.
    """

    scheme: str
    host: str
    port: int
    path: str

    @property
    def secure(self) -> bool:
        """True when the request must go over TLS."""
        return self.scheme == "https"

    @classmethod
    def parse(cls, url: str) -> "TargetUrl":
        """
        Parse a URL into a TargetUrl.

        Args:
            url: Absolute http or https URL

        Returns:
            TargetUrl for the URL

        Raises:
            InvalidUrlError: If the URL cannot be parsed, has no host, has an
                invalid port, or uses a scheme other than http or https
        """
        if not url:
            raise InvalidUrlError("URL cannot be empty")

        try:
            parts = urlsplit(url)
            port = parts.port
        except ValueError as e:
            raise InvalidUrlError(f"Could not parse URL: {e}") from e

        if parts.scheme not in SUPPORTED_SCHEMES:
            raise InvalidUrlError(
                f"Unsupported URL scheme: {parts.scheme or '(none)'}. "
                f"Must be one of {list(SUPPORTED_SCHEMES)}"
            )

        if not parts.hostname:
            raise InvalidUrlError(f"URL has no host: {sanitize_url(url)}")

        path = parts.path or "/"
        if parts.query:
            path = f"{path}?{parts.query}"

        return cls(
            scheme=parts.scheme,
            host=parts.hostname,
            port=port if port is not None else DEFAULT_PORTS[parts.scheme],
            path=path,
        )

    def __str__(self) -> str:
        base_path = self.path.split("?")[0]
        return f"{self.scheme}://{self.host}:{self.port}{base_path}"
