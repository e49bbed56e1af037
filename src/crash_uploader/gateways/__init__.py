"""Gateways for external service integration.

Gateways handle communication with external systems, here the HTTP client
library that carries the upload.
"""

from crash_uploader.gateways.interfaces import IHttpClient, IHttpHandle
from crash_uploader.gateways.urllib3_http_client import Urllib3HttpClient


__all__ = ["IHttpClient", "IHttpHandle", "Urllib3HttpClient"]
