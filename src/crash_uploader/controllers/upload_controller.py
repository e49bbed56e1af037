"""
Upload controller for the crash report uploader.
Entry point for callers: wraps the send_request use case and turns its
exceptions into Result values or a plain success flag.
"""

import logging
import os
from typing import Mapping

from returns.pipeline import is_successful
from returns.result import Failure, Result, Success

from crash_uploader.exceptions import UploadError
from crash_uploader.gateways.interfaces import IHttpClient
from crash_uploader.gateways.urllib3_http_client import Urllib3HttpClient
from crash_uploader.models import UploadRequest, UploadResult
from crash_uploader.use_cases.send_request import DEFAULT_USER_AGENT, create_send_request


logger = logging.getLogger(__name__)


class UploadController:
    """Controller for crash report uploads."""

    def __init__(self):
        """Initialize the upload controller without dependencies.

        This constructor is best for tests when you need to override dependencies.

        Example:
        from unittest.mock import Mock
        from crash_uploader.models import UploadResult

        upload_controller = UploadController()
        upload_controller._send_request = Mock(return_value=UploadResult(status_code=200))

        Use `create_with_http_client` to instantiate with an HTTP client for production use.
        """
        pass

    @classmethod
    def create_with_http_client(
        cls,
        http_client: IHttpClient | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> "UploadController":
        """
        Create UploadController with an HTTP client gateway.

        Args:
            http_client: Gateway to the HTTP client library (default: urllib3)
            user_agent: User-Agent sent with uploads

        Returns:
            Configured UploadController instance
        """
        controller = cls()
        controller._send_request = create_send_request(
            http_client or Urllib3HttpClient(), user_agent=user_agent
        )
        return controller

    def upload(
        self,
        url: str,
        parameters: Mapping[str, str],
        upload_file: str | os.PathLike,
        file_part_name: str,
    ) -> Result[UploadResult, UploadError]:
        """
        Upload a crash report.

        Args:
            url: http or https URL of the collection server
            parameters: Form fields sent as text parts
            upload_file: Path of the file sent as the binary part
            file_part_name: Form field name of the binary part

        Returns:
            Result containing either the UploadResult (Success)
            or the UploadError describing the failed step (Failure)
        """
        request = UploadRequest(
            url=url,
            parameters=parameters,
            upload_file=upload_file,
            file_part_name=file_part_name,
        )
        try:
            return Success(self._send_request(request))
        except UploadError as e:
            logger.error(
                f"Upload to {request.get_sanitized_url()} failed "
                f"({type(e).__name__}): {e}"
            )
            return Failure(e)
        except Exception:
            logger.exception("Unexpected error during upload")
            return Failure(UploadError("An unexpected error occurred while uploading the file"))

    def send_request(
        self,
        url: str,
        parameters: Mapping[str, str],
        upload_file: str | os.PathLike,
        file_part_name: str,
    ) -> bool:
        """
        Upload a crash report and report only whether it succeeded.

        Returns:
            True iff the server answered with HTTP status 200
        """
        return is_successful(self.upload(url, parameters, upload_file, file_part_name))
