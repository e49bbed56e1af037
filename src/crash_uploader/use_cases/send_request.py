"""
Send request use case.

Submits one crash report: validates the request, builds the multipart
body, opens the HTTP client, connection and request handles, sends the body
and checks for status 200. Every handle that was acquired is released before
returning, whichever step failed.
"""

import functools
import logging
from contextlib import closing

from returns.pipeline import is_successful

from crash_uploader.exceptions import (
    BodyConstructionError,
    ClientInitError,
    ConnectionOpenError,
    HttpClientError,
    InvalidParametersError,
    RequestOpenError,
    TransportError,
    UnexpectedStatusError,
)
from crash_uploader.gateways.interfaces import IHttpClient, IHttpHandle
from crash_uploader.models import MultipartBody, TargetUrl, UploadRequest, UploadResult
from crash_uploader.services.multipart import (
    build_multipart_body,
    generate_multipart_boundary,
    generate_request_header,
)
from crash_uploader.services.validation import check_parameters


logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "Airbag/1.0 (Python)"


def send_request(
    request: UploadRequest,
    http_client: IHttpClient,
    user_agent: str = DEFAULT_USER_AGENT,
) -> UploadResult:
    """
    Upload a file and form fields as a multipart/form-data POST.

    The steps run strictly in order and the first failure ends the upload.
    Nothing is acquired from the HTTP client until the field names, the URL
    and the body have all been checked, so an unreadable or empty file never
    opens a connection.

    Args:
        request: URL, form fields, file path and file part name to upload
        http_client: Gateway to the HTTP client library
        user_agent: User-Agent of the client session

    Returns:
        UploadResult for a response with status 200

    Raises:
        InvalidParametersError: If a form field name is empty or not printable ASCII
        InvalidUrlError: If the URL cannot be parsed or is not http/https
        BodyConstructionError: If the file is missing or empty, or the filename
            or file part name cannot be encoded
        ClientInitError: If the client session cannot be created
        ConnectionOpenError: If the connection cannot be opened
        RequestOpenError: If the request cannot be opened
        TransportError: If the request cannot be sent
        UnexpectedStatusError: If the status cannot be read or is not 200
    """
    if not check_parameters(request.parameters):
        raise InvalidParametersError(
            "Form field names must be non-empty printable ASCII without double quotes"
        )

    target = TargetUrl.parse(request.url)

    body_result = build_multipart_body(
        request.parameters,
        request.upload_file,
        request.file_part_name,
        generate_multipart_boundary(),
    )
    if not is_successful(body_result):
        raise BodyConstructionError(body_result.failure())
    body = body_result.unwrap()

    try:
        client = http_client.open_client(user_agent)
    except HttpClientError as e:
        raise ClientInitError(str(e)) from e

    with closing(client):
        try:
            connection = http_client.open_connection(client, target.host, target.port)
        except HttpClientError as e:
            raise ConnectionOpenError(str(e)) from e

        with closing(connection):
            try:
                http_request = http_client.open_request(
                    connection, "POST", target.path, target.secure
                )
            except HttpClientError as e:
                raise RequestOpenError(str(e)) from e

            with closing(http_request):
                status_code = _post(http_client, http_request, body, target)

    result = UploadResult(status_code=status_code)
    if not result.success:
        raise UnexpectedStatusError(
            f"Upload to {target} failed with HTTP status {status_code}", status_code=status_code
        )

    logger.info(f"Uploaded {len(body)} bytes to {target} ({request.filename})")
    return result


def _post(
    http_client: IHttpClient, http_request: IHttpHandle, body: MultipartBody, target: TargetUrl
) -> int:
    # A missing Content-Type header does not stop the upload.
    if not http_client.add_header(http_request, generate_request_header(body.boundary)):
        logger.warning(f"Failed to add Content-Type header for upload to {target}")

    try:
        http_client.send_request(http_request, body.content)
    except HttpClientError as e:
        raise TransportError(str(e)) from e

    try:
        return http_client.query_status_code(http_request)
    except HttpClientError as e:
        raise UnexpectedStatusError(f"Could not read response status: {e}") from e


def create_send_request(http_client: IHttpClient, user_agent: str = DEFAULT_USER_AGENT):
    """Factory to create send_request function with http_client and user_agent wired."""
    return functools.partial(send_request, http_client=http_client, user_agent=user_agent)
