import re
from unittest.mock import Mock

import pytest

from crash_uploader.exceptions import (
    BodyConstructionError,
    ClientInitError,
    ConnectionOpenError,
    HttpClientError,
    InvalidParametersError,
    InvalidUrlError,
    RequestOpenError,
    TransportError,
    UnexpectedStatusError,
    UploadError,
)
from crash_uploader.gateways.urllib3_http_client import Urllib3HttpClient
from crash_uploader.models import UploadRequest, UploadResult
from crash_uploader.use_cases.send_request import (
    DEFAULT_USER_AGENT,
    create_send_request,
    send_request,
)


@pytest.fixture
def upload_request(crash_dump):
    return UploadRequest(
        url="https://crash.example.com:8443/submit?v=1",
        parameters={"ProductName": "App", "Version": "1.0"},
        upload_file=crash_dump,
        file_part_name="upload_file_minidump",
    )


def assert_no_network_activity(http_client):
    http_client.open_client.assert_not_called()
    http_client.open_connection.assert_not_called()
    http_client.open_request.assert_not_called()
    http_client.send_request.assert_not_called()


class TestSendRequestSuccess:
    def test_send_request__status_200__returns_successful_result(self, upload_request, http_client):
        # ACT
        result = send_request(upload_request, http_client=http_client)

        # ASSERT
        assert result == UploadResult(status_code=200)
        assert result.success

    def test_send_request__opens_nested_handles_in_order(self, upload_request, http_client, handles):
        send_request(upload_request, http_client=http_client, user_agent="Test/1.0")

        http_client.open_client.assert_called_once_with("Test/1.0")
        http_client.open_connection.assert_called_once_with(
            handles["client"], "crash.example.com", 8443
        )
        http_client.open_request.assert_called_once_with(
            handles["connection"], "POST", "/submit?v=1", True
        )

    def test_send_request__http_url__opens_request_without_secure_flag(
        self, crash_dump, http_client, handles
    ):
        request = UploadRequest(url="http://crash.example.com/submit", upload_file=crash_dump)

        send_request(request, http_client=http_client)

        http_client.open_connection.assert_called_once_with(handles["client"], "crash.example.com", 80)
        http_client.open_request.assert_called_once_with(
            handles["connection"], "POST", "/submit", False
        )

    def test_send_request__default_user_agent__is_airbag(self, upload_request, http_client):
        send_request(upload_request, http_client=http_client)

        http_client.open_client.assert_called_once_with(DEFAULT_USER_AGENT)

    def test_send_request__content_type_header_matches_body_boundary(
        self, upload_request, http_client, handles
    ):
        # ACT
        send_request(upload_request, http_client=http_client)

        # ASSERT
        request_handle, header_line = http_client.add_header.call_args[0]
        assert request_handle is handles["request"]
        match = re.fullmatch(r"Content-Type: multipart/form-data; boundary=(-{27}[0-9A-F]{16})", header_line)
        assert match

        sent_handle, body = http_client.send_request.call_args[0]
        assert sent_handle is handles["request"]
        boundary = match.group(1).encode()
        assert body.startswith(b"--" + boundary + b"\r\n")
        assert body.endswith(b"--" + boundary + b"--\r\n")
        assert b'name="ProductName"\r\n\r\nApp\r\n' in body
        assert b"MDMP\x93\xa7\x00\x00DATA\r\n" in body

    def test_send_request__header_not_added__still_uploads(self, upload_request, http_client):
        http_client.add_header.return_value = False

        result = send_request(upload_request, http_client=http_client)

        assert result.success
        http_client.send_request.assert_called_once()

    def test_send_request__success__releases_every_handle_once(self, upload_request, http_client, handles):
        send_request(upload_request, http_client=http_client)

        for handle in handles.values():
            handle.close.assert_called_once_with()

    def test_create_send_request__wires_http_client_and_user_agent(self, upload_request, http_client):
        send = create_send_request(http_client, user_agent="Wired/2.0")

        result = send(upload_request)

        assert result.success
        http_client.open_client.assert_called_once_with("Wired/2.0")


class TestSendRequestValidation:
    @pytest.mark.parametrize(
        "parameters", [{"": "empty"}, {'quo"te': "x"}, {"ctrl\x01": "x"}, {"café": "x"}]
    )
    def test_send_request__invalid_field_name__fails_without_network(
        self, crash_dump, http_client, parameters
    ):
        request = UploadRequest(
            url="https://crash.example.com/submit", parameters=parameters, upload_file=crash_dump
        )

        with pytest.raises(InvalidParametersError):
            send_request(request, http_client=http_client)

        assert_no_network_activity(http_client)

    @pytest.mark.parametrize(
        "url", ["ftp://crash.example.com/submit", "not a url", "", "https://:443/submit"]
    )
    def test_send_request__unusable_url__fails_without_network(self, crash_dump, http_client, url):
        request = UploadRequest(url=url, upload_file=crash_dump)

        with pytest.raises(InvalidUrlError):
            send_request(request, http_client=http_client)

        assert_no_network_activity(http_client)

    def test_send_request__missing_file__fails_before_opening_client(self, tmp_path, http_client):
        request = UploadRequest(
            url="https://crash.example.com/submit", upload_file=tmp_path / "missing.dmp"
        )

        with pytest.raises(BodyConstructionError):
            send_request(request, http_client=http_client)

        assert_no_network_activity(http_client)

    def test_send_request__empty_file__fails_before_opening_client(self, empty_dump, http_client):
        request = UploadRequest(url="https://crash.example.com/submit", upload_file=empty_dump)

        with pytest.raises(BodyConstructionError):
            send_request(request, http_client=http_client)

        assert_no_network_activity(http_client)

    def test_send_request__empty_file_part_name__raises_body_construction_error(
        self, crash_dump, http_client
    ):
        request = UploadRequest(
            url="https://crash.example.com/submit", upload_file=crash_dump, file_part_name=""
        )

        with pytest.raises(BodyConstructionError):
            send_request(request, http_client=http_client)

        assert_no_network_activity(http_client)


class TestSendRequestStatus:
    @pytest.mark.parametrize("status_code", [201, 204, 301, 404, 500, 503])
    def test_send_request__non_200_status__raises_unexpected_status_error(
        self, upload_request, http_client, status_code
    ):
        http_client.query_status_code.return_value = status_code

        with pytest.raises(UnexpectedStatusError) as exc_info:
            send_request(upload_request, http_client=http_client)

        assert exc_info.value.status_code == status_code

    def test_send_request__status_query_fails__raises_unexpected_status_error_without_code(
        self, upload_request, http_client
    ):
        http_client.query_status_code.side_effect = HttpClientError("no status")

        with pytest.raises(UnexpectedStatusError) as exc_info:
            send_request(upload_request, http_client=http_client)

        assert exc_info.value.status_code is None


class TestSendRequestCleanup:
    @pytest.mark.parametrize(
        "failing_step, expected_error, acquired",
        [
            ("open_client", ClientInitError, []),
            ("open_connection", ConnectionOpenError, ["client"]),
            ("open_request", RequestOpenError, ["client", "connection"]),
            ("send_request", TransportError, ["client", "connection", "request"]),
            ("query_status_code", UnexpectedStatusError, ["client", "connection", "request"]),
        ],
    )
    def test_send_request__failure_at_step__releases_acquired_handles_once(
        self, upload_request, http_client, handles, failing_step, expected_error, acquired
    ):
        # ARRANGE
        getattr(http_client, failing_step).side_effect = HttpClientError(f"{failing_step} failed")

        # ACT
        with pytest.raises(expected_error):
            send_request(upload_request, http_client=http_client)

        # ASSERT
        for name, handle in handles.items():
            if name in acquired:
                handle.close.assert_called_once_with()
            else:
                handle.close.assert_not_called()

    def test_send_request__non_200_status__releases_every_handle_once(
        self, upload_request, http_client, handles
    ):
        http_client.query_status_code.return_value = 500

        with pytest.raises(UnexpectedStatusError):
            send_request(upload_request, http_client=http_client)

        for handle in handles.values():
            handle.close.assert_called_once_with()

    def test_send_request__handles_released_innermost_first(self, upload_request, http_client, handles):
        # ARRANGE
        released = []
        for name, handle in handles.items():
            handle.close.side_effect = lambda name=name: released.append(name)

        # ACT
        send_request(upload_request, http_client=http_client)

        # ASSERT
        assert released == ["request", "connection", "client"]

    def test_send_request__every_failure_is_an_upload_error(self, upload_request, http_client):
        http_client.send_request.side_effect = HttpClientError("reset")

        with pytest.raises(UploadError):
            send_request(upload_request, http_client=http_client)

    def test_send_request__user_agent_not_latin1__raises_transport_error(self, upload_request):
        # ARRANGE
        pool_manager = Mock()
        pool_manager.connection_from_host.return_value.urlopen.side_effect = UnicodeEncodeError(
            "latin-1", "App ☃", 4, 5, "ordinal not in range(256)"
        )
        http_client = Urllib3HttpClient(pool_manager_factory=Mock(return_value=pool_manager))

        # ACT & ASSERT
        with pytest.raises(TransportError):
            send_request(upload_request, http_client=http_client, user_agent="App ☃")
        pool_manager.clear.assert_called_once()
