"""
Pytest configuration and fixtures for crash_uploader tests.
"""

import logging
from unittest.mock import Mock

import pytest


@pytest.fixture
def crash_dump(tmp_path):
    """Create a small minidump-like file for upload."""
    dump = tmp_path / "crash.dmp"
    dump.write_bytes(b"MDMP\x93\xa7\x00\x00DATA")
    return dump


@pytest.fixture
def empty_dump(tmp_path):
    """Create a zero-length file."""
    dump = tmp_path / "empty.dmp"
    dump.write_bytes(b"")
    return dump


@pytest.fixture
def handles():
    """Client, connection and request handles handed out by the mock HTTP client."""
    return {
        "client": Mock(name="client"),
        "connection": Mock(name="connection"),
        "request": Mock(name="request"),
    }


@pytest.fixture
def http_client(handles):
    """Mock HTTP client gateway that completes every step and answers 200."""
    client = Mock()
    client.open_client.return_value = handles["client"]
    client.open_connection.return_value = handles["connection"]
    client.open_request.return_value = handles["request"]
    client.add_header.return_value = True
    client.send_request.return_value = None
    client.query_status_code.return_value = 200
    return client


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers that setup_logger attached during a test."""
    yield
    logger = logging.getLogger("crash_uploader")
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
