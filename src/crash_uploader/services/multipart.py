"""
Multipart/form-data body construction.

Builds the request body for a crash report: one part per text field,
followed by a single application/octet-stream part carrying the file, and a
closing delimiter. Line endings are CRLF throughout.
"""

import logging
import os
import random
from typing import Mapping

from returns.pipeline import is_successful
from returns.result import Failure, Result, Success

from crash_uploader.models.multipart_body import MultipartBody


logger = logging.getLogger(__name__)

# 27 dashes, followed by 16 hex digits
BOUNDARY_PREFIX = "-" * 27
BOUNDARY_LENGTH = len(BOUNDARY_PREFIX) + 16

CRLF = b"\r\n"


def generate_multipart_boundary() -> str:
    """
    Generate a random multipart boundary.

    The boundary only has to be unlikely to occur in the payload, so the
    non-cryptographic random module is sufficient.

    Returns:
        27 dashes followed by two 8-digit uppercase hex numbers (43 characters)
    """
    r0 = random.getrandbits(32)
    r1 = random.getrandbits(32)
    return f"{BOUNDARY_PREFIX}{r0:08X}{r1:08X}"


def generate_request_header(boundary: str) -> str:
    """Build the Content-Type header line announcing a multipart body with the given boundary."""
    return f"Content-Type: multipart/form-data; boundary={boundary}"


def encode_utf8(text: str) -> Result[bytes, str]:
    """
    Transcode text to UTF-8.

    Args:
        text: Text to encode

    Returns:
        Success with the encoded bytes, or Failure if the text is empty or
        cannot be represented in UTF-8 (e.g. it contains lone surrogates)
    """
    try:
        encoded = text.encode("utf-8")
    except UnicodeEncodeError as e:
        return Failure(f"Cannot encode {text!r} as UTF-8: {e.reason}")

    if not encoded:
        return Failure("Encoded text is empty")

    return Success(encoded)


def read_file_bytes(path: str | os.PathLike) -> bytes:
    """
    Read a whole file in binary mode.

    An unopenable file yields the same empty result as an empty file; the
    caller treats both as a failed upload.

    Args:
        path: File to read

    Returns:
        File contents, or b"" if the file cannot be read
    """
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        logger.debug(f"Could not read upload file {path}: {e}")
        return b""


def build_multipart_body(
    parameters: Mapping[str, str],
    upload_file: str | os.PathLike,
    file_part_name: str,
    boundary: str,
) -> Result[MultipartBody, str]:
    """
    Serialize text fields and one file into a multipart/form-data body.

    Parts are written in this order:
    1. One form-data part per parameter, in mapping iteration order
    2. The file as an application/octet-stream part, named file_part_name,
       with filename set to the upload path exactly as given
    3. The closing delimiter

    A parameter name or value that cannot be encoded is written as an empty
    string; only the boundary, the filename and the file part name are
    required to encode.

    Args:
        parameters: Mapping of form field name to value
        upload_file: Path of the file to attach
        file_part_name: Form field name of the file part
        boundary: Boundary token separating the parts

    Returns:
        Success with the MultipartBody, or Failure with a description of why
        the body could not be built
    """
    contents = read_file_bytes(upload_file)
    if not contents:
        return Failure(f"Upload file is missing or empty: {upload_file}")

    boundary_result = encode_utf8(boundary)
    if not is_successful(boundary_result):
        return Failure(f"Invalid boundary: {boundary_result.failure()}")
    delimiter = b"--" + boundary_result.unwrap()

    body = bytearray()

    for name, value in parameters.items():
        name_bytes = _encode_field_text(name)
        value_bytes = _encode_field_text(value)
        body += delimiter + CRLF
        body += b'Content-Disposition: form-data; name="' + name_bytes + b'"' + CRLF + CRLF
        body += value_bytes + CRLF

    filename_result = encode_utf8(os.fspath(upload_file))
    if not is_successful(filename_result):
        return Failure(f"Invalid upload filename: {filename_result.failure()}")

    part_name_result = encode_utf8(file_part_name)
    if not is_successful(part_name_result):
        return Failure(f"Invalid file part name: {part_name_result.failure()}")

    body += delimiter + CRLF
    body += (
        b'Content-Disposition: form-data; name="'
        + part_name_result.unwrap()
        + b'"; filename="'
        + filename_result.unwrap()
        + b'"'
        + CRLF
    )
    body += b"Content-Type: application/octet-stream" + CRLF
    body += CRLF
    body += contents + CRLF
    body += delimiter + b"--" + CRLF

    return Success(MultipartBody(boundary=boundary, content=bytes(body)))


def _encode_field_text(text: str) -> bytes:
    # Empty or unencodable field text is not fatal, it is written as empty.
    result = encode_utf8(text)
    if not is_successful(result):
        if text:
            logger.warning(f"Form field text could not be encoded and was left empty: {result.failure()}")
        return b""
    return result.unwrap()
