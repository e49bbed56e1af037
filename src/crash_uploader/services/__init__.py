"""
Services package for the crash report uploader.
Pure helpers used by the upload use case: field validation and body construction.
"""

from .multipart import (
    build_multipart_body,
    encode_utf8,
    generate_multipart_boundary,
    generate_request_header,
    read_file_bytes,
)
from .validation import check_parameters, is_valid_field_name


__all__ = [
    "build_multipart_body",
    "check_parameters",
    "encode_utf8",
    "generate_multipart_boundary",
    "generate_request_header",
    "is_valid_field_name",
    "read_file_bytes",
]
