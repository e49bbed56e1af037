"""
UploadRequest domain model for the crash report uploader.
Describes a single crash report submission as handed over by the caller.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping

from crash_uploader.models.target_url import sanitize_url


@dataclass(frozen=True, slots=True)
class UploadRequest:
    """
    Input value for one upload.

    The request is consumed once and never mutated. Field names are not
    validated here; the upload use case checks them before any network
    activity so that an invalid request is reported like any other failure.
    """

    url: str
    parameters: Mapping[str, str] = field(default_factory=dict)
    upload_file: str | os.PathLike = ""
    file_part_name: str = "upload_file_minidump"

    @property
    def filename(self) -> str:
        """Filename as emitted in the Content-Disposition header (the full path as given)."""
        return os.fspath(self.upload_file)

    def get_sanitized_url(self) -> str:
        """Get the URL in a form safe for logs (no credentials or query string)."""
        return sanitize_url(self.url)
