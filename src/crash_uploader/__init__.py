"""
Crash report uploader package.

Submits crash reports to a collection server as a multipart/form-data POST
carrying text form fields and one binary file.
"""

__version__ = "1.0.0"

from crash_uploader.controllers.upload_controller import UploadController  # noqa: E402
from crash_uploader.models import UploadRequest, UploadResult  # noqa: E402


__all__ = [
    "UploadController",
    "UploadRequest",
    "UploadResult",
]
