"""
Domain models package for the crash report uploader.
Contains the value objects that flow through an upload.
"""

from .multipart_body import MultipartBody
from .target_url import TargetUrl, sanitize_url
from .upload_request import UploadRequest
from .upload_result import UploadResult


__all__ = [
    "MultipartBody",
    "TargetUrl",
    "UploadRequest",
    "UploadResult",
    "sanitize_url",
]
