"""
Configuration management for the crash report uploader.

This module provides a configuration dataclass that loads settings from
environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass

from crash_uploader.exceptions import InvalidUrlError
from crash_uploader.models.target_url import TargetUrl, sanitize_url
from crash_uploader.use_cases.send_request import DEFAULT_USER_AGENT


DEFAULT_FILE_PART_NAME = "upload_file_minidump"


@dataclass
class UploaderConfig:
    """
    Configuration for the crash report uploader.

    This configuration is typically loaded from environment variables
    but can also be constructed directly for testing.

    Attributes
    ----------
    url : str
        Collection server URL used when no URL is given explicitly
    user_agent : str
        User-Agent sent with uploads
    file_part_name : str
        Form field name of the attached file
    """

    url: str = ""
    user_agent: str = DEFAULT_USER_AGENT
    file_part_name: str = DEFAULT_FILE_PART_NAME

    @classmethod
    def from_env(cls) -> "UploaderConfig":
        """
        Load configuration from environment variables.

        Returns
        -------
        UploaderConfig
            Configuration loaded from environment

        Examples
        --------
        >>> os.environ["CRASH_UPLOAD_URL"] = "https://crash.example.com/submit"
        >>> config = UploaderConfig.from_env()
        >>> config.url
        'https://crash.example.com/submit'
        """
        return cls(
            url=os.getenv("CRASH_UPLOAD_URL", ""),
            user_agent=os.getenv("CRASH_UPLOAD_USER_AGENT") or DEFAULT_USER_AGENT,
            file_part_name=os.getenv("CRASH_UPLOAD_FILE_PART_NAME") or DEFAULT_FILE_PART_NAME,
        )

    def validate(self) -> list[str]:
        """
        Validate configuration and return list of error messages.

        Returns
        -------
        list[str]
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.url:
            errors.append("CRASH_UPLOAD_URL is not set")
        else:
            try:
                TargetUrl.parse(self.url)
            except InvalidUrlError as e:
                errors.append(f"CRASH_UPLOAD_URL is invalid: {e}")

        if not self.file_part_name:
            errors.append("File part name cannot be empty")

        return errors

    def __repr__(self) -> str:
        """Return string representation with the URL sanitized for logs."""
        return (
            f"UploaderConfig(url={sanitize_url(self.url)!r}, "
            f"user_agent={self.user_agent!r}, "
            f"file_part_name={self.file_part_name!r})"
        )
