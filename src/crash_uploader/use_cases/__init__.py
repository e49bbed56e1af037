"""
Use cases package for the crash report uploader.
"""

from .send_request import DEFAULT_USER_AGENT, create_send_request, send_request


__all__ = [
    "DEFAULT_USER_AGENT",
    "create_send_request",
    "send_request",
]
