"""
MultipartBody value object.
Holds a serialized multipart/form-data body together with its boundary.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MultipartBody:
    """A request body and the boundary delimiting its parts. Built fresh per request."""

    boundary: str
    content: bytes

    def __len__(self) -> int:
        return len(self.content)

    def __repr__(self):
        return f"MultipartBody(boundary={self.boundary}, size={len(self.content)})"
