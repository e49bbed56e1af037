"""
UploadResult domain model.
"""

from dataclasses import dataclass


SUCCESS_STATUS_CODE = 200


@dataclass(frozen=True, slots=True)
class UploadResult:
    """
    Outcome of a completed HTTP exchange.

    The server indicates a successful upload with status 200; every other
    status is a failure. There are no partial-success states.
    """

    status_code: int

    @property
    def success(self) -> bool:
        return self.status_code == SUCCESS_STATUS_CODE
