"""Exceptions raised by the Unkey API client."""

from __future__ import annotations


class UnkeyError(Exception):
    """Base exception for Unkey API client errors."""

    pass


class UnkeyConnectionError(UnkeyError):
    """Raised when the request never produced an HTTP response."""

    pass


class UnkeyResponseError(UnkeyError):
    """Raised when a successful response body does not match the envelope."""

    pass


class UnkeyAPIError(UnkeyError):
    """Raised when the API answers with a non-2xx status.

    Carries the fields of the API's problem-details style error body.
    """

    def __init__(
        self,
        status_code: int,
        title: str,
        detail: str = "",
        request_id: str | None = None,
        error_type: str | None = None,
    ):
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.request_id = request_id
        self.error_type = error_type
        super().__init__(str(self))

    def __str__(self) -> str:
        message = f"HTTP {self.status_code} {self.title}"
        if self.detail:
            message = f"{message}: {self.detail}"
        if self.request_id:
            message = f"{message} (request id: {self.request_id})"
        return message


class UnkeyNotFoundError(UnkeyAPIError):
    """Raised when the requested entity does not exist remotely."""

    pass
