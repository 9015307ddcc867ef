"""Request status codes reported by the online API."""

from __future__ import annotations

from enum import Enum


class RequestStatus(Enum):
    """Outcome of a request made to the online API."""

    OK = "ok"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    REQUEST_TIMEOUT = "request_timeout"
    INTERNAL_SERVER_ERROR = "internal_server_error"
    UNKNOWN = "unknown"

    def as_code(self) -> int:
        """Return the HTTP status code for this status (0 when unknown)."""
        return _CODES[self]

    def as_str(self) -> str:
        """Return a human readable description of this status."""
        return _DESCRIPTIONS[self]

    @staticmethod
    def from_code(code: int) -> "RequestStatus":
        """Return the status for an HTTP status code, or ``UNKNOWN``."""
        return _BY_CODE.get(code, RequestStatus.UNKNOWN)


_CODES = {
    RequestStatus.OK: 200,
    RequestStatus.UNAUTHORIZED: 401,
    RequestStatus.NOT_FOUND: 404,
    RequestStatus.REQUEST_TIMEOUT: 408,
    RequestStatus.INTERNAL_SERVER_ERROR: 500,
    RequestStatus.UNKNOWN: 0,
}

_DESCRIPTIONS = {
    RequestStatus.OK: "ok",
    RequestStatus.UNAUTHORIZED: "unauthorized",
    RequestStatus.NOT_FOUND: "not found",
    RequestStatus.REQUEST_TIMEOUT: "request timeout",
    RequestStatus.INTERNAL_SERVER_ERROR: "internal server error",
    RequestStatus.UNKNOWN: "unknown",
}

_BY_CODE = {
    code: status for status, code in _CODES.items() if status is not RequestStatus.UNKNOWN
}