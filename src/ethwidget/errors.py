"""Widget data error types."""

from __future__ import annotations

from enum import Enum


class WidgetErrorCode(Enum):
    """Error classification codes."""

    NETWORK = "network"
    PROTOCOL = "protocol"
    DECODE = "decode"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    UNEXPECTED = "unexpected"


class WidgetDataError(Exception):
    """Fetch failure with an error code.

    A failed cycle is never retried here; the host refreshes again at the
    next scheduled instant.

    Attributes:
        message: Human-readable error description.
        code: Structured error code for programmatic handling.
    """

    def __init__(
        self,
        message: str,
        code: WidgetErrorCode = WidgetErrorCode.NETWORK,
    ) -> None:
        super().__init__(message)
        self.code = code


class NetworkError(WidgetDataError):
    """Request could not complete (DNS, connection refused, timeout)."""

    def __init__(self, message: str, code: WidgetErrorCode = WidgetErrorCode.NETWORK) -> None:
        super().__init__(message, code=code)


class ProtocolError(WidgetDataError):
    """API answered with a non-success HTTP status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message, code=WidgetErrorCode.PROTOCOL)
        self.status_code = status_code


class DecodeError(WidgetDataError):
    """Payload did not parse into the expected shape."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=WidgetErrorCode.DECODE)
