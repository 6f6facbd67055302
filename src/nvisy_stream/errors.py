"""Error types for stream and channel operations."""

from enum import StrEnum
from typing import final


class ErrorKind(StrEnum):
    """Classification of stream errors."""

    INVALID_ARGUMENT = "invalid_argument"
    BOUNDS = "bounds"
    CLOSED = "closed"
    STALLED = "stalled"
    CONNECTION = "connection"
    NOT_FOUND = "not_found"
    TRANSPORT = "transport"


@final
class StreamError(Exception):
    """Base error for all stream and channel operations."""

    __slots__ = ("kind", "message", "source")

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.TRANSPORT,
        source: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.source = source

    def __repr__(self) -> str:
        if self.source is None:
            return f"StreamError({self.message!r}, kind={self.kind!r})"
        return f"StreamError({self.message!r}, kind={self.kind!r}, source={self.source!r})"

    @property
    def retryable(self) -> bool:
        """Whether reopening the channel and reading again may succeed."""
        return self.kind in (ErrorKind.CONNECTION, ErrorKind.TRANSPORT, ErrorKind.STALLED)
