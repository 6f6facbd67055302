"""Core protocols for byte channels and the sinks they write into."""

from collections.abc import Buffer
from typing import Final, Protocol, runtime_checkable

EOF: Final = -1
"""Returned by channels and streams once no more bytes will ever be produced."""

UNKNOWN_SIZE: Final = -1
"""Channel size when the total length is not known up front."""


@runtime_checkable
class ByteSink(Protocol):
    """Write target handed to a channel on every read."""

    @property
    def remaining(self) -> int:
        """Number of bytes the sink can still accept."""
        ...

    def write(self, data: Buffer) -> int:
        """Accept up to `remaining` bytes of `data` and return how many were taken.

        Bytes beyond the returned count are not consumed; the caller keeps
        ownership of them.
        """
        ...


@runtime_checkable
class ReadableChannel(Protocol):
    """Push-style byte source that writes into a caller-supplied sink."""

    @property
    def size(self) -> int:
        """Total byte length, or `UNKNOWN_SIZE`."""
        ...

    def read(self, sink: ByteSink) -> int:
        """Write available bytes into `sink`.

        Returns the number of bytes written this call, which may be 0 when
        no data is ready yet, or `EOF` once the channel is drained.
        """
        ...

    def close(self) -> None:
        """Release the channel. Calling it more than once is allowed."""
        ...
