"""Channel over binary file-like objects."""

import logging
from typing import ClassVar, Protocol

from nvisy_stream.errors import ErrorKind, StreamError
from nvisy_stream.protocols import EOF, UNKNOWN_SIZE, ByteSink

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024


class SupportsRead(Protocol):
    """Binary source; non-blocking sources return None when nothing is ready."""

    def read(self, n: int, /) -> bytes | None: ...

    def close(self) -> None: ...


class FileChannel:
    """Channel pulling bytes from a binary file-like object.

    The source is never asked for more than the sink can take, so nothing
    read from it is dropped. Errors raised by the source propagate as-is.
    """

    __slots__: ClassVar[tuple[str, ...]] = (
        "_chunk_size",
        "_close_source",
        "_open",
        "_size",
        "_source",
    )

    _chunk_size: int
    _close_source: bool
    _open: bool
    _size: int
    _source: SupportsRead

    def __init__(
        self,
        source: SupportsRead,
        size: int = UNKNOWN_SIZE,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        *,
        close_source: bool = True,
    ) -> None:
        if chunk_size < 1:
            msg = f"chunk_size must be positive, got {chunk_size}"
            raise StreamError(msg, kind=ErrorKind.INVALID_ARGUMENT)
        self._source = source
        self._size = size
        self._chunk_size = chunk_size
        self._close_source = close_source
        self._open = True

    @property
    def size(self) -> int:
        return self._size

    def read(self, sink: ByteSink) -> int:
        """Read one chunk from the source into `sink`."""
        if not self._open:
            msg = "Read attempted on a closed channel"
            raise StreamError(msg, kind=ErrorKind.CLOSED)
        data = self._source.read(min(sink.remaining, self._chunk_size))
        if data is None:
            return 0
        if not data:
            return EOF
        return sink.write(data)

    def close(self) -> None:
        if not self._open:
            return
        self._open = False
        if self._close_source:
            logger.debug("Closing source %r", self._source)
            self._source.close()


Channel = FileChannel
