"""In-memory channel."""

import logging
from collections.abc import Buffer
from typing import ClassVar

from nvisy_stream.errors import ErrorKind, StreamError
from nvisy_stream.protocols import EOF, ByteSink

logger = logging.getLogger(__name__)


class BytesChannel:
    """Channel serving the contents of a buffer.

    The buffer is not copied; mutating it while the channel is read gives
    undefined results.
    """

    __slots__: ClassVar[tuple[str, ...]] = ("_data", "_max_chunk", "_open", "_position")

    _data: memoryview
    _max_chunk: int | None
    _open: bool
    _position: int

    def __init__(self, data: Buffer, max_chunk: int | None = None) -> None:
        if max_chunk is not None and max_chunk < 1:
            msg = f"max_chunk must be positive, got {max_chunk}"
            raise StreamError(msg, kind=ErrorKind.INVALID_ARGUMENT)
        self._data = memoryview(data).toreadonly().cast("B")
        self._max_chunk = max_chunk
        self._open = True
        self._position = 0

    @property
    def size(self) -> int:
        return self._data.nbytes

    @property
    def position(self) -> int:
        """Bytes handed out so far."""
        return self._position

    def read(self, sink: ByteSink) -> int:
        """Write the next bytes into `sink`, at most `max_chunk` per call."""
        if not self._open:
            msg = "Read attempted on a closed channel"
            raise StreamError(msg, kind=ErrorKind.CLOSED)
        if self._position >= self._data.nbytes:
            return EOF
        end = self._data.nbytes
        if self._max_chunk is not None:
            end = min(end, self._position + self._max_chunk)
        count = sink.write(self._data[self._position : end])
        self._position += count
        return count

    def close(self) -> None:
        if self._open:
            self._open = False
            logger.debug("Closed in-memory channel at %d/%d", self._position, self._data.nbytes)


Channel = BytesChannel
