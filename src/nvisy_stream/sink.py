"""Bounded sink backed by a region of a caller-owned buffer."""

from collections.abc import Buffer
from typing import ClassVar

from nvisy_stream.errors import ErrorKind, StreamError


def writable_view(buffer: Buffer | None) -> memoryview:
    """Return a flat, writable byte view over `buffer`."""
    if buffer is None:
        msg = "Destination buffer is required"
        raise StreamError(msg, kind=ErrorKind.INVALID_ARGUMENT)
    try:
        view = memoryview(buffer).cast("B")
    except TypeError as e:
        msg = f"Destination must be a contiguous buffer, got {type(buffer).__name__}"
        raise StreamError(msg, kind=ErrorKind.INVALID_ARGUMENT, source=e) from e
    if view.readonly:
        msg = f"Destination buffer is read-only ({type(buffer).__name__})"
        raise StreamError(msg, kind=ErrorKind.INVALID_ARGUMENT)
    return view


def check_region(capacity: int, offset: int, length: int) -> None:
    """Raise a bounds error unless `[offset, offset + length)` fits in `capacity`."""
    if offset < 0:
        msg = f"Offset must be non-negative, got {offset}"
        raise StreamError(msg, kind=ErrorKind.BOUNDS)
    if offset > capacity:
        msg = f"Offset {offset} is past the end of a {capacity}-byte buffer"
        raise StreamError(msg, kind=ErrorKind.BOUNDS)
    if length < 0:
        msg = f"Length must be non-negative, got {length}"
        raise StreamError(msg, kind=ErrorKind.BOUNDS)
    if length > capacity - offset:
        msg = f"Region [{offset}, {offset + length}) exceeds buffer of {capacity} bytes"
        raise StreamError(msg, kind=ErrorKind.BOUNDS)


class BoundedSink:
    """Sink that writes straight into `buffer[offset:offset + length]`.

    Capacity is fixed at construction; bytes offered past it are refused
    rather than buffered.
    """

    __slots__: ClassVar[tuple[str, str]] = ("_region", "_written")

    _region: memoryview
    _written: int

    def __init__(self, buffer: Buffer, offset: int, length: int) -> None:
        view = writable_view(buffer)
        check_region(view.nbytes, offset, length)
        self._region = view[offset : offset + length]
        self._written = 0

    @property
    def length(self) -> int:
        return self._region.nbytes

    @property
    def written(self) -> int:
        """Bytes accepted so far."""
        return self._written

    @property
    def remaining(self) -> int:
        return self._region.nbytes - self._written

    @property
    def is_full(self) -> bool:
        return self._written == self._region.nbytes

    def write(self, data: Buffer) -> int:
        """Copy as much of `data` as fits and return the number of bytes copied."""
        chunk = memoryview(data).cast("B")
        count = min(chunk.nbytes, self.remaining)
        if count:
            start = self._written
            self._region[start : start + count] = chunk[:count]
            self._written += count
        return count
