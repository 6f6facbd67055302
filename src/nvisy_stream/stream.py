"""Blocking byte stream on top of a possibly non-blocking channel."""

import io
import logging
from collections.abc import Buffer

from nvisy_stream.errors import ErrorKind, StreamError
from nvisy_stream.params import StreamParams
from nvisy_stream.policies import StallPolicy, policy_from_params
from nvisy_stream.protocols import EOF, ReadableChannel
from nvisy_stream.sink import BoundedSink, check_region, writable_view

logger = logging.getLogger(__name__)


class ChannelInputStream(io.RawIOBase):
    """Sequential, blocking reader over a `ReadableChannel`.

    A read only returns once the requested region is full, the channel hit
    EOF, or the channel raised. Zero-byte channel reads are retried according
    to the stall policy and never reach the caller.

    The stream does not own the channel unless `params.close_channel` is set.
    Reads on one instance must be serialized by the caller.
    """

    def __init__(
        self,
        channel: ReadableChannel,
        params: StreamParams | None = None,
        *,
        policy: StallPolicy | None = None,
    ) -> None:
        self._channel = channel
        self._params = params if params is not None else StreamParams()
        self._policy = policy if policy is not None else policy_from_params(self._params)
        self._single_byte = bytearray(1)
        super().__init__()

    @property
    def channel(self) -> ReadableChannel:
        return self._channel

    @property
    def size(self) -> int:
        """Total size reported by the channel, or `UNKNOWN_SIZE`."""
        return self._channel.size

    def readable(self) -> bool:
        return True

    def read_byte(self) -> int:
        """Return the next byte as an int in [0, 255], or `EOF`."""
        if self.read_into(self._single_byte, 0, 1) == EOF:
            return EOF
        return self._single_byte[0]

    def read_into(self, buffer: Buffer, offset: int = 0, length: int | None = None) -> int:
        """Fill `buffer[offset:offset + length]` from the channel.

        `length` defaults to the rest of the buffer. Returns the number of
        bytes written, which is less than `length` only when the channel
        reached EOF, or `EOF` if it was already drained. A zero `length`
        returns 0 without touching the channel.
        """
        view = writable_view(buffer)
        if length is None:
            length = max(view.nbytes - offset, 0)
        check_region(view.nbytes, offset, length)
        if length == 0:
            return 0
        if self.closed:
            msg = "Read attempted on a closed stream"
            raise StreamError(msg, kind=ErrorKind.CLOSED)
        return self._fill(BoundedSink(view, offset, length))

    def readinto(self, buffer: Buffer) -> int:
        """`io.RawIOBase` hook: like `read_into` but reports EOF as 0.

        A closed stream raises `ValueError` here, as every `io` object does.
        """
        view = writable_view(buffer)
        if view.nbytes and self.closed:
            msg = "I/O operation on closed file."
            raise ValueError(msg)
        count = self.read_into(view)
        return 0 if count == EOF else count

    def close(self) -> None:
        """Close the stream. Closing an already closed stream does nothing."""
        if self.closed:
            return
        try:
            if self._params.close_channel:
                logger.debug("Closing channel %r with its stream", self._channel)
                self._channel.close()
        finally:
            super().close()

    def _fill(self, sink: BoundedSink) -> int:
        stalls = 0
        while True:
            count = self._channel.read(sink)
            if count < 0:
                if sink.written == 0:
                    logger.debug("Channel %r reached EOF", self._channel)
                    return EOF
                return sink.written
            if count > 0 and stalls:
                logger.debug("Channel %r stalled %d times before progress", self._channel, stalls)
                stalls = 0
            if sink.is_full:
                return sink.written
            if count == 0:
                stalls += 1
                self._check_stalls(stalls)
                self._policy.stall(stalls)

    def _check_stalls(self, stalls: int) -> None:
        limit = self._params.max_stalls
        if limit is not None and stalls > limit:
            msg = f"Channel made no progress after {limit} consecutive reads"
            raise StreamError(msg, kind=ErrorKind.STALLED)
