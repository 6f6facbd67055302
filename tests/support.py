"""Channel doubles shared by the test modules."""

from nvisy_stream import EOF, ByteSink, ReadableChannel
from nvisy_stream.channels.memory import BytesChannel


class HaltingChannel:
    """Returns 0 bytes on its first `halt_times` reads, then serves `data`."""

    def __init__(self, data: bytes, halt_times: int) -> None:
        self._inner = BytesChannel(data)
        self._halt_times = halt_times
        self.reads = 0

    @property
    def size(self) -> int:
        return self._inner.size

    def read(self, sink: ByteSink) -> int:
        self.reads += 1
        if self._halt_times > 0:
            self._halt_times -= 1
            return 0
        return self._inner.read(sink)

    def close(self) -> None:
        self._inner.close()


class RecordingChannel:
    """Counts reads and closes on a wrapped channel."""

    def __init__(self, inner: ReadableChannel) -> None:
        self._inner = inner
        self.reads = 0
        self.closes = 0

    @property
    def size(self) -> int:
        return self._inner.size

    def read(self, sink: ByteSink) -> int:
        self.reads += 1
        return self._inner.read(sink)

    def close(self) -> None:
        self.closes += 1
        self._inner.close()


class TrailingEofChannel:
    """Writes all of `data` and reports EOF in the same call."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self.reads = 0

    @property
    def size(self) -> int:
        return len(self._data)

    def read(self, sink: ByteSink) -> int:
        self.reads += 1
        if self._data:
            accepted = sink.write(self._data)
            self._data = self._data[accepted:]
        return EOF

    def close(self) -> None:
        pass


class FailingChannel:
    """Raises `error` on every read."""

    def __init__(self, error: BaseException) -> None:
        self._error = error
        self.reads = 0

    @property
    def size(self) -> int:
        return 0

    def read(self, sink: ByteSink) -> int:
        self.reads += 1
        raise self._error

    def close(self) -> None:
        pass


class RecordingPolicy:
    """Stall policy that remembers every attempt it was called with."""

    def __init__(self) -> None:
        self.attempts: list[int] = []

    def stall(self, attempt: int) -> None:
        self.attempts.append(attempt)


class ScheduledStallChannel:
    """In-memory channel that stalls on the reads flagged in `schedule`.

    `schedule[i]` decides whether the i-th read returns 0 instead of data;
    reads past the end of the schedule never stall.
    """

    def __init__(self, data: bytes, schedule: list[bool], max_chunk: int | None = None) -> None:
        self._inner = BytesChannel(data, max_chunk=max_chunk)
        self._schedule = iter(schedule)
        self.reads = 0
        self.stalls = 0

    @property
    def size(self) -> int:
        return self._inner.size

    def read(self, sink: ByteSink) -> int:
        self.reads += 1
        if next(self._schedule, False):
            self.stalls += 1
            return 0
        return self._inner.read(sink)

    def close(self) -> None:
        self._inner.close()
