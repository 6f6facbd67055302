"""Tests for :mod:`nvisy_stream.errors`."""

import pytest

from nvisy_stream import ErrorKind, StreamError


def test_defaults_to_transport() -> None:
    error = StreamError("boom")

    assert error.kind is ErrorKind.TRANSPORT
    assert error.message == "boom"
    assert error.source is None
    assert str(error) == "boom"


def test_repr_without_source() -> None:
    error = StreamError("closed", kind=ErrorKind.CLOSED)

    assert repr(error) == "StreamError('closed', kind=<ErrorKind.CLOSED: 'closed'>)"


def test_repr_reports_source() -> None:
    cause = OSError("reset")
    error = StreamError("read failed", kind=ErrorKind.CONNECTION, source=cause)

    assert error.source is cause
    assert repr(error) == (
        "StreamError('read failed', kind=<ErrorKind.CONNECTION: 'connection'>, "
        "source=OSError('reset'))"
    )


@pytest.mark.parametrize(
    ("kind", "retryable"),
    [
        (ErrorKind.TRANSPORT, True),
        (ErrorKind.CONNECTION, True),
        (ErrorKind.STALLED, True),
        (ErrorKind.CLOSED, False),
        (ErrorKind.BOUNDS, False),
        (ErrorKind.INVALID_ARGUMENT, False),
        (ErrorKind.NOT_FOUND, False),
    ],
)
def test_retryable(kind: ErrorKind, retryable: bool) -> None:
    assert StreamError("x", kind=kind).retryable is retryable
