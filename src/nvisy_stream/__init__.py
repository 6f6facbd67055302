"""Blocking byte streams over push-style, possibly non-blocking channels."""

from nvisy_stream.errors import ErrorKind, StreamError
from nvisy_stream.params import StallStrategy, StreamParams
from nvisy_stream.policies import (
    SleepPolicy,
    SpinPolicy,
    StallPolicy,
    YieldPolicy,
    policy_from_params,
)
from nvisy_stream.protocols import EOF, UNKNOWN_SIZE, ByteSink, ReadableChannel
from nvisy_stream.sink import BoundedSink
from nvisy_stream.stream import ChannelInputStream

__all__ = [
    "EOF",
    "UNKNOWN_SIZE",
    "BoundedSink",
    "ByteSink",
    "ChannelInputStream",
    "ErrorKind",
    "ReadableChannel",
    "SleepPolicy",
    "SpinPolicy",
    "StallPolicy",
    "StallStrategy",
    "StreamError",
    "StreamParams",
    "YieldPolicy",
    "policy_from_params",
]
