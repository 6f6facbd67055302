"""Retry strategies applied when a channel read produces no bytes."""

import time
from collections.abc import Callable
from typing import ClassVar, Protocol, runtime_checkable

from nvisy_stream.params import StallStrategy, StreamParams


@runtime_checkable
class StallPolicy(Protocol):
    """Decides how to wait before retrying a stalled channel."""

    def stall(self, attempt: int) -> None:
        """Called after the `attempt`-th consecutive zero-byte read."""
        ...


class SpinPolicy:
    """Retry immediately."""

    __slots__: ClassVar[tuple[()]] = ()

    def stall(self, attempt: int) -> None:
        pass


class YieldPolicy:
    """Yield the thread before each retry."""

    __slots__: ClassVar[tuple[()]] = ()

    def stall(self, attempt: int) -> None:
        time.sleep(0)


class SleepPolicy:
    """Sleep a fixed interval before each retry."""

    __slots__: ClassVar[tuple[str, str]] = ("_interval", "_sleep")

    def __init__(self, interval: float, sleep: Callable[[float], None] = time.sleep) -> None:
        if interval < 0:
            msg = f"Sleep interval must be non-negative, got {interval}"
            raise ValueError(msg)
        self._interval = interval
        self._sleep = sleep

    @property
    def interval(self) -> float:
        return self._interval

    def stall(self, attempt: int) -> None:
        self._sleep(self._interval)


def policy_from_params(params: StreamParams) -> StallPolicy:
    """Build the stall policy selected by `params`."""
    match params.stall_strategy:
        case StallStrategy.SPIN:
            return SpinPolicy()
        case StallStrategy.YIELD:
            return YieldPolicy()
        case StallStrategy.SLEEP:
            return SleepPolicy(params.stall_interval)
