"""Parameter types for stream configuration.

Params decide how a stream reacts to a channel that has no data ready yet;
they never carry per-read state.
"""

from enum import StrEnum

from pydantic import BaseModel, Field


class StallStrategy(StrEnum):
    """What the stream does between two stalled channel reads."""

    SPIN = "spin"
    """Retry immediately (default)."""

    YIELD = "yield"
    """Give up the rest of the thread's time slice before retrying."""

    SLEEP = "sleep"
    """Sleep for `stall_interval` seconds before retrying."""


class StreamParams(BaseModel, frozen=True):
    """Common parameters for channel-backed streams."""

    stall_strategy: StallStrategy = StallStrategy.SPIN
    """Retry strategy applied after a read that produced no bytes."""

    stall_interval: float = Field(default=0.001, ge=0)
    """Seconds to wait between stalled reads when sleeping."""

    max_stalls: int | None = Field(default=None, ge=1)
    """Consecutive stalled reads tolerated within one call. If None, unlimited."""

    close_channel: bool = False
    """Close the wrapped channel when the stream is closed."""
