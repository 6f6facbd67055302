"""Shared fixtures for the test suite."""

import random

import pytest

PAYLOAD_SIZE = 1024


@pytest.fixture
def payload() -> bytes:
    """Return 1 KiB of reproducible random bytes."""
    return random.Random(1024).randbytes(PAYLOAD_SIZE)
