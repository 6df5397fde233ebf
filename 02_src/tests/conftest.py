"""Pytest configuration and fixtures."""

import logging
import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, now: int = 1_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def recording_sink():
    """Create in-memory sink."""
    from startup_recorder.sinks import RecordingStepSink

    return RecordingStepSink()


@pytest.fixture
def recorder(recording_sink):
    """Create an enabled, started recorder that records into memory."""
    from startup_recorder.recorder import StepRecorder

    rec = StepRecorder(sink=recording_sink, enabled=True)
    rec.start()
    return rec


@pytest.fixture
def clock():
    """Create a fake clock."""
    return FakeClock()


@pytest.fixture
def step_logger():
    """Create a logger for step lines."""
    logger = logging.getLogger("test.steps")
    logger.setLevel(logging.DEBUG)
    return logger
