"""Step sinks."""

from .base import CompositeStepSink, IStepSink, StepSink
from .logging_sink import (
    STEP_LOGGER_NAME,
    LoggingStepSink,
    RecordingStepSink,
    format_step_line,
    pad_string,
)


def create_sink(kind: str) -> IStepSink:
    """Build the sink for a configured recorder kind."""
    if kind == "off":
        return StepSink()
    if kind == "logging":
        return LoggingStepSink()
    if kind == "memory":
        return CompositeStepSink(LoggingStepSink(), RecordingStepSink())
    raise ValueError(f"Unknown recorder kind: {kind!r}")


__all__ = [
    "IStepSink",
    "StepSink",
    "CompositeStepSink",
    "LoggingStepSink",
    "RecordingStepSink",
    "STEP_LOGGER_NAME",
    "create_sink",
    "format_step_line",
    "pad_string",
]
