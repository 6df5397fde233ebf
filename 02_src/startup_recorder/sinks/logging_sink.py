"""Log-line and in-memory reference sinks."""

import logging
import threading
from typing import Callable

from ..logging_config import get_logger
from ..models import Step, current_millis
from .base import StepSink

STEP_LOGGER_NAME = "startup_recorder.steps"


def pad_string(level: int) -> str:
    """Indentation for a nesting level: two spaces per level."""
    if level <= 0:
        return ""
    return " " * (level * 2)


def format_step_line(step: Step, elapsed_ms: int) -> str:
    """Render a finished step as one log line.

    Example: ``    12 ms :   Database - Connect pool(db)``
    """
    elapsed = f"{elapsed_ms:>6} ms"
    out = f"{pad_string(step.level)}{step.type}"
    return f"{elapsed} : {out} - {step.description}({step.name})"


class LoggingStepSink(StepSink):
    """Emits one INFO line per completed step."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        clock: Callable[[], int] = current_millis,
    ):
        self._logger = logger or get_logger(STEP_LOGGER_NAME)
        self._clock = clock

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def on_end_step(self, step: Step) -> None:
        if not self._logger.isEnabledFor(logging.INFO):
            return
        elapsed_ms = self._clock() - step.begin_time
        self._logger.info(
            "%s",
            format_step_line(step, elapsed_ms),
            extra={"context": {**step.to_dict(), "elapsed_ms": elapsed_ms}},
        )


class RecordingStepSink(StepSink):
    """Keeps completed steps in memory for the current run."""

    def __init__(self) -> None:
        self._steps: list[Step] = []
        self._lock = threading.Lock()

    @property
    def steps(self) -> list[Step]:
        """Completed steps in completion order (children before parents)."""
        with self._lock:
            return list(self._steps)

    def on_end_step(self, step: Step) -> None:
        with self._lock:
            self._steps.append(step)

    def clear(self) -> None:
        with self._lock:
            self._steps.clear()
