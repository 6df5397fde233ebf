"""Startup step recorder: ids, parent linkage and nesting depth."""

import itertools
import threading
from contextlib import contextmanager
from typing import Any, Iterator, Protocol

from ..config import RecorderConfig, parse_max_depth
from ..logging_config import get_logger
from ..models import DISABLED_STEP, Step, step_type_name
from ..sinks import IStepSink, StepSink, create_sink

logger = get_logger(__name__)


class IStepRecorder(Protocol):
    """Tracks nested startup steps for one lifecycle."""

    def start(self) -> None:
        """Open the root context for a tracked lifecycle."""
        ...

    def stop(self) -> None:
        """Disable tracking and discard any open steps."""
        ...

    def begin_step(
        self, step_type: Any, name: str | None, description: str | None
    ) -> Step:
        """Open a step nested under the current one."""
        ...

    def end_step(self, step: Step) -> None:
        """Close the innermost open step."""
        ...


class StepRecorder:
    """Default recorder; completed steps go to the configured sink.

    The id counter is safe to share between threads. The open-step stack is
    not: begin/end calls are expected to come from a single logical call
    chain per lifecycle (or be serialized by the host). Callers must end
    steps in reverse order of beginning; out-of-order or repeated
    ``end_step`` calls are not detected and skew later parent/level values.

    Without a prior ``start()`` the stack has no root entry; the level is then
    clamped to 0 rather than going negative, so such steps are still subject
    to ``max_depth`` (``max_depth=0`` tracks nothing even before start).
    """

    def __init__(
        self,
        sink: IStepSink | None = None,
        enabled: bool = False,
        disable_after_started: bool = True,
        max_depth: int = -1,
    ):
        self._sink = sink if sink is not None else StepSink()
        self._enabled = enabled
        self._disable_after_started = disable_after_started
        self._max_depth = parse_max_depth(max_depth)

        self._counter = itertools.count(1)
        self._counter_lock = threading.Lock()
        # Top of stack = innermost open step id, 0 = root pushed by start()
        self._current_steps: list[int] = []

    @classmethod
    def from_config(
        cls, config: RecorderConfig, sink: IStepSink | None = None
    ) -> "StepRecorder":
        """Build a recorder from config; the sink defaults to config.recorder."""
        return cls(
            sink=sink if sink is not None else create_sink(config.recorder),
            enabled=config.enabled,
            disable_after_started=config.disable_after_started,
            max_depth=config.max_depth,
        )

    @property
    def sink(self) -> IStepSink:
        return self._sink

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value

    @property
    def disable_after_started(self) -> bool:
        """Advisory: the host stops the recorder once it has started."""
        return self._disable_after_started

    @disable_after_started.setter
    def disable_after_started(self, value: bool) -> None:
        self._disable_after_started = value

    @property
    def max_depth(self) -> int:
        """-1 = unlimited; otherwise steps at level >= max_depth are skipped."""
        return self._max_depth

    @max_depth.setter
    def max_depth(self, value: int) -> None:
        self._max_depth = parse_max_depth(value)

    @property
    def depth(self) -> int:
        """Number of entries on the open-step stack, root included."""
        return len(self._current_steps)

    def start(self) -> None:
        self._current_steps.append(0)
        logger.debug(
            "Startup recorder started (enabled=%s, max_depth=%s)",
            self._enabled,
            self._max_depth,
        )

    def stop(self) -> None:
        self._enabled = False
        if len(self._current_steps) > 1:
            logger.debug(
                "Startup recorder stopped with %d steps still open",
                len(self._current_steps) - 1,
            )
        self._current_steps.clear()

    def begin_step(
        self, step_type: Any, name: str | None, description: str | None
    ) -> Step:
        if not self._enabled:
            return DISABLED_STEP

        # start() pre-pushes the root, so the first real step is level 0
        level = max(len(self._current_steps) - 1, 0)
        if self._max_depth != -1 and level >= self._max_depth:
            return DISABLED_STEP

        with self._counter_lock:
            step_id = next(self._counter)
        parent_id = self._current_steps[-1] if self._current_steps else 0

        step = self._sink.create_step(
            step_type_name(step_type), name, description, step_id, parent_id, level
        )
        self._sink.on_begin_step(step)
        self._current_steps.append(step_id)
        return step

    def end_step(self, step: Step) -> None:
        if step.disabled:
            return

        if self._current_steps:
            self._current_steps.pop()
        step.end()
        self._sink.on_end_step(step)

    @contextmanager
    def step(
        self, step_type: Any, name: str | None, description: str | None = None
    ) -> Iterator[Step]:
        """Track the enclosed block as one step."""
        current = self.begin_step(step_type, name, description)
        try:
            yield current
        finally:
            self.end_step(current)
