"""Step sink interface and the no-op reference sink."""

from typing import Protocol

from ..models import Step, current_millis


class IStepSink(Protocol):
    """Consumer of startup steps: creates them and observes begin/end."""

    def create_step(
        self,
        step_type: str | None,
        name: str | None,
        description: str | None,
        step_id: int,
        parent_id: int,
        level: int,
    ) -> Step:
        """Construct the concrete Step value for a newly tracked span."""
        ...

    def on_begin_step(self, step: Step) -> None:
        """Called right after a real step is created."""
        ...

    def on_end_step(self, step: Step) -> None:
        """Called right after a real step is popped and ended."""
        ...


class StepSink:
    """Default sink: plain Step values, no reaction to begin or end."""

    def create_step(
        self,
        step_type: str | None,
        name: str | None,
        description: str | None,
        step_id: int,
        parent_id: int,
        level: int,
    ) -> Step:
        return Step(
            type=step_type,
            name=name,
            description=description,
            id=step_id,
            parent_id=parent_id,
            level=level,
            begin_time=current_millis(),
        )

    def on_begin_step(self, step: Step) -> None:
        pass

    def on_end_step(self, step: Step) -> None:
        pass


class CompositeStepSink(StepSink):
    """Fans begin/end out to several sinks, in registration order.

    Steps are created by the first sink; when it has none, the default
    Step value is used.
    """

    def __init__(self, *sinks: IStepSink):
        self._sinks: list[IStepSink] = list(sinks)

    @property
    def sinks(self) -> list[IStepSink]:
        return list(self._sinks)

    def add_sink(self, sink: IStepSink) -> None:
        self._sinks.append(sink)

    def create_step(
        self,
        step_type: str | None,
        name: str | None,
        description: str | None,
        step_id: int,
        parent_id: int,
        level: int,
    ) -> Step:
        if self._sinks:
            return self._sinks[0].create_step(
                step_type, name, description, step_id, parent_id, level
            )
        return super().create_step(
            step_type, name, description, step_id, parent_id, level
        )

    def on_begin_step(self, step: Step) -> None:
        for sink in self._sinks:
            sink.on_begin_step(step)

    def on_end_step(self, step: Step) -> None:
        for sink in self._sinks:
            sink.on_end_step(step)
