"""Simulated host components for exercising the startup recorder."""

import asyncio

from startup_recorder.logging_config import get_logger
from startup_recorder.recorder import IStepRecorder

logger = get_logger(__name__)


class SimComponent:
    """Component that sleeps through a few nested startup phases."""

    def __init__(
        self,
        name: str,
        recorder: IStepRecorder,
        phases: dict[str, float] | None = None,
        delay: float = 0.0,
    ):
        self.name = name
        self._recorder = recorder
        self._phases = phases or {}
        self._delay = delay
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    async def start(self) -> None:
        if self._delay:
            await asyncio.sleep(self._delay)
        for phase, seconds in self._phases.items():
            step = self._recorder.begin_step(self, phase, f"{self.name} {phase}")
            step.add_tag("component", self.name)
            try:
                await asyncio.sleep(seconds)
            finally:
                self._recorder.end_step(step)
        self._running = True

    async def stop(self) -> None:
        self._running = False


class SimDatabase(SimComponent):
    pass


class SimCache(SimComponent):
    pass


class SimRoutes(SimComponent):
    pass


def build_sim_components(recorder: IStepRecorder) -> list[SimComponent]:
    """Hardcoded component set for the demo server."""
    return [
        SimDatabase(
            "database",
            recorder,
            phases={"connect": 0.05, "migrate": 0.02},
        ),
        SimCache("cache", recorder, phases={"warmup": 0.01}),
        SimRoutes("routes", recorder, delay=0.005),
    ]
