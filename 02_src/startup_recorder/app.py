"""Host application bootstrap with startup step tracking."""

from typing import Protocol, Sequence

from .logging_config import get_logger
from .recorder import StepRecorder

logger = get_logger(__name__)


class IComponent(Protocol):
    """A unit the host starts and stops."""

    name: str

    async def start(self) -> None:
        """Start the component."""
        ...

    async def stop(self) -> None:
        """Stop the component."""
        ...


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Start components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...


class Application:
    """Starts components in order, recording one step per component."""

    def __init__(
        self,
        recorder: StepRecorder,
        components: Sequence[IComponent] = (),
        name: str = "application",
    ):
        self._recorder = recorder
        self._components: list[IComponent] = list(components)
        self._name = name
        self._started = False

    @property
    def recorder(self) -> StepRecorder:
        return self._recorder

    @property
    def components(self) -> list[IComponent]:
        return list(self._components)

    @property
    def started(self) -> bool:
        return self._started

    def add_component(self, component: IComponent) -> None:
        if self._started:
            raise RuntimeError("Application already started")
        self._components.append(component)

    async def start(self) -> None:
        """Start components in dependency order."""
        if self._started:
            raise RuntimeError("Application already started")

        logger.info("Starting %s", self._name)
        self._recorder.start()

        try:
            with self._recorder.step(type(self), self._name, "Start application"):
                for component in self._components:
                    with self._recorder.step(
                        type(component), component.name, "Start component"
                    ):
                        await component.start()
                    logger.debug("Component %s started", component.name)
        except Exception:
            # Drop the root so a retried start() begins at level 0 again
            logger.error("Failed to start %s", self._name, exc_info=True)
            self._recorder.stop()
            raise

        self._started = True
        logger.info("%s started with %d components", self._name, len(self._components))

        # Application reached "started": nothing left to record
        if self._recorder.disable_after_started:
            self._recorder.stop()

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        for component in reversed(self._components):
            await component.stop()
            logger.debug("Component %s stopped", component.name)
        self._recorder.stop()
        self._started = False
        logger.info("%s stopped", self._name)
