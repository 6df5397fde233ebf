"""Tests for Application."""

import pytest

from sim import SimComponent, SimDatabase, build_sim_components
from startup_recorder.app import Application
from startup_recorder.recorder import StepRecorder


class Recorded:
    """Component that notes start/stop order."""

    def __init__(self, name: str, calls: list):
        self.name = name
        self._calls = calls

    async def start(self) -> None:
        self._calls.append(("start", self.name))

    async def stop(self) -> None:
        self._calls.append(("stop", self.name))


class TestApplicationStart:
    """Tests for Application.start()."""

    @pytest.mark.asyncio
    async def test_one_step_per_component(self, recording_sink):
        """Test that each component start is a child of the application step."""
        recorder = StepRecorder(sink=recording_sink, enabled=True)
        calls = []
        app = Application(
            recorder, [Recorded("db", calls), Recorded("cache", calls)]
        )

        await app.start()

        assert app.started
        assert calls == [("start", "db"), ("start", "cache")]

        steps = {s.name: s for s in recording_sink.steps}
        assert set(steps) == {"application", "db", "cache"}
        root = steps["application"]
        assert root.type == "Application"
        assert (root.id, root.parent_id, root.level) == (1, 0, 0)
        for name in ("db", "cache"):
            assert steps[name].parent_id == root.id
            assert steps[name].level == 1
            assert steps[name].type == "Recorded"
            assert steps[name].description == "Start component"

    @pytest.mark.asyncio
    async def test_nested_component_steps(self, recording_sink):
        """Test that components can open their own nested steps."""
        recorder = StepRecorder(sink=recording_sink, enabled=True)
        db = SimDatabase("database", recorder, phases={"connect": 0, "migrate": 0})
        app = Application(recorder, [db])

        await app.start()

        steps = {s.name: s for s in recording_sink.steps}
        assert steps["connect"].parent_id == steps["database"].id
        assert steps["connect"].level == 2
        assert steps["connect"].type == "SimDatabase"
        assert steps["connect"].tags == {"component": "database"}
        assert steps["migrate"].id == steps["connect"].id + 1
        assert db.running

    @pytest.mark.asyncio
    async def test_disable_after_started(self, recording_sink):
        """Test that the recorder is stopped once the application started."""
        recorder = StepRecorder(sink=recording_sink, enabled=True)
        app = Application(recorder, [])

        await app.start()

        assert recorder.enabled is False
        assert recorder.depth == 0

    @pytest.mark.asyncio
    async def test_keep_recording_after_started(self, recording_sink):
        """Test that tracking continues when auto-disable is off."""
        recorder = StepRecorder(
            sink=recording_sink, enabled=True, disable_after_started=False
        )
        app = Application(recorder, [])

        await app.start()

        assert recorder.enabled is True
        step = recorder.begin_step("Late", "late", "after start")
        assert step.level == 0
        assert step.parent_id == 0

    @pytest.mark.asyncio
    async def test_max_depth_hides_components(self, recording_sink):
        """Test that max depth 1 keeps only the application step."""
        recorder = StepRecorder(sink=recording_sink, enabled=True, max_depth=1)
        app = Application(recorder, build_sim_components(recorder))

        await app.start()

        assert [s.name for s in recording_sink.steps] == ["application"]

    @pytest.mark.asyncio
    async def test_disabled_recorder(self, recording_sink):
        """Test that a disabled recorder still lets the application start."""
        recorder = StepRecorder(sink=recording_sink)
        app = Application(recorder, build_sim_components(recorder))

        await app.start()

        assert app.started
        assert recording_sink.steps == []

    @pytest.mark.asyncio
    async def test_failing_component(self, recording_sink):
        """Test that a component failure propagates and ends open steps."""

        class Broken(SimComponent):
            async def start(self) -> None:
                raise RuntimeError("cannot start")

        recorder = StepRecorder(sink=recording_sink, enabled=True)
        app = Application(recorder, [Broken("broken", recorder)])

        with pytest.raises(RuntimeError, match="cannot start"):
            await app.start()

        assert not app.started
        assert [s.name for s in recording_sink.steps] == ["broken", "application"]
        assert recorder.enabled is False
        assert recorder.depth == 0

    @pytest.mark.asyncio
    async def test_retry_after_failure(self, recording_sink):
        """Test that a retried start records from level 0 again."""

        class Flaky(SimComponent):
            attempts = 0

            async def start(self) -> None:
                Flaky.attempts += 1
                if Flaky.attempts == 1:
                    raise RuntimeError("not yet")

        recorder = StepRecorder(sink=recording_sink, enabled=True)
        app = Application(recorder, [Flaky("flaky", recorder)])

        with pytest.raises(RuntimeError, match="not yet"):
            await app.start()
        recording_sink.clear()

        recorder.enabled = True
        await app.start()

        steps = {s.name: s for s in recording_sink.steps}
        root = steps["application"]
        assert (root.level, root.parent_id) == (0, 0)
        assert steps["flaky"].parent_id == root.id
        assert steps["flaky"].level == 1
        assert app.started

    @pytest.mark.asyncio
    async def test_start_twice(self, recording_sink):
        recorder = StepRecorder(sink=recording_sink, enabled=True)
        app = Application(recorder, [])
        await app.start()
        with pytest.raises(RuntimeError):
            await app.start()


class TestApplicationStop:
    """Tests for Application.stop()."""

    @pytest.mark.asyncio
    async def test_stop_reverse_order(self, recording_sink):
        recorder = StepRecorder(
            sink=recording_sink, enabled=True, disable_after_started=False
        )
        calls = []
        app = Application(recorder, [Recorded("a", calls), Recorded("b", calls)])
        await app.start()
        calls.clear()

        await app.stop()

        assert calls == [("stop", "b"), ("stop", "a")]
        assert not app.started
        assert recorder.enabled is False
        assert recorder.depth == 0

    def test_add_component_after_start(self, recording_sink):
        recorder = StepRecorder(sink=recording_sink)
        app = Application(recorder)
        app._started = True
        with pytest.raises(RuntimeError):
            app.add_component(Recorded("late", []))
