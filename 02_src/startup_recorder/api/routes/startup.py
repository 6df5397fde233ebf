"""Startup step API routes."""

from typing import Any

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from ...recorder import StepRecorder
from ...sinks import RecordingStepSink


class StartupStepResponse(BaseModel):
    """Response model for a recorded startup step."""

    id: int
    parent_id: int
    level: int
    type: str | None
    name: str | None
    description: str | None
    begin_time: int
    end_time: int | None
    duration_ms: int | None
    tags: dict[str, str]


class RecorderSettingsResponse(BaseModel):
    """Response model for the recorder settings."""

    enabled: bool
    disable_after_started: bool
    max_depth: int
    recording: bool


def create_startup_router(
    recorder: StepRecorder, recording: RecordingStepSink | None = None
) -> APIRouter:
    """Create startup steps router."""
    router = APIRouter(prefix="/api", tags=["startup"])

    @router.get("/startup-steps", response_model=list[StartupStepResponse])
    async def get_startup_steps(
        max_level: int | None = Query(None, ge=0, description="Deepest level"),
        step_type: str | None = Query(
            None, alias="type", description="Filter by step type"
        ),
    ) -> list[dict[str, Any]]:
        """Get completed startup steps in completion order."""
        if recording is None:
            raise HTTPException(status_code=404, detail="Step recording not enabled")

        steps = recording.steps
        if max_level is not None:
            steps = [s for s in steps if s.level <= max_level]
        if step_type is not None:
            steps = [s for s in steps if s.type == step_type]

        return [
            {
                **s.to_dict(),
                "duration_ms": (
                    s.end_time - s.begin_time if s.end_time is not None else None
                ),
            }
            for s in steps
        ]

    @router.get("/startup-recorder", response_model=RecorderSettingsResponse)
    async def get_recorder_settings() -> dict[str, Any]:
        """Get current recorder settings."""
        return {
            "enabled": recorder.enabled,
            "disable_after_started": recorder.disable_after_started,
            "max_depth": recorder.max_depth,
            "recording": recording is not None,
        }

    return router
