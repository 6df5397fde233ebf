"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..app import Application
from ..sinks import CompositeStepSink, RecordingStepSink
from .routes import startup


def find_recording_sink(application: Application) -> RecordingStepSink | None:
    """Locate the in-memory sink behind the application's recorder."""
    sink = application.recorder.sink
    if isinstance(sink, RecordingStepSink):
        return sink
    if isinstance(sink, CompositeStepSink):
        for child in sink.sinks:
            if isinstance(child, RecordingStepSink):
                return child
    return None


def create_fastapi_app(
    application: Application, recording: RecordingStepSink | None = None
) -> FastAPI:
    """Create a FastAPI app whose startup is the tracked application start."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await application.start()
        try:
            yield
        finally:
            await application.stop()

    fastapi_app = FastAPI(
        title="Startup Recorder API",
        description="Startup steps recorded while the application started",
        version="0.1.0",
        lifespan=lifespan,
    )

    if recording is None:
        recording = find_recording_sink(application)
    fastapi_app.include_router(
        startup.create_startup_router(application.recorder, recording)
    )

    return fastapi_app
