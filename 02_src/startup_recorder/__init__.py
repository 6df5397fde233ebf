"""Startup step recorder."""

from .app import Application, IApplication, IComponent
from .config import RecorderConfig
from .models import DISABLED_STEP, Step
from .recorder import IStepRecorder, StepRecorder
from .sinks import (
    CompositeStepSink,
    IStepSink,
    LoggingStepSink,
    RecordingStepSink,
    StepSink,
    create_sink,
    pad_string,
)

__all__ = [
    # Application
    "Application",
    "IApplication",
    "IComponent",
    # Config
    "RecorderConfig",
    # Models
    "Step",
    "DISABLED_STEP",
    # Recorder
    "IStepRecorder",
    "StepRecorder",
    # Sinks
    "IStepSink",
    "StepSink",
    "CompositeStepSink",
    "LoggingStepSink",
    "RecordingStepSink",
    "create_sink",
    "pad_string",
]
