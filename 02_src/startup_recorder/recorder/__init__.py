"""Recorder module."""

from .recorder import IStepRecorder, StepRecorder

__all__ = ["IStepRecorder", "StepRecorder"]
