"""Core data models for the startup recorder."""

from .step import DISABLED_STEP, Step, current_millis, step_type_name

__all__ = [
    "Step",
    "DISABLED_STEP",
    "current_millis",
    "step_type_name",
]
