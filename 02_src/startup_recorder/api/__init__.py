"""API module."""

from .app import create_fastapi_app, find_recording_sink

__all__ = ["create_fastapi_app", "find_recording_sink"]
