"""Recorder configuration loaded from the environment."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

RECORDER_KINDS = ("off", "logging", "memory")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}

PathLike = Union[str, Path]


def parse_bool(value: str, name: str) -> bool:
    """Parse an environment flag."""
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def parse_max_depth(value: str | int, name: str = "max_depth") -> int:
    """Parse a max depth: -1 means unlimited."""
    try:
        depth = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {value!r}") from None
    if depth < -1:
        raise ValueError(f"{name} must be -1 (unlimited) or >= 0, got {depth}")
    return depth


def resolve_log_path(env_value: PathLike | None = None) -> Path | None:
    """Resolve LOG_FILE to an absolute path (None = console only)."""
    if not env_value:
        return None

    candidate = Path(env_value)
    return candidate if candidate.is_absolute() else PROJECT_ROOT / candidate


@dataclass
class RecorderConfig:
    """Settings for the startup step recorder and its log output."""

    enabled: bool = False
    disable_after_started: bool = True
    max_depth: int = -1
    recorder: str = "logging"  # off | logging | memory
    log_level: str = "INFO"
    log_file: Path | None = None

    def __post_init__(self) -> None:
        if self.recorder not in RECORDER_KINDS:
            raise ValueError(
                f"recorder must be one of {', '.join(RECORDER_KINDS)}, "
                f"got {self.recorder!r}"
            )
        self.max_depth = parse_max_depth(self.max_depth)
        if self.recorder == "off":
            self.enabled = False

    @classmethod
    def from_env(cls) -> "RecorderConfig":
        """Build config from STARTUP_RECORDER_* and LOG_* variables."""
        return cls(
            enabled=parse_bool(
                os.getenv("STARTUP_RECORDER_ENABLED", "false"),
                "STARTUP_RECORDER_ENABLED",
            ),
            disable_after_started=parse_bool(
                os.getenv("STARTUP_RECORDER_DISABLE_AFTER_STARTED", "true"),
                "STARTUP_RECORDER_DISABLE_AFTER_STARTED",
            ),
            max_depth=parse_max_depth(
                os.getenv("STARTUP_RECORDER_MAX_DEPTH", "-1"),
                "STARTUP_RECORDER_MAX_DEPTH",
            ),
            recorder=os.getenv("STARTUP_RECORDER", "logging").strip().lower(),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_file=resolve_log_path(os.getenv("LOG_FILE")),
        )
