"""Startup step data model."""

import time
from dataclasses import FrozenInstanceError, asdict, dataclass, field, fields
from types import MappingProxyType
from typing import Any


def current_millis() -> int:
    """Wall clock in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def step_type_name(step_type: Any) -> str | None:
    """Short name for the kind of work a step performs."""
    if step_type is None or isinstance(step_type, str):
        return step_type
    if isinstance(step_type, type):
        return step_type.__name__
    return type(step_type).__name__


@dataclass
class Step:
    """One instrumented span of startup work."""

    type: str | None
    name: str | None
    description: str | None
    id: int
    parent_id: int  # 0 = top-level
    level: int  # nesting depth, 0 = top-level
    begin_time: int  # epoch ms
    end_time: int | None = None
    tags: dict[str, str] = field(default_factory=dict)

    @property
    def disabled(self) -> bool:
        return False

    def end(self) -> None:
        """Mark the step as completed. Only the first call is recorded."""
        if self.end_time is None:
            self.end_time = current_millis()

    def add_tag(self, key: str, value: Any) -> None:
        self.tags[key] = str(value)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class _DisabledStep(Step):
    """Placeholder returned while tracking is off or depth-limited.

    Shared by every caller, so it is read-only once built.
    """

    def __init__(self) -> None:
        super().__init__(
            type=None,
            name=None,
            description=None,
            id=0,
            parent_id=0,
            level=0,
            begin_time=0,
        )
        object.__setattr__(self, "tags", MappingProxyType({}))
        object.__setattr__(self, "_frozen", True)

    def __setattr__(self, key: str, value: Any) -> None:
        if getattr(self, "_frozen", False):
            raise FrozenInstanceError(f"cannot assign to field {key!r}")
        super().__setattr__(key, value)

    def __delattr__(self, key: str) -> None:
        raise FrozenInstanceError(f"cannot delete field {key!r}")

    @property
    def disabled(self) -> bool:
        return True

    def end(self) -> None:
        pass

    def add_tag(self, key: str, value: Any) -> None:
        pass

    def to_dict(self) -> dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["tags"] = {}
        return data

    def __repr__(self) -> str:
        return "DISABLED_STEP"


DISABLED_STEP: Step = _DisabledStep()
