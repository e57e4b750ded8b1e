"""Progress ring configuration."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class ProgressDirection(str, enum.Enum):
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"


class StartPosition(str, enum.Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class ProgressType(str, enum.Enum):
    PERCENT = "percent"
    VALUE = "value"


_PROGRESS_FIELDS = frozenset({"current_progress", "total_progress"})


class RingConfig(BaseModel):
    """Style and progress state of a ring.

    ``current_progress`` never exceeds ``total_progress``: it is clamped when
    the model is built and again on every write to either field.
    """

    current_progress: float = 0.0
    total_progress: float = 100.0
    direction: ProgressDirection = ProgressDirection.CLOCKWISE
    start_position: StartPosition = StartPosition.TOP
    progress_type: ProgressType = ProgressType.PERCENT

    thickness: float = Field(default=0.0, ge=0.0, description="Stroke width, 0 = size / 15")
    text_size: float = Field(default=0.0, ge=0.0, description="Text size, 0 = size / 2.2")
    custom_text: str | None = Field(
        default=None, description="Template; '%progress' is replaced by the value"
    )
    text_visible: bool = True

    @model_validator(mode="after")
    def _clamp_progress(self) -> RingConfig:
        self._clamp()
        return self

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        if name in _PROGRESS_FIELDS:
            self._clamp()

    def _clamp(self) -> None:
        if self.current_progress > self.total_progress:
            # Bypass __setattr__; the clamp itself must not re-enter.
            super().__setattr__("current_progress", self.total_progress)
