"""Shadow card configuration."""

from __future__ import annotations

from pydantic import Field

from widgetgeom.models.layout import Padding


class CardConfig(Padding):
    corner_radius: float = Field(default=0.0, ge=0.0)
    fill_color: str = "#FFFFFF"

    shadow_enabled: bool = True
    shadow_radius: float = Field(default=10.0, ge=0.0)
    shadow_dx: float = 0.0
    shadow_dy: float = 0.0
    shadow_color: str = "#888888"

    @property
    def shadow_inset(self) -> float:
        return self.shadow_radius if self.shadow_enabled else 0.0
