"""
Project and Widget document types.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .kinds import DockArea, WidgetKind
from .props import WidgetProps


class Vec2(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="constants")

    x: float = 0.0
    y: float = 0.0


class Widget(BaseModel):
    """A placed control. ``pos`` is local to the widget's docking area."""

    model_config = ConfigDict(ser_json_inf_nan="constants")

    id: int = Field(ge=1)
    pos: Vec2 = Field(default_factory=Vec2)
    size: Vec2
    z: int = 0
    area: DockArea = DockArea.FREE
    props: WidgetProps

    @property
    def kind(self) -> WidgetKind:
        return WidgetKind(self.props.kind)


class Project(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="constants")

    widgets: List[Widget] = Field(default_factory=list)
    canvas_size: Vec2 = Field(default_factory=lambda: Vec2(x=800.0, y=600.0))
    panel_top_enabled: bool = False
    panel_bottom_enabled: bool = False
    panel_left_enabled: bool = False
    panel_right_enabled: bool = False

    @model_validator(mode="after")
    def _unique_ids(self) -> "Project":
        seen: set[int] = set()
        for widget in self.widgets:
            if widget.id in seen:
                raise ValueError(f"duplicate widget id {widget.id}")
            seen.add(widget.id)
        return self

    def find(self, widget_id: int) -> Optional[Widget]:
        for widget in self.widgets:
            if widget.id == widget_id:
                return widget
        return None

    def in_area(self, area: DockArea) -> Iterator[Widget]:
        """Widgets of one docking area, in collection order."""
        return (w for w in self.widgets if w.area == area)

    def max_id(self) -> int:
        return max((w.id for w in self.widgets), default=0)

    def panel_enabled(self, area: DockArea) -> bool:
        if area == DockArea.TOP:
            return self.panel_top_enabled
        if area == DockArea.BOTTOM:
            return self.panel_bottom_enabled
        if area == DockArea.LEFT:
            return self.panel_left_enabled
        if area == DockArea.RIGHT:
            return self.panel_right_enabled
        return True

    def set_panel_enabled(self, area: DockArea, enabled: bool) -> None:
        if area == DockArea.TOP:
            self.panel_top_enabled = enabled
        elif area == DockArea.BOTTOM:
            self.panel_bottom_enabled = enabled
        elif area == DockArea.LEFT:
            self.panel_left_enabled = enabled
        elif area == DockArea.RIGHT:
            self.panel_right_enabled = enabled
        else:
            raise ValueError(f"{area.value} is not a toggleable panel")
