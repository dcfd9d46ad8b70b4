"""
Designer session: the editing commands an interactive surface calls.

The session owns one ``Project`` plus the transient editor state around it
(selection, clipboard, id allocator, status log). Commands mutate the project
in place; none of them paint or prompt, so any front end can drive them.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from .catalogue import default_props, default_size
from .codegen import CodeGenFormat, generate
from .config import RadConfig
from .document import decode_project, encode_project, load_project, save_project
from .errors import RadError
from .kinds import DockArea, WidgetKind
from .logs import LogBuffer, log_event
from .project import Project, Vec2, Widget
from .props import has_options

PASTE_OFFSET = 20.0

Point = Tuple[float, float]


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def snap_to_grid(point: Point, grid: float) -> Point:
    """Round each coordinate to the nearest multiple of ``grid``; halves round away from zero."""
    if not math.isfinite(grid) or grid <= 0:
        return point
    x, y = point
    return _round_half_away(x / grid) * grid, _round_half_away(y / grid) * grid


class DesignerSession:
    def __init__(self, project: Optional[Project] = None, config: Optional[RadConfig] = None) -> None:
        config = config or RadConfig()
        self.project = project if project is not None else Project()
        self.selected: List[int] = []
        self.next_id = self.project.max_id() + 1
        self.clipboard: Optional[Widget] = None
        self.current_file: Optional[Path] = None
        self.status = LogBuffer(max_events=200)
        self.generated = ""
        self.grid_size = config.grid_size
        self.codegen_format: CodeGenFormat = config.codegen_format
        self.codegen_comments = config.codegen_comments
        self.auto_generate = config.auto_generate

    # ----- status -----

    @property
    def status_message(self) -> Optional[str]:
        latest = self.status.latest()
        return latest["event"] if latest else None

    def _status(self, message: str, level: str = "info", **details) -> None:
        log_event(self.status, message, level=level, **details)

    # ----- placement -----

    def _allocate_id(self) -> int:
        widget_id = self.next_id
        self.next_id += 1
        return widget_id

    def snap(self, point: Point) -> Point:
        return snap_to_grid(point, self.grid_size)

    def place(
        self,
        kind: WidgetKind,
        at: Point,
        area: DockArea = DockArea.FREE,
        origin: Point = (0.0, 0.0),
    ) -> Widget:
        """Drop a new widget centred on ``at``; ``origin`` is the area's top-left corner."""
        widget_id = self._allocate_id()
        width, height = default_size(kind)
        x, y = self.snap((at[0] - origin[0] - width / 2, at[1] - origin[1] - height / 2))
        widget = Widget(
            id=widget_id,
            pos=Vec2(x=x, y=y),
            size=Vec2(x=width, y=height),
            z=widget_id,
            area=area,
            props=default_props(kind),
        )
        self.project.widgets.append(widget)
        self.selected = [widget_id]
        self.touch()
        return widget

    # ----- selection -----

    def is_selected(self, widget_id: int) -> bool:
        return widget_id in self.selected

    def select_single(self, widget_id: int) -> None:
        self.selected = [widget_id]

    def toggle_selection(self, widget_id: int) -> None:
        if widget_id in self.selected:
            self.selected.remove(widget_id)
        else:
            self.selected.append(widget_id)

    def add_to_selection(self, widget_id: int) -> None:
        if widget_id not in self.selected:
            self.selected.append(widget_id)

    def clear_selection(self) -> None:
        self.selected.clear()

    def select_all(self) -> None:
        self.selected = [w.id for w in self.project.widgets]

    def selected_widgets(self) -> List[Widget]:
        """Selected widgets in selection order; stale ids are skipped."""
        found = (self.project.find(widget_id) for widget_id in self.selected)
        return [w for w in found if w is not None]

    def primary(self) -> Optional[Widget]:
        """The first selected widget, the one an inspector edits."""
        widgets = self.selected_widgets()
        return widgets[0] if widgets else None

    def widgets_in_rect(self, corner_a: Point, corner_b: Point, area: Optional[DockArea] = None) -> List[Widget]:
        """Widgets whose bounds intersect the rectangle spanned by two corners."""
        left, right = sorted((corner_a[0], corner_b[0]))
        top, bottom = sorted((corner_a[1], corner_b[1]))
        hits = []
        for w in self.project.widgets:
            if area is not None and w.area != area:
                continue
            if w.pos.x <= right and w.pos.x + w.size.x >= left and w.pos.y <= bottom and w.pos.y + w.size.y >= top:
                hits.append(w)
        return hits

    # ----- delete / duplicate / clipboard -----

    def delete(self, widget_id: int) -> bool:
        before = len(self.project.widgets)
        self.project.widgets = [w for w in self.project.widgets if w.id != widget_id]
        if widget_id in self.selected:
            self.selected.remove(widget_id)
        removed = len(self.project.widgets) != before
        if removed:
            self.touch()
        return removed

    def delete_selected(self) -> int:
        doomed = set(self.selected)
        before = len(self.project.widgets)
        self.project.widgets = [w for w in self.project.widgets if w.id not in doomed]
        self.selected.clear()
        removed = before - len(self.project.widgets)
        if removed:
            self.touch()
        return removed

    def _clone(self, source: Widget) -> Widget:
        widget_id = self._allocate_id()
        clone = source.model_copy(deep=True)
        clone.id = widget_id
        clone.z = widget_id
        clone.pos = Vec2(x=source.pos.x + PASTE_OFFSET, y=source.pos.y + PASTE_OFFSET)
        self.project.widgets.append(clone)
        return clone

    def duplicate_selected(self) -> List[Widget]:
        copies = [self._clone(w) for w in self.selected_widgets()]
        if copies:
            self.selected = [w.id for w in copies]
            self.touch()
        return copies

    def copy(self) -> bool:
        source = self.primary()
        if source is None:
            return False
        self.clipboard = source.model_copy(deep=True)
        return True

    def paste(self) -> Optional[Widget]:
        if self.clipboard is None:
            return None
        pasted = self._clone(self.clipboard)
        self.selected = [pasted.id]
        self.touch()
        return pasted

    # ----- movement and z-order -----

    def nudge(self, dx: int, dy: int) -> None:
        """Move the selection by whole grid steps; positions never go negative."""
        step = max(self.grid_size, 1.0)
        for w in self.selected_widgets():
            w.pos.x = max(w.pos.x + dx * step, 0.0)
            w.pos.y = max(w.pos.y + dy * step, 0.0)
        self.touch()

    def bring_to_front(self) -> None:
        if not self.selected:
            return
        top = max((w.z for w in self.project.widgets), default=0)
        for i, w in enumerate(self.selected_widgets()):
            w.z = top + 1 + i

    def send_to_back(self) -> None:
        if not self.selected:
            return
        bottom = min((w.z for w in self.project.widgets), default=0)
        for i, w in enumerate(self.selected_widgets()):
            w.z = bottom - 1 - i

    # ----- alignment -----

    def _aligned(self, minimum: int = 2) -> List[Widget]:
        widgets = self.selected_widgets()
        return widgets if len(self.selected) >= minimum else []

    def align_left(self) -> None:
        widgets = self._aligned()
        if widgets:
            edge = min(w.pos.x for w in widgets)
            for w in widgets:
                w.pos.x = edge
            self.touch()

    def align_right(self) -> None:
        widgets = self._aligned()
        if widgets:
            edge = max(w.pos.x + w.size.x for w in widgets)
            for w in widgets:
                w.pos.x = edge - w.size.x
            self.touch()

    def align_center_h(self) -> None:
        widgets = self._aligned()
        if widgets:
            center = sum(w.pos.x + w.size.x / 2 for w in widgets) / len(widgets)
            for w in widgets:
                w.pos.x = center - w.size.x / 2
            self.touch()

    def align_top(self) -> None:
        widgets = self._aligned()
        if widgets:
            edge = min(w.pos.y for w in widgets)
            for w in widgets:
                w.pos.y = edge
            self.touch()

    def align_bottom(self) -> None:
        widgets = self._aligned()
        if widgets:
            edge = max(w.pos.y + w.size.y for w in widgets)
            for w in widgets:
                w.pos.y = edge - w.size.y
            self.touch()

    def align_center_v(self) -> None:
        widgets = self._aligned()
        if widgets:
            center = sum(w.pos.y + w.size.y / 2 for w in widgets) / len(widgets)
            for w in widgets:
                w.pos.y = center - w.size.y / 2
            self.touch()

    def match_width(self) -> None:
        widgets = self._aligned()
        if widgets:
            for w in widgets[1:]:
                w.size.x = widgets[0].size.x
            self.touch()

    def match_height(self) -> None:
        widgets = self._aligned()
        if widgets:
            for w in widgets[1:]:
                w.size.y = widgets[0].size.y
            self.touch()

    def distribute_horizontal(self) -> None:
        """Equal gaps between the selection, keeping the outermost edges fixed."""
        widgets = sorted(self._aligned(3), key=lambda w: w.pos.x)
        if len(widgets) < 3:
            return
        first, last = widgets[0], widgets[-1]
        total = sum(w.size.x for w in widgets)
        gap = (last.pos.x + last.size.x - first.pos.x - total) / (len(widgets) - 1)
        x = first.pos.x
        for w in widgets:
            w.pos.x = x
            x += w.size.x + gap
        self.touch()

    def distribute_vertical(self) -> None:
        widgets = sorted(self._aligned(3), key=lambda w: w.pos.y)
        if len(widgets) < 3:
            return
        first, last = widgets[0], widgets[-1]
        total = sum(w.size.y for w in widgets)
        gap = (last.pos.y + last.size.y - first.pos.y - total) / (len(widgets) - 1)
        y = first.pos.y
        for w in widgets:
            w.pos.y = y
            y += w.size.y + gap
        self.touch()

    # ----- property edits -----

    def set_items(self, widget_id: int, items: Iterable[str]) -> Widget:
        """Replace a widget's option lines; ``selected`` is re-clamped to the new list."""
        widget = self._require(widget_id)
        props = widget.props
        if not hasattr(props, "items"):
            raise ValueError(f"{widget.kind.value} widgets have no item list")
        props.items = list(items)
        if has_options(props):
            props.selected = min(props.selected, max(len(props.items) - 1, 0))
        self.touch()
        return widget

    def set_area(self, widget_id: int, area: DockArea) -> Widget:
        widget = self._require(widget_id)
        widget.area = area
        x, y = self.snap((widget.pos.x, widget.pos.y))
        widget.pos = Vec2(x=x, y=y)
        self.touch()
        return widget

    def set_panel_enabled(self, area: DockArea, enabled: bool) -> None:
        self.project.set_panel_enabled(area, enabled)
        self.touch()

    def _require(self, widget_id: int) -> Widget:
        widget = self.project.find(widget_id)
        if widget is None:
            raise KeyError(f"No widget with id {widget_id}")
        return widget

    # ----- documents -----

    def _replace(self, project: Project) -> None:
        self.project = project
        self.selected.clear()
        self.next_id = max(self.next_id, project.max_id() + 1)

    def new_project(self) -> None:
        self._replace(Project())
        self.current_file = None
        self.generated = ""
        self._status("New project")

    def load(self, path: Path | str) -> bool:
        try:
            project = load_project(path)
        except RadError as exc:
            self._status(f"Load failed: {exc}", level="error")
            return False
        self._replace(project)
        self.current_file = Path(path)
        self._status(f"Loaded {path}")
        self.touch()
        return True

    def save(self, path: Path | str | None = None) -> bool:
        target = Path(path) if path is not None else self.current_file
        if target is None:
            self._status("Save failed: no file name", level="error")
            return False
        try:
            save_project(self.project, target)
        except RadError as exc:
            self._status(f"Save failed: {exc}", level="error")
            return False
        self.current_file = target
        self._status(f"Saved to {target}")
        return True

    def export_json(self) -> str:
        return encode_project(self.project)

    def import_json(self, text: str) -> bool:
        try:
            project = decode_project(text)
        except RadError as exc:
            self._status(f"Import failed: {exc}", level="error")
            return False
        self._replace(project)
        self._status(f"Imported {len(project.widgets)} widget(s)")
        self.touch()
        return True

    # ----- generation -----

    def generate(self) -> str:
        self.generated = generate(self.project, self.codegen_format, self.codegen_comments)
        return self.generated

    def touch(self) -> None:
        """Regenerate after an edit when auto-generation is on."""
        if self.auto_generate and self.project.widgets:
            self.generate()

