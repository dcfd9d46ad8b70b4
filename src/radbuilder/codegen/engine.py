"""
Code generation engine: Project -> Python source for imgui_bundle.

The engine is pure. It never mutates the project, performs no I/O and emits
byte-identical text for an unchanged project. Anything inconsistent in the
document (stale selection indices, impossible dates, non-finite numbers) is
clamped here rather than rejected.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, List, Optional

from ..kinds import AREA_ORDER, PANEL_AREAS, DockArea, WidgetKind
from ..project import Project, Widget
from ..version import __version__
from .escape import boolean, num
from .formats import CodeGenFormat
from .render import render_widget
from .state import StateField, state_field

logger = logging.getLogger("radbuilder.codegen")

MIN_BAND = 48.0
MIN_SIDE = 120.0
PANEL_PAD = 8.0
MAX_WINDOW_SIDE = 16384.0

_PANEL_FLAG = {
    DockArea.TOP: "enable_top",
    DockArea.BOTTOM: "enable_bottom",
    DockArea.LEFT: "enable_left",
    DockArea.RIGHT: "enable_right",
}

_TREE_HELPERS = [
    "@dataclass",
    "class GenTreeNode:",
    "    label: str",
    '    children: list["GenTreeNode"] = field(default_factory=list)',
    "",
    "",
    "def gen_show_tree(nodes: list[GenTreeNode]) -> None:",
    "    for i, node in enumerate(nodes):",
    "        imgui.push_id(i)",
    "        if node.children:",
    "            if imgui.tree_node(node.label):",
    "                gen_show_tree(node.children)",
    "                imgui.tree_pop()",
    "        else:",
    "            imgui.bullet_text(node.label)",
    "        imgui.pop_id()",
]

_DATE_HELPERS = [
    "def gen_make_date(parts: list[int]) -> datetime.date:",
    "    year = min(max(parts[0], 1), 9999)",
    "    month = min(max(parts[1], 1), 12)",
    "    day = min(max(parts[2], 1), calendar.monthrange(year, month)[1])",
    "    return datetime.date(year, month, day)",
]

_APP_MANIFEST = [
    "[project]",
    'name = "generated-ui"',
    'version = "0.1.0"',
    'requires-python = ">=3.10"',
    'dependencies = ["imgui-bundle>=1.6"]',
    "",
    "[project.scripts]",
    'generated-ui = "generated_ui:main"',
]


def _indent(lines: Iterable[str], depth: int) -> List[str]:
    pad = "    " * depth
    return [pad + line if line else line for line in lines]


def _finite(value: float, fallback: float) -> float:
    return value if math.isfinite(value) and value > 0 else fallback


def _bucket(project: Project) -> Dict[DockArea, List[Widget]]:
    buckets: Dict[DockArea, List[Widget]] = {area: [] for area in AREA_ORDER}
    for widget in project.widgets:
        buckets[widget.area].append(widget)
    return buckets


def panel_extent(area: DockArea, widgets: List[Widget]) -> float:
    """Thickness of a docked panel: enough for its widgets, never below the minimum."""
    horizontal = area in (DockArea.TOP, DockArea.BOTTOM)
    floor = MIN_BAND if horizontal else MIN_SIDE
    extent = floor
    for w in widgets:
        far = (w.pos.y + w.size.y) if horizontal else (w.pos.x + w.size.x)
        if math.isfinite(far):
            extent = max(extent, far + PANEL_PAD)
    return extent


class _Emitter:
    def __init__(self, project: Project, fmt: CodeGenFormat, comments: bool) -> None:
        self.project = project
        self.fmt = fmt
        self.comments = comments
        self.buckets = _bucket(project)
        kinds = {w.kind for w in project.widgets}
        self.uses_tree = WidgetKind.TREE in kinds
        self.uses_date = WidgetKind.DATE_PICKER in kinds
        self.uses_image = WidgetKind.IMAGE in kinds
        self.extents = {area: panel_extent(area, self.buckets[area]) for area in PANEL_AREAS}

    @property
    def runnable(self) -> bool:
        return self.fmt != CodeGenFormat.UI_ONLY

    def comment(self, *lines: str) -> List[str]:
        return [f"# {line}" if line else "#" for line in lines] if self.comments else []

    def header(self) -> List[str]:
        if not self.comments:
            return ["# --- generated by radbuilder ---"]
        lines = [
            "# " + "-" * 66,
            f"# Generated by radbuilder {__version__}",
            "# Target: Dear ImGui via imgui_bundle (pip install imgui-bundle)",
            "# " + "-" * 66,
        ]
        if not self.runnable:
            lines += [
                "#",
                "# UI function only. Create one GeneratedState and call",
                "# generated_ui(state) from your own frame callback, e.g.",
                "#     state = GeneratedState()",
                "#     immapp.run(lambda: generated_ui(state))",
            ]
        return lines

    def imports(self) -> List[str]:
        lines: List[str] = []
        if self.uses_date:
            lines += ["import calendar", "import datetime"]
        if self.uses_tree:
            lines.append("from dataclasses import dataclass, field")
        if lines:
            lines.append("")
        modules = ["imgui"]
        if self.uses_image:
            modules.insert(0, "hello_imgui")
        if self.runnable:
            modules.append("immapp")
        lines.append(f"from imgui_bundle import {', '.join(modules)}")
        return lines

    def helpers(self) -> List[str]:
        lines = [
            "PANEL_FLAGS = (",
            "    imgui.WindowFlags_.no_title_bar",
            "    | imgui.WindowFlags_.no_resize",
            "    | imgui.WindowFlags_.no_move",
            "    | imgui.WindowFlags_.no_collapse",
            ")",
        ]
        if self.uses_tree:
            lines += ["", ""] + _TREE_HELPERS
        if self.uses_date:
            lines += ["", ""] + _DATE_HELPERS
        return lines

    def state_fields(self) -> List[StateField]:
        fields = [
            StateField(_PANEL_FLAG[area], "bool", boolean(self.project.panel_enabled(area)))
            for area in PANEL_AREAS
        ]
        for area in AREA_ORDER:
            for widget in self.buckets[area]:
                found = state_field(widget)
                if found is not None:
                    fields.append(found)
        return fields

    def state_class(self) -> List[str]:
        fields = self.state_fields()
        lines = ["class GeneratedState:"]
        lines += self.comment("Runtime values of every interactive widget.")
        lines = lines[:1] + _indent(lines[1:], 1)
        lines += _indent([f.declaration() for f in fields], 1)
        lines += ["", "    def __init__(self) -> None:"]
        lines += _indent([f.assignment() for f in fields], 2)
        return lines

    def _widgets(self, widgets: List[Widget]) -> List[str]:
        lines: List[str] = []
        for widget in widgets:
            lines += render_widget(widget, self.comments)
        return lines

    def _panel(self, area: DockArea, pos: str, size: str) -> List[str]:
        flag = _PANEL_FLAG[area]
        extent = num(self.extents[area], 1)
        name = area.value.lower()
        body = [
            f"{name} = {extent}",
            f"imgui.set_next_window_pos({pos})",
            f"imgui.set_next_window_size({size})",
            f'imgui.begin("##panel_{name}", None, PANEL_FLAGS)',
            "origin = imgui.get_cursor_screen_pos()",
        ]
        body += self._widgets(self.buckets[area])
        body.append("imgui.end()")
        lines = self.comment(f"{area.value} panel")
        lines.append(f"if state.{flag}:")
        lines += _indent(body, 1)
        return lines

    def ui_function(self) -> List[str]:
        inner_h = "work_size.y - top - bottom"
        body = [
            "viewport = imgui.get_main_viewport()",
            "work_pos = viewport.work_pos",
            "work_size = viewport.work_size",
            "top = bottom = left = right = 0.0",
        ]
        body += self._panel(
            DockArea.TOP,
            "work_pos",
            "imgui.ImVec2(work_size.x, top)",
        )
        body += self._panel(
            DockArea.BOTTOM,
            "imgui.ImVec2(work_pos.x, work_pos.y + work_size.y - bottom)",
            "imgui.ImVec2(work_size.x, bottom)",
        )
        body += self._panel(
            DockArea.LEFT,
            "imgui.ImVec2(work_pos.x, work_pos.y + top)",
            f"imgui.ImVec2(left, {inner_h})",
        )
        body += self._panel(
            DockArea.RIGHT,
            "imgui.ImVec2(work_pos.x + work_size.x - right, work_pos.y + top)",
            f"imgui.ImVec2(right, {inner_h})",
        )
        canvas = self.project.canvas_size
        body += self.comment("Central canvas")
        body += [
            "imgui.set_next_window_pos(imgui.ImVec2(work_pos.x + left, work_pos.y + top))",
            f"imgui.set_next_window_size(imgui.ImVec2(work_size.x - left - right, {inner_h}))",
            'imgui.begin("##canvas", None, PANEL_FLAGS | imgui.WindowFlags_.horizontal_scrollbar)',
            "origin = imgui.get_cursor_screen_pos()",
        ]
        body += self._widgets(self.buckets[DockArea.CENTER] + self.buckets[DockArea.FREE])
        body += [
            "imgui.set_cursor_screen_pos(origin)",
            f"imgui.dummy(imgui.ImVec2({num(_finite(canvas.x, 800.0), 1)}, {num(_finite(canvas.y, 600.0), 1)}))",
            "imgui.end()",
        ]
        return ["def generated_ui(state: GeneratedState) -> None:"] + _indent(body, 1)

    def window_size(self) -> tuple[int, int]:
        canvas = self.project.canvas_size
        width = _finite(canvas.x, 800.0)
        height = _finite(canvas.y, 600.0)
        for area in PANEL_AREAS:
            if not self.project.panel_enabled(area):
                continue
            if area in (DockArea.TOP, DockArea.BOTTOM):
                height += self.extents[area]
            else:
                width += self.extents[area]
        # Panel extents are finite one by one but their sum may overflow.
        return int(min(width, MAX_WINDOW_SIDE)), int(min(height, MAX_WINDOW_SIDE))

    def app_wrapper(self) -> List[str]:
        width, height = self.window_size()
        return [
            "def main() -> None:",
            "    state = GeneratedState()",
            "    immapp.run(",
            "        gui_function=lambda: generated_ui(state),",
            '        window_title="radbuilder app",',
            f"        window_size=({width}, {height}),",
            "    )",
            "",
            "",
            'if __name__ == "__main__":',
            "    main()",
        ]

    def module(self) -> str:
        sections: List[List[str]] = [
            self.header(),
            self.imports(),
            self.helpers(),
            self.state_class(),
            self.ui_function(),
        ]
        if self.runnable:
            sections.append(self.app_wrapper())
        text = sections[0] + [""] + sections[1]
        for section in sections[2:]:
            text += ["", ""] + section
        return "\n".join(text) + "\n"


def generate(
    project: Project,
    fmt: CodeGenFormat = CodeGenFormat.SINGLE_FILE,
    include_comments: bool = True,
) -> str:
    """Render ``project`` as Python source in the requested output shape."""
    emitter = _Emitter(project, fmt, include_comments)
    if logger.isEnabledFor(logging.DEBUG):
        counts = {area.value: len(emitter.buckets[area]) for area in AREA_ORDER}
        logger.debug("Generating %s for %d widgets %s", fmt.value, len(project.widgets), counts)
    source = emitter.module()
    if fmt == CodeGenFormat.SEPARATE_FILES:
        framed = ["# FILE: pyproject.toml"] + _APP_MANIFEST + ["", "# FILE: generated_ui.py"]
        return "\n".join(framed) + "\n" + source
    return source


def python_section(text: str) -> Optional[str]:
    """The Python module inside SEPARATE_FILES output, or ``None`` if absent."""
    marker = "# FILE: generated_ui.py\n"
    index = text.find(marker)
    if index < 0:
        return None
    return text[index + len(marker):]
