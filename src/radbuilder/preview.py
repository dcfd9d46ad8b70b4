"""
Preview manifest: what a live renderer paints, area by area in paint order.

Building the manifest never mutates the project. Tree widgets carry their
parsed outline so a renderer does not need the outline parser.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, List

from .kinds import PANEL_AREAS, DockArea, WidgetKind, require_all_kinds
from .outline import outline_to_dicts, parse_outline
from .project import Project, Widget
from .props import has_options
from .version import DOCUMENT_VERSION


def _text(p: Any) -> dict[str, Any]:
    return {"label": p.text}


def _bare(label: str) -> Callable[[Any], dict[str, Any]]:
    return lambda p: {"label": label}


def _choice(p: Any) -> dict[str, Any]:
    items = list(p.items)
    selected = min(p.selected, len(items) - 1) if items else 0
    return {"label": getattr(p, "text", ""), "items": items, "selected": selected}


def _toggle(p: Any) -> dict[str, Any]:
    return {"label": p.text, "checked": p.checked}


def _range(p: Any) -> dict[str, Any]:
    return {"label": p.text, "value": p.value, "min": p.min, "max": p.max}


def _progress(p: Any) -> dict[str, Any]:
    return {"label": f"{p.value:.0%}" if math.isfinite(p.value) else "", "value": p.value}


def _link(p: Any) -> dict[str, Any]:
    return {"label": p.text, "url": p.url}


def _date(p: Any) -> dict[str, Any]:
    return {"label": p.text, "date": f"{p.year:04d}-{p.month:02d}-{p.day:02d}"}


def _tree(p: Any) -> dict[str, Any]:
    return {"label": p.text, "outline": outline_to_dicts(parse_outline(p.items))}


def _colored(p: Any) -> dict[str, Any]:
    return {"label": p.text, "color": list(p.color)}


def _icon_button(p: Any) -> dict[str, Any]:
    return {"label": f"{p.icon} {p.text}".strip(), "icon": p.icon}


def _group(p: Any) -> dict[str, Any]:
    return {"label": p.text, "layout": "horizontal" if p.horizontal else "vertical"}


def _columns(p: Any) -> dict[str, Any]:
    return {"label": p.text, "columns": max(p.columns, 1)}


_SUMMARIES: Dict[WidgetKind, Callable[[Any], dict[str, Any]]] = {
    WidgetKind.MENU_BUTTON: _choice,
    WidgetKind.LABEL: _text,
    WidgetKind.HEADING: _text,
    WidgetKind.SMALL: _text,
    WidgetKind.MONOSPACE: _text,
    WidgetKind.BUTTON: _text,
    WidgetKind.IMAGE_TEXT_BUTTON: _icon_button,
    WidgetKind.CHECKBOX: _toggle,
    WidgetKind.TEXT_EDIT: _text,
    WidgetKind.TEXT_AREA: _text,
    WidgetKind.SLIDER: _range,
    WidgetKind.PROGRESS_BAR: _progress,
    WidgetKind.RADIO_GROUP: _choice,
    WidgetKind.LINK: _text,
    WidgetKind.HYPERLINK: _link,
    WidgetKind.SELECTABLE_LABEL: _toggle,
    WidgetKind.COMBO_BOX: _choice,
    WidgetKind.SEPARATOR: _bare(""),
    WidgetKind.COLLAPSING_HEADER: _toggle,
    WidgetKind.DATE_PICKER: _date,
    WidgetKind.ANGLE_SELECTOR: _range,
    WidgetKind.PASSWORD: lambda p: {"label": "•" * len(p.text)},
    WidgetKind.TREE: _tree,
    WidgetKind.DRAG_VALUE: _range,
    WidgetKind.SPINNER: _bare("⟳"),
    WidgetKind.COLOR_PICKER: _colored,
    WidgetKind.CODE: _text,
    WidgetKind.IMAGE: _link,
    WidgetKind.PLACEHOLDER: _colored,
    WidgetKind.GROUP: _group,
    WidgetKind.SCROLL_BOX: _text,
    WidgetKind.TAB_BAR: _choice,
    WidgetKind.COLUMNS: _columns,
    WidgetKind.WINDOW: _text,
}

require_all_kinds(_SUMMARIES, "preview summaries")


def _widget_entry(widget: Widget) -> dict[str, Any]:
    props = widget.props
    entry: dict[str, Any] = {
        "id": widget.id,
        "kind": widget.kind.value,
        "x": widget.pos.x,
        "y": widget.pos.y,
        "width": widget.size.x,
        "height": widget.size.y,
        "z": widget.z,
        "enabled": props.enabled,
        "tooltip": props.tooltip,
        "has_options": has_options(props),
    }
    entry.update(_SUMMARIES[widget.kind](props))
    return entry


def paint_order(widgets: List[Widget]) -> List[Widget]:
    """Ascending ``z``; equal ``z`` keeps collection order."""
    return sorted(widgets, key=lambda w: w.z)


def build_preview_manifest(project: Project) -> Dict[str, Any]:
    areas: dict[str, Any] = {}
    for area in PANEL_AREAS:
        areas[area.value.lower()] = {
            "enabled": project.panel_enabled(area),
            "widgets": [_widget_entry(w) for w in paint_order(list(project.in_area(area)))],
        }
    # Free widgets sit on the central canvas, painted above the Center ones.
    canvas = paint_order(list(project.in_area(DockArea.CENTER))) + paint_order(list(project.in_area(DockArea.FREE)))
    areas["center"] = {
        "enabled": True,
        "widgets": [_widget_entry(w) for w in canvas],
    }
    return {
        "preview_manifest_version": DOCUMENT_VERSION,
        "canvas": {"width": project.canvas_size.x, "height": project.canvas_size.y},
        "areas": areas,
        "widget_count": len(project.widgets),
    }
