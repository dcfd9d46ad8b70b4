"""
State record fields of generated programs.

Only kinds with runtime-mutable values get a field. Initializers read the
widget's current properties and clamp anything out of range, so a stale
``selected`` index or an impossible date never reaches the generated code.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from ..kinds import WidgetKind, require_all_kinds
from ..project import Widget
from .escape import boolean, num, quote


@dataclass(frozen=True)
class StateField:
    name: str
    annotation: str
    initializer: str

    def declaration(self) -> str:
        return f"{self.name}: {self.annotation}"

    def assignment(self) -> str:
        return f"self.{self.name} = {self.initializer}"


def clamp_index(selected: int, items: Sequence[Any]) -> int:
    if not items:
        return 0
    return max(0, min(selected, len(items) - 1))


def clamp_unit(value: float) -> float:
    if math.isnan(value):
        return 0.0
    return min(max(value, 0.0), 1.0)


def clamp_date(year: int, month: int, day: int) -> Tuple[int, int, int]:
    # Day capped at 28 so every month/year combination is valid.
    return min(max(year, 1), 9999), min(max(month, 1), 12), min(max(day, 1), 28)


def color_literal(color: Sequence[int]) -> str:
    return "[" + ", ".join(f"{c} / 255" for c in color) + "]"


def _date(props: Any) -> str:
    year, month, day = clamp_date(props.year, props.month, props.day)
    return f"datetime.date({year}, {month}, {day})"


_FieldRule = Optional[Tuple[str, str, Callable[[Any], str]]]

_STATE: Dict[WidgetKind, _FieldRule] = {
    WidgetKind.MENU_BUTTON: ("sel_{id}", "int", lambda p: str(clamp_index(p.selected, p.items))),
    WidgetKind.LABEL: None,
    WidgetKind.HEADING: None,
    WidgetKind.SMALL: None,
    WidgetKind.MONOSPACE: None,
    WidgetKind.BUTTON: None,
    WidgetKind.IMAGE_TEXT_BUTTON: None,
    WidgetKind.CHECKBOX: ("checked_{id}", "bool", lambda p: boolean(p.checked)),
    WidgetKind.TEXT_EDIT: ("text_{id}", "str", lambda p: quote(p.text)),
    WidgetKind.TEXT_AREA: ("textarea_{id}", "str", lambda p: quote(p.text)),
    WidgetKind.SLIDER: ("value_{id}", "float", lambda p: num(p.value)),
    WidgetKind.PROGRESS_BAR: ("progress_{id}", "float", lambda p: num(clamp_unit(p.value))),
    WidgetKind.RADIO_GROUP: ("sel_{id}", "int", lambda p: str(clamp_index(p.selected, p.items))),
    WidgetKind.LINK: None,
    WidgetKind.HYPERLINK: None,
    WidgetKind.SELECTABLE_LABEL: ("sel_{id}", "bool", lambda p: boolean(p.checked)),
    WidgetKind.COMBO_BOX: ("sel_{id}", "int", lambda p: str(clamp_index(p.selected, p.items))),
    WidgetKind.SEPARATOR: None,
    WidgetKind.COLLAPSING_HEADER: ("open_{id}", "bool", lambda p: boolean(p.checked)),
    WidgetKind.DATE_PICKER: ("date_{id}", "datetime.date", _date),
    WidgetKind.ANGLE_SELECTOR: ("angle_{id}", "float", lambda p: num(p.value)),
    WidgetKind.PASSWORD: ("pass_{id}", "str", lambda p: quote(p.text)),
    WidgetKind.TREE: None,
    WidgetKind.DRAG_VALUE: ("drag_{id}", "float", lambda p: num(p.value)),
    WidgetKind.SPINNER: None,
    WidgetKind.COLOR_PICKER: ("color_{id}", "list[float]", lambda p: color_literal(p.color)),
    WidgetKind.CODE: ("code_{id}", "str", lambda p: quote(p.text)),
    WidgetKind.IMAGE: None,
    WidgetKind.PLACEHOLDER: None,
    WidgetKind.GROUP: None,
    WidgetKind.SCROLL_BOX: None,
    WidgetKind.TAB_BAR: ("tab_{id}", "int", lambda p: str(clamp_index(p.selected, p.items))),
    WidgetKind.COLUMNS: None,
    WidgetKind.WINDOW: ("window_{id}_open", "bool", lambda p: "True"),
}

require_all_kinds(_STATE, "state fields")


def field_name(widget: Widget) -> Optional[str]:
    rule = _STATE[widget.kind]
    if rule is None:
        return None
    return rule[0].format(id=widget.id)


def state_field(widget: Widget) -> Optional[StateField]:
    rule = _STATE[widget.kind]
    if rule is None:
        return None
    pattern, annotation, init = rule
    return StateField(pattern.format(id=widget.id), annotation, init(widget.props))
