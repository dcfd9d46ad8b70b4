"""
Widget kind and docking area tags.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from .errors import CatalogueError


class WidgetKind(str, Enum):
    MENU_BUTTON = "MenuButton"
    LABEL = "Label"
    HEADING = "Heading"
    SMALL = "Small"
    MONOSPACE = "Monospace"
    BUTTON = "Button"
    IMAGE_TEXT_BUTTON = "ImageTextButton"
    CHECKBOX = "Checkbox"
    TEXT_EDIT = "TextEdit"
    TEXT_AREA = "TextArea"
    SLIDER = "Slider"
    PROGRESS_BAR = "ProgressBar"
    RADIO_GROUP = "RadioGroup"
    LINK = "Link"
    HYPERLINK = "Hyperlink"
    SELECTABLE_LABEL = "SelectableLabel"
    COMBO_BOX = "ComboBox"
    SEPARATOR = "Separator"
    COLLAPSING_HEADER = "CollapsingHeader"
    DATE_PICKER = "DatePicker"
    ANGLE_SELECTOR = "AngleSelector"
    PASSWORD = "Password"
    TREE = "Tree"
    DRAG_VALUE = "DragValue"
    SPINNER = "Spinner"
    COLOR_PICKER = "ColorPicker"
    CODE = "Code"
    IMAGE = "Image"
    PLACEHOLDER = "Placeholder"
    GROUP = "Group"
    SCROLL_BOX = "ScrollBox"
    TAB_BAR = "TabBar"
    COLUMNS = "Columns"
    WINDOW = "Window"

    @classmethod
    def from_name(cls, raw: str) -> "WidgetKind":
        """Accept either the tag ("ComboBox") or the member name ("combo_box")."""
        text = (raw or "").strip()
        for kind in cls:
            if text == kind.value or text.upper() == kind.name or text.lower() == kind.value.lower():
                return kind
        raise ValueError(f"Unknown widget kind '{raw}'")


class DockArea(str, Enum):
    FREE = "Free"
    TOP = "Top"
    BOTTOM = "Bottom"
    LEFT = "Left"
    RIGHT = "Right"
    CENTER = "Center"

    @classmethod
    def from_name(cls, raw: str) -> "DockArea":
        text = (raw or "").strip().lower()
        for area in cls:
            if text == area.value.lower():
                return area
        raise ValueError(f"Unknown docking area '{raw}'")


# Emission order of the generated render routine. Free widgets live on the
# central canvas, after the Center ones.
AREA_ORDER = (
    DockArea.TOP,
    DockArea.BOTTOM,
    DockArea.LEFT,
    DockArea.RIGHT,
    DockArea.CENTER,
    DockArea.FREE,
)

PANEL_AREAS = (DockArea.TOP, DockArea.BOTTOM, DockArea.LEFT, DockArea.RIGHT)


def require_all_kinds(table: Mapping[WidgetKind, Any], name: str) -> None:
    missing = [kind.value for kind in WidgetKind if kind not in table]
    if missing:
        raise CatalogueError(f"{name} has no entry for: {', '.join(missing)}")
