"""
Widget kind catalogue: default geometry and default properties per kind.
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple

from .kinds import WidgetKind, require_all_kinds
from .props import (
    AngleSelectorProps,
    BaseProps,
    ButtonProps,
    CheckboxProps,
    CodeProps,
    CollapsingHeaderProps,
    ColorPickerProps,
    ColumnsProps,
    ComboBoxProps,
    DatePickerProps,
    DragValueProps,
    GroupProps,
    HeadingProps,
    HyperlinkProps,
    ImageProps,
    ImageTextButtonProps,
    LabelProps,
    LinkProps,
    MenuButtonProps,
    MonospaceProps,
    PasswordProps,
    PlaceholderProps,
    ProgressBarProps,
    RadioGroupProps,
    ScrollBoxProps,
    SelectableLabelProps,
    SeparatorProps,
    SliderProps,
    SmallProps,
    SpinnerProps,
    TabBarProps,
    TextAreaProps,
    TextEditProps,
    TreeProps,
    WindowProps,
)

_SIZES: Dict[WidgetKind, Tuple[float, float]] = {
    WidgetKind.MENU_BUTTON: (180.0, 28.0),
    WidgetKind.LABEL: (140.0, 24.0),
    WidgetKind.HEADING: (200.0, 32.0),
    WidgetKind.SMALL: (120.0, 20.0),
    WidgetKind.MONOSPACE: (140.0, 20.0),
    WidgetKind.BUTTON: (160.0, 32.0),
    WidgetKind.IMAGE_TEXT_BUTTON: (200.0, 36.0),
    WidgetKind.CHECKBOX: (160.0, 28.0),
    WidgetKind.TEXT_EDIT: (220.0, 36.0),
    WidgetKind.TEXT_AREA: (280.0, 120.0),
    WidgetKind.SLIDER: (220.0, 24.0),
    WidgetKind.PROGRESS_BAR: (220.0, 20.0),
    WidgetKind.RADIO_GROUP: (200.0, 80.0),
    WidgetKind.LINK: (160.0, 20.0),
    WidgetKind.HYPERLINK: (200.0, 20.0),
    WidgetKind.SELECTABLE_LABEL: (180.0, 24.0),
    WidgetKind.COMBO_BOX: (220.0, 28.0),
    WidgetKind.SEPARATOR: (220.0, 8.0),
    WidgetKind.COLLAPSING_HEADER: (260.0, 80.0),
    WidgetKind.DATE_PICKER: (200.0, 28.0),
    WidgetKind.ANGLE_SELECTOR: (220.0, 28.0),
    WidgetKind.PASSWORD: (220.0, 36.0),
    WidgetKind.TREE: (260.0, 200.0),
    WidgetKind.DRAG_VALUE: (180.0, 24.0),
    WidgetKind.SPINNER: (32.0, 32.0),
    WidgetKind.COLOR_PICKER: (200.0, 28.0),
    WidgetKind.CODE: (300.0, 150.0),
    WidgetKind.IMAGE: (150.0, 150.0),
    WidgetKind.PLACEHOLDER: (200.0, 100.0),
    WidgetKind.GROUP: (250.0, 150.0),
    WidgetKind.SCROLL_BOX: (200.0, 150.0),
    WidgetKind.TAB_BAR: (300.0, 32.0),
    WidgetKind.COLUMNS: (300.0, 120.0),
    WidgetKind.WINDOW: (280.0, 180.0),
}

_DEFAULTS: Dict[WidgetKind, Callable[[], BaseProps]] = {
    WidgetKind.MENU_BUTTON: lambda: MenuButtonProps(text="Menu", items=["First", "Second", "Third"], selected=0),
    WidgetKind.LABEL: lambda: LabelProps(text="Label"),
    WidgetKind.HEADING: lambda: HeadingProps(text="Heading"),
    WidgetKind.SMALL: lambda: SmallProps(text="Small text"),
    WidgetKind.MONOSPACE: lambda: MonospaceProps(text="code_value"),
    WidgetKind.BUTTON: lambda: ButtonProps(text="Button"),
    WidgetKind.IMAGE_TEXT_BUTTON: lambda: ImageTextButtonProps(text="Button", icon="\U0001f5bc\ufe0f"),
    WidgetKind.CHECKBOX: lambda: CheckboxProps(text="Checkbox"),
    WidgetKind.TEXT_EDIT: lambda: TextEditProps(text="Type here"),
    WidgetKind.TEXT_AREA: lambda: TextAreaProps(text="Multi-line\ntext here"),
    WidgetKind.SLIDER: lambda: SliderProps(text="Value", min=0.0, max=100.0, value=42.0),
    WidgetKind.PROGRESS_BAR: lambda: ProgressBarProps(value=0.25),
    WidgetKind.RADIO_GROUP: lambda: RadioGroupProps(
        text="Radio Group", items=["Option A", "Option B", "Option C"], selected=0
    ),
    WidgetKind.LINK: lambda: LinkProps(text="Link text"),
    WidgetKind.HYPERLINK: lambda: HyperlinkProps(text="Open website", url="https://example.com"),
    WidgetKind.SELECTABLE_LABEL: lambda: SelectableLabelProps(text="Selectable", checked=False),
    WidgetKind.COMBO_BOX: lambda: ComboBoxProps(text="Choose one", items=["Red", "Green", "Blue"], selected=0),
    WidgetKind.SEPARATOR: lambda: SeparatorProps(),
    WidgetKind.COLLAPSING_HEADER: lambda: CollapsingHeaderProps(text="Section", checked=True),
    WidgetKind.DATE_PICKER: lambda: DatePickerProps(text="Pick a date", year=2025, month=1, day=1),
    WidgetKind.ANGLE_SELECTOR: lambda: AngleSelectorProps(text="Angle (deg)", min=0.0, max=360.0, value=45.0),
    WidgetKind.PASSWORD: lambda: PasswordProps(text="password"),
    WidgetKind.TREE: lambda: TreeProps(
        text="Tree",
        items=[
            "Animals",
            "  Mammals",
            "    Dogs",
            "    Cats",
            "  Birds",
            "Plants",
            "  Trees",
            "  Flowers",
        ],
    ),
    WidgetKind.DRAG_VALUE: lambda: DragValueProps(text="Value", value=42.0, min=0.0, max=100.0),
    WidgetKind.SPINNER: lambda: SpinnerProps(),
    WidgetKind.COLOR_PICKER: lambda: ColorPickerProps(text="Color", color=(100, 149, 237, 255)),
    WidgetKind.CODE: lambda: CodeProps(text='def main():\n    print("Hello")\n'),
    WidgetKind.IMAGE: lambda: ImageProps(text="image.png", url="image.png"),
    WidgetKind.PLACEHOLDER: lambda: PlaceholderProps(text="Placeholder", color=(128, 128, 128, 128)),
    WidgetKind.GROUP: lambda: GroupProps(text="Group"),
    WidgetKind.SCROLL_BOX: lambda: ScrollBoxProps(text="Scroll content here..."),
    WidgetKind.TAB_BAR: lambda: TabBarProps(items=["Tab 1", "Tab 2", "Tab 3"], selected=0),
    WidgetKind.COLUMNS: lambda: ColumnsProps(text="Column content", columns=2),
    WidgetKind.WINDOW: lambda: WindowProps(text="Window Title"),
}

require_all_kinds(_SIZES, "default sizes")
require_all_kinds(_DEFAULTS, "default props")


def default_size(kind: WidgetKind) -> Tuple[float, float]:
    return _SIZES[kind]


def default_props(kind: WidgetKind) -> BaseProps:
    """Fresh property variant for ``kind``; callers own the returned object."""
    return _DEFAULTS[kind]()
