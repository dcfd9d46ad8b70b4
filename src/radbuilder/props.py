"""
Per-kind property variants.

Each widget kind owns one pydantic model carrying only the fields that kind
reads. The ``kind`` literal doubles as the discriminator of the persisted
document, so decoding picks the right variant from the tag alone.
"""

from __future__ import annotations

from typing import Annotated, Dict, List, Literal, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field

from .kinds import WidgetKind, require_all_kinds

Byte = Annotated[int, Field(ge=0, le=255)]
Color = Tuple[Byte, Byte, Byte, Byte]

CORNFLOWER: Color = (100, 149, 237, 255)


class BaseProps(BaseModel):
    """Fields every kind carries."""

    model_config = ConfigDict(extra="forbid", ser_json_inf_nan="constants")

    tooltip: str = ""
    enabled: bool = True

    @property
    def widget_kind(self) -> WidgetKind:
        return WidgetKind(getattr(self, "kind"))


class TextProps(BaseProps):
    text: str = ""


class ChoiceProps(TextProps):
    items: List[str] = Field(default_factory=list)
    selected: int = Field(default=0, ge=0)


class RangeProps(TextProps):
    value: float = 0.0
    min: float = 0.0
    max: float = 1.0


class ToggleProps(TextProps):
    checked: bool = False


class MenuButtonProps(ChoiceProps):
    kind: Literal["MenuButton"] = "MenuButton"


class LabelProps(TextProps):
    kind: Literal["Label"] = "Label"


class HeadingProps(TextProps):
    kind: Literal["Heading"] = "Heading"


class SmallProps(TextProps):
    kind: Literal["Small"] = "Small"


class MonospaceProps(TextProps):
    kind: Literal["Monospace"] = "Monospace"


class ButtonProps(TextProps):
    kind: Literal["Button"] = "Button"


class ImageTextButtonProps(TextProps):
    kind: Literal["ImageTextButton"] = "ImageTextButton"
    icon: str = ""


class CheckboxProps(ToggleProps):
    kind: Literal["Checkbox"] = "Checkbox"


class TextEditProps(TextProps):
    kind: Literal["TextEdit"] = "TextEdit"


class TextAreaProps(TextProps):
    kind: Literal["TextArea"] = "TextArea"


class SliderProps(RangeProps):
    kind: Literal["Slider"] = "Slider"


class ProgressBarProps(BaseProps):
    kind: Literal["ProgressBar"] = "ProgressBar"
    value: float = 0.0


class RadioGroupProps(ChoiceProps):
    kind: Literal["RadioGroup"] = "RadioGroup"


class LinkProps(TextProps):
    kind: Literal["Link"] = "Link"


class HyperlinkProps(TextProps):
    kind: Literal["Hyperlink"] = "Hyperlink"
    url: str = ""


class SelectableLabelProps(ToggleProps):
    kind: Literal["SelectableLabel"] = "SelectableLabel"


class ComboBoxProps(ChoiceProps):
    kind: Literal["ComboBox"] = "ComboBox"


class SeparatorProps(BaseProps):
    kind: Literal["Separator"] = "Separator"


class CollapsingHeaderProps(ToggleProps):
    """``checked`` means open by default."""

    kind: Literal["CollapsingHeader"] = "CollapsingHeader"


class DatePickerProps(TextProps):
    kind: Literal["DatePicker"] = "DatePicker"
    year: int = 2025
    month: int = 1
    day: int = 1


class AngleSelectorProps(RangeProps):
    kind: Literal["AngleSelector"] = "AngleSelector"


class PasswordProps(TextProps):
    kind: Literal["Password"] = "Password"


class TreeProps(TextProps):
    """``items`` holds outline lines, two leading spaces per level."""

    kind: Literal["Tree"] = "Tree"
    items: List[str] = Field(default_factory=list)


class DragValueProps(RangeProps):
    kind: Literal["DragValue"] = "DragValue"


class SpinnerProps(BaseProps):
    kind: Literal["Spinner"] = "Spinner"


class ColorPickerProps(TextProps):
    kind: Literal["ColorPicker"] = "ColorPicker"
    color: Color = CORNFLOWER


class CodeProps(TextProps):
    kind: Literal["Code"] = "Code"


class ImageProps(TextProps):
    kind: Literal["Image"] = "Image"
    url: str = ""


class PlaceholderProps(TextProps):
    kind: Literal["Placeholder"] = "Placeholder"
    color: Color = (128, 128, 128, 128)


class GroupProps(TextProps):
    kind: Literal["Group"] = "Group"
    horizontal: bool = False


class ScrollBoxProps(TextProps):
    kind: Literal["ScrollBox"] = "ScrollBox"


class TabBarProps(BaseProps):
    kind: Literal["TabBar"] = "TabBar"
    items: List[str] = Field(default_factory=list)
    selected: int = Field(default=0, ge=0)


class ColumnsProps(TextProps):
    kind: Literal["Columns"] = "Columns"
    columns: int = Field(default=2, ge=0)


class WindowProps(TextProps):
    kind: Literal["Window"] = "Window"


WidgetProps = Annotated[
    Union[
        MenuButtonProps,
        LabelProps,
        HeadingProps,
        SmallProps,
        MonospaceProps,
        ButtonProps,
        ImageTextButtonProps,
        CheckboxProps,
        TextEditProps,
        TextAreaProps,
        SliderProps,
        ProgressBarProps,
        RadioGroupProps,
        LinkProps,
        HyperlinkProps,
        SelectableLabelProps,
        ComboBoxProps,
        SeparatorProps,
        CollapsingHeaderProps,
        DatePickerProps,
        AngleSelectorProps,
        PasswordProps,
        TreeProps,
        DragValueProps,
        SpinnerProps,
        ColorPickerProps,
        CodeProps,
        ImageProps,
        PlaceholderProps,
        GroupProps,
        ScrollBoxProps,
        TabBarProps,
        ColumnsProps,
        WindowProps,
    ],
    Field(discriminator="kind"),
]

PROPS_BY_KIND: Dict[WidgetKind, Type[BaseProps]] = {
    WidgetKind.MENU_BUTTON: MenuButtonProps,
    WidgetKind.LABEL: LabelProps,
    WidgetKind.HEADING: HeadingProps,
    WidgetKind.SMALL: SmallProps,
    WidgetKind.MONOSPACE: MonospaceProps,
    WidgetKind.BUTTON: ButtonProps,
    WidgetKind.IMAGE_TEXT_BUTTON: ImageTextButtonProps,
    WidgetKind.CHECKBOX: CheckboxProps,
    WidgetKind.TEXT_EDIT: TextEditProps,
    WidgetKind.TEXT_AREA: TextAreaProps,
    WidgetKind.SLIDER: SliderProps,
    WidgetKind.PROGRESS_BAR: ProgressBarProps,
    WidgetKind.RADIO_GROUP: RadioGroupProps,
    WidgetKind.LINK: LinkProps,
    WidgetKind.HYPERLINK: HyperlinkProps,
    WidgetKind.SELECTABLE_LABEL: SelectableLabelProps,
    WidgetKind.COMBO_BOX: ComboBoxProps,
    WidgetKind.SEPARATOR: SeparatorProps,
    WidgetKind.COLLAPSING_HEADER: CollapsingHeaderProps,
    WidgetKind.DATE_PICKER: DatePickerProps,
    WidgetKind.ANGLE_SELECTOR: AngleSelectorProps,
    WidgetKind.PASSWORD: PasswordProps,
    WidgetKind.TREE: TreeProps,
    WidgetKind.DRAG_VALUE: DragValueProps,
    WidgetKind.SPINNER: SpinnerProps,
    WidgetKind.COLOR_PICKER: ColorPickerProps,
    WidgetKind.CODE: CodeProps,
    WidgetKind.IMAGE: ImageProps,
    WidgetKind.PLACEHOLDER: PlaceholderProps,
    WidgetKind.GROUP: GroupProps,
    WidgetKind.SCROLL_BOX: ScrollBoxProps,
    WidgetKind.TAB_BAR: TabBarProps,
    WidgetKind.COLUMNS: ColumnsProps,
    WidgetKind.WINDOW: WindowProps,
}

require_all_kinds(PROPS_BY_KIND, "PROPS_BY_KIND")


def has_options(props: BaseProps) -> bool:
    """True for variants holding a selectable option list."""
    return isinstance(props, (ChoiceProps, TabBarProps))
