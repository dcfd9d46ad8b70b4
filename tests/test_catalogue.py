import pytest

from radbuilder.catalogue import default_props, default_size
from radbuilder.errors import CatalogueError
from radbuilder.kinds import DockArea, WidgetKind, require_all_kinds
from radbuilder.props import PROPS_BY_KIND, ChoiceProps, has_options


@pytest.mark.parametrize("kind", list(WidgetKind))
def test_default_size_is_positive(kind):
    width, height = default_size(kind)
    assert width > 0
    assert height > 0


@pytest.mark.parametrize("kind", list(WidgetKind))
def test_default_props_match_kind(kind):
    props = default_props(kind)
    assert props.widget_kind == kind
    assert isinstance(props, PROPS_BY_KIND[kind])
    assert props.enabled is True
    assert props.tooltip == ""


@pytest.mark.parametrize("kind", [k for k in WidgetKind if has_options(default_props(k))])
def test_default_selection_is_in_range(kind):
    props = default_props(kind)
    assert props.items
    assert props.selected < len(props.items)


def test_default_props_are_fresh_objects():
    first = default_props(WidgetKind.COMBO_BOX)
    first.items.append("Purple")
    second = default_props(WidgetKind.COMBO_BOX)
    assert second.items == ["Red", "Green", "Blue"]
    assert first is not second


def test_known_defaults():
    assert default_size(WidgetKind.LABEL) == (140.0, 24.0)
    assert default_size(WidgetKind.TREE) == (260.0, 200.0)
    slider = default_props(WidgetKind.SLIDER)
    assert (slider.min, slider.max, slider.value) == (0.0, 100.0, 42.0)
    assert default_props(WidgetKind.COLOR_PICKER).color == (100, 149, 237, 255)
    tree = default_props(WidgetKind.TREE)
    assert tree.items[0] == "Animals"
    assert [line for line in tree.items if not line.startswith(" ")] == ["Animals", "Plants"]


def test_only_option_variants_report_options():
    assert has_options(default_props(WidgetKind.TAB_BAR))
    assert has_options(default_props(WidgetKind.RADIO_GROUP))
    assert not has_options(default_props(WidgetKind.TREE))
    assert not has_options(default_props(WidgetKind.LABEL))
    assert issubclass(PROPS_BY_KIND[WidgetKind.MENU_BUTTON], ChoiceProps)


def test_incomplete_table_is_rejected():
    table = {kind: None for kind in WidgetKind if kind != WidgetKind.SPINNER}
    with pytest.raises(CatalogueError) as exc:
        require_all_kinds(table, "broken table")
    assert "Spinner" in str(exc.value)


def test_kind_and_area_lookup_by_name():
    assert WidgetKind.from_name("ComboBox") == WidgetKind.COMBO_BOX
    assert WidgetKind.from_name("combo_box") == WidgetKind.COMBO_BOX
    assert WidgetKind.from_name("combobox") == WidgetKind.COMBO_BOX
    assert DockArea.from_name("left") == DockArea.LEFT
    with pytest.raises(ValueError):
        WidgetKind.from_name("Slider2")
    with pytest.raises(ValueError):
        DockArea.from_name("middle")
