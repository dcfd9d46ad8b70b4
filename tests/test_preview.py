from radbuilder.kinds import DockArea, WidgetKind
from radbuilder.preview import build_preview_manifest, paint_order
from radbuilder.project import Project

from conftest import make_widget


def ids(entries):
    return [e["id"] for e in entries]


def test_manifest_areas(sample_project):
    manifest = build_preview_manifest(sample_project)
    areas = manifest["areas"]
    assert set(areas) == {"top", "bottom", "left", "right", "center"}
    assert areas["top"]["enabled"] is True
    assert areas["bottom"]["enabled"] is False
    assert areas["center"]["enabled"] is True
    assert ids(areas["top"]["widgets"]) == [2]
    assert ids(areas["center"]["widgets"]) == [3, 1]
    assert manifest["widget_count"] == 6
    assert manifest["canvas"] == {"width": 800.0, "height": 600.0}


def test_paint_order_is_stable_by_z():
    a = make_widget(1, WidgetKind.LABEL)
    b = make_widget(2, WidgetKind.LABEL)
    c = make_widget(3, WidgetKind.LABEL)
    a.z, b.z, c.z = 5, 1, 5
    assert [w.id for w in paint_order([a, b, c])] == [2, 1, 3]


def test_free_widgets_follow_center_widgets():
    free = make_widget(1, WidgetKind.LABEL, DockArea.FREE)
    center = make_widget(2, WidgetKind.LABEL, DockArea.CENTER)
    center.z = 99
    manifest = build_preview_manifest(Project(widgets=[free, center]))
    assert ids(manifest["areas"]["center"]["widgets"]) == [2, 1]


def test_tree_entry_carries_outline():
    tree = make_widget(1, WidgetKind.TREE, items=["A", "  B"])
    entry = build_preview_manifest(Project(widgets=[tree]))["areas"]["center"]["widgets"][0]
    assert entry["kind"] == "Tree"
    assert entry["outline"] == [{"label": "A", "children": [{"label": "B", "children": []}]}]


def test_choice_entry_clamps_selection():
    combo = make_widget(1, WidgetKind.COMBO_BOX, items=["x", "y"], selected=9)
    entry = build_preview_manifest(Project(widgets=[combo]))["areas"]["center"]["widgets"][0]
    assert entry["items"] == ["x", "y"]
    assert entry["selected"] == 1
    assert entry["has_options"] is True


def test_entry_geometry_and_flags():
    widget = make_widget(4, WidgetKind.PASSWORD, DockArea.RIGHT, x=3.0, y=7.0, text="abc", enabled=False)
    entry = build_preview_manifest(Project(widgets=[widget]))["areas"]["right"]["widgets"][0]
    assert (entry["x"], entry["y"], entry["width"], entry["height"]) == (3.0, 7.0, 220.0, 36.0)
    assert entry["enabled"] is False
    assert entry["label"] == "•••"


def test_manifest_does_not_mutate(every_kind_project):
    before = every_kind_project.model_copy(deep=True)
    manifest = build_preview_manifest(every_kind_project)
    assert every_kind_project == before
    assert len(manifest["areas"]["center"]["widgets"]) == len(WidgetKind)
