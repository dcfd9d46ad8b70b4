from pathlib import Path

import pytest

from radbuilder.codegen import CodeGenFormat
from radbuilder.config import RadConfig
from radbuilder.designer import DesignerSession, snap_to_grid
from radbuilder.kinds import DockArea, WidgetKind
from radbuilder.project import Vec2


def session_with(*kinds, grid=1.0):
    session = DesignerSession(config=RadConfig(grid_size=grid))
    for i, kind in enumerate(kinds):
        session.place(kind, (100.0 + 50 * i, 100.0 + 40 * i))
    return session


@pytest.mark.parametrize(
    "point, grid, expected",
    [
        ((5.0, 5.0), 10.0, (10.0, 10.0)),
        ((4.9, 4.9), 10.0, (0.0, 0.0)),
        ((15.0, 25.0), 10.0, (20.0, 30.0)),
        ((5.4, 3.6), 1.0, (5.0, 4.0)),
        ((12.0, 20.0), 8.0, (16.0, 24.0)),
        ((-5.0, -15.0), 10.0, (-10.0, -20.0)),
        ((3.3, 7.7), 0.0, (3.3, 7.7)),
    ],
)
def test_snap_to_grid(point, grid, expected):
    assert snap_to_grid(point, grid) == expected


def test_place_centres_on_drop_point_and_selects():
    session = DesignerSession()
    widget = session.place(WidgetKind.BUTTON, (200.0, 100.0), DockArea.CENTER, origin=(20.0, 10.0))
    assert widget.id == 1
    assert widget.z == 1
    assert (widget.size.x, widget.size.y) == (160.0, 32.0)
    assert (widget.pos.x, widget.pos.y) == (100.0, 74.0)
    assert widget.area == DockArea.CENTER
    assert session.selected == [1]
    assert session.next_id == 2


def test_ids_are_never_reused():
    session = session_with(WidgetKind.LABEL, WidgetKind.LABEL)
    session.delete(2)
    widget = session.place(WidgetKind.LABEL, (0.0, 0.0))
    assert widget.id == 3


def test_selection_operations():
    session = session_with(WidgetKind.LABEL, WidgetKind.BUTTON, WidgetKind.CHECKBOX)
    session.select_single(1)
    session.toggle_selection(2)
    assert session.selected == [1, 2]
    session.toggle_selection(1)
    assert session.selected == [2]
    session.add_to_selection(3)
    session.add_to_selection(3)
    assert session.selected == [2, 3]
    assert session.is_selected(3)
    session.select_all()
    assert session.selected == [1, 2, 3]
    session.clear_selection()
    assert session.selected_widgets() == []


def test_widgets_in_rect():
    session = session_with(WidgetKind.LABEL, WidgetKind.BUTTON, WidgetKind.CHECKBOX)
    hits = session.widgets_in_rect((0.0, 0.0), (125.0, 130.0))
    assert [w.id for w in hits] == [1, 2]
    assert session.widgets_in_rect((120.0, 120.0), (0.0, 0.0), area=DockArea.LEFT) == []


def test_delete_selected():
    session = session_with(WidgetKind.LABEL, WidgetKind.BUTTON, WidgetKind.CHECKBOX)
    session.selected = [1, 3]
    assert session.delete_selected() == 2
    assert [w.id for w in session.project.widgets] == [2]
    assert session.selected == []


def test_duplicate_selected_offsets_and_selects_copies():
    session = session_with(WidgetKind.LABEL, WidgetKind.BUTTON)
    session.selected = [1, 2]
    copies = session.duplicate_selected()
    assert [c.id for c in copies] == [3, 4]
    assert [c.z for c in copies] == [3, 4]
    original = session.project.find(1)
    assert copies[0].pos.x == original.pos.x + 20
    assert copies[0].pos.y == original.pos.y + 20
    assert session.selected == [3, 4]
    copies[0].props.text = "changed"
    assert original.props.text == "Label"


def test_copy_and_paste():
    session = session_with(WidgetKind.COMBO_BOX)
    assert session.paste() is None
    assert session.copy()
    session.project.find(1).props.items.append("Purple")
    pasted = session.paste()
    assert pasted.id == 2
    assert pasted.z == 2
    assert pasted.props.items == ["Red", "Green", "Blue"]
    assert session.selected == [2]
    again = session.paste()
    assert again.id == 3
    assert again.pos == pasted.pos


def test_copy_without_selection():
    session = DesignerSession()
    assert session.copy() is False


def test_nudge_uses_grid_and_clamps_at_zero():
    session = session_with(WidgetKind.LABEL, grid=8.0)
    widget = session.project.find(1)
    widget.pos = Vec2(x=10.0, y=4.0)
    session.nudge(1, -1)
    assert (widget.pos.x, widget.pos.y) == (18.0, 0.0)
    session.grid_size = 0.0
    session.nudge(-1, 0)
    assert widget.pos.x == 17.0


def test_z_order():
    session = session_with(WidgetKind.LABEL, WidgetKind.BUTTON, WidgetKind.CHECKBOX)
    session.selected = [1, 2]
    session.bring_to_front()
    assert [w.z for w in session.project.widgets] == [4, 5, 3]
    session.selected = [3]
    session.send_to_back()
    assert session.project.find(3).z == 2


def test_send_to_back_over_selection():
    session = session_with(WidgetKind.LABEL, WidgetKind.BUTTON, WidgetKind.CHECKBOX)
    session.selected = [3, 2]
    session.send_to_back()
    assert session.project.find(3).z == 0
    assert session.project.find(2).z == -1


def _three_boxes():
    session = session_with(WidgetKind.LABEL, WidgetKind.LABEL, WidgetKind.LABEL)
    boxes = session.project.widgets
    boxes[0].pos, boxes[0].size = Vec2(x=0, y=0), Vec2(x=10, y=10)
    boxes[1].pos, boxes[1].size = Vec2(x=30, y=50), Vec2(x=20, y=20)
    boxes[2].pos, boxes[2].size = Vec2(x=100, y=10), Vec2(x=40, y=30)
    session.select_all()
    return session, boxes


def test_align_edges():
    session, boxes = _three_boxes()
    session.align_left()
    assert [b.pos.x for b in boxes] == [0, 0, 0]
    session, boxes = _three_boxes()
    session.align_right()
    assert [b.pos.x + b.size.x for b in boxes] == [140, 140, 140]
    session, boxes = _three_boxes()
    session.align_top()
    assert [b.pos.y for b in boxes] == [0, 0, 0]
    session, boxes = _three_boxes()
    session.align_bottom()
    assert [b.pos.y + b.size.y for b in boxes] == [70, 70, 70]


def test_align_centres_use_average():
    session, boxes = _three_boxes()
    session.align_center_h()
    # centres 5, 40, 120 -> 55
    assert [b.pos.x + b.size.x / 2 for b in boxes] == [55, 55, 55]
    session, boxes = _three_boxes()
    session.align_center_v()
    # centres 5, 60, 25 -> 30
    assert [b.pos.y + b.size.y / 2 for b in boxes] == [30, 30, 30]


def test_alignment_needs_two_widgets():
    session, boxes = _three_boxes()
    session.selected = [2]
    session.align_left()
    assert boxes[1].pos.x == 30


def test_match_size_from_first_selected():
    session, boxes = _three_boxes()
    session.selected = [3, 1]
    session.match_width()
    session.match_height()
    assert (boxes[0].size.x, boxes[0].size.y) == (40, 30)
    assert (boxes[1].size.x, boxes[1].size.y) == (20, 20)


def test_distribute_horizontal_keeps_outer_edges():
    session, boxes = _three_boxes()
    session.distribute_horizontal()
    # span 0..140, widths 70 -> gap 35
    assert [b.pos.x for b in boxes] == [0, 45, 100]


def test_distribute_vertical():
    session, boxes = _three_boxes()
    session.distribute_vertical()
    # sorted by top: box0 (0), box2 (10), box1 (50); span 0..70, heights 60 -> gap 5
    assert boxes[0].pos.y == 0
    assert boxes[2].pos.y == 15
    assert boxes[1].pos.y == 50


def test_distribute_needs_three():
    session, boxes = _three_boxes()
    session.selected = [1, 2]
    session.distribute_horizontal()
    assert [b.pos.x for b in boxes] == [0, 30, 100]


def test_set_items_reclamps_selection():
    session = session_with(WidgetKind.COMBO_BOX)
    widget = session.project.find(1)
    widget.props.selected = 2
    session.set_items(1, ["only"])
    assert widget.props.selected == 0
    session.set_items(1, [])
    assert widget.props.selected == 0
    with pytest.raises(ValueError):
        session.set_items(session.place(WidgetKind.LABEL, (0, 0)).id, ["x"])
    with pytest.raises(KeyError):
        session.set_items(99, ["x"])


def test_set_area_snaps_position():
    session = session_with(WidgetKind.LABEL, grid=10.0)
    widget = session.project.find(1)
    widget.pos = Vec2(x=13.0, y=26.0)
    session.set_area(1, DockArea.LEFT)
    assert widget.area == DockArea.LEFT
    assert (widget.pos.x, widget.pos.y) == (10.0, 30.0)


def test_export_import_round_trip():
    session = session_with(WidgetKind.LABEL, WidgetKind.TREE)
    text = session.export_json()
    other = DesignerSession()
    other.selected = [42]
    assert other.import_json(text)
    assert other.project == session.project
    assert other.selected == []
    assert other.next_id == 3


def test_import_failure_keeps_project():
    session = session_with(WidgetKind.LABEL)
    before = session.project
    assert session.import_json("{broken") is False
    assert session.project is before
    assert session.status_message.startswith("Import failed")


def test_save_and_load(tmp_path: Path):
    session = session_with(WidgetKind.SLIDER)
    assert session.save() is False
    assert session.save(tmp_path / "a.json")
    assert session.current_file == tmp_path / "a.json"
    fresh = DesignerSession()
    assert fresh.load(tmp_path / "a.json")
    assert fresh.project == session.project
    assert fresh.next_id == 2
    assert fresh.load(tmp_path / "missing.json") is False
    assert fresh.status_message.startswith("Load failed")
    assert fresh.project == session.project


def test_new_project_keeps_id_counter():
    session = session_with(WidgetKind.LABEL)
    session.new_project()
    assert session.project.widgets == []
    assert session.current_file is None
    assert session.place(WidgetKind.LABEL, (0.0, 0.0)).id == 2


def test_import_does_not_reuse_deleted_ids():
    session = session_with(WidgetKind.LABEL, WidgetKind.BUTTON)
    session.delete(2)
    assert session.import_json(session.export_json())
    assert session.next_id == 3
    assert session.place(WidgetKind.LABEL, (0.0, 0.0)).id == 3


def test_load_continues_after_larger_document_ids(tmp_path: Path):
    source = session_with(WidgetKind.LABEL, WidgetKind.LABEL, WidgetKind.LABEL)
    source.save(tmp_path / "b.json")
    session = session_with(WidgetKind.LABEL)
    assert session.load(tmp_path / "b.json")
    assert session.next_id == 4


def test_auto_generate_on_edit():
    config = RadConfig(auto_generate=True, codegen_format=CodeGenFormat.UI_ONLY)
    session = DesignerSession(config=config)
    assert session.generated == ""
    session.place(WidgetKind.BUTTON, (50.0, 50.0))
    assert "def generated_ui(" in session.generated
    assert "def main(" not in session.generated


def test_manual_generate_respects_comment_setting():
    session = DesignerSession(config=RadConfig(codegen_comments=False))
    session.place(WidgetKind.BUTTON, (50.0, 50.0))
    assert session.generated == ""
    source = session.generate()
    assert "# Button #1" not in source
    assert session.generated == source
