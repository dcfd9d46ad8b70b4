from pathlib import Path

import pytest

from radbuilder.catalogue import default_props, default_size
from radbuilder.document import save_project
from radbuilder.kinds import DockArea, WidgetKind
from radbuilder.project import Project, Vec2, Widget


def make_widget(widget_id: int, kind: WidgetKind, area: DockArea = DockArea.FREE, x: float = 10.0, y: float = 10.0, **props) -> Widget:
    width, height = default_size(kind)
    widget_props = default_props(kind)
    for key, value in props.items():
        setattr(widget_props, key, value)
    return Widget(
        id=widget_id,
        pos=Vec2(x=x, y=y),
        size=Vec2(x=width, y=height),
        z=widget_id,
        area=area,
        props=widget_props,
    )


@pytest.fixture
def sample_project() -> Project:
    """A small layout touching every docking area."""
    return Project(
        widgets=[
            make_widget(1, WidgetKind.BUTTON, DockArea.FREE, text="Go"),
            make_widget(2, WidgetKind.HEADING, DockArea.TOP, text="Title"),
            make_widget(3, WidgetKind.COMBO_BOX, DockArea.CENTER),
            make_widget(4, WidgetKind.CHECKBOX, DockArea.LEFT),
            make_widget(5, WidgetKind.LABEL, DockArea.BOTTOM, text="Status"),
            make_widget(6, WidgetKind.SLIDER, DockArea.RIGHT),
        ],
        panel_top_enabled=True,
        panel_left_enabled=True,
    )


@pytest.fixture
def every_kind_project() -> Project:
    widgets = [make_widget(i + 1, kind, x=20.0 * i, y=12.0 * i) for i, kind in enumerate(WidgetKind)]
    return Project(widgets=widgets)


@pytest.fixture
def project_file(tmp_path: Path, sample_project: Project) -> Path:
    path = tmp_path / "layout.json"
    save_project(sample_project, path)
    return path
