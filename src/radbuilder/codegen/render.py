"""
Per-kind rendering blocks of the generated ``generated_ui`` routine.

Each renderer returns the body lines for one widget, unindented. The shared
wrapper positions the cursor, wraps disabled widgets and attaches tooltips.
Labels carry a ``##w<id>`` suffix so two widgets with the same caption keep
distinct imgui ids.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Sequence

from ..kinds import WidgetKind, require_all_kinds
from ..outline import OutlineNode, fold_outline, parse_outline
from ..project import Widget
from .escape import num, offset, quote
from .state import field_name

TREE_FALLBACK = ["Root", "  Child"]
SPINNER_FRAMES = "|/-\\"

Renderer = Callable[[Widget, Any, bool], List[str]]


def label(text: str, widget_id: int) -> str:
    return quote(f"{text}##w{widget_id}")


def widget_tag(widget_id: int) -> str:
    return quote(f"##w{widget_id}")


def vec(x: float, y: float) -> str:
    return f"imgui.ImVec2({num(x, 1)}, {num(y, 1)})"


def size_of(widget: Widget) -> str:
    return vec(widget.size.x, widget.size.y)


def str_list(items: Sequence[str]) -> str:
    return "[" + ", ".join(quote(item) for item in items) + "]"


def option_items(items: Sequence[str]) -> List[str]:
    return list(items) if items else ["Item"]


def tree_literal(lines: Sequence[str]) -> str:
    """Nested ``GenTreeNode`` expression for an outline; empty outlines use a sample."""
    forest = parse_outline(lines or TREE_FALLBACK)

    def visit(node: OutlineNode, children: List[str]) -> str:
        if not children:
            return f"GenTreeNode({quote(node.label)})"
        return f"GenTreeNode({quote(node.label)}, [{', '.join(children)}])"

    return "[" + ", ".join(fold_outline(forest, visit)) + "]"


def _state(widget: Widget) -> str:
    return f"state.{field_name(widget)}"


def _menu_button(w: Widget, p: Any, comments: bool) -> List[str]:
    popup = quote(f"popup_w{w.id}")
    sel = _state(w)
    return [
        f"if imgui.button({label(p.text, w.id)}, {size_of(w)}):",
        f"    imgui.open_popup({popup})",
        f"if imgui.begin_popup({popup}):",
        f"    for i, item in enumerate({str_list(option_items(p.items))}):",
        f'        if imgui.menu_item(item, "", {sel} == i)[0]:',
        f"            {sel} = i",
        "    imgui.end_popup()",
    ]


def _label(w: Widget, p: Any, comments: bool) -> List[str]:
    return [f"imgui.text({quote(p.text)})"]


def _heading(w: Widget, p: Any, comments: bool) -> List[str]:
    return [
        "imgui.set_window_font_scale(1.4)",
        f"imgui.text({quote(p.text)})",
        "imgui.set_window_font_scale(1.0)",
    ]


def _small(w: Widget, p: Any, comments: bool) -> List[str]:
    return [f"imgui.text_disabled({quote(p.text)})"]


def _button(w: Widget, p: Any, comments: bool) -> List[str]:
    return [f"imgui.button({label(p.text, w.id)}, {size_of(w)})"]


def _image_text_button(w: Widget, p: Any, comments: bool) -> List[str]:
    caption = f"{p.icon} {p.text}" if p.icon else p.text
    return [f"imgui.button({label(caption, w.id)}, {size_of(w)})"]


def _checkbox(w: Widget, p: Any, comments: bool) -> List[str]:
    return [f"_, {_state(w)} = imgui.checkbox({label(p.text, w.id)}, {_state(w)})"]


def _text_edit(w: Widget, p: Any, comments: bool) -> List[str]:
    return [
        f"imgui.set_next_item_width({num(w.size.x, 1)})",
        f"_, {_state(w)} = imgui.input_text({widget_tag(w.id)}, {_state(w)})",
    ]


def _text_area(w: Widget, p: Any, comments: bool) -> List[str]:
    return [f"_, {_state(w)} = imgui.input_text_multiline({widget_tag(w.id)}, {_state(w)}, {size_of(w)})"]


def _slider(w: Widget, p: Any, comments: bool) -> List[str]:
    return [
        f"imgui.set_next_item_width({num(w.size.x, 1)})",
        f"_, {_state(w)} = imgui.slider_float({label(p.text, w.id)}, {_state(w)}, {num(p.min)}, {num(p.max)})",
    ]


def _progress_bar(w: Widget, p: Any, comments: bool) -> List[str]:
    return [f"imgui.progress_bar({_state(w)}, {size_of(w)})"]


def _radio_group(w: Widget, p: Any, comments: bool) -> List[str]:
    sel = _state(w)
    lines = [f"imgui.text({quote(p.text)})"] if p.text else []
    lines += [
        f"for i, item in enumerate({str_list(option_items(p.items))}):",
        f'    if imgui.radio_button(f"{{item}}##w{w.id}_{{i}}", {sel} == i):',
        f"        {sel} = i",
    ]
    return lines


def _link(w: Widget, p: Any, comments: bool) -> List[str]:
    return [f"imgui.text_link({label(p.text, w.id)})"]


def _hyperlink(w: Widget, p: Any, comments: bool) -> List[str]:
    return [f"imgui.text_link_open_url({label(p.text, w.id)}, {quote(p.url)})"]


def _selectable_label(w: Widget, p: Any, comments: bool) -> List[str]:
    return [f"_, {_state(w)} = imgui.selectable({label(p.text, w.id)}, {_state(w)}, 0, {size_of(w)})"]


def _combo_box(w: Widget, p: Any, comments: bool) -> List[str]:
    return [
        f"imgui.set_next_item_width({num(w.size.x, 1)})",
        f"_, {_state(w)} = imgui.combo({label(p.text, w.id)}, {_state(w)}, {str_list(option_items(p.items))})",
    ]


def _separator(w: Widget, p: Any, comments: bool) -> List[str]:
    return ["imgui.separator()"]


def _collapsing_header(w: Widget, p: Any, comments: bool) -> List[str]:
    is_open = _state(w)
    return [
        f"imgui.set_next_item_open({is_open})",
        f"{is_open} = imgui.collapsing_header({label(p.text, w.id)})",
        f"if {is_open}:",
        f"    imgui.text_disabled({quote(p.text + ' content')})",
    ]


def _date_picker(w: Widget, p: Any, comments: bool) -> List[str]:
    date = _state(w)
    lines = [f"imgui.text({quote(p.text)})", "imgui.same_line()"] if p.text else []
    lines += [
        f"imgui.set_next_item_width({num(w.size.x, 1)})",
        f"changed, parts = imgui.input_int3({widget_tag(w.id)}, [{date}.year, {date}.month, {date}.day])",
        "if changed:",
        f"    {date} = gen_make_date(parts)",
    ]
    return lines


def _angle_selector(w: Widget, p: Any, comments: bool) -> List[str]:
    return [
        f"imgui.set_next_item_width({num(w.size.x, 1)})",
        f"_, {_state(w)} = imgui.slider_float({label(p.text, w.id)}, {_state(w)}, "
        f'{num(p.min)}, {num(p.max)}, "%.1f°")',
    ]


def _password(w: Widget, p: Any, comments: bool) -> List[str]:
    return [
        f"imgui.set_next_item_width({num(w.size.x, 1)})",
        f"_, {_state(w)} = imgui.input_text({widget_tag(w.id)}, {_state(w)}, imgui.InputTextFlags_.password)",
    ]


def _tree(w: Widget, p: Any, comments: bool) -> List[str]:
    lines = [f"imgui.begin_child({widget_tag(w.id)}, {size_of(w)}, imgui.ChildFlags_.borders)"]
    if p.text:
        lines.append(f"imgui.text({quote(p.text)})")
    lines += [
        f"gen_show_tree({tree_literal(p.items)})",
        "imgui.end_child()",
    ]
    return lines


def _drag_value(w: Widget, p: Any, comments: bool) -> List[str]:
    lines = [f"imgui.text({quote(p.text)})", "imgui.same_line()"] if p.text else []
    lines += [
        f"imgui.set_next_item_width({num(w.size.x / 2, 1)})",
        f"_, {_state(w)} = imgui.drag_float({widget_tag(w.id)}, {_state(w)}, 1.0, {num(p.min)}, {num(p.max)})",
    ]
    return lines


def _spinner(w: Widget, p: Any, comments: bool) -> List[str]:
    return [f"imgui.text({quote(SPINNER_FRAMES)}[int(imgui.get_time() * 10.0) % 4])"]


def _color_picker(w: Widget, p: Any, comments: bool) -> List[str]:
    return [
        f"imgui.set_next_item_width({num(w.size.x, 1)})",
        f"_, {_state(w)} = imgui.color_edit4({label(p.text, w.id)}, {_state(w)})",
    ]


def _code(w: Widget, p: Any, comments: bool) -> List[str]:
    return [
        f"_, {_state(w)} = imgui.input_text_multiline({widget_tag(w.id)}, {_state(w)}, {size_of(w)}, "
        "imgui.InputTextFlags_.allow_tab_input)"
    ]


def _image(w: Widget, p: Any, comments: bool) -> List[str]:
    return [f"hello_imgui.image_from_asset({quote(p.url)}, {size_of(w)})"]


def _placeholder(w: Widget, p: Any, comments: bool) -> List[str]:
    r, g, b, a = (num(c / 255) for c in p.color)
    return [
        "corner = imgui.get_cursor_screen_pos()",
        "draw = imgui.get_window_draw_list()",
        f"draw.add_rect_filled(corner, imgui.ImVec2(corner.x + {num(w.size.x, 1)}, corner.y + {num(w.size.y, 1)}), "
        f"imgui.color_convert_float4_to_u32(imgui.ImVec4({r}, {g}, {b}, {a})))",
        "draw.add_text(imgui.ImVec2(corner.x + 4.0, corner.y + 4.0), "
        f"imgui.get_color_u32(imgui.Col_.text), {quote(p.text)})",
        f"imgui.dummy({size_of(w)})",
    ]


def _group(w: Widget, p: Any, comments: bool) -> List[str]:
    lines = [f"imgui.begin_child({widget_tag(w.id)}, {size_of(w)}, imgui.ChildFlags_.borders)"]
    if p.text:
        lines += [f"imgui.text({quote(p.text)})", "imgui.separator()"]
    if comments:
        lines.append(f"# group contents ({'horizontal' if p.horizontal else 'vertical'})")
    lines.append("imgui.end_child()")
    return lines


def _scroll_box(w: Widget, p: Any, comments: bool) -> List[str]:
    return [
        f"imgui.begin_child({widget_tag(w.id)}, {size_of(w)}, imgui.ChildFlags_.borders, "
        "imgui.WindowFlags_.horizontal_scrollbar)",
        f"imgui.text_wrapped({quote(p.text)})",
        "imgui.end_child()",
    ]


def _tab_bar(w: Widget, p: Any, comments: bool) -> List[str]:
    return [
        f"if imgui.begin_tab_bar({widget_tag(w.id)}):",
        f"    for i, item in enumerate({str_list(p.items)}):",
        f'        if imgui.begin_tab_item(f"{{item}}##w{w.id}_{{i}}")[0]:',
        f"            {_state(w)} = i",
        "            imgui.end_tab_item()",
        "    imgui.end_tab_bar()",
    ]


def _columns(w: Widget, p: Any, comments: bool) -> List[str]:
    count = max(p.columns, 1)
    return [
        f"if imgui.begin_table({widget_tag(w.id)}, {count}, imgui.TableFlags_.borders, {size_of(w)}):",
        f"    for col in range({count}):",
        "        imgui.table_next_column()",
        f"        imgui.text({quote(p.text + ' ')} + str(col + 1))",
        "    imgui.end_table()",
    ]


def _window(w: Widget, p: Any, comments: bool) -> List[str]:
    is_open = _state(w)
    return [
        f"if {is_open}:",
        f"    imgui.set_next_window_pos(imgui.ImVec2({offset('origin.x', w.pos.x)}, "
        f"{offset('origin.y', w.pos.y)}), imgui.Cond_.first_use_ever)",
        f"    imgui.set_next_window_size({size_of(w)}, imgui.Cond_.first_use_ever)",
        f"    _, {is_open} = imgui.begin({label(p.text, w.id)}, {is_open})",
        "    imgui.end()",
    ]


RENDERERS: Dict[WidgetKind, Renderer] = {
    WidgetKind.MENU_BUTTON: _menu_button,
    WidgetKind.LABEL: _label,
    WidgetKind.HEADING: _heading,
    WidgetKind.SMALL: _small,
    WidgetKind.MONOSPACE: _label,
    WidgetKind.BUTTON: _button,
    WidgetKind.IMAGE_TEXT_BUTTON: _image_text_button,
    WidgetKind.CHECKBOX: _checkbox,
    WidgetKind.TEXT_EDIT: _text_edit,
    WidgetKind.TEXT_AREA: _text_area,
    WidgetKind.SLIDER: _slider,
    WidgetKind.PROGRESS_BAR: _progress_bar,
    WidgetKind.RADIO_GROUP: _radio_group,
    WidgetKind.LINK: _link,
    WidgetKind.HYPERLINK: _hyperlink,
    WidgetKind.SELECTABLE_LABEL: _selectable_label,
    WidgetKind.COMBO_BOX: _combo_box,
    WidgetKind.SEPARATOR: _separator,
    WidgetKind.COLLAPSING_HEADER: _collapsing_header,
    WidgetKind.DATE_PICKER: _date_picker,
    WidgetKind.ANGLE_SELECTOR: _angle_selector,
    WidgetKind.PASSWORD: _password,
    WidgetKind.TREE: _tree,
    WidgetKind.DRAG_VALUE: _drag_value,
    WidgetKind.SPINNER: _spinner,
    WidgetKind.COLOR_PICKER: _color_picker,
    WidgetKind.CODE: _code,
    WidgetKind.IMAGE: _image,
    WidgetKind.PLACEHOLDER: _placeholder,
    WidgetKind.GROUP: _group,
    WidgetKind.SCROLL_BOX: _scroll_box,
    WidgetKind.TAB_BAR: _tab_bar,
    WidgetKind.COLUMNS: _columns,
    WidgetKind.WINDOW: _window,
}

require_all_kinds(RENDERERS, "renderers")


def render_widget(widget: Widget, comments: bool = True) -> List[str]:
    """Full block for one widget: header, cursor placement, body, tooltip."""
    props = widget.props
    lines: List[str] = []
    if comments:
        lines.append(f"# {widget.kind.value} #{widget.id}")
    if widget.kind != WidgetKind.WINDOW:
        lines.append(
            f"imgui.set_cursor_screen_pos(imgui.ImVec2({offset('origin.x', widget.pos.x)}, "
            f"{offset('origin.y', widget.pos.y)}))"
        )
    if not props.enabled:
        lines.append("imgui.begin_disabled()")
    lines.extend(RENDERERS[widget.kind](widget, props, comments))
    if not props.enabled:
        lines.append("imgui.end_disabled()")
    if props.tooltip:
        lines.append(f"imgui.set_item_tooltip({quote(props.tooltip)})")
    return lines


__all__ = ["RENDERERS", "TREE_FALLBACK", "render_widget", "tree_literal"]
