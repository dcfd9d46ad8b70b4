"""
Command-line interface for radbuilder (radb).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from collections import Counter
from pathlib import Path

from .catalogue import default_size
from .codegen import CodeGenFormat, generate
from .config import RadConfig
from .designer import DesignerSession
from .document import load_project, save_project
from .errors import RadError
from .kinds import AREA_ORDER, DockArea, WidgetKind
from .preview import build_preview_manifest
from .project import Project, Vec2
from .version import __version__
from .watch import ProjectWatcher

LOG_LEVELS = ("debug", "info", "warning", "error")


def build_cli_parser() -> argparse.ArgumentParser:
    cli = argparse.ArgumentParser(prog="radb", description="radbuilder GUI layout designer")
    cli.add_argument(
        "--version",
        action="version",
        version=f"radbuilder {__version__} (Python {sys.version.split()[0]})",
    )
    cli.add_argument("--log-level", choices=LOG_LEVELS, default="warning", help="Logging verbosity (default: warning)")
    sub = cli.add_subparsers(dest="command", required=True)

    new_cmd = sub.add_parser("new", help="Create an empty project document")
    new_cmd.add_argument("file", type=Path)
    new_cmd.add_argument("--width", type=float, default=800.0, help="Canvas width (default: 800)")
    new_cmd.add_argument("--height", type=float, default=600.0, help="Canvas height (default: 600)")
    new_cmd.add_argument("--panels", default="", help="Comma separated panels to enable: top,bottom,left,right")
    new_cmd.add_argument("--force", action="store_true", help="Overwrite an existing file")

    add_cmd = sub.add_parser("add", help="Place a widget into a project")
    add_cmd.add_argument("file", type=Path)
    add_cmd.add_argument("kind", help="Widget kind, e.g. Button or combo_box")
    add_cmd.add_argument("--x", type=float, default=0.0, help="Drop point x, the widget is centred on it")
    add_cmd.add_argument("--y", type=float, default=0.0, help="Drop point y, the widget is centred on it")
    add_cmd.add_argument("--area", default="Free", help="Docking area (default: Free)")

    sub.add_parser("kinds", help="List widget kinds with their default sizes")

    gen_cmd = sub.add_parser("generate", help="Generate imgui_bundle Python code")
    gen_cmd.add_argument("file", type=Path)
    gen_cmd.add_argument("--format", dest="fmt", help="single | separate | ui (default from radbuilder.toml)")
    gen_cmd.add_argument("--no-comments", action="store_true", help="Omit explanatory comments")
    gen_cmd.add_argument("--out", type=Path, help="Write to a file instead of stdout")

    preview_cmd = sub.add_parser("preview", help="Print the preview manifest as JSON")
    preview_cmd.add_argument("file", type=Path)

    check_cmd = sub.add_parser("check", help="Validate a project document")
    check_cmd.add_argument("file", type=Path)

    watch_cmd = sub.add_parser("watch", help="Regenerate code whenever the project changes")
    watch_cmd.add_argument("file", type=Path)
    watch_cmd.add_argument("--out", type=Path, required=True, help="Generated module path")
    watch_cmd.add_argument("--format", dest="fmt", help="single | separate | ui (default from radbuilder.toml)")
    watch_cmd.add_argument("--no-comments", action="store_true", help="Omit explanatory comments")
    watch_cmd.add_argument("--debounce", type=float, default=0.5, help="Seconds between regenerations (default: 0.5)")
    return cli


def _config_for(path: Path) -> RadConfig:
    return RadConfig.load(path.resolve().parent)


def _codegen_options(args: argparse.Namespace, config: RadConfig) -> tuple[CodeGenFormat, bool]:
    fmt = CodeGenFormat.from_name(args.fmt) if args.fmt else config.codegen_format
    comments = config.codegen_comments and not args.no_comments
    return fmt, comments


def _parse_panels(raw: str) -> list[DockArea]:
    areas = []
    for name in filter(None, (part.strip() for part in raw.split(","))):
        area = DockArea.from_name(name)
        if area in (DockArea.FREE, DockArea.CENTER):
            raise ValueError(f"'{name}' is not a toggleable panel")
        areas.append(area)
    return areas


def _run(args: argparse.Namespace) -> None:
    if args.command == "new":
        if args.file.exists() and not args.force:
            raise SystemExit(f"{args.file} already exists (use --force to overwrite)")
        project = Project(canvas_size=Vec2(x=args.width, y=args.height))
        for area in _parse_panels(args.panels):
            project.set_panel_enabled(area, True)
        save_project(project, args.file)
        print(f"Created {args.file}")
        return

    if args.command == "add":
        session = DesignerSession(load_project(args.file), _config_for(args.file))
        widget = session.place(WidgetKind.from_name(args.kind), (args.x, args.y), DockArea.from_name(args.area))
        save_project(session.project, args.file)
        print(f"Added {widget.kind.value} #{widget.id} at ({widget.pos.x:g}, {widget.pos.y:g}) in {widget.area.value}")
        return

    if args.command == "kinds":
        for kind in WidgetKind:
            width, height = default_size(kind)
            print(f"{kind.value:<18} {width:g}x{height:g}")
        return

    if args.command == "generate":
        fmt, comments = _codegen_options(args, _config_for(args.file))
        source = generate(load_project(args.file), fmt, comments)
        if args.out:
            args.out.parent.mkdir(parents=True, exist_ok=True)
            args.out.write_text(source, encoding="utf-8")
            print(f"Wrote {fmt.display_name} output to {args.out}")
        else:
            sys.stdout.write(source)
        return

    if args.command == "preview":
        print(json.dumps(build_preview_manifest(load_project(args.file)), indent=2, ensure_ascii=False))
        return

    if args.command == "check":
        project = load_project(args.file)
        counts = Counter(w.area for w in project.widgets)
        print(f"{args.file}: {len(project.widgets)} widget(s)")
        for area in AREA_ORDER:
            if counts[area]:
                print(f"  {area.value}: {counts[area]}")
        return

    if args.command == "watch":
        fmt, comments = _codegen_options(args, _config_for(args.file))
        watcher = ProjectWatcher(args.file, args.out, fmt, comments)
        if not watcher.regenerate():
            print(f"Initial generation failed: {watcher.last_error}", file=sys.stderr)
        watcher.start(debounce_seconds=args.debounce)
        print(f"Watching {args.file} -> {args.out} (Ctrl+C to stop)")
        try:
            while True:
                time.sleep(0.5)
        except KeyboardInterrupt:
            pass
        finally:
            watcher.stop()
        return

    raise SystemExit(f"Unknown command {args.command}")


def main(argv: list[str] | None = None) -> None:
    cli = build_cli_parser()
    args = cli.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper()), format="%(levelname)s %(name)s: %(message)s")
    try:
        _run(args)
    except RadError as exc:
        raise SystemExit(str(exc)) from exc
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":  # pragma: no cover
    main()
