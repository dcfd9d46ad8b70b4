"""
Regenerate code whenever a project document changes on disk.
"""

from __future__ import annotations

import logging
import os
import threading
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .codegen import CodeGenFormat, generate
from .document import load_project
from .errors import RadError
from .logs import LogBuffer, log_event

logger = logging.getLogger("radbuilder.watch")


@dataclass
class ProjectWatcher:
    """
    Watches one project file and rewrites the generated module after each change.
    """

    project_path: Path
    output_path: Path
    fmt: CodeGenFormat = CodeGenFormat.SINGLE_FILE
    include_comments: bool = True
    last_error: str | None = None
    last_generated_at: float | None = None
    generations: int = 0
    logs: LogBuffer = field(default_factory=LogBuffer)
    _observer: Optional[Observer] = None
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def __post_init__(self) -> None:
        self.project_path = Path(self.project_path)
        self.output_path = Path(self.output_path)

    def regenerate(self) -> bool:
        """Load, generate and write once. Failures are recorded, never raised."""
        with self._lock:
            try:
                project = load_project(self.project_path)
                source = generate(project, self.fmt, self.include_comments)
                self.output_path.parent.mkdir(parents=True, exist_ok=True)
                self.output_path.write_text(source, encoding="utf-8")
            except (RadError, OSError) as exc:
                self.last_error = str(exc)
                logger.warning("Regeneration of %s failed: %s", self.project_path, exc)
                log_event(self.logs, "regenerate_error", level="error", path=str(self.project_path), message=str(exc))
                return False
            self.last_error = None
            self.last_generated_at = time.time()
            self.generations += 1
        logger.info("Regenerated %s -> %s", self.project_path, self.output_path)
        log_event(self.logs, "regenerated", level="info", path=str(self.output_path), widgets=len(project.widgets))
        return True

    def start(self, debounce_seconds: float = 0.5) -> bool:
        if self._observer is not None:
            return False
        handler = _ProjectFileEventHandler(self, debounce_seconds=debounce_seconds)
        observer = Observer()
        observer.schedule(handler, str(self.project_path.resolve().parent), recursive=False)
        observer.start()
        self._observer = observer
        log_event(self.logs, "watcher_started", level="info", path=str(self.project_path))
        return True

    def stop(self) -> None:
        observer = self._observer
        if observer is None:
            return
        observer.stop()
        observer.join(timeout=2)
        self._observer = None
        log_event(self.logs, "watcher_stopped", level="info", path=str(self.project_path))

    @property
    def running(self) -> bool:
        return self._observer is not None


class _ProjectFileEventHandler(FileSystemEventHandler):  # pragma: no cover - exercised in integration
    def __init__(self, watcher: ProjectWatcher, debounce_seconds: float = 0.5) -> None:
        self.watcher = watcher
        self.debounce_seconds = debounce_seconds
        self._target = watcher.project_path.resolve()
        self._last_run = 0.0

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        paths = {event.src_path, getattr(event, "dest_path", "")}
        if not any(p and Path(os.fsdecode(p)).resolve() == self._target for p in paths):
            return
        now = time.time()
        if now - self._last_run < self.debounce_seconds:
            return
        self._last_run = now
        log_event(self.watcher.logs, "watcher_event", level="info", event_type=event.event_type)
        self.watcher.regenerate()
