"""
Persisted project documents: JSON encode/decode and file load/save.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from .errors import DocumentDecodeError, ProjectIOError
from .project import Project

logger = logging.getLogger("radbuilder.document")

PathLike = Union[str, Path]


def encode_project(project: Project) -> str:
    return project.model_dump_json(indent=2)


def decode_project(text: str) -> Project:
    """Parse and validate a document; every failure becomes ``DocumentDecodeError``."""
    try:
        return Project.model_validate_json(text)
    except ValidationError as exc:
        details = [
            {"loc": ".".join(str(part) for part in err["loc"]), "msg": err["msg"]}
            for err in exc.errors()
        ]
        logger.warning("Rejected project document: %d error(s)", len(details))
        summary = details[0]["msg"] if details else str(exc)
        raise DocumentDecodeError(f"Invalid project document: {summary}", details) from exc


def load_project(path: PathLike) -> Project:
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ProjectIOError(f"Cannot read project: {exc}", str(file_path)) from exc
    return decode_project(text)


def save_project(project: Project, path: PathLike) -> Path:
    file_path = Path(path)
    try:
        if file_path.parent and not file_path.parent.exists():
            file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(encode_project(project), encoding="utf-8")
    except OSError as exc:
        raise ProjectIOError(f"Cannot write project: {exc}", str(file_path)) from exc
    logger.info("Saved %d widget(s) to %s", len(project.widgets), file_path)
    return file_path
