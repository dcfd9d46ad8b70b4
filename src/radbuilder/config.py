"""
Optional ``radbuilder.toml`` user configuration.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .codegen.formats import CodeGenFormat
from .errors import ConfigError

CONFIG_FILENAME = "radbuilder.toml"


@dataclass
class RadConfig:
    """Designer and code generator settings, with the built-in defaults."""

    grid_size: float = 1.0
    auto_generate: bool = False
    codegen_format: CodeGenFormat = CodeGenFormat.SINGLE_FILE
    codegen_comments: bool = True

    @classmethod
    def load(cls, project_root: Optional[Path]) -> "RadConfig":
        if project_root is None:
            return cls()
        cfg_path = Path(project_root) / CONFIG_FILENAME
        if not cfg_path.exists():
            return cls()
        try:
            data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid {CONFIG_FILENAME}: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Cannot read {cfg_path}: {exc}") from exc
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RadConfig":
        designer = _section(data, "designer")
        codegen = _section(data, "codegen")
        config = cls()
        if "grid_size" in designer:
            grid = designer["grid_size"]
            if isinstance(grid, bool) or not isinstance(grid, (int, float)) or grid < 0:
                raise ConfigError(f"designer.grid_size must be a non-negative number, got {grid!r}")
            config.grid_size = float(grid)
        if "auto_generate" in designer:
            config.auto_generate = _flag(designer, "auto_generate", "designer")
        if "format" in codegen:
            try:
                config.codegen_format = CodeGenFormat.from_name(str(codegen["format"]))
            except ValueError as exc:
                raise ConfigError(str(exc)) from exc
        if "comments" in codegen:
            config.codegen_comments = _flag(codegen, "comments", "codegen")
        return config


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    return section


def _flag(section: Dict[str, Any], key: str, name: str) -> bool:
    value = section[key]
    if not isinstance(value, bool):
        raise ConfigError(f"{name}.{key} must be true or false, got {value!r}")
    return value
