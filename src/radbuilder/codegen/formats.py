"""
Output shapes of the code generator.
"""

from __future__ import annotations

from enum import Enum


class CodeGenFormat(str, Enum):
    SINGLE_FILE = "single"
    SEPARATE_FILES = "separate"
    UI_ONLY = "ui"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_name(cls, raw: str) -> "CodeGenFormat":
        text = (raw or "").strip().lower()
        for fmt in cls:
            if text in {fmt.value, fmt.name.lower(), fmt.display_name.lower()}:
                return fmt
        raise ValueError(f"Unknown output format '{raw}' (expected one of: single, separate, ui)")


_DISPLAY_NAMES = {
    CodeGenFormat.SINGLE_FILE: "Single File",
    CodeGenFormat.SEPARATE_FILES: "Separate Files",
    CodeGenFormat.UI_ONLY: "UI Function Only",
}
