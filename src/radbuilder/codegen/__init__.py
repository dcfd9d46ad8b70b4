"""
Code generation for imgui_bundle targets.
"""

from .engine import generate, python_section
from .escape import escape
from .formats import CodeGenFormat

__all__ = ["CodeGenFormat", "escape", "generate", "python_section"]
