"""
radbuilder core package: widget catalogue, document model and code generator.
"""

from .version import __version__, DOCUMENT_VERSION  # noqa: F401

__all__ = [
    "kinds",
    "props",
    "project",
    "catalogue",
    "outline",
    "codegen",
    "document",
    "designer",
    "preview",
    "config",
    "logs",
    "watch",
    "cli",
    "errors",
    "__version__",
    "DOCUMENT_VERSION",
]
