"""Helpers for exporting chat message databases: options, naming, attachments and HTML pieces."""

__version__ = "0.1.0"

__all__ = [
    "balloons",
    "converter",
    "errors",
    "html_attachments",
    "html_balloons",
    "html_document",
    "naming",
    "options",
    "progress",
    "sanitizers",
]