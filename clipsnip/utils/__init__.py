"""Wrappers around the external clipboard and editor programs."""

from .clipboard import read_clipboard
from .editor import open_in_editor

__all__ = [
    "open_in_editor",
    "read_clipboard",
]
