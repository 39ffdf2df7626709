"""Command pipelines for adding, moving, listing and opening snippet files."""

from .commands import AddResult, MoveResult, SnippetCommands

__all__ = ["AddResult", "MoveResult", "SnippetCommands"]
