"""Snippet file persistence."""

from .store_file import SnippetStoreFile

__all__ = ["SnippetStoreFile"]
