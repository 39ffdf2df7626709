"""Snippet data model, parsing and merge helpers."""

from .builder import build_entry
from .merge import merge_stores
from .model import SnippetDefinition, SnippetStore
from .parser import decode_store, encode_store, strip_line_comments

__all__ = [
    "SnippetDefinition",
    "SnippetStore",
    "build_entry",
    "decode_store",
    "encode_store",
    "merge_stores",
    "strip_line_comments",
]
