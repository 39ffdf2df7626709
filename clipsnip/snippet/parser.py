"""Decoding and encoding of snippet files.

Snippet files written by hand often carry line comments, which a strict JSON
decoder rejects. Only one narrow shape is removed: a line that starts with a
single tab followed by ``//``. Anything else containing ``//`` (two tabs,
spaces, trailing comments after code, URLs inside strings) is passed through
untouched and left to the decoder.
"""

from __future__ import annotations

import json
import re
from pathlib import Path

from pydantic import ValidationError

from ..exceptions import FormatError
from .model import SnippetStore

JSON_INDENT = 4

_LINE_COMMENT = re.compile(r"\t//.*")
# Split after each "\n" only; other Unicode line breaks stay inside their line.
_LINE_END = re.compile(r"(?<=\n)")


def strip_line_comments(text: str) -> str:
    """Drop tab-indented ``//`` comment lines, keeping every other line verbatim."""
    kept = [
        line
        for line in _LINE_END.split(text)
        if not _LINE_COMMENT.fullmatch(line.rstrip("\r\n"))
    ]
    return "".join(kept)


def decode_store(text: str, *, path: Path | None = None) -> SnippetStore:
    """Parse snippet file text into a store.

    Raises:
        FormatError: If the stripped text is not a JSON object of snippet
            definitions.
    """
    stripped = strip_line_comments(text)
    try:
        data = json.loads(stripped)
    except json.JSONDecodeError as exc:
        raise FormatError(path, f"line {exc.lineno} column {exc.colno}: {exc.msg}") from exc

    if not isinstance(data, dict):
        raise FormatError(path, f"expected a JSON object, got {type(data).__name__}")

    try:
        return SnippetStore.model_validate(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise FormatError(path, f"{location}: {first['msg']}") from exc


def encode_store(store: SnippetStore) -> str:
    """Render a store as indented JSON text with a trailing newline."""
    return json.dumps(store.to_dict(), indent=JSON_INDENT, ensure_ascii=False) + "\n"


__all__ = ["JSON_INDENT", "decode_store", "encode_store", "strip_line_comments"]
