from __future__ import annotations

import re
from datetime import datetime
from typing import Tuple

from ..exceptions import CaptureEmptyError, MissingArgumentError
from .model import SnippetDefinition, SnippetStore

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_NEWLINE = re.compile(r"\r?\n")


def build_entry(
    language: str,
    prefix: str,
    body: str,
    title: str | None = None,
    description: str | None = None,
    *,
    now: datetime | None = None,
) -> Tuple[str, SnippetStore]:
    """Turn captured text into a one-entry store for ``language``.

    The body is split at ``\\n`` and ``\\r\\n`` only. The title becomes the
    snippet name. When the title or description is missing, the build time
    is used in its place.

    Raises:
        MissingArgumentError: If ``prefix`` is empty or whitespace only.
        CaptureEmptyError: If ``body`` is empty or whitespace only.
    """
    if not prefix or not prefix.strip():
        raise MissingArgumentError("Snippet prefix must not be empty")
    if not body or not body.strip():
        raise CaptureEmptyError("Captured text is empty; nothing to store")

    timestamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    definition = SnippetDefinition(
        prefix=prefix,
        body=_NEWLINE.split(body),
        description=description or timestamp,
    )
    return language, SnippetStore.single(title or timestamp, definition)


__all__ = ["TIMESTAMP_FORMAT", "build_entry"]
