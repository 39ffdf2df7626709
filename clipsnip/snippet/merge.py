from __future__ import annotations

import logging
from typing import Dict

from .model import SnippetDefinition, SnippetStore

logger = logging.getLogger("clipsnip")


def merge_stores(base: SnippetStore, incoming: SnippetStore) -> SnippetStore:
    """Combine two stores, letting ``incoming`` win on name collisions.

    Names only in ``base`` keep their position, a colliding name keeps its
    ``base`` position with the ``incoming`` definition, and names only in
    ``incoming`` are appended in their original order. Neither argument is
    modified.
    """
    merged: Dict[str, SnippetDefinition] = {
        name: definition.model_copy(deep=True) for name, definition in base.items()
    }
    replaced = 0
    for name, definition in incoming.items():
        if name in merged:
            replaced += 1
        merged[name] = definition.model_copy(deep=True)

    logger.debug(
        "Merged %d incoming snippets into %d existing (%d replaced)",
        len(incoming),
        len(base),
        replaced,
    )
    return SnippetStore(merged)


__all__ = ["merge_stores"]
