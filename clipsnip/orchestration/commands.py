import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Sequence

from ..config import PlatformConfig
from ..exceptions import StoreNotFoundError
from ..snippet import SnippetStore, build_entry, merge_stores
from ..storage import SnippetStoreFile
from ..utils import open_in_editor, read_clipboard


logger = logging.getLogger("clipsnip")

ClipboardReader = Callable[[Sequence[str]], str]
EditorOpener = Callable[[Sequence[str], Path], None]


@dataclass(slots=True)
class AddResult:
    """Outcome of storing one captured snippet."""

    language: str
    name: str
    path: Path
    replaced: bool
    total_count: int


@dataclass(slots=True)
class MoveResult:
    """Outcome of merging one snippet file into another."""

    source: Path
    destination: Path
    moved_count: int
    replaced_count: int
    total_count: int


class SnippetCommands:
    """Runs the add, move, open and list pipelines against one configuration.

    Each pipeline is linear: validate, acquire text, decode, merge, encode,
    persist. Nothing is written until every earlier step has succeeded.
    """

    def __init__(
        self,
        config: PlatformConfig,
        *,
        clipboard_reader: Optional[ClipboardReader] = None,
        editor_opener: Optional[EditorOpener] = None,
    ) -> None:
        self.config = config
        self.clipboard_reader = clipboard_reader or read_clipboard
        self.editor_opener = editor_opener or open_in_editor

    def store_file(self, language: str) -> SnippetStoreFile:
        return SnippetStoreFile.for_language(self.config, language)

    async def add(
        self,
        language: str,
        prefix: str,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
        create: bool = False,
        text: Optional[str] = None,
    ) -> AddResult:
        """Store clipboard text (or ``text``) as a snippet in ``language``'s file."""
        store_file = self.store_file(language)
        if text is None:
            loop = asyncio.get_running_loop()
            text = await loop.run_in_executor(
                None, self.clipboard_reader, self.config.clipboard_command
            )

        language, entry = build_entry(language, prefix, text, title, description)

        if create and not store_file.exists():
            logger.info("Creating new snippet file %s", store_file.path)
            existing = SnippetStore()
        else:
            existing = await store_file.load()

        name = entry.names()[0]
        replaced = name in existing
        if replaced:
            logger.warning("Replacing existing snippet '%s' in %s", name, store_file.path)

        merged = merge_stores(existing, entry)
        await store_file.save(merged)

        return AddResult(
            language=language,
            name=name,
            path=store_file.path,
            replaced=replaced,
            total_count=len(merged),
        )

    async def move(self, source_language: str, destination_language: str) -> MoveResult:
        """Merge every snippet of the source file into the destination file.

        The source file is only read. Source definitions win on name
        collisions.
        """
        source_file = self.store_file(source_language)
        destination_file = self.store_file(destination_language)
        if source_file.path == destination_file.path:
            logger.warning("Source and destination are the same file: %s", source_file.path)

        source, destination = await asyncio.gather(source_file.load(), destination_file.load())

        replaced_count = sum(1 for name in source if name in destination)
        merged = merge_stores(destination, source)
        await destination_file.save(merged)

        return MoveResult(
            source=source_file.path,
            destination=destination_file.path,
            moved_count=len(source),
            replaced_count=replaced_count,
            total_count=len(merged),
        )

    async def list_entries(self, language: str) -> SnippetStore:
        """Load ``language``'s snippet file for display."""
        return await self.store_file(language).load()

    def open(self, language: str) -> Path:
        """Open ``language``'s snippet file in the configured editor."""
        store_file = self.store_file(language)
        if not store_file.exists():
            raise StoreNotFoundError(language, store_file.path)
        self.editor_opener(self.config.editor_command, store_file.path)
        return store_file.path


__all__ = ["AddResult", "MoveResult", "SnippetCommands"]
