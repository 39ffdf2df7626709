"""Read and write a language's snippet file."""

from __future__ import annotations

import asyncio
import logging
import os
import stat
import tempfile
from pathlib import Path

from ..config import PlatformConfig
from ..exceptions import StoreNotFoundError
from ..snippet import SnippetStore, decode_store, encode_store


logger = logging.getLogger("clipsnip")


class SnippetStoreFile:
    """Snippet file for one language tag.

    Every operation reads or writes the whole file. File I/O runs in the
    default executor so callers await each step in turn. There is no locking:
    two processes saving the same file concurrently race, and the last
    writer's content wins in full.
    """

    def __init__(self, language: str, path: Path) -> None:
        self.language = language
        self.path = path

    @classmethod
    def for_language(cls, config: PlatformConfig, language: str) -> "SnippetStoreFile":
        return cls(language, config.store_path(language))

    def exists(self) -> bool:
        return self.path.is_file()

    async def load(self) -> SnippetStore:
        """Read and decode the whole file.

        Raises:
            StoreNotFoundError: If the file does not exist.
            FormatError: If the content is not a valid snippet file.
        """
        loop = asyncio.get_running_loop()
        try:
            text = await loop.run_in_executor(None, self._read_text)
        except FileNotFoundError as exc:
            raise StoreNotFoundError(self.language, self.path) from exc

        store = decode_store(text, path=self.path)
        logger.info("Loaded %d snippets from %s", len(store), self.path)
        return store

    async def save(self, store: SnippetStore) -> None:
        """Replace the file's content with ``store``.

        The JSON is rendered in full before the file is touched, and is
        written to a temporary sibling that then replaces the target.
        """
        payload = encode_store(store)
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._write_text, payload)
        logger.info("Saved %d snippets to %s", len(store), self.path)

    def _read_text(self) -> str:
        with open(self.path, "r", encoding="utf-8") as f:
            return f.read()

    def _write_text(self, payload: str) -> None:
        # Write through symlinks so the link itself stays in place.
        target = self.path.resolve()
        target.parent.mkdir(parents=True, exist_ok=True)
        mode = _file_mode(target)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent)
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(payload)
            os.chmod(tmp_path, mode)
            os.replace(tmp_path, target)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()


def _file_mode(path: Path) -> int:
    """Permission bits to give the rewritten file.

    An existing file keeps its mode; a new file gets the usual
    umask-filtered default instead of the private mode of a temp file.
    """
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


__all__ = ["SnippetStoreFile"]
