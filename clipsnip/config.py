"""Platform configuration resolved once at startup and passed to the pipelines."""

from __future__ import annotations

import logging
import os
import shlex
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence, Tuple

from .exceptions import InvalidLanguageError, UnsupportedPlatformError

logger = logging.getLogger("clipsnip")

SNIPPET_EXTENSION = ".json"
DEFAULT_EDITOR = "code"

# Per-platform clipboard command and the path segments below the home
# directory that lead to the editor's user data directory.
PLATFORM_DEFAULTS: dict[str, Tuple[str, Tuple[str, ...]]] = {
    "darwin": ("pbpaste", ("Library", "Application Support")),
    "win32": ("powershell Get-Clipboard", ("AppData", "Roaming")),
    "linux": ("xclip -selection clipboard -o", (".config",)),
}
EDITOR_SNIPPET_SEGMENTS: Tuple[str, ...] = ("Code", "User", "snippets")
_FORBIDDEN_TAG_CHARS = ("/", "\\", ":", "\0")


@dataclass(frozen=True, slots=True)
class PlatformConfig:
    """Where snippet files live and which external programs to call."""

    clipboard_command: Tuple[str, ...]
    snippets_dir: Path
    editor_command: Tuple[str, ...] = (DEFAULT_EDITOR,)

    def store_path(self, language: str) -> Path:
        """Return the snippet file path for a language tag.

        Raises:
            InvalidLanguageError: If the tag is blank, names a relative
                directory, or holds a path separator, drive colon or NUL.
        """
        if (
            not language.strip()
            or language in (".", "..")
            or any(sep in language for sep in _FORBIDDEN_TAG_CHARS)
        ):
            raise InvalidLanguageError(language)
        return self.snippets_dir / f"{language}{SNIPPET_EXTENSION}"


def resolve_platform_config(
    platform: str | None = None,
    environ: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> PlatformConfig:
    """Build the platform configuration from defaults and environment overrides.

    Environment variables:
        CLIPSNIP_SNIPPETS_DIR: Directory holding the snippet files.
        CLIPSNIP_CLIPBOARD_CMD: Command that prints the clipboard to stdout.
        CLIPSNIP_EDITOR: Editor command (falls back to VISUAL, then EDITOR).

    Raises:
        UnsupportedPlatformError: If the platform has no defaults and the
            overrides do not cover both the clipboard command and directory.
    """
    platform = platform or sys.platform
    if platform.startswith("linux"):
        platform = "linux"
    env = os.environ if environ is None else environ
    home = home or Path.home()

    defaults = PLATFORM_DEFAULTS.get(platform)

    clipboard = _command_env(env, "CLIPSNIP_CLIPBOARD_CMD")
    if clipboard is None:
        if defaults is None:
            raise UnsupportedPlatformError(
                f"No clipboard command known for platform '{platform}'; set CLIPSNIP_CLIPBOARD_CMD"
            )
        clipboard = tuple(shlex.split(defaults[0]))

    raw_dir = env.get("CLIPSNIP_SNIPPETS_DIR", "").strip()
    if raw_dir:
        snippets_dir = Path(raw_dir).expanduser()
    elif defaults is not None:
        snippets_dir = home.joinpath(*defaults[1], *EDITOR_SNIPPET_SEGMENTS)
    else:
        raise UnsupportedPlatformError(
            f"No snippet directory known for platform '{platform}'; set CLIPSNIP_SNIPPETS_DIR"
        )

    editor = (
        _command_env(env, "CLIPSNIP_EDITOR")
        or _command_env(env, "VISUAL")
        or _command_env(env, "EDITOR")
        or (DEFAULT_EDITOR,)
    )

    config = PlatformConfig(
        clipboard_command=clipboard,
        snippets_dir=snippets_dir,
        editor_command=editor,
    )
    logger.debug("Resolved platform config for %s: %s", platform, config)
    return config


def _command_env(env: Mapping[str, str], name: str) -> Tuple[str, ...] | None:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        parts: Sequence[str] = shlex.split(raw)
    except ValueError:
        logger.warning("Invalid command for %s: %s", name, raw)
        return None
    return tuple(parts) or None


__all__ = [
    "DEFAULT_EDITOR",
    "PLATFORM_DEFAULTS",
    "PlatformConfig",
    "SNIPPET_EXTENSION",
    "resolve_platform_config",
]
