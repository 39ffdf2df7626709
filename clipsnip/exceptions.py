"""Error kinds raised by the snippet store engine and its collaborators."""

from __future__ import annotations

from pathlib import Path


class ClipsnipError(Exception):
    """Base class for every error the command pipelines handle."""


class StoreNotFoundError(ClipsnipError, FileNotFoundError):
    """No snippet store exists for the requested language tag."""

    def __init__(self, language: str, path: Path) -> None:
        super().__init__(f"No snippet file for '{language}' at {path}")
        self.language = language
        self.path = path


class FormatError(ClipsnipError):
    """Store content did not decode as snippet JSON after comment stripping."""

    def __init__(self, path: Path | None, reason: str) -> None:
        location = str(path) if path is not None else "<memory>"
        super().__init__(f"Invalid snippet file {location}: {reason}")
        self.path = path
        self.reason = reason


class CaptureEmptyError(ClipsnipError):
    """Captured clipboard text was empty or whitespace only."""


class MissingArgumentError(ClipsnipError):
    """A required command-line flag was missing or had no value."""

    def __init__(self, message: str, usage: str | None = None) -> None:
        super().__init__(message)
        self.usage = usage


class ExternalCommandError(ClipsnipError):
    """The clipboard or editor program failed to run."""

    def __init__(self, command: str, reason: str) -> None:
        super().__init__(f"Command '{command}' failed: {reason}")
        self.command = command
        self.reason = reason


class InvalidLanguageError(ClipsnipError):
    """A language tag cannot name a file directly inside the snippets directory."""

    def __init__(self, language: str) -> None:
        super().__init__(f"Invalid language tag '{language}'")
        self.language = language


class UnsupportedPlatformError(ClipsnipError):
    """The running platform has no clipboard/snippet directory mapping."""


__all__ = [
    "CaptureEmptyError",
    "ClipsnipError",
    "ExternalCommandError",
    "FormatError",
    "InvalidLanguageError",
    "MissingArgumentError",
    "StoreNotFoundError",
    "UnsupportedPlatformError",
]
