"""Core package for capturing clipboard text into editor snippet files."""

__version__ = "0.1.0"

from .config import PlatformConfig, resolve_platform_config
from .snippet import SnippetDefinition, SnippetStore, build_entry, merge_stores
from .storage import SnippetStoreFile
from .orchestration import SnippetCommands

__all__ = [
    "PlatformConfig",
    "SnippetCommands",
    "SnippetDefinition",
    "SnippetStore",
    "SnippetStoreFile",
    "build_entry",
    "merge_stores",
    "resolve_platform_config",
]
