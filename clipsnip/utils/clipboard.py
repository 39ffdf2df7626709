"""Read clipboard text through the platform's clipboard program."""

from __future__ import annotations

import logging
import re
import subprocess
from typing import Sequence

from ..exceptions import CaptureEmptyError, ExternalCommandError


logger = logging.getLogger("clipsnip")

_LEADING_BLANK_LINES = re.compile(r"\A(?:[ \t]*\r?\n)+")


def read_clipboard(command: Sequence[str]) -> str:
    """Run ``command`` and return its stdout without surrounding blank lines.

    Indentation of the first line and trailing whitespace inside the text are
    kept; only blank leading lines and trailing whitespace are removed.

    Raises:
        ExternalCommandError: If the program is missing or exits non-zero.
        CaptureEmptyError: If the clipboard holds no text.
    """
    command_str = " ".join(command)
    logger.debug("Reading clipboard with %s", command_str)

    try:
        result = subprocess.run(
            list(command),
            check=False,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as exc:
        logger.error("Failed to start clipboard command %s: %s", command_str, exc)
        raise ExternalCommandError(command_str, str(exc)) from exc

    stdout = result.stdout.decode("utf-8", errors="replace")
    stderr = result.stderr.decode("utf-8", errors="ignore")

    if result.returncode != 0:
        logger.error(
            "Clipboard command %s exited with %d: %s",
            command_str,
            result.returncode,
            stderr.strip(),
        )
        raise ExternalCommandError(
            command_str, stderr.strip() or f"exit status {result.returncode}"
        )

    text = _LEADING_BLANK_LINES.sub("", stdout.rstrip())
    if not text.strip():
        raise CaptureEmptyError("Clipboard is empty")
    return text


__all__ = ["read_clipboard"]
