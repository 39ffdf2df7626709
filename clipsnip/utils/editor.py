from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from ..exceptions import ExternalCommandError


logger = logging.getLogger("clipsnip")


def open_in_editor(command: Sequence[str], path: Path) -> None:
    """Open ``path`` with the configured editor command."""
    cmd = [*command, str(path)]
    command_str = " ".join(cmd)
    logger.debug("Opening %s with %s", path, command_str)

    try:
        result = subprocess.run(
            cmd,
            check=False,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as exc:
        logger.error("Failed to start editor %s: %s", command_str, exc)
        raise ExternalCommandError(command_str, str(exc)) from exc

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="ignore").strip()
        logger.error("Editor %s exited with %d: %s", command_str, result.returncode, stderr)
        raise ExternalCommandError(command_str, stderr or f"exit status {result.returncode}")


__all__ = ["open_in_editor"]
