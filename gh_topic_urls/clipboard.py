"""Copy text to the system clipboard via the platform helper."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys

from .exceptions import CommandTimeout
from .process import Deadline

logger = logging.getLogger(__name__)

LINUX_HELPERS = (
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
)


def clipboard_commands(platform: str | None = None) -> list[list[str]]:
    platform = platform or sys.platform
    if platform == "darwin":
        return [["pbcopy"]]
    if platform.startswith("win"):
        return [["clip"]]
    return [list(cmd) for cmd in LINUX_HELPERS]


def copy_to_clipboard(text: str, *, deadline: Deadline) -> bool:
    """Return True once a helper accepted ``text``.

    The helper shares the run's deadline and is killed when it expires.
    Its output is not captured: ``xclip`` and ``wl-copy`` leave a child
    behind that keeps any inherited pipe open.
    """
    for cmd in clipboard_commands():
        if shutil.which(cmd[0]) is None:
            continue
        logger.debug("Running command: %s", " ".join(cmd))
        try:
            subprocess.run(cmd, input=text, text=True, check=True, timeout=deadline.remaining())
            return True
        except subprocess.CalledProcessError as exc:
            logger.debug("%s failed with exit code %s", cmd[0], exc.returncode)
        except subprocess.TimeoutExpired as exc:
            raise CommandTimeout(
                f"Timed out after {deadline.seconds:g}s: {' '.join(cmd)}"
            ) from exc
    return False


__all__ = ["copy_to_clipboard", "clipboard_commands"]
