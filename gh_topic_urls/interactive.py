"""Interactive prompt helpers built on InquirerPy."""

from __future__ import annotations

import sys
from typing import Sequence

from InquirerPy import inquirer

from .exceptions import SelectionCancelled, ValidationError

VISIBLE_ROWS = 10


def _ensure_tty() -> None:
    if not sys.stdin.isatty():
        raise ValidationError(
            "Interactive mode requires a TTY. Pass a branch name to run non-interactively."
        )


def prompt_branch(branches: Sequence[str]) -> str:
    _ensure_tty()
    try:
        selection = inquirer.select(
            message="Select branch",
            choices=list(branches),
            max_height=VISIBLE_ROWS,
            qmark="›",
        ).execute()
    except KeyboardInterrupt as exc:
        raise SelectionCancelled("branch selection cancelled") from exc
    if not selection:
        raise SelectionCancelled("branch selection cancelled")
    return str(selection)


__all__ = ["prompt_branch"]
