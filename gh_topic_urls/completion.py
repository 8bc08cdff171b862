"""Shell completion scripts and answers for the branch argument.

Typer's generated bash script registers ``complete -o default``, which makes
bash fall back to file names whenever no branch matches. Completion is served
with click's own classes instead, whose bash registration is
``complete -o nosort -F`` and never offers files for a plain suggestion list.

Usage from a shell rc file::

    eval "$(_GH_TOPIC_URLS_COMPLETE=bash_source gh-topic-urls)"
"""

from __future__ import annotations

import os
from typing import Mapping

import typer
from click.shell_completion import BashComplete, FishComplete, ShellComplete, ZshComplete

from .exceptions import ValidationError

PROG_NAME = "gh-topic-urls"
COMPLETE_VAR = "_GH_TOPIC_URLS_COMPLETE"

SHELLS: dict[str, type[ShellComplete]] = {
    "bash": BashComplete,
    "zsh": ZshComplete,
    "fish": FishComplete,
}


def completer(app: typer.Typer, shell: str) -> ShellComplete:
    try:
        comp_cls = SHELLS[shell]
    except KeyError as exc:
        raise ValidationError(
            f"unsupported shell for completion: {shell} (choose from {', '.join(SHELLS)})"
        ) from exc
    return comp_cls(typer.main.get_command(app), {}, PROG_NAME, COMPLETE_VAR)


def completion_request(
    app: typer.Typer, environ: Mapping[str, str] | None = None
) -> str | None:
    """Answer a ``<shell>_source`` or ``<shell>_complete`` request.

    Returns None when the completion variable is not set.
    """
    instruction = (os.environ if environ is None else environ).get(COMPLETE_VAR)
    if not instruction:
        return None

    shell, _, action = instruction.partition("_")
    comp = completer(app, shell)
    if action == "source":
        return comp.source()
    if action == "complete":
        return comp.complete()
    raise ValidationError(f"unsupported completion instruction: {instruction}")


__all__ = ["COMPLETE_VAR", "PROG_NAME", "completer", "completion_request"]
