"""Subprocess helpers bounded by a shared deadline."""

from __future__ import annotations

import logging
import shutil
import subprocess
import tempfile
import time
from dataclasses import dataclass, field
from typing import Sequence

from .exceptions import CommandTimeout, MissingBinary, QueryFailed

logger = logging.getLogger(__name__)


@dataclass
class Deadline:
    """Single time budget shared by every process of one run."""

    seconds: float
    started: float = field(default_factory=time.monotonic)

    def remaining(self) -> float:
        left = self.seconds - (time.monotonic() - self.started)
        if left <= 0:
            raise CommandTimeout(f"Timed out after {self.seconds:g}s")
        return left


def require_binary(name: str) -> None:
    if shutil.which(name) is None:
        raise MissingBinary(name)


def run_command(
    command: Sequence[str],
    *,
    deadline: Deadline,
    input_text: str | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command with captured text output. The caller inspects the exit code."""

    cmd = list(command)
    logger.debug("Running command: %s", " ".join(cmd))
    try:
        return subprocess.run(
            cmd,
            input=input_text,
            capture_output=True,
            text=True,
            check=False,
            timeout=deadline.remaining(),
        )
    except FileNotFoundError as exc:
        raise MissingBinary(cmd[0]) from exc
    except subprocess.TimeoutExpired as exc:
        # subprocess.run has already killed the child
        raise CommandTimeout(f"Timed out after {deadline.seconds:g}s: {' '.join(cmd)}") from exc


def run_pipeline(
    producer: Sequence[str],
    consumer: Sequence[str],
    *,
    deadline: Deadline,
) -> str:
    """Pipe ``producer`` into ``consumer`` and return the consumer's stdout.

    Both processes are waited on before the output counts as final, and both
    are killed if anything goes wrong on the way. A producer failure wins
    over a consumer failure since the consumer usually fails as a result.
    """

    producer_cmd, consumer_cmd = list(producer), list(consumer)
    logger.debug("Running command: %s | %s", " ".join(producer_cmd), " ".join(consumer_cmd))

    # stderr of the producer goes to a file so it can never fill a pipe and stall
    with tempfile.TemporaryFile(mode="w+") as producer_err:
        try:
            first = subprocess.Popen(
                producer_cmd,
                stdout=subprocess.PIPE,
                stderr=producer_err,
                text=True,
            )
        except FileNotFoundError as exc:
            raise MissingBinary(producer_cmd[0]) from exc

        second: subprocess.Popen[str] | None = None
        try:
            try:
                second = subprocess.Popen(
                    consumer_cmd,
                    stdin=first.stdout,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.PIPE,
                    text=True,
                )
            except FileNotFoundError as exc:
                raise MissingBinary(consumer_cmd[0]) from exc
            # the consumer owns the read end now
            if first.stdout is not None:
                first.stdout.close()

            try:
                output, consumer_err = second.communicate(timeout=deadline.remaining())
                first.wait(timeout=deadline.remaining())
            except subprocess.TimeoutExpired as exc:
                raise CommandTimeout(
                    f"Timed out after {deadline.seconds:g}s: "
                    f"{' '.join(producer_cmd)} | {' '.join(consumer_cmd)}"
                ) from exc
        finally:
            for proc in (first, second):
                if proc is not None and proc.poll() is None:
                    proc.kill()
                    proc.wait()
            if first.stdout is not None and not first.stdout.closed:
                first.stdout.close()

        if first.returncode != 0:
            producer_err.seek(0)
            raise QueryFailed(
                _failure_message(producer_cmd[0], first.returncode, producer_err.read())
            )
        if second.returncode != 0:
            raise QueryFailed(_failure_message(consumer_cmd[0], second.returncode, consumer_err))
    return output


def _failure_message(name: str, returncode: int, stderr: str | None) -> str:
    message = f"{name} exited with status {returncode}"
    lines = (stderr or "").strip().splitlines()
    if lines:
        message = f"{message}: {lines[-1]}"
    return message


__all__ = ["Deadline", "require_binary", "run_command", "run_pipeline"]
