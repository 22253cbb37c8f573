"""Running child processes and collecting their exit status."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from .log import PanicError


def run_process(command: str, args: Sequence[str] = ()) -> int:
    """Run ``command`` with ``args``, wait for it, and return its exit code.

    Raises PanicError if the program cannot be started or was killed by a
    signal.
    """
    try:
        completed = subprocess.run([command, *args], check=False)
    except OSError as exc:
        raise PanicError(f"execvp failed errno: {exc.strerror}") from exc

    if completed.returncode < 0:
        raise PanicError("child possibly killed by signal.")
    return completed.returncode