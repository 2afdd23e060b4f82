"""Command runners for hook git calls."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass


@dataclass(frozen=True)
class ExecResult:
    """Result envelope for subprocess execution.

    Output is kept as raw bytes so callers can scan path names without
    decoding them first.
    """

    argv: tuple[str, ...]
    returncode: int
    stdout: bytes
    stderr: bytes

    def stdout_text(self) -> str:
        return self.stdout.decode("utf-8", errors="surrogateescape")

    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="surrogateescape")


class ExecError(RuntimeError):
    """Raised when a command returns non-zero."""

    def __init__(self, result: ExecResult):
        rendered = " ".join(result.argv)
        detail = (result.stderr_text() or result.stdout_text()).strip()
        super().__init__(f"command failed ({result.returncode}): {rendered}\n{detail}")
        self.result = result


def run_command(argv: list[str]) -> ExecResult:
    """Run command in the current directory; raise ExecError on non-zero exit."""
    try:
        completed = subprocess.run(argv, capture_output=True, check=False)
    except OSError as exc:
        result = ExecResult(argv=tuple(argv), returncode=127, stdout=b"", stderr=str(exc).encode())
        raise ExecError(result) from exc
    result = ExecResult(
        argv=tuple(argv),
        returncode=completed.returncode,
        stdout=completed.stdout,
        stderr=completed.stderr,
    )
    if result.returncode != 0:
        raise ExecError(result)
    return result


def run_git(args: list[str]) -> ExecResult:
    """Run git command; inside a hook git resolves the repository from GIT_DIR."""
    return run_command(["git", *args])
