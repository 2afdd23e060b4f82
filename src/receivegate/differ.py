"""Changed-path lookup between two revisions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from receivegate.exec import ExecError, run_git

if TYPE_CHECKING:
    from receivegate.ui import Diagnostics


class RevisionDiffer(Protocol):
    def list_changed_paths(self, range_spec: str) -> list[bytes]: ...


class GitRevisionDiffer:
    """RevisionDiffer backed by `git diff --name-only`.

    Paths come back as raw bytes exactly as git prints them, so with
    core.quotepath on a name like ``é.txt`` arrives as ``"\\303\\251.txt"``.
    A failing diff yields no paths.
    """

    def __init__(self, diagnostics: Diagnostics | None = None):
        self.diagnostics = diagnostics

    def list_changed_paths(self, range_spec: str) -> list[bytes]:
        args = ["diff", "--name-only", range_spec]
        if self.diagnostics is not None:
            self.diagnostics.trace(f"git {' '.join(args)}")
        try:
            result = run_git(args)
        except ExecError as exc:
            if self.diagnostics is not None:
                self.diagnostics.trace(f"diff failed, treating as no changes: {exc}")
            return []
        return [line for line in result.stdout.split(b"\n") if line]
