"""Push evaluation for the non-ASCII file name hook."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import BinaryIO

from receivegate.differ import RevisionDiffer
from receivegate.policy import is_disallowed
from receivegate.types import MASTER_REF, PolicyConfig, RefUpdate, Verdict
from receivegate.ui import Diagnostics


class MalformedUpdateLine(ValueError):
    """Raised when a stdin record is not `<old> <new> <ref>`."""


def parse_update_line(line: str) -> RefUpdate:
    """Parse one record git writes to a pre-receive hook's stdin."""
    fields = line.rstrip("\r\n").split(" ")
    if len(fields) != 3 or not all(fields):
        raise MalformedUpdateLine(f"expected '<oldrev> <newrev> <refname>', got {line.rstrip()!r}")
    old_revision, new_revision, ref_name = fields
    return RefUpdate(old_revision=old_revision, new_revision=new_revision, ref_name=ref_name)


def decode_input_lines(stream: BinaryIO) -> Iterator[str]:
    """Yield stdin records as text; ref names may hold bytes that are not UTF-8."""
    for raw in stream:
        yield raw.decode("utf-8", errors="surrogateescape")


def _display_path(path: str | bytes) -> str:
    if isinstance(path, bytes):
        return path.decode("utf-8", errors="replace")
    return path


class UpdateGate:
    """Decides whether each ref update in a push is acceptable."""

    def __init__(self, policy: PolicyConfig, differ: RevisionDiffer, diagnostics: Diagnostics | None = None):
        self.policy = policy
        self.differ = differ
        self.diagnostics = diagnostics or Diagnostics()

    def evaluate(self, update: RefUpdate) -> bool:
        """Return True when `update` must be rejected."""
        log = self.diagnostics
        log.trace(
            f"check_filepath: oldrev={update.old_revision} newrev={update.new_revision} refname={update.ref_name}"
        )
        if self.policy.allow_non_ascii:
            log.trace("git config allownonascii is true")
            return False
        if update.is_deletion:
            return False
        # Initial population of the main branch is exempt.
        if update.is_creation and update.ref_name == MASTER_REF:
            return False

        for path in self.differ.list_changed_paths(update.diff_range()):
            log.trace(f"fname={_display_path(path)}")
            if is_disallowed(path):
                log.rejection(_display_path(path))
                return True
        return False

    def run(self, lines: Iterable[str]) -> Verdict:
        """Evaluate every record in order and return the final verdict.

        The verdict is overwritten by each evaluated update, so a push is
        judged by its last ref update only. Malformed lines are skipped and
        leave the verdict unchanged.
        """
        verdict = Verdict.ACCEPTED
        for line in lines:
            if not line.strip():
                continue
            try:
                update = parse_update_line(line)
            except MalformedUpdateLine as exc:
                self.diagnostics.warn(f"skipping input line: {exc}")
                continue
            verdict = Verdict.from_rejected(self.evaluate(update))
        self.diagnostics.trace(f"exit code = {verdict.exit_code}")
        return verdict
