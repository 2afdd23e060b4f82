"""Types for the pre-receive gate."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

ZERO_REVISION = "0" * 40
MASTER_REF = "refs/heads/master"

_ZERO_REVISION = re.compile(r"^0+$")


def is_zero_revision(revision: str) -> bool:
    """Return True for the all-zero sentinel git uses for a missing ref side."""
    return bool(_ZERO_REVISION.match(revision))


@dataclass(frozen=True)
class RefUpdate:
    """One `<old> <new> <ref>` record received from git."""

    old_revision: str
    new_revision: str
    ref_name: str

    @property
    def is_deletion(self) -> bool:
        return is_zero_revision(self.new_revision)

    @property
    def is_creation(self) -> bool:
        return is_zero_revision(self.old_revision)

    def diff_range(self) -> str:
        """Range handed to `git diff`; a new ref is diffed as a single revision."""
        if self.is_creation:
            return self.new_revision
        return f"{self.old_revision}..{self.new_revision}"


@dataclass(frozen=True)
class PolicyConfig:
    """Repository settings read once when the hook starts."""

    allow_non_ascii: bool
    quote_path_enabled: bool


class Verdict(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    @classmethod
    def from_rejected(cls, rejected: bool) -> "Verdict":
        return cls.REJECTED if rejected else cls.ACCEPTED

    @property
    def exit_code(self) -> int:
        return 1 if self is Verdict.REJECTED else 0
