"""Operator-facing output for the hook.

Everything except the no-op usage text goes to stderr, which git relays to
the pushing client prefixed with ``remote:``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from rich.console import Console

PROG = "pre-receive"

USAGE_LINES: list[str] = [
    "This is a git hook, and is not meant to run from the command line.",
    "Copy or link this script to <repo>.git/hooks/ in a bare repo and name it pre-receive.",
    "Make sure it has the execute bit set.",
]


def debug_enabled() -> bool:
    return os.getenv("RECEIVEGATE_DEBUG", "0") == "1"


def _stderr_console() -> Console:
    return Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


@dataclass
class Diagnostics:
    """Writes error, warning and debug lines for one hook run."""

    debug: bool = False
    prog: str = PROG
    console: Console = field(default_factory=_stderr_console)

    def msg(self, text: str) -> None:
        self.console.print(text, markup=False)

    def error(self, text: str) -> None:
        self.msg(f"{self.prog}: [ERROR] {text}")

    def warn(self, text: str) -> None:
        self.msg(f"{self.prog}: [WARNING] {text}")

    def trace(self, text: str) -> None:
        if self.debug:
            self.msg(f"[DEBUG] {self.prog}: {text}")

    def rejection(self, path: str) -> None:
        """Explain why a push carrying `path` was denied and how to override."""
        for line in (
            f"Error: Attempt to add a non-ascii file name: {path}",
            "",
            "This can cause problems if you want to work",
            "with people on other platforms.",
            "",
            "To be portable it is advisable to rename the file ...",
            "",
            "If you know what you are doing you can disable this",
            "check on the serverside bare repo using:",
            "",
            "git config hooks.allownonascii true",
            "",
        ):
            self.msg(line)


def print_usage(console: Console | None = None) -> None:
    out = console or Console(highlight=False, emoji=False, soft_wrap=True)
    for line in USAGE_LINES:
        out.print(line, markup=False)
