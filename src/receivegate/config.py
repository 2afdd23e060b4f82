"""Repository configuration access for the hook."""

from __future__ import annotations

from typing import Protocol

from receivegate.exec import ExecError, run_git
from receivegate.types import PolicyConfig

ALLOW_NON_ASCII_KEY = "hooks.allownonascii"
QUOTE_PATH_KEY = "core.quotepath"


class QuotePathDisabled(RuntimeError):
    """Raised when core.quotepath is off and escaped paths cannot be detected."""

    def __init__(self) -> None:
        super().__init__(
            "core.quotepath is off, it must be on to use this hook.\n"
            'Use "git config core.quotepath on" to turn it on.'
        )


class ConfigStore(Protocol):
    """Read-only view of repository configuration."""

    def get_string(self, key: str) -> str: ...

    def get_bool(self, key: str) -> bool: ...


class GitConfigStore:
    """ConfigStore backed by `git config <key>` in the hook's repository."""

    def get_string(self, key: str) -> str:
        try:
            result = run_git(["config", key])
        except ExecError as exc:
            # exit status 1 means the key is unset
            if exc.result.returncode == 1:
                return ""
            raise
        return result.stdout_text().strip()

    def get_bool(self, key: str) -> bool:
        return self.get_string(key) == "true"


def load_policy(store: ConfigStore) -> PolicyConfig:
    """Read the policy settings once; refuse to run with quoting disabled."""
    quote_path = store.get_string(QUOTE_PATH_KEY)
    if quote_path == "off":
        raise QuotePathDisabled()
    return PolicyConfig(
        allow_non_ascii=store.get_bool(ALLOW_NON_ASCII_KEY),
        quote_path_enabled=quote_path != "off",
    )
