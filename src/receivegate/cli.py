"""Hook entry point: git runs this as `<repo>.git/hooks/pre-receive`."""

from __future__ import annotations

import os
import sys

import typer

from receivegate import __version__
from receivegate.config import GitConfigStore, QuotePathDisabled, load_policy
from receivegate.differ import GitRevisionDiffer
from receivegate.exec import ExecError
from receivegate.gate import UpdateGate, decode_input_lines
from receivegate.ui import Diagnostics, debug_enabled, print_usage

app = typer.Typer(
    name="receivegate",
    help="Reject pushes that add file names with non-ASCII characters.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.command()
def pre_receive(
    debug: bool = typer.Option(
        False,
        "--debug/--no-debug",
        help="Print internal state to stderr (also enabled by RECEIVEGATE_DEBUG=1).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Read `<oldrev> <newrev> <refname>` lines on stdin and accept or deny the push."""
    _ = version
    if not os.environ.get("GIT_DIR"):
        print_usage()
        raise typer.Exit(0)

    diagnostics = Diagnostics(debug=debug or debug_enabled())
    try:
        policy = load_policy(GitConfigStore())
    except QuotePathDisabled as exc:
        diagnostics.error(str(exc))
        raise typer.Exit(1) from exc
    except ExecError as exc:
        diagnostics.error(f"unable to read repository configuration: {exc}")
        raise typer.Exit(1) from exc

    gate = UpdateGate(policy, GitRevisionDiffer(diagnostics), diagnostics)
    verdict = gate.run(decode_input_lines(sys.stdin.buffer))
    raise typer.Exit(verdict.exit_code)


def main() -> None:
    app(prog_name="pre-receive")


if __name__ == "__main__":
    main()
