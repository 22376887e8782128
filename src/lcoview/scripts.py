"""Utility helpers for generating CLI documentation artefacts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

import click
from click.shell_completion import BashComplete, FishComplete, ShellComplete, ZshComplete

if TYPE_CHECKING:
    from pathlib import Path

ShellName = Literal["bash", "zsh", "fish"]

_COMPLETE_CLASSES: dict[ShellName, type[ShellComplete]] = {
    "bash": BashComplete,
    "zsh": ZshComplete,
    "fish": FishComplete,
}

_COMPLETE_VAR = "_LCOVIEW_COMPLETE"

_EXIT_STATUS = """\
0  success
1  generic error (unexpected failure)
2  line coverage below --fail-under-lines
66 LCOV input file missing
74 I/O error while reading sources or writing the report
78 page template not found
"""


def _root_command() -> click.Group:
    from lcoview.cli.root import cli  # noqa: PLC0415 - cli imports this module

    if not isinstance(cli, click.Group):  # pragma: no cover - typer always builds a group here
        msg = "lcoview CLI is expected to be a command group"
        raise TypeError(msg)
    return cli


def _collect_option_flags(command: click.Command) -> tuple[str, ...]:
    flags: list[str] = []
    for param in command.params:
        if isinstance(param, click.Option):
            flags.extend(param.opts)
            flags.extend(param.secondary_opts)
    return tuple(sorted({flag for flag in flags if flag}))


def _build_plain_command(command: click.Command) -> click.Command:
    """Return a plain Click command mirroring *command*.

    Typer commands render help through Rich straight to the console; for
    man-page generation we only need a stable, plain-text help string.
    """
    return click.Command(
        name=command.name,
        callback=command.callback,
        params=command.params,
        help=command.help,
        epilog=command.epilog,
        context_settings=command.context_settings,
    )


def build_man_page() -> str:
    """Return a plain-text manual page for :mod:`lcoview`'s CLI."""
    plain_cmd = _build_plain_command(_root_command().commands["report"])
    ctx = click.Context(plain_cmd, info_name="lcoview")
    help_text = plain_cmd.get_help(ctx).strip()
    sections = [
        "LCOVIEW(1)\n",
        "NAME\n----\nlcoview - browsable HTML coverage reports from LCOV data\n\n",
        "SYNOPSIS\n--------\nlcoview [OPTIONS] LCOV_FILE\nlcoview report [OPTIONS] LCOV_FILE\n\n",
        "DESCRIPTION\n-----------\n",
        help_text,
        "\n\nEXIT STATUS\n-----------\n",
        _EXIT_STATUS.strip(),
        "\n",
    ]
    return "".join(sections)


def write_man_page(destination: Path) -> None:
    """Write the generated manual page to *destination*."""
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(build_man_page(), encoding="utf-8")


def build_completion_script(shell: ShellName) -> str:
    """Return a shell completion script for *shell*."""
    group = _root_command()
    flags = _collect_option_flags(group.commands["report"])
    complete_cls = _COMPLETE_CLASSES[shell]
    complete = complete_cls(group, {}, "lcoview", _COMPLETE_VAR)
    script = complete.source()
    return f"# lcoview report options: {' '.join(flags)}\n{script}"


__all__ = ["ShellName", "build_completion_script", "build_man_page", "write_man_page"]
