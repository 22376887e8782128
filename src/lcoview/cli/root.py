from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

import typer
from typer.core import TyperGroup
from typer.main import get_command

from lcoview import __version__
from lcoview.cli import completion, man, report

if TYPE_CHECKING:
    import click

DEFAULT_COMMAND = "report"


class ReportByDefaultGroup(TyperGroup):
    """Command group that runs ``report`` when no sub-command is named.

    ``lcoview lcov.info -q`` is handled as ``lcoview report lcov.info -q``;
    sub-commands and the group's own options keep their usual meaning.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        own_options = {opt for param in self.get_params(ctx) for opt in (*param.opts, *param.secondary_opts)}
        if args and args[0] not in self.commands and args[0] not in own_options:
            args = [DEFAULT_COMMAND, *args]
        return super().parse_args(ctx, args)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"lcoview {__version__}")
        raise typer.Exit


def create_app() -> typer.Typer:
    app = typer.Typer(
        cls=ReportByDefaultGroup,
        help="Browsable HTML coverage reports from LCOV tracefiles.",
    )

    @app.callback()
    def _root(
        *,
        version: Annotated[
            bool,
            typer.Option("--version", help="Show version and exit", callback=_version_callback, is_eager=True),
        ] = False,
    ) -> None:
        pass

    report.register(app)
    completion.register(app)
    man.register(app)

    return app


def main() -> None:
    app = create_app()
    get_command(app)()


# Click-compatible object for tooling that imports it
cli = get_command(create_app())

__all__ = ["DEFAULT_COMMAND", "ReportByDefaultGroup", "cli", "create_app", "main"]
