"""Capability Typer app factory."""

from typing import Annotated

import typer

from cdmiqos.api.capability.cmd_list import cmd_list
from cdmiqos.api.capability.cmd_show import cmd_show

from ._handle_stage_result import handle_stage_result


def capability() -> typer.Typer:
    """Create and configure the capability Typer app."""
    app = typer.Typer(
        name="capability",
        help="Capability classes offered by the backend",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="list")
    def list_command() -> None:
        """List capability classes."""
        handle_stage_result(cmd_list)()

    @app.command(name="show")
    def show_command(
        uri: Annotated[str, typer.Argument(help="Capability object URI")] = "/cdmi_capabilities/",
    ) -> None:
        """Show a CDMI capability object (root, type or class)."""
        handle_stage_result(cmd_show)(uri)

    return app
