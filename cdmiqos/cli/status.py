"""Status Typer app factory."""

from typing import Annotated

import typer

from cdmiqos.api.status.cmd_show import cmd_show

from ._handle_stage_result import handle_stage_result


def status() -> typer.Typer:
    """Create and configure the status Typer app."""
    app = typer.Typer(
        name="status",
        help="QoS status of stored objects",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        path: Annotated[str | None, typer.Argument(help="Object path relative to the base directory")] = None,
    ) -> None:
        """Show the capability status of PATH."""
        if path is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()
        handle_stage_result(cmd_show)(path)

    return app
