"""Transition Typer app factory."""

from typing import Annotated

import typer

from cdmiqos.api.transition.cmd_request import cmd_request

from ._handle_stage_result import handle_stage_result


def transition() -> typer.Typer:
    """Create and configure the transition Typer app."""
    app = typer.Typer(
        name="transition",
        help="Request QoS transitions",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        path: Annotated[str | None, typer.Argument(help="Object path relative to the base directory")] = None,
        target: Annotated[str | None, typer.Argument(help="Target capability URI")] = None,
        wait: Annotated[bool, typer.Option("--wait", "-w", help="Block until the transition completes")] = False,
        timeout: Annotated[
            float | None, typer.Option("--timeout", "-t", help="Maximum seconds to wait with --wait")
        ] = None,
    ) -> None:
        """Move PATH to capability TARGET."""
        if path is None or target is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()
        handle_stage_result(cmd_request)(path, target, wait, timeout)

    return app
