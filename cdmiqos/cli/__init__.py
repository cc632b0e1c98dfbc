"""CLI - main entry point."""

import sys


def _configure_logging() -> None:
    from cdmiqos.api.backend.BackendError import ConfigurationError
    from cdmiqos.api.config.get_home_dir import get_home_dir
    from cdmiqos.api.config.QosConfig import QosConfig
    from cdmiqos.api.log.configure_logging import configure_logging

    try:
        level = QosConfig.load().log.level
    except ConfigurationError:
        level = "INFO"
    configure_logging(get_home_dir(), level)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from cdmiqos import __version__

    from ._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"qosc {__version__}")
        return 0

    _configure_logging()

    app = _create_app()
    try:
        exit_code = app(argv, standalone_mode=False)
        return exit_code if isinstance(exit_code, int) else 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
