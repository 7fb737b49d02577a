"""Create the txt2link Typer CLI app."""

import typer

from txt2link.api.convert.cmd_convert import cmd_convert
from txt2link.api.convert.ConvertConfig import DEFAULT_MAX_LEN, ConvertConfig
from txt2link.display.CLIDisplay import CLIDisplay
from txt2link.utils.configure_logging import LOG_LEVELS, configure_logging
from txt2link.utils.get_package_version import get_package_version


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"txt2link {get_package_version()}")
        raise typer.Exit()


def _create_app() -> typer.Typer:
    """Create and configure the txt2link Typer app."""
    app = typer.Typer(
        name="txt2link",
        help="Simple program to convert text file into symlink from its content.",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        add_completion=False,
        context_settings={"help_option_names": ["-h", "--help"]},
    )

    @app.command()
    def convert(
        path: str = typer.Argument(..., help="Path to a file or dir"),
        recursive: bool = typer.Option(
            False, "--recursive", "-r", help="Walk through content of the directory recursively"
        ),
        silent: bool = typer.Option(False, "--silent", "-s", help="Do not print conversions"),
        interactive: bool = typer.Option(False, "--interactive", "-i", help="Prompt before each conversion"),
        max_len: int = typer.Option(
            DEFAULT_MAX_LEN, "--len", "-l", min=0, help="Maximum file length to be considered as possible link"
        ),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Explain what is being done"),
        log_level: str = typer.Option("WARNING", "--log-level", help=f"Diagnostic log level: {', '.join(LOG_LEVELS)}"),
        version: bool = typer.Option(
            False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
        ),
    ) -> None:
        """Convert text files whose whole content is an existing path into symlinks."""
        if silent and verbose:
            raise typer.BadParameter("cannot be used together with '--silent'", param_hint="'--verbose'")
        if log_level.upper() not in LOG_LEVELS:
            raise typer.BadParameter(f"must be one of {', '.join(LOG_LEVELS)}", param_hint="'--log-level'")

        configure_logging(log_level)
        config = ConvertConfig(
            path=path,
            recursive=recursive,
            silent=silent,
            interactive=interactive,
            max_len=max_len,
            verbose=verbose,
        )
        cmd_convert(config, CLIDisplay())

    return app
