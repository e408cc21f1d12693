"""Create the main Typer CLI app."""

import typer

from sigscan.api.config.SigscanConfig import SigscanConfig
from sigscan.cli.scan import remove_command, scan_command, signatures_command
from sigscan.utils.logger import configure_logging


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Scan directories for known-malicious files",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.command(name="scan")(scan_command)
    app.command(name="remove")(remove_command)
    app.command(name="signatures")(signatures_command)

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        # Store display format in context for use by commands
        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

        try:
            level = SigscanConfig.load().log.level
        except ValueError:
            # Reported by the command itself
            level = "INFO"
        configure_logging(SigscanConfig.get_home_dir(), level=level)

    return app
