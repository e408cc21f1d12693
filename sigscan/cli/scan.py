"""Scan commands registered on the main Typer app."""

import typer

from sigscan.api.scan.cmd_remove import cmd_remove
from sigscan.api.scan.cmd_scan import cmd_scan
from sigscan.api.scan.cmd_signatures import cmd_signatures
from sigscan.api.scan.Launcher import Launcher
from sigscan.cli._handle_stage_result import handle_stage_result


def scan_command(
    ctx: typer.Context,
    path: str | None = typer.Argument(None, help="Directory to scan"),
    launcher: Launcher | None = typer.Option(None, "--launcher", "-l", help="Scan a launcher's data directory"),
    remove: bool = typer.Option(False, "--remove", help="Delete matching files after the scan"),
) -> None:
    """Scan a directory for files matching known-malicious signatures."""
    if path is None and (launcher is None or launcher is Launcher.CUSTOM):
        typer.echo(ctx.get_help(), err=True)
        raise typer.Exit(code=1)
    handle_stage_result(cmd_scan, ctx)(path, launcher.value if launcher is not None else None, remove)


def remove_command(
    ctx: typer.Context,
    paths: list[str] = typer.Argument(..., help="Files to delete"),
) -> None:
    """Delete files reported by a previous scan."""
    handle_stage_result(cmd_remove, ctx)(paths)


def signatures_command(ctx: typer.Context) -> None:
    """List the known-malicious SHA-1 signatures."""
    handle_stage_result(cmd_signatures, ctx)()
