"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from sigscan.api.config.get_package_version import get_package_version
    from sigscan.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"sigscan {get_package_version()}")
        return 0

    app = _create_app()
    try:
        app(argv, prog_name="sigscan")
        return 0
    except typer.Exit as e:
        return e.exit_code
    except SystemExit as e:
        # Standalone mode exits after printing usage errors and command results
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
