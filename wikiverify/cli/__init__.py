"""CLI - main entry point."""

import logging
import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from wikiverify.api.config.get_package_version import get_package_version
    from wikiverify.cli._create_app import _create_app
    from wikiverify.utils.logger import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-V" in argv:
        print(f"wikiverify {get_package_version()}")
        return 0

    try:
        configure_logging()
    except OSError as e:
        typer.echo(f"Warning: file logging disabled: {e}", err=True)
    logger = logging.getLogger("wikiverify.cli")

    app = _create_app()
    try:
        rv = app(argv, prog_name="wikiverify", standalone_mode=False)
        return rv if isinstance(rv, int) else 0
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 2
    except click.exceptions.Abort:
        typer.echo("Aborted.", err=True)
        return 1
    except Exception as e:
        logger.exception("Unhandled error")
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
