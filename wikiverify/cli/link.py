"""Link Typer app factory."""

import typer

from wikiverify.api.link.cmd_check import cmd_check
from wikiverify.cli._handle_stage_result import _handle_stage_result
from wikiverify.cli.verify_links import verify_links


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Inspect and verify wikilinks",
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

    @app.command(name="check")
    def check_cmd(
        path: str = typer.Argument(..., help="Path to the file to check"),
        workspace: str = typer.Option(".", "--workspace", "-w", help="Workspace used to resolve targets"),
    ) -> None:
        """List the wikilinks of one file and whether each resolves."""
        _handle_stage_result(cmd_check)(path=path, workspace=workspace)

    app.command(name="verify")(verify_links)

    return app
