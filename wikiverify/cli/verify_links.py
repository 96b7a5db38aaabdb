"""verify-links command."""

import typer
from rich.markup import escape

from wikiverify.api.link.cmd_verify import cmd_verify
from wikiverify.cli._handle_stage_result import _handle_stage_result
from wikiverify.cli.display.display_context import display_context
from wikiverify.cli.render_report import render_report


def verify_links(
    path: str = typer.Option(".", "--path", "-p", help="Path to the workspace directory"),
    extensions: str | None = typer.Option(
        None, "--extensions", "-e", help="File extensions to check (comma-separated, default: md,mdx)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output results as JSON"),
    color: bool = typer.Option(True, "--color/--no-color", help="Enable or disable colored output"),
) -> None:
    """Verify wikilinks in a workspace; exits 1 when any link is broken."""

    def print_result(output: dict) -> None:
        display = display_context.get_display("cli", color=color)
        if json_output:
            display.json_output(output, format="json")
            return
        if output["errors"]:
            return
        if output["total_files"] == 0:
            extensions_text = escape(", ".join(output["extensions"]))
            display.markup(f"[yellow]No files found with extensions: {extensions_text}[/yellow]\n")
            return
        display.markup(render_report(output))

    _handle_stage_result(cmd_verify, result_printer=print_result, color=color)(path=path, extensions=extensions)
