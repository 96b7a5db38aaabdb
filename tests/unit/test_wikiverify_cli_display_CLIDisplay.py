"""Tests for CLIDisplay."""

import json

import pytest
import yaml

from wikiverify.cli.display.CLIDisplay import CLIDisplay
from wikiverify.cli.display.display_context import DisplayContext, display_context


def test_status_lines_go_to_stderr(capsys):
    display = CLIDisplay(color=False)

    display.status("Announcing")
    display.success("Done")
    display.error("Failed", details="more")
    display.warning("Careful")
    display.info("Progress")

    captured = capsys.readouterr()
    assert captured.out == ""
    for text in ("Announcing", "✓ Done", "✗ Failed", "more", "⚠ Careful", "Progress"):
        assert text in captured.err


def test_json_and_yaml_output(capsys):
    display = CLIDisplay(color=False)
    data = {"b": 1, "a": ["x"]}

    display.json_output(data, format="json")
    assert json.loads(capsys.readouterr().out) == data

    display.json_output(data, format="yaml")
    out = capsys.readouterr().out
    assert yaml.safe_load(out) == data
    assert out.index("b:") < out.index("a:")


def test_markup_is_rendered_to_stdout(capsys):
    CLIDisplay(color=False).markup("[bold]Report[/bold]\n")

    assert capsys.readouterr().out == "Report\n"


def test_display_context_modes():
    assert isinstance(display_context.get_display("cli", color=False), CLIDisplay)
    with pytest.raises(ValueError, match="Unsupported display mode"):
        DisplayContext().get_display("mcp")  # type: ignore[arg-type]
