"""Tests for the human-readable report."""

from rich.console import Console

from wikiverify.api.link.build_report import verify_documents
from wikiverify.cli.render_report import RULE, render_report


def _plain(markup: str) -> str:
    console = Console(width=200, no_color=True, highlight=False, emoji=False)
    with console.capture() as capture:
        console.print(markup, end="")
    return capture.get()


def test_valid_report():
    report = verify_documents([("a.md", "[[b]]"), ("b.md", "")], workspace_path="/ws")

    text = _plain(render_report(report.to_dict()))

    assert "Wikilink Verification Report" in text
    assert RULE in text
    assert "Workspace: /ws" in text
    assert "Files scanned: 2" in text
    assert "Total wikilinks: 1" in text
    assert "Broken links: 0" in text
    assert "✓ All wikilinks are valid!" in text
    assert "Broken Links:" not in text


def test_broken_report_groups_by_source():
    report = verify_documents(
        [("b.md", "[[x]] [[y|Why]]"), ("a.md", "\n[[z]]")],
        workspace_path="/ws",
    )

    text = _plain(render_report(report.to_dict()))

    assert "Broken links: 3" in text
    assert "Broken Links:" in text
    assert "✓" not in text
    lines = text.splitlines()
    b_at = lines.index("b.md:")
    a_at = lines.index("a.md:")
    assert b_at < a_at
    assert lines[b_at + 1] == "  1:1  [[x]] → x"
    assert lines[b_at + 2] == "  1:7  [[y|Why]] → y"
    assert lines[a_at + 1] == "  2:1  [[z]] → z"


def test_markup_in_paths_is_escaped():
    report = verify_documents([("[bold]odd.md", "[[missing]]")], workspace_path="/ws/[red]")

    text = _plain(render_report(report.to_dict()))

    assert "Workspace: /ws/[red]" in text
    assert "[bold]odd.md:" in text
