"""Tests for discover_files and parse_extensions."""

import pytest

from wikiverify.api.link.discover_files import discover_files, parse_extensions


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("md,mdx", ["md", "mdx"]),
        (" md , .mdx ", ["md", "mdx"]),
        ("md,,md", ["md"]),
        ("", []),
        (["txt", ".md", ""], ["txt", "md"]),
    ],
)
def test_parse_extensions(value, expected):
    assert parse_extensions(value) == expected


def test_groups_by_extension_then_sorted(make_workspace):
    ws = make_workspace(
        {
            "b.md": "",
            "a.mdx": "",
            "sub/c.md": "",
            "a.md": "",
            "notes.txt": "",
        }
    )

    assert discover_files(ws, ["md", "mdx"]) == ["a.md", "b.md", "sub/c.md", "a.mdx"]
    assert discover_files(ws, "mdx,md") == ["a.mdx", "a.md", "b.md", "sub/c.md"]
    assert discover_files(ws, "txt") == ["notes.txt"]


def test_excluded_directories_at_any_depth(make_workspace):
    ws = make_workspace(
        {
            "keep.md": "",
            "node_modules/pkg/readme.md": "",
            "docs/node_modules/x.md": "",
            "docs/build/out.md": "",
        }
    )

    assert discover_files(ws, "md") == ["docs/build/out.md", "keep.md"]
    assert discover_files(ws, "md", exclude_dirnames=["build", "node_modules"]) == ["keep.md"]


def test_hidden_entries_skipped_by_default(make_workspace):
    ws = make_workspace({".hidden.md": "", ".obsidian/a.md": "", "visible.md": ""})

    assert discover_files(ws, "md") == ["visible.md"]
    assert discover_files(ws, "md", include_hidden=True) == [".hidden.md", ".obsidian/a.md", "visible.md"]


def test_git_directory_excluded_even_with_hidden(make_workspace):
    ws = make_workspace({".git/notes.md": "", "a.md": ""})

    assert discover_files(ws, "md", include_hidden=True) == ["a.md"]


def test_exclude_globs(make_workspace):
    ws = make_workspace({"a.md": "", "drafts/b.md": "", "c.draft.md": ""})

    assert discover_files(ws, "md", exclude_globs=["drafts/*", "*.draft.md"]) == ["a.md"]
    assert discover_files(ws, "md", exclude_globs=["", "  "]) == ["a.md", "c.draft.md", "drafts/b.md"]


def test_empty_workspace(make_workspace):
    assert discover_files(make_workspace({}), "md") == []

