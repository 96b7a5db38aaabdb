"""Tests for LinkResolver."""

import pytest

from wikiverify.api.link.DocumentIndex import DocumentIndex
from wikiverify.api.link.LinkResolver import LinkResolver, document_part, is_path_link, link_kind, resolve
from wikiverify.api.link.normalize_target import normalize_target


@pytest.fixture
def resolver() -> LinkResolver:
    index = DocumentIndex.build(["docs/sub/note.md", "My Page.md", "guides/setup.mdx"])
    return LinkResolver(index)


@pytest.mark.parametrize("target", ["note", "My Page", "my-page", "MY PAGE.md", "setup", "setup.mdx"])
def test_identifiers_resolve_by_basename(resolver, target):
    assert resolver.resolve(target, "index.md")


def test_unknown_identifier_is_broken(resolver):
    assert not resolver.resolve("missing", "index.md")


def test_identifiers_with_slashes_use_path_map(resolver):
    assert resolver.resolve("docs/sub/note", "index.md")
    assert resolver.resolve("sub/note", "index.md")
    assert resolver.resolve("Docs/Sub/Note.md", "index.md")
    assert not resolver.resolve("docs/note", "index.md")


def test_section_links_always_resolve():
    empty = LinkResolver(DocumentIndex.build([]))

    assert empty.resolve("#section", "a.md")
    assert empty.resolve("  #section", "a.md")


def test_anchor_is_ignored_for_document_lookup(resolver):
    assert resolver.resolve("note#Heading", "index.md")
    assert resolver.resolve("My Page #Intro", "index.md")
    assert not resolver.resolve("missing#Heading", "index.md")


def test_empty_target_is_broken(resolver):
    assert not resolver.resolve("", "index.md")


def test_root_relative_path(resolver):
    assert resolver.resolve("/docs/sub/note", "index.md")
    assert resolver.resolve("/docs/sub/note.md", "index.md")
    assert not resolver.resolve("/docs/missing", "index.md")


def test_source_relative_paths(resolver):
    assert resolver.resolve("./note", "docs/sub/index.md")
    assert resolver.resolve("../sub/note", "docs/other/a.md")
    assert resolver.resolve("./sub/note", "docs/readme.md")
    assert not resolver.resolve("./missing", "docs/sub/index.md")


def test_relative_path_falls_back_to_suffix_match(resolver):
    assert resolver.resolve("../../setup", "guides/a.md")
    assert resolver.resolve("./sub/note", "elsewhere/x.md")


def test_bare_prefix_does_not_resolve(resolver):
    assert not resolver.resolve("./", "a.md")
    assert not resolver.resolve("/", "a.md")


@pytest.mark.parametrize(
    "target",
    ["placeholder", "MediaWiki links", "property:value", "<note-name>", "./path/to/note", "$x$", "\\alpha"],
)
def test_example_links_resolve(resolver, target):
    assert resolver.resolve(target, "index.md")


def test_links_in_proposals_resolve(resolver):
    assert resolver.resolve("not-a-real-note", "docs/proposals/idea.md")
    assert not resolver.resolve("not-a-real-note", "docs/ideas/idea.md")


def test_example_filter_can_be_disabled():
    strict = LinkResolver(DocumentIndex.build(["a.md"]), example_filter=None)

    assert not strict.resolve("placeholder", "a.md")
    assert not strict.resolve("anything", "proposals/p.md")
    assert strict.resolve("#section", "a.md")


def test_module_level_resolve():
    index = DocumentIndex.build(["notes/alpha.md"])

    assert resolve(index, "alpha")
    assert not resolve(index, "beta")


@pytest.mark.parametrize(
    ("target", "expected"),
    [("/abs", True), ("./rel", True), ("../up", True), ("name", False), ("dir/name", False), (".hidden", False)],
)
def test_is_path_link(target, expected):
    assert is_path_link(target) is expected


def test_normalized_path_of_indexed_file_never_broken():
    paths = ["a/b/Cool Doc.md", "x.mdx", "deep/er/path/Note Name.md", "Top.md"]
    resolver = LinkResolver(DocumentIndex.build(paths), example_filter=None)

    for path in paths:
        stem = path.rsplit(".", 1)[0]
        assert resolver.resolve(normalize_target(stem), "somewhere/else.md"), path


@pytest.mark.parametrize(
    ("target", "expected"),
    [
        ("./docs/faq#Intro", "path"),
        ("/abs#x", "path"),
        ("note#./not-a-path", "identifier"),
        ("#./local", "identifier"),
        ("dir/name", "identifier"),
    ],
)
def test_link_kind_ignores_anchor(target, expected):
    assert link_kind(target) == expected


def test_document_part():
    assert document_part(" note # Heading ") == "note"
    assert document_part("#only") == ""
    assert document_part("a#b#c") == "a"
