"""Aggregate parsed files into a VerificationResult."""

from collections.abc import Iterable, Sequence

from .BrokenLink import BrokenLink
from .DocumentIndex import DocumentIndex
from .ExampleLinkFilter import ExampleLinkFilter
from .LinkResolver import LinkResolver
from .parse_wikilinks import parse_wikilinks
from .ParsedFile import ParsedFile
from .VerificationResult import VerificationResult


def build_report(
    parsed_files: Sequence[ParsedFile],
    index: DocumentIndex,
    workspace_path: str = "",
    resolver: LinkResolver | None = None,
) -> VerificationResult:
    """Check every link of ``parsed_files`` against ``index``.

    Every parsed file counts toward ``total_files``, with or without links.
    Broken links keep file order, then line and column order.
    """
    resolver = resolver or LinkResolver(index)
    total_links = 0
    broken: list[BrokenLink] = []
    for parsed in parsed_files:
        for link in parsed.links:
            total_links += 1
            if not resolver.resolve(link.target, parsed.path):
                broken.append(BrokenLink.from_link(parsed.path, link))

    return VerificationResult(
        total_files=len(parsed_files),
        total_links=total_links,
        workspace_path=workspace_path,
        broken_links=broken,
    )


def verify_documents(
    documents: Iterable[tuple[str, str]],
    workspace_path: str = "",
    example_filter: ExampleLinkFilter | None = None,
    ignore_example_links: bool = True,
) -> VerificationResult:
    """Run extraction and resolution over in-memory (path, content) pairs."""
    parsed_files = [parse_wikilinks(content, path) for path, content in documents]
    index = DocumentIndex.build(parsed.path for parsed in parsed_files)
    if ignore_example_links:
        resolver = LinkResolver(index) if example_filter is None else LinkResolver(index, example_filter)
    else:
        resolver = LinkResolver(index, example_filter=None)
    return build_report(parsed_files, index, workspace_path, resolver)
