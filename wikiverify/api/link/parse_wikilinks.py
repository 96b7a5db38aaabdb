"""Wiki link extraction.

Scans each line left to right for ``[[target]]`` and ``[[target|alias]]``
spans. The scanner behaves like the pattern ``\\[\\[([^\\]|]+)(\\|([^\\]]+))?\\]\\]``
applied with non-overlapping matches:

- the target runs up to the first ``]`` or ``|`` and must be non-empty,
- the alias runs up to the first ``]`` and must be non-empty,
- the span must then close with ``]]``.

Bracket pairs do not nest, so ``[[not [nested] valid]]`` is not a link. A failed
candidate resumes scanning one character after its opening bracket.
"""

from collections.abc import Iterator

from .ParsedFile import ParsedFile
from .WikiLink import WikiLink

OPEN = "[["
CLOSE = "]]"
PIPE = "|"


def _match_at(line: str, start: int) -> tuple[int, str, str | None] | None:
    """Try to read one wiki link whose ``[[`` sits at ``start``.

    Returns (end offset, raw target, raw alias) or None when the span is not a link.
    """
    length = len(line)
    pos = start + len(OPEN)

    target_start = pos
    while pos < length and line[pos] not in "]|":
        pos += 1
    if pos == target_start:
        return None
    target = line[target_start:pos]

    alias = None
    if pos < length and line[pos] == PIPE:
        alias_start = pos + 1
        pos = alias_start
        while pos < length and line[pos] != "]":
            pos += 1
        if pos == alias_start:
            return None
        alias = line[alias_start:pos]

    if not line.startswith(CLOSE, pos):
        return None
    return pos + len(CLOSE), target, alias


def _scan_line(line: str, line_number: int) -> Iterator[WikiLink]:
    pos = 0
    while True:
        start = line.find(OPEN, pos)
        if start < 0:
            return
        match = _match_at(line, start)
        if match is None:
            pos = start + 1
            continue

        end, target, alias = match
        alias = alias.strip() if alias is not None else None
        yield WikiLink(
            raw=line[start:end],
            target=target.strip(),
            alias=alias or None,
            line=line_number,
            column=start + 1,
        )
        pos = end


def extract(content: str) -> list[WikiLink]:
    """Extract wiki links from ``content`` ordered by (line, column)."""
    links: list[WikiLink] = []
    if not content:
        return links
    for line_number, line in enumerate(content.split("\n"), start=1):
        links.extend(_scan_line(line, line_number))
    return links


def parse_wikilinks(content: str, file_path: str = "") -> ParsedFile:
    """Parse ``content`` into a ParsedFile for ``file_path``."""
    return ParsedFile(path=file_path, links=extract(content))
