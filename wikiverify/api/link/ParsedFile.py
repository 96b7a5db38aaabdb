"""ParsedFile model (UNO: single model)."""

from dataclasses import dataclass, field

from .WikiLink import WikiLink


@dataclass
class ParsedFile:
    """Links found in one document, in order of appearance."""

    path: str
    links: list[WikiLink] = field(default_factory=list)
