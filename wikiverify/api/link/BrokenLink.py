"""BrokenLink model (UNO: single model)."""

from dataclasses import dataclass

from .WikiLink import WikiLink


@dataclass(frozen=True)
class BrokenLink:
    """A wiki link whose target did not resolve."""

    source: str
    target: str
    line: int
    column: int
    raw: str

    @classmethod
    def from_link(cls, source: str, link: WikiLink) -> "BrokenLink":
        return cls(source=source, target=link.target, line=link.line, column=link.column, raw=link.raw)

    def to_dict(self) -> dict[str, object]:
        return {
            "source": self.source,
            "target": self.target,
            "line": self.line,
            "column": self.column,
            "raw": self.raw,
        }
