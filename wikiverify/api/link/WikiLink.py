"""WikiLink model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WikiLink:
    """A parsed wiki link occurrence from markdown."""

    raw: str
    target: str
    alias: str | None
    line: int
    column: int

    def to_dict(self) -> dict[str, object]:
        return {
            "raw": self.raw,
            "target": self.target,
            "alias": self.alias,
            "line": self.line,
            "column": self.column,
        }
