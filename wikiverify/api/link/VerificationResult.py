"""VerificationResult model (UNO: single model)."""

from dataclasses import dataclass, field

from .BrokenLink import BrokenLink


@dataclass
class VerificationResult:
    """Counts and unresolved links for one verification run."""

    total_files: int
    total_links: int
    workspace_path: str
    broken_links: list[BrokenLink] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.broken_links

    def links_by_source(self) -> dict[str, list[BrokenLink]]:
        """Group broken links by source file, keeping discovery order."""
        grouped: dict[str, list[BrokenLink]] = {}
        for link in self.broken_links:
            grouped.setdefault(link.source, []).append(link)
        return grouped

    def to_dict(self) -> dict[str, object]:
        return {
            "total_files": self.total_files,
            "total_links": self.total_links,
            "broken_links": [link.to_dict() for link in self.broken_links],
            "workspace_path": self.workspace_path,
        }
