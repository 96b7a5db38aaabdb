"""Document index (UNO: single class)."""

from __future__ import annotations

import posixpath
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .normalize_target import normalize_target


def _path_segments(path: str) -> list[str]:
    """Split a relative path into segments with the file extension removed."""
    stem, _ = posixpath.splitext(path.replace("\\", "/"))
    return [seg for seg in stem.split("/") if seg and seg != "."]


@dataclass(frozen=True)
class DocumentIndex:
    """Lookup tables from normalized keys to document paths.

    ``identifiers`` maps a normalized basename to every document carrying it.
    ``paths`` maps a normalized extension-stripped path, and each of its
    right-aligned suffixes, to a document.
    """

    identifiers: Mapping[str, tuple[str, ...]]
    paths: Mapping[str, str]

    @classmethod
    def build(cls, paths: Iterable[str]) -> DocumentIndex:
        identifiers: dict[str, list[str]] = {}
        full_paths: dict[str, str] = {}
        suffixes: list[tuple[str, str]] = []

        for path in paths:
            segments = _path_segments(path)
            if not segments:
                continue
            full_paths.setdefault(normalize_target("/".join(segments)), path)
            for i in range(1, len(segments)):
                suffixes.append((normalize_target("/".join(segments[i:])), path))
            identifiers.setdefault(normalize_target(segments[-1]), []).append(path)

        # Full paths win over suffixes of deeper documents.
        by_path = dict(full_paths)
        for key, path in suffixes:
            by_path.setdefault(key, path)

        return cls(
            identifiers=MappingProxyType({key: tuple(found) for key, found in identifiers.items()}),
            paths=MappingProxyType(by_path),
        )

    def has_identifier(self, key: str) -> bool:
        return len(self.identifiers.get(key, ())) > 0

    def has_path(self, key: str) -> bool:
        return key in self.paths


def build_index(paths: Iterable[str]) -> DocumentIndex:
    """Build a DocumentIndex from relative document paths."""
    return DocumentIndex.build(paths)
