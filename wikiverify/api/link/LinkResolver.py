"""Link resolver (UNO: single class)."""

from __future__ import annotations

import posixpath
from collections.abc import Callable

from .DocumentIndex import DocumentIndex
from .ExampleLinkFilter import ExampleLinkFilter
from .normalize_target import normalize_target

PATH_PREFIXES = ("/", "./", "../")

_DEFAULT_FILTER = ExampleLinkFilter()


def is_path_link(target: str) -> bool:
    """A target starting with /, ./ or ../ is a path link; anything else is an identifier."""
    return target.startswith(PATH_PREFIXES)


def document_part(target: str) -> str:
    """The part of a target before its first ``#`` anchor, stripped."""
    return target.split("#", 1)[0].strip()


def link_kind(target: str) -> str:
    """Classify a target as a ``path`` or ``identifier`` link, ignoring any anchor."""
    return "path" if is_path_link(document_part(target)) else "identifier"


def _strip_relative_prefix(target: str) -> str:
    stripped = target
    while True:
        for prefix in ("../", "./", "/"):
            if stripped.startswith(prefix):
                stripped = stripped[len(prefix) :]
                break
        else:
            return stripped


class LinkResolver:
    """Decides whether wiki link targets resolve against a DocumentIndex."""

    def __init__(self, index: DocumentIndex, example_filter: ExampleLinkFilter | None = _DEFAULT_FILTER):
        """Initialize link resolver.

        Args:
            index: Index of the documents in the workspace
            example_filter: Filter for illustrative links, or None to check every link
        """
        self.index = index
        self.example_filter = example_filter
        self.resolvers: list[tuple[Callable[[str, str], bool], Callable[[str, str], bool]]] = [
            (self._is_empty, self._never),
            (self._is_section, self._always),
            (self._is_example, self._always),
            (self._is_path, self._resolve_path),
        ]

    def resolve(self, raw_target: str, source_path: str = "") -> bool:
        """Return True when ``raw_target`` linked from ``source_path`` resolves."""
        for predicate, resolver in self.resolvers:
            if predicate(raw_target, source_path):
                return resolver(raw_target, source_path)
        return self._resolve_identifier(raw_target, source_path)

    # Predicates
    def _is_empty(self, target: str, _source: str) -> bool:
        return "#" not in target and not target.strip()

    def _is_section(self, target: str, _source: str) -> bool:
        return "#" in target and not document_part(target)

    def _is_example(self, target: str, source: str) -> bool:
        if self.example_filter is None:
            return False
        return self.example_filter.matches(document_part(target), source)

    def _is_path(self, target: str, _source: str) -> bool:
        return is_path_link(document_part(target))

    # Resolvers
    def _always(self, _target: str, _source: str) -> bool:
        return True

    def _never(self, _target: str, _source: str) -> bool:
        return False

    def _resolve_identifier(self, target: str, _source: str) -> bool:
        key = normalize_target(document_part(target))
        if self.index.has_identifier(key):
            return True
        return "/" in key and self.index.has_path(key)

    def _resolve_path(self, target: str, source: str) -> bool:
        """Resolve /root-relative or ./, ../ source-relative paths.

        Falls back to the prefix-stripped remainder so shallow references such as
        ``../sub/note`` still match the suffix entries of the index.
        """
        document = document_part(target)
        candidates: list[str] = []
        if not document.startswith("/"):
            source_dir = posixpath.dirname(source.replace("\\", "/"))
            joined = posixpath.normpath(posixpath.join(source_dir, document))
            if joined != ".." and not joined.startswith("../"):
                candidates.append(joined)
        candidates.append(_strip_relative_prefix(document))
        return any(self.index.has_path(normalize_target(c)) for c in candidates if c and c != ".")


def resolve(index: DocumentIndex, raw_target: str, source_path: str = "") -> bool:
    """Resolve ``raw_target`` against ``index`` with the default example filter."""
    return LinkResolver(index).resolve(raw_target, source_path)
