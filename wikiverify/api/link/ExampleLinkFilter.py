"""Example link filter (UNO: single class)."""

from __future__ import annotations

import posixpath
import re
from collections.abc import Callable, Iterable

from .ExampleLinkRule import ExampleLinkRule

EXAMPLE_LINK_RULES: tuple[ExampleLinkRule, ...] = (
    ExampleLinkRule("contains", "mediawiki"),
    ExampleLinkRule("contains", "placeholder"),
    # Templated properties: [[property:value]], [[<note-name>]]
    ExampleLinkRule("regex", r"[:<]"),
    # Illustrative relative paths: [[./path/to/note]], [[../examples/note]]
    ExampleLinkRule("regex", r"^(?:\.{1,2}/)+(?:path/to|examples?)/"),
    # Math: $[[0, 1]]$, [[\alpha]]
    ExampleLinkRule("regex", r"[$\\]"),
    ExampleLinkRule("source_dir", "proposals"),
    ExampleLinkRule("source_name", "wikilinks"),
    ExampleLinkRule("source_name", "link-reference-definitions"),
    ExampleLinkRule("source_name", "note-templates"),
    ExampleLinkRule("source_name", "note-properties"),
)


class ExampleLinkFilter:
    """Recognizes illustrative links that are never expected to resolve."""

    def __init__(self, rules: Iterable[ExampleLinkRule] = EXAMPLE_LINK_RULES):
        self.rules = tuple(rules)
        self._checks: list[Callable[[str, list[str], str], bool]] = [self._compile(rule) for rule in self.rules]

    @staticmethod
    def _compile(rule: ExampleLinkRule) -> Callable[[str, list[str], str], bool]:
        pattern = rule.pattern.lower()
        if rule.kind == "contains":
            return lambda target, _dirs, _name: pattern in target.lower()
        if rule.kind == "regex":
            regex = re.compile(rule.pattern, re.IGNORECASE)
            return lambda target, _dirs, _name: regex.search(target) is not None
        if rule.kind == "source_dir":
            return lambda _target, dirs, _name: pattern in dirs
        if rule.kind == "source_name":
            return lambda _target, _dirs, name: name == pattern
        raise ValueError(f"Unknown example link rule kind: {rule.kind}")

    def matches(self, target: str, source_path: str = "") -> bool:
        """Return True when ``target`` (linked from ``source_path``) is an example link."""
        source = source_path.replace("\\", "/")
        dirs = [seg.lower() for seg in posixpath.dirname(source).split("/") if seg]
        name = posixpath.splitext(posixpath.basename(source))[0].lower()
        return any(check(target, dirs, name) for check in self._checks)
