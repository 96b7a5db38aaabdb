"""Normalize a wiki link target into an index key."""

import re

# Repeated suffixes are stripped together so normalization stays idempotent.
_EXTENSION_RE = re.compile(r"(?:\.mdx?)+\Z", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_target(target: str) -> str:
    """Strip a trailing .md/.mdx, lowercase, and turn whitespace runs into hyphens.

    Directory separators are kept as-is, e.g. ``Docs/My Note.md`` -> ``docs/my-note``.
    """
    without_ext = _EXTENSION_RE.sub("", target)
    return _WHITESPACE_RE.sub("-", without_ext.lower())
