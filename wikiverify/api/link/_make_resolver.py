"""Build a LinkResolver from configuration."""

from ..config.ResolveConfig import ResolveConfig
from .DocumentIndex import DocumentIndex
from .LinkResolver import LinkResolver


def _make_resolver(index: DocumentIndex, resolve_cfg: ResolveConfig) -> LinkResolver:
    if resolve_cfg.ignore_example_links:
        return LinkResolver(index)
    return LinkResolver(index, example_filter=None)
