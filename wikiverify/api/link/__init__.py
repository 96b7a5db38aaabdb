"""Link API domain: wiki link extraction and resolution."""

from .BrokenLink import BrokenLink
from .build_report import build_report, verify_documents
from .DocumentIndex import DocumentIndex, build_index
from .ExampleLinkFilter import EXAMPLE_LINK_RULES, ExampleLinkFilter
from .ExampleLinkRule import ExampleLinkRule
from .LinkResolver import LinkResolver, document_part, is_path_link, link_kind, resolve
from .normalize_target import normalize_target
from .parse_wikilinks import extract, parse_wikilinks
from .ParsedFile import ParsedFile
from .VerificationResult import VerificationResult
from .WikiLink import WikiLink

__all__ = [
    "EXAMPLE_LINK_RULES",
    "BrokenLink",
    "DocumentIndex",
    "ExampleLinkFilter",
    "ExampleLinkRule",
    "LinkResolver",
    "ParsedFile",
    "VerificationResult",
    "WikiLink",
    "build_index",
    "build_report",
    "document_part",
    "extract",
    "is_path_link",
    "link_kind",
    "normalize_target",
    "parse_wikilinks",
    "resolve",
    "verify_documents",
]
