"""ExampleLinkRule model (UNO: single model)."""

from dataclasses import dataclass
from typing import Literal

RuleKind = Literal["contains", "regex", "source_dir", "source_name"]


@dataclass(frozen=True)
class ExampleLinkRule:
    """One entry of the illustrative-link allow-list.

    kind:
        contains    -- target contains ``pattern`` (case-insensitive)
        regex       -- ``pattern`` is searched in the target (case-insensitive)
        source_dir  -- a directory of the source file is named ``pattern``
        source_name -- the source file's name without extension is ``pattern``
    """

    kind: RuleKind
    pattern: str
