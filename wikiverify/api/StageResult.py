"""StageResult dataclass for the announce/progress/result/output command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result from a ``cmd_*`` function.

    ``progress_callback`` is a generator that yields (fraction, message) pairs and
    fills in ``result``, ``output`` and ``success`` before it finishes.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
