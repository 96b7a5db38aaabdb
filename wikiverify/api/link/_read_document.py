"""Read one workspace document for parsing."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def _read_document(workspace: Path, rel_path: str, warnings: list[str]) -> str:
    """Return the UTF-8 text of ``rel_path``; unreadable files yield "" and a warning."""
    try:
        return (workspace / rel_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read %s: %s", rel_path, exc)
        warnings.append(f"Cannot read {rel_path}: {exc}")
        return ""
