"""Find the documents to verify inside a workspace."""

import fnmatch
import logging
import os
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDE_DIRNAMES = ("node_modules", ".git")


def parse_extensions(extensions: str | Iterable[str]) -> list[str]:
    """Turn ``"md, .mdx"`` (or a list) into ``["md", "mdx"]``, dropping blanks and repeats."""
    items = extensions.split(",") if isinstance(extensions, str) else list(extensions)
    parsed: list[str] = []
    for item in items:
        ext = item.strip().lstrip(".")
        if ext and ext not in parsed:
            parsed.append(ext)
    return parsed


def _excluded_by_glob(globs: list[str], rel_path: PurePosixPath) -> bool:
    # A pattern may name the whole relative path or just the file name.
    return any(fnmatch.fnmatchcase(rel_path.as_posix(), g) or fnmatch.fnmatchcase(rel_path.name, g) for g in globs)


def discover_files(
    workspace: Path,
    extensions: str | Iterable[str],
    exclude_dirnames: Iterable[str] = DEFAULT_EXCLUDE_DIRNAMES,
    exclude_globs: list[str] | None = None,
    include_hidden: bool = False,
) -> list[str]:
    """List documents under ``workspace`` as relative POSIX paths.

    Files are grouped by extension in the requested order and sorted within each
    group. Directories named in ``exclude_dirnames`` are skipped at any depth.
    Dot-directories and dot-files are skipped unless ``include_hidden`` is set.
    """
    excluded = {name for name in exclude_dirnames if name}
    globs = [g.strip() for g in exclude_globs or [] if g and g.strip()]
    suffixes = [f".{ext}" for ext in parse_extensions(extensions)]

    candidates: dict[str, list[str]] = {suffix: [] for suffix in suffixes}
    for dirpath, dirnames, filenames in os.walk(workspace):
        dirnames[:] = [d for d in dirnames if d not in excluded and (include_hidden or not d.startswith("."))]
        rel_dir = PurePosixPath(Path(dirpath).relative_to(workspace).as_posix())
        for filename in filenames:
            if filename.startswith(".") and not include_hidden:
                continue
            suffix = next((s for s in suffixes if filename.endswith(s)), None)
            if suffix is None:
                continue
            rel_path = rel_dir / filename
            if _excluded_by_glob(globs, rel_path):
                logger.debug("Excluded by glob: %s", rel_path)
                continue
            candidates[suffix].append(rel_path.as_posix())

    files: list[str] = []
    for suffix in suffixes:
        files.extend(sorted(candidates[suffix]))
    logger.info("Discovered %d file(s) under %s", len(files), workspace)
    return files
