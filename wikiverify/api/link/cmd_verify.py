"""Verify links API command."""

import logging
from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import LinkVerifyOutput
from ..config.WikiVerifyConfig import WikiVerifyConfig
from ..StageResult import StageResult
from ._make_resolver import _make_resolver
from ._read_document import _read_document
from .build_report import build_report
from .discover_files import discover_files, parse_extensions
from .DocumentIndex import DocumentIndex
from .parse_wikilinks import parse_wikilinks

logger = logging.getLogger(__name__)


def cmd_verify(path: str = ".", extensions: str | None = None) -> StageResult:
    """Verify every wiki link in the workspace at ``path``.

    Args:
        path: Workspace directory
        extensions: Comma-separated extensions; None uses ``scan.extensions`` from config
    """

    def _fail(result_obj: StageResult, workspace: str, ext_list: list[str], message: str) -> None:
        result_obj.output = LinkVerifyOutput(
            errors=[message],
            warnings=[],
            workspace_path=workspace,
            extensions=ext_list,
            total_files=0,
            total_links=0,
            broken_links=[],
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        workspace = Path(path).expanduser().resolve()
        try:
            config = WikiVerifyConfig.load()
        except ValueError as e:
            _fail(result_obj, str(workspace), [], str(e))
            return

        ext_list = parse_extensions(extensions) if extensions is not None else list(config.scan.extensions)
        if not ext_list:
            _fail(result_obj, str(workspace), ext_list, "No file extensions given")
            return

        yield (0.2, "Resolving workspace...")
        if not workspace.exists():
            logger.error("Workspace path does not exist: %s", workspace)
            _fail(result_obj, str(workspace), ext_list, f"Workspace path does not exist: {workspace}")
            return
        if not workspace.is_dir():
            _fail(result_obj, str(workspace), ext_list, f"Workspace path is not a directory: {workspace}")
            return

        yield (0.3, "Discovering files...")
        files = discover_files(
            workspace,
            ext_list,
            exclude_dirnames=config.scan.exclude_dirnames,
            exclude_globs=config.scan.exclude_globs,
            include_hidden=config.scan.include_hidden,
        )
        warnings: list[str] = []

        if not files:
            yield (1.0, "Complete")
            result_obj.output = LinkVerifyOutput(
                errors=[],
                warnings=warnings,
                workspace_path=str(workspace),
                extensions=ext_list,
                total_files=0,
                total_links=0,
                broken_links=[],
            ).model_dump(mode="python")
            result_obj.result = f"No files found with extensions: {', '.join(ext_list)}"
            result_obj.success = True
            return

        yield (0.5, f"Parsing {len(files)} file(s)...")
        parsed_files = [parse_wikilinks(_read_document(workspace, rel, warnings), rel) for rel in files]

        yield (0.7, "Building document index...")
        index = DocumentIndex.build(files)
        resolver = _make_resolver(index, config.resolve)

        yield (0.9, "Resolving links...")
        report = build_report(parsed_files, index, str(workspace), resolver)
        logger.info(
            "Verified %s: %d file(s), %d link(s), %d broken",
            workspace,
            report.total_files,
            report.total_links,
            len(report.broken_links),
        )

        yield (1.0, "Complete")
        result_obj.output = LinkVerifyOutput(
            errors=[],
            warnings=warnings,
            extensions=ext_list,
            **report.to_dict(),
        ).model_dump(mode="python")
        if report.is_valid:
            result_obj.result = f"All {report.total_links} wikilink(s) in {report.total_files} file(s) are valid"
        else:
            sources = len(report.links_by_source())
            result_obj.result = f"Found {len(report.broken_links)} broken link(s) in {sources} file(s)"
        result_obj.success = report.is_valid

    return StageResult(announce=f"Verifying wikilinks in {path}...", progress_callback=do_work)
