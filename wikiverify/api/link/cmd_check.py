"""Check links API command."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import LinkCheckOutput
from ..config.WikiVerifyConfig import WikiVerifyConfig
from ..StageResult import StageResult
from ._make_resolver import _make_resolver
from ._read_document import _read_document
from .discover_files import discover_files
from .DocumentIndex import DocumentIndex
from .LinkResolver import link_kind
from .parse_wikilinks import parse_wikilinks


def cmd_check(path: str, workspace: str = ".") -> StageResult:
    """List the wiki links of one file and whether each resolves within ``workspace``."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        root = Path(workspace).expanduser().resolve()
        file_path = Path(path).expanduser().resolve()

        def _fail(message: str) -> None:
            result_obj.output = LinkCheckOutput(
                errors=[message],
                warnings=[],
                path=str(path),
                workspace_path=str(root),
                links=[],
            ).model_dump(mode="python")
            result_obj.result = message
            result_obj.success = False

        try:
            config = WikiVerifyConfig.load()
        except ValueError as e:
            _fail(str(e))
            return

        yield (0.2, "Resolving path...")
        if not root.is_dir():
            _fail(f"Workspace path does not exist: {root}")
            return
        if not file_path.is_file():
            _fail(f"File not found: {path}")
            return
        try:
            rel_path = file_path.relative_to(root).as_posix()
        except ValueError:
            _fail(f"File {file_path} is outside workspace {root}")
            return

        yield (0.4, "Indexing workspace...")
        files = discover_files(
            root,
            config.scan.extensions,
            exclude_dirnames=config.scan.exclude_dirnames,
            exclude_globs=config.scan.exclude_globs,
            include_hidden=config.scan.include_hidden,
        )
        resolver = _make_resolver(DocumentIndex.build(files), config.resolve)

        yield (0.7, "Scanning for links...")
        warnings: list[str] = []
        parsed = parse_wikilinks(_read_document(root, rel_path, warnings), rel_path)

        links_out = []
        for link in parsed.links:
            entry = link.to_dict()
            entry["kind"] = link_kind(link.target)
            entry["resolved"] = resolver.resolve(link.target, rel_path)
            links_out.append(entry)

        yield (1.0, "Complete")
        broken = sum(1 for entry in links_out if not entry["resolved"])
        result_obj.output = LinkCheckOutput(
            errors=[],
            warnings=warnings,
            path=rel_path,
            workspace_path=str(root),
            links=links_out,
        ).model_dump(mode="python")
        result_obj.result = f"Found {len(links_out)} link(s) in {rel_path}, {broken} broken"
        result_obj.success = broken == 0

    return StageResult(announce=f"Checking links in {path}...", progress_callback=do_work)
