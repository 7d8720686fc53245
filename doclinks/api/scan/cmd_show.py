"""List the links and node kinds of one document.

CLI: doclinks show <file>
"""

from collections import Counter
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from .._output_schemas.scan import ScanShowOutput
from ..config.ConfigError import ConfigError
from ..config.DoclinksConfig import DoclinksConfig
from ..link._constants import KIND_KEY
from ..link.DocumentContext import DocumentContext
from ..link.verify_document import verify_document
from ..link.walk import walk
from ..parser.parse import parse
from ..parser.ParseError import ParseError
from ..StageResult import StageResult
from .check_document import read_document
from .ReadError import ReadError


def _count_kind(counts: Counter[str], node: dict[str, Any]) -> None:
    kind = node.get(KIND_KEY)
    if isinstance(kind, str):
        counts[kind] += 1


def cmd_show(path: str) -> StageResult:
    """Parse one document and list what it links to."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        file_path = Path(path).expanduser().absolute()

        def _failed(message: str) -> None:
            result_obj.output = ScanShowOutput(
                errors=[message],
                warnings=[],
                path=str(file_path),
                links=[],
                anchors=[],
                node_kinds={},
                success=False,
            ).model_dump(mode="python")
            result_obj.result = message
            result_obj.success = False

        yield (0.2, "Loading configuration...")
        try:
            config = DoclinksConfig.load()
        except ConfigError as e:
            _failed(str(e))
            return

        yield (0.4, "Parsing document...")
        try:
            document = parse(read_document(file_path), config.parser)
        except (ReadError, ParseError) as e:
            _failed(f"Cannot parse {file_path}: {e}")
            return

        yield (0.8, "Collecting links...")
        context = DocumentContext(path=file_path, heading_anchors=config.scan.heading_anchors)
        verify_document(context, document)
        counts: Counter[str] = Counter()
        walk(document.blocks, _count_kind, counts)

        result_obj.output = ScanShowOutput(
            errors=[],
            warnings=[],
            path=str(file_path),
            links=[link.to_dict() for link in context.links],
            anchors=list(context.anchors),
            node_kinds=dict(sorted(counts.items())),
            success=True,
        ).model_dump(mode="python")
        result_obj.result = f"Found {len(context.links)} links in {file_path.name}"
        result_obj.success = True

    return StageResult(announce=f"Listing links in {path}...", progress_callback=do_work)
