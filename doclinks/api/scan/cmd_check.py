"""Scan a directory tree for broken documentation links.

CLI: doclinks check <directory>
"""

import sys
from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.scan import ScanCheckOutput
from ..config.ConfigError import ConfigError
from ..config.DoclinksConfig import DoclinksConfig
from ..StageResult import StageResult
from .DiagnosticSink import DiagnosticSink
from .scan_tree import scan_tree
from .UsageError import UsageError
from .validate_root import validate_root


def cmd_check(path: str, sink: DiagnosticSink | None = None) -> StageResult:
    """Check every document below ``path``.

    Args:
        path: Directory to scan
        sink: Receives a ``Processing <path>`` line before each document and
            one ``<path>: <finding>`` line per broken link or processing
            error; defaults to stderr
    """
    if sink is None:
        sink = sys.stderr

    def _failed(result_obj: StageResult, message: str) -> None:
        result_obj.output = ScanCheckOutput(
            errors=[message],
            warnings=[],
            root=path,
            files_scanned=0,
            files_failed=0,
            directories_failed=0,
            links_checked=0,
            broken_count=0,
            diagnostics=[],
            success=False,
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.05, "Checking scan root...")
        try:
            root = validate_root(path)
        except UsageError as e:
            _failed(result_obj, str(e))
            return

        yield (0.1, "Loading configuration...")
        try:
            config = DoclinksConfig.load()
        except ConfigError as e:
            _failed(result_obj, str(e))
            return

        def _announce(document: Path) -> None:
            sink.write(f"Processing {document}\n")

        files_scanned = 0
        directories_failed = 0
        links_checked = 0
        errors: list[str] = []
        diagnostics: list[dict] = []
        for report in scan_tree(root, config, sink, on_start=_announce):
            if report.is_directory:
                directories_failed += 1
                errors.append(f"{report.path}: {report.error}")
                continue
            files_scanned += 1
            links_checked += report.links_checked
            if report.error is not None:
                errors.append(f"{report.path}: {report.error}")
            diagnostics.extend(d.to_dict() for d in report.diagnostics)
            # Total is unknown while walking; progress approaches 1.0
            yield (1.0 - 0.9 / (files_scanned + 1), f"Checked {report.path}")

        yield (1.0, "Done walking")
        success = not errors and not diagnostics
        result_obj.output = ScanCheckOutput(
            errors=errors,
            warnings=[],
            root=str(root),
            files_scanned=files_scanned,
            files_failed=len(errors) - directories_failed,
            directories_failed=directories_failed,
            links_checked=links_checked,
            broken_count=len(diagnostics),
            diagnostics=diagnostics,
            success=success,
        ).model_dump(mode="python")
        result_obj.result = (
            f"Checked {links_checked} links in {files_scanned} files: "
            f"{len(diagnostics)} broken, {len(errors) - directories_failed} files with errors"
        )
        result_obj.success = success

    return StageResult(announce=f"Checking documentation links in {path}...", progress_callback=do_work)
