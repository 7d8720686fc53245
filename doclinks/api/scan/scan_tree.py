"""Scan driver: every document below a root reaches a FileReport."""

import logging
from collections.abc import Callable, Iterator
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from pathlib import Path

from ..config.DoclinksConfig import DoclinksConfig
from .check_document import check_document
from .DiagnosticSink import DiagnosticSink
from .FileReport import FileReport
from .iter_documents import iter_documents
from .WalkError import WalkError

logger = logging.getLogger(__name__)

StartCallback = Callable[[Path], None]


def scan_tree(
    root: Path,
    config: DoclinksConfig,
    sink: DiagnosticSink | None = None,
    on_start: StartCallback | None = None,
) -> Iterator[FileReport]:
    """Yield one FileReport per discovered document (and per unlistable directory).

    ``on_start`` is called with each document's path before it is checked.
    Diagnostics and processing errors are written to ``sink`` as
    ``<path>: <description>`` lines as each report completes. With
    ``scan.max_workers`` above one, documents are checked on a thread pool
    and reports arrive in completion order.
    """
    walk_errors: list[WalkError] = []
    documents = iter_documents(root, config.filter, config.scan.follow_links, on_error=walk_errors.append)
    if on_start is not None:
        documents = _announced(documents, on_start)

    if config.scan.max_workers == 1:
        reports = _sequential(documents, config, walk_errors)
    else:
        reports = _concurrent(documents, config, walk_errors)

    for report in reports:
        if sink is not None:
            _emit(sink, report)
        yield report


def _announced(documents: Iterator[Path], on_start: StartCallback) -> Iterator[Path]:
    for path in documents:
        on_start(path)
        yield path


def _walk_reports(walk_errors: list[WalkError]) -> Iterator[FileReport]:
    while walk_errors:
        error = walk_errors.pop(0)
        yield FileReport(path=error.path, error=str(error), is_directory=True)


def _sequential(documents: Iterator[Path], config: DoclinksConfig, walk_errors: list[WalkError]) -> Iterator[FileReport]:
    for path in documents:
        yield from _walk_reports(walk_errors)
        yield check_document(path, config)
    yield from _walk_reports(walk_errors)


def _concurrent(documents: Iterator[Path], config: DoclinksConfig, walk_errors: list[WalkError]) -> Iterator[FileReport]:
    max_workers = config.scan.max_workers
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        pending: set[Future[FileReport]] = set()
        for path in documents:
            yield from _walk_reports(walk_errors)
            pending.add(executor.submit(check_document, path, config))
            # At most 2 * max_workers documents in flight
            if len(pending) >= max_workers * 2:
                done, pending = wait(pending, return_when=FIRST_COMPLETED)
                for future in done:
                    yield future.result()
        yield from _walk_reports(walk_errors)
        while pending:
            done, pending = wait(pending, return_when=FIRST_COMPLETED)
            for future in done:
                yield future.result()


def _emit(sink: DiagnosticSink, report: FileReport) -> None:
    if report.error is not None:
        sink.write(f"{report.path}: ERROR: {report.error}\n")
    for diagnostic in report.diagnostics:
        sink.write(f"{diagnostic}\n")
