"""Run one document through read, parse and verification."""

import logging
from pathlib import Path

from ..config.DoclinksConfig import DoclinksConfig
from ..link.DocumentContext import DocumentContext
from ..link.verify_document import verify_document
from ..parser.parse import parse
from ..parser.ParseError import ParseError
from .FileReport import FileReport
from .ReadError import ReadError

logger = logging.getLogger(__name__)


def read_document(path: Path) -> str:
    """Read a document as UTF-8 text.

    Raises:
        ReadError: If the file cannot be opened or decoded
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(f"Cannot read file: {exc}") from exc


def check_document(path: Path, config: DoclinksConfig) -> FileReport:
    """Verify every link of one document.

    Read and parse failures end this document's pipeline and are returned as
    the report's error; they are never raised.
    """
    logger.debug("Processing %s", path)
    try:
        text = read_document(path)
        document = parse(text, config.parser)
    except (ReadError, ParseError) as exc:
        logger.error("Error processing %s: %s", path, exc)
        return FileReport(path=path, error=str(exc))

    context = DocumentContext(path=path, heading_anchors=config.scan.heading_anchors)
    diagnostics = verify_document(context, document)
    for diagnostic in diagnostics:
        logger.info("%s", diagnostic)
    return FileReport(path=path, diagnostics=diagnostics, links_checked=len(context.links))
