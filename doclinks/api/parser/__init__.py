"""Document parser adapter."""

from .normalize_markdown import normalize_markdown
from .parse import parse
from .parse_document import parse_document
from .ParsedDocument import ParsedDocument
from .ParseError import ParseError
from .Reference import Reference

__all__ = ["ParseError", "ParsedDocument", "Reference", "normalize_markdown", "parse", "parse_document"]
