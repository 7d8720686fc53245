"""Parse Markdown text into a ParsedDocument."""

import json

from ..config.ParserConfig import ParserConfig
from ._PandocBackend import _PandocBackend
from .normalize_markdown import normalize_markdown
from .parse_document import parse_document
from .ParsedDocument import ParsedDocument
from .ParseError import ParseError


def parse(text: str, config: ParserConfig) -> ParsedDocument:
    """Parse Markdown text with the configured backend.

    Raises:
        ParseError: If the backend fails or its output is not a known tree
    """
    output = _PandocBackend(config).run(normalize_markdown(text))
    try:
        data = json.loads(output)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Parser returned invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise ParseError("Parser returned a tree nested too deeply to decode") from exc
    return parse_document(data)
