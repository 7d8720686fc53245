"""Unify the JSON tree shapes produced by parser backends."""

from typing import Any

from .ParsedDocument import ParsedDocument
from .ParseError import ParseError
from .Reference import Reference


def parse_document(data: Any) -> ParsedDocument:
    """Turn a decoded parser tree into a ParsedDocument.

    Accepted shapes:

    - ``[metadata, blocks]``: metadata (or its ``unMeta`` member) may carry a
      ``references`` mapping of label -> ``{"href", "title"}``, ``[href, title]``
      or a bare href string.
    - ``{"blocks": [...], ...}``: current pandoc JSON, no reference table.
    - ``[block, ...]``: a bare block list, no reference table.

    Raises:
        ParseError: If the value matches none of these shapes
    """
    if isinstance(data, dict):
        blocks = data.get("blocks")
        if not isinstance(blocks, list):
            raise ParseError("Parser output has no 'blocks' list")
        meta = data.get("meta")
        return ParsedDocument(blocks=blocks, meta=meta if isinstance(meta, dict) else {})

    if not isinstance(data, list):
        raise ParseError(f"Parser output must be a JSON object or array, got {type(data).__name__}")

    if len(data) == 2 and isinstance(data[0], dict) and isinstance(data[1], list) and not _is_node(data[0]):
        meta = data[0]
        return ParsedDocument(blocks=data[1], references=_extract_references(meta), meta=meta)

    return ParsedDocument(blocks=data)


def _is_node(value: dict[str, Any]) -> bool:
    return "t" in value


def _extract_references(meta: dict[str, Any]) -> dict[str, Reference] | None:
    source = meta.get("references")
    if source is None and isinstance(meta.get("unMeta"), dict):
        source = meta["unMeta"].get("references")
    if source is None:
        return None
    if not isinstance(source, dict):
        raise ParseError("Parser 'references' table must be a JSON object")

    references: dict[str, Reference] = {}
    for label, value in source.items():
        if isinstance(value, str):
            references[label] = Reference(href=value)
        elif isinstance(value, dict) and isinstance(value.get("href"), str):
            references[label] = Reference(href=value["href"], title=value.get("title") or "")
        elif isinstance(value, list) and value and isinstance(value[0], str):
            title = value[1] if len(value) > 1 and isinstance(value[1], str) else ""
            references[label] = Reference(href=value[0], title=title)
        else:
            raise ParseError(f"Malformed reference definition for label {label!r}")
    return references
