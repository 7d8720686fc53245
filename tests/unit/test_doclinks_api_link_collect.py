"""Unit tests for the anchor and link visitors."""

from pathlib import Path

from doclinks.api.link import DocumentContext, Link, LinkKind, collect_anchors, collect_links, walk
from doclinks.api.parser import Reference
from tests._ast import Anchor, Header, LinkDef, LinkRef, Para, Str
from tests._ast import Link as LinkNode


def _context(**kwargs) -> DocumentContext:
    return DocumentContext(path=Path("/docs/index.md"), **kwargs)


def test_named_anchor_is_collected_with_hash():
    context = _context()
    walk([Para(Anchor("setup"), Str("Setup"))], collect_anchors, context)
    assert context.anchors == ["#setup"]


def test_every_anchor_in_one_raw_node_is_collected():
    node = {"t": "RawInline", "c": ["html", "<a name=\"one\"></a><A NAME='two'/>"]}
    context = _context()
    walk(node, collect_anchors, context)
    assert context.anchors == ["#one", "#two"]


def test_duplicate_anchors_are_tolerated():
    context = _context()
    walk([Anchor("x"), Anchor("x")], collect_anchors, context)
    assert context.anchors == ["#x", "#x"]


def test_non_html_raw_inline_is_ignored():
    context = _context()
    walk({"t": "RawInline", "c": ["tex", '<a name="x">']}, collect_anchors, context)
    assert context.anchors == []


def test_block_level_raw_html_is_ignored():
    context = _context()
    walk({"t": "RawBlock", "c": ["html", '<a name="x">']}, collect_anchors, context)
    assert context.anchors == []


def test_header_identifiers_only_when_enabled():
    tree = [Header(2, "install", "Install")]
    off = _context()
    walk(tree, collect_anchors, off)
    assert off.anchors == []

    on = _context(heading_anchors=True)
    walk(tree, collect_anchors, on)
    assert on.anchors == ["#install"]


def test_link_definitions_are_recorded():
    context = _context()
    walk([LinkDef("lbl", "./real.md", "Real")], collect_anchors, context)
    assert context.definitions == {"lbl": Reference("./real.md", "Real")}


def test_links_are_collected_in_document_order():
    tree = [
        Para(LinkNode("first one", "#a")),
        Para(LinkRef("second", "lbl"), Str("x")),
        LinkDef("lbl", "./b.md"),
    ]
    context = _context()
    walk(tree, collect_links, context)
    assert context.links == [
        Link(kind=LinkKind.DIRECT, text="first one", href="#a"),
        Link(kind=LinkKind.REFERENCE_USE, text="second", label="lbl"),
        Link(kind=LinkKind.REFERENCE_DEFINITION, text="lbl", href="./b.md", label="lbl"),
    ]


def test_link_text_excludes_siblings():
    tree = [Para(Str("before"), LinkNode("inside", "x.md"), Str("after"))]
    context = _context()
    walk(tree, collect_links, context)
    assert [link.text for link in context.links] == ["inside"]


def test_legacy_link_without_attributes():
    node = {"t": "Link", "c": [[Str("old")], ["old.md", ""]]}
    context = _context()
    walk(node, collect_links, context)
    assert context.links == [Link(kind=LinkKind.DIRECT, text="old", href="old.md")]


def test_malformed_link_nodes_are_skipped():
    context = _context()
    walk([{"t": "Link", "c": "x"}, {"t": "Link", "c": [[], [3]]}], collect_links, context)
    assert context.links == []
