"""Unit tests for the scan driver (check_document, scan_tree)."""

import io
import sys

import pytest

from doclinks.api.config import DoclinksConfig
from doclinks.api.config.ParserConfig import ParserConfig
from doclinks.api.link import DiagnosticReason
from doclinks.api.scan import check_document, scan_tree
from tests._ast import Anchor, Link, Para, pandoc_doc, write_doc
from tests.conftest import ECHO_PARSER, FAILING_PARSER


@pytest.fixture
def config() -> DoclinksConfig:
    return DoclinksConfig(parser=ParserConfig(command=ECHO_PARSER))


@pytest.fixture
def tree(docs_root):
    write_doc(docs_root / "index.md", pandoc_doc(Para(Link("guide", "guide/intro.md"), Link("see", "#setup"))))
    write_doc(docs_root / "guide" / "intro.md", pandoc_doc(Para(Link("back", "../index.md"), Link("x", "./missing.md"))))
    write_doc(docs_root / "guide" / "ok.md", pandoc_doc(Para(Link("top", "#top")), Para(Anchor("top"))))
    write_doc(docs_root / "node_modules" / "pkg" / "README.md", pandoc_doc(Para(Link("bad", "#bad"))))
    return docs_root


def _findings(reports):
    return {(d.path.name, d.target, d.reason) for r in reports for d in r.diagnostics}


def test_check_document_reports_links(config, tree):
    report = check_document(tree / "index.md", config)
    assert report.error is None
    assert report.links_checked == 2
    assert [(d.target, d.reason) for d in report.diagnostics] == [("#setup", DiagnosticReason.BROKEN_ANCHOR)]


def test_check_document_read_error(config, docs_root):
    path = docs_root / "binary.md"
    path.write_bytes(b"\xff\xfe\x00bad")
    report = check_document(path, config)
    assert report.failed
    assert "Cannot read file" in report.error


def test_check_document_parse_error(docs_root):
    path = write_doc(docs_root / "a.md", pandoc_doc())
    report = check_document(path, DoclinksConfig(parser=ParserConfig(command=FAILING_PARSER)))
    assert report.failed
    assert "exit code 3" in report.error
    assert report.diagnostics == []


def test_scan_tree_reports_every_document(config, tree):
    reports = list(scan_tree(tree, config))
    assert sorted(r.path.name for r in reports) == ["index.md", "intro.md", "ok.md"]
    assert _findings(reports) == {
        ("index.md", "#setup", DiagnosticReason.BROKEN_ANCHOR),
        ("intro.md", "./missing.md", DiagnosticReason.BROKEN_FILESYSTEM),
    }


def test_scan_tree_writes_lines_to_sink(config, tree):
    sink = io.StringIO()
    list(scan_tree(tree, config, sink))
    lines = sorted(sink.getvalue().splitlines())
    assert lines == sorted(
        [
            f"{tree / 'index.md'}: Found broken relative (anchor) link: see - #setup",
            f"{tree / 'guide' / 'intro.md'}: Found broken relative (filesystem) link: x - ./missing.md",
        ]
    )


def test_one_bad_document_does_not_stop_the_scan(config, tree):
    (tree / "broken.md").write_text("not json", encoding="utf-8")
    sink = io.StringIO()
    reports = list(scan_tree(tree, config, sink))
    assert len(reports) == 4
    failed = [r for r in reports if r.failed]
    assert [r.path.name for r in failed] == ["broken.md"]
    assert f"{tree / 'broken.md'}: ERROR:" in sink.getvalue()
    assert len(_findings(reports)) == 2


def test_scan_is_idempotent(config, tree):
    assert _findings(scan_tree(tree, config)) == _findings(scan_tree(tree, config))


def test_concurrent_scan_matches_sequential(tree):
    sequential = DoclinksConfig(parser=ParserConfig(command=ECHO_PARSER))
    concurrent = DoclinksConfig.model_validate(
        {"parser": {"command": ECHO_PARSER}, "scan": {"max_workers": 3}}
    )
    seq_reports = list(scan_tree(tree, sequential))
    con_reports = list(scan_tree(tree, concurrent))
    assert len(con_reports) == len(seq_reports)
    assert _findings(con_reports) == _findings(seq_reports)


def test_empty_tree(config, docs_root):
    assert list(scan_tree(docs_root, config)) == []


def test_deeply_nested_document_does_not_stop_the_scan(config, docs_root):
    depth = 20_000
    deep = '{"blocks": [' + '{"t": "BlockQuote", "c": [' * depth + "]}" * depth + "]}"
    (docs_root / "deep.md").write_text(deep, encoding="utf-8")
    write_doc(docs_root / "z.md", pandoc_doc(Para(Link("see", "#setup"))))

    reports = {r.path.name: r for r in scan_tree(docs_root, config)}

    assert sorted(reports) == ["deep.md", "z.md"]
    if reports["deep.md"].failed:
        assert "nested too deeply" in reports["deep.md"].error
    assert reports["z.md"].error is None
    assert [d.target for d in reports["z.md"].diagnostics] == ["#setup"]


def test_undecodable_parser_output_is_a_file_error(docs_root):
    write_doc(docs_root / "a.md", pandoc_doc())
    write_doc(docs_root / "b.md", pandoc_doc())
    command = [sys.executable, "-c", "import sys; sys.stdout.buffer.write(b'\\xff\\xfe')"]
    reports = list(scan_tree(docs_root, DoclinksConfig(parser=ParserConfig(command=command))))
    assert sorted(r.path.name for r in reports) == ["a.md", "b.md"]
    assert all("not valid UTF-8" in r.error for r in reports)
