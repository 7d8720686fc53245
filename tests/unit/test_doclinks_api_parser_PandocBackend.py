"""Unit tests for the external parser backend and parse()."""

import sys

import pytest

from doclinks.api.config.ParserConfig import ParserConfig
from doclinks.api.parser import ParseError, parse
from doclinks.api.parser._PandocBackend import _PandocBackend
from tests.conftest import ECHO_PARSER, FAILING_PARSER


def test_run_returns_stdout():
    backend = _PandocBackend(ParserConfig(command=ECHO_PARSER))
    assert backend.run("hello world") == "hello world"


def test_non_zero_exit_raises_with_stderr():
    backend = _PandocBackend(ParserConfig(command=FAILING_PARSER))
    with pytest.raises(ParseError, match="exit code 3: boom"):
        backend.run("text")


def test_missing_executable_raises():
    backend = _PandocBackend(ParserConfig(command=["definitely-not-a-parser-xyz"]))
    with pytest.raises(ParseError, match="Cannot start parser"):
        backend.run("text")


def test_timeout_kills_process():
    command = [sys.executable, "-c", "import time; time.sleep(30)"]
    backend = _PandocBackend(ParserConfig(command=command, timeout_secs=0.5))
    with pytest.raises(ParseError, match="timed out"):
        backend.run("text")


def test_parse_decodes_tree():
    doc = parse('{"blocks": []}', ParserConfig(command=ECHO_PARSER))
    assert doc.blocks == []


def test_parse_rejects_invalid_json():
    with pytest.raises(ParseError, match="invalid JSON"):
        parse("not json", ParserConfig(command=ECHO_PARSER))


def test_undecodable_output_raises():
    command = [sys.executable, "-c", "import sys; sys.stdout.buffer.write(b'\\xff\\xfe')"]
    backend = _PandocBackend(ParserConfig(command=command))
    with pytest.raises(ParseError, match="not valid UTF-8"):
        backend.run("text")

