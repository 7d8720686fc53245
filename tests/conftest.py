"""Shared pytest configuration and fixtures for all tests."""

import json
import shutil
import sys
from pathlib import Path

import pytest

# Parser commands that stand in for pandoc: the documents hold the JSON tree
ECHO_PARSER = [sys.executable, "-c", "import sys; sys.stdout.write(sys.stdin.read())"]
FAILING_PARSER = [sys.executable, "-c", "import sys; sys.stderr.write('boom'); sys.exit(3)"]


def pytest_configure(config):
    for marker in ("unit", "integration", "smoke", "pandoc"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Configuration that parses documents with the echo parser."""
    return {
        "filter": {
            "extension": ".md",
            "exclude_dirnames": ["build", "build_nodejs", "node_modules", ".git"],
        },
        "parser": {
            "command": list(ECHO_PARSER),
            "timeout_secs": 30.0,
        },
        "scan": {
            "max_workers": 1,
            "follow_links": False,
            "heading_anchors": False,
        },
        "log": {"level": "INFO"},
    }


def write_config(home: Path, config: dict) -> Path:
    """Write config.json into a doclinks home directory."""
    home.mkdir(parents=True, exist_ok=True)
    config_path = home / "config.json"
    config_path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return config_path


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def doclinks_home(tmp_path: Path, monkeypatch) -> Path:
    """Point DOCLINKS_HOME at an empty per-test directory."""
    home = tmp_path / ".doclinks"
    home.mkdir()
    monkeypatch.setenv("DOCLINKS_HOME", str(home))
    return home


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    return minimal_config_dict()


@pytest.fixture
def echo_config(doclinks_home: Path, minimal_config_dict: dict) -> dict:
    """Write a config whose parser echoes the document (documents are JSON trees)."""
    write_config(doclinks_home, minimal_config_dict)
    return minimal_config_dict


@pytest.fixture
def docs_root(tmp_path: Path) -> Path:
    root = tmp_path / "docs"
    root.mkdir()
    return root


@pytest.fixture
def require_pandoc():
    if shutil.which("pandoc") is None:
        pytest.skip("pandoc executable not found")
