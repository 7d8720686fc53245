"""Unit tests for doclinks.api.filter.should_exclude."""

from pathlib import Path

import pytest

from doclinks.api.filter.should_exclude import should_exclude

EXCLUDED = ["build", "node_modules", ".git"]


def test_markdown_file_is_included():
    assert should_exclude(Path("/repo/docs/guide.md"), False, EXCLUDED) is False


def test_directory_is_excluded():
    assert should_exclude(Path("/repo/docs"), True, EXCLUDED) is True


@pytest.mark.parametrize("name", ["guide.txt", "guide.MD", "guide.markdown", "README"])
def test_other_extensions_are_excluded(name):
    assert should_exclude(Path("/repo") / name, False, EXCLUDED) is True


@pytest.mark.parametrize(
    "path",
    [
        "/repo/node_modules/pkg/README.md",
        "/repo/node_modules/a/b/c/d/e/README.md",
        "/repo/docs/build/out.md",
        "/repo/.git/x/y.md",
    ],
)
def test_exclusion_applies_at_any_depth(path):
    assert should_exclude(Path(path), False, EXCLUDED) is True


def test_file_named_like_excluded_folder_is_not_excluded():
    assert should_exclude(Path("/repo/docs/build.md"), False, ["build.md"]) is False


def test_only_folders_below_root_are_checked():
    root = Path("/home/me/build/project")
    assert should_exclude(root / "docs" / "guide.md", False, EXCLUDED, root=root) is False
    assert should_exclude(root / "build" / "guide.md", False, EXCLUDED, root=root) is True


def test_custom_extension():
    assert should_exclude(Path("/repo/a.rst"), False, EXCLUDED, extension=".rst") is False
    assert should_exclude(Path("/repo/a.md"), False, EXCLUDED, extension=".rst") is True
