"""Unit tests for the FileEntry classifier."""

import os
import sys
from unittest.mock import MagicMock

import pytest

from aldar.file_system_tree.file_entry import (
    PLACEHOLDER_NAME,
    FileEntry,
    is_representable,
    replace_nonprintable,
)
from aldar.types import EntryKind


def scan(directory):
    """Return the entries of a directory keyed by name."""
    return {e.name: FileEntry(e) for e in os.scandir(directory)}


@pytest.fixture
def temp_directory(tmp_path):
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "guide.md").write_text("# Guide\n")
    (tmp_path / "data.bin").write_bytes(b"\x00" * 300)
    (tmp_path / ".env").write_text("KEY=value\n")
    tool = tmp_path / "tool"
    tool.write_text("#!/bin/sh\n")
    tool.chmod(0o744)
    return tmp_path


def test_directory_classification(temp_directory):
    entries = scan(temp_directory)
    assert entries["docs"].is_dir
    assert entries["docs"].kind == EntryKind.DIRECTORY
    assert not entries["data.bin"].is_dir
    assert entries["data.bin"].kind == EntryKind.FILE


def test_hidden_classification(temp_directory):
    entries = scan(temp_directory)
    assert entries[".env"].is_hidden
    assert not entries["docs"].is_hidden
    assert not entries["data.bin"].is_hidden


@pytest.mark.skipif(sys.platform == "win32", reason="Execute bits are a POSIX concept")
def test_executable_classification(temp_directory):
    entries = scan(temp_directory)
    assert entries["tool"].is_executable
    assert not entries["data.bin"].is_executable
    # Directories carry execute bits but are never executables
    assert not entries["docs"].is_executable


def test_size(temp_directory):
    assert scan(temp_directory)["data.bin"].size == 300


def test_metadata_failures_degrade_to_defaults():
    raw = MagicMock(spec=["name", "path", "stat", "is_dir"])
    raw.name = "locked.dat"
    raw.path = os.path.join("missing", "locked.dat")
    raw.stat.side_effect = PermissionError("denied")
    raw.is_dir.side_effect = PermissionError("denied")

    entry = FileEntry(raw)
    assert entry.size == 0
    assert not entry.is_dir
    assert not entry.is_executable
    assert not entry.is_hidden
    assert entry.full_rel_path(os.path.abspath("missing")) == "locked.dat"


def test_vanished_entry_degrades_gracefully(temp_directory):
    entry = scan(temp_directory)["data.bin"]
    (temp_directory / "data.bin").unlink()
    assert entry.size == 0
    assert entry.full_rel_path(str(temp_directory.resolve())) == "data.bin"


def test_full_rel_path(temp_directory):
    base = str(temp_directory.resolve())
    docs = scan(temp_directory)["docs"]
    guide = scan(temp_directory / "docs")["guide.md"]

    assert docs.full_rel_path(base) == "docs"
    assert guide.full_rel_path(base) == os.path.join("docs", "guide.md")


def test_full_rel_path_outside_base_falls_back_to_name(temp_directory):
    guide = scan(temp_directory / "docs")["guide.md"]
    unrelated_base = str((temp_directory / "elsewhere").resolve())
    assert guide.full_rel_path(unrelated_base) == "guide.md"


def test_full_rel_path_with_sibling_sharing_prefix(tmp_path):
    (tmp_path / "app").mkdir()
    (tmp_path / "application").mkdir()
    (tmp_path / "application" / "main.py").write_text("")
    entry = scan(tmp_path / "application")["main.py"]
    assert entry.full_rel_path(str((tmp_path / "app").resolve())) == "main.py"


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="Symlinks not supported")
def test_symlink_to_directory_is_not_followed(temp_directory):
    try:
        os.symlink(temp_directory / "docs", temp_directory / "link")
    except (OSError, NotImplementedError):
        pytest.skip("Symlink creation not supported on this platform/environment")

    link = scan(temp_directory)["link"]
    assert not link.is_dir
    assert link.kind == EntryKind.FILE


def test_display_name(temp_directory):
    base = str(temp_directory.resolve())
    guide = scan(temp_directory / "docs")["guide.md"]
    assert guide.display_name() == "guide.md"
    assert guide.display_name(base) == os.path.join("docs", "guide.md")


def test_is_representable():
    assert is_representable("main.py")
    assert not is_representable("")
    assert not is_representable("caf\udce9")


def test_unrepresentable_name_uses_placeholder(temp_directory):
    entry = scan(temp_directory)["data.bin"]
    entry.name = "caf\udce9"
    assert entry.display_name() == PLACEHOLDER_NAME


def test_replace_nonprintable():
    assert replace_nonprintable("line\nbreak") == "line?break"
    assert replace_nonprintable("bell\x07") == "bell?"
    assert replace_nonprintable("naïve.txt") == "naïve.txt"
