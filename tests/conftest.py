"""Test configuration and fixtures for aldar."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_tree(tmp_path):
    """Create the reference tree: a.txt (10 B), .hidden (5 B) and b/c.txt (2048 B)."""
    (tmp_path / "a.txt").write_bytes(b"x" * 10)
    (tmp_path / ".hidden").write_bytes(b"x" * 5)
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "c.txt").write_bytes(b"x" * 2048)
    return tmp_path


@pytest.fixture
def project_tree(tmp_path):
    """Create a small project with nested directories and a node_modules folder."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.py").write_text("def main(): pass\n")
    (tmp_path / "src" / "utils").mkdir()
    (tmp_path / "src" / "utils" / "helpers.py").write_text("def helper(): pass\n")
    (tmp_path / "src" / "utils" / "notes.txt").write_text("notes\n")
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "README.md").write_text("# Docs\n")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "pkg").mkdir()
    (tmp_path / "node_modules" / "pkg" / "index.py").write_text("# vendored\n")
    (tmp_path / "setup.py").write_text("# setup\n")
    return tmp_path
