"""Integration tests for the command-line interface."""

import subprocess
import sys

import pytest

# These tests start a new interpreter per case; run them with --run-cli-tests
pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


@pytest.fixture
def temp_project(tmp_path):
    """Create a temporary project directory with test files."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "utils").mkdir()
    (tmp_path / "docs").mkdir()
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "build").mkdir()

    (tmp_path / "src" / "main.py").write_text("def main():\n    print('Hello')\n")
    (tmp_path / "src" / "utils" / "helpers.py").write_text("def helper():\n    pass\n")
    (tmp_path / "docs" / "README.md").write_text("# Test Project\nDescription.\n")
    (tmp_path / "src" / "main.pyc").write_bytes(b"compiled python")
    (tmp_path / "server.log").write_text("DEBUG: test log\n")
    (tmp_path / "package.json").write_text('{"name": "test"}\n')
    (tmp_path / "build" / "output.min.js").write_text("console.log('test')\n")
    (tmp_path / "node_modules" / "module.js").write_text("export default {}\n")

    (tmp_path / ".gitignore").write_text("*.pyc\nbuild/\n")
    (tmp_path / "custom.ignore").write_text("node_modules/\n*.log\n")

    return tmp_path


def run_cli(args, cwd=None):
    """Run the aldar CLI with the given arguments."""
    cmd = [sys.executable, "-m", "aldar.cli.main"] + args
    return subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, encoding="utf-8", cwd=cwd)


def test_cli_default_run(temp_project):
    result = run_cli([], cwd=temp_project)

    assert result.returncode == 0, result.stderr
    lines = result.stdout.splitlines()
    assert lines[0] == "."
    assert lines[1] == "├── build"
    assert ".gitignore" not in result.stdout
    assert lines[-1] == "5 directories, 9 files"
    # Piped output is never colorized
    assert "\033[" not in result.stdout


def test_cli_exclude_files(temp_project):
    gitignore_path = str(temp_project / ".gitignore")
    custom_ignore_path = str(temp_project / "custom.ignore")

    result = run_cli(["-X", gitignore_path, "-X", custom_ignore_path, "."], cwd=temp_project)

    assert result.returncode == 0, result.stderr
    assert "main.pyc" not in result.stdout
    assert "build" not in result.stdout
    assert "node_modules" not in result.stdout
    assert "server.log" not in result.stdout
    assert "main.py" in result.stdout
    assert "helpers.py" in result.stdout


def test_cli_include_and_level(temp_project):
    result = run_cli(["-I", "*.py", "-L", "1", "-A", str(temp_project)])

    assert result.returncode == 0, result.stderr
    assert "    |-- utils" in result.stdout
    assert "    `-- main.py" in result.stdout
    assert "helpers.py" not in result.stdout
    assert "package.json" not in result.stdout


def test_cli_output_file(temp_project, tmp_path_factory):
    output = tmp_path_factory.mktemp("out") / "tree.txt"

    result = run_cli(["-H", "-o", str(output), str(temp_project)])

    assert result.returncode == 0, result.stderr
    assert result.stdout == ""
    content = output.read_text(encoding="utf-8")
    assert "[      17] package.json" in content


def test_cli_missing_root(tmp_path):
    result = run_cli([str(tmp_path / "missing")])

    assert result.returncode == 1
    assert "Error: Root path does not exist" in result.stderr
    assert result.stdout == ""


def test_cli_invalid_level():
    result = run_cli(["-L", "-3"])

    assert result.returncode == 2
    assert "invalid level" in result.stderr


def test_cli_pipe_closed_early(temp_project):
    """Closing the reading end of the pipe does not produce an error."""
    writer = subprocess.Popen(
        [sys.executable, "-m", "aldar.cli.main", str(temp_project)], stdout=subprocess.PIPE, stderr=subprocess.PIPE
    )
    writer.stdout.close()
    _, stderr = writer.communicate()

    assert b"Traceback" not in stderr


def test_cli_help():
    result = run_cli(["--help"])

    assert result.returncode == 0
    assert "-I PATTERN, --include-pattern PATTERN" in result.stdout
    assert "-L LEVEL, --level LEVEL" in result.stdout
    assert "can be specified multiple times" in result.stdout
