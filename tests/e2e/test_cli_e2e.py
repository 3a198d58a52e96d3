"""End-to-end tests for the mdplain CLI.

This module runs the CLI as a subprocess, simulating real-world usage and
testing the complete pipeline from command line to output.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest
from utils import cleanup_test_dir, create_test_temp_dir


@pytest.mark.e2e
@pytest.mark.cli
@pytest.mark.slow
class TestCLIEndToEnd:
    """End-to-end tests for CLI functionality."""

    def setup_method(self):
        """Set up test environment."""
        self.temp_dir = create_test_temp_dir()
        self.project_root = Path(__file__).parent.parent.parent

    def teardown_method(self):
        """Clean up test environment."""
        cleanup_test_dir(self.temp_dir)

    def _run_cli(self, args: list[str], stdin: str | None = None, env: dict | None = None):
        cmd = [sys.executable, "-m", "mdplain"] + args
        run_env = {k: v for k, v in os.environ.items() if not k.startswith("MDPLAIN_")}
        if env:
            run_env.update(env)
        return subprocess.run(
            cmd,
            cwd=self.project_root,
            input=stdin,
            capture_output=True,
            text=True,
            encoding="utf-8",
            env=run_env,
        )

    def test_markdown_file_to_stdout(self):
        md_file = self.temp_dir / "doc.md"
        md_file.write_text("# Title\n\nBody with [a link](https://example.com).\n", encoding="utf-8")

        result = self._run_cli([str(md_file)])

        assert result.returncode == 0, result.stderr
        assert result.stdout == "Title\nBody with [a link](https://example.com).\n"

    def test_stdin_to_file(self):
        out_file = self.temp_dir / "out.txt"

        result = self._run_cli(["-", "--out", str(out_file)], stdin="- one\n- two\n")

        assert result.returncode == 0, result.stderr
        assert out_file.read_text(encoding="utf-8") == "one\ntwo"

    def test_from_json(self):
        tree_file = self.temp_dir / "tree.json"
        tree_file.write_text(
            json.dumps(
                {
                    "type": "root",
                    "children": [
                        {"type": "paragraph", "children": [{"type": "delete", "children": [{"type": "text", "value": "x"}]}]}
                    ],
                }
            ),
            encoding="utf-8",
        )

        result = self._run_cli([str(tree_file), "--from-json"])

        assert result.returncode == 0, result.stderr
        assert result.stdout == "(strikethrough: x)\n"

    def test_env_var_default(self):
        md_file = self.temp_dir / "doc.md"
        md_file.write_text("a\n\nb\n", encoding="utf-8")

        result = self._run_cli([str(md_file)], env={"MDPLAIN_BLOCK_SEPARATOR": "\\n---\\n"})

        assert result.returncode == 0, result.stderr
        assert result.stdout == "a\n---\nb\n"

    def test_unknown_kind_warning_on_stderr(self):
        tree_file = self.temp_dir / "tree.json"
        tree_file.write_text(
            json.dumps({"type": "root", "children": [{"type": "math", "children": [{"type": "text", "value": "x"}]}]}),
            encoding="utf-8",
        )

        result = self._run_cli([str(tree_file), "--from-json"])

        assert result.returncode == 0
        assert result.stdout == "x\n"
        assert "math" in result.stderr

    def test_missing_file_exit_code(self):
        result = self._run_cli([str(self.temp_dir / "missing.md")])

        assert result.returncode == 1
        assert "File not found" in result.stderr

    def test_usage_error_exit_code(self):
        result = self._run_cli(["--no-such-flag"])

        assert result.returncode == 2

    def test_log_file(self):
        md_file = self.temp_dir / "doc.md"
        md_file.write_text("text\n", encoding="utf-8")
        log_file = self.temp_dir / "run.log"

        result = self._run_cli([str(md_file), "--trace", "--log-file", str(log_file)])

        assert result.returncode == 0, result.stderr
        assert "completed in" in log_file.read_text(encoding="utf-8")
