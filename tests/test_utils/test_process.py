"""Tests for helper command execution."""

import subprocess
import sys
from unittest.mock import MagicMock, patch

from hostfetch.utils.process import first_line, run_command

MODULE = "hostfetch.utils.process"


class TestRunCommand:
    def test_returns_stdout(self):
        output = run_command([sys.executable, "-c", "print('hello')"])
        assert output == "hello\n"

    def test_missing_executable(self):
        assert run_command(["definitely-not-a-real-command-xyz"]) is None

    def test_empty_command(self):
        assert run_command([]) is None

    def test_non_zero_exit(self):
        assert run_command([sys.executable, "-c", "import sys; sys.exit(3)"]) is None

    def test_timeout(self):
        assert run_command([sys.executable, "-c", "import time; time.sleep(5)"], timeout=0.2) is None

    @patch(f"{MODULE}.shutil.which", return_value="/usr/bin/tool")
    @patch(f"{MODULE}.subprocess.run")
    def test_passes_timeout(self, mock_run, mock_which):
        mock_run.return_value = MagicMock(returncode=0, stdout="ok", stderr="")
        assert run_command(["tool", "--flag"], timeout=2.5) == "ok"
        assert mock_run.call_args.kwargs["timeout"] == 2.5
        assert mock_run.call_args.args[0] == ["tool", "--flag"]

    @patch(f"{MODULE}.shutil.which", return_value="/usr/bin/tool")
    @patch(f"{MODULE}.subprocess.run", side_effect=PermissionError("denied"))
    def test_start_failure(self, mock_run, mock_which):
        assert run_command(["tool"]) is None

    @patch(f"{MODULE}.shutil.which", return_value="/usr/bin/tool")
    @patch(f"{MODULE}.subprocess.run", side_effect=subprocess.TimeoutExpired(["tool"], 5))
    def test_timeout_expired(self, mock_run, mock_which):
        assert run_command(["tool"]) is None


class TestFirstLine:
    def test_first_non_blank(self):
        assert first_line("\n\n  value  \nmore\n") == "value"

    def test_none(self):
        assert first_line(None) == ""

    def test_blank(self):
        assert first_line("  \n\n") == ""
