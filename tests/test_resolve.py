"""Unit tests for dotenv_exec.process.resolve."""

import os
import sys
from unittest.mock import patch

import pytest

from dotenv_exec.errors import ExecutableNotFound
from dotenv_exec.process.resolve import resolve_executable


def _make_script(directory, name="tool", mode=0o755):
    script = directory / name
    script.write_text("#!/bin/sh\nexit 0\n")
    script.chmod(mode)
    return script


class TestBareNames:
    @patch("dotenv_exec.process.resolve.shutil.which", return_value="/usr/bin/printenv")
    def test_searches_path(self, mock_which):
        assert resolve_executable("printenv") == "/usr/bin/printenv"
        mock_which.assert_called_once_with("printenv", path=None)

    @patch("dotenv_exec.process.resolve.shutil.which", return_value=None)
    def test_not_found(self, _which):
        with pytest.raises(ExecutableNotFound, match="no-such-program"):
            resolve_executable("no-such-program")

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_uses_given_search_path(self, tmp_path):
        script = _make_script(tmp_path)
        assert resolve_executable("tool", path=str(tmp_path)) == str(script)

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_skips_non_executable_files(self, tmp_path):
        _make_script(tmp_path, mode=0o644)
        with pytest.raises(ExecutableNotFound):
            resolve_executable("tool", path=str(tmp_path))


class TestPaths:
    def test_absolute_executable(self):
        assert resolve_executable(sys.executable) == sys.executable

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_relative_path_with_separator(self, tmp_path, monkeypatch):
        _make_script(tmp_path)
        monkeypatch.chdir(tmp_path)
        assert resolve_executable(os.path.join(".", "tool")) == os.path.join(".", "tool")

    def test_missing_path(self, tmp_path):
        with pytest.raises(ExecutableNotFound):
            resolve_executable(str(tmp_path / "missing"))

    def test_directory_is_not_executable(self, tmp_path):
        with pytest.raises(ExecutableNotFound):
            resolve_executable(str(tmp_path))
