"""Tests for nightlytests.core.git."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

from nightlytests.core.git import get_git_root


class TestGetGitRoot:
    """Tests for get_git_root function."""

    def test_returns_toplevel(self, tmp_path: Path) -> None:
        completed = MagicMock(returncode=0, stdout=f"{tmp_path}\n")
        with patch("nightlytests.core.git.subprocess.run", return_value=completed) as run:
            assert get_git_root(tmp_path / "sub") == tmp_path
        assert run.call_args.args[0] == ["git", "rev-parse", "--show-toplevel"]

    def test_not_a_repository(self, tmp_path: Path) -> None:
        completed = MagicMock(returncode=128, stdout="")
        with patch("nightlytests.core.git.subprocess.run", return_value=completed):
            assert get_git_root(tmp_path) is None

    def test_git_not_found(self, tmp_path: Path) -> None:
        with patch("nightlytests.core.git.subprocess.run", side_effect=FileNotFoundError):
            assert get_git_root(tmp_path) is None

    def test_git_timeout(self, tmp_path: Path) -> None:
        with patch(
            "nightlytests.core.git.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="git", timeout=5),
        ):
            assert get_git_root(tmp_path) is None
