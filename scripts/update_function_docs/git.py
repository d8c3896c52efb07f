"""Thin wrapper around the git executable."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from .errors import GitCommandError

log = logging.getLogger(__name__)


class Git:
    """Runs git commands against one working tree.

    Every method either succeeds or raises GitCommandError with the
    captured stderr of the failing command.
    """

    def __init__(self, cwd: Path, executable: str = "git"):
        self.cwd = cwd
        self.executable = executable

    def _run(self, *args: str, check: bool = True) -> subprocess.CompletedProcess[str]:
        cmd = [self.executable, *args]
        log.info(" ".join(cmd))
        proc = subprocess.run(cmd, cwd=self.cwd, text=True, capture_output=True, check=False)
        if check and proc.returncode != 0:
            raise GitCommandError(cmd, proc.stderr or proc.stdout, proc.returncode)
        return proc

    def fetch_tags(self) -> None:
        self._run("fetch", "--tags")

    def checkout(self, branch: str) -> None:
        self._run("checkout", branch)

    def tags(self) -> list[str]:
        """List all tags, one per line of ``git tag``."""
        out = self._run("tag").stdout
        return [line.strip() for line in out.splitlines() if line.strip()]

    def is_clean(self) -> bool:
        """True when tracked files match HEAD."""
        return self._run("diff-index", "--quiet", "HEAD", "--", check=False).returncode == 0

    def add_tracked(self) -> None:
        """Stage modifications to tracked files."""
        self._run("add", "-u")

    def commit(self, message: str) -> str:
        return self._run("commit", "-m", message).stdout

    def show(self) -> str:
        return self._run("show").stdout
