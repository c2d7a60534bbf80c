"""
Git Helper - VCS actions backed by the git command line
"""
import logging
import os
import subprocess
from typing import List

from gitcalver.core.errors import VcsError
from gitcalver.interfaces.vcs_interface import IVcsActions, VcsRegistry

logger = logging.getLogger(__name__)

# git describe failures that only mean "no tag reachable"
NO_TAG_MESSAGES = ("No names found", "No tags can describe", "cannot describe anything")


class GitHelper(IVcsActions):
    """Git implementation of the publishers' VCS actions."""

    vcs_name = "git"

    def __init__(self, repo_path: str = None, timeout: float = 60):
        super().__init__(repo_path or os.getcwd())
        self.timeout = timeout

    def _run_git(self, args: List[str], check: bool = True) -> subprocess.CompletedProcess:
        """
        Run a git command.

        Raises:
            VcsError: If git cannot be started, times out, or exits
                non-zero while check is set.
        """
        cmd = ["git"] + args
        logger.debug("Running %s in %s", " ".join(cmd), self.repo_path)
        try:
            result = subprocess.run(
                cmd,
                cwd=self.repo_path,
                capture_output=True,
                encoding='utf-8',
                errors='ignore',
                timeout=self.timeout
            )
        except subprocess.TimeoutExpired as e:
            raise VcsError(f"git command timed out after {self.timeout}s", cmd, str(e)) from e
        except OSError as e:
            raise VcsError("Cannot run git", cmd, str(e)) from e

        if check and result.returncode != 0:
            raise VcsError(f"'{' '.join(cmd)}' failed with exit code {result.returncode}",
                           cmd, result.stderr)
        return result

    def is_git_repo(self) -> bool:
        """Check if the path is inside a git work tree."""
        try:
            result = self._run_git(["rev-parse", "--is-inside-work-tree"], check=False)
        except VcsError:
            return False
        return result.returncode == 0 and result.stdout.strip() == "true"

    def has_head(self) -> bool:
        """Check if the repository has at least one commit."""
        result = self._run_git(["rev-parse", "--verify", "--quiet", "HEAD"], check=False)
        return result.returncode == 0

    def get_branch_name(self) -> str:
        """Current branch name, "" on a detached HEAD."""
        result = self._run_git(["branch", "--show-current"])
        return result.stdout.strip()

    def get_latest_tag(self) -> str:
        if not self.has_head():
            return ""
        result = self._run_git(["describe", "--tags", "--abbrev=0"], check=False)
        if result.returncode == 0:
            return result.stdout.strip()
        if any(message in result.stderr for message in NO_TAG_MESSAGES):
            return ""
        raise VcsError("Cannot read latest tag", ["git", "describe", "--tags", "--abbrev=0"],
                       result.stderr)

    def get_head_tags(self) -> List[str]:
        if not self.has_head():
            return []
        result = self._run_git(["tag", "--points-at", "HEAD"])
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def add_tag(self, tag: str) -> None:
        self._run_git(["tag", tag])

    def push_tag(self, remote: str, tag: str) -> None:
        self._run_git(["push", remote, f"refs/tags/{tag}"])

    def commit_file(self, relative_path: str, message: str) -> None:
        self._run_git(["add", "--", relative_path])
        self._run_git(["commit", "-m", message, "--", relative_path])

    def push_head(self, remote: str) -> None:
        self._run_git(["push", remote, "HEAD"])

    def get_latest_contents(self, relative_path: str) -> str:
        if not self.has_head():
            return ""
        # "./" resolves the path against repo_path, not the top level
        object_name = f"HEAD:./{relative_path}"
        exists = self._run_git(["cat-file", "-e", object_name], check=False)
        if exists.returncode != 0:
            return ""
        return self._run_git(["show", object_name]).stdout


VcsRegistry.register(GitHelper)
