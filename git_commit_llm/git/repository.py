"""Git Repository - the git operations the commit workflow needs."""

import logging
import subprocess
from pathlib import Path

from git_commit_llm import DETACHED_HEAD
from git_commit_llm.errors import CommitFailed, GitError, NotARepository, PushFailed

LOG = logging.getLogger(__name__)


class GitRepository:
    """Handle on the working tree at `cwd` (the current directory by default)."""

    def __init__(self, cwd: str | Path | None = None):
        self.cwd = str(cwd) if cwd is not None else None

    @classmethod
    def discover(cls, cwd: str | Path | None = None) -> 'GitRepository':
        """Return a handle if `cwd` is inside a working tree, else raise NotARepository."""
        repo = cls(cwd)
        try:
            result = repo._run_git('rev-parse', '--is-inside-work-tree', check=False)
        except GitError as e:
            raise NotARepository(str(e))
        if result.returncode != 0 or result.stdout.strip() != 'true':
            raise NotARepository("Not in a git repository")
        return repo

    def _run_git(self, *args: str, check: bool = True, capture: bool = True) -> subprocess.CompletedProcess:
        """Run a git command. With check, a non-zero exit raises GitError."""
        cmd = ['git', *args]
        LOG.debug("Running git command: %s", ' '.join(cmd))
        try:
            result = subprocess.run(
                cmd,
                cwd=self.cwd,
                capture_output=capture,
                text=True,
                encoding='utf-8',
                errors='replace',
            )
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")
        except OSError as e:
            raise GitError(f"Failed to execute git: {e}")

        if result.returncode != 0:
            if capture:
                LOG.debug("git stderr: %s", result.stderr)
            if check:
                raise GitError(f"Git command failed: git {' '.join(args)}")
        return result

    def stage_all(self) -> None:
        """Stage modifications, deletions and untracked files."""
        self._run_git('add', '-A')

    def has_staged_changes(self) -> bool:
        result = self._run_git('diff', '--cached', '--quiet', check=False)
        if result.returncode not in (0, 1):
            raise GitError("Git command failed: git diff --cached --quiet")
        return result.returncode == 1

    def staged_diff(self) -> str:
        return self._run_git('diff', '--cached').stdout

    def current_branch(self) -> str:
        """Short name of the checked out branch, or a sentinel when detached."""
        result = self._run_git('symbolic-ref', '--short', 'HEAD', check=False)
        branch = result.stdout.strip()
        if result.returncode != 0 or not branch:
            return DETACHED_HEAD
        return branch

    def commit(self, message_file: str | Path) -> None:
        """Commit the index using the file contents as the full message.

        Output streams to the terminal so hook output stays visible.
        """
        result = self._run_git('commit', '-F', str(message_file), check=False, capture=False)
        if result.returncode != 0:
            raise CommitFailed(f"git commit exited with status {result.returncode}")

    def head_summary(self) -> tuple[str, str]:
        """Return (short hash, subject) of HEAD."""
        short_hash = self._run_git('rev-parse', '--short', 'HEAD').stdout.strip()
        subject = self._run_git('log', '-1', '--format=%s').stdout.strip()
        return short_hash, subject

    def push(self) -> None:
        result = self._run_git('push', check=False, capture=False)
        if result.returncode != 0:
            raise PushFailed(f"git push exited with status {result.returncode}; the commit was kept")
