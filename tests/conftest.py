import shutil
import subprocess
from pathlib import Path

import pytest

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def run_git(args, cwd: Path) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        text=True,
        capture_output=True,
        check=True,
    )


@pytest.fixture
def git_repo(tmp_path):
    """A fresh repository on branch `main` with one commit."""
    repo = tmp_path / "repo"
    repo.mkdir()

    run_git(["init"], cwd=repo)
    run_git(["symbolic-ref", "HEAD", "refs/heads/main"], cwd=repo)
    run_git(["config", "user.name", "git-commit-llm"], cwd=repo)
    run_git(["config", "user.email", "git-commit-llm@example.com"], cwd=repo)
    run_git(["config", "commit.gpgsign", "false"], cwd=repo)
    run_git(["config", "core.hooksPath", "/dev/null"], cwd=repo)

    (repo / "app.py").write_text("def login(user, password):\n    return user.password == password\n")
    run_git(["add", "app.py"], cwd=repo)
    run_git(["commit", "-m", "Initial commit"], cwd=repo)
    return repo
