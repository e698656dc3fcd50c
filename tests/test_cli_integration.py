"""
End-to-end tests: run the CLI as a module against a real temporary git
repository, with a fake `llm` command on PATH and a scripted editor.
"""

import os
import shlex
import subprocess
import sys
from pathlib import Path

import pytest

from conftest import requires_git, run_git

pytestmark = [
    requires_git,
    pytest.mark.skipif(os.name == "nt", reason="fake tools are POSIX shell scripts"),
]

PROJECT_ROOT = Path(__file__).resolve().parents[1]

FAKE_LLM = """\
import os
import sys

prompt = sys.stdin.read()
with open(os.environ["FAKE_LLM_LOG"], "w") as f:
    f.write(" ".join(sys.argv[1:]) + "\\n" + prompt)
sys.stdout.write(os.environ.get("FAKE_LLM_OUTPUT", ""))
sys.stderr.write(os.environ.get("FAKE_LLM_STDERR", ""))
sys.exit(int(os.environ.get("FAKE_LLM_EXIT", "0")))
"""

FAKE_EDITOR = """\
import os
import sys

path = sys.argv[1]
mode = os.environ.get("FAKE_EDITOR_MODE", "touch")
with open(os.environ["FAKE_EDITOR_LOG"], "w") as f:
    f.write(path)
if mode == "fail":
    sys.exit(1)
if mode == "write":
    with open(path, "w") as f:
        f.write(os.environ["FAKE_EDITOR_TEXT"])
if mode in ("touch", "write"):
    st = os.stat(path)
    os.utime(path, ns=(st.st_atime_ns, st.st_mtime_ns + 1_000_000_000))
"""


@pytest.fixture
def cli(git_repo, tmp_path):
    """Return a function that runs the CLI in `git_repo` and returns the completed process."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    scripts = tmp_path / "scripts"
    scripts.mkdir()
    drafts = tmp_path / "tmp"
    drafts.mkdir()
    home = tmp_path / "home"
    home.mkdir()

    (scripts / "fake_llm.py").write_text(FAKE_LLM)
    (scripts / "fake_editor.py").write_text(FAKE_EDITOR)
    llm = bin_dir / "llm"
    llm.write_text(f'#!/bin/sh\nexec {shlex.quote(sys.executable)} {shlex.quote(str(scripts / "fake_llm.py"))} "$@"\n')
    llm.chmod(0o755)

    base_env = os.environ.copy()
    for name in ("VISUAL", "COMMIT_LLM_MODEL", "COMMIT_LLM_TOOL", "FORCE_COLOR"):
        base_env.pop(name, None)
    base_env.update({
        "PATH": f"{bin_dir}{os.pathsep}{base_env.get('PATH', '')}",
        "PYTHONPATH": str(PROJECT_ROOT),
        "TMPDIR": str(drafts),
        "HOME": str(home),
        "NO_COLOR": "1",
        "EDITOR": f"{shlex.quote(sys.executable)} {shlex.quote(str(scripts / 'fake_editor.py'))}",
        "FAKE_LLM_LOG": str(tmp_path / "llm.log"),
        "FAKE_EDITOR_LOG": str(tmp_path / "editor.log"),
        "FAKE_LLM_OUTPUT": "Fix login bug\n",
    })

    def _run(*args, **env_overrides):
        env = dict(base_env)
        for key, value in env_overrides.items():
            if value is None:
                env.pop(key, None)
            else:
                env[key] = value
        return subprocess.run(
            [sys.executable, "-m", "git_commit_llm", *args],
            cwd=str(git_repo),
            env=env,
            text=True,
            capture_output=True,
            stdin=subprocess.DEVNULL,
        )

    _run.repo = git_repo
    _run.drafts = drafts
    _run.llm_log = tmp_path / "llm.log"
    _run.editor_log = tmp_path / "editor.log"
    return _run


def _stage_change(repo: Path):
    (repo / "app.py").write_text("def login(user, password):\n    return check_password(user, password)\n")
    run_git(["add", "app.py"], cwd=repo)


def _head_message(repo: Path) -> str:
    return run_git(["log", "-1", "--format=%B"], cwd=repo).stdout.rstrip("\n")


def _commit_count(repo: Path) -> int:
    return int(run_git(["rev-list", "--count", "HEAD"], cwd=repo).stdout.strip())


def test_commit_with_generated_message(cli):
    _stage_change(cli.repo)

    result = cli()

    assert result.returncode == 0, result.stderr
    assert _head_message(cli.repo) == "Fix login bug"
    assert _commit_count(cli.repo) == 2
    assert list(cli.drafts.iterdir()) == []

    args, _, prompt = cli.llm_log.read_text().partition("\n")
    assert args == "--model claude-3-5-sonnet-20241022"
    assert "on branch main" in prompt
    assert "check_password(user, password)" in prompt
    assert cli.editor_log.read_text().startswith(str(cli.drafts))


def test_major_message_is_committed_verbatim(cli):
    message = (
        "Hash passwords before comparing\n"
        "\n"
        "Plain-text comparison let timing differences leak information.\n"
        "Route every login through check_password instead."
    )
    _stage_change(cli.repo)

    result = cli("--major", "--model", "gpt-4o", FAKE_LLM_OUTPUT=message + "\n")

    assert result.returncode == 0, result.stderr
    assert _head_message(cli.repo) == message
    assert cli.llm_log.read_text().startswith("--model gpt-4o\n")


def test_major_message_keeps_hash_lines(cli):
    message = "Fix crash on login\n\n#42 was caused by a stale session token.\nClear it on logout."
    _stage_change(cli.repo)

    result = cli("-m", FAKE_LLM_OUTPUT=message + "\n")

    assert result.returncode == 0, result.stderr
    assert _head_message(cli.repo) == message


def test_stage_all_picks_up_untracked_files(cli):
    (cli.repo / "session.py").write_text("SESSIONS = {}\n")

    result = cli("-s")

    assert result.returncode == 0, result.stderr
    files = run_git(["show", "--name-only", "--format=", "HEAD"], cwd=cli.repo).stdout.split()
    assert files == ["session.py"]


def test_nothing_staged(cli):
    for _ in range(2):
        result = cli()
        assert result.returncode == 1
        assert "No changes staged" in result.stderr
    assert not cli.llm_log.exists()
    assert list(cli.drafts.iterdir()) == []


def test_invalid_argument(cli):
    (cli.repo / "session.py").write_text("SESSIONS = {}\n")

    result = cli("-s", "--frobnicate")

    assert result.returncode == 8
    assert "Error:" in result.stderr
    assert run_git(["diff", "--cached", "--name-only"], cwd=cli.repo).stdout == ""


def test_not_a_repository(cli, tmp_path):
    outside = tmp_path / "outside"
    outside.mkdir()
    result = subprocess.run(
        [sys.executable, "-m", "git_commit_llm"],
        cwd=str(outside),
        env={**os.environ, "PYTHONPATH": str(PROJECT_ROOT), "GIT_CEILING_DIRECTORIES": str(tmp_path)},
        text=True,
        capture_output=True,
    )
    assert result.returncode == 2


def test_editor_not_configured(cli):
    _stage_change(cli.repo)
    assert cli(EDITOR=None).returncode == 6


def test_tool_unavailable(cli):
    _stage_change(cli.repo)
    result = cli(COMMIT_LLM_TOOL="no-such-llm-tool")
    assert result.returncode == 3
    assert "no-such-llm-tool" in result.stderr


def test_generation_failure(cli):
    _stage_change(cli.repo)

    result = cli(FAKE_LLM_EXIT="1", FAKE_LLM_STDERR="Starting\nError: No key found\n")

    assert result.returncode == 3
    assert "Error: No key found" in result.stderr
    assert _commit_count(cli.repo) == 1
    assert not cli.editor_log.exists()
    assert list(cli.drafts.iterdir()) == []


def test_editor_closed_without_saving(cli):
    _stage_change(cli.repo)

    result = cli(FAKE_EDITOR_MODE="noop")

    assert result.returncode == 4
    assert "not saved" in result.stderr
    assert _commit_count(cli.repo) == 1
    assert list(cli.drafts.iterdir()) == []


def test_editor_error(cli):
    _stage_change(cli.repo)
    result = cli(FAKE_EDITOR_MODE="fail")
    assert result.returncode == 4
    assert _commit_count(cli.repo) == 1
    assert list(cli.drafts.iterdir()) == []


def test_comment_only_message(cli):
    _stage_change(cli.repo)

    result = cli(FAKE_EDITOR_MODE="write", FAKE_EDITOR_TEXT="# Fix login bug\n#\n")

    assert result.returncode == 4
    assert "empty" in result.stderr
    assert _commit_count(cli.repo) == 1
    assert list(cli.drafts.iterdir()) == []


def test_debug_prints_prompt(cli):
    _stage_change(cli.repo)

    result = cli("-D")

    assert result.returncode == 0
    assert "on branch main" in result.stdout
    assert "check_password(user, password)" in result.stdout
    assert not cli.llm_log.exists()
    assert _commit_count(cli.repo) == 1


def test_diff_preview_cancelled_on_eof(cli):
    _stage_change(cli.repo)

    result = cli("--diff")

    assert result.returncode == 4
    assert "check_password(user, password)" in result.stdout
    assert not cli.llm_log.exists()
    assert list(cli.drafts.iterdir()) == []


def test_push_succeeds(cli, tmp_path):
    remote = tmp_path / "remote.git"
    run_git(["init", "--bare", str(remote)], cwd=tmp_path)
    run_git(["remote", "add", "origin", str(remote)], cwd=cli.repo)
    run_git(["push", "-q", "-u", "origin", "main"], cwd=cli.repo)
    _stage_change(cli.repo)

    result = cli("--push")

    assert result.returncode == 0, result.stderr
    local_head = run_git(["rev-parse", "HEAD"], cwd=cli.repo).stdout.strip()
    remote_head = run_git(["rev-parse", "main"], cwd=remote).stdout.strip()
    assert remote_head == local_head


def test_push_failure_keeps_commit(cli):
    _stage_change(cli.repo)

    result = cli("-p")

    assert result.returncode == 9
    assert _head_message(cli.repo) == "Fix login bug"
    assert _commit_count(cli.repo) == 2
    assert list(cli.drafts.iterdir()) == []
