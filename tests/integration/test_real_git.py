"""Integration tests against real git, using a local bare repository as origin."""

import shutil
import subprocess
from pathlib import Path

import pytest
from click.testing import CliRunner

from wtswitch.cli.cli import cli
from wtswitch.core.config import WtsConfig
from wtswitch.core.context import WtsContext
from wtswitch.core.git.real import RealGit
from wtswitch.core.repo_discovery import RepoContext, discover_repo_or_sentinel

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def _git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", "-c", "user.name=Test User", "-c", "user.email=test@example.com", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


@pytest.fixture
def repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A clone with one commit on main and a branch that only exists on origin."""
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))

    origin = tmp_path / "origin.git"
    origin.mkdir()
    _git(origin, "init", "--bare", "-b", "main")

    work = tmp_path / "work"
    work.mkdir()
    _git(work, "init", "-b", "main")
    (work / ".gitignore").write_text("*.pyc\n", encoding="utf-8")
    _git(work, "add", ".gitignore")
    _git(work, "commit", "-m", "initial")
    _git(work, "remote", "add", "origin", str(origin))
    _git(work, "push", "origin", "main")

    _git(work, "branch", "feature/remote-only")
    _git(work, "push", "origin", "feature/remote-only")
    _git(work, "branch", "-D", "feature/remote-only")

    return work


def _context(cwd: Path) -> WtsContext:
    git = RealGit()
    config = WtsConfig(editor="cursor", network_timeout=30)
    return WtsContext(
        git=git,
        cwd=cwd,
        config=config,
        repo=discover_repo_or_sentinel(cwd, git, worktrees_dir_name=config.worktrees_dir_name),
        dry_run=False,
    )


def _root(ctx: WtsContext) -> Path:
    assert isinstance(ctx.repo, RepoContext)
    return ctx.repo.root


def test_switch_attaches_remote_only_branch(repo: Path) -> None:
    ctx = _context(repo)
    root = _root(ctx)

    result = CliRunner().invoke(cli, ["switch-or-create", "feature/remote-only"], obj=ctx)

    expected = root / ".worktrees" / "feature-remote-only"
    assert result.exit_code == 0, result.output
    assert result.stdout == f"cd {expected} && cursor .\n"
    assert expected.is_dir()
    assert "branch refs/heads/feature/remote-only" in _git(root, "worktree", "list", "--porcelain")
    assert (root / ".gitignore").read_text(encoding="utf-8") == (
        "*.pyc\n\n# Git worktrees\n.worktrees/\n"
    )


def test_switch_twice_reuses_worktree(repo: Path) -> None:
    ctx = _context(repo)
    runner = CliRunner()

    first = runner.invoke(cli, ["switch-or-create", "feature/remote-only"], obj=ctx)
    second = runner.invoke(cli, ["switch-or-create", "feature/remote-only"], obj=ctx)

    assert first.exit_code == 0, first.output
    assert second.exit_code == 0, second.output
    assert first.stdout == second.stdout
    assert _git(_root(ctx), "worktree", "list").count("feature-remote-only") == 1


def test_switch_unknown_branch_creates_nothing(repo: Path) -> None:
    ctx = _context(repo)

    result = CliRunner().invoke(cli, ["switch-or-create", "does-not-exist"], obj=ctx)

    assert result.exit_code == 1
    assert not (_root(ctx) / ".worktrees").exists()


def test_create_new_branch_from_head(repo: Path) -> None:
    ctx = _context(repo)
    root = _root(ctx)

    result = CliRunner().invoke(cli, ["create-new", "feature/fresh"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert (root / ".worktrees" / "feature-fresh").is_dir()
    assert "feature/fresh" in _git(root, "branch", "--list", "feature/fresh")


def test_create_new_conflicts_with_remote_branch(repo: Path) -> None:
    ctx = _context(repo)

    result = CliRunner().invoke(cli, ["create-new", "feature/remote-only"], obj=ctx)

    assert result.exit_code == 1
    assert "already exists on remote 'origin'" in result.stderr


def test_create_new_with_worktrees_path_taken_by_file(repo: Path) -> None:
    ctx = _context(repo)
    (_root(ctx) / ".worktrees").write_text("not a directory", encoding="utf-8")

    result = CliRunner().invoke(cli, ["create-new", "feat"], obj=ctx)

    assert result.exit_code == 1
    assert not isinstance(result.exception, OSError)
    assert "Error: Could not prepare worktree" in result.stderr
    assert result.stdout == ""


def test_list_worktrees_parses_real_output(repo: Path) -> None:
    ctx = _context(repo)
    root = _root(ctx)
    CliRunner().invoke(cli, ["create-new", "listed"], obj=ctx)

    worktrees = RealGit().list_worktrees(root)

    assert [wt.branch for wt in worktrees] == ["main", "listed"]
    assert worktrees[0].is_root
    assert worktrees[1].path.name == "listed"


def test_remote_probe_failure_is_absent(repo: Path) -> None:
    assert not RealGit().remote_branch_exists(repo, "no-such-remote", "main", timeout=10)


def test_local_branch_probe(repo: Path) -> None:
    git = RealGit()

    assert git.local_branch_exists(repo, "main")
    assert not git.local_branch_exists(repo, "feature/remote-only")


def test_repo_root_outside_repository(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    outside = tmp_path / "plain"
    outside.mkdir()

    assert RealGit().get_repo_root(outside) is None
