"""Tests for the switch-or-create and create-new state machines.

These tests run the dispatcher over FakeGit without touching the filesystem.
"""

from pathlib import Path

from tests.test_utils.context_helpers import REPO_ROOT, WORKTREES_DIR, context_for
from wtswitch.core.actions import ChangeDirectory, ErrorKind, PrintListing, ReportError
from wtswitch.core.context import WtsContext
from wtswitch.core.dispatcher import create_new, list_worktrees, switch_or_create
from wtswitch.core.git.abc import WorktreeInfo
from wtswitch.core.git.fake import FakeGit
from wtswitch.core.repo_discovery import NoRepoSentinel

FEATURE_PATH = WORKTREES_DIR / "feature-x"


# ============================================================================
# switch-or-create
# ============================================================================


def test_switch_without_branch_lists_worktrees() -> None:
    worktrees = [WorktreeInfo(path=REPO_ROOT, branch="main", is_root=True)]
    git = FakeGit(worktrees={REPO_ROOT: worktrees})

    action = switch_or_create(context_for(git), None)

    assert action == PrintListing(worktrees)


def test_switch_to_existing_worktree_does_not_provision() -> None:
    git = FakeGit(
        existing_paths={FEATURE_PATH},
        worktrees={REPO_ROOT: [WorktreeInfo(path=FEATURE_PATH, branch="feature-x")]},
    )

    action = switch_or_create(context_for(git), "feature-x")

    assert action == ChangeDirectory(FEATURE_PATH)
    assert git.added_worktrees == []
    assert git.fetched_remotes == []


def test_switch_with_local_branch_attaches_once() -> None:
    git = FakeGit(local_branches={REPO_ROOT: {"feature-x"}})

    action = switch_or_create(context_for(git), "feature-x")

    assert action == ChangeDirectory(FEATURE_PATH)
    assert git.added_worktrees == [(FEATURE_PATH, "feature-x", False)]
    assert len(git.fetched_remotes) == 1


def test_switch_with_remote_only_branch_fetches_and_attaches() -> None:
    git = FakeGit(remote_branches={"origin": {"feature/foo"}})

    action = switch_or_create(context_for(git), "feature/foo")

    expected = Path("/r/.worktrees/feature-foo")
    assert action == ChangeDirectory(expected)
    assert git.fetched_remotes == [(REPO_ROOT, "origin")]
    assert git.added_worktrees == [(expected, "feature/foo", False)]


def test_switch_accepts_remote_qualified_name() -> None:
    git = FakeGit(remote_branches={"origin": {"feature/foo"}})

    action = switch_or_create(context_for(git), "origin/feature/foo")

    assert action == ChangeDirectory(Path("/r/.worktrees/feature-foo"))
    assert git.added_worktrees == [(Path("/r/.worktrees/feature-foo"), "feature/foo", False)]


def test_switch_branch_named_like_remote_keeps_its_own_directory() -> None:
    git = FakeGit(local_branches={REPO_ROOT: {"origin/foo", "foo"}})

    action = switch_or_create(context_for(git), "origin/origin/foo")

    expected = WORKTREES_DIR / "origin-foo"
    assert action == ChangeDirectory(expected)
    assert git.added_worktrees == [(expected, "origin/foo", False)]


def test_switch_unknown_branch_reports_not_found_without_mutation() -> None:
    git = FakeGit(files={REPO_ROOT / ".gitignore": "dist/\n"})

    action = switch_or_create(context_for(git), "feature-x")

    assert isinstance(action, ReportError)
    assert action.kind is ErrorKind.NOT_FOUND
    assert "feature-x" in action.message
    assert git.created_dirs == []
    assert git.appended == []
    assert git.added_worktrees == []


def test_switch_provisioning_failure_is_reported() -> None:
    git = FakeGit(
        local_branches={REPO_ROOT: {"feature-x"}},
        add_worktree_error="fatal: 'feature-x' is already checked out at '/r'",
    )

    action = switch_or_create(context_for(git), "feature-x")

    assert isinstance(action, ReportError)
    assert action.kind is ErrorKind.PROVISIONING_FAILURE
    assert "already checked out" in action.message


def test_switch_outside_repository() -> None:
    ctx = WtsContext.for_test(git=FakeGit(), repo=NoRepoSentinel())

    action = switch_or_create(ctx, "feature-x")

    assert isinstance(action, ReportError)
    assert action.kind is ErrorKind.NOT_A_REPOSITORY


def test_switch_listing_outside_repository() -> None:
    ctx = WtsContext.for_test(git=FakeGit(), repo=NoRepoSentinel())

    action = switch_or_create(ctx, None)

    assert isinstance(action, ReportError)
    assert action.kind is ErrorKind.NOT_A_REPOSITORY


def test_switch_empty_branch_is_invalid_input() -> None:
    action = switch_or_create(context_for(FakeGit()), "")

    assert isinstance(action, ReportError)
    assert action.kind is ErrorKind.INVALID_INPUT


def test_end_to_end_scenario_remote_branch() -> None:
    git = FakeGit(remote_branches={"origin": {"feature/foo"}})
    ctx = context_for(git)

    action = switch_or_create(ctx, "feature/foo")

    assert action == ChangeDirectory(Path("/r/.worktrees/feature-foo"))
    assert len(git.fetched_remotes) == 1
    assert git.added_worktrees == [(Path("/r/.worktrees/feature-foo"), "feature/foo", False)]


# ============================================================================
# create-new
# ============================================================================


def test_create_without_branch_is_usage_error() -> None:
    action = create_new(context_for(FakeGit()), None)

    assert isinstance(action, ReportError)
    assert action.kind is ErrorKind.USAGE_ERROR


def test_create_existing_local_branch_conflicts_without_provisioning() -> None:
    git = FakeGit(local_branches={REPO_ROOT: {"feature-x"}})

    action = create_new(context_for(git), "feature-x")

    assert isinstance(action, ReportError)
    assert action.kind is ErrorKind.CONFLICT
    assert action.path is None
    assert git.added_worktrees == []
    assert git.created_dirs == []


def test_create_existing_remote_branch_conflicts() -> None:
    git = FakeGit(remote_branches={"origin": {"feature-x"}})

    action = create_new(context_for(git), "feature-x")

    assert isinstance(action, ReportError)
    assert action.kind is ErrorKind.CONFLICT
    assert "remote 'origin'" in action.message
    assert git.added_worktrees == []


def test_create_existing_worktree_conflicts_and_surfaces_path() -> None:
    git = FakeGit(existing_paths={FEATURE_PATH})

    action = create_new(context_for(git), "feature-x")

    assert isinstance(action, ReportError)
    assert action.kind is ErrorKind.CONFLICT
    assert action.path == FEATURE_PATH
    assert git.added_worktrees == []


def test_create_new_branch_provisions_from_head() -> None:
    git = FakeGit()

    action = create_new(context_for(git), "feature/new")

    expected = WORKTREES_DIR / "feature-new"
    assert action == ChangeDirectory(expected)
    assert git.added_worktrees == [(expected, "feature/new", True)]
    assert git.fetched_remotes == []


def test_create_strips_remote_prefix_only_once() -> None:
    git = FakeGit()

    action = create_new(context_for(git), "origin/origin/foo")

    expected = WORKTREES_DIR / "origin-foo"
    assert action == ChangeDirectory(expected)
    assert git.added_worktrees == [(expected, "origin/foo", True)]


def test_create_outside_repository() -> None:
    ctx = WtsContext.for_test(git=FakeGit(), repo=NoRepoSentinel())

    action = create_new(ctx, "feature-x")

    assert isinstance(action, ReportError)
    assert action.kind is ErrorKind.NOT_A_REPOSITORY


# ============================================================================
# list
# ============================================================================


def test_list_worktrees_in_reported_order() -> None:
    worktrees = [
        WorktreeInfo(path=REPO_ROOT, branch="main", is_root=True),
        WorktreeInfo(path=WORKTREES_DIR / "b", branch="b"),
        WorktreeInfo(path=WORKTREES_DIR / "a", branch="a"),
    ]
    git = FakeGit(worktrees={REPO_ROOT: worktrees})

    assert list_worktrees(context_for(git)) == PrintListing(worktrees)
