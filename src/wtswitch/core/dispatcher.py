"""The switch-or-create and create-new state machines.

Both take a single snapshot of ExistenceFacts at entry, act on it once, and
return exactly one Action. Facts are never re-checked mid-invocation.
"""

import logging
from pathlib import Path

from wtswitch.cli.output import user_output
from wtswitch.core.actions import Action, ChangeDirectory, ErrorKind, PrintListing, ReportError
from wtswitch.core.context import WtsContext
from wtswitch.core.errors import InvalidBranchName, ProvisioningError
from wtswitch.core.existence import is_registered_worktree, probe_existence
from wtswitch.core.paths import normalize_branch_name, worktree_path
from wtswitch.core.provisioner import ProvisionMode, provision_worktree
from wtswitch.core.repo_discovery import NoRepoSentinel, RepoContext

logger = logging.getLogger(__name__)


def _provision(
    ctx: WtsContext, repo: RepoContext, branch: str, path: Path, mode: ProvisionMode
) -> Action:
    try:
        provision_worktree(
            ctx.git,
            repo.root,
            branch,
            path,
            mode,
            remote=ctx.config.remote,
            worktrees_dir_name=ctx.config.worktrees_dir_name,
            timeout=ctx.config.timeout_seconds,
        )
    except ProvisioningError as e:
        return ReportError(ErrorKind.PROVISIONING_FAILURE, str(e))
    return ChangeDirectory(path)


def list_worktrees(ctx: WtsContext) -> Action:
    """List the repository's worktrees."""
    if isinstance(ctx.repo, NoRepoSentinel):
        return ReportError(ErrorKind.NOT_A_REPOSITORY, ctx.repo.message)
    return PrintListing(ctx.git.list_worktrees(ctx.repo.root))


def switch_or_create(ctx: WtsContext, branch: str | None) -> Action:
    """Go to the worktree for branch, creating it from an existing branch if needed.

    States:
        no branch given            -> PrintListing
        worktree directory exists  -> ChangeDirectory
        branch exists (local/remote), worktree missing
                                   -> provision ATTACH_EXISTING -> ChangeDirectory
        branch found nowhere       -> ReportError(NOT_FOUND), nothing created

    Args:
        ctx: Application context
        branch: Requested branch name, or None to list worktrees

    Returns:
        The single terminal Action for this invocation
    """
    if branch is None:
        logger.debug("switch-or-create: no branch given, listing")
        return list_worktrees(ctx)

    repo = ctx.repo
    if isinstance(repo, NoRepoSentinel):
        return ReportError(ErrorKind.NOT_A_REPOSITORY, repo.message)

    try:
        name = normalize_branch_name(branch, ctx.config.remote)
        path = worktree_path(
            branch,
            repo.root,
            worktrees_dir_name=ctx.config.worktrees_dir_name,
            remote=ctx.config.remote,
        )
    except InvalidBranchName as e:
        return ReportError(ErrorKind.INVALID_INPUT, str(e))

    facts = probe_existence(
        ctx.git,
        repo.root,
        name,
        path,
        remote=ctx.config.remote,
        timeout=ctx.config.timeout_seconds,
    )

    if facts.worktree_exists:
        logger.debug("switch-or-create: worktree found at %s", path)
        if not is_registered_worktree(ctx.git.list_worktrees(repo.root), path):
            user_output(
                f"Warning: {path} exists but is not a registered git worktree "
                f"(see 'git worktree list')"
            )
        return ChangeDirectory(path)

    if facts.branch_exists:
        logger.debug("switch-or-create: attaching existing branch %s", name)
        return _provision(ctx, repo, name, path, ProvisionMode.ATTACH_EXISTING)

    logger.debug("switch-or-create: branch %s not found anywhere", name)
    return ReportError(
        ErrorKind.NOT_FOUND,
        f"Branch '{name}' not found locally or on remote '{ctx.config.remote}'.\n"
        f"Use 'create-new {name}' to create it.",
    )


def create_new(ctx: WtsContext, branch: str | None) -> Action:
    """Create a new branch from HEAD together with its worktree.

    States:
        no branch given                 -> ReportError(USAGE_ERROR)
        branch exists (local or remote) -> ReportError(CONFLICT)
        worktree directory exists       -> ReportError(CONFLICT) carrying the path
        otherwise                       -> provision CREATE_NEW -> ChangeDirectory

    Args:
        ctx: Application context
        branch: Name of the branch to create

    Returns:
        The single terminal Action for this invocation
    """
    if branch is None:
        return ReportError(ErrorKind.USAGE_ERROR, "Missing argument 'BRANCH'.")

    repo = ctx.repo
    if isinstance(repo, NoRepoSentinel):
        return ReportError(ErrorKind.NOT_A_REPOSITORY, repo.message)

    try:
        name = normalize_branch_name(branch, ctx.config.remote)
        path = worktree_path(
            branch,
            repo.root,
            worktrees_dir_name=ctx.config.worktrees_dir_name,
            remote=ctx.config.remote,
        )
    except InvalidBranchName as e:
        return ReportError(ErrorKind.INVALID_INPUT, str(e))

    facts = probe_existence(
        ctx.git,
        repo.root,
        name,
        path,
        remote=ctx.config.remote,
        timeout=ctx.config.timeout_seconds,
    )

    if facts.local_branch_exists:
        return ReportError(
            ErrorKind.CONFLICT,
            f"Branch '{name}' already exists locally.\n"
            f"Use 'switch-or-create {name}' to open it.",
        )

    if facts.remote_branch_exists:
        return ReportError(
            ErrorKind.CONFLICT,
            f"Branch '{name}' already exists on remote '{ctx.config.remote}'.\n"
            f"Use 'switch-or-create {name}' to open it.",
        )

    if facts.worktree_exists:
        return ReportError(
            ErrorKind.CONFLICT,
            f"Worktree for '{name}' already exists at {path}",
            path=path,
        )

    logger.debug("create-new: creating branch %s", name)
    return _provision(ctx, repo, name, path, ProvisionMode.CREATE_NEW)
