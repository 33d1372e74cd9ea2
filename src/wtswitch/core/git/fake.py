"""Fake Git implementation for testing.

FakeGit is an in-memory implementation that accepts pre-configured state in its
constructor and records mutations for test assertions.
"""

from pathlib import Path

from wtswitch.core.git.abc import Git, WorktreeInfo


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    Constructor Injection:
    - All initial state is provided via constructor parameters
    - Mutations are recorded in read-only properties for assertions
    - add_worktree() and ensure_dir() update the in-memory filesystem so that
      later probes observe the new directory

    Examples:
        >>> git = FakeGit(
        ...     repo_roots={Path("/r"): Path("/r")},
        ...     local_branches={Path("/r"): {"main"}},
        ... )
        >>> git.local_branch_exists(Path("/r"), "main")
        True
    """

    def __init__(
        self,
        *,
        repo_roots: dict[Path, Path] | None = None,
        worktrees: dict[Path, list[WorktreeInfo]] | None = None,
        local_branches: dict[Path, set[str]] | None = None,
        remote_branches: dict[str, set[str]] | None = None,
        existing_paths: set[Path] | None = None,
        files: dict[Path, str] | None = None,
        fetch_error: str | None = None,
        add_worktree_error: str | None = None,
    ) -> None:
        """Initialize fake with predetermined repository state.

        Args:
            repo_roots: Mapping of cwd -> repository root
            worktrees: Mapping of repo_root -> worktrees git would report
            local_branches: Mapping of repo_root -> local branch names
            remote_branches: Mapping of remote name -> branch names it advertises
            existing_paths: Directories that exist
            files: Mapping of file path -> content (files also exist as paths)
            fetch_error: If set, fetch_remote() raises RuntimeError with this message
            add_worktree_error: If set, add_worktree() raises RuntimeError with this message
        """
        self._repo_roots = repo_roots or {}
        self._worktrees = {root: list(wts) for root, wts in (worktrees or {}).items()}
        self._local_branches = {root: set(b) for root, b in (local_branches or {}).items()}
        self._remote_branches = remote_branches or {}
        self._existing_paths = set(existing_paths or set())
        self._files = dict(files or {})
        self._fetch_error = fetch_error
        self._add_worktree_error = add_worktree_error

        self._fetched_remotes: list[tuple[Path, str]] = []
        self._added_worktrees: list[tuple[Path, str, bool]] = []
        self._remote_queries: list[tuple[str, str]] = []
        self._created_dirs: list[Path] = []
        self._appended: list[tuple[Path, str]] = []

    def get_repo_root(self, cwd: Path) -> Path | None:
        return self._repo_roots.get(cwd)

    def list_worktrees(self, repo_root: Path) -> list[WorktreeInfo]:
        return list(self._worktrees.get(repo_root, []))

    def local_branch_exists(self, repo_root: Path, branch: str) -> bool:
        return branch in self._local_branches.get(repo_root, set())

    def remote_branch_exists(
        self, repo_root: Path, remote: str, branch: str, *, timeout: float | None
    ) -> bool:
        self._remote_queries.append((remote, branch))
        return branch in self._remote_branches.get(remote, set())

    def fetch_remote(self, repo_root: Path, remote: str, *, timeout: float | None) -> None:
        self._fetched_remotes.append((repo_root, remote))
        if self._fetch_error is not None:
            raise RuntimeError(self._fetch_error)

    def add_worktree(
        self,
        repo_root: Path,
        path: Path,
        *,
        branch: str,
        create_branch: bool,
    ) -> None:
        self._added_worktrees.append((path, branch, create_branch))
        if self._add_worktree_error is not None:
            raise RuntimeError(self._add_worktree_error)

        self._existing_paths.add(path)
        self._worktrees.setdefault(repo_root, []).append(WorktreeInfo(path=path, branch=branch))
        if create_branch:
            self._local_branches.setdefault(repo_root, set()).add(branch)

    def path_exists(self, path: Path) -> bool:
        return path in self._existing_paths or path in self._files

    def is_dir(self, path: Path) -> bool:
        return path in self._existing_paths

    def ensure_dir(self, path: Path) -> None:
        if path not in self._existing_paths:
            self._existing_paths.add(path)
            self._created_dirs.append(path)

    def read_text(self, path: Path) -> str:
        if path not in self._files:
            raise FileNotFoundError(str(path))
        return self._files[path]

    def append_text(self, path: Path, content: str) -> None:
        self._appended.append((path, content))
        self._files[path] = self._files.get(path, "") + content

    @property
    def fetched_remotes(self) -> list[tuple[Path, str]]:
        """(repo_root, remote) for each fetch_remote() call."""
        return list(self._fetched_remotes)

    @property
    def added_worktrees(self) -> list[tuple[Path, str, bool]]:
        """(path, branch, create_branch) for each add_worktree() call."""
        return list(self._added_worktrees)

    @property
    def remote_queries(self) -> list[tuple[str, str]]:
        """(remote, branch) for each remote_branch_exists() call."""
        return list(self._remote_queries)

    @property
    def created_dirs(self) -> list[Path]:
        """Directories created through ensure_dir()."""
        return list(self._created_dirs)

    @property
    def appended(self) -> list[tuple[Path, str]]:
        """(path, content) for each append_text() call."""
        return list(self._appended)

    def file_content(self, path: Path) -> str | None:
        """Current in-memory content of a file, for assertions."""
        return self._files.get(path)
