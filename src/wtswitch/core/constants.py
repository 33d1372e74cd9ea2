"""Shared constants for wtswitch."""

# Directory (relative to the repository root) holding one worktree per branch
WORKTREES_DIR_NAME = ".worktrees"

# Ignore file at the repository root that receives the worktrees entry
GITIGNORE_FILE_NAME = ".gitignore"

DEFAULT_REMOTE = "origin"
DEFAULT_EDITOR = "cursor"

# Seconds; 0 disables the timeout
DEFAULT_NETWORK_TIMEOUT = 60
