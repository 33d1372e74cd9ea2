"""Per-branch git worktrees, created on demand under the repository root."""
