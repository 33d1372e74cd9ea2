"""Exception types raised by the wtswitch core."""


class WtsError(Exception):
    """Base class for wtswitch errors."""


class InvalidBranchName(WtsError, ValueError):
    """Raised when a branch name cannot be mapped to a worktree path."""


class ProvisioningError(WtsError):
    """Raised when git fails to create a worktree."""
