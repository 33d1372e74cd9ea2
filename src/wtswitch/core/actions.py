"""Terminal actions produced by the command dispatcher.

Each command invocation yields exactly one Action; the CLI layer renders it to
text and an exit code.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from wtswitch.core.git.abc import WorktreeInfo


class ErrorKind(Enum):
    USAGE_ERROR = "usage-error"
    NOT_FOUND = "not-found"
    CONFLICT = "conflict"
    PROVISIONING_FAILURE = "provisioning-failure"
    NOT_A_REPOSITORY = "not-a-repository"
    INVALID_INPUT = "invalid-input"


@dataclass(frozen=True)
class ChangeDirectory:
    """The caller should cd into path and open the editor there."""

    path: Path


@dataclass(frozen=True)
class PrintListing:
    worktrees: list[WorktreeInfo]


@dataclass(frozen=True)
class ReportError:
    """A failed invocation.

    path is set when the directory the user asked for exists anyway (the
    create-new worktree conflict) and should still be surfaced.
    """

    kind: ErrorKind
    message: str
    path: Path | None = None


Action = ChangeDirectory | PrintListing | ReportError
