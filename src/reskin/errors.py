"""Exception types raised by the reskin pipeline."""

from __future__ import annotations


class ReskinError(RuntimeError):
    """Base class for fatal errors that map onto a process exit code."""

    exit_code = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)


class NotARepositoryError(ReskinError):
    """Raised when no enclosing git repository can be found."""

    exit_code = 1


class InvalidArgumentError(ReskinError):
    """Raised for unknown options or unexpected positional arguments."""

    exit_code = 2
