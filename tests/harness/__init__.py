"""Test harness utilities for building throwaway git repositories."""

from .repo import git, requires_git, snapshot, write_tree

__all__ = [
    "git",
    "requires_git",
    "snapshot",
    "write_tree",
]
