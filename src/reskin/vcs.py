"""Thin wrapper around the ``git`` command line used by the pipeline."""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List

from .errors import NotARepositoryError

__all__ = ["GitRepository", "find_repository_root"]

LOGGER = logging.getLogger(__name__)


def _run_git(args: List[str], cwd: Path) -> subprocess.CompletedProcess[bytes]:
    return subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        check=True,
    )


def _split_nul(output: bytes) -> List[str]:
    """Decode NUL separated paths the way :func:`os.walk` would name them."""

    return [os.fsdecode(entry) for entry in output.split(b"\0") if entry]


def find_repository_root(start: str | Path) -> Path:
    """Return the top level directory of the git repository containing ``start``.

    Raises :class:`NotARepositoryError` when ``start`` is not inside a work tree
    or git is not installed.
    """

    try:
        result = _run_git(["rev-parse", "--show-toplevel"], Path(start))
    except (OSError, subprocess.CalledProcessError) as exc:
        raise NotARepositoryError("This command must be run inside a git repository.") from exc
    return Path(os.fsdecode(result.stdout.rstrip(b"\n")))


@dataclass(frozen=True, slots=True)
class GitRepository:
    """Queries and moves within a single git work tree."""

    root: Path

    def tracked_files(self) -> List[str]:
        return _split_nul(_run_git(["ls-files", "-z"], self.root).stdout)

    def untracked_files(self) -> List[str]:
        """Untracked files that are not ignored by any exclude rule."""

        result = _run_git(["ls-files", "-z", "--others", "--exclude-standard"], self.root)
        return _split_nul(result.stdout)

    def ignored_directories(self) -> List[str]:
        """Directories ignored as a whole, without their trailing slash."""

        result = _run_git(
            ["ls-files", "-z", "--others", "--ignored", "--exclude-standard", "--directory"],
            self.root,
        )
        return [entry.rstrip("/") for entry in _split_nul(result.stdout) if entry.endswith("/")]

    def move(self, source: str, destination: str) -> bool:
        """Move ``source`` to ``destination`` with ``git mv -f``.

        Returns ``False`` when git refuses, e.g. for untracked paths, so the
        caller can fall back to a plain filesystem move.
        """

        try:
            _run_git(["mv", "-f", "--", source, destination], self.root)
        except (OSError, subprocess.CalledProcessError) as exc:
            stderr = getattr(exc, "stderr", None) or str(exc).encode()
            LOGGER.debug(
                "git mv %s -> %s failed: %s",
                source,
                destination,
                stderr.decode(errors="replace").strip(),
            )
            return False
        return True
