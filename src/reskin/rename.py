"""Rename files and directories whose paths contain a token."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Iterable, List, Tuple

from .schema import FileFailure, RenameOperation, ReplacementPair
from .vcs import GitRepository

__all__ = ["PathRenamer"]

LOGGER = logging.getLogger(__name__)


class PathRenamer:
    """Move matching paths to their substituted names.

    Targets are processed longest path first so that every entry nested in a
    directory is moved before the directory itself, and each destination is
    computed from the path captured at planning time.
    """

    def __init__(
        self,
        root: str | Path,
        replacement: ReplacementPair,
        repository: GitRepository | None = None,
    ) -> None:
        self._root = Path(root)
        self._replacement = replacement
        self._repository = repository

    def targets(self, files: Iterable[str], directories: Iterable[str] = ()) -> List[str]:
        """Return the unique paths containing either token, sorted lexically."""

        candidates = {*files, *directories}
        return sorted(path for path in candidates if self._replacement.matches(path))

    @staticmethod
    def order(targets: Iterable[str]) -> List[str]:
        return sorted(set(targets), key=lambda path: (len(path), path), reverse=True)

    def destination(self, path: str) -> str:
        return self._replacement.apply(path)

    def apply(self, targets: Iterable[str]) -> Tuple[List[RenameOperation], List[FileFailure]]:
        renamed: List[RenameOperation] = []
        failures: List[FileFailure] = []
        for source in self.order(targets):
            if not os.path.lexists(self._root / source):
                LOGGER.debug("%s no longer exists, skipping", source)
                continue
            destination = self.destination(source)
            if destination == source:
                continue
            try:
                renamed.append(self.rename(source, destination))
            except OSError as exc:
                LOGGER.warning("cannot rename %s -> %s: %s", source, destination, exc)
                failures.append(FileFailure(path=source, operation="rename", message=str(exc)))
        return renamed, failures

    def rename(self, source: str, destination: str) -> RenameOperation:
        """Move ``source`` to ``destination``, creating missing parents.

        A directory whose destination is already a directory is merged into it
        and then removed.
        """

        source_path = self._root / source
        destination_path = self._root / destination
        is_directory = source_path.is_dir() and not source_path.is_symlink()

        destination_path.parent.mkdir(parents=True, exist_ok=True)
        if is_directory and destination_path.is_dir():
            self._merge(source, destination)
            merged = True
        else:
            self._move(source, destination)
            merged = False

        return RenameOperation(
            source=source,
            destination=destination,
            is_directory=is_directory,
            merged=merged,
        )

    def _merge(self, source: str, destination: str) -> None:
        source_path = self._root / source
        for name in sorted(os.listdir(source_path)):
            child = source_path / name
            child_source = f"{source}/{name}"
            child_destination = f"{destination}/{name}"
            target = self._root / child_destination
            if child.is_dir() and not child.is_symlink() and target.is_dir():
                self._merge(child_source, child_destination)
            else:
                self._move(child_source, child_destination)
        source_path.rmdir()

    def _move(self, source: str, destination: str) -> None:
        if self._repository is not None and self._repository.move(source, destination):
            LOGGER.debug("git mv %s -> %s", source, destination)
            return
        shutil.move(str(self._root / source), str(self._root / destination))
        LOGGER.debug("moved %s -> %s", source, destination)
