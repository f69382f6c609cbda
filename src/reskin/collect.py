"""Enumerate the files and directories a run operates on."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, List

from .classify import ContentClassifier
from .exclusions import ExclusionRules
from .schema import CandidateKind, CandidatePath
from .vcs import GitRepository

__all__ = ["FileCollector"]

LOGGER = logging.getLogger(__name__)


def _relative(root: Path, directory: str, name: str) -> str:
    return Path(os.path.relpath(os.path.join(directory, name), root)).as_posix()


def _unique(paths: Iterable[str]) -> List[str]:
    seen: set[str] = set()
    ordered: List[str] = []
    for path in paths:
        if path not in seen:
            seen.add(path)
            ordered.append(path)
    return ordered


class FileCollector:
    """Produce de-duplicated, root-relative candidate paths.

    In tracked mode files come from git (tracked plus untracked-but-not-ignored);
    with ``include_all`` the whole working tree is walked instead. Directories
    are always found by walking, since git never lists them.
    """

    def __init__(
        self,
        root: str | Path,
        rules: ExclusionRules,
        repository: GitRepository | None = None,
    ) -> None:
        self._root = Path(root)
        self._rules = rules
        self._repository = repository

    @property
    def root(self) -> Path:
        return self._root

    def collect_files(self, include_all: bool = False) -> List[str]:
        if include_all or self._repository is None:
            listed: Iterable[str] = self._walk_files()
        else:
            listed = [*self._repository.tracked_files(), *self._repository.untracked_files()]

        files = self._rules.filter(_unique(listed))
        LOGGER.debug("collected %d candidate files under %s", len(files), self._root)
        return files

    def collect_directories(self, include_all: bool = False) -> List[str]:
        """Return every non-excluded directory, deepest first."""

        ignored: set[str] = set()
        if not include_all and self._repository is not None:
            ignored = set(self._repository.ignored_directories())

        return sorted(self._walk_directories(ignored), reverse=True)

    def classify(self, path: str, classifier: ContentClassifier) -> CandidatePath:
        if self._rules.is_excluded(path):
            return CandidatePath(path=path, kind=CandidateKind.EXCLUDED)
        if classifier.is_binary(self._root / path):
            return CandidatePath(path=path, kind=CandidateKind.BINARY)
        return CandidatePath(path=path, kind=CandidateKind.INCLUDED)

    def _walk_files(self) -> Iterator[str]:
        for directory, dirnames, filenames in self._walk(set()):
            for name in sorted(filenames):
                yield _relative(self._root, directory, name)

    def _walk_directories(self, ignored: set[str]) -> Iterator[str]:
        for directory, dirnames, _ in self._walk(ignored):
            for name in dirnames:
                yield _relative(self._root, directory, name)

    def _walk(self, ignored: set[str]) -> Iterator[tuple[str, List[str], List[str]]]:
        for directory, dirnames, filenames in os.walk(self._root):
            kept: List[str] = []
            for name in sorted(dirnames):
                relative = _relative(self._root, directory, name)
                if relative in ignored or self._rules.prunes(relative):
                    continue
                kept.append(name)
            dirnames[:] = kept
            yield directory, dirnames, filenames
