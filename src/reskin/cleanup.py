"""Removal of placeholder directories left empty by the rename phase."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List, Tuple

from .exclusions import ExclusionRules
from .schema import LOWER_TOKEN, TITLE_TOKEN, FileFailure

__all__ = ["find_placeholder_directories", "remove_placeholder_directories"]

LOGGER = logging.getLogger(__name__)


def find_placeholder_directories(
    root: str | Path,
    rules: ExclusionRules,
    names: Iterable[str] = (LOWER_TOKEN, TITLE_TOKEN),
) -> List[str]:
    """Return directories whose whole name is one of ``names``, deepest first."""

    root = Path(root)
    wanted = frozenset(names)
    found: List[str] = []
    for directory, dirnames, _ in os.walk(root):
        kept = []
        for name in dirnames:
            relative = Path(os.path.relpath(os.path.join(directory, name), root)).as_posix()
            if rules.prunes(relative):
                continue
            kept.append(name)
            if name in wanted:
                found.append(relative)
        dirnames[:] = kept
    return sorted(found, reverse=True)


def remove_placeholder_directories(
    root: str | Path,
    rules: ExclusionRules,
    names: Iterable[str] = (LOWER_TOKEN, TITLE_TOKEN),
) -> Tuple[List[str], List[FileFailure]]:
    """Remove the empty directories found by :func:`find_placeholder_directories`.

    Non-empty directories are left alone and not reported.
    """

    root = Path(root)
    removed: List[str] = []
    failures: List[FileFailure] = []
    for relative in find_placeholder_directories(root, rules, names):
        path = root / relative
        if path.is_symlink() or not path.is_dir():
            continue
        try:
            if any(path.iterdir()):
                continue
            path.rmdir()
        except OSError as exc:
            LOGGER.warning("cannot remove %s: %s", relative, exc)
            failures.append(FileFailure(path=relative, operation="cleanup", message=str(exc)))
            continue
        removed.append(relative)
    return removed, failures
