"""Path exclusion rules applied by every phase of a run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Callable, Iterable

from .config import RESERVED_DIRECTORY, VCS_DIRECTORY, RenameConfig

__all__ = ["ExclusionRules", "PathPredicate", "exact_paths", "under_directory"]

PathPredicate = Callable[[str], bool]


def under_directory(name: str) -> PathPredicate:
    """Match ``name`` itself and everything beneath it (root-relative)."""

    prefix = f"{name}/"

    def predicate(path: str) -> bool:
        return path == name or path.startswith(prefix)

    return predicate


def exact_paths(paths: AbstractSet[str]) -> PathPredicate:
    """Match any path listed in ``paths`` verbatim."""

    frozen = frozenset(paths)

    def predicate(path: str) -> bool:
        return path in frozen

    return predicate


@dataclass(frozen=True, slots=True)
class ExclusionRules:
    """A set of predicates; a path is excluded when any predicate matches.

    Paths are root-relative POSIX strings without a leading ``./``.
    """

    predicates: tuple[PathPredicate, ...] = ()

    @classmethod
    def build(
        cls,
        *,
        reserved_directory: str = RESERVED_DIRECTORY,
        excluded_files: Iterable[str] = (),
    ) -> "ExclusionRules":
        return cls(
            predicates=(
                under_directory(VCS_DIRECTORY),
                under_directory(reserved_directory),
                exact_paths(frozenset(excluded_files)),
            ),
        )

    @classmethod
    def from_config(cls, config: RenameConfig) -> "ExclusionRules":
        return cls.build(
            reserved_directory=config.reserved_directory,
            excluded_files=config.excluded_files,
        )

    def is_excluded(self, path: str) -> bool:
        path = path.removeprefix("./")
        return any(predicate(path) for predicate in self.predicates)

    def filter(self, paths: Iterable[str]) -> list[str]:
        return [path for path in paths if not self.is_excluded(path)]

    def prunes(self, relative_dir: str) -> bool:
        """Return ``True`` when a walk should not descend into ``relative_dir``."""

        if relative_dir.rsplit("/", 1)[-1] == VCS_DIRECTORY:
            return True
        return self.is_excluded(relative_dir)
