"""Run configuration shared by the pipeline and the command line interface."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from .naming import DEFAULT_ACRONYMS, parse_acronyms

ACRONYM_ENV_VAR = "ACRONYM_LIST"
RESERVED_DIRECTORY = ".fuseki"
VCS_DIRECTORY = ".git"


def script_exclusions(script: str | None, root: Path) -> frozenset[str]:
    """Return every form under which ``script`` may appear in a listing.

    The invoked path, the same path without a leading ``./``, its basename and,
    for absolute paths inside ``root``, its root-relative path.
    """

    if not script:
        return frozenset()

    forms = {script, script.removeprefix("./"), os.path.basename(script)}
    if os.path.isabs(script):
        try:
            forms.add(Path(script).relative_to(root).as_posix())
        except ValueError:
            pass
    forms.discard("")
    return frozenset(forms)


@dataclass(slots=True)
class RenameConfig:
    """Options controlling a single run.

    Attributes
    ----------
    root:
        Top level directory of the repository being renamed.
    include_all:
        Walk every file in the working tree instead of the git tracked and
        untracked-but-not-ignored set.
    dry_run:
        Report what would change without touching the filesystem.
    assume_yes:
        Skip the interactive confirmation.
    acronyms:
        Lowercase words that are fully upper-cased in the derived title.
    excluded_files:
        Root-relative paths never rewritten or renamed, typically the
        invoking script.
    reserved_directory:
        Directory name at the repository root that every phase ignores.
    """

    root: Path
    include_all: bool = False
    dry_run: bool = False
    assume_yes: bool = False
    acronyms: frozenset[str] = DEFAULT_ACRONYMS
    excluded_files: frozenset[str] = field(default_factory=frozenset)
    reserved_directory: str = RESERVED_DIRECTORY

    @classmethod
    def from_options(
        cls,
        root: str | Path,
        *,
        include_all: bool = False,
        dry_run: bool = False,
        assume_yes: bool = False,
        script: str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> "RenameConfig":
        """Build a :class:`RenameConfig`, reading ``ACRONYM_LIST`` from ``env``."""

        environment: Mapping[str, str] = env if env is not None else os.environ
        root_path = Path(root)
        return cls(
            root=root_path,
            include_all=include_all,
            dry_run=dry_run,
            assume_yes=assume_yes,
            acronyms=parse_acronyms(environment.get(ACRONYM_ENV_VAR)),
            excluded_files=script_exclusions(script, root_path),
        )

    @property
    def basename(self) -> str:
        return self.root.name
