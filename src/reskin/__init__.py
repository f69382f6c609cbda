"""Turn a template repository into a named project.

The package derives a project name and title from the repository directory
name and substitutes them for the ``template`` and ``Template`` placeholders in
file contents and in file and directory names. The pipeline is usable
programmatically through :class:`RenamePipeline` and from the ``reskin``
command line interface.
"""

from __future__ import annotations

from .config import RenameConfig
from .errors import InvalidArgumentError, NotARepositoryError, ReskinError
from .naming import DEFAULT_ACRONYMS, derive_names, derive_replacement, parse_acronyms
from .pipeline import RenamePipeline
from .schema import ApplyResult, RenamePlan, ReplacementPair

__all__ = [
    "ApplyResult",
    "DEFAULT_ACRONYMS",
    "InvalidArgumentError",
    "NotARepositoryError",
    "RenameConfig",
    "RenamePipeline",
    "RenamePlan",
    "ReplacementPair",
    "ReskinError",
    "derive_names",
    "derive_replacement",
    "parse_acronyms",
]

__version__ = "0.1.0"
