"""Immutable value types threaded through the rename pipeline."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import List, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field

LOWER_TOKEN = "template"
TITLE_TOKEN = "Template"

TextT = TypeVar("TextT", str, bytes)


class CandidateKind(str, Enum):
    """Classification of a collected path."""

    INCLUDED = "included"
    BINARY = "binary"
    EXCLUDED = "excluded"


class ReplacementPair(BaseModel):
    """The two literal tokens and the names substituted for them."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    old_lower: str = Field(LOWER_TOKEN, description="Lowercase token searched for.")
    new_lower: str = Field(..., description="Replacement for the lowercase token.")
    old_title: str = Field(TITLE_TOKEN, description="Capitalised token searched for.")
    new_title: str = Field(..., description="Replacement for the capitalised token.")

    @property
    def is_blank(self) -> bool:
        """Return ``True`` when the lowercase name is empty, i.e. the basename was."""

        return not self.new_lower

    def _pairs(self, sample: TextT) -> Tuple[Tuple[TextT, TextT], Tuple[TextT, TextT]]:
        if isinstance(sample, bytes):
            return (
                (os.fsencode(self.old_lower), os.fsencode(self.new_lower)),
                (os.fsencode(self.old_title), os.fsencode(self.new_title)),
            )
        return (self.old_lower, self.new_lower), (self.old_title, self.new_title)

    def count(self, text: TextT) -> Tuple[int, int]:
        """Return the number of lowercase and capitalised token occurrences."""

        (lower, _), (title, _) = self._pairs(text)
        return text.count(lower), text.count(title)

    def matches(self, text: TextT) -> bool:
        lower_hits, title_hits = self.count(text)
        return bool(lower_hits or title_hits)

    def apply(self, text: TextT) -> TextT:
        """Replace every lowercase token, then every capitalised token."""

        (lower, new_lower), (title, new_title) = self._pairs(text)
        return text.replace(lower, new_lower).replace(title, new_title)


class CandidatePath(BaseModel):
    """A root-relative POSIX path together with its classification."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str = Field(..., description="Path relative to the repository root.")
    kind: CandidateKind = Field(default=CandidateKind.INCLUDED, description="How the path is treated.")


class ContentMatch(BaseModel):
    """A text file containing at least one token."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str
    lower_hits: int = Field(0, ge=0)
    title_hits: int = Field(0, ge=0)


class RenameOperation(BaseModel):
    """A completed move of a file or directory."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source: str
    destination: str
    is_directory: bool = False
    merged: bool = Field(False, description="Source directory was folded into an existing destination.")


class FileFailure(BaseModel):
    """An isolated per-path failure that did not abort the run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str
    operation: str = Field(..., description="Phase that failed: rewrite, rename or cleanup.")
    message: str


class RenamePlan(BaseModel):
    """Everything a run intends to change, computed before any write."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: Path
    replacement: ReplacementPair
    content_matches: List[ContentMatch] = Field(default_factory=list)
    rename_targets: List[str] = Field(default_factory=list)

    @property
    def nothing_to_do(self) -> bool:
        return not self.content_matches and not self.rename_targets


class ApplyResult(BaseModel):
    """Outcome of applying a :class:`RenamePlan`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    updated: List[str] = Field(default_factory=list)
    renamed: List[RenameOperation] = Field(default_factory=list)
    removed: List[str] = Field(default_factory=list)
    failures: List[FileFailure] = Field(default_factory=list)


__all__ = [
    "ApplyResult",
    "CandidateKind",
    "CandidatePath",
    "ContentMatch",
    "FileFailure",
    "LOWER_TOKEN",
    "RenameOperation",
    "RenamePlan",
    "ReplacementPair",
    "TITLE_TOKEN",
]
