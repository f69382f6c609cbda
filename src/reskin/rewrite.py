"""Token substitution inside file contents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Tuple

from .classify import AssumeTextClassifier, ContentClassifier
from .schema import ContentMatch, FileFailure, ReplacementPair

__all__ = ["ContentRewriter"]

LOGGER = logging.getLogger(__name__)


class ContentRewriter:
    """Find and replace both tokens in text files below ``root``.

    Files are handled as bytes so that any encoding survives untouched apart
    from the replaced tokens.
    """

    def __init__(
        self,
        root: str | Path,
        replacement: ReplacementPair,
        classifier: ContentClassifier | None = None,
    ) -> None:
        self._root = Path(root)
        self._replacement = replacement
        self._classifier = classifier or AssumeTextClassifier()

    def scan(self, files: Iterable[str]) -> List[ContentMatch]:
        """Return a :class:`ContentMatch` for each text file holding a token."""

        matches: List[ContentMatch] = []
        for relative in files:
            path = self._root / relative
            if not path.is_file():
                continue
            if self._classifier.is_binary(path):
                LOGGER.debug("skipping binary file %s", relative)
                continue
            try:
                content = path.read_bytes()
            except OSError as exc:
                LOGGER.warning("cannot read %s: %s", relative, exc)
                continue

            lower_hits, title_hits = self._replacement.count(content)
            if lower_hits or title_hits:
                matches.append(ContentMatch(path=relative, lower_hits=lower_hits, title_hits=title_hits))
        return matches

    def rewrite(self, relative: str) -> bool:
        """Rewrite one file in place; return ``True`` when it changed."""

        path = self._root / relative
        original = path.read_bytes()
        updated = self._replacement.apply(original)
        if updated == original:
            return False
        path.write_bytes(updated)
        return True

    def apply(self, matches: Iterable[ContentMatch]) -> Tuple[List[str], List[FileFailure]]:
        """Rewrite every matched file, isolating per-file I/O errors."""

        updated: List[str] = []
        failures: List[FileFailure] = []
        for match in matches:
            try:
                changed = self.rewrite(match.path)
            except OSError as exc:
                LOGGER.warning("cannot update %s: %s", match.path, exc)
                failures.append(FileFailure(path=match.path, operation="rewrite", message=str(exc)))
                continue
            if changed:
                updated.append(match.path)
        return updated, failures
