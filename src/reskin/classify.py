"""Best-effort binary file detection."""

from __future__ import annotations

import logging
import shutil
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

__all__ = [
    "AssumeTextClassifier",
    "ContentClassifier",
    "MimeEncodingClassifier",
    "default_classifier",
]

LOGGER = logging.getLogger(__name__)


class ContentClassifier(ABC):
    """Decides whether a file should be treated as binary."""

    @abstractmethod
    def is_binary(self, path: Path) -> bool:
        """Return ``True`` when ``path`` must not be rewritten."""


class AssumeTextClassifier(ContentClassifier):
    """Treat every file as text."""

    def is_binary(self, path: Path) -> bool:
        return False


class MimeEncodingClassifier(ContentClassifier):
    """Ask ``file --brief --mime-encoding`` about each file.

    A missing executable or a failing probe classifies the file as text so the
    run never stops because the probe is unavailable.
    """

    def __init__(self, executable: str = "file") -> None:
        self._executable = executable

    def is_binary(self, path: Path) -> bool:
        try:
            result = subprocess.run(
                [self._executable, "--brief", "--mime-encoding", str(path)],
                capture_output=True,
                check=True,
                text=True,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            LOGGER.debug("encoding probe failed for %s: %s", path, exc)
            return False
        return "binary" in result.stdout


def default_classifier() -> ContentClassifier:
    """Return a :class:`MimeEncodingClassifier` when ``file`` is on ``PATH``."""

    if shutil.which("file") is None:
        LOGGER.debug("'file' not found; treating every file as text")
        return AssumeTextClassifier()
    return MimeEncodingClassifier()
