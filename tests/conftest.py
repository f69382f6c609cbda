from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Mapping

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from harness import git, write_tree  # noqa: E402

RepoFactory = Callable[..., Path]


@pytest.fixture()
def make_repo(tmp_path: Path) -> RepoFactory:
    """Create a git work tree named ``name`` holding ``files``.

    ``untracked`` files are written after ``git add`` so they stay untracked;
    ``directories`` are created empty.
    """

    def factory(
        name: str = "acme",
        files: Mapping[str, str | bytes] | None = None,
        *,
        untracked: Mapping[str, str | bytes] | None = None,
        directories: tuple[str, ...] = (),
    ) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True)
        git(root, "init", "-q")
        write_tree(root, files or {})
        git(root, "add", "-A")
        write_tree(root, untracked or {})
        for directory in directories:
            (root / directory).mkdir(parents=True, exist_ok=True)
        return root

    return factory
