from __future__ import annotations

from pathlib import Path

import pytest

from harness import write_tree
from reskin.cleanup import find_placeholder_directories, remove_placeholder_directories
from reskin.exclusions import ExclusionRules


def test_find_matches_whole_names_only(tmp_path: Path):
    for directory in ("template", "a/Template", "templates", "my-template", ".fuseki/template", ".git/template"):
        (tmp_path / directory).mkdir(parents=True)

    found = find_placeholder_directories(tmp_path, ExclusionRules.build())
    assert found == ["template", "a/Template"]


def test_removes_only_empty_directories(tmp_path: Path):
    (tmp_path / "empty/template").mkdir(parents=True)
    (tmp_path / "template/Template").mkdir(parents=True)
    write_tree(tmp_path, {"full/template/keep.txt": "x"})

    removed, failures = remove_placeholder_directories(tmp_path, ExclusionRules.build())

    assert failures == []
    assert removed == ["template/Template", "template", "empty/template"]
    assert (tmp_path / "full/template/keep.txt").exists()
    assert (tmp_path / "empty").is_dir()


def test_reserved_directory_is_left_alone(tmp_path: Path):
    (tmp_path / ".fuseki/template").mkdir(parents=True)
    removed, _ = remove_placeholder_directories(tmp_path, ExclusionRules.build())
    assert removed == []
    assert (tmp_path / ".fuseki/template").is_dir()


def test_failed_removal_is_isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    (tmp_path / "locked/template").mkdir(parents=True)
    (tmp_path / "open/template").mkdir(parents=True)
    real_rmdir = Path.rmdir

    def rmdir(self: Path) -> None:
        if self.parent.name == "locked":
            raise PermissionError(13, "Permission denied", str(self))
        real_rmdir(self)

    monkeypatch.setattr(Path, "rmdir", rmdir)
    removed, failures = remove_placeholder_directories(tmp_path, ExclusionRules.build())

    assert removed == ["open/template"]
    assert [(failure.path, failure.operation) for failure in failures] == [("locked/template", "cleanup")]
    assert (tmp_path / "locked/template").is_dir()
