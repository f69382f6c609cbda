from __future__ import annotations

from pathlib import Path

from harness import requires_git, write_tree
from reskin.classify import ContentClassifier
from reskin.collect import FileCollector
from reskin.exclusions import ExclusionRules
from reskin.schema import CandidateKind
from reskin.vcs import GitRepository


class SuffixClassifier(ContentClassifier):
    def is_binary(self, path: Path) -> bool:
        return path.suffix == ".png"


def test_collect_all_files_walks_tree(tmp_path: Path):
    write_tree(
        tmp_path,
        {
            "README.md": "",
            "src/template/app.py": "",
            ".git/config": "",
            ".fuseki/data.ttl": "",
            "rename.sh": "",
        },
    )
    rules = ExclusionRules.build(excluded_files={"rename.sh"})
    files = FileCollector(tmp_path, rules).collect_files(include_all=True)
    assert files == ["README.md", "src/template/app.py"]


def test_collect_directories_deepest_first(tmp_path: Path):
    for directory in ("a/template/deep", "template", ".git/objects", ".fuseki/template"):
        (tmp_path / directory).mkdir(parents=True)

    directories = FileCollector(tmp_path, ExclusionRules.build()).collect_directories(include_all=True)
    assert directories == ["template", "a/template/deep", "a/template", "a"]


@requires_git
def test_tracked_mode_unions_tracked_and_untracked(make_repo):
    root = make_repo(
        files={"tracked.txt": "template", ".gitignore": "ignored.txt\nbuild/\n", ".fuseki/db": "x"},
        untracked={"untracked.txt": "template", "ignored.txt": "template", "build/template/out.txt": "x"},
    )
    collector = FileCollector(root, ExclusionRules.build(), GitRepository(root))

    files = collector.collect_files()
    assert sorted(files) == [".gitignore", "tracked.txt", "untracked.txt"]
    assert len(files) == len(set(files))

    assert "build/template" not in collector.collect_directories()
    assert "build/template" in collector.collect_directories(include_all=True)


def test_classify(tmp_path: Path):
    write_tree(tmp_path, {"logo.png": b"\x89PNG", "notes.txt": "template"})
    collector = FileCollector(tmp_path, ExclusionRules.build(excluded_files={"notes.md"}))
    classifier = SuffixClassifier()

    assert collector.classify("logo.png", classifier).kind is CandidateKind.BINARY
    assert collector.classify("notes.txt", classifier).kind is CandidateKind.INCLUDED
    assert collector.classify("notes.md", classifier).kind is CandidateKind.EXCLUDED
    assert collector.classify(".fuseki/x", classifier).kind is CandidateKind.EXCLUDED
