from __future__ import annotations

from pathlib import Path

from reskin.config import RESERVED_DIRECTORY, RenameConfig, script_exclusions
from reskin.naming import DEFAULT_ACRONYMS


def test_from_options_reads_acronym_env():
    config = RenameConfig.from_options("/work/my-repo", env={"ACRONYM_LIST": "cli,GPU"})
    assert config.acronyms == frozenset({"cli", "gpu"})
    assert config.basename == "my-repo"
    assert config.reserved_directory == RESERVED_DIRECTORY


def test_from_options_defaults():
    config = RenameConfig.from_options(Path("/work/my-repo"), env={})
    assert config.acronyms == DEFAULT_ACRONYMS
    assert not config.include_all
    assert not config.dry_run
    assert not config.assume_yes
    assert config.excluded_files == frozenset()


def test_script_exclusions_covers_invocation_forms():
    root = Path("/work/my-repo")
    assert script_exclusions("./scripts/rename.sh", root) == frozenset(
        {"./scripts/rename.sh", "scripts/rename.sh", "rename.sh"}
    )
    assert script_exclusions("/work/my-repo/tools/rename.sh", root) == frozenset(
        {"/work/my-repo/tools/rename.sh", "rename.sh", "tools/rename.sh"}
    )


def test_script_outside_root_keeps_basename_only():
    forms = script_exclusions("/usr/local/bin/reskin", Path("/work/my-repo"))
    assert forms == frozenset({"/usr/local/bin/reskin", "reskin"})


def test_no_script():
    assert script_exclusions(None, Path("/work")) == frozenset()
    assert script_exclusions("", Path("/work")) == frozenset()
