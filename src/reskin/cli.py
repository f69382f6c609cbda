"""Command line interface for reskin."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable, Mapping, NoReturn, Sequence

from .classify import default_classifier
from .config import RESERVED_DIRECTORY, RenameConfig
from .errors import InvalidArgumentError, ReskinError
from .pipeline import RenamePipeline
from .schema import ApplyResult, RenamePlan
from .vcs import GitRepository, find_repository_root

DESCRIPTION = """\
Replace the placeholder 'template' with the repository directory name and
'Template' with a title derived from it, in file contents and in file and
directory names. A repository named "my-api-tool" yields the name
"my-api-tool" and the title "My API Tool".
"""

EPILOG = f"""\
Words listed in ACRONYM_LIST (comma separated, default:
ai,api,http,https,xml,json,sql,id,ip) are fully upper-cased in the title.
Binary files are skipped and the {RESERVED_DIRECTORY} directory is never touched.
This is a best-effort tool; review the changes before committing.
"""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise InvalidArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="reskin",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would change without modifying any file",
    )
    parser.add_argument(
        "--all",
        dest="include_all",
        action="store_true",
        help="Include every file in the working tree, not only files known to git",
    )
    parser.add_argument(
        "--yes",
        dest="assume_yes",
        action="store_true",
        help="Apply changes without asking for confirmation",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped files and individual moves to stderr",
    )
    return parser


def _display(path: object) -> str:
    """Render a path for the console, escaping bytes that are not valid UTF-8."""

    return os.fsencode(str(path)).decode("utf-8", "backslashreplace")


def _invoking_script() -> str:
    """Return ``sys.argv[0]`` unless it belongs to this package (``python -m reskin``)."""

    invoked = sys.argv[0] if sys.argv else ""
    if not invoked:
        return ""
    package_dir = Path(__file__).resolve().parent
    try:
        Path(invoked).resolve().relative_to(package_dir)
    except (OSError, ValueError):
        return invoked
    return ""


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _confirm(input_func: Callable[[str], str]) -> bool:
    try:
        answer = input_func("Proceed with these changes? [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}


def _print_header(plan: RenamePlan, dry_run: bool) -> None:
    replacement = plan.replacement
    print(f"Repository root: {_display(plan.root)}")
    print(f"Inferred name: '{_display(replacement.new_lower)}'")
    print(f"Inferred title: '{_display(replacement.new_title)}'")
    print(
        f"Replacing '{replacement.old_lower}' -> '{_display(replacement.new_lower)}' "
        f"and '{replacement.old_title}' -> '{_display(replacement.new_title)}'"
    )
    if dry_run:
        print("DRY RUN: no files will be modified")


def _print_plan(plan: RenamePlan) -> None:
    if plan.content_matches:
        print()
        print("Files with content matches:")
        for match in plan.content_matches:
            print(f"  {_display(match.path)}")
    if plan.rename_targets:
        print()
        print("Files/dirs with matching names (to be renamed):")
        for target in plan.rename_targets:
            print(f"  {_display(target)}")


def _print_result(result: ApplyResult) -> None:
    for path in result.updated:
        print(f"Updated content: {_display(path)}")
    for operation in result.renamed:
        print(f"Renamed: {_display(operation.source)} -> {_display(operation.destination)}")
    for path in result.removed:
        print(f"Removed empty directory: {_display(path)}")
    if result.failures:
        print(f"{len(result.failures)} operation(s) failed:", file=sys.stderr)
        for failure in result.failures:
            print(f"  {failure.operation} {_display(failure.path)}: {failure.message}", file=sys.stderr)
    print("All done. Review changes with 'git status' and 'git diff'.")


def main(
    argv: Sequence[str] | None = None,
    *,
    cwd: str | Path | None = None,
    env: Mapping[str, str] | None = None,
    script: str | None = None,
    input_func: Callable[[str], str] = input,
) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        _configure_logging(args.verbose)
        root = find_repository_root(cwd if cwd is not None else Path.cwd())
    except InvalidArgumentError as exc:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return exc.exit_code
    except ReskinError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_code

    config = RenameConfig.from_options(
        root,
        include_all=args.include_all,
        dry_run=args.dry_run,
        assume_yes=args.assume_yes,
        script=script if script is not None else _invoking_script(),
        env=env,
    )
    pipeline = RenamePipeline(
        config,
        repository=GitRepository(root),
        classifier=default_classifier(),
    )
    plan = pipeline.plan()

    _print_header(plan, config.dry_run)
    if plan.nothing_to_do:
        replacement = plan.replacement
        print(
            f"No matches for '{replacement.old_lower}' or '{replacement.old_title}' "
            "in files or paths. Nothing to do."
        )
        return 0

    _print_plan(plan)
    if config.dry_run:
        print()
        print("Dry-run complete. No changes were made.")
        return 0

    if not config.assume_yes and not _confirm(input_func):
        print("Aborting.")
        return 0

    print()
    _print_result(pipeline.apply(plan))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
