"""Plan and apply a complete template rename."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .classify import ContentClassifier, default_classifier
from .cleanup import remove_placeholder_directories
from .collect import FileCollector
from .config import RenameConfig
from .exclusions import ExclusionRules
from .naming import derive_replacement
from .rename import PathRenamer
from .rewrite import ContentRewriter
from .schema import ApplyResult, CandidateKind, RenamePlan, ReplacementPair
from .vcs import GitRepository

__all__ = ["RenamePipeline"]

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class RenamePipeline:
    """Derive names, collect candidates, then rewrite, rename and clean up.

    :meth:`plan` never writes to disk; :meth:`apply` performs the changes
    described by a plan and returns what was done.
    """

    config: RenameConfig
    repository: GitRepository | None
    classifier: ContentClassifier
    rules: ExclusionRules
    replacement: ReplacementPair

    def __init__(
        self,
        config: RenameConfig,
        *,
        repository: GitRepository | None = None,
        classifier: ContentClassifier | None = None,
    ) -> None:
        self.config = config
        self.repository = repository
        self.classifier = classifier or default_classifier()
        self.rules = ExclusionRules.from_config(config)
        self.replacement = derive_replacement(config.basename, config.acronyms)

    def plan(self) -> RenamePlan:
        """Return the content matches and rename targets for this run."""

        root = self.config.root
        if self.replacement.is_blank:
            LOGGER.debug("empty replacement names derived from %s", root)
            return RenamePlan(root=root, replacement=self.replacement)

        collector = FileCollector(root, self.rules, self.repository)
        files = collector.collect_files(self.config.include_all)
        directories = collector.collect_directories(self.config.include_all)

        candidates = [collector.classify(path, self.classifier) for path in files]
        text_files = [candidate.path for candidate in candidates if candidate.kind is CandidateKind.INCLUDED]
        LOGGER.debug("%d of %d files classified as text", len(text_files), len(candidates))

        content_matches = ContentRewriter(root, self.replacement).scan(text_files)
        rename_targets = PathRenamer(root, self.replacement, self.repository).targets(files, directories)
        return RenamePlan(
            root=root,
            replacement=self.replacement,
            content_matches=content_matches,
            rename_targets=rename_targets,
        )

    def apply(self, plan: RenamePlan) -> ApplyResult:
        """Rewrite contents, rename paths and remove emptied placeholders."""

        if self.config.dry_run:
            return ApplyResult()

        root = plan.root
        rewriter = ContentRewriter(root, plan.replacement)
        updated, rewrite_failures = rewriter.apply(plan.content_matches)

        renamer = PathRenamer(root, plan.replacement, self.repository)
        renamed, rename_failures = renamer.apply(plan.rename_targets)

        removed, cleanup_failures = remove_placeholder_directories(
            root,
            self.rules,
            (plan.replacement.old_lower, plan.replacement.old_title),
        )
        return ApplyResult(
            updated=updated,
            renamed=renamed,
            removed=removed,
            failures=[*rewrite_failures, *rename_failures, *cleanup_failures],
        )
