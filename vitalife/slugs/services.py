import logging
from typing import Any, AbstractSet, Callable, List, Optional, Set, Tuple

from vitalife.core import signals
from vitalife.infrastructure.database import Store
from vitalife.infrastructure.time import epoch_millis
from vitalife.settings import settings
from vitalife.slugs.models import (
    ExhaustedFallback,
    MigrationReport,
    Resolution,
    SlugAssignment,
    SlugIssue,
)
from vitalife.slugs.normalize import is_valid_slug, normalize
from vitalife.slugs.repositories import CatalogRepository
from vitalife.slugs.resolver import SlugResolver

logger = logging.getLogger(__name__)


class SlugMigrationService:
    """Backfills and audits slugs for one catalog table."""

    def __init__(
        self,
        catalog,
        store: Store,
        project_settings=None,
        clock: Callable[[], int] = epoch_millis,
    ) -> None:
        self.settings = project_settings or settings
        self.catalog = catalog
        self.name = catalog.name
        self.placeholder = catalog.placeholder
        self.repository = CatalogRepository(store, catalog.table, catalog.name_column)
        self.resolver = SlugResolver(
            self.repository,
            max_attempts=self.settings.slugs["max_attempts"],
            clock=clock,
            max_length=self.settings.slugs["max_length"],
        )

    def base_token(self, name: Optional[str]) -> Tuple[str, bool]:
        """Return the normalized base and whether the placeholder stood in."""
        base = normalize(name or "")
        if base:
            return base, False
        return self.placeholder, True

    def assign_slug(
        self,
        name: Optional[str],
        exclude_id: Any = None,
        reserved: Optional[AbstractSet[str]] = None,
    ) -> Resolution:
        """Slug a new entry, or a renamed one when ``exclude_id`` is its own id."""
        base, _ = self.base_token(name)
        return self.resolver.resolve(base, exclude_id=exclude_id, reserved=reserved)

    def run(self, dry_run: bool = False) -> MigrationReport:
        report = MigrationReport(catalog=self.name, dry_run=dry_run)
        entries = self.repository.list_entries()
        logger.info("%s: found %s entries", self.name, len(entries))

        planned: Set[str] = set()
        for entry in entries:
            if entry.has_slug:
                logger.info(
                    "Skipped: %r (already has slug: %s)", entry.name, entry.slug
                )
                report.skipped_count += 1
                signals.entry_skipped.send(sender=self, entry=entry)
                continue

            base, placeholder = self.base_token(entry.name)
            if placeholder:
                logger.warning(
                    "%s: entry %s has no usable name, falling back to %r",
                    self.name,
                    entry.id,
                    self.placeholder,
                )
            resolution = self.resolver.resolve(
                base, exclude_id=entry.id, reserved=planned
            )
            slug = resolution.token

            if dry_run:
                planned.add(slug)
            else:
                self.repository.update_slug(entry.id, slug)

            assignment = SlugAssignment(
                entry_id=entry.id,
                name=entry.name,
                slug=slug,
                fallback=isinstance(resolution, ExhaustedFallback),
                placeholder=placeholder,
            )
            report.assignments.append(assignment)
            report.updated_count += 1
            logger.info(
                "%s: %r -> %s",
                "Would update" if dry_run else "Updated",
                entry.name,
                slug,
            )
            signals.slug_assigned.send(sender=self, assignment=assignment, dry_run=dry_run)

        logger.info(
            "%s migration complete (updated=%s skipped=%s dry_run=%s)",
            self.name,
            report.updated_count,
            report.skipped_count,
            dry_run,
        )
        signals.migration_finished.send(sender=self, report=report)
        return report

    def check(self) -> List[SlugIssue]:
        """List entries whose slug is missing, malformed or shared."""
        issues: List[SlugIssue] = []
        for entry in self.repository.list_entries():
            if not entry.has_slug:
                issues.append(SlugIssue(entry.id, entry.slug, "missing"))
            elif not is_valid_slug(entry.slug):
                issues.append(SlugIssue(entry.id, entry.slug, "invalid"))

        for slug, entry_ids in self.repository.duplicate_slugs().items():
            for entry_id in entry_ids:
                issues.append(SlugIssue(entry_id, slug, "duplicate"))

        logger.info("%s: %s slug issues found", self.name, len(issues))
        return issues
