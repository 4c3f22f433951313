import logging
from typing import Dict, Iterable, List

from vitalife.slugs.models import MigrationReport, SlugIssue
from vitalife.slugs.services import SlugMigrationService

logger = logging.getLogger(__name__)


class MigrationRunner:
    """Runs slug services one catalog after another.

    Errors are not caught here: a store failure in one catalog aborts the
    whole run, leaving earlier writes in place.
    """

    def __init__(self, services: Iterable[SlugMigrationService]) -> None:
        self.services = list(services)

    def migrate(self, dry_run: bool = False) -> List[MigrationReport]:
        reports = []
        for service in self.services:
            logger.info("Processing %s", service.name)
            reports.append(service.run(dry_run=dry_run))
        return reports

    def check(self) -> Dict[str, List[SlugIssue]]:
        return {service.name: service.check() for service in self.services}
