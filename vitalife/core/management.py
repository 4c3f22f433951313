import argparse
import logging
import sys
from typing import List

from vitalife.core.apps import CatalogRegistry
from vitalife.core.exceptions import CommandError, ConfigurationError
from vitalife.core.logging import configure_logging
from vitalife.core.runner import MigrationRunner
from vitalife.infrastructure.database import open_store
from vitalife.settings import settings

logger = logging.getLogger(__name__)

COMMANDS = ("migrate_slugs", "check_slugs", "debug")


def execute_from_command_line(
    command: str, argv: List[str] | None = None, project_settings=None
) -> int:
    """Entry point for manage.py commands; returns the process exit code."""
    argv = argv or []
    project_settings = project_settings or settings
    configure_logging(project_settings.log_level)

    if command not in COMMANDS:
        raise CommandError(f"Unknown command '{command}'. Expected {'|'.join(COMMANDS)}.")

    logger.info("Loading settings from %s", project_settings.environment)
    errors = project_settings.validate()
    if errors:
        raise ConfigurationError(f"Configuration errors: {errors}")

    registry = CatalogRegistry(project_settings)
    registry.load_catalogs()

    if command == "debug":
        _debug(registry)
        return 0

    options = _parse_options(command, argv)
    configs = _select_catalogs(registry, options.catalogs)

    with open_store(project_settings.database.get_url()) as store:
        runner = MigrationRunner(config.create_service(store) for config in configs)
        if command == "migrate_slugs":
            _migrate_slugs(runner, options.dry_run)
            return 0
        return _check_slugs(runner)


def _parse_options(command: str, argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=f"manage.py {command}")
    parser.add_argument("catalogs", nargs="*", help="Catalogs to process (default: all enabled)")
    if command == "migrate_slugs":
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Compute slugs without writing them",
        )
    options = parser.parse_args(argv)
    if not hasattr(options, "dry_run"):
        options.dry_run = False
    return options


def _select_catalogs(registry: CatalogRegistry, names: List[str]):
    if not names:
        return registry.get_catalog_configs()
    configs = []
    for name in names:
        config = registry.get_catalog(name)
        if config is None:
            raise CommandError(
                f"Catalog '{name}' is not enabled. Add it to ENABLED_CATALOGS or INSTALLED_CATALOGS."
            )
        configs.append(config)
    return configs


def _debug(registry: CatalogRegistry) -> None:
    """Print debug information about installed catalogs."""
    logger.info("Installed catalogs:")
    for config in registry.get_catalog_configs():
        logger.info("- %s (table=%s, enabled=%s)", config.name, config.table, config.enabled)
    sys.stdout.write("\n".join([config.name for config in registry.get_catalog_configs()]) + "\n")


def _migrate_slugs(runner: MigrationRunner, dry_run: bool) -> None:
    """Backfill missing slugs and print a summary per catalog."""
    for report in runner.migrate(dry_run=dry_run):
        verb = "Would update" if report.dry_run else "Updated"
        sys.stdout.write(
            f"{report.catalog}: {verb} {report.updated_count}, Skipped {report.skipped_count}\n"
        )


def _check_slugs(runner: MigrationRunner) -> int:
    """Report slug problems; exit code 1 when any were found."""
    found = 0
    for catalog, issues in runner.check().items():
        for issue in issues:
            sys.stdout.write(f"{catalog}\t{issue.entry_id}\t{issue.problem}\t{issue.slug or ''}\n")
        found += len(issues)
    sys.stdout.write(f"{found} slug issues\n")
    return 1 if found else 0
