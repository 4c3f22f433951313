import argparse
import sys

from vitalife.core.management import execute_from_command_line


def main():
    parser = argparse.ArgumentParser(description="Backfill missing slugs for catalog entries.")
    parser.add_argument("catalogs", nargs="*", help="Catalogs to migrate, e.g. products posts")
    parser.add_argument("--dry-run", action="store_true", help="Show the slugs without saving them")
    args = parser.parse_args()
    argv = list(args.catalogs)
    if args.dry_run:
        argv.append("--dry-run")
    sys.exit(execute_from_command_line("migrate_slugs", argv))


if __name__ == "__main__":
    main()
