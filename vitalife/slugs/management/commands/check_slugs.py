import argparse
import sys

from vitalife.core.management import execute_from_command_line


def main():
    parser = argparse.ArgumentParser(description="List missing, malformed or duplicated slugs.")
    parser.add_argument("catalogs", nargs="*", help="Catalogs to check (default: all enabled)")
    args = parser.parse_args()
    sys.exit(execute_from_command_line("check_slugs", list(args.catalogs)))


if __name__ == "__main__":
    main()
