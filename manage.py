#!/usr/bin/env python
import logging
import os
import sys


def main() -> int:
    os.environ.setdefault("VITALIFE_SETTINGS_MODULE", "vitalife.settings.base")

    from vitalife.core.exceptions import (
        CatalogLoadError,
        CommandError,
        ConfigurationError,
        StoreError,
    )
    from vitalife.core.management import execute_from_command_line

    if len(sys.argv) < 2:
        command = "migrate_slugs"
        args = []
    else:
        command = sys.argv[1]
        args = sys.argv[2:]

    try:
        return execute_from_command_line(command, args)
    except (CatalogLoadError, CommandError, ConfigurationError, StoreError):
        logging.getLogger("vitalife").exception("%s failed", command)
        return 1


if __name__ == "__main__":
    sys.exit(main())
