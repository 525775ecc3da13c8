#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""

import os
import sys


def main() -> None:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "lume.settings")
    from django.core.management import execute_from_command_line

    argv = sys.argv
    if len(argv) == 2 and argv[1] == "runserver":
        from lume.config import get_settings

        argv = [*argv, f"0.0.0.0:{get_settings().PORT}"]
    execute_from_command_line(argv)


if __name__ == "__main__":
    main()
