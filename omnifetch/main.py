#!/usr/bin/env python3
"""
Main entry point for omnifetch.
"""

import os
import sys
import socket
import argparse
import logging

from .exceptions import OmnifetchError, EnvironmentVariableError
from .modules import collect_facts
from .ui import FENIX, OMNIOS, render

logger = logging.getLogger("omnifetch")


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Print information about an OmniOS machine")
    parser.add_argument("-d", "--debug", action="store_true", help="Log probe activity to stderr")
    parser.add_argument("--version", action="store_true", help="Show version information")
    return parser.parse_args(argv)


def setup_logging(debug: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def get_user() -> str:
    """Return the login name from $USER."""
    user = os.environ.get("USER")
    if user is None:
        raise EnvironmentVariableError("USER")
    return user


def get_hostname() -> str:
    return socket.gethostname()


def show_version():
    """Show version information."""
    from . import __version__
    print(f"omnifetch version {__version__}")


def run():
    """Collect every fact, then print the rendering. Nothing is printed if collection fails."""
    user = get_user()
    hostname = get_hostname()
    facts = collect_facts()

    for line in render(user, hostname, facts, FENIX, OMNIOS):
        print(line)


def main(argv=None):
    """Main function."""
    args = parse_arguments(argv)

    if args.version:
        show_version()
        sys.exit(0)

    setup_logging(args.debug)

    try:
        run()
    except OmnifetchError as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Operation cancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
