#!/usr/bin/env python3
import argparse
import logging
import sys

from textual.logging import TextualHandler

from . import __version__
from .errors import InstallerError
from .wizard import run_wizard

logger = logging.getLogger("installer_tui")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="installer-tui", description="EndeavourOS installer mockup.")
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        handlers=[TextualHandler()],
    )

    try:
        run_wizard()
    except InstallerError as exc:
        logger.debug("exiting after failure", exc_info=exc)
        print(f"installer-tui: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
