"""Logging setup for the CLI - all output goes to stderr."""

import logging
import sys


def setup_logging(verbose: bool = False, debug: bool = False):
    """Progress at INFO when verbose, per-document detail at DEBUG, else errors only."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr, force=True)
