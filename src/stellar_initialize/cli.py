#!/usr/bin/env python3
"""Command-line interface for stellar-initialize."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import load_settings
from .constants import DEFAULT_PROFILE, PROFILES, STAGES
from .exceptions import CommandFailedError, InitializeError, ToolNotFoundError
from .pipeline import initialize

LOG = logging.getLogger(__name__)

# Conventional shell statuses: missing executable, and 128+N for signal N
EXIT_TOOL_NOT_FOUND = 127
EXIT_SIGNAL_BASE = 128


# The log file also records which module logged each line
CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.

    Log lines go to stderr so they never interleave with the stdout the
    external tools stream (or that a captured deploy returns).

    Args:
        log_level: Level name, e.g. "INFO"
        log_file: Optional file that also receives every record

    Returns:
        The `stellar_initialize` logger
    """
    logger = logging.getLogger("stellar_initialize")
    logger.setLevel(getattr(logging, log_level.upper()))

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def exit_status(returncode: int) -> int:
    """Map a subprocess return code to a shell exit status (-N becomes 128+N)."""
    if returncode < 0:
        return EXIT_SIGNAL_BASE - returncode
    return returncode


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stellar-initialize",
        description="Build, deploy and generate client imports for Soroban contracts",
    )
    parser.add_argument("--root", default=".",
                        help="Project root (default: current directory)")
    parser.add_argument("--profile", default=DEFAULT_PROFILE, choices=sorted(PROFILES),
                        help=f"Toolchain variant (default: {DEFAULT_PROFILE})")
    parser.add_argument("--env-file", default=None,
                        help="Path to .env file (default: <root>/.env)")
    parser.add_argument("--skip", action="append", default=[], choices=STAGES,
                        metavar="STAGE", help=f"Skip a stage, repeatable ({', '.join(STAGES)})")
    parser.add_argument("--check-rpc", action="store_true",
                        help="Check RPC health before touching the network")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Log level")
    parser.add_argument("--log-file", default=None,
                        help="Also write logs to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the pipeline from the command line.

    Returns:
        Process exit status: 0 on success, the failing tool's status on
        command failure (128+N if it was killed by signal N), 127 for a
        missing tool, 1 for other errors
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    LOG.info("###################### Initializing ########################")

    try:
        settings = load_settings(args.root, args.profile, env_file=args.env_file)
        initialize(settings, skip=args.skip, check_rpc=args.check_rpc)
    except CommandFailedError as e:
        LOG.error(str(e))
        return exit_status(e.returncode)
    except ToolNotFoundError as e:
        LOG.error(str(e))
        return EXIT_TOOL_NOT_FOUND
    except InitializeError as e:
        LOG.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
