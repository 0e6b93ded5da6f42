"""
Command-line entry point for lsh.

Usage:
    lsh [--prompt TEXT] [--log-level LEVEL]
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import DEFAULT_ERROR_PREFIX, ShellConfig
from .exceptions import AllocationError, ConfigurationError, FatalError
from .exit_codes import EXIT_FAILURE, EXIT_INTERRUPTED
from .shell import Shell

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(name)s: %(levelname)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lsh",
        description="Minimal interactive command interpreter",
    )
    parser.add_argument("--prompt", help="prompt printed before each command (env: LSH_PROMPT)")
    parser.add_argument("--log-level", help="logging level, e.g. DEBUG (env: LSH_LOG_LEVEL)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(level: int) -> None:
    """Send diagnostic records to stderr, separate from command output."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments, build the shell and run its loop.

    Returns:
        0 after exit or end of input, 1 on a fatal error, 2 on bad configuration,
        130 when interrupted
    """
    args = build_parser().parse_args(argv)

    try:
        config = ShellConfig.from_env().with_overrides(
            prompt=args.prompt,
            log_level=args.log_level,
        )
    except ConfigurationError as e:
        sys.stderr.write(f"{DEFAULT_ERROR_PREFIX}: {e}\n")
        return e.exit_code

    configure_logging(config.numeric_log_level)

    try:
        return Shell(config=config).run()
    except (FatalError, MemoryError) as e:
        logger.debug("fatal error", exc_info=True)
        sys.stderr.write(f"{config.error_prefix}: {e or AllocationError()}\n")
        sys.stderr.flush()
        return EXIT_FAILURE
    except KeyboardInterrupt:
        sys.stdout.write("\n")
        sys.stdout.flush()
        return EXIT_INTERRUPTED
