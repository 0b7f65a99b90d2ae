"""
CLI entry point for the motionpath command.

Usage: motionpath [-v|-q|--log-level LEVEL] [--linear-mode MODE] <filename.cmmd>
"""

import argparse
import logging
import sys

from motionpath import config as cfg
from motionpath.config import LINEAR_MODES, LOG_LEVEL_DEFAULT, OUTPUT_PRECISION, PROGRAM_EXTENSION, TRACE
from motionpath.program import has_program_extension, render_segment, run_program
from motionpath.utils.errors import ProgramIOError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="motionpath", description="Discretize a .cmmd motion program")
    # Arity is checked by main() so a bad call prints usage without failing
    parser.add_argument("files", nargs="*", metavar="filename.cmmd", help="Motion program to process")
    parser.add_argument(
        "--linear-mode",
        choices=LINEAR_MODES,
        default=None,
        help="Linear stepping policy (default: distance, or MOTIONPATH_LINEAR_MODE)",
    )
    parser.add_argument(
        "--precision", type=int, default=OUTPUT_PRECISION, help="Decimal places in waypoint output"
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase verbosity; -v=INFO, -vv=DEBUG, -vvv=TRACE"
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only report errors")
    parser.add_argument(
        "--log-level",
        choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set specific log level",
    )
    return parser


def resolve_log_level(args: argparse.Namespace) -> int:
    if args.log_level:
        return TRACE if args.log_level == "TRACE" else getattr(logging, args.log_level)
    if args.verbose >= 3:
        return TRACE
    if args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    if args.quiet:
        return logging.ERROR
    if cfg.TRACE_ENABLED:
        return TRACE
    level = logging.getLevelName(LOG_LEVEL_DEFAULT)
    return level if isinstance(level, int) else logging.WARNING


def main(argv: list[str] | None = None) -> int:
    """Main entry point; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = resolve_log_level(args)
    if log_level == TRACE:
        cfg.TRACE_ENABLED = True

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    if len(args.files) != 1:
        print(f"Usage: {parser.prog} <filename{PROGRAM_EXTENSION}>")
        return 0

    path = args.files[0]
    if not has_program_extension(path):
        print(f"Invalid file extension. The file must have a {PROGRAM_EXTENSION} extension.")
        return 0

    try:
        result = run_program(path, linear_mode=args.linear_mode)
    except ProgramIOError as e:
        logger.error(str(e))
        print(f"Error reading file: {e.original_message}", file=sys.stderr)
        return 1

    for segment in result.segments:
        for line in render_segment(segment, precision=args.precision):
            print(line)
    return 0


def main_entry():
    """Entry point for the motionpath command."""
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
