"""Command-line front door for lookfor.

Parses CLI options, merges them with the optional YAML configuration, builds
the FilterSpec (rejecting a bad pattern before anything is walked) and streams
matching paths to standard output.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from . import __version__
from .config.parser import ConfigurationError, load_config
from .models.config import LoggingConfig, SearchDefaults
from .models.filter_spec import FilterSpec, InvalidPatternError, TypeFilter
from .search import find_entries, write_results
from .tools.fs_walker import FSWalker


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def _non_negative_int(value: str) -> int:
    """argparse type for depth values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lookfor",
        description="A small, fast alternative to `find`.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                   # List everything below the current directory
  %(prog)s src --ext py                      # Python files under src/
  %(prog)s -n test --type file               # Files whose name contains "test"
  %(prog)s -n '^test_' --regex               # Names starting with "test_"
  %(prog)s --max-depth 1 --hidden            # Immediate children, dotfiles included
""",
    )
    parser.add_argument("path", nargs="?", default=".", help="Root path to start searching from (default: .)")
    parser.add_argument("-n", "--name", help="Match on file/directory name (substring, or regex with --regex)")
    parser.add_argument(
        "--regex",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Treat --name as a regular expression (--no-regex overrides the config file)",
    )
    parser.add_argument("-e", "--ext", help="Match on file extension, case-insensitively (e.g. 'py', 'txt')")
    parser.add_argument(
        "--max-depth",
        type=_non_negative_int,
        default=None,
        help="Maximum depth to descend (0 = the root only, 1 = the root's immediate contents)",
    )
    parser.add_argument(
        "--hidden",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include hidden files and directories (--no-hidden overrides the config file)",
    )
    parser.add_argument(
        "--type",
        choices=[t.value for t in TypeFilter],
        default=None,
        help="Filter on type: file, dir, or any (default: any)",
    )
    parser.add_argument("--config", metavar="FILE", help="YAML file providing default options")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-v for info, -vv for debug)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbosity: int, settings: LoggingConfig) -> None:
    """Send log records to stderr; -v flags override the configured level."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = settings.get_level()

    logging.basicConfig(level=level, format=settings.format, stream=sys.stderr, force=True)


def resolve_filter_spec(args: argparse.Namespace, defaults: SearchDefaults) -> FilterSpec:
    """
    Merge parsed arguments over configured defaults into a FilterSpec.

    Raises:
        InvalidPatternError: If the name pattern does not compile
    """
    return FilterSpec.from_options(
        name=args.name,
        regex=args.regex if args.regex is not None else defaults.regex,
        ext=args.ext,
        entry_type=args.type if args.type is not None else defaults.type,
        max_depth=args.max_depth if args.max_depth is not None else defaults.max_depth,
        hidden=args.hidden if args.hidden is not None else defaults.hidden,
    )


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush cannot fail again."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        pass


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, run the search and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        result = load_config(args.config)
    except ConfigurationError as e:
        print(f"{parser.prog}: {e}", file=sys.stderr)
        return EXIT_ERROR

    configure_logging(args.verbose, result.config.logging)
    for warning in result.warnings:
        logger.warning(warning)

    try:
        spec = resolve_filter_spec(args, result.config.defaults)
    except InvalidPatternError as e:
        print(e, file=sys.stderr)
        return EXIT_ERROR

    if hasattr(sys.stdout, "reconfigure"):
        # Names that are not valid UTF-8 are written back byte for byte
        sys.stdout.reconfigure(errors="surrogateescape")

    walker = FSWalker(max_depth=spec.max_depth)
    try:
        count = write_results(find_entries(args.path, spec, walker), sys.stdout)
        sys.stdout.flush()
    except BrokenPipeError:
        _silence_stdout()
        return EXIT_OK

    stats = walker.get_stats()
    logger.debug(
        f"Reported {count} of {stats['entries_seen']} entries "
        f"({stats['directories_traversed']} directories read, {stats['errors']} unreadable)"
    )
    return EXIT_OK


def run() -> None:
    """Console-script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(EXIT_INTERRUPTED)
