"""morphdict CLI - Maintain morphological word lists.

Usage:
    python -m morphdict.main add словари/животные.txt ./новые_слова_животных.txt
    python -m morphdict.main delete словари/животные.txt ./лишние_слова_животных.txt
    python -m morphdict.main sort словари/животные.txt
    python -m morphdict.main detect словари/животные.txt
"""

import argparse
import logging
import sys
from typing import Optional

from . import commands
from . import config as cfg
from .errors import MorphdictError
from .schema import EncodingLabel

NEWLINES = {"lf": "\n", "crlf": "\r\n"}

# Handler installed by setup_logging()
_handler: Optional[logging.Handler] = None

EPILOG = """examples:
  morphdict add словари/животные.txt ./новые_слова_животных.txt
  morphdict delete словари/животные.txt ./лишние_слова_животных.txt
  morphdict sort словари/животные.txt
"""


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--quiet",
        "-q",
        action=argparse.BooleanOptionalAction,
        help="Only print warnings and errors (default: from config, off)",
    )
    common.add_argument(
        "--verbose",
        "-v",
        action=argparse.BooleanOptionalAction,
        help="Print debug details (default: from config, off)",
    )
    common.add_argument(
        "--config",
        "-c",
        type=str,
        help="Path to config.json",
    )

    writer = argparse.ArgumentParser(add_help=False)
    writer.add_argument(
        "--newline",
        choices=sorted(NEWLINES),
        help="Line terminator to write (default: from config, lf)",
    )
    writer.add_argument(
        "--replace-unencodable",
        action="store_true",
        help="Write '?' for characters the dictionary's encoding cannot hold "
        "instead of aborting",
    )

    parser = _Parser(
        prog="morphdict",
        description="morphdict - Maintain morphological word lists "
        "(UTF-8 or Windows-1251)",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    add = subparsers.add_parser(
        "add", parents=[common, writer], help="Add words to a dictionary"
    )
    add.add_argument("dictionary", help="Dictionary file")
    add.add_argument("words", help="File with new words")

    delete = subparsers.add_parser(
        "delete", parents=[common, writer], help="Delete words from a dictionary"
    )
    delete.add_argument("dictionary", help="Dictionary file")
    delete.add_argument("words", help="File with words to delete")

    sort = subparsers.add_parser(
        "sort",
        parents=[common, writer],
        help="Sort a dictionary and remove duplicates",
    )
    sort.add_argument("dictionary", help="Dictionary file")

    detect = subparsers.add_parser(
        "detect", parents=[common], help="Print the detected encoding of a file"
    )
    detect.add_argument("dictionary", help="File to inspect")

    return parser


def setup_logging(quiet: bool = False, verbose: bool = False) -> None:
    """Send progress messages to stderr."""
    logger = logging.getLogger("morphdict")
    if verbose:
        logger.setLevel(logging.DEBUG)
    elif quiet:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.INFO)

    # Rebind to the current stderr on every call
    global _handler
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(_handler)


def resolve_flag(value: Optional[bool], key: str) -> bool:
    """Use the CLI flag when given, else the config default."""
    if value is not None:
        return value
    return bool(cfg.get_default(key, cfg.FALLBACK_DEFAULTS[key]))


def make_settings(args: argparse.Namespace) -> cfg.Settings:
    """Build write settings from config defaults and CLI flags."""
    settings = cfg.Settings.from_config()
    if getattr(args, "newline", None):
        settings.newline = NEWLINES[args.newline]
    if getattr(args, "replace_unencodable", False):
        settings.unencodable = "replace"
    return settings


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help(sys.stderr)
        return 1

    if args.config:
        cfg.load(args.config)
    setup_logging(
        quiet=resolve_flag(args.quiet, "quiet"),
        verbose=resolve_flag(args.verbose, "verbose"),
    )

    try:
        if args.command == "detect":
            encoding = commands.detect(args.dictionary)
            print(encoding)
            return 0 if encoding is not EncodingLabel.UNKNOWN else 1

        settings = make_settings(args)
        if args.command == "add":
            report = commands.add_words(args.dictionary, args.words, settings)
        elif args.command == "delete":
            report = commands.delete_words(args.dictionary, args.words, settings)
        else:
            report = commands.sort_dictionary(args.dictionary, settings)
    except (MorphdictError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(report.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
