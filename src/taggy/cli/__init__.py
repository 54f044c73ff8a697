"""Command-line interface for taggy.

This package provides the 'taggy' command-line tool with three subcommands:
    read: Show the tags of an audio file
    write: Write a tag into an audio file
    remove: Delete one tag type, or all tags, from an audio file

Modules:
    commands/: Command implementations (read, write, remove)
    schemas.py: Pydantic models for --json output
    utils.py: CLI utility functions
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich_argparse import RichHelpFormatter

from .. import __version__
from .commands import cmd_read, cmd_remove, cmd_write
from .utils import parse_tag_type, setup_logging

__all__ = [
    "main",
    "cmd_read",
    "cmd_write",
    "cmd_remove",
    "setup_logging",
]


class RichRawHelpFormatter(RichHelpFormatter, argparse.RawDescriptionHelpFormatter):
    """Combines Rich formatting with the ability to keep line breaks (Raw)."""

    pass


def build_parser() -> argparse.ArgumentParser:
    # Parent parser for shared options
    parent_parser = argparse.ArgumentParser(add_help=False)

    parent_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parent_parser.add_argument(
        "-l",
        "--log-level",
        default=None,
        help="Set logging level (disabled by default)",
    )
    parent_parser.add_argument("-c", "--config", help="Path to configuration file")

    parser = argparse.ArgumentParser(
        prog="taggy",
        usage="taggy <command> [options]",
        description="taggy - Read, write and remove audio file tags",
        formatter_class=RichRawHelpFormatter,
        parents=[parent_parser],
    )

    # Subcommands
    subparsers = parser.add_subparsers(
        title="Commands",
        dest="command",
        metavar="",
    )

    # ──────────────────────────────
    # read
    # ──────────────────────────────
    read_parser = subparsers.add_parser(
        "read",
        help="Show the tags of an audio file",
        usage="taggy read <path> [--primary | --any] [--json]",
        description="Read an audio file and show its properties and tags",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    read_parser.add_argument("path", help="Path to the audio file")
    which = read_parser.add_mutually_exclusive_group()
    which.add_argument("--primary", action="store_true", help="Only show the primary tag")
    which.add_argument("--any", action="store_true", help="Only show the first tag found")
    read_parser.add_argument("--json", action="store_true", help="Print JSON output")
    read_parser.set_defaults(func=cmd_read)

    # ──────────────────────────────
    # write
    # ──────────────────────────────
    write_parser = subparsers.add_parser(
        "write",
        help="Write a tag into an audio file",
        usage="taggy write <path> [fields] [--type TYPE] [--keep-others | --override]",
        description=(
            "Write a tag. Without --type it becomes the file's primary tag; "
            "with --type it is written as that tag type."
        ),
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    write_parser.add_argument("path", help="Path to the audio file")
    fields = write_parser.add_argument_group("Fields")
    for option, help_text in (
        ("--title", "Track title"),
        ("--artist", "Track artist"),
        ("--album", "Album title"),
        ("--album-artist", "Album artist"),
        ("--composer", "Composer"),
        ("--producer", "Producer"),
        ("--genre", "Genre"),
        ("--comment", "Comment"),
        ("--lyrics", "Lyrics"),
        ("--language", "Language"),
        ("--copyright", "Copyright"),
        ("--date", "Recording date (e.g. 2004-05-01), must agree with --year"),
        ("--original-date", "Original release date"),
    ):
        fields.add_argument(option, help=help_text)
    for option, help_text in (
        ("--year", "Year"),
        ("--track", "Track number"),
        ("--track-total", "Number of tracks"),
        ("--disc", "Disc number"),
        ("--disc-total", "Number of discs"),
    ):
        fields.add_argument(option, type=int, metavar="N", help=help_text)
    fields.add_argument("--cover", metavar="IMG", help="Front cover image file")
    write_parser.add_argument(
        "--type",
        type=parse_tag_type,
        default=None,
        help="Tag type to write (id3v2, id3v1, ape, mp4_ilst, vorbis_comments, ...)",
    )
    mode = write_parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--keep-others",
        dest="override",
        action="store_false",
        help="Keep the other tags of the file (default)",
    )
    mode.add_argument(
        "--override",
        dest="override",
        action="store_true",
        help="Remove every other tag of the file",
    )
    write_parser.add_argument(
        "--id3v2-version",
        type=int,
        choices=[3, 4],
        help="ID3v2 version to write (default from config, 4)",
    )
    write_parser.add_argument("--json", action="store_true", help="Print JSON output")
    write_parser.set_defaults(func=cmd_write, override=False)

    # ──────────────────────────────
    # remove
    # ──────────────────────────────
    remove_parser = subparsers.add_parser(
        "remove",
        help="Remove tags from an audio file",
        usage="taggy remove <path> [--type TYPE]",
        description="Remove one tag type, or every tag when --type is omitted",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    remove_parser.add_argument("path", help="Path to the audio file")
    remove_parser.add_argument(
        "--type",
        type=parse_tag_type,
        default=None,
        help="Tag type to remove (id3v2, id3v1, ape, ..., primary)",
    )
    remove_parser.add_argument("--json", action="store_true", help="Print JSON output")
    remove_parser.set_defaults(func=cmd_remove)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()

    # Parse args
    args = parser.parse_args(argv)

    # Show help if no command is provided
    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Logging setup
    if args.log_level:
        setup_logging(args.log_level)
    else:
        setup_logging("critical")

    # Execute command
    try:
        args.func(args)
    except KeyboardInterrupt:
        logging.info("\nOperation cancelled by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
