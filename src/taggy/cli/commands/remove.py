"""Remove command - Delete tags from an audio file."""

import argparse

from rich.console import Console

from ... import api
from ...errors import TaggyError
from ...tag import Tag
from ..schemas import SuccessResponse
from ..utils import exit_with_error, json_output, load_config, use_json_output


def cmd_remove(args: argparse.Namespace) -> None:
    """Remove one tag type, or every tag, from an audio file.

    Args:
        args: Parsed command-line arguments

    Exit Codes:
        0: Success (also when there was nothing to remove)
        10: Path not found
        20: File could not be parsed
        30: Saving failed
    """
    config = load_config(args)
    use_json = use_json_output(args, config)
    console = Console(quiet=use_json)
    options = config.get_write_options()

    try:
        if args.type is None:
            api.remove_all(args.path, options=options)
            message = "All tags removed"
        else:
            api.remove_tag(args.path, Tag.new(args.type), options=options)
            message = f"{args.type.value} tag removed"
    except TaggyError as e:
        exit_with_error(e, use_json)

    if use_json:
        json_output(SuccessResponse(path=args.path, message=message))
        return

    console.print(f"[green]✓ {message} from {args.path}[/green]")
