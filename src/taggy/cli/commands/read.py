"""Read command - Display the tags of an audio file."""

import argparse

from rich.console import Console
from rich.table import Table

from ... import api
from ...errors import TaggyError
from ...tag import TaggyFile
from ...tag.core import NUMBER_FIELDS, TEXT_FIELDS
from ..schemas import TaggyFileResponse
from ..utils import exit_with_error, format_value, json_output, load_config, use_json_output


def print_taggy_file(console: Console, taggy_file: TaggyFile) -> None:
    """Print a file summary followed by one table per tag."""
    table = Table(title="File", show_header=False)
    table.add_column("Field", style="cyan", width=18)
    table.add_column("Value", style="magenta")

    properties = taggy_file.properties
    table.add_row("Path", taggy_file.path)
    table.add_row("File Type", taggy_file.file_type.value)
    table.add_row("Primary Tag", taggy_file.primary_tag_type.value)
    table.add_row("Size", f"{taggy_file.size:,} bytes")
    if properties.duration is not None:
        table.add_row("Duration", f"{properties.duration:.2f} s")
    for label, value in (
        ("Bitrate", properties.bitrate),
        ("Sample Rate", properties.sample_rate),
        ("Bit Depth", properties.bit_depth),
        ("Channels", properties.channels),
    ):
        if value is not None:
            table.add_row(label, str(value))

    console.print(table)
    console.print()

    if not taggy_file.tags:
        console.print("[yellow]No tags found[/yellow]")
        return

    for tag in taggy_file.tags:
        tag_table = Table(title=f"{tag.tag_type.value} tag")
        tag_table.add_column("Field", style="cyan", width=22)
        tag_table.add_column("Value", style="magenta")

        for name in TEXT_FIELDS + NUMBER_FIELDS:
            value = format_value(getattr(tag, name))
            if value is None:
                continue
            # Truncate long data for display
            if len(value) > 60:
                value = value[:57] + "..."
            tag_table.add_row(name, value)

        for index, picture in enumerate(tag.pictures):
            mime = picture.mime_type.value if picture.mime_type else "unknown"
            tag_table.add_row(
                f"picture {index}",
                f"{picture.pic_type.name.lower()} ({mime}, {len(picture.pic_data):,} bytes)",
            )

        console.print(tag_table)
        console.print()


def cmd_read(args: argparse.Namespace) -> None:
    """Read and display the tags of an audio file.

    Args:
        args: Parsed command-line arguments

    Exit Codes:
        0: Success
        10: Path not found
        20: File could not be parsed
    """
    config = load_config(args)
    use_json = use_json_output(args, config)
    console = Console(quiet=use_json)

    if args.primary:
        operation = api.read_primary
    elif args.any:
        operation = api.read_any
    else:
        operation = api.read_all

    try:
        taggy_file = operation(args.path)
    except TaggyError as e:
        exit_with_error(e, use_json)

    if use_json:
        json_output(TaggyFileResponse(file=taggy_file))
        return

    print_taggy_file(console, taggy_file)
