"""Write command - Write a tag into an audio file."""

import argparse
import logging
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console

from ... import api
from ...errors import NotFoundError, TaggyError
from ...tag import Picture, PictureType, Tag, TagType
from ...tag.utils import detect_mime_type
from ..schemas import TaggyFileResponse
from ..utils import exit_with_error, json_output, load_config, use_json_output
from .read import print_taggy_file

# Command line option -> Tag field
FIELD_OPTIONS = {
    "title": "title",
    "artist": "artist",
    "album": "album",
    "album_artist": "album_artist",
    "composer": "composer",
    "producer": "producer",
    "genre": "genre",
    "comment": "comment",
    "lyrics": "lyrics",
    "language": "language",
    "copyright": "copyright",
    "date": "recording_date",
    "original_date": "original_release_date",
    "year": "year",
    "track": "track_number",
    "track_total": "track_total",
    "disc": "disc_number",
    "disc_total": "disc_total",
}


def build_tag(args: argparse.Namespace) -> Tag:
    """Build the tag described by the field options.

    Raises:
        NotFoundError: if the --cover image cannot be read
    """
    values = {}
    for option, field in FIELD_OPTIONS.items():
        value = getattr(args, option, None)
        if value is not None:
            values[field] = value

    if args.cover:
        cover_path = Path(args.cover)
        try:
            data = cover_path.read_bytes()
        except OSError as e:
            raise NotFoundError(f"Cannot read cover image {cover_path}: {e.strerror}") from e
        values["pictures"] = (
            Picture(pic_type=PictureType.COVER_FRONT, pic_data=data, mime_type=detect_mime_type(data)),
        )

    return Tag(tag_type=args.type or TagType.FILE_PRIMARY_TYPE, **values)


def cmd_write(args: argparse.Namespace) -> None:
    """Write a tag into an audio file.

    Without --type the tag becomes the file's primary tag; with --type it is
    written as that tag type next to the existing tags.

    Args:
        args: Parsed command-line arguments

    Exit Codes:
        0: Success
        10: Path (or cover image) not found
        20: File could not be parsed
        2: Conflicting --year and --date
        30: Saving failed
    """
    config = load_config(args)
    use_json = use_json_output(args, config)
    console = Console(quiet=use_json)

    options = config.get_write_options()
    if args.id3v2_version:
        options = options.model_copy(update={"id3v2_version": args.id3v2_version})

    try:
        tag = build_tag(args)
        if args.type is None:
            logging.info("Writing primary tag to %s", args.path)
            taggy_file = api.write_primary(args.path, tag, keep_others=not args.override, options=options)
        else:
            logging.info("Writing %s tag to %s", args.type.value, args.path)
            taggy_file = api.write_all(args.path, [tag], override_existent=args.override, options=options)
    except (TaggyError, ValidationError) as e:
        exit_with_error(e, use_json)

    if use_json:
        json_output(TaggyFileResponse(file=taggy_file))
        return

    console.print(f"[green]✓ Tags written to {args.path}[/green]\n")
    print_taggy_file(console, taggy_file)
