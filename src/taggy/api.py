"""The seven tag operations.

Each call opens the file once, works on it, and releases the handle before
returning, also when an error is raised. Reads open the file read-only;
writes open it for reading and writing and save before returning.

Failures are raised as taggy.errors.NotFoundError, ParseError or SaveError.
"""

import logging
from typing import Iterable, Optional

from .config import WriteOptions
from .tag import Tag, TaggyFile, TagType, to_native
from .tag.tagged_file import TaggedFile, open_bound, open_tagged


def _resolve(tag_type: TagType, tagged: TaggedFile) -> TagType:
    if tag_type == TagType.FILE_PRIMARY_TYPE:
        return tagged.primary_tag_type()
    return tag_type


def read_all(path: str) -> TaggyFile:
    """Read every tag of the file, in discovery order."""
    with open_tagged(path) as tagged:
        return TaggyFile.from_tagged(tagged, path)


def read_primary(path: str) -> TaggyFile:
    """Read the file, keeping only the tag of the container's primary type."""
    with open_tagged(path) as tagged:
        taggy_file = TaggyFile.from_tagged(tagged, path)
    primary = taggy_file.primary_tag()
    return taggy_file.model_copy(update={"tags": (primary,) if primary else ()})


def read_any(path: str) -> TaggyFile:
    """Read the file, keeping only the first discovered tag."""
    with open_tagged(path) as tagged:
        taggy_file = TaggyFile.from_tagged(tagged, path)
    first = taggy_file.first_tag()
    return taggy_file.model_copy(update={"tags": (first,) if first else ()})


def write_all(
    path: str,
    tags: Iterable[Tag],
    override_existent: bool,
    options: Optional[WriteOptions] = None,
) -> TaggyFile:
    """
    Write several tags at once.

    With override_existent every tag already in the file is dropped first.
    A tag whose type the container cannot host is skipped with a warning;
    the others are still written.
    """
    with open_bound(path) as tagged:
        if override_existent:
            tagged.clear()

        for tag in tags:
            tag = tag.retype(_resolve(tag.tag_type, tagged))
            if tagged.insert_tag(to_native(tag)) is None:
                logging.warning(
                    "The tag type '%s' is not supported for the file type '%s'",
                    tag.tag_type.value,
                    tagged.file_type.value,
                )

        tagged.save(options)
        return TaggyFile.from_tagged(tagged, path)


def write_primary(
    path: str,
    tag: Tag,
    keep_others: bool,
    options: Optional[WriteOptions] = None,
) -> TaggyFile:
    """
    Write tag as the container's primary tag.

    The type carried by tag is ignored. Unless keep_others is set, every
    other tag in the file is dropped.
    """
    with open_bound(path) as tagged:
        if not keep_others:
            tagged.clear()

        tagged.insert_tag(to_native(tag.retype(tagged.primary_tag_type())))
        tagged.save(options)
        return TaggyFile.from_tagged(tagged, path)


def remove_all(path: str, options: Optional[WriteOptions] = None) -> None:
    """Remove every tag from the file."""
    with open_bound(path) as tagged:
        tagged.clear()
        # An explicit empty tag makes the save overwrite the stored bytes
        tagged.insert_tag(to_native(Tag.new(tagged.primary_tag_type())))
        tagged.save(options)


def remove_tag(path: str, tag: Tag, options: Optional[WriteOptions] = None) -> None:
    """
    Remove the tag of tag.tag_type from the file.

    Nothing is written when the file has no such tag.
    """
    with open_bound(path) as tagged:
        tag_type = _resolve(tag.tag_type, tagged)
        if tagged.remove(tag_type) is None:
            logging.debug("No %s tag in %s, nothing to remove", tag_type.value, path)
            return

        tagged.insert_tag(to_native(Tag.new(tag_type)))
        tagged.save(options)
