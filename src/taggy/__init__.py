"""taggy.

Read, write and remove the metadata tags embedded in audio files through one
format-independent model. mutagen does the byte-level work.

Main modules:
    api: The read/write/remove operations
    tag: Tag, Picture and TaggyFile models and the native tag adapter
    cli: Command-line interface (taggy command)

Core modules:
    config: Configuration management
    errors: Exceptions raised by the operations
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("taggy")
except PackageNotFoundError:
    # Package not installed
    __version__ = "0.1.0"

from .api import (
    read_all,
    read_any,
    read_primary,
    remove_all,
    remove_tag,
    write_all,
    write_primary,
)
from .config import Config, WriteOptions
from .errors import NotFoundError, ParseError, SaveError, TaggyError
from .tag import (
    AudioProperties,
    FileType,
    MimeType,
    Picture,
    PictureType,
    Tag,
    TaggyFile,
    TagType,
)

__all__ = [
    "__version__",
    "read_all",
    "read_any",
    "read_primary",
    "remove_all",
    "remove_tag",
    "write_all",
    "write_primary",
    "Config",
    "WriteOptions",
    "NotFoundError",
    "ParseError",
    "SaveError",
    "TaggyError",
    "AudioProperties",
    "FileType",
    "MimeType",
    "Picture",
    "PictureType",
    "Tag",
    "TaggyFile",
    "TagType",
]
