"""
Tag subpackage - unified tag model and the mutagen-backed native layer.

This package provides one model for the metadata embedded in audio files
(ID3v1, ID3v2, APE, Vorbis comments, MP4 ilst, RIFF INFO, AIFF text) and
the adapter that converts it to and from each native representation.
"""

from .adapter import Adapter, from_native, primary_tag_type_of, supported_tag_types_of, to_native
from .core import Tag, TagType
from .formats import FileType
from .mappings import setup_all_mappings
from .picture import MimeType, Picture, PictureType
from .taggy_file import AudioProperties, TaggyFile

# Initialize all tag field mappings
setup_all_mappings()

__all__ = [
    "Adapter",
    "AudioProperties",
    "FileType",
    "MimeType",
    "Picture",
    "PictureType",
    "Tag",
    "TagType",
    "TaggyFile",
    "from_native",
    "primary_tag_type_of",
    "supported_tag_types_of",
    "to_native",
]
