"""Plain text field mappings for the key/value tag formats."""

from mutagen.apev2 import APEv2
from mutagen.flac import VCFLACDict
from mutagen.mp4 import MP4Tags

from ..adapter import Adapter
from ..core import TagType

ITUNES_FREEFORM = "----:com.apple.iTunes:"


def setup_default_mappings():
    """Register the empty containers and the basic text keys of each format."""

    # Native containers
    # -----------------
    for tag_type, factory in {
        TagType.VORBIS_COMMENTS: VCFLACDict,
        TagType.APE: APEv2,
        TagType.MP4_ILST: MP4Tags,
        TagType.RIFF_INFO: dict,
        TagType.AIFF_TEXT: dict,
    }.items():
        Adapter.RegisterFormat(tag_type, factory)

    # Basic text fields
    # -----------------
    for tag_type, tag_dict in {
        TagType.VORBIS_COMMENTS: {
            "title": "TITLE",
            "artist": "ARTIST",
            "album": "ALBUM",
            "album_artist": "ALBUMARTIST",
            "composer": "COMPOSER",
            "producer": "PRODUCER",
            "genre": "GENRE",
            "comment": "COMMENT",
            "lyrics": "LYRICS",
            "language": "LANGUAGE",
            "copyright": "COPYRIGHT",
            "original_release_date": "ORIGINALDATE",
        },
        TagType.APE: {
            "title": "Title",
            "artist": "Artist",
            "album": "Album",
            "album_artist": "Album Artist",
            "composer": "Composer",
            "producer": "Producer",
            "genre": "Genre",
            "comment": "Comment",
            "lyrics": "Lyrics",
            "language": "Language",
            "copyright": "Copyright",
            "original_release_date": "Original Year",
        },
        TagType.MP4_ILST: {
            "title": "\xa9nam",
            "artist": "\xa9ART",
            "album": "\xa9alb",
            "album_artist": "aART",
            "composer": "\xa9wrt",
            "genre": "\xa9gen",
            "comment": "\xa9cmt",
            "lyrics": "\xa9lyr",
            "copyright": "cprt",
        },
        TagType.RIFF_INFO: {
            "title": "INAM",
            "artist": "IART",
            "album": "IPRD",
            "composer": "IMUS",
            "genre": "IGNR",
            "comment": "ICMT",
            "language": "ILNG",
            "copyright": "ICOP",
        },
        TagType.AIFF_TEXT: {
            "title": "NAME",
            "artist": "AUTH",
            "comment": "ANNO",
            "copyright": "(c) ",
        },
    }.items():
        for name, key in tag_dict.items():
            Adapter.RegisterBasicKey(name, key, tag_type)

    # MP4 freeform atoms
    # ------------------
    # Values of ----:com.apple.iTunes:* atoms are raw UTF-8 bytes.
    def freeform(key):
        atom = ITUNES_FREEFORM + key

        def getter(native):
            return native.fields[atom]

        def setter(native, value):
            native.fields[atom] = [str(value).encode("utf-8")]

        return getter, setter

    for name, key in {
        "producer": "PRODUCER",
        "language": "LANGUAGE",
        "original_release_date": "ORIGINALDATE",
    }.items():
        Adapter.RegisterKey(name, TagType.MP4_ILST, *freeform(key))
