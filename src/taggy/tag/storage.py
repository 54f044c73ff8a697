"""Reading and writing of individual tag blocks with mutagen.

A container hosts one or more tag blocks. Some live inside the mutagen file
object itself (FLAC/Ogg comments, MP4 atoms, ID3 chunks in WAV/AIFF); others
are standalone blocks placed around the audio stream (ID3v2 at the start,
APEv2 and the ID3v1 trailer at the end). Each storage class knows how to
load, write and strip one of them through an already open file handle.
"""

import base64
import logging
from typing import Any, Optional

import mutagen.apev2
import mutagen.id3
from mutagen import MutagenError
from mutagen.apev2 import APENoHeaderError, APEv2
from mutagen.flac import Picture as FLACPicture
from mutagen.flac import VCFLACDict
from mutagen.id3 import ID3, ID3NoHeaderError, ID3v1SaveOptions, MakeID3v1, ParseID3v1
from mutagen.mp4 import MP4Tags

from .core import TagType

ID3V1_SIZE = 128
OGG_PICTURE_KEY = "METADATA_BLOCK_PICTURE"


class NativeTag:
    """
    A tag in its native representation.

    fields holds the mutagen object for the format (ID3 frames, APEv2 items,
    Vorbis comments, MP4 atoms) or a plain dict for formats mutagen only
    exposes as key/value pairs. Vorbis pictures are kept apart in pictures,
    because FLAC stores them outside the comment block.
    """

    def __init__(self, tag_type: TagType, fields: Any, pictures=None):
        self.tag_type = tag_type
        self.fields = fields
        self.pictures = list(pictures or [])

    def is_empty(self) -> bool:
        return len(self.fields) == 0 and not self.pictures

    def __repr__(self):
        return f"NativeTag({self.tag_type.value}, {len(self.fields)} fields, {len(self.pictures)} pictures)"


class Storage:
    """Base class for one kind of tag block."""

    tag_type: TagType

    def load(self, audio, fileobj) -> Optional[NativeTag]:
        raise NotImplementedError

    def write(self, audio, fileobj, native: NativeTag, options) -> None:
        raise NotImplementedError

    def strip(self, audio, fileobj, options) -> None:
        raise NotImplementedError


# ---------------------------------------------------------------------------
# Standalone blocks
# ---------------------------------------------------------------------------
class Id3v2Storage(Storage):
    """ID3v2 header at the start of the stream (MPEG, AAC)."""

    tag_type = TagType.ID3V2

    def load(self, audio, fileobj):
        fileobj.seek(0)
        try:
            id3 = ID3(fileobj, load_v1=False)
        except ID3NoHeaderError:
            return None
        return NativeTag(self.tag_type, id3)

    def write(self, audio, fileobj, native, options):
        id3 = native.fields
        if options.id3v2_version == 3:
            id3.update_to_v23()
        fileobj.seek(0)
        # The ID3v1 trailer is rewritten separately, after the APE block.
        id3.save(fileobj, v1=ID3v1SaveOptions.REMOVE, v2_version=options.id3v2_version)

    def strip(self, audio, fileobj, options):
        fileobj.seek(0)
        mutagen.id3.delete(fileobj, delete_v1=False, delete_v2=True)


def read_id3v1(fileobj) -> Optional[bytes]:
    """Return the ID3v1 record ending the file, if there is one."""
    size = fileobj.seek(0, 2)
    if size < ID3V1_SIZE:
        return None
    fileobj.seek(-ID3V1_SIZE, 2)
    data = fileobj.read(ID3V1_SIZE)
    if not data.startswith(b"TAG"):
        return None
    return data


def strip_id3v1(fileobj) -> None:
    if read_id3v1(fileobj) is None:
        return
    size = fileobj.seek(0, 2)
    fileobj.truncate(size - ID3V1_SIZE)


class Id3v1Storage(Storage):
    """The fixed 128 byte ID3v1 record at the very end of the file."""

    tag_type = TagType.ID3V1

    def load(self, audio, fileobj):
        data = read_id3v1(fileobj)
        if data is None:
            return None
        frames = ParseID3v1(data)
        if frames is None:
            return None
        return NativeTag(self.tag_type, dict(frames))

    def write(self, audio, fileobj, native, options):
        strip_id3v1(fileobj)
        fileobj.seek(0, 2)
        fileobj.write(MakeID3v1(native.fields))

    def strip(self, audio, fileobj, options):
        strip_id3v1(fileobj)


class ApeStorage(Storage):
    """APEv2 block at the end of the stream, in front of any ID3v1 trailer."""

    tag_type = TagType.APE

    def load(self, audio, fileobj):
        fileobj.seek(0)
        try:
            ape = APEv2(fileobj)
        except APENoHeaderError:
            return None
        return NativeTag(self.tag_type, ape)

    def write(self, audio, fileobj, native, options):
        # mutagen appends a new APE block after an ID3v1 trailer; the trailer
        # is written again afterwards when the file still holds one.
        strip_id3v1(fileobj)
        fileobj.seek(0)
        native.fields.save(fileobj)

    def strip(self, audio, fileobj, options):
        fileobj.seek(0)
        mutagen.apev2.delete(fileobj)


# ---------------------------------------------------------------------------
# Blocks embedded in the mutagen file object
# ---------------------------------------------------------------------------
class EmbeddedStorage(Storage):
    """A tag held by audio.tags and persisted with audio.save()."""

    def copy_fields(self, tags):
        raise NotImplementedError

    def fill(self, audio, native: NativeTag) -> None:
        for key, value in native.fields.items():
            audio.tags[key] = value

    def save_kwargs(self, options) -> dict:
        return {}

    def load(self, audio, fileobj):
        if audio.tags is None:
            return None
        return NativeTag(self.tag_type, self.copy_fields(audio.tags))

    def write(self, audio, fileobj, native, options):
        if audio.tags is None:
            audio.add_tags()
        audio.tags.clear()
        self.fill(audio, native)
        fileobj.seek(0)
        audio.save(fileobj, **self.save_kwargs(options))

    def strip(self, audio, fileobj, options):
        if audio.tags is None:
            return
        fileobj.seek(0)
        audio.delete(fileobj)


class ChunkId3Storage(EmbeddedStorage):
    """ID3v2 stored in an "ID3 " chunk (WAV, AIFF)."""

    tag_type = TagType.ID3V2

    def copy_fields(self, tags):
        id3 = ID3()
        for frame in tags.values():
            id3.add(frame)
        return id3

    def fill(self, audio, native):
        for frame in native.fields.values():
            audio.tags.add(frame)

    def write(self, audio, fileobj, native, options):
        if options.id3v2_version == 3:
            native.fields.update_to_v23()
        super().write(audio, fileobj, native, options)

    def save_kwargs(self, options):
        return {"v2_version": options.id3v2_version}


class Mp4Storage(EmbeddedStorage):
    """The ilst atom of an MP4 container."""

    tag_type = TagType.MP4_ILST

    def copy_fields(self, tags):
        fields = MP4Tags()
        for key, value in tags.items():
            fields[key] = value
        return fields


class FlacStorage(EmbeddedStorage):
    """FLAC vorbis comment block plus the separate picture blocks."""

    tag_type = TagType.VORBIS_COMMENTS

    def copy_fields(self, tags):
        fields = VCFLACDict()
        fields.extend(tags)
        return fields

    def load(self, audio, fileobj):
        fields = self.copy_fields(audio.tags) if audio.tags is not None else VCFLACDict()
        return NativeTag(self.tag_type, fields, audio.pictures)

    def fill(self, audio, native):
        audio.tags.extend(list(native.fields))
        audio.clear_pictures()
        for picture in native.pictures:
            audio.add_picture(picture)

    def strip(self, audio, fileobj, options):
        if audio.tags is not None:
            audio.tags.clear()
        audio.clear_pictures()
        fileobj.seek(0)
        audio.save(fileobj)


class OggStorage(EmbeddedStorage):
    """Vorbis comments of an Ogg stream, pictures as METADATA_BLOCK_PICTURE."""

    tag_type = TagType.VORBIS_COMMENTS

    def load(self, audio, fileobj):
        fields = VCFLACDict()
        pictures = []
        for key, value in audio.tags:
            if key.upper() != OGG_PICTURE_KEY:
                fields.append((key, value))
                continue
            try:
                pictures.append(FLACPicture(base64.b64decode(value)))
            except (ValueError, MutagenError) as e:
                logging.warning("Skipping unreadable %s: %s", OGG_PICTURE_KEY, e)
        return NativeTag(self.tag_type, fields, pictures)

    def fill(self, audio, native):
        audio.tags.extend(list(native.fields))
        for picture in native.pictures:
            encoded = base64.b64encode(picture.write()).decode("ascii")
            audio.tags.append((OGG_PICTURE_KEY, encoded))
