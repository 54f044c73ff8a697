"""Audio container definitions and format probing."""

import logging
from enum import Enum
from typing import Dict, Tuple

import mutagen
from mutagen import MutagenError
from mutagen.aac import AAC
from mutagen.aiff import AIFF
from mutagen.flac import FLAC
from mutagen.monkeysaudio import MonkeysAudio
from mutagen.mp3 import MP3
from mutagen.mp4 import MP4
from mutagen.musepack import Musepack
from mutagen.oggopus import OggOpus
from mutagen.oggspeex import OggSpeex
from mutagen.oggvorbis import OggVorbis
from mutagen.wave import WAVE
from mutagen.wavpack import WavPack

from ..errors import ParseError
from .core import TagType
from .storage import (
    ApeStorage,
    ChunkId3Storage,
    FlacStorage,
    Id3v1Storage,
    Id3v2Storage,
    Mp4Storage,
    OggStorage,
    Storage,
)


class FileType(str, Enum):
    """Audio container formats."""

    AAC = "Aac"
    AIFF = "Aiff"
    APE = "Ape"
    FLAC = "Flac"
    MPEG = "Mpeg"
    MP4 = "Mp4"
    MPC = "Mpc"
    OPUS = "Opus"
    SPEEX = "Speex"
    VORBIS = "Vorbis"
    WAV = "Wav"
    WAVPACK = "WavPack"


class Container:
    """
    What a container can host: the mutagen class that parses it, the tag
    type it prefers, and one storage per tag type it supports, in discovery
    order. Files with an ID3v1 trailer list it last so it is written last.
    """

    def __init__(
        self,
        file_type: FileType,
        mutagen_type: type,
        primary_tag_type: TagType,
        *storages: Storage,
    ):
        self.file_type = file_type
        self.mutagen_type = mutagen_type
        self.primary_tag_type = primary_tag_type
        self.storages: Dict[TagType, Storage] = {s.tag_type: s for s in storages}

    @property
    def supported_tag_types(self) -> Tuple[TagType, ...]:
        return tuple(self.storages)


CONTAINERS = {
    c.file_type: c
    for c in (
        # MPEG / Apple
        Container(FileType.MPEG, MP3, TagType.ID3V2, Id3v2Storage(), ApeStorage(), Id3v1Storage()),
        Container(FileType.AAC, AAC, TagType.ID3V2, Id3v2Storage(), Id3v1Storage()),
        Container(FileType.MP4, MP4, TagType.MP4_ILST, Mp4Storage()),
        Container(FileType.AIFF, AIFF, TagType.ID3V2, ChunkId3Storage()),
        # Microsoft
        Container(FileType.WAV, WAVE, TagType.ID3V2, ChunkId3Storage()),
        # Xiph.Org (FLAC & Ogg)
        Container(FileType.FLAC, FLAC, TagType.VORBIS_COMMENTS, FlacStorage()),
        Container(FileType.VORBIS, OggVorbis, TagType.VORBIS_COMMENTS, OggStorage()),
        Container(FileType.OPUS, OggOpus, TagType.VORBIS_COMMENTS, OggStorage()),
        Container(FileType.SPEEX, OggSpeex, TagType.VORBIS_COMMENTS, OggStorage()),
        # APEv2 based
        Container(FileType.APE, MonkeysAudio, TagType.APE, ApeStorage(), Id3v1Storage()),
        Container(FileType.MPC, Musepack, TagType.APE, ApeStorage(), Id3v1Storage()),
        Container(FileType.WAVPACK, WavPack, TagType.APE, ApeStorage(), Id3v1Storage()),
    )
}

_BY_MUTAGEN_TYPE = {c.mutagen_type: c for c in CONTAINERS.values()}

READ_OPTIONS = list(_BY_MUTAGEN_TYPE)


def primary_tag_type_of(file_type: FileType) -> TagType:
    """Return the tag type the container prefers."""
    return CONTAINERS[file_type].primary_tag_type


def supported_tag_types_of(file_type: FileType) -> Tuple[TagType, ...]:
    """Return the tag types this backend can host in the container."""
    return CONTAINERS[file_type].supported_tag_types


def probe(fileobj) -> Tuple[Container, mutagen.FileType]:
    """
    Detect the container of an open file and parse it.

    Raises:
        ParseError: if the format is not recognized or cannot be parsed
    """
    # mutagen.File will iterate through options to sniff the correct format
    fileobj.seek(0)
    try:
        audio = mutagen.File(fileobj, options=READ_OPTIONS)
    except MutagenError as e:
        raise ParseError(f"Failed to parse {getattr(fileobj, 'name', 'file')}: {e}") from e

    if audio is None:
        raise ParseError(f"Unrecognized audio format: {getattr(fileobj, 'name', 'file')}")

    container = _BY_MUTAGEN_TYPE[type(audio)]
    logging.debug("Probed %s as %s", getattr(fileobj, "name", "file"), container.file_type.value)
    return container, audio
