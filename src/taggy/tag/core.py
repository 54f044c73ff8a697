"""Core Tag model shared by every native tag format."""

from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .picture import Picture
from .utils import conv_number, split_date


class TagType(str, Enum):
    """Native tag formats.

    FILE_PRIMARY_TYPE is only a directive for writes ("use whatever the
    container prefers"); tags read from a file always carry a real type.
    """

    APE = "Ape"
    ID3V1 = "Id3v1"
    ID3V2 = "Id3v2"
    MP4_ILST = "Mp4Ilst"
    VORBIS_COMMENTS = "VorbisComments"
    RIFF_INFO = "RiffInfo"
    AIFF_TEXT = "AiffText"
    FILE_PRIMARY_TYPE = "FilePrimaryType"


TEXT_FIELDS = (
    "title",
    "artist",
    "album",
    "album_artist",
    "composer",
    "producer",
    "genre",
    "comment",
    "lyrics",
    "language",
    "copyright",
    "recording_date",
    "original_release_date",
)

NUMBER_FIELDS = (
    "year",
    "track_number",
    "track_total",
    "disc_number",
    "disc_total",
)

FIELDS = TEXT_FIELDS + NUMBER_FIELDS + ("pictures",)


class Tag(BaseModel):
    """
    One block of metadata in one native format, independent of how that
    format stores it.

    Build with keyword arguments; anything not given stays absent:

        Tag(tag_type=TagType.ID3V2, title="X", track_number=3)

    Tags are immutable and compare by value (pictures included).
    A recording date carries its year: a date that is only a year is kept
    as year, a longer one fills in year and must agree with it.
    """

    model_config = ConfigDict(frozen=True)

    tag_type: TagType = TagType.FILE_PRIMARY_TYPE

    title: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    album_artist: Optional[str] = None
    composer: Optional[str] = None
    producer: Optional[str] = None
    genre: Optional[str] = None
    comment: Optional[str] = None
    lyrics: Optional[str] = None
    language: Optional[str] = None
    copyright: Optional[str] = None
    recording_date: Optional[str] = None
    original_release_date: Optional[str] = None

    year: Optional[int] = Field(default=None, ge=0)
    track_number: Optional[int] = Field(default=None, ge=0)
    track_total: Optional[int] = Field(default=None, ge=0)
    disc_number: Optional[int] = Field(default=None, ge=0)
    disc_total: Optional[int] = Field(default=None, ge=0)

    pictures: Tuple[Picture, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _date_carries_year(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        text = data.get("recording_date")
        if text is None or not str(text).strip():
            return data
        year, date = split_date(str(text))
        given = data.get("year")
        if given is not None and conv_number(given) != year:
            raise ValueError(f"year {given} does not match recording date {text}")
        return dict(data, year=year if year is not None else given, recording_date=date)

    @classmethod
    def new(cls, tag_type: TagType) -> "Tag":
        """Return an empty tag of the given type."""
        return cls(tag_type=tag_type)

    def retype(self, tag_type: TagType) -> "Tag":
        """Return a copy of this tag carrying a different tag type."""
        return self.model_copy(update={"tag_type": tag_type})

    def is_empty(self) -> bool:
        if self.pictures:
            return False
        return all(getattr(self, name) is None for name in TEXT_FIELDS + NUMBER_FIELDS)
