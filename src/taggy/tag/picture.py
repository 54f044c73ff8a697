"""Embedded artwork model."""

from enum import Enum, IntEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PictureType(IntEnum):
    """Picture roles, numbered as in the ID3v2 APIC frame."""

    OTHER = 0
    ICON = 1
    OTHER_ICON = 2
    COVER_FRONT = 3
    COVER_BACK = 4
    LEAFLET = 5
    MEDIA = 6
    LEAD_ARTIST = 7
    ARTIST = 8
    CONDUCTOR = 9
    BAND = 10
    COMPOSER = 11
    LYRICIST = 12
    RECORDING_LOCATION = 13
    DURING_RECORDING = 14
    DURING_PERFORMANCE = 15
    SCREEN_CAPTURE = 16
    BRIGHT_FISH = 17
    ILLUSTRATION = 18
    BAND_LOGO = 19
    PUBLISHER_LOGO = 20


class MimeType(str, Enum):
    PNG = "image/png"
    JPEG = "image/jpeg"
    TIFF = "image/tiff"
    BMP = "image/bmp"
    GIF = "image/gif"

    @classmethod
    def from_str(cls, value: Optional[str]) -> Optional["MimeType"]:
        """Look up a MIME string, returning None for unknown kinds."""
        if not value:
            return None
        value = value.strip().lower()
        if value == "image/jpg":
            return cls.JPEG
        try:
            return cls(value)
        except ValueError:
            return None


class Picture(BaseModel):
    """A picture attached to a tag.

    The dimension fields are only filled when the native format records
    them (FLAC picture blocks do, ID3v2 and MP4 do not).
    """

    model_config = ConfigDict(frozen=True, ser_json_bytes="base64")

    pic_type: PictureType = PictureType.COVER_FRONT
    pic_data: bytes = b""
    mime_type: Optional[MimeType] = None
    width: Optional[int] = Field(default=None, ge=0)
    height: Optional[int] = Field(default=None, ge=0)
    color_depth: Optional[int] = Field(default=None, ge=0)
    num_colors: Optional[int] = Field(default=None, ge=0)

    def is_empty(self) -> bool:
        return not self.pic_data
