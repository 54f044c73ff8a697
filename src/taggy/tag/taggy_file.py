"""Snapshot of an audio file and its tags."""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .adapter import from_native
from .core import Tag, TagType
from .formats import FileType
from .tagged_file import TaggedFile


class AudioProperties(BaseModel):
    """Audio stream summary, passed through from mutagen."""

    model_config = ConfigDict(frozen=True)

    duration: Optional[float] = None
    bitrate: Optional[int] = None
    sample_rate: Optional[int] = None
    bit_depth: Optional[int] = None
    channels: Optional[int] = None


class TaggyFile(BaseModel):
    """
    An audio file as seen at the end of one read or write.

    Built fresh for every operation and never changed afterwards. tags keeps
    the order in which the tags were discovered in the file.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    file_type: FileType
    primary_tag_type: TagType
    size: int = 0
    properties: AudioProperties = AudioProperties()
    tags: Tuple[Tag, ...] = ()

    @classmethod
    def from_tagged(cls, tagged: TaggedFile, path: str) -> "TaggyFile":
        """Build a snapshot from an already parsed file."""
        return cls(
            path=path,
            file_type=tagged.file_type,
            primary_tag_type=tagged.primary_tag_type(),
            size=tagged.size(),
            properties=AudioProperties(**tagged.properties()),
            tags=tuple(from_native(native) for native in tagged.tags()),
        )

    def primary_tag(self) -> Optional[Tag]:
        for tag in self.tags:
            if tag.tag_type == self.primary_tag_type:
                return tag
        return None

    def first_tag(self) -> Optional[Tag]:
        return self.tags[0] if self.tags else None
