"""In-memory view of a parsed audio file and its native tags."""

import logging
from contextlib import contextmanager
from typing import ContextManager, Dict, Iterator, List, Optional, Tuple

from mutagen import MutagenError

from ..config import WriteOptions
from ..errors import NotFoundError, ParseError, SaveError
from .core import TagType
from .formats import Container, FileType, probe
from .storage import NativeTag


class TaggedFile:
    """
    A parsed audio file with its native tags, bound to an open handle.

    Tags can be inserted, removed and cleared in memory; save() makes the
    file match: held tags are written, held empty tags and tags no longer
    held are stripped from disk.
    """

    def __init__(self, container: Container, audio, fileobj):
        self.container = container
        self.audio = audio
        self.fileobj = fileobj
        self._tags: Dict[TagType, NativeTag] = {}
        self._on_disk = set()
        self._load()

    def _load(self) -> None:
        for tag_type, storage in self.container.storages.items():
            try:
                native = storage.load(self.audio, self.fileobj)
            except (MutagenError, OSError) as e:
                raise ParseError(f"Failed to read {tag_type.value} tag: {e}") from e
            if native is None or native.is_empty():
                continue
            self._tags[tag_type] = native
            self._on_disk.add(tag_type)

    @property
    def file_type(self) -> FileType:
        return self.container.file_type

    def primary_tag_type(self) -> TagType:
        return self.container.primary_tag_type

    def supported_tag_types(self) -> Tuple[TagType, ...]:
        return self.container.supported_tag_types

    def tags(self) -> List[NativeTag]:
        """Held non-empty tags, in discovery order."""
        return [
            self._tags[tag_type]
            for tag_type in self.container.storages
            if tag_type in self._tags and not self._tags[tag_type].is_empty()
        ]

    def clear(self) -> None:
        self._tags.clear()

    def insert_tag(self, native: NativeTag) -> Optional[NativeTag]:
        """
        Hold a tag, replacing any tag of the same type.

        Returns None, without changing anything, when the container cannot
        host the tag type.
        """
        if native.tag_type not in self.container.storages:
            return None
        self._tags[native.tag_type] = native
        return native

    def remove(self, tag_type: TagType) -> Optional[NativeTag]:
        """Drop the tag of the given type, returning it if it was held."""
        return self._tags.pop(tag_type, None)

    def size(self) -> int:
        return self.fileobj.seek(0, 2)

    def properties(self) -> dict:
        info = self.audio.info
        bitrate = getattr(info, "bitrate", None)
        return {
            "duration": getattr(info, "length", None),
            "bitrate": int(bitrate) if bitrate else None,
            "sample_rate": getattr(info, "sample_rate", None),
            "bit_depth": getattr(info, "bits_per_sample", None),
            "channels": getattr(info, "channels", None),
        }

    def save(self, options: Optional[WriteOptions] = None) -> None:
        """
        Persist the held tags.

        Raises:
            SaveError: if mutagen or the file system fails while writing
        """
        options = options or WriteOptions()
        for tag_type, storage in self.container.storages.items():
            native = self._tags.get(tag_type)
            try:
                if native is not None and not native.is_empty():
                    logging.debug("Writing %s tag", tag_type.value)
                    storage.write(self.audio, self.fileobj, native, options)
                elif tag_type in self._on_disk:
                    logging.debug("Stripping %s tag", tag_type.value)
                    storage.strip(self.audio, self.fileobj, options)
            except (MutagenError, OSError) as e:
                raise SaveError(f"Failed to save {tag_type.value} tag: {e}") from e

        try:
            self.fileobj.flush()
        except OSError as e:
            raise SaveError(f"Failed to flush file: {e}") from e
        self._on_disk = {t for t, n in self._tags.items() if not n.is_empty()}


@contextmanager
def open_tagged(path: str, writable: bool = False) -> Iterator[TaggedFile]:
    """
    Open and parse the file at path.

    The handle is opened for reading only unless writable is set, and it is
    closed when the block exits, whatever happened inside.

    Raises:
        NotFoundError: if the path cannot be opened
        ParseError: if the container is not recognized
    """
    try:
        fileobj = open(path, "r+b" if writable else "rb")
    except OSError as e:
        raise NotFoundError(f"The file path does not exist or cannot be opened: {path} ({e.strerror})") from e

    with fileobj:
        container, audio = probe(fileobj)
        yield TaggedFile(container, audio, fileobj)


def open_bound(path: str) -> ContextManager[TaggedFile]:
    """Open the file at path for reading and writing; see open_tagged."""
    return open_tagged(path, writable=True)
