"""Utility functions for tag value conversion."""

from typing import Any, Optional, Tuple

from .picture import MimeType


def conv_string(value: Any) -> str:
    """Convert a value to a string, taking the first item of a list."""
    if isinstance(value, (list, tuple)):
        if not value:
            raise ValueError("empty value list")
        value = value[0]
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


def conv_number(value: Any) -> int:
    """Convert a value to a non-negative integer.

    Leading digits are used, so "3/12" gives 3 and "2004-05-01" gives 2004.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    value = conv_string(value).strip()

    def find_first_not_of(str_val: str, chars: str) -> int:
        """Find the first character not in the given set."""
        for i, c in enumerate(str_val):
            if c not in chars:
                return i
        return len(str_val)

    digits = value[: find_first_not_of(value, "1234567890")]
    if not digits:
        raise ValueError(f"not a number: {value!r}")
    return int(digits)


def split_date(text: str) -> Tuple[Optional[int], Optional[str]]:
    """Split a stored date into (year, recording_date).

    A bare year yields only the year; a fuller date yields both.
    """
    text = text.strip()
    if not text:
        return None, None
    try:
        year = conv_number(text[:4])
    except ValueError:
        year = None
    if len(text) <= 4:
        return year, None
    return year, text


def split_pair(text: str, sep: str = "/") -> Tuple[Optional[int], Optional[int]]:
    """Split "n/total" into its two numbers, either of which may be missing."""
    number, _, total = str(text).partition(sep)

    def to_int(part):
        try:
            return conv_number(part) if part.strip() else None
        except ValueError:
            return None

    return to_int(number), to_int(total)


def detect_mime_type(image_data: bytes) -> Optional[MimeType]:
    """Detect the image MIME type from its leading bytes."""
    if image_data[:2] == b"\xff\xd8":
        return MimeType.JPEG
    elif image_data[:8] == b"\x89PNG\r\n\x1a\n":
        return MimeType.PNG
    elif image_data[:4] == b"GIF8":
        return MimeType.GIF
    elif image_data[:2] == b"BM":
        return MimeType.BMP
    elif image_data[:4] in (b"II*\x00", b"MM\x00*"):
        return MimeType.TIFF
    return None
