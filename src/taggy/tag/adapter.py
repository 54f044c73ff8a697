"""Translation between the unified Tag model and native tag representations."""

from typing import Any, Callable, Dict, Optional

from .core import FIELDS, NUMBER_FIELDS, TEXT_FIELDS, Tag, TagType
from .formats import primary_tag_type_of, supported_tag_types_of
from .storage import NativeTag
from .utils import conv_number, conv_string, split_date


def conv_pictures(value) -> tuple:
    return tuple(p for p in value if not p.is_empty())


def default_convert(name: str) -> Callable:
    if name in NUMBER_FIELDS:
        return conv_number
    if name in TEXT_FIELDS:
        return conv_string
    return conv_pictures


class Adapter:
    """
    Registry of field accessors, one table per native tag type.

    Getters take a NativeTag and return the raw stored value, raising
    KeyError (or IndexError/ValueError) when the field is absent. Setters
    take a NativeTag and a unified value. A format that cannot store a
    field simply has no entry for it.
    """

    field_map: Dict[TagType, Dict[str, Dict[str, Optional[Callable]]]] = {}
    factories: Dict[TagType, Callable[[], Any]] = {}

    @classmethod
    def RegisterFormat(cls, type: TagType, factory: Callable[[], Any]):
        """Register the constructor of an empty native field container."""
        cls.factories[type] = factory
        cls.field_map.setdefault(type, {})

    @classmethod
    def RegisterKey(
        cls,
        name: str,
        type: TagType,
        getter: Optional[Callable] = None,
        setter: Optional[Callable] = None,
        convert: Optional[Callable] = None,
    ):
        if name not in FIELDS:
            raise ValueError(f"Unknown tag field: {name}")
        cls.field_map.setdefault(type, {})[name] = {
            "getter": getter,
            "setter": setter,
            "convert": convert or default_convert(name),
        }

    @classmethod
    def RegisterBasicKey(cls, name: str, key: str, type: TagType, convert: Optional[Callable] = None):
        """Register a field stored as a plain list of values under one key."""

        def getter(native):
            return native.fields[key]

        getter.__name__ = "field_getter(" + key + ")"

        def setter(native, value):
            native.fields[key] = [str(value)]

        setter.__name__ = "field_setter(" + key + ")"

        cls.RegisterKey(name, type, getter, setter, convert)

    @classmethod
    def RegisterDateKey(cls, type: TagType, get_text: Callable, set_text: Callable):
        """
        Register year and recording_date over the single date key of a format.

        A bare year is read as the year only; anything longer is read as the
        recording date plus its year. recording_date is set before year, and
        year only fills the key when nothing is stored there yet.
        """

        def year_getter(native):
            year, _ = split_date(conv_string(get_text(native)))
            if year is None:
                raise KeyError("year")
            return year

        def year_setter(native, value):
            try:
                get_text(native)
            except KeyError:
                set_text(native, str(value))

        def date_getter(native):
            _, date = split_date(conv_string(get_text(native)))
            if date is None:
                raise KeyError("recording_date")
            return date

        cls.RegisterKey("year", type, year_getter, year_setter)
        cls.RegisterKey("recording_date", type, date_getter, set_text)

    @classmethod
    def mapping(cls, type: TagType) -> Dict[str, Dict[str, Optional[Callable]]]:
        try:
            return cls.field_map[type]
        except KeyError:
            raise ValueError(f"No mapping is registered for tag type {type.value}") from None

    @classmethod
    def to_native(cls, tag: Tag) -> NativeTag:
        """
        Build the native representation of tag.

        Absent fields are omitted, never written as empty values.

        Raises:
            ValueError: if the tag still carries FILE_PRIMARY_TYPE
        """
        if tag.tag_type == TagType.FILE_PRIMARY_TYPE:
            raise ValueError("FILE_PRIMARY_TYPE must be resolved against a container before conversion")
        mapping = cls.mapping(tag.tag_type)
        native = NativeTag(tag.tag_type, cls.factories[tag.tag_type]())
        for name in FIELDS:
            value = getattr(tag, name)
            if value is None or value == ():
                continue
            entry = mapping.get(name)
            if entry is None or entry["setter"] is None:
                continue
            entry["setter"](native, value)
        return native

    @classmethod
    def from_native(cls, native: NativeTag) -> Tag:
        """Build a Tag from a native tag, dropping keys outside the field set."""
        values = {}
        for name, entry in cls.mapping(native.tag_type).items():
            if entry["getter"] is None:
                continue
            try:
                value = entry["convert"](entry["getter"](native))
            except (KeyError, IndexError, ValueError):
                continue
            if value is None or value == "" or value == ():
                continue
            values[name] = value
        return Tag(tag_type=native.tag_type, **values)


to_native = Adapter.to_native
from_native = Adapter.from_native

__all__ = [
    "Adapter",
    "to_native",
    "from_native",
    "primary_tag_type_of",
    "supported_tag_types_of",
]
