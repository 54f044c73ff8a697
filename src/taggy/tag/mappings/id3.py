"""ID3v2 and ID3v1 field mappings."""

import mutagen.id3
from mutagen.id3 import APIC, COMM, ID3, USLT

from ..adapter import Adapter
from ..core import TagType
from ..picture import MimeType, Picture, PictureType


def find_txxx_field(id3, name):
    """Find a TXXX frame by name (case-insensitive)."""
    frame = "TXXX:" + name.upper()
    for k in id3.keys():
        if k.upper() == frame:
            return k
    raise KeyError("TXXX:" + name)


def new_txxx_field(id3, name, value):
    """Create a new TXXX frame."""
    enc = 0
    # Store 8859-1 if we can, as MusicBrainz does.
    for v in value:
        if v and max(v) > "\x7f":
            enc = 3
    id3.add(mutagen.id3.TXXX(encoding=enc, text=value, desc=name))


# Player data iTunes keeps in described COMM frames
ITUNES_COMMENTS = {"iTunNORM", "iTunPGAP", "iTunSMPB", "iTunes_CDDB_IDs"}


def picture_index(frame):
    # The first picture has an empty description, the others their position
    return int(frame.desc) if frame.desc.isdigit() else 0


def setup_id3_mappings():
    """Register ID3v2 and ID3v1 field mappings."""

    Adapter.RegisterFormat(TagType.ID3V2, ID3)
    # ID3v1 is a plain dict of frames, the shape MakeID3v1 and ParseID3v1 use
    Adapter.RegisterFormat(TagType.ID3V1, dict)

    # ID3v2
    # -----
    def RegisterTextKey(name, frameid):
        def getter(native):
            return native.fields[frameid].text

        def setter(native, value):
            native.fields.add(mutagen.id3.Frames[frameid](encoding=3, text=[str(value)]))

        Adapter.RegisterKey(name, TagType.ID3V2, getter, setter)

    for name, frameid in {
        "title": "TIT2",
        "artist": "TPE1",
        "album": "TALB",
        "album_artist": "TPE2",
        "composer": "TCOM",
        "language": "TLAN",
        "copyright": "TCOP",
        "original_release_date": "TDOR",
    }.items():
        RegisterTextKey(name, frameid)

    def genre_getter(native):
        return native.fields["TCON"].genres

    def genre_setter(native, value):
        native.fields.add(mutagen.id3.TCON(encoding=3, text=[value]))

    Adapter.RegisterKey("genre", TagType.ID3V2, genre_getter, genre_setter)

    def RegisterTXXXKey(name, desc):
        def getter(native):
            return native.fields[find_txxx_field(native.fields, desc)].text

        def setter(native, value):
            new_txxx_field(native.fields, desc, [value])

        Adapter.RegisterKey(name, TagType.ID3V2, getter, setter)

    RegisterTXXXKey("producer", "PRODUCER")

    # Comment and lyrics frames are keyed by description and language.
    # Foobar writes comment as COMM::'eng'. Others write it as COMM
    def described_frame(frameid, frame_type):
        def getter(native):
            frames = [f for f in native.fields.getall(frameid) if f.desc not in ITUNES_COMMENTS]
            # Undescribed frames first, English before other languages
            frames.sort(key=lambda f: (f.desc != "", f.lang != "eng"))
            return frames[0].text

        def setter(native, value):
            native.fields.add(frame_type(encoding=3, lang="eng", desc="", text=value))

        return getter, setter

    Adapter.RegisterKey("comment", TagType.ID3V2, *described_frame("COMM", COMM))
    Adapter.RegisterKey("lyrics", TagType.ID3V2, *described_frame("USLT", USLT))

    # Dates live in TDRC; tags upgraded from v2.3 may still carry TYER
    def get_date(native):
        try:
            return native.fields["TDRC"].text
        except KeyError:
            return native.fields["TYER"].text

    def set_date(native, value):
        native.fields.add(mutagen.id3.TDRC(encoding=3, text=[str(value)]))

    Adapter.RegisterDateKey(TagType.ID3V2, get_date, set_date)

    # foobar stores 'tracknumber' and 'totaltracks' in the tracknumber frame 'TRCK'
    # as such: %tracknumber[/%totaltracks%]
    # If the %tracknumber% is blank, %totaltracks% is stored under TXXX
    # Note that this is also true for discnumber / totaldiscs
    def RegisterNumberPair(number_name, total_name, frameid, txxxdesc):
        def number_getter(native):
            return native.fields[frameid].text[0].partition("/")[0]

        def total_getter(native):
            id3 = native.fields
            try:
                sep, total = id3[frameid].text[0].partition("/")[1:]
                if sep and total:
                    return total
            except KeyError:
                return id3[find_txxx_field(id3, txxxdesc)].text[0]
            raise KeyError(txxxdesc)

        def number_setter(native, number):
            id3 = native.fields
            text = str(number)

            # Fold an already stored total into the number frame
            try:
                text = text + "/" + str(total_getter(native))
                try:
                    del id3[find_txxx_field(id3, txxxdesc)]
                except KeyError:
                    pass
            except KeyError:
                pass

            id3.add(mutagen.id3.Frames[frameid](encoding=3, text=[text]))

        def total_setter(native, total):
            id3 = native.fields
            total = str(total)
            try:
                number = number_getter(native)
                frame = id3[frameid]
                frame.text = [number + "/" + total]
            except KeyError:
                new_txxx_field(id3, txxxdesc, [total])

        Adapter.RegisterKey(number_name, TagType.ID3V2, number_getter, number_setter)
        Adapter.RegisterKey(total_name, TagType.ID3V2, total_getter, total_setter)

    RegisterNumberPair("track_number", "track_total", "TRCK", "TOTALTRACKS")
    RegisterNumberPair("disc_number", "disc_total", "TPOS", "TOTALDISCS")

    def picture_getter(native):
        pictures = []
        for frame in sorted(native.fields.getall("APIC"), key=picture_index):
            try:
                pic_type = PictureType(int(frame.type))
            except ValueError:
                pic_type = PictureType.OTHER
            pictures.append(Picture(pic_type=pic_type, pic_data=frame.data, mime_type=MimeType.from_str(frame.mime)))
        return pictures

    def picture_setter(native, pictures):
        pictures = [p for p in pictures if not p.is_empty()]
        for index, picture in enumerate(pictures):
            native.fields.add(
                APIC(
                    encoding=3,
                    mime=picture.mime_type.value if picture.mime_type else "",
                    type=int(picture.pic_type),
                    desc=str(index) if index else "",
                    data=picture.pic_data,
                )
            )

    Adapter.RegisterKey("pictures", TagType.ID3V2, picture_getter, picture_setter)

    # ID3v1
    # -----
    # Only the fields the 128 byte record has room for. Frames are keyed by
    # their bare frame id, comments included.
    def RegisterV1Key(name, frameid, frame_type=None):
        def getter(native):
            return native.fields[frameid].text

        def setter(native, value):
            cls = frame_type or mutagen.id3.Frames[frameid]
            native.fields[frameid] = cls(encoding=0, text=[str(value)])

        Adapter.RegisterKey(name, TagType.ID3V1, getter, setter)

    for name, frameid in {
        "title": "TIT2",
        "artist": "TPE1",
        "album": "TALB",
        "comment": "COMM",
        "track_number": "TRCK",
    }.items():
        RegisterV1Key(name, frameid)

    def v1_genre_getter(native):
        return native.fields["TCON"].genres

    def v1_genre_setter(native, value):
        native.fields["TCON"] = mutagen.id3.TCON(encoding=0, text=[value])

    Adapter.RegisterKey("genre", TagType.ID3V1, v1_genre_getter, v1_genre_setter)

    def v1_get_date(native):
        return native.fields["TDRC"].text

    def v1_set_date(native, value):
        native.fields["TDRC"] = mutagen.id3.TDRC(encoding=0, text=[str(value)])

    Adapter.RegisterDateKey(TagType.ID3V1, v1_get_date, v1_set_date)
