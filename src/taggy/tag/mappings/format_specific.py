"""Format-specific mappings: numbers, dates and pictures (Vorbis, APE, MP4, RIFF)."""

from mutagen.apev2 import BINARY, APEValue
from mutagen.flac import Picture as FLACPicture
from mutagen.mp4 import MP4Cover

from ..adapter import Adapter
from ..core import TagType
from ..picture import MimeType, Picture, PictureType
from ..utils import conv_number, conv_string, detect_mime_type, split_pair

APE_PICTURE_KEYS = {
    PictureType.OTHER: "Cover Art (Other)",
    PictureType.ICON: "Cover Art (Png Icon)",
    PictureType.OTHER_ICON: "Cover Art (Icon)",
    PictureType.COVER_FRONT: "Cover Art (Front)",
    PictureType.COVER_BACK: "Cover Art (Back)",
    PictureType.LEAFLET: "Cover Art (Leaflet)",
    PictureType.MEDIA: "Cover Art (Media)",
    PictureType.LEAD_ARTIST: "Cover Art (Lead Artist)",
    PictureType.ARTIST: "Cover Art (Artist)",
    PictureType.CONDUCTOR: "Cover Art (Conductor)",
    PictureType.BAND: "Cover Art (Band)",
    PictureType.COMPOSER: "Cover Art (Composer)",
    PictureType.LYRICIST: "Cover Art (Lyricist)",
    PictureType.RECORDING_LOCATION: "Cover Art (Recording Location)",
    PictureType.DURING_RECORDING: "Cover Art (During Recording)",
    PictureType.DURING_PERFORMANCE: "Cover Art (During Performance)",
    PictureType.SCREEN_CAPTURE: "Cover Art (Video Capture)",
    PictureType.BRIGHT_FISH: "Cover Art (Fish)",
    PictureType.ILLUSTRATION: "Cover Art (Illustration)",
    PictureType.BAND_LOGO: "Cover Art (Band Logotype)",
    PictureType.PUBLISHER_LOGO: "Cover Art (Publisher Logotype)",
}


def to_flac_picture(picture: Picture) -> FLACPicture:
    flac_picture = FLACPicture()
    flac_picture.type = int(picture.pic_type)
    flac_picture.mime = picture.mime_type.value if picture.mime_type else ""
    flac_picture.width = picture.width or 0
    flac_picture.height = picture.height or 0
    flac_picture.depth = picture.color_depth or 0
    flac_picture.colors = picture.num_colors or 0
    flac_picture.data = picture.pic_data
    return flac_picture


def from_flac_picture(flac_picture: FLACPicture) -> Picture:
    try:
        pic_type = PictureType(flac_picture.type)
    except ValueError:
        pic_type = PictureType.OTHER
    # Unknown dimensions are stored as 0
    return Picture(
        pic_type=pic_type,
        pic_data=flac_picture.data,
        mime_type=MimeType.from_str(flac_picture.mime),
        width=flac_picture.width or None,
        height=flac_picture.height or None,
        color_depth=flac_picture.depth or None,
        num_colors=flac_picture.colors or None,
    )


def setup_format_specific_mappings():
    """Register format-specific field mappings."""

    # Dates
    # -----
    def basic_text(key):
        def get_text(native):
            return native.fields[key]

        def set_text(native, value):
            native.fields[key] = [str(value)]

        return get_text, set_text

    for tag_type, key in {
        TagType.VORBIS_COMMENTS: "DATE",
        TagType.APE: "Year",
        TagType.MP4_ILST: "\xa9day",
        TagType.RIFF_INFO: "ICRD",
    }.items():
        Adapter.RegisterDateKey(tag_type, *basic_text(key))

    # Vorbis track / disc numbers
    # ---------------------------
    # Totals live in their own key; some writers use TOTALTRACKS or keep
    # "n/total" in the number key.
    def vorbis_pair(number_key, total_keys):
        def number_getter(native):
            return native.fields[number_key]

        def number_setter(native, value):
            native.fields[number_key] = [str(value)]

        def total_getter(native):
            for key in total_keys:
                try:
                    return native.fields[key]
                except KeyError:
                    pass
            total = split_pair(conv_string(native.fields[number_key]))[1]
            if total is None:
                raise KeyError(total_keys[0])
            return total

        def total_setter(native, value):
            native.fields[total_keys[0]] = [str(value)]

        return (number_getter, number_setter), (total_getter, total_setter)

    for key, (number_key, total_keys) in {
        "track": ("TRACKNUMBER", ("TRACKTOTAL", "TOTALTRACKS")),
        "disc": ("DISCNUMBER", ("DISCTOTAL", "TOTALDISCS")),
    }.items():
        number, total = vorbis_pair(number_key, total_keys)
        Adapter.RegisterKey(key + "_number", TagType.VORBIS_COMMENTS, *number)
        Adapter.RegisterKey(key + "_total", TagType.VORBIS_COMMENTS, *total)

    # MP4 tuple-based disc/track fields
    # ---------------------------------
    def from_tuple(key, index, default=0):
        """Helper to extract values from tuple fields."""

        def getter(native):
            val = native.fields[key][0][index]
            if val == default:
                raise KeyError(key)
            return val

        def setter(native, value):
            try:
                current = tuple(native.fields[key][0])
            except (KeyError, IndexError):
                current = (default, default)
            native.fields[key] = [current[:index] + (int(value),) + current[index + 1 :]]

        return getter, setter

    for key, value in {
        "disc": "disk",
        "track": "trkn",
    }.items():
        Adapter.RegisterKey(key + "_number", TagType.MP4_ILST, *from_tuple(value, 0))
        Adapter.RegisterKey(key + "_total", TagType.MP4_ILST, *from_tuple(value, 1))

    # APE "n/total" fields
    # --------------------
    def split_string(key, sep, index):
        """Helper to split string fields."""

        def getter(native):
            val = split_pair(conv_string(native.fields[key]), sep)[index]
            if val is None:
                raise KeyError(key)
            return val

        def setter(native, value):
            try:
                vals = list(conv_string(native.fields[key]).partition(sep))
            except KeyError:
                vals = ["", sep, ""]
            vals[2 * index] = str(value)
            text = vals[0] + sep + vals[2] if vals[2] else vals[0]
            native.fields[key] = [text]

        return getter, setter

    for key, value in {
        "disc": "Disc",
        "track": "Track",
    }.items():
        Adapter.RegisterKey(key + "_number", TagType.APE, *split_string(value, "/", 0))
        Adapter.RegisterKey(key + "_total", TagType.APE, *split_string(value, "/", 1))

    # RIFF INFO keeps the track total in a separate chunk
    for name, key in {"track_number": "IPRT", "track_total": "IFRM"}.items():
        Adapter.RegisterBasicKey(name, key, TagType.RIFF_INFO, convert=conv_number)

    # Pictures
    # --------
    # FLAC and Ogg files carry picture blocks apart from the comments.
    def vorbis_picture_getter(native):
        return [from_flac_picture(p) for p in native.pictures]

    def vorbis_picture_setter(native, pictures):
        native.pictures = [to_flac_picture(p) for p in pictures if not p.is_empty()]

    Adapter.RegisterKey("pictures", TagType.VORBIS_COMMENTS, vorbis_picture_getter, vorbis_picture_setter)

    # APE holds one binary item per picture role: "description\0" + data
    def ape_picture_getter(native):
        pictures = []
        for pic_type, key in APE_PICTURE_KEYS.items():
            try:
                value = native.fields[key]
            except KeyError:
                continue
            if value.kind != BINARY:
                continue
            data = bytes(value.value).partition(b"\x00")[2]
            if data:
                pictures.append(Picture(pic_type=pic_type, pic_data=data, mime_type=detect_mime_type(data)))
        return pictures

    def ape_picture_setter(native, pictures):
        for picture in pictures:
            if picture.is_empty():
                continue
            native.fields[APE_PICTURE_KEYS[picture.pic_type]] = APEValue(b"\x00" + picture.pic_data, BINARY)

    Adapter.RegisterKey("pictures", TagType.APE, ape_picture_getter, ape_picture_setter)

    # MP4 covers only know JPEG and PNG, and no roles
    def mp4_picture_getter(native):
        pictures = []
        for cover in native.fields["covr"]:
            mime_type = MimeType.PNG if cover.imageformat == MP4Cover.FORMAT_PNG else MimeType.JPEG
            pictures.append(Picture(pic_type=PictureType.COVER_FRONT, pic_data=bytes(cover), mime_type=mime_type))
        return pictures

    def mp4_picture_setter(native, pictures):
        covers = []
        for picture in pictures:
            if picture.is_empty():
                continue
            mime_type = picture.mime_type or detect_mime_type(picture.pic_data)
            imageformat = MP4Cover.FORMAT_PNG if mime_type == MimeType.PNG else MP4Cover.FORMAT_JPEG
            covers.append(MP4Cover(picture.pic_data, imageformat=imageformat))
        if covers:
            native.fields["covr"] = covers

    Adapter.RegisterKey("pictures", TagType.MP4_ILST, mp4_picture_getter, mp4_picture_setter)
