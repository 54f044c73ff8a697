"""Tests for the native tag mappings, in memory."""

import pytest
from mutagen.flac import VCFLACDict
from mutagen.id3 import COMM, ID3

from taggy.tag import MimeType, Picture, PictureType, Tag, TagType, from_native, to_native
from taggy.tag.storage import NativeTag

FULL_FIELDS = dict(
    title="Title",
    artist="Artist",
    album="Album",
    album_artist="Album Artist",
    composer="Composer",
    producer="Producer",
    genre="Rock",
    comment="A comment",
    lyrics="Some lyrics",
    language="eng",
    copyright="2004 Label",
    recording_date="2004-05-01",
    original_release_date="2003",
    year=2004,
    track_number=3,
    track_total=12,
    disc_number=1,
    disc_total=2,
)


def round_trip(tag: Tag) -> Tag:
    return from_native(to_native(tag))


class TestAdapter:
    """Test the generic adapter behavior."""

    def test_sentinel_type_is_rejected(self):
        with pytest.raises(ValueError):
            to_native(Tag(title="X"))

    def test_absent_fields_are_not_written(self):
        native = to_native(Tag(tag_type=TagType.VORBIS_COMMENTS, title="X"))
        assert list(native.fields) == [("TITLE", "X")]

    def test_empty_tag_converts_to_empty_native(self):
        for tag_type in TagType:
            if tag_type == TagType.FILE_PRIMARY_TYPE:
                continue
            assert to_native(Tag.new(tag_type)).is_empty()

    def test_unknown_native_keys_are_dropped(self):
        fields = VCFLACDict()
        fields.append(("TITLE", "X"))
        fields.append(("REPLAYGAIN_TRACK_GAIN", "-6 dB"))
        tag = from_native(NativeTag(TagType.VORBIS_COMMENTS, fields))
        assert tag == Tag(tag_type=TagType.VORBIS_COMMENTS, title="X")


@pytest.mark.parametrize(
    "tag_type",
    [TagType.ID3V2, TagType.APE, TagType.VORBIS_COMMENTS, TagType.MP4_ILST],
)
class TestFullFormats:
    """Formats that store every field."""

    def test_all_fields_round_trip(self, tag_type):
        tag = Tag(tag_type=tag_type, **FULL_FIELDS)
        assert round_trip(tag) == tag

    def test_total_without_number(self, tag_type):
        tag = Tag(tag_type=tag_type, track_total=12, disc_total=2)
        assert round_trip(tag) == tag

    def test_year_only(self, tag_type):
        tag = Tag(tag_type=tag_type, year=1999)
        assert round_trip(tag) == tag

    def test_recording_date_fills_year(self, tag_type):
        tag = Tag(tag_type=tag_type, recording_date="2004-05-01")
        assert tag.year == 2004
        assert round_trip(tag) == tag

    def test_bare_year_date(self, tag_type):
        tag = Tag(tag_type=tag_type, recording_date="1999")
        assert round_trip(tag) == tag


class TestId3v2:
    """ID3v2 specifics."""

    def comment_of(self, *frames):
        id3 = ID3()
        for frame in frames:
            id3.add(frame)
        return from_native(NativeTag(TagType.ID3V2, id3)).comment

    def test_itunes_comments_are_skipped(self):
        itunnorm = COMM(encoding=0, lang="eng", desc="iTunNORM", text=" 00000180 0000017F")
        itunsmpb = COMM(encoding=0, lang="eng", desc="iTunSMPB", text=" 00000000 00000210")
        assert self.comment_of(itunnorm, itunsmpb) is None
        plain = COMM(encoding=3, lang="eng", desc="", text="Real comment")
        assert self.comment_of(itunnorm, plain, itunsmpb) == "Real comment"

    def test_plain_english_comment_is_preferred(self):
        german = COMM(encoding=3, lang="deu", desc="", text="Kommentar")
        english = COMM(encoding=3, lang="eng", desc="", text="Comment")
        described = COMM(encoding=3, lang="eng", desc="note", text="Note")
        assert self.comment_of(described, german, english) == "Comment"
        assert self.comment_of(described, german) == "Kommentar"
        assert self.comment_of(described) == "Note"

    def test_number_pair_in_one_frame(self):
        native = to_native(Tag(tag_type=TagType.ID3V2, track_number=3, track_total=12))
        assert native.fields["TRCK"].text == ["3/12"]

    def test_total_only_goes_to_txxx(self):
        native = to_native(Tag(tag_type=TagType.ID3V2, track_total=12))
        assert "TRCK" not in native.fields
        assert native.fields["TXXX:TOTALTRACKS"].text == ["12"]

    def test_pictures_keep_order(self, jpeg_data, png_data):
        pictures = (
            Picture(pic_type=PictureType.COVER_BACK, pic_data=png_data, mime_type=MimeType.PNG),
            Picture(pic_type=PictureType.COVER_FRONT, pic_data=jpeg_data, mime_type=MimeType.JPEG),
        )
        tag = Tag(tag_type=TagType.ID3V2, pictures=pictures)
        assert round_trip(tag).pictures == pictures

    def test_empty_pictures_are_not_written(self, jpeg_data):
        tag = Tag(tag_type=TagType.ID3V2, pictures=(Picture(), Picture(pic_data=jpeg_data)))
        native = to_native(tag)
        assert len(native.fields.getall("APIC")) == 1


class TestId3v1:
    """ID3v1 keeps only what its fixed record can hold."""

    def test_supported_fields_round_trip(self):
        tag = Tag(
            tag_type=TagType.ID3V1,
            title="Title",
            artist="Artist",
            album="Album",
            comment="Comment",
            year=2004,
            track_number=3,
            genre="Rock",
        )
        assert round_trip(tag) == tag

    def test_other_fields_are_dropped(self):
        tag = Tag(tag_type=TagType.ID3V1, title="Title", composer="Composer", track_total=12)
        assert round_trip(tag) == Tag(tag_type=TagType.ID3V1, title="Title")


class TestApe:
    """APE specifics."""

    def test_number_pair_in_one_item(self):
        native = to_native(Tag(tag_type=TagType.APE, track_number=3, track_total=12))
        assert str(native.fields["Track"]) == "3/12"

    def test_total_only(self):
        native = to_native(Tag(tag_type=TagType.APE, disc_total=2))
        assert str(native.fields["Disc"]) == "/2"

    def test_pictures_round_trip(self, jpeg_data, png_data):
        pictures = (
            Picture(pic_type=PictureType.COVER_FRONT, pic_data=jpeg_data, mime_type=MimeType.JPEG),
            Picture(pic_type=PictureType.COVER_BACK, pic_data=png_data, mime_type=MimeType.PNG),
        )
        tag = Tag(tag_type=TagType.APE, pictures=pictures)
        assert round_trip(tag).pictures == pictures
        assert "Cover Art (Front)" in to_native(tag).fields


class TestMp4:
    """MP4 specifics."""

    def test_number_pairs_are_tuples(self):
        native = to_native(Tag(tag_type=TagType.MP4_ILST, track_number=3, track_total=12, disc_total=2))
        assert native.fields["trkn"] == [(3, 12)]
        assert native.fields["disk"] == [(0, 2)]

    def test_covers(self, jpeg_data, png_data):
        pictures = (
            Picture(pic_data=jpeg_data, mime_type=MimeType.JPEG),
            Picture(pic_data=png_data, mime_type=MimeType.PNG),
        )
        tag = Tag(tag_type=TagType.MP4_ILST, pictures=pictures)
        assert round_trip(tag).pictures == pictures


class TestVorbis:
    """Vorbis comment specifics."""

    def test_totals_in_own_keys(self):
        native = to_native(Tag(tag_type=TagType.VORBIS_COMMENTS, track_number=3, track_total=12))
        assert native.fields["TRACKNUMBER"] == ["3"]
        assert native.fields["TRACKTOTAL"] == ["12"]

    def test_alternative_total_keys(self):
        fields = VCFLACDict()
        fields.append(("TRACKNUMBER", "3/12"))
        fields.append(("TOTALDISCS", "2"))
        tag = from_native(NativeTag(TagType.VORBIS_COMMENTS, fields))
        assert tag.track_number == 3
        assert tag.track_total == 12
        assert tag.disc_total == 2

    def test_pictures_with_dimensions(self, png_data):
        pictures = (
            Picture(pic_data=png_data, mime_type=MimeType.PNG, width=16, height=16, color_depth=24),
            Picture(pic_type=PictureType.ARTIST, pic_data=png_data, mime_type=MimeType.PNG),
        )
        tag = Tag(tag_type=TagType.VORBIS_COMMENTS, pictures=pictures)
        native = to_native(tag)
        assert len(native.pictures) == 2
        assert round_trip(tag).pictures == pictures


class TestTextChunks:
    """RIFF INFO and AIFF text chunks."""

    def test_riff_info(self):
        tag = Tag(
            tag_type=TagType.RIFF_INFO,
            title="Title",
            artist="Artist",
            album="Album",
            genre="Rock",
            year=2004,
            track_number=3,
            track_total=12,
        )
        native = to_native(tag)
        assert native.fields["INAM"] == ["Title"]
        assert round_trip(tag) == tag

    def test_aiff_text(self):
        tag = Tag(tag_type=TagType.AIFF_TEXT, title="Title", artist="Artist", copyright="(c)", album="dropped")
        assert round_trip(tag) == Tag(tag_type=TagType.AIFF_TEXT, title="Title", artist="Artist", copyright="(c)")
