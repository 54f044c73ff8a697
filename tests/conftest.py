"""Pytest configuration and fixtures.

The MP3, WAV and FLAC fixtures are built here as the smallest files mutagen
accepts: a few silent MPEG frames, a PCM WAV header with silence, and a FLAC
stream that is only a STREAMINFO block. The other containers are untagged
samples from the mutagen test suite, kept in tests/data.
"""

import shutil
import struct
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"

# MPEG-1 Layer III, 128 kbps, 44.1 kHz, joint stereo: 417 bytes per frame
MP3_FRAME = b"\xff\xfb\x90\x64" + b"\x00" * 413

JPEG_DATA = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00" + bytes(range(64)) + b"\xff\xd9"
PNG_DATA = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR" + b"\x00\x00\x00\x10" * 2 + b"\x08\x02\x00\x00\x00" + bytes(32)


def make_wav(num_bytes: int = 4000) -> bytes:
    fmt = struct.pack("<HHIIHH", 1, 2, 44100, 44100 * 4, 4, 16)
    body = b"WAVE" + b"fmt " + struct.pack("<I", len(fmt)) + fmt
    body += b"data" + struct.pack("<I", num_bytes) + b"\x00" * num_bytes
    return b"RIFF" + struct.pack("<I", len(body)) + body


def copy_sample(tmp_path, name: str) -> Path:
    path = tmp_path / name
    shutil.copyfile(DATA_DIR / name, path)
    return path


def make_flac() -> bytes:
    # 44.1 kHz, 2 channels, 16 bits, 44100 samples
    packed = (44100 << 44) | (1 << 41) | (15 << 36) | 44100
    streaminfo = struct.pack(">HH", 4096, 4096) + b"\x00" * 6 + packed.to_bytes(8, "big") + b"\x00" * 16
    # Last metadata block, type 0 (STREAMINFO)
    header = bytes([0x80]) + len(streaminfo).to_bytes(3, "big")
    return b"fLaC" + header + streaminfo


@pytest.fixture
def mp3_file(tmp_path):
    """An untagged MP3 file."""
    path = tmp_path / "track.mp3"
    path.write_bytes(MP3_FRAME * 40)
    return path


@pytest.fixture
def wav_file(tmp_path):
    """An untagged WAV file."""
    path = tmp_path / "track.wav"
    path.write_bytes(make_wav())
    return path


@pytest.fixture
def flac_file(tmp_path):
    """An untagged FLAC file."""
    path = tmp_path / "track.flac"
    path.write_bytes(make_flac())
    return path


@pytest.fixture
def aiff_file(tmp_path):
    """An untagged AIFF file."""
    return copy_sample(tmp_path, "untagged.aif")


@pytest.fixture
def m4a_file(tmp_path):
    """An untagged MP4 audio file."""
    return copy_sample(tmp_path, "untagged.m4a")


@pytest.fixture
def ogg_file(tmp_path):
    """An untagged Ogg Vorbis file."""
    return copy_sample(tmp_path, "untagged.ogg")


@pytest.fixture
def wavpack_file(tmp_path):
    """An untagged WavPack file."""
    return copy_sample(tmp_path, "untagged.wv")


@pytest.fixture
def mpc_file(tmp_path):
    """An untagged Musepack file."""
    return copy_sample(tmp_path, "untagged.mpc")


@pytest.fixture
def jpeg_data():
    return JPEG_DATA


@pytest.fixture
def png_data():
    return PNG_DATA


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point the home directory (and so the config file) into tmp_path."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home
