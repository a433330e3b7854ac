"""Shared fixtures for building synthetic MP3 byte streams."""

import pytest

from mp3stream.parsers.header import decode_header


def build_header(
    version: int = 0b11,
    layer: int = 0b01,
    protection: int = 1,
    bit_rate_index: int = 9,
    sampling_rate_index: int = 0,
    padding: int = 0,
    private: int = 0,
    channel_mode: int = 0b00,
    mode_extension: int = 0,
    copyright: int = 0,
    original: int = 0,
    emphasis: int = 0,
) -> bytes:
    """Pack header fields into 4 bytes.

    Defaults describe an MPEG-1 Layer III, 128 kbit/s, 44.1 kHz stereo frame.
    """
    return bytes([
        0xFF,
        0xE0 | (version << 3) | (layer << 1) | protection,
        (bit_rate_index << 4) | (sampling_rate_index << 2) | (padding << 1) | private,
        (channel_mode << 6) | (mode_extension << 4) | (copyright << 3) | (original << 2) | emphasis,
    ])


def expected_length(sample_count: int, bit_rate: int, sampling_rate: int, padding: int) -> int:
    """Reference frame length: divide the sample count by 8 first."""
    return (sample_count // 8) * bit_rate // sampling_rate + padding


def build_frame(fill: int = 0x00, **fields) -> bytes:
    """Build a complete frame: header plus a filler body."""
    header = build_header(**fields)
    frame = decode_header(header)
    assert frame is not None, f"invalid test header {header.hex()}"
    return header + bytes([fill]) * (frame.frame_length - 4)


def build_id3v1(title: bytes = b"Song") -> bytes:
    return (b"TAG" + title).ljust(128, b"\x00")


def build_id3v2(body_size: int, size_bytes: bytes | None = None) -> bytes:
    """Build an ID3v2.3 tag with a zero-filled body."""
    if size_bytes is None:
        size_bytes = bytes([
            (body_size >> 21) & 0x7F,
            (body_size >> 14) & 0x7F,
            (body_size >> 7) & 0x7F,
            body_size & 0x7F,
        ])
    return b"ID3\x03\x00\x00" + size_bytes + bytes(body_size)


@pytest.fixture
def header_factory():
    return build_header


@pytest.fixture
def frame_factory():
    return build_frame


@pytest.fixture
def id3v1_factory():
    return build_id3v1


@pytest.fixture
def id3v2_factory():
    return build_id3v2


@pytest.fixture
def length_formula():
    return expected_length
