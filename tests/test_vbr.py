"""Tests for Xing/Info and VBRI header handling in mp3stream/parsers/vbr.py."""

import dataclasses
import io
import struct

import pytest

from mp3stream.parsers.header import decode_header
from mp3stream.parsers.scanner import next_frame
from mp3stream.parsers.vbr import (
    is_vbri_header,
    is_xing_header,
    new_xing_header,
    read_xing_counts,
    side_info_size,
    xing_offset,
)


def with_payload(frame, payload: bytes):
    return dataclasses.replace(frame, raw_bytes=payload)


class TestSideInfoSize:
    """Tests for side_info_size()."""

    @pytest.mark.parametrize(
        "version, channel_mode, expected",
        [
            (0b11, 0b00, 32),  # MPEG-1 stereo
            (0b11, 0b01, 32),  # MPEG-1 joint stereo
            (0b11, 0b10, 32),  # MPEG-1 dual channel
            (0b11, 0b11, 17),  # MPEG-1 mono
            (0b10, 0b00, 17),  # MPEG-2 stereo
            (0b10, 0b11, 9),  # MPEG-2 mono
            (0b00, 0b00, 17),  # MPEG-2.5 stereo
            (0b00, 0b11, 9),  # MPEG-2.5 mono
        ],
    )
    def test_layer3_sizes(self, header_factory, version, channel_mode, expected):
        frame = decode_header(header_factory(version=version, channel_mode=channel_mode))
        assert side_info_size(frame) == expected

    @pytest.mark.parametrize("layer", [0b10, 0b11])
    def test_other_layers_have_no_side_info(self, header_factory, layer):
        assert side_info_size(decode_header(header_factory(layer=layer))) == 0


class TestXingDetection:
    """Tests for is_xing_header()."""

    @pytest.mark.parametrize("marker", [b"Xing", b"Info"])
    def test_marker_after_side_info(self, frame_factory, marker):
        data = bytearray(frame_factory())
        data[36:40] = marker  # 4 + 32 for MPEG-1 stereo
        frame = next_frame(io.BytesIO(bytes(data)))

        assert is_xing_header(frame) is True

    def test_mono_offset(self, frame_factory):
        data = bytearray(frame_factory(channel_mode=0b11))
        data[21:25] = b"Xing"  # 4 + 17 for MPEG-1 mono

        assert is_xing_header(next_frame(io.BytesIO(bytes(data)))) is True

    def test_marker_at_wrong_offset(self, frame_factory):
        data = bytearray(frame_factory())
        data[21:25] = b"Xing"

        assert is_xing_header(next_frame(io.BytesIO(bytes(data)))) is False

    def test_other_marker(self, frame_factory):
        data = bytearray(frame_factory())
        data[36:40] = b"XING"

        assert is_xing_header(next_frame(io.BytesIO(bytes(data)))) is False

    def test_short_payload(self, header_factory):
        """A payload too short to hold the marker is not an error."""
        frame = decode_header(header_factory())
        assert is_xing_header(frame) is False
        assert is_xing_header(with_payload(frame, frame.raw_bytes + bytes(32) + b"Xin")) is False

    def test_marker_exactly_at_end(self, header_factory):
        frame = decode_header(header_factory())
        assert is_xing_header(with_payload(frame, frame.raw_bytes + bytes(32) + b"Info")) is True


class TestVbriDetection:
    """Tests for is_vbri_header()."""

    def test_marker_at_fixed_offset(self, frame_factory):
        data = bytearray(frame_factory(channel_mode=0b11))
        data[36:40] = b"VBRI"

        assert is_vbri_header(next_frame(io.BytesIO(bytes(data)))) is True

    def test_absent(self, frame_factory):
        assert is_vbri_header(next_frame(io.BytesIO(frame_factory()))) is False

    def test_short_payload(self, header_factory):
        frame = decode_header(header_factory())
        assert is_vbri_header(with_payload(frame, frame.raw_bytes + bytes(32) + b"VBR")) is False


class TestNewXingHeader:
    """Tests for new_xing_header()."""

    def test_layout(self):
        """Counts are written big-endian after the marker and flags."""
        frame = new_xing_header(1000, 2_000_000)
        data = frame.raw_bytes
        offset = xing_offset(frame)

        assert len(data) == 209
        assert frame.frame_length == 209
        assert data[:4] == b"\xff\xfb\x52\xc0"
        assert offset == 4 + side_info_size(frame)
        assert data[offset:offset + 4] == b"Xing"
        assert data[offset + 7] == 3
        assert struct.unpack(">I", data[offset + 8:offset + 12])[0] == 1000
        assert struct.unpack(">I", data[offset + 12:offset + 16])[0] == 2_000_000

    def test_template_header_decodes(self):
        """The template is a padded 64 kbit/s 44.1 kHz MPEG-1 Layer III frame."""
        frame = new_xing_header(0, 0)
        assert frame.bit_rate == 64000
        assert frame.sampling_rate == 44100
        assert frame.padding_bit is True

    def test_detected_as_xing(self):
        frame = new_xing_header(1, 2)
        assert is_xing_header(frame) is True
        assert is_vbri_header(frame) is False

    def test_rescanned_from_bytes(self):
        """The synthesized frame scans back as a single complete frame."""
        frame = new_xing_header(7, 8)
        scanned = next_frame(io.BytesIO(frame.raw_bytes))
        assert scanned == frame

    @pytest.mark.parametrize("frames, total", [(-1, 0), (0, 2**32)])
    def test_out_of_range_counts(self, frames, total):
        with pytest.raises(ValueError):
            new_xing_header(frames, total)


class TestReadXingCounts:
    """Tests for read_xing_counts()."""

    def test_round_trip(self):
        counts = read_xing_counts(new_xing_header(1000, 2_000_000))
        assert counts.total_frames == 1000
        assert counts.total_bytes == 2_000_000

    def test_bytes_only(self, frame_factory):
        """Without the frames flag the byte count comes first."""
        data = bytearray(frame_factory())
        data[36:40] = b"Info"
        data[40:44] = struct.pack(">I", 0x02)
        data[44:48] = struct.pack(">I", 12345)

        counts = read_xing_counts(next_frame(io.BytesIO(bytes(data))))

        assert counts.total_frames is None
        assert counts.total_bytes == 12345

    def test_no_marker(self, frame_factory):
        assert read_xing_counts(next_frame(io.BytesIO(frame_factory()))) is None

    def test_truncated_fields(self, header_factory):
        frame = decode_header(header_factory())
        payload = frame.raw_bytes + bytes(32) + b"Xing" + struct.pack(">I", 3) + b"\x00\x00"
        assert read_xing_counts(with_payload(frame, payload)) is None
