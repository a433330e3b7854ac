"""Xing/Info and VBRI variable bit rate header utilities."""

import dataclasses
import struct

from ..models.frame import ChannelMode, MP3Frame, MPEGLayer, MPEGVersion
from ..models.stats import XingCounts
from .header import HEADER_SIZE, decode_header

XING_MARKERS = (b"Xing", b"Info")
VBRI_MARKER = b"VBRI"
VBRI_OFFSET = HEADER_SIZE + 32

XING_FRAMES_FLAG = 0x01
XING_BYTES_FLAG = 0x02

# MPEG-1 Layer III, 64 kbit/s, 44.1 kHz, padded, mono. Decodes to 209 bytes.
XING_TEMPLATE_HEADER = b"\xff\xfb\x52\xc0"
XING_FRAME_SIZE = 209

_UINT32_MAX = 0xFFFFFFFF


def side_info_size(frame: MP3Frame) -> int:
    """Size in bytes of the Layer III side information block."""
    if frame.mpeg_layer != MPEGLayer.LAYER_III:
        return 0
    mono = frame.channel_mode == ChannelMode.MONO
    if frame.mpeg_version == MPEGVersion.MPEG_1:
        return 17 if mono else 32
    return 9 if mono else 17


def xing_offset(frame: MP3Frame) -> int:
    """Offset of the Xing/Info marker within the frame bytes."""
    return HEADER_SIZE + side_info_size(frame)


def is_xing_header(frame: MP3Frame) -> bool:
    """True if the frame carries a Xing or Info VBR header."""
    offset = xing_offset(frame)
    marker = frame.raw_bytes[offset:offset + 4]
    return len(marker) == 4 and marker in XING_MARKERS


def is_vbri_header(frame: MP3Frame) -> bool:
    """True if the frame carries a Fraunhofer VBRI header."""
    marker = frame.raw_bytes[VBRI_OFFSET:VBRI_OFFSET + 4]
    return marker == VBRI_MARKER


def read_xing_counts(frame: MP3Frame) -> XingCounts | None:
    """Read the frame and byte counts from a Xing/Info header.

    The 32-bit flags word follows the marker. Optional fields are packed in
    order: frame count (flag bit 0), then byte count (flag bit 1). Returns
    None if there is no marker or the frame ends before a flagged field.
    """
    if not is_xing_header(frame):
        return None

    data = frame.raw_bytes
    position = xing_offset(frame) + 4
    if len(data) < position + 4:
        return None
    (flags,) = struct.unpack_from(">I", data, position)
    position += 4

    counts = XingCounts()
    if flags & XING_FRAMES_FLAG:
        if len(data) < position + 4:
            return None
        (counts.total_frames,) = struct.unpack_from(">I", data, position)
        position += 4
    if flags & XING_BYTES_FLAG:
        if len(data) < position + 4:
            return None
        (counts.total_bytes,) = struct.unpack_from(">I", data, position)
    return counts


def new_xing_header(total_frames: int, total_bytes: int) -> MP3Frame:
    """Build a Xing VBR header frame carrying frame and byte counts."""
    for name, value in (("total_frames", total_frames), ("total_bytes", total_bytes)):
        if not 0 <= value <= _UINT32_MAX:
            raise ValueError(f"{name} must fit in an unsigned 32-bit integer: {value}")

    template = decode_header(XING_TEMPLATE_HEADER)
    offset = xing_offset(template)

    payload = bytearray(XING_FRAME_SIZE)
    payload[:HEADER_SIZE] = XING_TEMPLATE_HEADER
    payload[offset:offset + 4] = b"Xing"
    payload[offset + 7] = XING_FRAMES_FLAG | XING_BYTES_FLAG
    struct.pack_into(">II", payload, offset + 8, total_frames, total_bytes)

    return dataclasses.replace(template, raw_bytes=bytes(payload))
