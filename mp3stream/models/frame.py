"""Frame and tag data models."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Union


class MPEGVersion(IntEnum):
    """MPEG audio version, valued by its 2-bit header code."""

    MPEG_2_5 = 0
    MPEG_2 = 2
    MPEG_1 = 3


class MPEGLayer(IntEnum):
    """MPEG audio layer, valued by its 2-bit header code."""

    LAYER_III = 1
    LAYER_II = 2
    LAYER_I = 3


class ChannelMode(IntEnum):
    """Channel mode, valued by its 2-bit header code."""

    STEREO = 0
    JOINT_STEREO = 1
    DUAL_CHANNEL = 2
    MONO = 3


@dataclass(frozen=True)
class MP3Frame:
    """A single MPEG audio frame decoded from a stream."""

    mpeg_version: MPEGVersion
    mpeg_layer: MPEGLayer
    crc_protection: bool
    bit_rate: int  # bits/s
    sampling_rate: int  # Hz
    padding_bit: bool
    private_bit: bool
    channel_mode: ChannelMode
    mode_extension: int
    copyright_bit: bool
    original_bit: bool
    emphasis: int
    sample_count: int
    frame_length: int  # bytes, header included
    raw_bytes: bytes = b""

    @property
    def duration(self) -> float:
        """Playing time of the frame in seconds."""
        return self.sample_count / self.sampling_rate


@dataclass(frozen=True)
class ID3v1Tag:
    """An ID3v1 tag: 128 raw bytes starting with 'TAG'."""

    raw_bytes: bytes


@dataclass(frozen=True)
class ID3v2Tag:
    """An ID3v2 tag: 10-byte header plus body, starting with 'ID3'."""

    raw_bytes: bytes


ScannedObject = Union[MP3Frame, ID3v1Tag, ID3v2Tag]
