"""MPEG audio frame header decoding."""

from ..models.frame import ChannelMode, MP3Frame, MPEGLayer, MPEGVersion
from .tables import BIT_RATES, SAMPLE_COUNTS, SAMPLING_RATES, SLOT_SIZES

HEADER_SIZE = 4

_RESERVED_VERSION = 0b01
_RESERVED_LAYER = 0b00
_RESERVED_EMPHASIS = 0b10


def has_frame_sync(header: bytes) -> bool:
    """Check for the 11-bit frame sync at the start of a header."""
    return len(header) >= 2 and header[0] == 0xFF and (header[1] & 0xE0) == 0xE0


def compute_frame_length(
    sample_count: int, bit_rate: int, sampling_rate: int, padding: int
) -> int:
    """Frame length in bytes, header included.

    The sample count is divided by 8 before multiplying by the bit rate;
    other orderings truncate differently and give wrong lengths.
    """
    return (sample_count // 8) * bit_rate // sampling_rate + padding


def decode_header(header: bytes) -> MP3Frame | None:
    """Decode a 4-byte frame header.

    Returns an MP3Frame whose raw_bytes hold just the header, or None if
    the bytes are not a valid header (reserved version or layer, bad bit
    rate or sampling rate index, mode extension outside joint stereo,
    reserved emphasis).
    """
    if len(header) < HEADER_SIZE:
        return None

    version_bits = (header[1] & 0x18) >> 3
    if version_bits == _RESERVED_VERSION:
        return None
    version = MPEGVersion(version_bits)

    layer_bits = (header[1] & 0x06) >> 1
    if layer_bits == _RESERVED_LAYER:
        return None
    layer = MPEGLayer(layer_bits)

    # Protection bit is inverted: 0 means a CRC follows the header.
    crc_protection = (header[1] & 0x01) == 0

    bit_rate_index = (header[2] & 0xF0) >> 4
    if bit_rate_index == 0 or bit_rate_index == 15:
        return None
    is_mpeg1 = version == MPEGVersion.MPEG_1
    bit_rate = BIT_RATES[(is_mpeg1, layer)][bit_rate_index] * 1000

    sampling_rate_index = (header[2] & 0x0C) >> 2
    if sampling_rate_index == 3:
        return None
    sampling_rate = SAMPLING_RATES[version][sampling_rate_index]

    padding_bit = (header[2] & 0x02) == 0x02
    private_bit = (header[2] & 0x01) == 0x01

    channel_mode = ChannelMode((header[3] & 0xC0) >> 6)
    mode_extension = (header[3] & 0x30) >> 4
    if channel_mode != ChannelMode.JOINT_STEREO and mode_extension != 0:
        return None

    copyright_bit = (header[3] & 0x08) == 0x08
    original_bit = (header[3] & 0x04) == 0x04

    emphasis = header[3] & 0x03
    if emphasis == _RESERVED_EMPHASIS:
        return None

    sample_count = SAMPLE_COUNTS[(is_mpeg1, layer)]
    padding = SLOT_SIZES[layer] if padding_bit else 0

    return MP3Frame(
        mpeg_version=version,
        mpeg_layer=layer,
        crc_protection=crc_protection,
        bit_rate=bit_rate,
        sampling_rate=sampling_rate,
        padding_bit=padding_bit,
        private_bit=private_bit,
        channel_mode=channel_mode,
        mode_extension=mode_extension,
        copyright_bit=copyright_bit,
        original_bit=original_bit,
        emphasis=emphasis,
        sample_count=sample_count,
        frame_length=compute_frame_length(sample_count, bit_rate, sampling_rate, padding),
        raw_bytes=bytes(header[:HEADER_SIZE]),
    )
