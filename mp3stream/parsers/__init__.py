"""Parsers for MPEG audio frame headers, MP3 streams and VBR headers."""

from .header import compute_frame_length, decode_header, has_frame_sync
from .scanner import (
    StreamScanner,
    decode_synchsafe,
    next_frame,
    next_id3v2_tag,
    next_object,
)
from .vbr import (
    is_vbri_header,
    is_xing_header,
    new_xing_header,
    read_xing_counts,
    side_info_size,
)

__all__ = [
    "StreamScanner",
    "compute_frame_length",
    "decode_header",
    "decode_synchsafe",
    "has_frame_sync",
    "is_vbri_header",
    "is_xing_header",
    "new_xing_header",
    "next_frame",
    "next_id3v2_tag",
    "next_object",
    "read_xing_counts",
    "side_info_size",
]
