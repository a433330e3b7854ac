"""Scanner for MP3 streams: frames, ID3 tags and VBR headers."""

from .models import ChannelMode, ID3v1Tag, ID3v2Tag, MP3Frame, MPEGLayer, MPEGVersion
from .parsers import (
    StreamScanner,
    decode_header,
    is_vbri_header,
    is_xing_header,
    new_xing_header,
    next_frame,
    next_id3v2_tag,
    next_object,
    read_xing_counts,
)

__version__ = "1.0.0"

__all__ = [
    "ChannelMode",
    "ID3v1Tag",
    "ID3v2Tag",
    "MP3Frame",
    "MPEGLayer",
    "MPEGVersion",
    "StreamScanner",
    "decode_header",
    "is_vbri_header",
    "is_xing_header",
    "new_xing_header",
    "next_frame",
    "next_id3v2_tag",
    "next_object",
    "read_xing_counts",
]
