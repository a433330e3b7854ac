"""Data models for frames, tags and stream summaries."""

from .frame import (
    ChannelMode,
    ID3v1Tag,
    ID3v2Tag,
    MP3Frame,
    MPEGLayer,
    MPEGVersion,
    ScannedObject,
)
from .stats import StreamStats, XingCounts

__all__ = [
    "ChannelMode",
    "ID3v1Tag",
    "ID3v2Tag",
    "MP3Frame",
    "MPEGLayer",
    "MPEGVersion",
    "ScannedObject",
    "StreamStats",
    "XingCounts",
]
