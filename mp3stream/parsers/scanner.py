"""Sequential scanner for MP3 streams.

Reads frames, ID3v1 tags and ID3v2 tags from any binary file-like object,
resynchronising one byte at a time over unrecognised data. A short read at
any point ends the scan: partially read objects are discarded and the
scanner returns None.
"""

import dataclasses
import logging
from collections.abc import Iterator
from typing import BinaryIO

from ..models.frame import ID3v1Tag, ID3v2Tag, MP3Frame, ScannedObject
from .header import HEADER_SIZE, decode_header, has_frame_sync

logger = logging.getLogger(__name__)

ID3V1_MARKER = b"TAG"
ID3V1_SIZE = 128
ID3V2_MARKER = b"ID3"
ID3V2_HEADER_SIZE = 10


def decode_synchsafe(data: bytes) -> int:
    """Decode a big-endian synchsafe integer (7 usable bits per byte)."""
    value = 0
    for byte in data:
        value = (value << 7) | (byte & 0x7F)
    return value


def _read_exactly(stream: BinaryIO, count: int) -> bytes | None:
    """Read count bytes, or return None on a short read."""
    if count <= 0:
        return b""
    data = stream.read(count)
    if data is None or len(data) < count:
        return None
    return data


class StreamScanner:
    """Pulls frames and tags out of a binary stream one at a time."""

    def __init__(self, stream: BinaryIO, log: logging.Logger | None = None) -> None:
        self._stream = stream
        self._log = log or logger

    def next_object(self) -> ScannedObject | None:
        """Return the next frame or tag, or None when the stream is exhausted."""
        window = _read_exactly(self._stream, HEADER_SIZE)
        if window is None:
            return None
        window = bytearray(window)

        while True:
            if window[:3] == ID3V1_MARKER:
                return self._read_id3v1(window)

            if window[:3] == ID3V2_MARKER:
                return self._read_id3v2(window)

            if has_frame_sync(window):
                frame = decode_header(window)
                if frame is not None:
                    self._log.debug("found frame")
                    return self._read_frame(frame, window)

            # Nothing recognised: slide the window forward one byte.
            self._log.debug("sync error: skipping byte")
            next_byte = _read_exactly(self._stream, 1)
            if next_byte is None:
                return None
            del window[0]
            window += next_byte

    def next_frame(self) -> MP3Frame | None:
        """Return the next audio frame, skipping tags."""
        while True:
            obj = self.next_object()
            if obj is None or isinstance(obj, MP3Frame):
                return obj
            self._log.debug(f"next_frame: skipping {type(obj).__name__}")

    def next_id3v2_tag(self) -> ID3v2Tag | None:
        """Return the next ID3v2 tag, skipping frames and ID3v1 tags."""
        while True:
            obj = self.next_object()
            if obj is None or isinstance(obj, ID3v2Tag):
                return obj
            self._log.debug(f"next_id3v2_tag: skipping {type(obj).__name__}")

    def __iter__(self) -> Iterator[ScannedObject]:
        while (obj := self.next_object()) is not None:
            yield obj

    def frames(self) -> Iterator[MP3Frame]:
        """Iterate over the remaining audio frames."""
        while (frame := self.next_frame()) is not None:
            yield frame

    def _read_id3v1(self, window: bytearray) -> ID3v1Tag | None:
        rest = _read_exactly(self._stream, ID3V1_SIZE - len(window))
        if rest is None:
            return None
        return ID3v1Tag(raw_bytes=bytes(window) + rest)

    def _read_id3v2(self, window: bytearray) -> ID3v2Tag | None:
        header_rest = _read_exactly(self._stream, ID3V2_HEADER_SIZE - len(window))
        if header_rest is None:
            return None
        # Size excludes the 10-byte header.
        size = decode_synchsafe(header_rest[2:6])
        body = _read_exactly(self._stream, size)
        if body is None:
            return None
        return ID3v2Tag(raw_bytes=bytes(window) + header_rest + body)

    def _read_frame(self, frame: MP3Frame, window: bytearray) -> MP3Frame | None:
        body = _read_exactly(self._stream, frame.frame_length - len(window))
        if body is None:
            return None
        return dataclasses.replace(frame, raw_bytes=bytes(window) + body)


def next_object(stream: BinaryIO, log: logging.Logger | None = None) -> ScannedObject | None:
    """Read the next frame or tag from stream."""
    return StreamScanner(stream, log).next_object()


def next_frame(stream: BinaryIO, log: logging.Logger | None = None) -> MP3Frame | None:
    """Read the next audio frame from stream, skipping tags."""
    return StreamScanner(stream, log).next_frame()


def next_id3v2_tag(stream: BinaryIO, log: logging.Logger | None = None) -> ID3v2Tag | None:
    """Read the next ID3v2 tag from stream, skipping everything else."""
    return StreamScanner(stream, log).next_id3v2_tag()
