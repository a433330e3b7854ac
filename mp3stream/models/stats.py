"""Stream summary models."""

from dataclasses import dataclass, field


@dataclass
class XingCounts:
    """Aggregate counts carried by a Xing/Info VBR header."""

    total_frames: int | None = None
    total_bytes: int | None = None


@dataclass
class StreamStats:
    """Summary of a scanned MP3 stream."""

    frame_count: int = 0
    audio_bytes: int = 0
    id3v1_tags: int = 0
    id3v2_tags: int = 0
    duration: float = 0.0  # seconds
    bit_rates: set[int] = field(default_factory=set)
    has_xing_header: bool = False
    has_vbri_header: bool = False

    @property
    def is_vbr(self) -> bool:
        """True when the audio frames use more than one bit rate."""
        return len(self.bit_rates) > 1

    @property
    def min_bit_rate(self) -> int | None:
        return min(self.bit_rates) if self.bit_rates else None

    @property
    def max_bit_rate(self) -> int | None:
        return max(self.bit_rates) if self.bit_rates else None

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dictionary."""
        return {
            "frame_count": self.frame_count,
            "audio_bytes": self.audio_bytes,
            "id3v1_tags": self.id3v1_tags,
            "id3v2_tags": self.id3v2_tags,
            "duration": round(self.duration, 3),
            "min_bit_rate": self.min_bit_rate,
            "max_bit_rate": self.max_bit_rate,
            "vbr": self.is_vbr,
            "xing_header": self.has_xing_header,
            "vbri_header": self.has_vbri_header,
        }
