"""MP3 stream processing (statistics, tag stripping and concatenation)."""

import logging
from collections.abc import Iterator
from pathlib import Path

from tqdm import tqdm

from ..config import Config
from ..models.frame import ID3v1Tag, ID3v2Tag, MP3Frame
from ..models.stats import StreamStats
from ..parsers.scanner import StreamScanner
from ..parsers.vbr import is_vbri_header, is_xing_header, new_xing_header

logger = logging.getLogger(__name__)


def is_vbr_summary(frame: MP3Frame) -> bool:
    """Check if a frame is a Xing/Info or VBRI summary rather than audio."""
    return is_xing_header(frame) or is_vbri_header(frame)


class StreamProcessor:
    """Handles statistics, tag stripping and concatenation of MP3 files."""

    def __init__(self, config: Config) -> None:
        self._config = config

    def stats(self, path: Path) -> StreamStats:
        """Scan a file and summarise its frames and tags."""
        stats = StreamStats()
        with open(path, "rb") as f:
            first_frame = True
            for obj in StreamScanner(f):
                if isinstance(obj, ID3v1Tag):
                    stats.id3v1_tags += 1
                elif isinstance(obj, ID3v2Tag):
                    stats.id3v2_tags += 1
                else:
                    if first_frame and is_vbr_summary(obj):
                        stats.has_xing_header = is_xing_header(obj)
                        stats.has_vbri_header = is_vbri_header(obj)
                    else:
                        self._add_frame(stats, obj)
                    first_frame = False
        logger.debug(f"{path.name}: {stats.frame_count} frames, {stats.duration:.2f}s")
        return stats

    def strip_tags(self, source: Path, destination: Path) -> int:
        """Copy only the audio frames of source to destination.

        Returns the number of frames written.
        """
        self._config.validate_paths([source], destination)
        written = 0
        try:
            with open(source, "rb") as src, open(destination, "wb") as dst:
                for frame in StreamScanner(src).frames():
                    dst.write(frame.raw_bytes)
                    written += 1
        except Exception:
            logger.error(f"Failed to write {destination}, removing partial file")
            destination.unlink(missing_ok=True)
            raise
        logger.info(f"Wrote {written} frames to {destination}")
        return written

    def concatenate(self, inputs: list[Path], output: Path) -> StreamStats:
        """Join MP3 files into one stream.

        Existing VBR summary frames are dropped. A new Xing header is written
        first when the output is VBR or force_xing is set.
        """
        cat_config = self._config.cat
        self._config.validate_paths(inputs, output)

        # First pass: totals needed for the Xing header.
        totals = StreamStats()
        for frame in self._audio_frames(inputs, desc="Scanning"):
            self._add_frame(totals, frame)

        write_xing = totals.is_vbr or cat_config.force_xing
        xing = None
        if write_xing:
            logger.info(
                f"Writing Xing header: {totals.frame_count} frames, {totals.audio_bytes} bytes"
            )
            xing = new_xing_header(totals.frame_count, totals.audio_bytes)

        tag = None
        if cat_config.keep_id3v2:
            tag = self._first_id3v2_tag(inputs[0])
            if tag is None:
                logger.warning(f"No ID3v2 tag found in {inputs[0].name}")

        try:
            with open(output, "wb") as dst:
                if tag is not None:
                    dst.write(tag.raw_bytes)
                if xing is not None:
                    dst.write(xing.raw_bytes)
                    totals.has_xing_header = True

                for frame in self._audio_frames(inputs, desc="Writing"):
                    dst.write(frame.raw_bytes)
        except Exception:
            logger.error(f"Failed to write {output}, removing partial file")
            output.unlink(missing_ok=True)
            raise

        return totals

    def _audio_frames(self, inputs: list[Path], desc: str) -> Iterator[MP3Frame]:
        """Yield the audio frames of each input, skipping VBR summary frames."""
        for path in tqdm(
            inputs,
            desc=desc,
            unit="file",
            disable=not self._config.show_progress,
        ):
            with open(path, "rb") as f:
                first_frame = True
                for frame in StreamScanner(f).frames():
                    if first_frame and is_vbr_summary(frame):
                        logger.debug(f"Skipping VBR header in {path.name}")
                    else:
                        yield frame
                    first_frame = False

    def _first_id3v2_tag(self, path: Path) -> ID3v2Tag | None:
        with open(path, "rb") as f:
            return StreamScanner(f).next_id3v2_tag()

    @staticmethod
    def _add_frame(stats: StreamStats, frame: MP3Frame) -> None:
        stats.frame_count += 1
        stats.audio_bytes += len(frame.raw_bytes)
        stats.duration += frame.duration
        stats.bit_rates.add(frame.bit_rate)
