"""Tag text extraction using TinyTag."""

import logging
from dataclasses import dataclass
from pathlib import Path

from tinytag import TinyTag

logger = logging.getLogger(__name__)


@dataclass
class TagSummary:
    """Human-readable tag fields of an MP3 file."""

    title: str | None = None
    artist: str | None = None
    album: str | None = None
    year: str | None = None

    @property
    def is_empty(self) -> bool:
        return not any((self.title, self.artist, self.album, self.year))

    def describe(self) -> str:
        """One-line description, e.g. 'Artist - Title (Album, 2001)'."""
        if self.is_empty:
            return "(no tag text)"
        text = f"{self.artist or 'Unknown Artist'} - {self.title or 'Unknown Title'}"
        extras = [value for value in (self.album, self.year) if value]
        if extras:
            text += f" ({', '.join(extras)})"
        return text


class TagExtractor:
    """Reads tag text with TinyTag; frame scanning never decodes tag text."""

    def summary(self, file_path: Path) -> TagSummary:
        """Extract title, artist, album and year from a file."""
        try:
            tag = TinyTag.get(str(file_path))
        except Exception as e:
            logger.warning(f"Could not read tags from {file_path}: {e}")
            return TagSummary()

        return TagSummary(
            title=tag.title,
            artist=tag.artist,
            album=tag.album,
            year=str(tag.year) if tag.year else None,
        )
