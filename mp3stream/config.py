"""Configuration management for the mp3stream tools."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

MP3_SUFFIX = ".mp3"


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, "true" if default else "false").lower() == "true"


@dataclass
class CatConfig:
    """Options for concatenating MP3 files."""

    keep_id3v2: bool = False  # Copy the first input's ID3v2 tag
    force_xing: bool = False  # Write a Xing header even for CBR output


@dataclass
class Config:
    """Main configuration container."""

    verbose: bool = False
    show_progress: bool = True
    overwrite: bool = False
    cat: CatConfig = field(default_factory=CatConfig)

    @classmethod
    def from_environment(cls, env_path: Path | None = None) -> "Config":
        """Load configuration from environment variables."""
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv()

        return cls(
            verbose=_env_flag("MP3STREAM_VERBOSE", False),
            show_progress=_env_flag("MP3STREAM_PROGRESS", True),
            overwrite=_env_flag("MP3STREAM_OVERWRITE", False),
            cat=CatConfig(
                keep_id3v2=_env_flag("MP3STREAM_KEEP_TAG", False),
                force_xing=_env_flag("MP3STREAM_FORCE_XING", False),
            ),
        )

    def validate_paths(self, inputs: list[Path], output: Path) -> None:
        """Validate input and output paths for a write operation."""
        if not inputs:
            raise ValueError("At least one input file is required")
        for path in inputs:
            if not path.is_file():
                raise ValueError(f"Input file not found: {path}")
            if path.suffix.lower() != MP3_SUFFIX:
                logger.warning(f"Input '{path.name}' does not have an {MP3_SUFFIX} extension")

        resolved_output = output.resolve()
        if any(path.resolve() == resolved_output for path in inputs):
            raise ValueError(f"Output file is also an input: {output}")
        if output.exists() and not self.overwrite:
            raise ValueError(f"Output file already exists: {output} (use --force to overwrite)")


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
