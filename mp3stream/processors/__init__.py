"""Processor modules for MP3 files."""

from .stream import StreamProcessor

__all__ = ["StreamProcessor"]
