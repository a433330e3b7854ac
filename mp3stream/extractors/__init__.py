"""Extractor modules for tag text."""

from .tags import TagExtractor, TagSummary

__all__ = ["TagExtractor", "TagSummary"]
