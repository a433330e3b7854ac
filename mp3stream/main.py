#!/usr/bin/env python3
"""
mp3stream command-line interface

Inspects MP3 files frame by frame, strips tags from them, and joins
several files into one stream with a Xing VBR header when needed.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import Config, configure_logging
from .extractors.tags import TagExtractor
from .processors.stream import StreamProcessor

logger = logging.getLogger(__name__)


def _format_duration(seconds: float) -> str:
    # Round to milliseconds before splitting off minutes.
    minutes, secs = divmod(round(seconds, 3), 60)
    return f"{int(minutes)}:{secs:06.3f}"


def cmd_info(config: Config, args: argparse.Namespace) -> int:
    """Print frame statistics and tag text for each file."""
    processor = StreamProcessor(config)
    extractor = TagExtractor()

    if args.json:
        report = {str(path): processor.stats(path).to_dict() for path in args.files}
        print(json.dumps(report, indent=2, ensure_ascii=False))
        return 0

    for path in args.files:
        stats = processor.stats(path)
        print(f"{path}")
        print(f"  Tags: {extractor.summary(path).describe()}")
        print(f"  Frames: {stats.frame_count} ({stats.audio_bytes} bytes)")
        print(f"  Duration: {_format_duration(stats.duration)}")
        if stats.bit_rates:
            mode = "VBR" if stats.is_vbr else "CBR"
            print(
                f"  Bit rate: {mode} {stats.min_bit_rate // 1000}"
                f"-{stats.max_bit_rate // 1000} kbit/s"
            )
        print(f"  ID3v1 tags: {stats.id3v1_tags}, ID3v2 tags: {stats.id3v2_tags}")
        if stats.has_xing_header:
            print("  Xing/Info header: yes")
        if stats.has_vbri_header:
            print("  VBRI header: yes")
    return 0


def cmd_strip(config: Config, args: argparse.Namespace) -> int:
    """Write the input's audio frames without tags or garbage."""
    written = StreamProcessor(config).strip_tags(args.input, args.output)
    print(f"Wrote {written} frames to {args.output}")
    return 0


def cmd_cat(config: Config, args: argparse.Namespace) -> int:
    """Concatenate inputs into a single MP3 file."""
    totals = StreamProcessor(config).concatenate(args.inputs, args.output)
    print("\nComplete!")
    print(f"  Files: {len(args.inputs)}")
    print(f"  Frames: {totals.frame_count}")
    print(f"  Duration: {_format_duration(totals.duration)}")
    if totals.has_xing_header:
        print("  Xing header: written")
    print(f"  Output: {args.output}")
    return 0


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Inspect, strip and concatenate MP3 streams"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide progress bars",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    info = subparsers.add_parser("info", help="Show frame statistics and tags")
    info.add_argument("files", nargs="+", type=Path)
    info.add_argument("--json", action="store_true", help="Print statistics as JSON")
    info.set_defaults(handler=cmd_info)

    strip = subparsers.add_parser("strip", help="Remove tags and garbage")
    strip.add_argument("input", type=Path)
    strip.add_argument("output", type=Path)
    strip.add_argument("--force", "-f", action="store_true", help="Overwrite the output file")
    strip.set_defaults(handler=cmd_strip)

    cat = subparsers.add_parser("cat", help="Concatenate MP3 files")
    cat.add_argument("inputs", nargs="+", type=Path)
    cat.add_argument("--output", "-o", type=Path, required=True)
    cat.add_argument("--tag", action="store_true", help="Copy the first file's ID3v2 tag")
    cat.add_argument("--force-xing", action="store_true", help="Always write a Xing header")
    cat.add_argument("--force", "-f", action="store_true", help="Overwrite the output file")
    cat.set_defaults(handler=cmd_cat)

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Merge command line flags over the environment configuration."""
    config = Config.from_environment()
    config.verbose = config.verbose or args.verbose
    if args.no_progress:
        config.show_progress = False
    if getattr(args, "force", False):
        config.overwrite = True
    if getattr(args, "tag", False):
        config.cat.keep_id3v2 = True
    if getattr(args, "force_xing", False):
        config.cat.force_xing = True
    return config


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    config = build_config(args)

    configure_logging(verbose=config.verbose)

    try:
        return args.handler(config, args)
    except (ValueError, OSError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
