#!/usr/bin/env python3
"""
Song Bank - Command Line
========================
Generate catalogue pages, reviews, covers and melodies without the API.

Usage:
    songbank page --locale de-DE --seed 42 --page 3
    songbank detail 3397979675 --locale uk-UA
    songbank cover 3397979675 --title "Golden Hour" --artist "Nova" -o cover.png
    songbank melody 3397979675 --wav preview.wav --midi melody.mid
"""

import argparse
import json
import logging
import math
import sys
from dataclasses import asdict
from pathlib import Path

logger = logging.getLogger(__name__)


def _print_json(payload) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def cmd_page(args):
    """Handle page command."""
    from .catalog import generate_page
    from .seeds import parse_user_seed

    if args.page < 1:
        raise ValueError(f"--page must be at least 1, got {args.page}")
    if args.page_size < 1:
        raise ValueError(f"--page-size must be at least 1, got {args.page_size}")
    if not math.isfinite(args.avg_likes) or args.avg_likes < 0:
        raise ValueError(f"--avg-likes must be a finite number >= 0, got {args.avg_likes}")

    songs = generate_page(
        args.locale,
        parse_user_seed(args.seed),
        args.page,
        args.page_size,
        args.avg_likes,
    )
    _print_json([song.to_dict() for song in songs])
    return 0


def cmd_detail(args):
    """Handle detail command."""
    from .catalog import generate_detail
    from .seeds import parse_item_seed

    detail = generate_detail(args.locale, parse_item_seed(args.seed))
    if args.json:
        _print_json(asdict(detail))
    else:
        print(detail.review)
    return 0


def cmd_cover(args):
    """Handle cover command."""
    from .cover import plan_cover, render_cover
    from .seeds import parse_item_seed

    seed = parse_item_seed(args.seed)
    if args.plan:
        _print_json(asdict(plan_cover(seed)))
        return 0

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    render_cover(args.title, args.artist, seed, size=args.size).save(output, format="PNG")
    logger.info(f"Wrote cover for seed {seed} to {output}")
    print(f"Cover written to {output}")
    return 0


def cmd_melody(args):
    """Handle melody command."""
    from .melody import generate_melody
    from .seeds import parse_item_seed

    melody = generate_melody(parse_item_seed(args.seed), duration=args.duration)

    if args.wav or args.midi:
        from services.playback import melody_midi_bytes, melody_wav_bytes

        if args.wav:
            Path(args.wav).write_bytes(melody_wav_bytes(melody))
            logger.info(f"Wrote WAV preview to {args.wav}")
        if args.midi:
            Path(args.midi).write_bytes(melody_midi_bytes(melody))
            logger.info(f"Wrote MIDI to {args.midi}")

    _print_json(melody.to_dict())
    return 0


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='songbank',
        description='Procedural Song Bank - reproducible songs, covers and melodies from a seed',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Log progress to stderr')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # PAGE command
    page_parser = subparsers.add_parser('page', help='Generate one page of song summaries')
    page_parser.add_argument('--locale', default='en-US', help='en-US, de-DE or uk-UA')
    page_parser.add_argument('--seed', default='0', help='64-bit user seed (wrapped if larger)')
    page_parser.add_argument('--page', type=int, default=1)
    page_parser.add_argument('--page-size', type=int, default=20)
    page_parser.add_argument('--avg-likes', type=float, default=0.0)
    page_parser.set_defaults(func=cmd_page)

    # DETAIL command
    detail_parser = subparsers.add_parser('detail', help='Generate the review for a song seed')
    detail_parser.add_argument('seed', help='Item seed from a page listing')
    detail_parser.add_argument('--locale', default='en-US')
    detail_parser.add_argument('--json', action='store_true', help='Print paragraphs as JSON')
    detail_parser.set_defaults(func=cmd_detail)

    # COVER command
    cover_parser = subparsers.add_parser('cover', help='Render cover art to a PNG file')
    cover_parser.add_argument('seed', help='Item seed from a page listing')
    cover_parser.add_argument('--title', default='')
    cover_parser.add_argument('--artist', default='')
    cover_parser.add_argument('-o', '--output', default='cover.png', help='Output PNG path')
    cover_parser.add_argument('--size', type=int, default=300)
    cover_parser.add_argument('--plan', action='store_true',
                              help='Print the hue/circle draw sequence instead of rendering')
    cover_parser.set_defaults(func=cmd_cover)

    # MELODY command
    melody_parser = subparsers.add_parser('melody', help='Generate the melody for a song seed')
    melody_parser.add_argument('seed', help='Item seed from a page listing')
    melody_parser.add_argument('--duration', type=float, default=4.0)
    melody_parser.add_argument('--wav', help='Write a WAV preview to this path')
    melody_parser.add_argument('--midi', help='Write a MIDI file to this path')
    melody_parser.set_defaults(func=cmd_melody)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
