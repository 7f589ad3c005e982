#!/usr/bin/env python3
"""
songsheet - render, transpose and check chord sheets from the command line

Examples:
  songsheet render song.pro --transpose 2
  songsheet render song.yaml --to-key A --book
  songsheet key song.pro
  songsheet check song.pro
  songsheet setlist sunday.yaml --songs library/
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import SongsheetConfig, load_config
from .errors import SongsheetError
from .key import display_key, get_original_key, resolve_target_offset
from .layout import format_columns
from .models import VARIANTS, entry_key_label, load_library, load_setlist, load_song
from .pitch import UNKNOWN, resolve_note
from .validator import validate_content
from .view_state import ViewState, render_view

logger = logging.getLogger(__name__)


def _offset_for(args, content: str) -> int:
    """Offset from --transpose, or derived from --to-key when given."""
    offset = args.transpose
    if getattr(args, 'to_key', None):
        if UNKNOWN in (resolve_note(args.to_key.strip()), resolve_note(get_original_key(content))):
            logger.warning("Cannot transpose to %r; keeping offset %d", args.to_key, offset)
        offset = resolve_target_offset(content, args.to_key, offset)
    return offset


def cmd_render(args, config: SongsheetConfig) -> int:
    song = load_song(args.file)
    variant = args.variant or config.default_variant
    state = ViewState(
        song_id=song.id,
        transpose=_offset_for(args, song.content),
        book_mode=args.book or config.book_mode,
        variant=variant,
    )
    view = render_view(state, song,
                       threshold=config.book_mode_threshold,
                       separator=config.chords_only_separator)

    header = song.title
    if song.artist:
        header += f" - {song.artist}"
    print(header)
    print(f"Key: {display_key(song.content, state.transpose)}")
    print()
    print(format_columns(view.columns))
    return 0


def cmd_key(args, config: SongsheetConfig) -> int:
    song = load_song(args.file)
    original = get_original_key(song.content)
    offset = _offset_for(args, song.content)
    print(f"Original key: {original}")
    print(f"Offset: {offset:+d}")
    print(f"Display key: {display_key(song.content, offset)}")
    return 0


def cmd_check(args, config: SongsheetConfig) -> int:
    song = load_song(args.file)
    result = validate_content(song.content)
    for issue in result.issues:
        where = f"{issue.location}: " if issue.location else ''
        print(f"{issue.severity.upper()}: {where}{issue.message}")

    metrics = result.metrics
    print(f"{metrics['line_count']} lines, {metrics['annotation_count']} annotations, "
          f"{metrics['chord_count']} chords")
    print("OK" if result.valid else "INVALID")
    return 0 if result.valid else 1


def cmd_setlist(args, config: SongsheetConfig) -> int:
    setlist = load_setlist(args.setlist)
    songs = load_library(args.songs)
    print(setlist.name)
    for i, entry in enumerate(setlist.songs, 1):
        original, target = entry_key_label(entry, songs)
        song = songs.get(entry.id)
        title = entry.title or (song.title if song else entry.id)
        print(f"{i:2d}. {title}  [{original} -> {target}]")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='songsheet',
        description='Render and transpose chord sheets',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split('Examples:', 1)[1] if __doc__ else None,
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    parser.add_argument('-c', '--config', default=None, metavar='PATH',
                        help='Config file (default: $SONGSHEET_CONFIG or ./songsheet.yaml)')

    subparsers = parser.add_subparsers(dest='command', required=True)

    render = subparsers.add_parser('render', help='Print a song, transposed')
    render.add_argument('file', help='Song file (.yaml record or .pro text)')
    render.add_argument('-t', '--transpose', type=int, default=0, metavar='N',
                        help='Semitones to shift (default: 0)')
    render.add_argument('-k', '--to-key', default=None, metavar='KEY',
                        help='Transpose to this key instead of by a fixed offset')
    render.add_argument('--variant', choices=VARIANTS, default=None,
                        help='Content variant to show')
    render.add_argument('-b', '--book', action='store_true',
                        help='Two-column layout for long songs')
    render.set_defaults(func=cmd_render)

    key = subparsers.add_parser('key', help='Show original and transposed key')
    key.add_argument('file')
    key.add_argument('-t', '--transpose', type=int, default=0, metavar='N')
    key.add_argument('-k', '--to-key', default=None, metavar='KEY')
    key.set_defaults(func=cmd_key)

    check = subparsers.add_parser('check', help='Report annotation problems')
    check.add_argument('file')
    check.set_defaults(func=cmd_check)

    setlist = subparsers.add_parser('setlist', help='List a setlist with its keys')
    setlist.add_argument('setlist', help='Setlist YAML file')
    setlist.add_argument('-s', '--songs', required=True, metavar='DIR',
                         help='Directory of song files')
    setlist.set_defaults(func=cmd_setlist)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        level = 'DEBUG' if args.verbose else config.log_level
        logging.basicConfig(level=getattr(logging, level), format='%(levelname)s: %(message)s')
        # basicConfig is a no-op once handlers exist
        logging.getLogger().setLevel(getattr(logging, level))
        return args.func(args, config)
    except SongsheetError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
