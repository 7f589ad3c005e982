"""
Layout renderer - chord sheet rows for monospaced display

Each source line becomes one row:
  - Blank            empty source line
  - PlainLine        no annotations
  - ChordsOnlyLine   annotations but no lyric content (intros, turnarounds)
  - ChordLyricPair   chord line aligned above a lyric line

Column math assumes a fixed-width font with both rows vertically aligned.
"""

import math
import re
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from .tokens import (
    ChordToken, Literal, has_annotation, split_lines, strip_annotations, tokenize,
)


CHORDS_ONLY_SEPARATOR = '    '
BOOK_MODE_THRESHOLD = 10

# Extra spaces before a chord that would otherwise butt into the next word
FLOATING_CHORD_PADDING = 2

# Whitespace and dash-like separators do not count as lyrics
SEPARATOR_CHARS = re.compile(r'[-–—\s]')


@dataclass(frozen=True)
class Blank:
    pass


@dataclass(frozen=True)
class PlainLine:
    text: str


@dataclass(frozen=True)
class ChordsOnlyLine:
    chords: str


@dataclass(frozen=True)
class ChordLyricPair:
    chords: str
    lyrics: str


RenderRow = Union[Blank, PlainLine, ChordsOnlyLine, ChordLyricPair]


def _is_floating(tokens: List, index: int) -> bool:
    """A chord is floating when it ends the line or sits between blank literals."""
    if index == len(tokens) - 1:
        return True
    if index == 0:
        return False
    before, after = tokens[index - 1], tokens[index + 1]
    return (isinstance(before, Literal) and before.is_blank and
            isinstance(after, Literal) and after.is_blank)


def _align_chords(line: str) -> ChordLyricPair:
    """Build the chord row so each chord starts above the lyric it precedes."""
    chords_display = ''
    lyrics_display = ''
    tokens = tokenize(line)

    for i, token in enumerate(tokens):
        if isinstance(token, Literal):
            lyrics_display += token.text
            continue

        padding = max(0, len(lyrics_display) - len(chords_display))
        if _is_floating(tokens, i):
            padding += FLOATING_CHORD_PADDING
        chords_display += ' ' * padding + token.text

    return ChordLyricPair(chords=chords_display, lyrics=lyrics_display)


def render_line(line: str, separator: str = CHORDS_ONLY_SEPARATOR) -> RenderRow:
    """Render a single source line (no newline characters) to a row."""
    if line == '':
        return Blank()

    if not has_annotation(line):
        return PlainLine(line)

    lyric_content = SEPARATOR_CHARS.sub('', strip_annotations(line))
    if not lyric_content:
        chords = [t.text for t in tokenize(line) if isinstance(t, ChordToken)]
        return ChordsOnlyLine(separator.join(chords))

    return _align_chords(line)


def render_rows(content: str, separator: str = CHORDS_ONLY_SEPARATOR) -> List[RenderRow]:
    """Render already-transposed annotated text, one row per source line."""
    if not content:
        return []
    return [render_line(line, separator) for line in split_lines(content)]


def paginate_book_mode(rows: Sequence[RenderRow],
                       threshold: int = BOOK_MODE_THRESHOLD) -> Tuple[List[RenderRow], ...]:
    """
    Split rows into two columns for side-by-side display.

    Returns a 1-tuple (single column) when there are `threshold` rows or
    fewer, otherwise (left, right) split at ceil(len / 2).
    """
    rows = list(rows)
    if len(rows) <= threshold:
        return (rows,)
    middle = math.ceil(len(rows) / 2)
    return (rows[:middle], rows[middle:])


def row_lines(row: RenderRow) -> List[str]:
    """Text lines a row occupies on screen."""
    if isinstance(row, Blank):
        return ['']
    if isinstance(row, PlainLine):
        return [row.text]
    if isinstance(row, ChordsOnlyLine):
        return [row.chords]
    return [row.chords, row.lyrics]


def format_rows(rows: Sequence[RenderRow]) -> str:
    """Plain-text rendering of rows, chord line above lyric line."""
    lines = []
    for row in rows:
        lines.extend(row_lines(row))
    return '\n'.join(lines)


def format_columns(columns: Sequence[Sequence[RenderRow]], gutter: str = ' | ') -> str:
    """Lay out one or two columns of rows side by side."""
    if len(columns) == 1:
        return format_rows(columns[0])

    left = format_rows(columns[0]).split('\n')
    right = format_rows(columns[1]).split('\n')
    width = max(len(line) for line in left)
    height = max(len(left), len(right))
    left += [''] * (height - len(left))
    right += [''] * (height - len(right))
    return '\n'.join((l.ljust(width) + gutter + r).rstrip() for l, r in zip(left, right))
