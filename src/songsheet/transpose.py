"""
Transposition engine

Shifts chord symbols, or every annotation in a block of annotated text, by
a signed number of semitones. Everything outside annotations is left as is,
including key directives such as `{key: D}`.
"""

import logging

from .chords import ChordSymbol, parse_chord
from .pitch import UNKNOWN, resolve_note, shift, spell
from .tokens import ChordToken, Literal, tokenize

logger = logging.getLogger(__name__)


def _transpose_note(note: str, amount: int) -> str:
    """Shift a single note name; unresolved names come back unchanged."""
    index = resolve_note(note)
    if index == UNKNOWN:
        logger.debug("Leaving unresolved note %r untransposed", note)
        return note
    return spell(shift(index, amount))


def transpose_chord(chord: str, amount: int) -> str:
    """
    Transpose a chord symbol by `amount` semitones.

    Root and bass of a slash chord are shifted independently; whichever of
    them does not resolve keeps its original spelling. A simple chord with
    an unresolved root, or text that is not a chord at all, is returned
    unchanged. Output is always sharp-spelled.
    """
    if not chord:
        return ''

    symbol = parse_chord(chord)
    if symbol is None:
        logger.debug("Not a chord, leaving %r as is", chord)
        return chord

    if not symbol.is_slash and resolve_note(symbol.root) == UNKNOWN:
        return chord

    transposed = ChordSymbol(
        root=_transpose_note(symbol.root, amount),
        root_suffix=symbol.root_suffix,
        bass=_transpose_note(symbol.bass, amount) if symbol.is_slash else None,
        bass_suffix=symbol.bass_suffix,
    )
    return str(transposed)


def transpose_song_content(content: str, amount: int) -> str:
    """Transpose every `[chord]` annotation in `content` by `amount` semitones."""
    if not content:
        return ''
    if amount == 0:
        return content

    parts = []
    for token in tokenize(content):
        if isinstance(token, Literal):
            parts.append(token.text)
        else:
            parts.append(str(ChordToken(transpose_chord(token.text, amount))))
    return ''.join(parts)
