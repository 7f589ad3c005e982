"""
Chord annotation parser

Splits a chord symbol into root, suffix and (for slash chords) bass parts.
Suffixes are carried along untouched - qualities and extensions are never
interpreted.
"""

import re
from dataclasses import dataclass
from typing import Optional


NOTE = r'[A-G][#b]?'

SLASH_CHORD_PATTERN = re.compile(rf'^({NOTE})([^/]*)/({NOTE})([^/]*)$')
SIMPLE_CHORD_PATTERN = re.compile(rf'^({NOTE})(.*)$', re.DOTALL)
LEADING_ROOT_PATTERN = re.compile(rf'^{NOTE}')


@dataclass(frozen=True)
class ChordSymbol:
    """Structural parts of a chord symbol"""
    root: str
    root_suffix: str = ''
    bass: Optional[str] = None  # Only set for slash chords
    bass_suffix: str = ''

    @property
    def is_slash(self) -> bool:
        return self.bass is not None

    def __str__(self) -> str:
        text = self.root + self.root_suffix
        if self.bass is not None:
            text += '/' + self.bass + self.bass_suffix
        return text


def parse_chord(text: str) -> Optional[ChordSymbol]:
    """
    Parse chord text into a ChordSymbol.

    Tries the slash form `<root><suffix>/<bass><suffix>` first, then the
    simple form `<root><suffix>` over the whole text. Returns None when the
    text does not start with a note letter (not a chord).
    """
    if not text:
        return None

    match = SLASH_CHORD_PATTERN.match(text)
    if match:
        root, root_suffix, bass, bass_suffix = match.groups()
        return ChordSymbol(root, root_suffix, bass, bass_suffix)

    match = SIMPLE_CHORD_PATTERN.match(text)
    if match:
        return ChordSymbol(match.group(1), match.group(2))

    return None


def leading_root(text: str) -> Optional[str]:
    """Return the note name a chord text starts with, e.g. 'E' for 'Em7'."""
    match = LEADING_ROOT_PATTERN.match(text or '')
    return match.group(0) if match else None
