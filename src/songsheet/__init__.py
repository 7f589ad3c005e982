"""
Songsheet - chord sheet transposition and layout

Modules:
- pitch: pitch classes and note spellings
- chords: chord symbol parsing (root, suffix, slash bass)
- tokens: annotated text tokenizer
- transpose: chord and song transposition
- key: original key detection and target-key offsets
- layout: chord-over-lyric rows and book-mode pagination
- validator: annotation checks
- models: song and setlist records
- view_state: immutable display state and memoized rendering
"""

from .pitch import NOTES_FLAT, NOTES_SHARP, UNKNOWN, resolve_note, spell
from .chords import ChordSymbol, parse_chord
from .tokens import ChordToken, Literal, tokenize, extract_chords
from .transpose import transpose_chord, transpose_song_content
from .key import DEFAULT_KEY, display_key, get_original_key, resolve_target_offset
from .layout import (
    Blank,
    PlainLine,
    ChordsOnlyLine,
    ChordLyricPair,
    RenderRow,
    render_rows,
    paginate_book_mode,
    format_rows,
)
from .validator import ValidationIssue, ValidationResult, ContentValidator, validate_content
from .models import Song, Setlist, SetlistEntry, entry_key_label, load_song
from .errors import SongsheetError, ConfigError, SongFormatError, UnknownVariantError

__version__ = "0.1.0"

__all__ = [
    # Pitch model
    'NOTES_SHARP',
    'NOTES_FLAT',
    'UNKNOWN',
    'resolve_note',
    'spell',
    # Parsing
    'ChordSymbol',
    'parse_chord',
    'ChordToken',
    'Literal',
    'tokenize',
    'extract_chords',
    # Transposition and keys
    'transpose_chord',
    'transpose_song_content',
    'DEFAULT_KEY',
    'get_original_key',
    'resolve_target_offset',
    'display_key',
    # Layout
    'Blank',
    'PlainLine',
    'ChordsOnlyLine',
    'ChordLyricPair',
    'RenderRow',
    'render_rows',
    'paginate_book_mode',
    'format_rows',
    # Validation
    'ValidationIssue',
    'ValidationResult',
    'ContentValidator',
    'validate_content',
    # Records
    'Song',
    'Setlist',
    'SetlistEntry',
    'entry_key_label',
    'load_song',
    # Errors
    'SongsheetError',
    'ConfigError',
    'SongFormatError',
    'UnknownVariantError',
]
