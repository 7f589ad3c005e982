"""
View state for a song being displayed

State is an immutable value; every user action is a pure transition that
returns a new state. Rendering is memoized on (content, offset) so an
unchanged song is never transposed or laid out twice.
"""

from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Optional, Tuple

from .errors import UnknownVariantError
from .key import display_key, resolve_target_offset
from .layout import (
    BOOK_MODE_THRESHOLD, CHORDS_ONLY_SEPARATOR, RenderRow,
    paginate_book_mode, render_rows,
)
from .models import VARIANTS, Song
from .transpose import transpose_song_content


@dataclass(frozen=True)
class ViewState:
    song_id: Optional[str] = None
    transpose: int = 0
    target_key: str = ''  # What the key box shows; may hold unapplied user input
    book_mode: bool = False
    variant: str = 'content'


@dataclass(frozen=True)
class RenderedView:
    """One column normally, two in book mode for long songs"""
    columns: Tuple[Tuple[RenderRow, ...], ...]

    @property
    def is_two_column(self) -> bool:
        return len(self.columns) == 2


def select_song(state: ViewState, song: Song, transpose: Optional[int] = None) -> ViewState:
    """Show a song, optionally at a stored offset (e.g. from a setlist entry)."""
    offset = transpose if transpose is not None else 0
    return replace(state, song_id=song.id, transpose=offset,
                   target_key=display_key(song.content, offset))


def transpose_step(state: ViewState, song: Song, step: int) -> ViewState:
    offset = state.transpose + step
    return replace(state, transpose=offset, target_key=display_key(song.content, offset))


def set_target_key(state: ViewState, text: str) -> ViewState:
    return replace(state, target_key=text)


def apply_target_key(state: ViewState, song: Song) -> ViewState:
    """Move to the typed target key; unresolvable input keeps the current offset."""
    if not state.target_key:
        return state
    offset = resolve_target_offset(song.content, state.target_key, state.transpose)
    return replace(state, transpose=offset)


def toggle_book_mode(state: ViewState) -> ViewState:
    return replace(state, book_mode=not state.book_mode)


def select_variant(state: ViewState, variant: str) -> ViewState:
    if variant not in VARIANTS:
        raise UnknownVariantError(f"Unknown variant '{variant}'")
    return replace(state, variant=variant)


@lru_cache(maxsize=128)
def render_song(content: str, offset: int,
                separator: str = CHORDS_ONLY_SEPARATOR) -> Tuple[RenderRow, ...]:
    """Transpose and lay out content. Cached; content doubles as its own version."""
    return tuple(render_rows(transpose_song_content(content, offset), separator))


def render_view(state: ViewState, song: Song,
                threshold: int = BOOK_MODE_THRESHOLD,
                separator: str = CHORDS_ONLY_SEPARATOR) -> RenderedView:
    rows = render_song(song.variant(state.variant), state.transpose, separator)
    if not state.book_mode:
        return RenderedView(columns=(rows,))
    columns = paginate_book_mode(rows, threshold)
    return RenderedView(columns=tuple(tuple(column) for column in columns))
