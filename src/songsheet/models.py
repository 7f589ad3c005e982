"""
Song and setlist records

A song carries its annotated text plus optional alternate variants
(notes-only, piano). A setlist entry stores only the transpose offset,
never a transposed copy of the text.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from .errors import SongFormatError, UnknownVariantError
from .key import get_original_key
from .transpose import transpose_chord


VARIANTS = ('content', 'content_notes', 'content_piano')

UNKNOWN_KEY_LABEL = '?'


def _load_mapping(yaml_content: str, kind: str) -> dict:
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise SongFormatError(f"Invalid {kind} YAML: {e}") from e
    if not isinstance(data, dict):
        raise SongFormatError(f"{kind.capitalize()} YAML must be a mapping")
    return data


def _require(data: dict, name: str, kind: str):
    if name not in data or data[name] is None:
        raise SongFormatError(f"{kind.capitalize()} is missing required field '{name}'")
    return data[name]


def _text_field(data: dict, name: str) -> Optional[str]:
    """Optional string field; anything other than text or null is rejected."""
    value = data.get(name)
    if value is not None and not isinstance(value, str):
        raise SongFormatError(f"Song field '{name}' must be text, got {type(value).__name__}")
    return value


@dataclass
class Song:
    """A song in the shared library"""
    id: str
    title: str
    artist: Optional[str] = None
    content: str = ''
    content_notes: Optional[str] = None
    content_piano: Optional[str] = None
    notes: Optional[str] = None  # Free text, never transposed

    def variant(self, name: str = 'content') -> str:
        """Annotated text for a content variant; missing variants fall back to `content`."""
        if name not in VARIANTS:
            raise UnknownVariantError(
                f"Unknown variant '{name}' (expected one of {', '.join(VARIANTS)})"
            )
        return getattr(self, name) or self.content

    @property
    def original_key(self) -> str:
        return get_original_key(self.content)

    def to_yaml(self) -> str:
        """Serialize to YAML"""
        data = {
            'id': self.id,
            'title': self.title,
        }
        if self.artist:
            data['artist'] = self.artist
        data['content'] = self.content
        if self.content_notes:
            data['content_notes'] = self.content_notes
        if self.content_piano:
            data['content_piano'] = self.content_piano
        if self.notes:
            data['notes'] = self.notes

        return yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)

    @classmethod
    def from_dict(cls, data: dict) -> 'Song':
        return cls(
            id=str(_require(data, 'id', 'song')),
            title=str(_require(data, 'title', 'song')),
            artist=data.get('artist'),
            content=_text_field(data, 'content') or '',
            content_notes=_text_field(data, 'content_notes'),
            content_piano=_text_field(data, 'content_piano'),
            notes=data.get('notes'),
        )

    @classmethod
    def from_yaml(cls, yaml_content: str) -> 'Song':
        """Parse from YAML content."""
        return cls.from_dict(_load_mapping(yaml_content, 'song'))


@dataclass
class SetlistEntry:
    """A song reference inside a setlist, with its own transpose offset"""
    id: str
    title: Optional[str] = None
    artist: Optional[str] = None
    transpose: int = 0


@dataclass
class Setlist:
    """An ordered list of songs"""
    name: str
    songs: List[SetlistEntry] = field(default_factory=list)

    def to_yaml(self) -> str:
        """Serialize to YAML"""
        entries = []
        for entry in self.songs:
            e = {'id': entry.id}
            if entry.title:
                e['title'] = entry.title
            if entry.artist:
                e['artist'] = entry.artist
            if entry.transpose:
                e['transpose'] = entry.transpose
            entries.append(e)

        data = {'name': self.name, 'songs': entries}
        return yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)

    @classmethod
    def from_yaml(cls, yaml_content: str) -> 'Setlist':
        """Parse from YAML content."""
        data = _load_mapping(yaml_content, 'setlist')

        songs = []
        for i, e in enumerate(data.get('songs') or [], 1):
            if not isinstance(e, dict):
                raise SongFormatError(f"Setlist entry {i} must be a mapping")
            transpose = e.get('transpose', 0)
            if not isinstance(transpose, int) or isinstance(transpose, bool):
                raise SongFormatError(f"Setlist entry {i}: transpose must be an integer")
            songs.append(SetlistEntry(
                id=str(_require(e, 'id', 'setlist entry')),
                title=e.get('title'),
                artist=e.get('artist'),
                transpose=transpose,
            ))

        return cls(name=str(_require(data, 'name', 'setlist')), songs=songs)


def entry_key_label(entry: SetlistEntry, songs_by_id: Dict[str, Song]) -> Tuple[str, str]:
    """(original key, transposed key) for a setlist entry; '?' when the song is gone."""
    song = songs_by_id.get(entry.id)
    if song is None:
        return UNKNOWN_KEY_LABEL, UNKNOWN_KEY_LABEL
    original = song.original_key
    return original, transpose_chord(original, entry.transpose)


def load_song(path) -> Song:
    """
    Load a song from disk.

    `.yaml`/`.yml` files hold a full record; anything else is treated as
    bare annotated text, with the file stem as id and title.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding='utf-8')
    except OSError as e:
        raise SongFormatError(f"Cannot read {path}: {e}") from e

    if path.suffix.lower() in ('.yaml', '.yml'):
        return Song.from_yaml(text)

    return Song(id=path.stem, title=path.stem.replace('-', ' ').replace('_', ' '), content=text)


def load_library(directory) -> Dict[str, Song]:
    """Load every song file in a directory, keyed by song id."""
    directory = Path(directory)
    if not directory.is_dir():
        raise SongFormatError(f"Not a directory: {directory}")

    songs = {}
    for file_path in sorted(directory.iterdir()):
        if file_path.suffix.lower() in ('.yaml', '.yml', '.pro', '.txt'):
            song = load_song(file_path)
            songs[song.id] = song
    return songs


def load_setlist(path) -> Setlist:
    path = Path(path)
    try:
        return Setlist.from_yaml(path.read_text(encoding='utf-8'))
    except OSError as e:
        raise SongFormatError(f"Cannot read {path}: {e}") from e
