"""
Key detection and target-key resolution

The original key comes from an explicit `{key: X}` / `{k: X}` directive,
otherwise from the root of the first annotation, otherwise it is C.
"""

import logging
import re

from .chords import leading_root
from .pitch import UNKNOWN, resolve_note
from .tokens import extract_chords
from .transpose import transpose_chord

logger = logging.getLogger(__name__)


DEFAULT_KEY = 'C'

KEY_DIRECTIVE_PATTERN = re.compile(r'\{\s*(?:key|k)\s*:([^}]*)\}', re.IGNORECASE)


def get_original_key(content: str) -> str:
    """Nominal key of the untransposed song text."""
    if not content:
        return DEFAULT_KEY

    # Directive value is returned verbatim, even if it is not a note name
    for match in KEY_DIRECTIVE_PATTERN.finditer(content):
        value = match.group(1).strip()
        if value:
            return value

    chords = extract_chords(content)
    if chords:
        root = leading_root(chords[0])
        if root:
            return root

    return DEFAULT_KEY


def resolve_target_offset(content: str, target_key: str, current_offset: int) -> int:
    """
    Offset that moves the song from its original key to `target_key`.

    If either key fails to resolve, `current_offset` is returned untouched.
    """
    original_index = resolve_note(get_original_key(content))
    target_index = resolve_note((target_key or '').strip())

    if original_index == UNKNOWN or target_index == UNKNOWN:
        logger.debug("Cannot resolve target key %r, keeping offset %d", target_key, current_offset)
        return current_offset

    return target_index - original_index


def display_key(content: str, offset: int) -> str:
    """Key label to show for the song at the given offset."""
    return transpose_chord(get_original_key(content), offset)
