"""
Annotation tokenizer

Turns annotated text into a flat sequence of Literal and ChordToken nodes.
An annotation is `[` + one or more non-`]` characters + `]`; annotations
never nest and end at the first `]`.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Union

from .chords import ChordSymbol, parse_chord


ANNOTATION_PATTERN = re.compile(r'\[([^\]]+)\]')


@dataclass(frozen=True)
class Literal:
    """Plain text between annotations"""
    text: str

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


@dataclass(frozen=True)
class ChordToken:
    """A bracketed annotation; `text` is the inner text without brackets"""
    text: str

    @property
    def symbol(self) -> Optional[ChordSymbol]:
        return parse_chord(self.text)

    def __str__(self) -> str:
        return f'[{self.text}]'


Token = Union[Literal, ChordToken]


def tokenize(text: str) -> List[Token]:
    """Split text on annotation boundaries. Empty literals are never emitted."""
    tokens: List[Token] = []
    if not text:
        return tokens

    position = 0
    for match in ANNOTATION_PATTERN.finditer(text):
        if match.start() > position:
            tokens.append(Literal(text[position:match.start()]))
        tokens.append(ChordToken(match.group(1)))
        position = match.end()

    if position < len(text):
        tokens.append(Literal(text[position:]))

    return tokens


def join_tokens(tokens: List[Token]) -> str:
    """Inverse of tokenize()"""
    return ''.join(t.text if isinstance(t, Literal) else str(t) for t in tokens)


def extract_chords(text: str) -> List[str]:
    """Inner text of every annotation, in order of appearance."""
    return ANNOTATION_PATTERN.findall(text or '')


def has_annotation(text: str) -> bool:
    return bool(ANNOTATION_PATTERN.search(text or ''))


def strip_annotations(text: str) -> str:
    """Remove every annotation, keeping only literal text."""
    return ANNOTATION_PATTERN.sub('', text or '')


def split_lines(text: str) -> List[str]:
    """
    Source lines of `text`, split on '\\n' only.

    A trailing '\\r' is dropped from each line and a final newline does not
    start an extra empty line. Other Unicode line breaks (U+2028, form feed)
    stay inside their line.
    """
    if not text:
        return []
    lines = text.split('\n')
    if text.endswith('\n'):
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]
