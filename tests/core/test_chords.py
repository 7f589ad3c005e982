"""
Tests for chord annotation parsing and tokenizing
"""

from songsheet.chords import ChordSymbol, leading_root, parse_chord
from songsheet.tokens import (
    ChordToken, Literal, extract_chords, has_annotation, join_tokens,
    split_lines, strip_annotations, tokenize,
)


class TestParseChord:
    """Tests for parse_chord()"""

    def test_simple_chord(self):
        assert parse_chord('G') == ChordSymbol('G')
        assert parse_chord('C#m7b5') == ChordSymbol('C#', 'm7b5')
        assert parse_chord('Bbmaj7') == ChordSymbol('Bb', 'maj7')

    def test_slash_chord(self):
        chord = parse_chord('G/B')
        assert chord == ChordSymbol('G', '', 'B', '')
        assert chord.is_slash

    def test_slash_chord_with_suffixes(self):
        assert parse_chord('Am7/G') == ChordSymbol('A', 'm7', 'G', '')
        assert parse_chord('D/F#m') == ChordSymbol('D', '', 'F#', 'm')

    def test_bad_bass_falls_back_to_simple_form(self):
        """A slash part that is not a note becomes part of the suffix"""
        chord = parse_chord('C/X')
        assert chord == ChordSymbol('C', '/X')
        assert not chord.is_slash

    def test_double_slash_falls_back_to_simple_form(self):
        assert parse_chord('C/G/B') == ChordSymbol('C', '/G/B')

    def test_not_a_chord(self):
        assert parse_chord('N.C.') is None
        assert parse_chord('x2') is None
        assert parse_chord('') is None

    def test_str_reassembles(self):
        for text in ['G', 'Am7/G', 'Bbsus4', 'D/F#m', 'C/X']:
            assert str(parse_chord(text)) == text

    def test_leading_root(self):
        assert leading_root('Em7') == 'E'
        assert leading_root('F#m') == 'F#'
        assert leading_root('N.C.') is None
        assert leading_root('') is None


class TestTokenize:
    """Tests for the annotation tokenizer"""

    def test_literal_and_chord_nodes(self):
        assert tokenize('[C]Hello [G]world') == [
            ChordToken('C'), Literal('Hello '), ChordToken('G'), Literal('world'),
        ]

    def test_empty_text(self):
        assert tokenize('') == []

    def test_no_annotations(self):
        assert tokenize('just words') == [Literal('just words')]

    def test_empty_and_unterminated_brackets_are_literal(self):
        assert tokenize('[]') == [Literal('[]')]
        assert tokenize('la [C') == [Literal('la [C')]

    def test_annotation_ends_at_first_bracket(self):
        assert tokenize('[G]]') == [ChordToken('G'), Literal(']')]

    def test_join_restores_text(self):
        text = '{key: D}\n[D]Some [A7]words [] and [G/B]more'
        assert join_tokens(tokenize(text)) == text

    def test_chord_token_symbol(self):
        assert ChordToken('G/B').symbol == ChordSymbol('G', '', 'B', '')
        assert ChordToken('N.C.').symbol is None

    def test_helpers(self):
        assert extract_chords('[G]a [D7]b') == ['G', 'D7']
        assert has_annotation('a [G] b')
        assert not has_annotation('a [] b')
        assert strip_annotations('[G]a [D7]b') == 'a b'


class TestSplitLines:
    """Tests for split_lines()"""

    def test_newline_only(self):
        assert split_lines('a b\x0cc\nd') == ['a b\x0cc', 'd']

    def test_crlf(self):
        assert split_lines('a\r\nb\r\n') == ['a', 'b']

    def test_single_newline_is_one_empty_line(self):
        assert split_lines('\n') == ['']

    def test_empty(self):
        assert split_lines('') == []
        assert split_lines(None) == []
