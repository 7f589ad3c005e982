"""
Tests for the transposition engine
"""

import pytest
from songsheet.chords import parse_chord
from songsheet.pitch import resolve_note
from songsheet.transpose import transpose_chord, transpose_song_content


def pitch_class_of(chord):
    return resolve_note(parse_chord(chord).root)


class TestTransposeChord:
    """Tests for transpose_chord()"""

    def test_full_octave_identity(self):
        assert transpose_chord('C', 12) == 'C'
        assert transpose_chord('Am7', -12) == 'Am7'

    def test_flat_input_becomes_sharp(self):
        assert transpose_chord('Db', 1) == 'D'
        assert transpose_chord('Bb', 0) == 'A#'

    def test_slash_chord_shifts_root_and_bass(self):
        assert transpose_chord('G/B', 2) == 'A/C#'
        assert transpose_chord('Am7/G', -2) == 'Gm7/F'

    def test_suffix_is_preserved(self):
        assert transpose_chord('Cmaj7#11', 5) == 'Fmaj7#11'
        assert transpose_chord('Esus4', 1) == 'Fsus4'

    @pytest.mark.parametrize('chord', ['C', 'Dbm7', 'F#sus4', 'Bb', 'G#dim', 'E/G#'])
    def test_pitch_class_moves_by_amount(self, chord):
        for amount in range(-25, 26):
            result = transpose_chord(chord, amount)
            assert pitch_class_of(result) == (pitch_class_of(chord) + amount) % 12

    def test_round_trip_keeps_pitch_class_not_spelling(self):
        there = transpose_chord('Db', 3)
        back = transpose_chord(there, -3)
        assert pitch_class_of(back) == pitch_class_of('Db')
        assert back == 'C#'

    def test_large_negative_amount(self):
        assert transpose_chord('C', -13) == 'B'

    def test_empty(self):
        assert transpose_chord('', 4) == ''

    def test_not_a_chord_unchanged(self):
        assert transpose_chord('N.C.', 2) == 'N.C.'
        assert transpose_chord('x2', 2) == 'x2'

    def test_unresolved_root_unchanged(self):
        assert transpose_chord('Cb7', 2) == 'Cb7'

    def test_unresolved_root_keeps_bass_moving(self):
        assert transpose_chord('Cb/G', 2) == 'Cb/A'

    def test_unresolved_bass_keeps_root_moving(self):
        assert transpose_chord('G/Fb', 2) == 'A/Fb'


class TestTransposeSongContent:
    """Tests for transpose_song_content()"""

    def test_empty_content(self):
        assert transpose_song_content('', 5) == ''

    def test_zero_offset_is_identity(self):
        assert transpose_song_content('[C]Hi', 0) == '[C]Hi'
        assert transpose_song_content('[Db]Hi', 0) == '[Db]Hi'

    def test_only_annotations_change(self):
        content = '[Bb]Hi [N.C.] there [Eb/Bb]\nC D E plain'
        assert transpose_song_content(content, 1) == '[B]Hi [N.C.] there [E/B]\nC D E plain'

    def test_key_directive_is_left_alone(self):
        """The displayed directive can disagree with the applied offset"""
        assert transpose_song_content('{key: D}\n[D]Verse', 2) == '{key: D}\n[E]Verse'

    def test_octave_offset_still_respells(self):
        assert transpose_song_content('[Db]x', 12) == '[C#]x'

    def test_deterministic(self):
        content = '[G]Amazing [C]grace'
        assert transpose_song_content(content, 3) == transpose_song_content(content, 3)

    def test_unterminated_annotation_runs_to_next_bracket(self):
        """An open '[' swallows text up to the next ']', even across lines"""
        assert transpose_song_content('la [G\n[C]Hello', 2) == 'la [A\n[C]Hello'
