import pytest

from ..tuning import (Tuning, get_tuning, tuning_name, tunings_by_category, ascending_octave_notes,
                      pitch_at, pitch_class_at, note_at, transpose_fret, adapt_frets, standard_tuning)
from ..notes import PlayedNoteSet
from .testing_tools import compare

def test_presets():
    compare(get_tuning().name, 'Standard')
    compare(get_tuning().open_values, (40, 45, 50, 55, 59, 64))
    compare(get_tuning('standard'), standard_tuning)
    compare(get_tuning('drop-d').open_values[0], 38)
    compare(get_tuning('dropD').name, 'Drop D')
    compare(get_tuning('DADGAD').name, 'DADGAD')
    compare(get_tuning('celtic').name, 'DADGAD')

    # a compact string is given octaves ascending from E2, and then named by the preset it matches:
    compare(get_tuning('DGDGBD').note_names, ['D2', 'G2', 'D3', 'G3', 'B3', 'D4'])
    compare(get_tuning('DGDGBD').name, 'Open G')
    compare(get_tuning(['E2', 'A2', 'D3', 'G3', 'B3', 'F4']).name, 'Custom')
    # presets sharing the same pitches are named after the first:
    compare(tuning_name(['C2', 'G2', 'C3', 'G3', 'C4', 'E4']), 'Open C')
    compare(tuning_name(['E3', 'A3', 'D4', 'G4', 'B3', 'E4']), 'Nashville')

    compare([p.name for p in tunings_by_category('Open')], ['Open D', 'Open E', 'Open G', 'Open A', 'Open C'])
    compare([n.name for n in ascending_octave_notes(['E', 'A', 'D', 'G', 'B', 'E'])], ['E2', 'A2', 'D3', 'G3', 'B3', 'E4'])
    compare(get_tuning('Drop D').distance_from('standard'), [-2, 0, 0, 0, 0, 0])
    compare(get_tuning('Half-step Down').chromas, 'EbAbDbGbBbEb')

    with pytest.raises(ValueError):
        get_tuning('blah')
    with pytest.raises(ValueError):
        Tuning(['E2', 'A2', 'D3', 'G3', 'B3'])
    with pytest.raises(TypeError):
        get_tuning(6)

def test_pitches():
    compare(pitch_at(0, 3), 43)
    compare(pitch_at(0, None), None)
    compare(pitch_class_at(1, 3), 0)
    compare(note_at(0, 0).name, 'E2')
    compare(note_at(5, 12).name, 'E5')
    compare(standard_tuning.frets_of(0, 9, max_fret=24), [5, 17])
    compare(standard_tuning.frets_of(0, 9, max_fret=24, min_fret=6), [17])

def test_undetermined_strings():
    # an unparseable entry leaves its string undetermined rather than failing:
    tuning = Tuning(['E2', 'A2', 'D3', 'G3', 'B3', 'Q4'])
    compare(tuning.is_determined(5), False)
    compare(tuning.is_determined(0), True)
    compare(tuning.pitch_at(5, 3), None)
    compare(tuning.note_names[5], None)
    compare(tuning.name, 'Custom')
    # and is treated as muted:
    compare(PlayedNoteSet.from_frets('000000', tuning).pitch_classes, (4, 9, 2, 7, 11))

def test_transposition():
    compare(transpose_fret(2, 45, 41), 6)
    compare(transpose_fret(0, 40, 42), None)   # would need fret -2
    compare(transpose_fret(23, 40, 38), None)  # would need fret 25
    compare(transpose_fret(None, 40, 38), None)
    compare(transpose_fret(3, 40, None), None)

    compare(adapt_frets([None, 0, 2, 2, 2, 0], 'standard', 'C Standard'), [None, 4, 6, 6, 6, 4])
    compare(adapt_frets('x32010', 'standard', 'Drop D'), [None, 3, 2, 0, 1, 0])
    compare(adapt_frets('320003', 'standard', 'Drop D'), [5, 2, 0, 0, 0, 3])
    # open strings tuned up can't be reached any more:
    compare(adapt_frets('022100', 'standard', ['F2', 'A2', 'D3', 'G3', 'B3', 'E4']), [None, 2, 2, 1, 0, 0])

    # adapted frets keep sounding the same notes:
    before = PlayedNoteSet.from_frets('x02220', 'standard')
    after = PlayedNoteSet.from_frets(adapt_frets('x02220', 'standard', 'DADGAD'), 'DADGAD')
    compare(after, before)

def unit_test():
    test_presets()
    test_pitches()
    test_undetermined_strings()
    test_transposition()
