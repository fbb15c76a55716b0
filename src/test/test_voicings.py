import pytest

from ..voicings import (Voicing, DatabaseVoicings, SolverVoicings, get_voicings, get_voicing_source,
                        is_in_database, find_matching_voicing, make_voicing, target_offsets,
                        triad_intervals, shell_intervals)
from ..config.def_voicings import chords_db, to_db_position, movable_frets
from ..qualities import ChordQuality, VoicingFilter
from ..tuning import Tuning, get_tuning
from ..chords import identify_chord
from ..notes import PlayedNoteSet
from .testing_tools import compare

def sounding(voicing, tuning=None):
    return set(PlayedNoteSet.from_frets(voicing.frets, tuning).pitch_classes)

def test_voicing_objects():
    c_major = make_voicing([None, 3, 2, 0, 1, 0], 'C')
    compare(c_major.frets, (None, 3, 2, 0, 1, 0))
    compare(c_major.lowest_fret, 0)
    compare(c_major.highest_fret, 3)
    compare(c_major.note_names, ('C3', 'E3', 'G3', 'C4', 'E4'))
    compare(c_major.bass_note, 'C')
    compare(c_major.is_inversion, False)
    compare(c_major.span, 2)
    compare(c_major.num_strings, 5)
    compare(c_major.fret_string, 'x32010')

    compare(make_voicing([0, 3, 2, 0, 1, 0], 'C').is_inversion, True)
    compare(make_voicing([0, 3, 2, 0, 1, 0], 'C').bass_note, 'E')

def test_targets():
    compare(triad_intervals('maj7'), ['R', '3', '5'])
    compare(triad_intervals('5'), ['R', '5'])
    compare(shell_intervals('m7'), ['R', 'b3', 'b7'])
    compare(shell_intervals('9'), ['R', '3', 'b7'])
    compare(shell_intervals('major'), None)

    # triads need every tone, larger chords can drop their fifth:
    compare(target_offsets('major', 'all'), ({0, 4, 7}, {0, 4, 7}))
    compare(target_offsets('minor', 'all'), ({0, 3, 7}, {0, 3, 7}))
    compare(target_offsets('7', 'all'), ({0, 4, 7, 10}, {0, 4, 10}))
    compare(target_offsets('major', 'full'), ({0, 4, 7}, {0, 4, 7}))
    compare(target_offsets('7', 'triads'), ({0, 4, 7}, {0, 4, 7}))
    compare(target_offsets('maj7', 'shells'), ({0, 4, 11}, {0, 4, 11}))
    compare(target_offsets('sus4', 'shells'), None)

def test_voicing_table():
    compare(to_db_position([8, 10, 10, 9, 8, 8]), {'frets': [1, 3, 3, 2, 1, 1], 'baseFret': 8, 'barres': [1]})
    compare(to_db_position([None, 3, 2, 0, 1, 0]), {'frets': [-1, 3, 2, 0, 1, 0], 'baseFret': 1, 'barres': []})
    compare(movable_frets('E', 'major', 0), [8, 10, 10, 9, 8, 8])
    compare(movable_frets('E', 'm7b5', 4), [12, None, 12, 12, 11, None])
    compare(len(chords_db['chords']), 12)
    compare('Csharp' in chords_db['chords'], True)

    compare(DatabaseVoicings.convert_position({'frets': [1, 3, 3, 2, 1, 1], 'baseFret': 5, 'barres': [1]}), [5, 7, 7, 6, 5, 5])
    compare(DatabaseVoicings.convert_position({'frets': [-1, 3, 2, 0, 1, 0], 'baseFret': 1, 'barres': []}), [None, 3, 2, 0, 1, 0])

    compare(is_in_database('C', 'major'), True)
    compare(is_in_database('C#', 'dim7'), True)
    compare(is_in_database('C', 'major', table={'chords': {}}), False)

def test_database_voicings():
    c_major = get_voicings('C', 'major')
    compare((None, 3, 2, 0, 1, 0) in [v.frets for v in c_major], True)
    compare([v.lowest_fret for v in c_major], sorted([v.lowest_fret for v in c_major]))

    # adapted to another tuning, each fretted string keeps its pitch:
    a_major = DatabaseVoicings().voicings('A', 'major', 'C Standard')
    compare((None, 4, 6, 6, 6, 4) in [v.frets for v in a_major], True)
    d_major = get_voicings('D', 'major', 'Drop D')
    compare((None, None, 0, 2, 3, 2) in [v.frets for v in d_major], True)

    # strings that can't reach the same pitch are muted, never clamped:
    raised = get_tuning(['F2', 'A2', 'D3', 'G3', 'B3', 'E4'])
    compare(DatabaseVoicings.adapt_to_tuning([0, 2, 2, 1, 0, 0], raised), [None, 2, 2, 1, 0, 0])

    # undetermined strings are muted too:
    unknown_low = Tuning(['??', 'A2', 'D3', 'G3', 'B3', 'E4'])
    e_major = get_voicings('E', 'major', unknown_low)
    compare(len(e_major) > 0, True)
    compare(all([v.frets[0] is None for v in e_major]), True)

    # a custom table in the same schema can stand in for the bundled one:
    table = {'chords': {'C': [{'key': 'C', 'suffix': 'major',
                               'positions': [{'frets': [-1, 3, 2, 0, 1, 0], 'baseFret': 1, 'barres': []}]}]}}
    compare([v.fret_string for v in DatabaseVoicings(table).voicings('C', 'major')], ['x32010'])
    compare(DatabaseVoicings(table).voicings('C', 'minor'), [])

def test_solver_voicings():
    solver = SolverVoicings()
    compare(solver.is_playable_shape((None, 3, 2, 0, 1, 0)), True)
    compare(solver.is_playable_shape((3, None, 2, None, 1, 0)), True)
    compare(solver.is_playable_shape((None, 3, None, None, 1, 0)), False)
    compare(solver.is_playable_shape((None,)*6), False)

    compare(solver.score(make_voicing([None, 3, 2, 0, 1, 0], 'C')), 176)

    voicings = solver.voicings('C', 'major')
    compare(len(voicings) > 0, True)
    compare(len(voicings) <= 12, True)
    compare((None, 3, 2, 0, 1, 0) in [v.frets for v in voicings], True)
    compare([(v.lowest_fret, v.span) for v in voicings], sorted([(v.lowest_fret, v.span) for v in voicings]))
    for v in voicings:
        compare(v.span <= 4, True)
        compare(v.num_strings >= 3, True)
        compare(solver.is_playable_shape(v.frets), True)
        compare(sounding(v), {0, 4, 7})

    compare(len(SolverVoicings(limit=3).voicings('C', 'major')), 3)

def test_filters():
    for v in get_voicings('G', '7', voicing_filter='triads'):
        compare(sounding(v), {7, 11, 2})

    # no bundled maj7 shape is a pure shell, so these come from the solver:
    shells = get_voicings('C', 'maj7', voicing_filter='shells')
    compare(len(shells) > 0, True)
    for v in shells:
        compare(sounding(v), {0, 4, 11})

    for v in get_voicings('A', 'm7', voicing_filter='full'):
        compare(sounding(v), {9, 0, 4, 7})

    # major triads have no shell:
    compare(get_voicings('C', 'major', voicing_filter='shells'), [])
    compare(len(get_voicings('C', 'major', limit=2)) <= 2, True)

    compare(isinstance(get_voicing_source('solver'), SolverVoicings), True)
    with pytest.raises(ValueError):
        get_voicing_source('guesswork')

def test_reidentification():
    # every generated voicing sounds the chord it was generated for:
    for root, quality in [('C', 'major'), ('A', 'minor'), ('G', '7'), ('D', 'maj7'), ('E', 'm7')]:
        for v in get_voicings(root, quality):
            chord = identify_chord(PlayedNoteSet.from_frets(v.frets))
            compare((chord.root, chord.quality), (root, ChordQuality.cast(quality)))
    for root, quality in [('C', 'major'), ('A', 'minor')]:
        for v in get_voicings(root, quality, voicing_filter='triads'):
            chord = identify_chord(PlayedNoteSet.from_frets(v.frets))
            compare((chord.root, chord.quality), (root, ChordQuality.cast(quality)))

def test_solver_reidentification():
    # solved shapes sound every tone of a triad, and never just its root and third:
    solver = SolverVoicings()
    for root, quality in [('C', 'major'), ('G', 'major'), ('A', 'minor'), ('E', 'minor'),
                          ('B', 'dim'), ('G', '7')]:
        voicings = solver.voicings(root, quality)
        compare(len(voicings) > 0, True)
        for v in voicings:
            compare(len(sounding(v)) >= 3, True)
            chord = identify_chord(PlayedNoteSet.from_frets(v.frets))
            compare((chord.root, chord.quality), (root, ChordQuality.cast(quality)))
    compare('x0x21x' in [v.fret_string for v in solver.voicings('A', 'minor')], False)
    compare('xxx003' in [v.fret_string for v in solver.voicings('G', 'major')], False)

def test_retuned_reidentification():
    # the same holds in tunings whose shapes are adapted or solved for:
    for tuning in ['Nashville', 'Open D', 'Drop D']:
        for root, quality in [('C', 'major'), ('F', 'major'), ('D', 'major'),
                              ('B', 'minor'), ('A', 'minor'), ('G', '7')]:
            for v in get_voicings(root, quality, tuning):
                compare(len(sounding(v, tuning)) >= 3, True)
                chord = identify_chord(PlayedNoteSet.from_frets(v.frets, tuning))
                compare((chord.root, chord.quality), (root, ChordQuality.cast(quality)))
    compare('xxxx10' in [v.fret_string for v in get_voicings('C', 'major', 'Nashville')], False)
    compare((None, None, 0, 3, 5, 4) in [v.frets for v in get_voicings('D', 'major', 'Open D')], True)

def test_matching_voicing():
    c_major = get_voicings('C', 'major')
    compare(find_matching_voicing('x32010', c_major).fret_string, 'x32010')
    compare(find_matching_voicing('xxxxxx', c_major), None)

def unit_test():
    test_voicing_objects()
    test_targets()
    test_voicing_table()
    test_database_voicings()
    test_solver_voicings()
    test_filters()
    test_reidentification()
    test_solver_reidentification()
    test_retuned_reidentification()
    test_matching_voicing()
