import pytest

from ..chords import identify_chord, chord_name, chord_tones, parse_chord_name, match_quality
from ..qualities import ChordQuality
from ..notes import PlayedNoteSet
from .testing_tools import compare

def test_naming():
    compare(chord_name('A', 'm7'), 'Am7')
    compare(chord_name('C', 'major', bass='E'), 'C/E')
    compare(chord_name('C', 'major', bass='C'), 'C')
    compare(chord_name(10, ChordQuality.DOMINANT7, prefer_sharps=False), 'Bb7')

    compare(chord_tones('C', 'Major'), ['C', 'E', 'G'])
    compare(chord_tones('Bb', 'dom7', prefer_sharps=False), ['Bb', 'D', 'F', 'Ab'])

    compare(parse_chord_name('C#m7/E'), ('C#', ChordQuality.MINOR7, 'E'))
    compare(parse_chord_name('F'), ('F', ChordQuality.MAJOR, None))
    compare(parse_chord_name('Bbmaj7'), ('Bb', ChordQuality.MAJOR7, None))
    compare(parse_chord_name('EM7'), ('E', ChordQuality.MAJOR7, None))
    compare(parse_chord_name('Em7'), ('E', ChordQuality.MINOR7, None))

    with pytest.raises(ValueError):
        parse_chord_name('Cxyz')
    with pytest.raises(ValueError):
        parse_chord_name('C/Q')
    with pytest.raises(ValueError):
        parse_chord_name('Hm')

def test_matching_qualities():
    compare(match_quality({0, 4, 7}, ChordQuality.MAJOR), 'exact')
    compare(match_quality({0, 4, 11}, ChordQuality.MAJOR7), 'omitted')
    # the fifth can only be left out if three tones remain:
    compare(match_quality({0, 4}, ChordQuality.MAJOR), None)
    # and only the fifth:
    compare(match_quality({0, 7, 11}, ChordQuality.MAJOR7), None)

def test_identification():
    c_major = identify_chord(['C', 'E', 'G'])
    compare(c_major.name, 'C')
    compare(c_major.is_slash_chord, False)
    compare(c_major.root, 'C')
    compare(c_major.quality, ChordQuality.MAJOR)

    c_over_e = identify_chord(['C', 'E', 'G'], bass='E')
    compare(c_over_e.name, 'C/E')
    compare(c_over_e.is_slash_chord, True)
    compare(c_over_e.bass_note, 'E')

    # read straight off the frets, bass and all:
    compare(identify_chord(PlayedNoteSet.from_frets('032010')).name, 'C/E')
    compare(identify_chord(PlayedNoteSet.from_frets('x02210')).name, 'Am')
    compare(identify_chord(PlayedNoteSet.from_frets('320001')).name, 'G7')

    # the same notes can be read two ways, and the simpler quality wins:
    a_minor7 = identify_chord(['A', 'C', 'E', 'G'])
    compare(a_minor7.name, 'Am7')
    compare(a_minor7.alternatives, ('C6',))
    # unless the other root is in the bass:
    compare(identify_chord(['A', 'C', 'E', 'G'], bass='C').name, 'C6')

    # a chord with its fifth left out:
    compare(identify_chord(['C', 'E', 'B']).name, 'Cmaj7')
    compare(identify_chord(['E', 'B']).name, 'E5')

    # nothing in the catalog matches:
    cluster = identify_chord(['C', 'C#', 'D'])
    compare(cluster.name, 'C-C#-D')
    compare(cluster.alternatives, ())
    compare(cluster.is_slash_chord, False)
    compare(cluster.root, None)

    # too few notes to say anything:
    compare(identify_chord(['C']), None)
    compare(identify_chord(['C', 'C']), None)
    compare(identify_chord(PlayedNoteSet.from_frets('xxxxxx')), None)

def test_idempotence():
    compare(identify_chord(['G', 'B', 'D', 'F']), identify_chord(['G', 'B', 'D', 'F']))

def unit_test():
    test_naming()
    test_matching_qualities()
    test_identification()
    test_idempotence()
